"""Price calculator — composes the VAT policy with a discount strategy.

Pricing order is fixed: the discount is taken off the net price first, VAT is
then added to the discounted amount. Totals are exact ``Decimal`` sums; any
rounding to cents is left to presentation.
"""

from collections.abc import Iterable
from decimal import Decimal

from shared.exceptions import InvalidConfiguration
from shared.money import ZERO

from pricing.discount import DiscountStrategy
from pricing.vat import VatManager


class PriceCalculator:
    """Stateless and reentrant; one instance can serve any number of carts."""

    __slots__ = ("_vat_manager",)

    def __init__(self, vat_manager: VatManager) -> None:
        if not isinstance(vat_manager, VatManager):
            raise InvalidConfiguration({"vat_manager": ["A VatManager instance is required"]})
        self._vat_manager = vat_manager

    @property
    def vat_manager(self) -> VatManager:
        return self._vat_manager

    def calculate_price_for_item(self, price, strategy: DiscountStrategy) -> Decimal:
        """Price of a single item: discount first, then VAT."""
        _ensure_strategy(strategy)
        return self._vat_manager.apply_vat(strategy.apply_discount(price))

    def calculate_total(self, items: Iterable, strategy: DiscountStrategy) -> Decimal:
        """Sum of ``calculate_price_for_item`` over ``items``.

        Items only need a ``get_price()`` method. An empty collection totals zero.
        """
        _ensure_strategy(strategy)
        return sum((self.calculate_price_for_item(item.get_price(), strategy) for item in items), ZERO)


def _ensure_strategy(strategy) -> None:
    if not isinstance(strategy, DiscountStrategy):
        raise InvalidConfiguration(
            {"discount_strategy": [f"Expected a DiscountStrategy, got {type(strategy).__name__}"]}
        )
