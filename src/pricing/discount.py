"""Discount strategies.

Every strategy implements ``apply_discount(price) -> Decimal`` and validates
its parameters at construction, so a built strategy is always usable. New
variants only need to subclass ``DiscountStrategy``; the calculator and the
cart never inspect the concrete type.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from shared.exceptions import InvalidConfiguration
from shared.money import ONE, ZERO, to_decimal


def _coerce(field: str, value) -> Decimal:
    try:
        return to_decimal(value)
    except ValueError as exc:
        raise InvalidConfiguration({field: [str(exc)]}) from exc


class DiscountStrategy(ABC):
    """Abstract discount policy."""

    __slots__ = ()

    @abstractmethod
    def apply_discount(self, price) -> Decimal:
        """Return the discounted price. Must not mutate anything."""
        ...


class NoDiscount(DiscountStrategy):
    """Leaves the price untouched."""

    __slots__ = ()

    def apply_discount(self, price) -> Decimal:
        return to_decimal(price)

    def __eq__(self, other) -> bool:
        return isinstance(other, NoDiscount)

    def __hash__(self) -> int:
        return hash(NoDiscount)

    def __repr__(self) -> str:
        return "NoDiscount()"


class PercentageDiscount(DiscountStrategy):
    """Takes a fraction off the price.

    Args:
        percentage: fraction in ``[0, 1]`` (``0.1`` for 10% off).
    """

    __slots__ = ("_percentage",)

    def __init__(self, percentage) -> None:
        percentage = _coerce("percentage", percentage)
        if percentage < ZERO or percentage > ONE:
            raise InvalidConfiguration(
                {"percentage": [f"Discount percentage must be between 0 and 1, got {percentage}"]}
            )
        self._percentage = percentage

    @property
    def percentage(self) -> Decimal:
        return self._percentage

    def apply_discount(self, price) -> Decimal:
        return to_decimal(price) * (ONE - self._percentage)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PercentageDiscount):
            return NotImplemented
        return self._percentage == other._percentage

    def __hash__(self) -> int:
        return hash((PercentageDiscount, self._percentage))

    def __repr__(self) -> str:
        return f"PercentageDiscount(percentage={self._percentage})"


class FixedAmountDiscount(DiscountStrategy):
    """Takes a flat amount off each price, never going below zero."""

    __slots__ = ("_amount",)

    def __init__(self, amount) -> None:
        amount = _coerce("amount", amount)
        if amount < ZERO:
            raise InvalidConfiguration({"amount": [f"Discount amount must not be negative, got {amount}"]})
        self._amount = amount

    @property
    def amount(self) -> Decimal:
        return self._amount

    def apply_discount(self, price) -> Decimal:
        return max(to_decimal(price) - self._amount, ZERO)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FixedAmountDiscount):
            return NotImplemented
        return self._amount == other._amount

    def __hash__(self) -> int:
        return hash((FixedAmountDiscount, self._amount))

    def __repr__(self) -> str:
        return f"FixedAmountDiscount(amount={self._amount})"
