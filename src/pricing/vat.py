"""VAT policy — applies a fixed tax rate to a price."""

from decimal import Decimal

from shared.exceptions import InvalidConfiguration
from shared.money import ONE, ZERO, to_decimal


class VatManager:
    """Stateless tax policy. The rate is fixed at construction.

    Args:
        rate: fractional tax multiplier in ``[0, 1]`` (``0.18`` for 18%).

    Raises:
        InvalidConfiguration: if the rate is not a number in ``[0, 1]``.
    """

    __slots__ = ("_rate",)

    def __init__(self, rate) -> None:
        try:
            rate = to_decimal(rate)
        except ValueError as exc:
            raise InvalidConfiguration({"rate": [str(exc)]}) from exc

        if rate < ZERO or rate > ONE:
            raise InvalidConfiguration({"rate": [f"VAT rate must be between 0 and 1, got {rate}"]})

        self._rate = rate

    @property
    def rate(self) -> Decimal:
        return self._rate

    def apply_vat(self, price) -> Decimal:
        """Return ``price * (1 + rate)``."""
        return to_decimal(price) * (ONE + self._rate)

    def __eq__(self, other) -> bool:
        if not isinstance(other, VatManager):
            return NotImplemented
        return self._rate == other._rate

    def __hash__(self) -> int:
        return hash((VatManager, self._rate))

    def __repr__(self) -> str:
        return f"VatManager(rate={self._rate})"
