"""Money coercion helpers.

Amounts are carried as ``Decimal`` end to end. Floats are routed through
``str()`` so that ``0.1`` becomes ``Decimal("0.1")`` rather than its binary
approximation.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

ZERO = Decimal("0")
ONE = Decimal("1")
CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Convert ``value`` to ``Decimal``.

    Raises:
        ValueError: if the value is not a finite number.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a monetary amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, float):
        amount = Decimal(str(value))
    else:
        try:
            amount = Decimal(value)
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise ValueError(f"Not a monetary amount: {value!r}") from exc

    if not amount.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")
    return amount


def quantize(amount: Decimal) -> Decimal:
    """Round to whole cents for display. The pricing core never rounds."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
