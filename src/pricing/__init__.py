"""Pricing context: VAT policy, discount strategies and the price calculator."""

from pricing.calculator import PriceCalculator
from pricing.discount import (
    DiscountStrategy,
    FixedAmountDiscount,
    NoDiscount,
    PercentageDiscount,
)
from pricing.vat import VatManager

__all__ = [
    "DiscountStrategy",
    "FixedAmountDiscount",
    "NoDiscount",
    "PercentageDiscount",
    "PriceCalculator",
    "VatManager",
]
