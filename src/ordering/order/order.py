"""Order — immutable record of a completed checkout.

An Order is created exactly once per successful pipeline run and never
changes afterwards. Items are copied into a tuple at construction, so later
changes to the cart (or to the list handed in) do not leak into the Order.

Empty orders are not allowed: an Order always has at least one item.
"""

from collections.abc import Iterable
from datetime import UTC, datetime
from decimal import Decimal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from shared.exceptions import InvalidState
from shared.money import ZERO, to_decimal

from ordering.cart.item import Item


def _new_order_id() -> str:
    return uuid4().hex


def _invariant_errors(items: tuple, total_price: Decimal | None) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    if not items:
        errors["items"] = ["Cannot create an order without items"]
    if total_price is not None and total_price < ZERO:
        errors["total_price"] = [f"Order total cannot be negative, got {total_price}"]
    return errors


class Order(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_order_id)
    items: tuple[Item, ...]
    total_price: Decimal = Field(allow_inf_nan=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def _check_invariants(self) -> "Order":
        errors = _invariant_errors(self.items, self.total_price)
        if errors:
            raise InvalidState(errors)
        return self

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, items: Iterable[Item], total_price) -> "Order":
        """Build an Order from an items snapshot and its computed total.

        Raises:
            InvalidState: if the total is negative or not a number, or if
                there are no items.
        """
        snapshot = tuple(items)

        try:
            total = to_decimal(total_price)
        except ValueError as exc:
            errors = _invariant_errors(snapshot, None)
            errors["total_price"] = [str(exc)]
            raise InvalidState(errors) from exc

        return cls(items=snapshot, total_price=total)

    @property
    def item_count(self) -> int:
        return len(self.items)
