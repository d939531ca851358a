"""Domain events raised by the Cart.

Events are appended to ``Cart.events`` in the order they happen and describe
facts only; nothing in the pipeline reacts to them.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class CartItemAdded:
    """An item was added to the cart."""

    cart_id: str
    price: Decimal
    title: str | None = None
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class OrderPlaced:
    """The cart was priced and converted to an Order."""

    cart_id: str
    order_id: str
    total_price: Decimal
    item_count: int
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class OrderNotificationFailed:
    """The Order exists but the managers could not be notified."""

    cart_id: str
    order_id: str
    reason: str
    occurred_at: datetime = field(default_factory=_now)
