"""Shopping Cart — collects priced items and converts them into an Order.

State Machine:
    EMPTY → POPULATED   (first item added)
    POPULATED → ORDERED (make_order succeeds in building the Order)

ORDERED is terminal: no more items, no second order. A notification failure
does not undo the transition. The Order stays recorded, ``is_notified`` stays
False and the NotificationDeliveryError reaches the caller.

A Cart belongs to a single session. Concurrent ``make_order`` calls on the
same instance are not supported; callers that share a cart across threads
must serialize access themselves.
"""

from decimal import Decimal
from enum import Enum
from uuid import uuid4

import structlog
from notifications.service import NotificationService
from pricing.calculator import PriceCalculator
from pricing.discount import DiscountStrategy
from shared.exceptions import InvalidConfiguration, InvalidState, NotificationDeliveryError

from ordering.cart.events import CartItemAdded, OrderNotificationFailed, OrderPlaced
from ordering.cart.item import Item
from ordering.order.order import Order

logger = structlog.get_logger(__name__)


class CartStatus(Enum):
    EMPTY = "Empty"
    POPULATED = "Populated"
    ORDERED = "Ordered"


class Cart:
    """Orchestrates the checkout pipeline: price → build Order → notify.

    Args:
        price_calculator: shared pricing service.
        notification_service: capability used to announce the new Order.
    """

    def __init__(self, price_calculator: PriceCalculator, notification_service: NotificationService) -> None:
        self.id = uuid4().hex
        self._price_calculator = price_calculator
        self._notification_service = notification_service
        self._items: list[Item] = []
        self._order: Order | None = None
        self._notified = False
        self._events: list = []

    # -------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------
    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    @property
    def order(self) -> Order | None:
        return self._order

    @property
    def status(self) -> CartStatus:
        if self._order is not None:
            return CartStatus.ORDERED
        if self._items:
            return CartStatus.POPULATED
        return CartStatus.EMPTY

    @property
    def is_notified(self) -> bool:
        return self._notified

    @property
    def events(self) -> tuple:
        return tuple(self._events)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, item: Item | Decimal | int | float | str) -> Item:
        """Add an item (or a bare price) to the cart."""
        if self._order is not None:
            raise InvalidState({"cart": ["Items cannot be added to an ordered cart"]})

        if not isinstance(item, Item):
            item = Item(price=item)

        self._items.append(item)
        self._events.append(CartItemAdded(cart_id=self.id, price=item.price, title=item.title))
        return item

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def make_order(self, discount_strategy: DiscountStrategy) -> Order:
        """Price the cart, record the resulting Order and notify the managers.

        Raises:
            InvalidState: the cart already has an Order, or is empty.
            InvalidConfiguration: ``discount_strategy`` is not a DiscountStrategy.
            NotificationDeliveryError: the Order was recorded but the
                notification could not be delivered.
        """
        if self._order is not None:
            logger.warning("Rejected second order for cart", cart_id=self.id, order_id=self._order.id)
            raise InvalidState({"cart": [f"Cart already has order {self._order.id}"]})

        if not isinstance(discount_strategy, DiscountStrategy):
            raise InvalidConfiguration(
                {"discount_strategy": [f"Expected a DiscountStrategy, got {type(discount_strategy).__name__}"]}
            )

        snapshot = tuple(self._items)
        total_price = self._price_calculator.calculate_total(snapshot, discount_strategy)
        order = Order.create(snapshot, total_price)

        self._order = order
        self._events.append(
            OrderPlaced(
                cart_id=self.id,
                order_id=order.id,
                total_price=total_price,
                item_count=order.item_count,
            )
        )
        logger.info(
            "Order placed",
            cart_id=self.id,
            order_id=order.id,
            total_price=str(total_price),
            item_count=order.item_count,
        )

        try:
            self._notification_service.send_order_notification(order, total_price)
        except NotificationDeliveryError as exc:
            self._events.append(OrderNotificationFailed(cart_id=self.id, order_id=order.id, reason=exc.reason))
            logger.error("Order created but not notified", cart_id=self.id, order_id=order.id, error=exc.reason)
            raise

        self._notified = True
        return order
