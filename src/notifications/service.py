"""Notification service — the only capability the cart uses to announce orders.

``NotificationService`` is the boundary the ordering context depends on.
``ManagerNotificationService`` renders an order summary and hands it to a
mailer. Transport failures are surfaced as ``NotificationDeliveryError``;
nothing is retried or swallowed here.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

import structlog
from shared.exceptions import MailerError, NotificationDeliveryError

from notifications.channel.mailer_port import MailerPort
from notifications.templates.order_created import OrderCreatedTemplate

logger = structlog.get_logger(__name__)


class NotificationService(ABC):
    """Abstract order notification capability."""

    @abstractmethod
    def send_order_notification(self, order, total_price: Decimal) -> None:
        """Announce ``order`` with its ``total_price``.

        Raises:
            NotificationDeliveryError: if the message could not be delivered.
        """
        ...


class ManagerNotificationService(NotificationService):
    """Sends an order summary to the store managers through a mailer."""

    def __init__(self, mailer: MailerPort, store_name: str = "ShopCart") -> None:
        self.mailer = mailer
        self.store_name = store_name

    def render(self, order, total_price: Decimal) -> str:
        return OrderCreatedTemplate.render(
            {
                "order_id": order.id,
                "store_name": self.store_name,
                "total_price": total_price,
                "lines": [{"title": item.title, "price": item.price} for item in order.items],
            }
        )

    def send_order_notification(self, order, total_price: Decimal) -> None:
        message = self.render(order, total_price)

        try:
            self.mailer.send_to_managers(message)
        except MailerError as exc:
            logger.error(
                "Order notification failed",
                order_id=order.id,
                error=str(exc),
            )
            raise NotificationDeliveryError(order.id, str(exc)) from exc

        logger.info("Order notification sent", order_id=order.id)


def default_notification_service() -> ManagerNotificationService:
    """Build the manager notification service from the configured mailer."""
    from notifications.channel import get_mailer
    from notifications.config import get_mailer_settings

    return ManagerNotificationService(get_mailer(), store_name=get_mailer_settings().store_name)
