"""Exception taxonomy shared by the pricing, ordering and notifications contexts.

Rule violations carry a ``messages`` dict (field name -> list of messages) so
callers can report every failing field at once. Delivery failures are kept
outside the ``ValidationError`` family: an order whose notification failed is
still a valid order.
"""


class ShopCartError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(ShopCartError):
    """A business rule was violated."""

    def __init__(self, messages: dict[str, list[str]]) -> None:
        self.messages = messages
        super().__init__(messages)


class InvalidConfiguration(ValidationError):
    """A pricing policy was configured with out-of-range values."""


class InvalidState(ValidationError):
    """An operation was attempted on data that violates its invariants."""


class MailerError(ShopCartError):
    """The mail transport rejected a message or could not be reached."""


class NotificationDeliveryError(ShopCartError):
    """The order notification could not be delivered."""

    def __init__(self, order_id: str, reason: str) -> None:
        self.order_id = order_id
        self.reason = reason
        super().__init__(f"Notification for order {order_id} failed: {reason}")
