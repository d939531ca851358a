"""Builds carts wired to their pricing and notification services."""

from notifications.service import NotificationService, default_notification_service
from pricing import PriceCalculator, VatManager
from shared.logging import configure_logging, get_logger

from ordering.cart.cart import Cart

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)


def create_price_calculator(vat_rate) -> PriceCalculator:
    return PriceCalculator(VatManager(vat_rate))


def create_cart(vat_rate, notification_service: NotificationService | None = None) -> Cart:
    """Build a Cart for the given VAT rate.

    Without an explicit ``notification_service`` the configured manager
    mailer is used.
    """
    if notification_service is None:
        notification_service = default_notification_service()
    cart = Cart(create_price_calculator(vat_rate), notification_service)
    logger.debug("Cart created", cart_id=cart.id, vat_rate=str(vat_rate))
    return cart
