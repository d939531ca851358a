"""Tests for checkout wiring."""

import importlib
from decimal import Decimal
from typing import get_type_hints
from unittest.mock import MagicMock, patch

import pytest
from notifications.channel import set_mailer
from notifications.channel.fake_mailer import FakeMailer
from notifications.service import ManagerNotificationService, NotificationService
from ordering.cart.cart import Cart
from ordering.checkout.factory import create_cart, create_price_calculator
from pricing.discount import PercentageDiscount
from shared.exceptions import InvalidConfiguration


class TestCreatePriceCalculator:
    def test_uses_given_vat_rate(self):
        assert create_price_calculator("0.2").vat_manager.rate == Decimal("0.2")

    def test_invalid_rate_fails_fast(self):
        with pytest.raises(InvalidConfiguration):
            create_price_calculator("1.2")


class TestCreateCart:
    def test_uses_injected_notification_service(self):
        notifier = MagicMock(spec=NotificationService)
        cart = create_cart("0.2", notification_service=notifier)
        cart.add_item(10)
        order = cart.make_order(PercentageDiscount(0))
        notifier.send_order_notification.assert_called_once_with(order, Decimal("12"))

    def test_defaults_to_configured_mailer(self):
        mailer = FakeMailer()
        set_mailer(mailer)

        cart = create_cart("0.18")
        assert isinstance(cart, Cart)
        cart.add_item(100)
        cart.make_order(PercentageDiscount("0.1"))

        assert len(mailer.sent_messages) == 1

    def test_default_service_is_manager_notification_service(self):
        cart = create_cart(0)
        assert isinstance(cart._notification_service, ManagerNotificationService)


class TestLoggingSetup:
    def test_loading_checkout_wiring_configures_logging(self):
        import ordering.checkout.factory as factory

        with patch("shared.logging.configure_logging") as configure:
            importlib.reload(factory)

        configure.assert_called_once_with()
        importlib.reload(factory)


class TestCartContract:
    def test_notification_service_is_typed(self):
        hints = get_type_hints(Cart.__init__)
        assert hints["notification_service"] is NotificationService
