import pytest
from notifications.channel.fake_mailer import FakeMailer
from notifications.service import ManagerNotificationService
from ordering.cart.cart import Cart
from pricing.calculator import PriceCalculator
from pricing.vat import VatManager


@pytest.fixture
def fake_mailer():
    mailer = FakeMailer()
    yield mailer
    mailer.reset()


@pytest.fixture
def notification_service(fake_mailer):
    return ManagerNotificationService(fake_mailer)


@pytest.fixture
def price_calculator():
    return PriceCalculator(VatManager("0.18"))


@pytest.fixture
def cart(price_calculator, notification_service):
    return Cart(price_calculator, notification_service)
