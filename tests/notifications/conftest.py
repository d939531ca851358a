import pytest
from notifications.channel import set_mailer
from notifications.channel.fake_mailer import FakeMailer


@pytest.fixture
def fake_mailer():
    mailer = FakeMailer()
    set_mailer(mailer)
    yield mailer
    mailer.reset()
