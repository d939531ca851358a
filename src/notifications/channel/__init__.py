"""Mailer registry — pluggable transport for manager notifications.

Provides singleton access to the configured mailer. Uses the fake mailer by
default; an SMTP relay is used when ``SHOPCART_MAILER_BACKEND=smtp``.
"""

from notifications.channel.mailer_port import MailerPort
from notifications.config import get_mailer_settings

_current_mailer: MailerPort | None = None


def get_mailer() -> MailerPort:
    """Return the configured mailer (singleton)."""
    global _current_mailer
    if _current_mailer is None:
        settings = get_mailer_settings()
        if settings.backend == "smtp":
            from notifications.channel.smtp_mailer import SmtpMailer

            _current_mailer = SmtpMailer(settings)
        else:
            from notifications.channel.fake_mailer import FakeMailer

            _current_mailer = FakeMailer()

    return _current_mailer


def set_mailer(mailer: MailerPort) -> None:
    """Override the active mailer (useful for tests)."""
    global _current_mailer
    _current_mailer = mailer


def reset_mailer() -> None:
    """Reset to the configured default mailer."""
    global _current_mailer
    _current_mailer = None
