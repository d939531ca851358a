"""SMTP mailer adapter.

Connection details and credentials are taken from ``MailerSettings``. One
connection is opened per message; the adapter does not retry.
"""

import smtplib
from email.message import EmailMessage

import structlog
from shared.exceptions import MailerError

from notifications.channel.mailer_port import MailerPort
from notifications.config import MailerSettings

logger = structlog.get_logger(__name__)


class SmtpMailer(MailerPort):
    """Delivers manager notifications through an SMTP relay."""

    def __init__(self, settings: MailerSettings, subject: str = "New order received") -> None:
        self.settings = settings
        self.subject = subject

    def build_message(self, body: str) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = f"[{self.settings.store_name}] {self.subject}"
        message["From"] = self.settings.sender
        message["To"] = ", ".join(self.settings.manager_recipients)
        message.set_content(body)
        return message

    def send_to_managers(self, message: str) -> None:
        settings = self.settings

        try:
            email = self.build_message(message)
            with smtplib.SMTP(settings.host, settings.port, timeout=settings.timeout_seconds) as smtp:
                if settings.use_tls:
                    smtp.starttls()
                if settings.username:
                    password = settings.password.get_secret_value() if settings.password else ""
                    smtp.login(settings.username, password)
                smtp.send_message(email)
        except (smtplib.SMTPException, OSError, ValueError) as exc:
            logger.warning(
                "SMTP delivery failed",
                host=settings.host,
                port=settings.port,
                error=str(exc),
            )
            raise MailerError(f"SMTP delivery to {settings.host}:{settings.port} failed: {exc}") from exc

        logger.debug("SMTP message sent", host=settings.host, recipients=len(settings.manager_recipients))
