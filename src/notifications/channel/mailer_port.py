"""Mailer port — abstract interface for delivering messages to store managers."""

from abc import ABC, abstractmethod


class MailerPort(ABC):
    """Abstract interface for mail transport adapters."""

    @abstractmethod
    def send_to_managers(self, message: str) -> None:
        """Deliver ``message`` to the store managers.

        Raises:
            MailerError: if the transport rejects the message or cannot be reached.
        """
        ...
