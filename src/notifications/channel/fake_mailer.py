"""Fake mailer — records messages in memory for testing."""

from uuid import uuid4

from shared.exceptions import MailerError

from notifications.channel.mailer_port import MailerPort


class FakeMailer(MailerPort):
    """Mailer that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_messages: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Mail delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Mail delivery failed"):
        """Configure the fake mailer behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send_to_managers(self, message: str) -> None:
        if not self.should_succeed:
            raise MailerError(self.failure_reason)

        self.sent_messages.append(
            {
                "message_id": f"mail-{uuid4().hex[:12]}",
                "message": message,
            }
        )

    def reset(self):
        """Clear sent messages (useful between tests)."""
        self.sent_messages.clear()
        self.should_succeed = True
        self.failure_reason = "Mail delivery failed"
