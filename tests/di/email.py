"""Mock email providers for testing."""

from dishka import Scope, provide

from exchange.adapter.mail import MockEmailSender
from exchange.domain.service import EmailSender
from exchange.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Mock email provider recording sent messages."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_email_sender(self) -> EmailSender:
        """Provide mock email sender."""
        return MockEmailSender()
