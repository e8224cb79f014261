"""Email infrastructure providers."""

from dishka import Scope, provide

from exchange.adapter.mail import RealEmailSender
from exchange.config import Settings
from exchange.domain.service import EmailSender
from exchange.util.di.base import ProviderBase
from exchange.util.error import ConfigurationError


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, settings: Settings) -> EmailSender:
        """Provide email sender.

        Raises:
            ConfigurationError: If the email API key is not configured
        """
        if not settings.email.api_key:
            raise ConfigurationError("Email API key must be configured")

        return RealEmailSender(
            api_url=settings.email.api_url,
            api_key=settings.email.api_key,
            from_address=settings.email.from_address,
            timeout=settings.email.timeout_seconds,
        )
