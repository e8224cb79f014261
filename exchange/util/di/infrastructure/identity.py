"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from exchange.adapter.identity import RealIdentityAdminClient
from exchange.config import Settings
from exchange.domain.service import IdentityAdminClient
from exchange.util.di.base import ProviderBase
from exchange.util.error import ConfigurationError


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_admin_client(self, settings: Settings) -> IdentityAdminClient:
        """Provide identity admin client.

        Raises:
            ConfigurationError: If the service role key is not configured
        """
        if not settings.identity.service_role_key:
            raise ConfigurationError("Identity service role key must be configured")

        return RealIdentityAdminClient(
            url=settings.identity.url,
            service_role_key=settings.identity.service_role_key,
            timeout=settings.identity.timeout_seconds,
        )
