"""Build a SessionSynchronizer wired to the configured services."""

from exchange.adapter.identity import RealSessionClient
from exchange.config import Settings

from .gateway import RestProfileGateway
from .registration import HttpRegistrationClient
from .synchronizer import SessionSynchronizer


def create_synchronizer(settings: Settings) -> SessionSynchronizer:
    """Create a synchronizer talking to the identity provider, the REST data
    API and this service's registration endpoint.

    Args:
        settings: Application settings

    Returns:
        Unstarted synchronizer
    """
    identity = settings.identity
    return SessionSynchronizer(
        session_client=RealSessionClient(
            identity.url, identity.anon_key, timeout=identity.timeout_seconds
        ),
        profile_gateway=RestProfileGateway(
            identity.url, identity.anon_key, timeout=identity.timeout_seconds
        ),
        registration_client=HttpRegistrationClient(
            settings.api.base_url, timeout=identity.timeout_seconds
        ),
    )
