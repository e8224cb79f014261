"""GoTrue-compatible identity provider adapters."""

from .admin import MockAccount, MockIdentityAdminClient, RealIdentityAdminClient
from .session import MockSessionClient, RealSessionClient

__all__ = [
    "MockAccount",
    "MockIdentityAdminClient",
    "MockSessionClient",
    "RealIdentityAdminClient",
    "RealSessionClient",
]
