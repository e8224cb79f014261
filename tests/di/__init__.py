"""Mock providers for testing."""

from .email import MockEmailProvider
from .identity import MockIdentityProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockEmailProvider",
    "MockIdentityProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
