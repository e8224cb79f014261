"""Dependency injection module."""

from typing import Type

from exchange.util.di.application import ProdApplicationProvider
from exchange.util.di.base import Component, ProviderBase
from exchange.util.di.core import ProdConfigProvider
from exchange.util.di.domain import ProdDomainProvider
from exchange.util.di.infrastructure import (
    EmailProvider,
    IdentityProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdIdentityProvider,
    ProdPersistenceProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    IdentityProvider,
    EmailProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    A provider with no subclasses is concrete and used directly. One with
    subclasses is a mockable component, and the subclass whose __is_mock__
    matches ``use_mock`` is chosen.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "EmailProvider",
    "IdentityProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdEmailProvider",
    "ProdIdentityProvider",
    "ProdPersistenceProvider",
]
