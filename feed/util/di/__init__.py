"""Dependency injection module.

Only the stores are swapped between production and tests. Config, domain
services and use cases are wired the same way everywhere.
"""

from typing import Type

from feed.util.di.application import ProdApplicationProvider
from feed.util.di.base import Component, ProviderBase
from feed.util.di.core import ProdConfigProvider
from feed.util.di.domain import ProdDomainProvider
from feed.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Stores: in-memory, APP-scoped in production, REQUEST-scoped in tests
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    A base with no subclasses is used as-is. The persistence base has a
    production and a test subclass, told apart by ``__is_mock__``.

    Args:
        base: Entry from PROVIDERS
        use_mock: Whether to pick the test implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If no subclass matches ``use_mock``
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    impl = next((c for c in subclasses if c.__is_mock__ == use_mock), None)
    if impl is None:
        kind = "test" if use_mock else "production"
        raise ValueError(f"No {kind} provider for {base.__mock_component__}")
    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
