"""Dependency injection wiring.

Config, domain services and use cases have a single implementation.
Persistence is swappable: PostgreSQL in production, the in-memory tables in
tests.
"""

from typing import Type

from meet.util.di.application import ProdApplicationProvider
from meet.util.di.base import Component, ProviderBase
from meet.util.di.core import ProdConfigProvider
from meet.util.di.domain import ProdDomainProvider
from meet.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Order does not matter to dishka; swappable bases are listed last
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    A base without subclasses is used as-is. A base with subclasses is a
    swappable component, and the subclass whose ``__is_mock__`` matches
    ``use_mock`` is picked.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", base.__name__)
    raise ValueError(f"No {kind} implementation for {component}")


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
