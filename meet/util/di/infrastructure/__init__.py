"""Infrastructure providers."""

# The production subclass must be imported for get_provider to find it
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
