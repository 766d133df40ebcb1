"""Storage backends for itemstash."""

from .base import CatalogStore
from .memory import InMemoryCatalogStore

__all__ = [
    "CatalogStore",
    "InMemoryCatalogStore",
]
