"""itemstash public API."""

from .app import StashApp, compose_catalog
from .config import StashConfig
from .domain.catalog import Catalog, LooseCategory

__all__ = [
    "Catalog",
    "LooseCategory",
    "StashApp",
    "StashConfig",
    "compose_catalog",
]
