"""Domain models and composition services."""

from .items import (
    Case,
    Collection,
    CollectionRecord,
    Crate,
    CrateType,
    Descriptor,
    Item,
    ItemKind,
    ItemPool,
    Rarity,
)
from .index import IdentityIndex
from .composer import compose_case, compose_cases, compose_collections
from .catalog import Catalog, LooseCategory
from .events import CatalogFailed, CatalogLoaded, EventBus
from .exceptions import (
    NOT_FOUND_MESSAGE,
    CatalogLoadError,
    CatalogNotLoaded,
    EntityNotFound,
    ItemStashError,
)

__all__ = [
    "Case",
    "Collection",
    "CollectionRecord",
    "Crate",
    "CrateType",
    "Descriptor",
    "Item",
    "ItemKind",
    "ItemPool",
    "Rarity",
    "IdentityIndex",
    "compose_case",
    "compose_cases",
    "compose_collections",
    "Catalog",
    "LooseCategory",
    "CatalogFailed",
    "CatalogLoaded",
    "EventBus",
    "NOT_FOUND_MESSAGE",
    "CatalogLoadError",
    "CatalogNotLoaded",
    "EntityNotFound",
    "ItemStashError",
]
