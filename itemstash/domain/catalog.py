"""The composed, read-only catalog aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .exceptions import EntityNotFound
from .index import IdentityIndex
from .items import Case, Collection, Item


class LooseCategory(str, Enum):
    AGENTS = "agents"
    STICKERS = "stickers"
    GRAFFITI = "graffiti"
    PATCHES = "patches"
    MUSIC_KITS = "music_kits"
    TOOLS = "tools"
    KEYCHAINS = "keychains"


def _freeze_mapping(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


@dataclass(frozen=True, slots=True)
class Catalog:
    """Collections, cases and loose categories composed by one load.

    ``index`` is the identity index the collections and cases were resolved
    against.
    """

    collections: Mapping[str, Collection] = field(default_factory=dict)
    cases: Mapping[str, Case] = field(default_factory=dict)
    categories: Mapping[LooseCategory, tuple[Item, ...]] = field(default_factory=dict)
    index: IdentityIndex = field(default_factory=IdentityIndex, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "collections", _freeze_mapping(self.collections))
        object.__setattr__(self, "cases", _freeze_mapping(self.cases))
        categories = {
            category: tuple(self.categories.get(category, ()))
            for category in LooseCategory
        }
        object.__setattr__(self, "categories", _freeze_mapping(categories))

    def find_collection(self, name: str) -> Collection | None:
        return self.collections.get(name)

    def find_case(self, name: str) -> Case | None:
        return self.cases.get(name)

    def iter_collections(self) -> Iterable[Collection]:
        return self.collections.values()

    def iter_cases(self) -> Iterable[Case]:
        return self.cases.values()

    def category(self, category: LooseCategory | str) -> tuple[Item, ...]:
        """Return the items of a loose category, e.g. ``"stickers"``.

        Raises ``EntityNotFound`` when ``category`` names no loose category.
        """
        try:
            key = LooseCategory(category)
        except ValueError as exc:
            raise EntityNotFound("category", str(category)) from exc
        return self.categories[key]

    def snapshot(self) -> dict[str, Any]:
        """Export entry counts for debugging."""
        return {
            "collections": len(self.collections),
            "cases": len(self.cases),
            **{category.value: len(items) for category, items in self.categories.items()},
        }
