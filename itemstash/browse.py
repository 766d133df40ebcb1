"""Read-only helpers used by presentation code to list and search items."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Protocol, Sequence, TypeVar

from .domain.items import Item

NOT_AVAILABLE = "N/A"
NO_DESCRIPTION = "No description available."


class Named(Protocol):
    name: str


N = TypeVar("N", bound=Named)


class SortOrder(str, Enum):
    DEFAULT = "default"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"


@dataclass(frozen=True, slots=True)
class MenuEntry:
    name: str
    page: str


MAIN_CATEGORIES: tuple[MenuEntry, ...] = (
    MenuEntry("Cases", "cases"),
    MenuEntry("Collections", "collections"),
    MenuEntry("Agents", "agents"),
    MenuEntry("Stickers", "stickers"),
    MenuEntry("Music Kits", "music_kits"),
    MenuEntry("Patches", "patches"),
    MenuEntry("Graffiti", "graffiti"),
    MenuEntry("Keychains", "keychains"),
    MenuEntry("Tools & Keys", "tools"),
)


def filter_items(items: Iterable[Item], term: str | None) -> list[Item]:
    """Case-insensitive substring match on item names."""
    if not term:
        return list(items)
    needle = term.lower()
    return [item for item in items if needle in item.name.lower()]


def sort_items(items: Iterable[Item], order: SortOrder | str = SortOrder.DEFAULT) -> list[Item]:
    order = SortOrder(order)
    result = list(items)
    if order is SortOrder.NAME_ASC:
        result.sort(key=lambda item: item.name.casefold())
    elif order is SortOrder.NAME_DESC:
        result.sort(key=lambda item: item.name.casefold(), reverse=True)
    return result


def search(
    items: Iterable[Item],
    term: str | None = None,
    order: SortOrder | str = SortOrder.DEFAULT,
) -> list[Item]:
    return sort_items(filter_items(items, term), order)


def list_entries(values: Iterable[N | None]) -> list[N]:
    """Collections or cases for a listing page, alphabetically."""
    return sorted((value for value in values if value), key=lambda value: value.name.casefold())


def featured(values: Iterable[N], count: int = 4, rng: Random | None = None) -> list[N]:
    """Pick up to ``count`` random entries without touching the input."""
    pool: Sequence[N] = list(values)
    rng = rng or Random()
    return rng.sample(pool, k=min(count, len(pool)))


@dataclass(frozen=True, slots=True)
class ItemDetails:
    name: str
    description: str
    rarity: str
    color: str | None
    category: str
    weapon: str

    @classmethod
    def from_item(cls, item: Item) -> "ItemDetails":
        return cls(
            name=item.name,
            description=item.description or NO_DESCRIPTION,
            rarity=item.rarity.name if item.rarity else NOT_AVAILABLE,
            color=item.rarity.color if item.rarity else None,
            category=item.category.name if item.category else NOT_AVAILABLE,
            weapon=item.weapon.name if item.weapon else NOT_AVAILABLE,
        )
