"""Item domain models and utilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping


class ItemKind(str, Enum):
    WEAPON = "Weapon"
    KNIFE = "Knife"


class CrateType(str, Enum):
    CASE = "Case"


@dataclass(frozen=True, slots=True)
class Rarity:
    name: str
    color: str | None = None


@dataclass(frozen=True, slots=True)
class Descriptor:
    """Named reference such as a weapon family or category."""

    name: str
    descriptor_id: str | None = None


@dataclass(frozen=True, slots=True)
class Item:
    """A single catalog entry (skin, knife, agent, sticker...)."""

    item_id: str
    name: str
    image: str | None = None
    kind: str | None = None
    rarity: Rarity | None = None
    category: Descriptor | None = None
    weapon: Descriptor | None = None
    description: str | None = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False, repr=False)

    @property
    def is_weapon(self) -> bool:
        return self.kind == ItemKind.WEAPON.value


@dataclass(frozen=True, slots=True)
class CollectionRecord:
    """Collection as declared in source data, before resolution.

    ``references`` is ``None`` when the record carries no member list.
    """

    name: str
    image: str | None
    references: tuple[str, ...] | None


@dataclass(frozen=True, slots=True)
class Collection:
    name: str
    image: str | None
    references: tuple[str, ...]
    items: tuple[Item, ...] = ()


@dataclass(frozen=True, slots=True)
class Crate:
    """Openable container as declared in source data."""

    name: str
    image: str | None
    crate_type: str | None
    collection_refs: tuple[str, ...] = ()
    rare_refs: tuple[str, ...] = ()

    @property
    def is_case(self) -> bool:
        return self.crate_type == CrateType.CASE.value


@dataclass(frozen=True, slots=True)
class Case:
    """A composed crate of type ``Case`` and its obtainable pool."""

    name: str
    image: str | None
    items: tuple[Item, ...] = ()


class ItemPool:
    """Insertion-ordered set of items keyed by identifier."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items: dict[str, Item] = {}
        for item in items:
            self.add(item)

    def add(self, item: Item) -> bool:
        if item.item_id in self._items:
            return False
        self._items[item.item_id] = item
        return True

    def update(self, items: Iterable[Item]) -> None:
        for item in items:
            self.add(item)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items.values())

    def freeze(self) -> tuple[Item, ...]:
        return tuple(self._items.values())
