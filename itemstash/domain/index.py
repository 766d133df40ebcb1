"""Identifier to item lookup shared by every composition step."""

from __future__ import annotations

from typing import Iterable, Iterator

from .items import Item


class IdentityIndex:
    """Read-only mapping of item identifier to item.

    Built once per load from the full item sequence. When an identifier
    appears more than once the later record wins.
    """

    def __init__(self, items: dict[str, Item] | None = None) -> None:
        self._items: dict[str, Item] = dict(items or {})

    @classmethod
    def build(cls, items: Iterable[Item]) -> "IdentityIndex":
        return cls({item.item_id: item for item in items})

    def get(self, item_id: str) -> Item | None:
        return self._items.get(item_id)

    def resolve(self, item_ids: Iterable[str]) -> list[Item]:
        """Map identifiers to items, skipping unknown ones and keeping order."""
        resolved = (self._items.get(item_id) for item_id in item_ids)
        return [item for item in resolved if item is not None]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items.values())
