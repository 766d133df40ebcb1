"""Validation utilities for composed catalogs."""

from __future__ import annotations

from typing import Iterable

from .domain.catalog import Catalog
from .domain.items import Item


def validate_catalog(catalog: Catalog) -> list[str]:
    """Return list of consistency errors discovered in a composed catalog."""
    errors: list[str] = []
    index = catalog.index

    for name, collection in catalog.collections.items():
        if collection.name != name:
            errors.append(f"Collection keyed '{name}' is named '{collection.name}'.")
        errors.extend(_unindexed(f"Collection '{name}'", collection.items, catalog))

    for name, case in catalog.cases.items():
        if case.name != name:
            errors.append(f"Case keyed '{name}' is named '{case.name}'.")
        errors.extend(_unindexed(f"Case '{name}'", case.items, catalog))
        seen: set[str] = set()
        for item in case.items:
            if item.item_id in seen:
                errors.append(f"Case '{name}' contains item '{item.item_id}' more than once.")
            seen.add(item.item_id)

    if catalog.collections and not len(index):
        errors.append("Catalog has collections but an empty identity index.")

    return errors


def _unindexed(owner: str, items: Iterable[Item], catalog: Catalog) -> list[str]:
    return [
        f"{owner} contains item '{item.item_id}' missing from the identity index."
        for item in items
        if item.item_id not in catalog.index
    ]


__all__ = ["validate_catalog"]
