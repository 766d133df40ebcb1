"""Resolve collections and cases against the identity index."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from .index import IdentityIndex
from .items import Case, Collection, CollectionRecord, Crate, ItemPool

logger = logging.getLogger(__name__)


def compose_collections(
    records: Iterable[CollectionRecord], index: IdentityIndex
) -> dict[str, Collection]:
    """Build one collection per record that declares member references.

    Records without a member list are skipped. Unknown member ids are
    dropped; the remaining items keep their declared order.
    """
    composed: dict[str, Collection] = {}
    for record in records:
        if record.references is None:
            continue
        items = index.resolve(record.references)
        missing = len(record.references) - len(items)
        if missing:
            logger.debug(
                "Collection '%s' dropped %s unknown member reference(s).",
                record.name,
                missing,
            )
        composed[record.name] = Collection(
            name=record.name,
            image=record.image,
            references=record.references,
            items=tuple(items),
        )
    return composed


def compose_case(
    crate: Crate, collections: Mapping[str, Collection], index: IdentityIndex
) -> Case:
    pool = ItemPool()
    for collection_name in crate.collection_refs:
        collection = collections.get(collection_name)
        if collection is None:
            logger.debug(
                "Case '%s' references unknown collection '%s'.",
                crate.name,
                collection_name,
            )
            continue
        # Knives and gloves only enter through the rare list.
        pool.update(item for item in collection.items if item.is_weapon)

    for item_id in crate.rare_refs:
        item = index.get(item_id)
        if item is None:
            logger.debug("Case '%s' references unknown rare item '%s'.", crate.name, item_id)
            continue
        pool.add(item)

    return Case(name=crate.name, image=crate.image, items=pool.freeze())


def compose_cases(
    crates: Iterable[Crate],
    collections: Mapping[str, Collection],
    index: IdentityIndex,
) -> dict[str, Case]:
    """Compose every crate of type ``Case``; other crate types are left out."""
    return {
        crate.name: compose_case(crate, collections, index)
        for crate in crates
        if crate.is_case
    }
