"""Turn raw JSON records into item, collection and crate models."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from ..domain.catalog import LooseCategory
from ..domain.exceptions import CatalogLoadError
from ..domain.items import CollectionRecord, Crate, CrateType, Descriptor, Item, Rarity

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SourceDocuments:
    items: Sequence[Item]
    collections: Sequence[CollectionRecord]
    crates: Sequence[Crate]
    categories: Mapping[LooseCategory, Sequence[Item]] = field(default_factory=dict)


def parse_documents(documents: Mapping[str, Sequence[Any]]) -> SourceDocuments:
    """Parse fetched documents (keyed by source name) into domain objects.

    Missing sources count as empty. Raises ``CatalogLoadError`` listing every
    skin, collection or case record that does not have the shape the
    composers rely on. Loose categories and non-case crates are not
    validated.
    """
    errors = validate_documents(documents)
    if errors:
        raise CatalogLoadError(_format_errors("Catalog documents are malformed", errors))
    return SourceDocuments(
        items=tuple(parse_item(entry) for entry in documents.get("skins", ())),
        collections=tuple(parse_collection(entry) for entry in documents.get("collections", ())),
        crates=tuple(parse_crate(entry) for entry in _case_records(documents.get("crates", ()))),
        categories={
            category: parse_loose_items(category, documents.get(category.value, ()))
            for category in LooseCategory
        },
    )


def parse_item(entry: Mapping[str, Any]) -> Item:
    return Item(
        item_id=str(entry["id"]),
        name=entry["name"],
        image=entry.get("image"),
        kind=entry.get("type"),
        rarity=_parse_rarity(entry.get("rarity")),
        category=_parse_descriptor(entry.get("category")),
        weapon=_parse_descriptor(entry.get("weapon")),
        description=entry.get("description"),
        raw=dict(entry),
    )


def parse_collection(entry: Mapping[str, Any]) -> CollectionRecord:
    contains = entry.get("contains")
    references = None
    if contains is not None:
        references = tuple(
            ref for ref in (_reference(member, "id") for member in contains) if ref is not None
        )
    return CollectionRecord(name=entry["name"], image=entry.get("image"), references=references)


def parse_crate(entry: Mapping[str, Any]) -> Crate:
    collection_refs = (_reference(ref, "name") for ref in entry.get("contains") or ())
    rare_refs = (_reference(ref, "id") for ref in entry.get("contains_rare") or ())
    return Crate(
        name=entry["name"],
        image=entry.get("image"),
        crate_type=entry.get("type"),
        collection_refs=tuple(ref for ref in collection_refs if ref is not None),
        rare_refs=tuple(ref for ref in rare_refs if ref is not None),
    )


def parse_loose_items(category: LooseCategory, entries: Iterable[Any]) -> tuple[Item, ...]:
    """Parse a loose category, skipping records that carry no usable id."""
    items: list[Item] = []
    for idx, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict) or not _is_identifier(entry.get("id")):
            logger.warning("Skipping %s record #%s without an 'id'.", category.value, idx)
            continue
        name = entry.get("name")
        items.append(parse_item({**entry, "name": name if isinstance(name, str) else ""}))
    return tuple(items)


def validate_documents(documents: Mapping[str, Sequence[Any]]) -> list[str]:
    errors: list[str] = []

    for idx, entry in enumerate(documents.get("skins", ()), start=1):
        if not isinstance(entry, dict):
            errors.append(f"skins record #{idx} must be an object.")
            continue
        item_id = entry.get("id")
        if not _is_identifier(item_id):
            errors.append(f"skins record #{idx} must define non-empty 'id'.")
            continue
        if not isinstance(entry.get("name"), str):
            errors.append(f"skins record '{item_id}' must define string 'name'.")

    for idx, entry in enumerate(documents.get("collections", ()), start=1):
        if not isinstance(entry, dict):
            errors.append(f"Collection #{idx} must be an object.")
            continue
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(f"Collection #{idx} must define non-empty 'name'.")
            continue
        errors.extend(_validate_references(f"Collection '{name}'", "contains", entry.get("contains")))

    for idx, entry in enumerate(documents.get("crates", ()), start=1):
        if not _is_case_record(entry):
            continue
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(f"Crate #{idx} must define non-empty 'name'.")
            continue
        errors.extend(_validate_references(f"Crate '{name}'", "contains", entry.get("contains")))
        errors.extend(
            _validate_references(f"Crate '{name}'", "contains_rare", entry.get("contains_rare"))
        )

    return errors


def _validate_references(owner: str, field_name: str, refs: Any) -> list[str]:
    if refs is None:
        return []
    if not isinstance(refs, list):
        return [f"{owner} '{field_name}' must be an array."]
    errors = []
    for position, ref in enumerate(refs, start=1):
        if not isinstance(ref, dict) and not _is_identifier(ref):
            errors.append(f"{owner} '{field_name}' entry #{position} must be an object or identifier.")
    return errors


def _is_case_record(entry: Any) -> bool:
    return isinstance(entry, dict) and entry.get("type") == CrateType.CASE.value


def _case_records(entries: Iterable[Any]) -> list[dict[str, Any]]:
    return [entry for entry in entries if _is_case_record(entry)]


def _reference(ref: Any, key: str) -> str | None:
    """Extract the referenced id/name; references missing the key dangle."""
    if isinstance(ref, dict):
        value = ref.get(key)
        return str(value) if _is_identifier(value) else None
    return str(ref)


def _is_identifier(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(value.strip())


def _parse_rarity(data: Any) -> Rarity | None:
    if isinstance(data, dict) and data.get("name"):
        return Rarity(name=data["name"], color=data.get("color"))
    if isinstance(data, str) and data:
        return Rarity(name=data)
    return None


def _parse_descriptor(data: Any) -> Descriptor | None:
    if isinstance(data, dict) and data.get("name"):
        raw_id = data.get("id")
        return Descriptor(name=data["name"], descriptor_id=str(raw_id) if raw_id is not None else None)
    return None


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
