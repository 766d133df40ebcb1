"""Factories for tests and prototyping."""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import Any, Iterable

from faker import Faker

from ..domain.items import Item, ItemKind
from ..loaders.json_loader import parse_item

RARITIES = (
    ("Mil-Spec Grade", "#4b69ff"),
    ("Restricted", "#8847ff"),
    ("Classified", "#d32ce6"),
    ("Covert", "#eb4b4b"),
)


@dataclass(slots=True)
class ItemFactory:
    faker: Faker = field(default_factory=Faker)
    rng: Random = field(default_factory=Random)

    def record(self, kind: ItemKind | str | None = ItemKind.WEAPON, **overrides: Any) -> dict[str, Any]:
        """Raw source record in the catalog API shape."""
        rarity_name, color = self.rng.choice(RARITIES)
        weapon = self.faker.word().title()
        data: dict[str, Any] = {
            "id": f"skin-{self.faker.unique.random_int(min=1, max=10**9)}",
            "name": f"{weapon} | {self.faker.word().title()}",
            "description": self.faker.sentence(),
            "image": self.faker.image_url(),
            "rarity": {"id": rarity_name.lower(), "name": rarity_name, "color": color},
            "weapon": {"id": weapon.lower(), "name": weapon},
            "category": {"id": "category", "name": self.faker.word().title()},
        }
        if kind is not None:
            data["type"] = kind.value if isinstance(kind, ItemKind) else kind
        data.update(overrides)
        return data

    def build(self, kind: ItemKind | str | None = ItemKind.WEAPON, **overrides: Any) -> Item:
        return parse_item(self.record(kind, **overrides))

    def batch(self, count: int, kind: ItemKind | str | None = ItemKind.WEAPON) -> Iterable[Item]:
        for _ in range(count):
            yield self.build(kind)


def collection_record(name: str, items: Iterable[Any], **overrides: Any) -> dict[str, Any]:
    """Collection record referencing items (or raw ids) as members."""
    data: dict[str, Any] = {
        "id": f"collection-{name.lower().replace(' ', '-')}",
        "name": name,
        "image": f"https://example.com/{name.lower().replace(' ', '_')}.png",
        "contains": [_ref(item, "id") for item in items],
    }
    data.update(overrides)
    return data


def crate_record(
    name: str,
    *,
    collections: Iterable[str] = (),
    rare: Iterable[Any] = (),
    crate_type: str = "Case",
    **overrides: Any,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": f"crate-{name.lower().replace(' ', '-')}",
        "name": name,
        "type": crate_type,
        "image": f"https://example.com/{name.lower().replace(' ', '_')}.png",
        "contains": [{"name": collection} for collection in collections],
        "contains_rare": [_ref(item, "id") for item in rare],
    }
    data.update(overrides)
    return data


def _ref(value: Any, key: str) -> dict[str, Any]:
    if isinstance(value, Item):
        return {key: value.item_id, "name": value.name}
    if isinstance(value, dict):
        return {key: value[key], "name": value.get("name")}
    return {key: value}
