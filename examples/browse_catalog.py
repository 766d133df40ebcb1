"""Example: load the public catalog and print what a few cases can drop."""

from __future__ import annotations

import asyncio
import logging

from itemstash import StashApp, StashConfig
from itemstash.browse import SortOrder, featured, search
from itemstash.domain.events import CATALOG_LOADED, CatalogLoaded


async def report_sources(payload: CatalogLoaded) -> None:
    if payload.empty_sources:
        print(f"Empty sources: {', '.join(payload.empty_sources)}")


async def main() -> None:
    logging.basicConfig(level=logging.INFO)
    app = StashApp(StashConfig.from_env())
    app.event_bus.subscribe(CATALOG_LOADED, report_sources)
    catalog = await app.load()
    print(catalog.snapshot())

    for case in featured(catalog.iter_cases(), count=3, rng=app.rng):
        skins = search(case.items, "|", SortOrder.NAME_ASC)
        print(f"{case.name}: {len(case.items)} items")
        for item in skins[:5]:
            rarity = item.rarity.name if item.rarity else "?"
            print(f"  {item.name} ({rarity})")


if __name__ == "__main__":
    asyncio.run(main())
