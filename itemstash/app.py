"""Top level application object tying loading, composition and storage."""

from __future__ import annotations

import logging
from random import Random
from typing import Any, Mapping, Sequence

from .config import StashConfig
from .domain.catalog import Catalog, LooseCategory
from .domain.composer import compose_cases, compose_collections
from .domain.events import CATALOG_FAILED, CATALOG_LOADED, CatalogFailed, CatalogLoaded, EventBus
from .domain.exceptions import CatalogLoadError, CatalogNotLoaded, EntityNotFound
from .domain.index import IdentityIndex
from .domain.items import Case, Collection
from .loaders.json_loader import parse_documents
from .loaders.sources import SourceLoader
from .storage.base import CatalogStore
from .storage.memory import InMemoryCatalogStore

logger = logging.getLogger(__name__)


def compose_catalog(documents: Mapping[str, Sequence[Any]]) -> Catalog:
    """Run the composition pipeline over already fetched documents.

    Raises ``CatalogLoadError`` when a record breaks the shape the pipeline
    relies on.
    """
    try:
        parsed = parse_documents(documents)
        index = IdentityIndex.build(parsed.items)
        collections = compose_collections(parsed.collections, index)
        cases = compose_cases(parsed.crates, collections, index)
    except CatalogLoadError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise CatalogLoadError(f"Fatal error during data processing: {exc!r}") from exc
    return Catalog(
        collections=collections,
        cases=cases,
        categories=parsed.categories,
        index=index,
    )


class StashApp:
    """Central dependency container used by the CLI and embedding code."""

    def __init__(
        self,
        config: StashConfig,
        *,
        loader: SourceLoader | None = None,
        store: CatalogStore | None = None,
        event_bus: EventBus | None = None,
        locations: Mapping[str, str] | None = None,
        rng: Random | None = None,
    ) -> None:
        self.config = config
        self.loader = loader or SourceLoader(config.http)
        self.store = store or InMemoryCatalogStore()
        self.event_bus = event_bus or EventBus()
        self.locations = dict(locations) if locations is not None else config.sources.locations()
        self.rng = rng or (Random(config.rng_seed) if config.rng_seed is not None else Random())

    async def load(self) -> Catalog:
        """Fetch every source, compose a fresh catalog and publish it.

        Nothing is published if composition fails or the coroutine is
        cancelled; the previously published catalog stays current.
        """
        batch = await self.loader.fetch_all(self.locations)
        if batch.empty_sources:
            logger.info("Sources treated as empty: %s", ", ".join(batch.empty_sources))
        try:
            catalog = compose_catalog(batch.documents)
        except CatalogLoadError as exc:
            logger.exception("Fatal error during data processing.")
            await self.event_bus.publish(CATALOG_FAILED, CatalogFailed(error=exc))
            raise
        self.store.publish(catalog)
        logger.info(
            "Catalog loaded: %s collections, %s cases.",
            len(catalog.collections),
            len(catalog.cases),
        )
        await self.event_bus.publish(
            CATALOG_LOADED, CatalogLoaded(catalog=catalog, empty_sources=batch.empty_sources)
        )
        return catalog

    @property
    def catalog(self) -> Catalog:
        catalog = self.store.current()
        if catalog is None:
            raise CatalogNotLoaded("Catalog has not been loaded yet")
        return catalog

    def require_collection(self, name: str) -> Collection:
        collection = self.catalog.find_collection(name)
        if collection is None:
            raise EntityNotFound("collection", name)
        return collection

    def require_case(self, name: str) -> Case:
        case = self.catalog.find_case(name)
        if case is None:
            raise EntityNotFound("case", name)
        return case

    def snapshot(self) -> dict[str, Any]:
        """Export current configuration for debugging."""
        catalog = self.store.current()
        return {
            "locations": dict(self.locations),
            "loaded": catalog is not None,
            "counts": catalog.snapshot() if catalog else {},
            "categories": [category.value for category in LooseCategory],
        }
