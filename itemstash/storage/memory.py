"""In-memory storage backend for itemstash."""

from __future__ import annotations

from collections import deque
from datetime import datetime, timezone
from typing import Deque

from ..domain.catalog import Catalog
from .base import CatalogStore


class InMemoryCatalogStore(CatalogStore):
    """Holds the most recently published catalog.

    Publishing swaps the reference; a previous catalog is never patched.
    """

    def __init__(self, *, history: int = 5) -> None:
        self._catalog: Catalog | None = None
        self._published: Deque[tuple[datetime, dict]] = deque(maxlen=history)

    def publish(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._published.append((datetime.now(timezone.utc), catalog.snapshot()))

    def current(self) -> Catalog | None:
        return self._catalog

    def dump(self) -> list[tuple[datetime, dict]]:
        return list(self._published)
