"""Storage abstractions for the published catalog."""

from __future__ import annotations

from typing import Protocol

from ..domain.catalog import Catalog


class CatalogStore(Protocol):
    def publish(self, catalog: Catalog) -> None:
        ...

    def current(self) -> Catalog | None:
        ...
