"""Exceptions raised by itemstash services."""

NOT_FOUND_MESSAGE = "The requested collection or case could not be found."


class ItemStashError(RuntimeError):
    """Base class for domain exceptions."""


class CatalogLoadError(ItemStashError):
    """Raised when composition fails on a malformed source record."""


class CatalogNotLoaded(ItemStashError):
    """Raised when the catalog is read before any load succeeded."""


class EntityNotFound(ItemStashError):
    """Raised when a named collection, case or loose category does not exist."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(NOT_FOUND_MESSAGE)
        self.kind = kind
        self.name = name
