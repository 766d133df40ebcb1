"""Loaders for catalog documents (HTTP, local JSON files)."""

from .json_loader import (
    SourceDocuments,
    parse_collection,
    parse_crate,
    parse_documents,
    parse_item,
    parse_loose_items,
    validate_documents,
)
from .sources import SourceBatch, SourceLoader, SourceResult, directory_locations

__all__ = [
    "SourceDocuments",
    "parse_collection",
    "parse_crate",
    "parse_documents",
    "parse_item",
    "parse_loose_items",
    "validate_documents",
    "SourceBatch",
    "SourceLoader",
    "SourceResult",
    "directory_locations",
]
