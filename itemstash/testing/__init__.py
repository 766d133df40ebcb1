"""Testing utilities for itemstash."""

from .factory import ItemFactory, collection_record, crate_record
from .fixtures import app_fixture, item_factory

__all__ = [
    "ItemFactory",
    "app_fixture",
    "collection_record",
    "crate_record",
    "item_factory",
]
