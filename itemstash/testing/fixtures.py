"""Pytest fixtures for itemstash."""

from __future__ import annotations

from random import Random

import pytest

from ..app import StashApp
from ..config import StashConfig
from .factory import ItemFactory


@pytest.fixture()
def item_factory() -> ItemFactory:
    return ItemFactory(rng=Random(7))


def app_fixture(locations: dict[str, str] | None = None, **kwargs) -> StashApp:
    """Helper for ad-hoc tests where pytest is not available."""
    config = StashConfig(**kwargs)
    return StashApp(config, locations=locations)
