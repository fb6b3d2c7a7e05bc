"""Shared fixtures."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True, scope="session")
def _isolated_settings() -> Iterator[None]:
    """Run the suite against default settings, unaffected by the caller's environment."""
    from easy_collection.config import clear_settings_cache

    saved = {name: os.environ.pop(name) for name in list(os.environ) if name.startswith("EASY_COLLECTION_")}
    clear_settings_cache()
    yield
    os.environ.update(saved)
    clear_settings_cache()
