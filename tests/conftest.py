"""
Pytest configuration and shared fixtures.
"""

import logging
import os
from collections.abc import Generator

import pytest

from instrument_catalog.catalog import Catalog, build_demo_catalog
from instrument_catalog.config import get_settings
from instrument_catalog.domain import BrassInstrument, StringInstrument


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure no local INSTRUMENT_CATALOG_* settings leak into tests."""
    for var in list(os.environ):
        if var.upper().startswith("INSTRUMENT_CATALOG_"):
            monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_settings() -> Generator[None, None, None]:
    """Reset the cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Undo setup_logging() changes to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def guitar() -> StringInstrument:
    return StringInstrument(name="Guitar", material="Wood", string_count=6)


@pytest.fixture
def trumpet() -> BrassInstrument:
    return BrassInstrument(name="Trumpet", material="Brass", brass_type="Yellow Brass")


@pytest.fixture
def demo_catalog() -> Catalog:
    """Catalog holding the four seed instruments."""
    return build_demo_catalog()
