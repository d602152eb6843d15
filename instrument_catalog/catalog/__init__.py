"""
Instrument catalog management.

Provides:
- An ordered, owning collection of instruments
- Runtime variant inspection
- Seed data for the demo catalog
"""

from instrument_catalog.catalog.collection import Catalog
from instrument_catalog.catalog.errors import (
    CatalogError,
    CatalogIndexError,
    UnknownInstrumentError,
)
from instrument_catalog.catalog.inspection import UNKNOWN_INSTRUMENT_TEXT, inspect_and_describe
from instrument_catalog.catalog.seed import build_demo_catalog, get_seed_instruments

__all__ = [
    "Catalog",
    "CatalogError",
    "CatalogIndexError",
    "UNKNOWN_INSTRUMENT_TEXT",
    "UnknownInstrumentError",
    "build_demo_catalog",
    "get_seed_instruments",
    "inspect_and_describe",
]
