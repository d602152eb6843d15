"""
Seed data for the instrument catalog.

Defines the four demo instruments in display order.
"""

from instrument_catalog.catalog.collection import Catalog
from instrument_catalog.domain import BrassInstrument, Instrument, StringInstrument

# =============================================================================
# SEED DATA: Demo Instruments
# =============================================================================

SEED_INSTRUMENTS: list[Instrument] = [
    # =========================================================================
    # STRINGS (2)
    # =========================================================================
    StringInstrument(
        name="Guitar",
        material="Wood",
        string_count=6,
    ),
    StringInstrument(
        name="Violin",
        material="Wood",
        string_count=4,
    ),
    # =========================================================================
    # BRASS (2)
    # =========================================================================
    BrassInstrument(
        name="Trumpet",
        material="Brass",
        brass_type="Yellow Brass",
    ),
    BrassInstrument(
        name="Trombone",
        material="Brass",
        brass_type="Red Brass",
    ),
]


def get_seed_instruments() -> list[Instrument]:
    """Get fresh copies of the seed instruments, in order."""
    return [item.model_copy() for item in SEED_INSTRUMENTS]


def build_demo_catalog() -> Catalog:
    """Build a catalog owning its own copies of the seed instruments."""
    return Catalog(get_seed_instruments())
