"""
Domain models for the instrument catalog.

These models represent the closed set of instrument shapes:
- Instrument: Any playable instrument (name and material)
- StringInstrument: Instrument with strings (e.g., guitar, violin)
- BrassInstrument: Brass-family wind instrument (e.g., trumpet)
"""

from instrument_catalog.domain.brass_instrument import BrassInstrument
from instrument_catalog.domain.instrument import Instrument, InstrumentKind
from instrument_catalog.domain.string_instrument import StringInstrument

__all__ = [
    "BrassInstrument",
    "Instrument",
    "InstrumentKind",
    "StringInstrument",
]
