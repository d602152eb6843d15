"""
Exceptions raised by the instrument catalog.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for catalog errors."""

    pass


class CatalogIndexError(CatalogError, IndexError):
    """Raised when a catalog position is outside [0, length)."""

    def __init__(self, index: int, length: int):
        super().__init__(f"Catalog index {index} out of range (length {length})")
        self.index = index
        self.length = length


class UnknownInstrumentError(CatalogError):
    """Raised when an object matches none of the known instrument variants."""

    def __init__(self, instrument: Any):
        super().__init__(f"Unknown instrument type: {type(instrument).__name__}")
        self.instrument = instrument
