"""
Instrument Catalog

A small taxonomy of musical instruments supporting:
- Immutable instrument models with self-describing variants
- An ordered, owning catalog iterated through the common interface
- Runtime variant inspection with an unknown-type fallback
"""

__version__ = "1.0.0"
__author__ = "Instrument Catalog Development Team"

from instrument_catalog.config import Settings, get_settings

__all__ = ["__version__", "Settings", "get_settings"]
