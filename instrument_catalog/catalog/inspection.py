"""
Runtime variant inspection for single instruments.

Unlike Catalog.descriptions(), which relies on ordinary method dispatch,
inspection checks the concrete variant first and calls that variant's
describe() explicitly.
"""

from instrument_catalog.catalog.errors import UnknownInstrumentError
from instrument_catalog.domain import BrassInstrument, Instrument, StringInstrument
from instrument_catalog.logging import get_logger

logger = get_logger(__name__)

UNKNOWN_INSTRUMENT_TEXT = "Unknown instrument type."


def describe_variant(instrument: Instrument | None) -> str:
    """
    Describe an instrument through its concrete variant.

    Args:
        instrument: Instrument to inspect (not owned)

    Returns:
        The variant-specific description

    Raises:
        UnknownInstrumentError: If the object is not a known variant
    """
    match instrument:
        case StringInstrument():
            return StringInstrument.describe(instrument)
        case BrassInstrument():
            return BrassInstrument.describe(instrument)
        case _:
            raise UnknownInstrumentError(instrument)


def inspect_and_describe(instrument: Instrument | None) -> str:
    """
    Describe an instrument, falling back to a fixed text for unknown variants.

    A plain Instrument, any future variant and None all resolve to
    UNKNOWN_INSTRUMENT_TEXT.

    Args:
        instrument: Instrument to inspect (not owned)

    Returns:
        Variant description or UNKNOWN_INSTRUMENT_TEXT
    """
    try:
        return describe_variant(instrument)
    except UnknownInstrumentError as e:
        logger.warning("%s", e)
        return UNKNOWN_INSTRUMENT_TEXT
