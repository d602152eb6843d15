"""
In-memory ordered collection of instruments.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from instrument_catalog.catalog.errors import CatalogIndexError
from instrument_catalog.domain import Instrument, InstrumentKind
from instrument_catalog.logging import get_logger

logger = get_logger(__name__)


class Catalog:
    """
    Ordered catalog owning a sequence of instruments.

    Any slot may hold any instrument variant. Insertion order is
    display order; traversal never mutates the catalog.
    """

    def __init__(self, instruments: Iterable[Instrument] | None = None) -> None:
        """
        Initialize catalog.

        Args:
            instruments: Optional instruments to append in order.
        """
        self._items: list[Instrument] = []
        if instruments is not None:
            self.extend(instruments)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Instrument]:
        return iter(self._items)

    def append(self, instrument: Instrument) -> None:
        """
        Add an instrument to the end of the catalog.

        Args:
            instrument: Instrument to add

        Raises:
            TypeError: If the value is not an Instrument
        """
        if not isinstance(instrument, Instrument):
            raise TypeError(
                f"Catalog entries must be Instrument, got {type(instrument).__name__}"
            )
        self._items.append(instrument)
        logger.debug(
            "Appended %s '%s' at position %d",
            instrument.kind.value,
            instrument.name,
            len(self._items) - 1,
        )

    def extend(self, instruments: Iterable[Instrument]) -> None:
        """Append each instrument in order."""
        for instrument in instruments:
            self.append(instrument)

    def get(self, index: int) -> Instrument:
        """
        Get the instrument at a 0-based position.

        Negative indexes are out of range; no wrap-around is applied.

        Args:
            index: Position in insertion order

        Returns:
            The instrument previously appended at that position

        Raises:
            CatalogIndexError: If index is outside [0, length)
        """
        if not 0 <= index < len(self._items):
            logger.error("Catalog index %d out of range (length %d)", index, len(self._items))
            raise CatalogIndexError(index, len(self._items))
        return self._items[index]

    def descriptions(self) -> Iterator[str]:
        """
        Describe every instrument in insertion order.

        Each call starts a fresh traversal.
        """
        return (instrument.describe() for instrument in self._items)

    def for_each(self, fn: Callable[[Instrument], Any] | None = None) -> list[Any]:
        """
        Apply a function to every instrument in insertion order.

        Args:
            fn: Function to call per instrument. Defaults to describe().

        Returns:
            Results in insertion order
        """
        if fn is None:
            return list(self.descriptions())
        return [fn(instrument) for instrument in self._items]

    def by_kind(self, kind: InstrumentKind) -> list[Instrument]:
        """
        Get instruments of one kind.

        Args:
            kind: Instrument kind to filter by

        Returns:
            Matching instruments in insertion order
        """
        return [item for item in self._items if item.kind == kind]

    def count(self) -> int:
        """Get total number of instruments."""
        return len(self._items)

    def clear(self) -> None:
        """Release every held instrument."""
        released = len(self._items)
        self._items.clear()
        logger.debug("Catalog cleared (%d instruments released)", released)
