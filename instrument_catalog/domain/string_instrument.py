"""
String instrument domain model.
"""

from typing import ClassVar

from pydantic import Field

from instrument_catalog.domain.instrument import Instrument, InstrumentKind


class StringInstrument(Instrument):
    """An instrument played on strings, such as a guitar or violin."""

    kind: ClassVar[InstrumentKind] = InstrumentKind.STRING

    string_count: int = Field(
        ...,
        description="Number of strings",
        ge=0,
    )

    def describe(self) -> str:
        return (
            f"{self.kind.label}: {self.name}\n"
            f"Material: {self.material}\n"
            f"Number of strings: {self.string_count}"
        )
