"""
Brass instrument domain model.
"""

from typing import ClassVar

from pydantic import Field

from instrument_catalog.domain.instrument import Instrument, InstrumentKind


class BrassInstrument(Instrument):
    """A brass-family wind instrument, such as a trumpet or trombone."""

    kind: ClassVar[InstrumentKind] = InstrumentKind.BRASS

    brass_type: str = Field(
        ...,
        description="Free-form brass label, usually the alloy (e.g., Yellow Brass)",
    )

    def describe(self) -> str:
        return (
            f"{self.kind.label}: {self.name}\n"
            f"Material: {self.material}\n"
            f"Brass type: {self.brass_type}"
        )
