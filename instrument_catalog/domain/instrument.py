"""
Instrument domain model.

Base shape shared by every instrument variant in the catalog.
"""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class InstrumentKind(str, Enum):
    """Kind of musical instrument."""

    GENERIC = "generic"
    STRING = "string"
    BRASS = "brass"

    @property
    def label(self) -> str:
        """Return the heading used when describing this kind."""
        mapping = {
            "generic": "Instrument",
            "string": "String Instrument",
            "brass": "Brass Instrument",
        }
        return mapping[self.value]


class Instrument(BaseModel):
    """
    A musical instrument.

    Variants extend this with their own attributes and override
    describe(). Instances are immutable once created.
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[InstrumentKind] = InstrumentKind.GENERIC

    name: str = Field(
        ...,
        description="Instrument name (e.g., Guitar, Trumpet)",
    )
    material: str = Field(
        ...,
        description="Primary construction material (e.g., Wood, Brass)",
    )

    def describe(self) -> str:
        """Human-readable description of the shared fields."""
        return f"{self.kind.label}: {self.name}\nMaterial: {self.material}"
