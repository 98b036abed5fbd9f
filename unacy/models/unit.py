"""
Unit definition and metadata models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Arbitrary descriptive key -> value data attached to a unit
UnitMetadata = dict[str, Any]


class UnitDefinition(BaseModel):
    """
    Named unit with optional descriptive metadata.

    ``name`` is the unit identifier used in the conversion graph.
    Any extra keys are kept and stored as metadata verbatim.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str = Field(..., min_length=1, description="Unique unit identifier")
    abbreviation: str | None = Field(default=None, description='Short form, e.g. "°C"')
    symbol: str | None = None
    description: str | None = None
    format: str | None = Field(default=None, description='Display template, e.g. "${value}°C"')

    def to_metadata(self) -> UnitMetadata:
        """Metadata mapping for this unit (unset optional fields omitted)."""
        return self.model_dump(exclude_none=True)
