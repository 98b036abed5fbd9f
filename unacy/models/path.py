"""Conversion path model."""

from collections.abc import Hashable, Iterator

from pydantic import BaseModel, ConfigDict, field_validator


class ConversionPath(BaseModel):
    """Ordered, non-repeating sequence of units from a source to a target."""

    model_config = ConfigDict(frozen=True)

    units: tuple[Hashable, ...]

    @field_validator("units")
    @classmethod
    def validate_units(cls, v: tuple[Hashable, ...]) -> tuple[Hashable, ...]:
        """Require at least one edge and no repeated unit."""
        if len(v) < 2:
            raise ValueError("Path must contain at least 2 units")
        if len(set(v)) != len(v):
            raise ValueError("Path must not repeat a unit")
        return v

    @property
    def source(self) -> Hashable:
        return self.units[0]

    @property
    def target(self) -> Hashable:
        return self.units[-1]

    @property
    def hops(self) -> int:
        """Number of edges along the path."""
        return len(self.units) - 1

    def pairs(self) -> Iterator[tuple[Hashable, Hashable]]:
        """Consecutive (source, target) pairs, in path order."""
        return zip(self.units, self.units[1:])

    def __str__(self) -> str:
        return " → ".join(str(unit) for unit in self.units)
