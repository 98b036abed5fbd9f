"""
Converter models: callables between units and the edges that hold them.
"""

from collections.abc import Callable, Hashable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Pure, deterministic value -> value function from one unit to another
Converter = Callable[[Any], Any]


class BidirectionalConverter(BaseModel):
    """
    Forward and reverse converters between two units.

    Registered as two independent directed edges. Accepts the reverse
    converter under its wire name ``from`` when validated from a mapping.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    to: Converter
    from_: Converter = Field(alias="from")


class ConversionEdge(BaseModel):
    """Directed edge of the conversion graph."""

    model_config = ConfigDict(frozen=True)

    source: Hashable
    target: Hashable
    converter: Converter
