"""
Compose edge converters along a conversion path.
"""

from collections.abc import Hashable, Sequence
from functools import reduce
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from unacy.core.graph.unit_graph import UnitGraph
from unacy.models.converter import Converter
from unacy.models.path import ConversionPath
from unacy.utils.exceptions import MissingEdgeError, ValidationError


def compose_converters(path: Sequence[Hashable] | ConversionPath, graph: UnitGraph) -> Converter:
    """
    Chain the converters along a path into one converter.

    Converters are applied strictly left to right. No rounding or precision
    handling is done here.

    Args:
        path: Units from source to target
        graph: Graph holding an edge for every consecutive pair of the path

    Returns:
        Composed converter

    Raises:
        ValidationError: If the path has fewer than 2 units or repeats a unit
        MissingEdgeError: If a consecutive pair has no registered converter
    """
    if not isinstance(path, ConversionPath):
        try:
            path = ConversionPath(units=tuple(path))
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid conversion path: {e}") from e

    converters: list[Converter] = []
    for source, target in path.pairs():
        converter = graph.get_edge(source, target)
        if converter is None:
            raise MissingEdgeError(source, target)
        converters.append(converter)

    steps = tuple(converters)

    def composed(value: Any) -> Any:
        return reduce(lambda acc, step: step(acc), steps, value)

    composed.__name__ = f"composed_{path.hops}_hops"
    composed.__doc__ = f"Convert along {path}"
    return composed
