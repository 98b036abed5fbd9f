"""
Persistent directed conversion graph.

Adjacency is ``source -> (target -> converter)``. Mutations return a new
graph that shares every adjacency row it did not touch with the original.
"""

from collections.abc import Hashable, Iterator, Mapping

from unacy.models.converter import ConversionEdge, Converter


class UnitGraph:
    """Immutable adjacency map of directed converters between units."""

    __slots__ = ("_adjacency", "_edge_count")

    def __init__(self, adjacency: Mapping[Hashable, Mapping[Hashable, Converter]] | None = None):
        """
        Initialize graph.

        Args:
            adjacency: Source -> (target -> converter) rows. Rows are not copied,
                callers must not mutate them afterwards.
        """
        self._adjacency: dict[Hashable, Mapping[Hashable, Converter]] = dict(adjacency or {})
        self._edge_count = sum(len(row) for row in self._adjacency.values())

    def add_edge(self, source: Hashable, target: Hashable, converter: Converter) -> "UnitGraph":
        """
        Return a new graph with ``source -> target`` added.

        An existing edge for the same pair is overwritten (last write wins).
        """
        row = dict(self._adjacency.get(source, {}))
        row[target] = converter

        adjacency = dict(self._adjacency)
        adjacency[source] = row
        return UnitGraph(adjacency)

    def get_edge(self, source: Hashable, target: Hashable) -> Converter | None:
        """Direct converter for the pair, or None."""
        row = self._adjacency.get(source)
        if row is None:
            return None
        return row.get(target)

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        row = self._adjacency.get(source)
        return row is not None and target in row

    def neighbors(self, source: Hashable) -> Iterator[Hashable]:
        """Targets reachable in one hop, in registration order."""
        return iter(self._adjacency.get(source, ()))

    def all_units(self) -> set[Hashable]:
        """Every unit appearing as a source or a target."""
        units: set[Hashable] = set(self._adjacency)
        for row in self._adjacency.values():
            units.update(row)
        return units

    def edges(self) -> Iterator[ConversionEdge]:
        """All edges, grouped by source in registration order."""
        for source, row in self._adjacency.items():
            for target, converter in row.items():
                yield ConversionEdge(source=source, target=target, converter=converter)

    def __len__(self) -> int:
        return self._edge_count

    def __contains__(self, unit: object) -> bool:
        return unit in self.all_units()

    def __repr__(self) -> str:
        return f"UnitGraph(units={len(self.all_units())}, edges={self._edge_count})"
