"""
Per-unit metadata storage, independent of the conversion graph.
"""

from collections.abc import Hashable, Iterator, Mapping
from typing import Any

from unacy.models.unit import UnitMetadata


class MetadataStore:
    """
    Immutable mapping of unit -> metadata.

    A unit may have metadata without any edges and edges without any
    metadata; nothing here looks at the graph.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[Hashable, Mapping[str, Any]] | None = None):
        self._data: dict[Hashable, Mapping[str, Any]] = dict(data or {})

    def set(self, unit: Hashable, partial: Mapping[str, Any]) -> "MetadataStore":
        """
        Return a new store with ``partial`` shallow-merged into the unit's metadata.

        New keys override existing ones; unspecified existing keys survive.

        Args:
            unit: Unit identifier
            partial: Keys to add or replace

        Returns:
            Updated store (self is unchanged)
        """
        merged = {**self._data.get(unit, {}), **partial}
        data = dict(self._data)
        data[unit] = merged
        return MetadataStore(data)

    def get(self, unit: Hashable) -> UnitMetadata:
        """Copy of the unit's metadata (empty dict if none set)."""
        return dict(self._data.get(unit, {}))

    def units(self) -> "set[Hashable]":
        return set(self._data)

    def __contains__(self, unit: object) -> bool:
        return unit in self._data

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)
