"""
Converter Registry - immutable facade over the conversion graph.

Key responsibilities:
- Register directed and bidirectional converters
- Resolve converters: cache -> direct edge -> shortest path composition
- Fluent conversion API
- Unit metadata passthrough

Every mutating call returns a new registry. Query calls may populate the
private path cache, which is never shared between registry versions.
"""

from collections.abc import Hashable, Iterator, Mapping
from functools import cached_property
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from unacy.config import Config, RegistryConfig
from unacy.core.cache import PathCache
from unacy.core.graph import UnitGraph, compose_converters, find_shortest_path
from unacy.core.metadata import MetadataStore
from unacy.core.registry.accessors import UnitAccessors
from unacy.models.converter import BidirectionalConverter, ConversionEdge, Converter
from unacy.models.unit import UnitDefinition, UnitMetadata
from unacy.utils.exceptions import ConversionError, CycleError, ValidationError
from unacy.utils.logger import get_logger

logger = get_logger(__name__)

Unit = Hashable | UnitDefinition


def _unit_id(unit: Unit) -> Hashable:
    """Identifier for a unit given either as a plain key or a definition."""
    if isinstance(unit, UnitDefinition):
        return unit.name
    return unit


class ConversionRequest:
    """Pending conversion of a value, completed by ``to()``."""

    __slots__ = ("_registry", "value", "source")

    def __init__(self, registry: "ConverterRegistry", value: Any, source: Hashable):
        self._registry = registry
        self.value = value
        self.source = source

    def to(self, target: Unit) -> Any:
        """
        Convert the value into the target unit.

        Raises:
            ConversionError: If no converter exists between the units
            CycleError: If target is the source unit
            MaxDepthError: If no path exists within the depth limit
        """
        target = _unit_id(target)
        converter = self._registry.get_converter(self.source, target)
        if converter is None:
            raise ConversionError(self.source, target, "No converter found")
        return converter(self.value)


class ConverterRegistry:
    """
    Registry of unit converters with automatic multi-hop composition.

    Instances are values: register/set_metadata never modify ``self``.
    """

    def __init__(
        self,
        graph: UnitGraph | None = None,
        metadata: MetadataStore | None = None,
        cache: PathCache | None = None,
        config: RegistryConfig | None = None,
    ):
        """
        Initialize registry.

        Args:
            graph: Conversion graph (default: empty)
            metadata: Unit metadata store (default: empty)
            cache: Path cache resolved against ``graph`` (default: fresh cache)
            config: Registry configuration
        """
        self._config = config or RegistryConfig()
        self._graph = graph if graph is not None else UnitGraph()
        self._metadata = metadata if metadata is not None else MetadataStore()
        self._cache = (
            cache if cache is not None else PathCache(enabled=self._config.cache_enabled)
        )

    def _evolve(
        self,
        graph: UnitGraph | None = None,
        metadata: MetadataStore | None = None,
    ) -> "ConverterRegistry":
        """New registry sharing this one's config, with graph and/or metadata replaced."""
        if graph is not None:
            # Graph changed: cached paths may be stale
            cache = PathCache(enabled=self._config.cache_enabled)
        else:
            graph = self._graph
            cache = self._cache.copy()

        return ConverterRegistry(
            graph=graph,
            metadata=metadata if metadata is not None else self._metadata,
            cache=cache,
            config=self._config,
        )

    # ═══════════════════════════════════════════════════════════
    # REGISTRATION
    # ═══════════════════════════════════════════════════════════

    def register(
        self,
        source: Unit | Mapping[str, Any],
        target: Unit | None = None,
        converter: Converter | BidirectionalConverter | Mapping[str, Converter] | None = None,
    ) -> "ConverterRegistry":
        """
        Register a converter between two units.

        ``register(definition)`` with a single argument registers unit
        metadata only (see ``register_unit``). A ``BidirectionalConverter`` or
        a ``{"to": ..., "from": ...}`` mapping registers both directions.

        Args:
            source: Source unit (identifier or UnitDefinition)
            target: Destination unit (identifier or UnitDefinition)
            converter: Converter function or bidirectional pair

        Returns:
            New registry with the edge(s) added

        Raises:
            ValidationError: If the converter is missing or not callable
            CycleError: If source and target are the same unit
        """
        if target is None and converter is None:
            return self.register_unit(source)

        if isinstance(converter, (BidirectionalConverter, Mapping)):
            return self.register_bidirectional(source, target, converter)

        if not callable(converter):
            raise ValidationError(
                f"Converter from {_unit_id(source)} to {_unit_id(target)} must be callable",
                context={"converter": repr(converter)},
            )

        source_id, target_id = self._check_pair(source, target)
        graph = self._graph.add_edge(source_id, target_id, converter)
        logger.debug(f"Registered converter {source_id} -> {target_id}")

        return self._evolve(graph=graph, metadata=self._merge_definitions(source, target))

    def register_bidirectional(
        self,
        source: Unit,
        target: Unit,
        converter: BidirectionalConverter | Mapping[str, Converter],
    ) -> "ConverterRegistry":
        """
        Register both directions between two units in one step.

        Args:
            source: First unit
            target: Second unit
            converter: Pair with ``to`` (source -> target) and ``from`` (target -> source)

        Returns:
            New registry with both edges added
        """
        if not isinstance(converter, BidirectionalConverter):
            try:
                converter = BidirectionalConverter.model_validate(converter)
            except PydanticValidationError as e:
                raise ValidationError(
                    f"Bidirectional converter needs callable 'to' and 'from': {e}"
                ) from e

        source_id, target_id = self._check_pair(source, target)
        graph = self._graph.add_edge(source_id, target_id, converter.to).add_edge(
            target_id, source_id, converter.from_
        )
        logger.debug(f"Registered bidirectional converter {source_id} <-> {target_id}")

        return self._evolve(graph=graph, metadata=self._merge_definitions(source, target))

    def register_unit(self, definition: UnitDefinition | Mapping[str, Any]) -> "ConverterRegistry":
        """
        Register a unit's metadata without any converter.

        Args:
            definition: UnitDefinition or mapping with at least a ``name`` key

        Returns:
            New registry with the definition merged into the unit's metadata
        """
        if not isinstance(definition, UnitDefinition):
            try:
                definition = UnitDefinition.model_validate(definition)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid unit definition: {e}") from e

        return self.set_metadata(definition.name, definition.to_metadata())

    def allow(self, source: Unit, target: Unit) -> "ConverterRegistry":
        """
        Check that a conversion path already exists.

        Does not change graph or cache state; returns this registry so calls
        can be chained.

        Raises:
            ConversionError: If no converter can be resolved
        """
        source_id, target_id = _unit_id(source), _unit_id(target)
        if self.get_converter(source_id, target_id) is None:
            raise ConversionError(source_id, target_id, "No converter found")
        return self

    def _check_pair(self, source: Unit, target: Unit) -> tuple[Hashable, Hashable]:
        source_id, target_id = _unit_id(source), _unit_id(target)
        if source_id == target_id:
            raise CycleError([source_id, target_id])
        return source_id, target_id

    def _merge_definitions(self, *units: Unit) -> MetadataStore:
        metadata = self._metadata
        for unit in units:
            if isinstance(unit, UnitDefinition):
                metadata = metadata.set(unit.name, unit.to_metadata())
        return metadata

    # ═══════════════════════════════════════════════════════════
    # RESOLUTION
    # ═══════════════════════════════════════════════════════════

    def get_converter(self, source: Unit, target: Unit) -> Converter | None:
        """
        Get a converter, direct or composed along the shortest path.

        Resolution order: cache, direct edge, breadth-first search.
        Composed results are cached.

        Args:
            source: Source unit
            target: Destination unit

        Returns:
            Converter, or None if the search found no path

        Raises:
            CycleError: If source and target are the same unit
            MaxDepthError: If no path exists within the configured depth
        """
        source, target = _unit_id(source), _unit_id(target)
        if source == target:
            raise CycleError([source, target])

        cached = self._cache.get(source, target)
        if cached is not None:
            logger.debug(f"Path cache hit: {source} -> {target}")
            return cached

        direct = self._graph.get_edge(source, target)
        if direct is not None:
            return direct

        path = find_shortest_path(source, target, self._graph, self._config.max_depth)
        if path is None:
            logger.debug(f"No conversion path: {source} -> {target}")
            return None

        composed = compose_converters(path, self._graph)
        self._cache.put(source, target, composed)
        logger.debug(f"Composed {len(path) - 1}-hop converter: {' -> '.join(map(str, path))}")
        return composed

    def has_converter(self, source: Unit, target: Unit) -> bool:
        """Whether a converter can be resolved (errors still propagate)."""
        return self.get_converter(source, target) is not None

    def convert(self, value: Any, unit: Unit) -> ConversionRequest:
        """
        Start a fluent conversion: ``registry.convert(25, "Celsius").to("Fahrenheit")``.

        Args:
            value: Value in ``unit``
            unit: Source unit

        Returns:
            Request whose ``to(target)`` performs the conversion
        """
        return ConversionRequest(self, value, _unit_id(unit))

    # ═══════════════════════════════════════════════════════════
    # METADATA
    # ═══════════════════════════════════════════════════════════

    def set_metadata(
        self, unit: Unit, partial: Mapping[str, Any] | None = None, **fields: Any
    ) -> "ConverterRegistry":
        """
        Shallow-merge metadata into a unit's existing metadata.

        Args:
            unit: Unit identifier
            partial: Keys to add or replace
            **fields: More keys, applied after ``partial``

        Returns:
            New registry with updated metadata
        """
        unit_id = _unit_id(unit)
        metadata = self._metadata.set(unit_id, {**(partial or {}), **fields})
        return self._evolve(metadata=metadata)

    def get_metadata(self, unit: Unit) -> UnitMetadata:
        """Metadata for a unit (empty dict if none set)."""
        return self._metadata.get(_unit_id(unit))

    # ═══════════════════════════════════════════════════════════
    # INTROSPECTION
    # ═══════════════════════════════════════════════════════════

    @cached_property
    def units(self) -> UnitAccessors:
        """Unit accessor API: ``registry.units.Celsius.to.Fahrenheit(25)``."""
        return UnitAccessors(self)

    def units_known(self) -> set[Hashable]:
        """Units that appear in the graph or carry metadata."""
        return self._graph.all_units() | self._metadata.units()

    def edges(self) -> Iterator[ConversionEdge]:
        return self._graph.edges()

    @property
    def graph(self) -> UnitGraph:
        return self._graph

    @property
    def metadata(self) -> MetadataStore:
        return self._metadata

    @property
    def config(self) -> RegistryConfig:
        return self._config

    def __repr__(self) -> str:
        return (
            f"ConverterRegistry(units={len(self.units_known())}, edges={len(self._graph)}, "
            f"max_depth={self._config.max_depth})"
        )


def create_registry(config: Config | RegistryConfig | None = None) -> ConverterRegistry:
    """
    Create an empty converter registry.

    Args:
        config: Main config or registry config (default: RegistryConfig())

    Returns:
        Empty registry
    """
    if isinstance(config, Config):
        config = config.registry
    return ConverterRegistry(config=config)
