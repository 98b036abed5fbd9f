"""
Unit accessor API: ``registry.units.Celsius.to.Fahrenheit(25)``.

A thin layer over ``ConverterRegistry.convert``. Unit names are opaque, so
any attribute resolves to an accessor; unknown pairs only fail when a value
is converted.
"""

from collections.abc import Callable, Hashable, Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from unacy.core.registry.registry import ConverterRegistry


class UnitAccessors:
    """Entry point keyed by source unit."""

    __slots__ = ("_registry",)

    def __init__(self, registry: "ConverterRegistry"):
        self._registry = registry

    def __getattr__(self, name: str) -> "UnitAccessor":
        if name.startswith("__"):
            raise AttributeError(name)
        return UnitAccessor(self._registry, name)

    def __getitem__(self, unit: Hashable) -> "UnitAccessor":
        return UnitAccessor(self._registry, unit)

    def __contains__(self, unit: object) -> bool:
        return unit in self._registry.units_known()

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._registry.units_known())

    def __dir__(self) -> list[str]:
        return sorted(unit for unit in self._registry.units_known() if isinstance(unit, str))


class UnitAccessor:
    """Conversions out of a single source unit."""

    __slots__ = ("_registry", "unit")

    def __init__(self, registry: "ConverterRegistry", unit: Hashable):
        self._registry = registry
        self.unit = unit

    @property
    def to(self) -> "TargetAccessors":
        return TargetAccessors(self._registry, self.unit)

    @property
    def metadata(self) -> dict[str, Any]:
        return self._registry.get_metadata(self.unit)

    def __repr__(self) -> str:
        return f"UnitAccessor({self.unit!r})"


class TargetAccessors:
    """Bound conversion functions from one source unit, keyed by target."""

    __slots__ = ("_registry", "_source")

    def __init__(self, registry: "ConverterRegistry", source: Hashable):
        self._registry = registry
        self._source = source

    def __getattr__(self, name: str) -> Callable[[Any], Any]:
        if name.startswith("__"):
            raise AttributeError(name)
        return self[name]

    def __getitem__(self, target: Hashable) -> Callable[[Any], Any]:
        registry = self._registry
        source = self._source

        def convert(value: Any) -> Any:
            return registry.convert(value, source).to(target)

        convert.__name__ = f"{source}_to_{target}"
        return convert
