"""
Converter registry for Unacy.

- ConverterRegistry: immutable facade (register / allow / convert / metadata)
- create_registry: empty registry factory
- UnitAccessors: ``registry.units.A.to.B(value)`` accessor layer
"""

from unacy.core.registry.accessors import TargetAccessors, UnitAccessor, UnitAccessors
from unacy.core.registry.registry import ConversionRequest, ConverterRegistry, create_registry

__all__ = [
    "ConverterRegistry",
    "ConversionRequest",
    "create_registry",
    "UnitAccessors",
    "UnitAccessor",
    "TargetAccessors",
]
