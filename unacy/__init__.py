"""
Unacy - unit and format conversion registry.

Stores directed converters between units and composes multi-hop
conversions along the shortest path when no direct converter exists.
"""

from unacy.config import MAX_DEPTH, Config, LoggingConfig, RegistryConfig
from unacy.core.formats import Formatter, FormatterParser, Parser, create_parser_with_schema
from unacy.core.registry import ConversionRequest, ConverterRegistry, create_registry
from unacy.models import BidirectionalConverter, ConversionEdge, Converter, UnitDefinition
from unacy.utils.exceptions import (
    ConfigurationError,
    ConversionError,
    CycleError,
    MaxDepthError,
    ParseError,
    UnacyError,
    ValidationError,
)
from unacy.utils.logger import setup_logging, teardown_logging

__version__ = "0.1.0"

__all__ = [
    # Registry
    "ConverterRegistry",
    "ConversionRequest",
    "create_registry",
    "MAX_DEPTH",
    # Models
    "Converter",
    "BidirectionalConverter",
    "ConversionEdge",
    "UnitDefinition",
    # Formatting
    "Formatter",
    "Parser",
    "FormatterParser",
    "create_parser_with_schema",
    # Config
    "Config",
    "RegistryConfig",
    "LoggingConfig",
    "setup_logging",
    "teardown_logging",
    # Errors
    "UnacyError",
    "ConfigurationError",
    "CycleError",
    "MaxDepthError",
    "ConversionError",
    "ParseError",
    "ValidationError",
]
