"""Utility modules for Unacy."""

from unacy.utils.exceptions import (
    ConfigurationError,
    ConversionError,
    CycleError,
    GraphError,
    MaxDepthError,
    MissingEdgeError,
    ParseError,
    UnacyError,
    ValidationError,
)
from unacy.utils.logger import get_logger, setup_logging, teardown_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "teardown_logging",
    # Exceptions
    "UnacyError",
    "GraphError",
    "CycleError",
    "MaxDepthError",
    "MissingEdgeError",
    "ConversionError",
    "ParseError",
    "ValidationError",
    "ConfigurationError",
]
