"""
Custom exception hierarchy for Unacy.

Provides structured error types for conversion failures.
All exceptions inherit from UnacyError for easy catching.
"""

from collections.abc import Hashable, Sequence
from typing import Any


class UnacyError(Exception):
    """
    Base exception for all Unacy errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """
        Initialize Unacy error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class GraphError(UnacyError):
    """
    Base exception for conversion graph errors.
    Used for errors raised while resolving paths through the graph.
    """

    pass


class CycleError(GraphError):
    """
    Cycle detected in a conversion request.
    Raised when a conversion from a unit to itself is requested.
    """

    def __init__(self, path: Sequence[Hashable]):
        self.path = list(path)
        path_str = " → ".join(str(unit) for unit in self.path)
        super().__init__(
            f"Cycle detected in conversion path: {path_str}",
            context={"path": self.path},
        )


class MaxDepthError(GraphError):
    """
    Maximum conversion depth exceeded.
    Raised when no path exists within the configured number of edges.
    """

    def __init__(self, source: Hashable, target: Hashable, max_depth: int):
        self.source = source
        self.target = target
        self.max_depth = max_depth
        super().__init__(
            f"Maximum conversion depth of {max_depth} exceeded "
            f"when converting from {source} to {target}",
            context={"source": source, "target": target, "max_depth": max_depth},
        )


class MissingEdgeError(GraphError):
    """
    Missing edge errors.
    Raised when a conversion path refers to an edge the graph doesn't hold.
    """

    def __init__(self, source: Hashable, target: Hashable):
        self.source = source
        self.target = target
        super().__init__(
            f"No converter registered from {source} to {target}",
            context={"source": source, "target": target},
        )


class ConversionError(UnacyError):
    """
    Conversion errors.
    Raised when a value cannot be converted between two units.
    """

    def __init__(self, source: Hashable, target: Hashable, reason: str | None = None):
        self.source = source
        self.target = target
        self.reason = reason
        reason_str = f": {reason}" if reason else ""
        super().__init__(
            f"Cannot convert from {source} to {target}{reason_str}",
            context={"source": source, "target": target, "reason": reason},
        )


class ParseError(UnacyError):
    """
    Parse errors.
    Raised when a string cannot be parsed into a formatted value.
    """

    def __init__(self, format: str, input: Any, reason: str):
        self.format = format
        self.input = input
        self.reason = reason

        text = str(input)
        truncated = f"{text[:50]}..." if len(text) > 50 else text
        display = '""' if text == "" else truncated
        super().__init__(
            f'Cannot parse "{display}" as {format}: {reason}',
            context={"format": format, "input": input},
        )


class ValidationError(UnacyError):
    """
    Validation errors.
    Raised when arguments passed to the registry are invalid.
    """

    pass


class ConfigurationError(UnacyError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass
