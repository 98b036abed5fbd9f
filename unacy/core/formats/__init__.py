"""Formatter/parser interface for converted values."""

from unacy.core.formats.formatters import (
    Formatter,
    FormatterParser,
    Parser,
    create_parser_with_schema,
)

__all__ = [
    "Formatter",
    "Parser",
    "FormatterParser",
    "create_parser_with_schema",
]
