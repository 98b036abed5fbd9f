"""
Formatter and parser interface for values produced by conversions.

Formatting sits downstream of the registry: it consumes converted values
and never calls back into it.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from unacy.utils.exceptions import ParseError

T = TypeVar("T")

# value -> string; output must be accepted by the matching Parser
Formatter = Callable[[Any], str]

# string -> value; must raise ParseError rather than return an invalid value
Parser = Callable[[str], Any]


class FormatterParser(BaseModel):
    """Paired formatter/parser for round-trip string conversion."""

    model_config = ConfigDict(frozen=True)

    format: Formatter
    parse: Parser


def create_parser_with_schema(schema: type[T] | TypeAdapter[T] | Any, format: str) -> Callable[[str], T]:
    """
    Create a parser that validates input against a pydantic schema.

    Args:
        schema: Type (e.g. ``Annotated[str, StringConstraints(pattern=...)]``)
            or a ready TypeAdapter
        format: Format name used in error messages

    Returns:
        Parser raising ParseError on invalid input

    Example:
        parse_hex = create_parser_with_schema(
            Annotated[str, StringConstraints(pattern=r"^#[0-9A-Fa-f]{6}$")],
            "HexColor",
        )
    """
    adapter = schema if isinstance(schema, TypeAdapter) else TypeAdapter(schema)

    def parse(input: str) -> T:
        try:
            return adapter.validate_python(input)
        except PydanticValidationError as e:
            raise ParseError(format, input, str(e)) from e

    parse.__name__ = f"parse_{format}"
    return parse
