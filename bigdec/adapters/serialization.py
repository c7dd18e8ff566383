"""Pydantic integration for BigDecimal.

DecimalText is an Annotated type for pydantic models: it accepts canonical
or scientific text, ints and BigDecimal instances, and always serializes to
canonical text so values survive a JSON round trip unchanged.

Floats are rejected; a float has already lost the decimal digits the caller
meant, so they must be sent as strings.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler, TypeAdapter
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from bigdec.decimal import BigDecimal
from bigdec.errors import DecimalError

__all__ = [
    "DECIMAL_TEXT_PATTERN",
    "DecimalText",
    "validate_decimal_text",
    "serialize_decimal_text",
    "to_json",
    "from_json",
]

# Canonical form plus the scientific notation the parser accepts
DECIMAL_TEXT_PATTERN = r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$"


def validate_decimal_text(value: Any) -> BigDecimal:
    """Validate and convert a model field value to BigDecimal.

    Args:
        value: str, int or BigDecimal

    Returns:
        The parsed BigDecimal

    Raises:
        ValueError: If value is a float, has an unsupported type or is not a
            valid decimal string
    """
    if isinstance(value, BigDecimal):
        if not value.is_valid:
            raise ValueError("BigDecimal is uninitialized")
        return value

    if isinstance(value, bool):
        raise ValueError("Decimal must be string or int, got bool")

    if isinstance(value, int):
        return BigDecimal.from_int(value)

    if isinstance(value, float):
        raise ValueError(f"Decimal must be sent as a string to keep its digits, got float {value!r}")

    if not isinstance(value, str):
        raise ValueError(f"Decimal must be string or int, got {type(value).__name__}")

    try:
        return BigDecimal.from_string(value)
    except DecimalError as err:
        raise ValueError(f"Invalid decimal string: '{value}' ({err})") from err


def serialize_decimal_text(value: BigDecimal) -> str:
    """Render a BigDecimal in canonical text."""
    return value.to_string()


class _DecimalTextSchema:
    """Pydantic schema hooks for BigDecimal fields."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            validate_decimal_text,
            serialization=core_schema.plain_serializer_function_ser_schema(
                serialize_decimal_text,
                when_used="always",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": DECIMAL_TEXT_PATTERN,
            "description": "Arbitrary-precision decimal as text",
        }


# Arbitrary-precision decimal serialized as canonical text
DecimalText = Annotated[BigDecimal, _DecimalTextSchema]

_ADAPTER: TypeAdapter[BigDecimal] = TypeAdapter(DecimalText)


def to_json(value: BigDecimal) -> str:
    """Encode a BigDecimal as a JSON string literal, e.g. '"123.45"'."""
    return _ADAPTER.dump_json(value).decode()


def from_json(data: str | bytes) -> BigDecimal:
    """Decode a JSON string (or integer) literal into a BigDecimal.

    Raises:
        pydantic.ValidationError: If the literal is not a valid decimal
    """
    return _ADAPTER.validate_json(data)
