"""
Reusable coercion rules for environment schemas.

Environment variables arrive as strings; these annotated types turn them
into typed values during pydantic validation.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

BOOLEAN_STRINGS = ("true", "false", "")


def parse_boolean_string(value: Any) -> bool:
    """
    Coerce a boolean environment value.

    Only the literal string "true" (or the boolean True) is truthy.
    "false", "", False and None are all False. Matching is exact.

    Args:
        value: Raw value from the key/value table.

    Returns:
        The coerced boolean.

    Raises:
        ValueError: If value is any other string or type.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value in BOOLEAN_STRINGS:
        return value == "true"
    msg = f"expected 'true', 'false' or '' but got {value!r}"
    raise ValueError(msg)


BooleanAsString = Annotated[
    bool,
    BeforeValidator(parse_boolean_string),
    Field(default=False),
]
"""Boolean field parsed from "true"/"false"/"", False when absent."""
