"""
Helper functions for inspecting runtime values.
"""

import json
import math
from typing import Any

from ..undefined import UNDEFINED


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Check for int or float, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    """Check for a list or tuple. Strings are not sequences here."""
    return isinstance(value, (list, tuple))


def is_plain_object(value: Any) -> bool:
    return isinstance(value, dict)


def literal_equals(value: Any, literal: Any) -> bool:
    """
    Deep-equality for literals.

    `bool` is kept apart from numbers (True != 1), but 1 == 1.0 still holds
    and NaN equals NaN.
    """
    if isinstance(value, bool) or isinstance(literal, bool):
        return type(value) is type(literal) and value == literal
    if isinstance(value, str) != isinstance(literal, str):
        return False
    if not isinstance(value, (str, int, float)):
        return False
    if isinstance(value, float) and isinstance(literal, float):
        if math.isnan(value) and math.isnan(literal):
            return True
    return value == literal


def to_json(value: Any) -> str:
    """
    Render a value as compact JSON for use in messages.

    UNDEFINED renders as `undefined` at the top level, is dropped from dict
    values and becomes null inside sequences.
    """
    if value is UNDEFINED:
        return "undefined"
    try:
        return json.dumps(
            _jsonable(value), separators=(",", ":"), ensure_ascii=False
        )
    except (TypeError, ValueError, RecursionError):
        return repr(value)


def _jsonable(value: Any) -> Any:
    """Strip UNDEFINED out of a value so json can encode it."""
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items() if v is not UNDEFINED}
    if isinstance(value, (list, tuple)):
        return [None if v is UNDEFINED else _jsonable(v) for v in value]
    return value
