"""
Validation dispatch for shapecheck schemas.

`validate` walks a schema and a value together. Structural kinds (array,
tuple, map, object) stop at the first failing element or key and prefix the
child's error with its index or key; unions try every member and keep all
failures as children.
"""

from __future__ import annotations

from typing import Any

from .context import is_strict
from .lib.value_helpers import (
    is_boolean,
    is_number,
    is_plain_object,
    is_sequence,
    is_string,
    literal_equals,
    to_json,
)
from .nodes import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    LiteralSchema,
    MapSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    StringSchema,
    TupleSchema,
    UndefinedSchema,
    UnionSchema,
)
from .types import Err, Ok, ValidationError
from .undefined import UNDEFINED


def validate(
    schema: Schema, value: Any, *, strict: bool | None = None
) -> ValidationError | None:
    """
    Validate a value against a schema.

    Args:
        schema: The schema to check against
        value: Any runtime value; use UNDEFINED for "absent"
        strict: Reject undeclared keys in every object schema. None (default)
               defers to validation_context().

    Returns:
        None if the value conforms, otherwise a ValidationError

    Usage:
        user = Object({"name": String(), "age": Optional(Number())})
        validate(user, {"name": "Alice"})        # None
        validate(user, {"name": "Alice", "age": "x"})
    """
    if strict is None:
        strict = is_strict()
    return _validate(schema, value, strict)


def matches(schema: Schema, value: Any, *, strict: bool | None = None) -> bool:
    """Check whether a value conforms to a schema."""
    return validate(schema, value, strict=strict) is None


def check(
    schema: Schema, value: Any, *, strict: bool | None = None
) -> Ok[Any] | Err[ValidationError]:
    """Result-style validate: Ok(value) or Err(ValidationError)."""
    error = validate(schema, value, strict=strict)
    if error is None:
        return Ok(value)
    return Err(error)


def _validate(schema: Schema, value: Any, strict: bool) -> ValidationError | None:
    match schema:
        case NullSchema():
            if value is not None:
                return ValidationError(f"{to_json(value)} is not null")
        case UndefinedSchema():
            if value is not UNDEFINED:
                return ValidationError(f"{to_json(value)} is not undefined")
        case StringSchema():
            if not is_string(value):
                return ValidationError(f"{to_json(value)} is not a string")
        case NumberSchema():
            if not is_number(value):
                return ValidationError(f"{to_json(value)} is not a number")
        case BooleanSchema():
            if not is_boolean(value):
                return ValidationError(f"{to_json(value)} is not a boolean")
        case LiteralSchema(value=expected):
            if not literal_equals(value, expected):
                return ValidationError(
                    f"{to_json(value)} is not {to_json(expected)}"
                )
        case ArraySchema():
            return _validate_array(schema, value, strict)
        case TupleSchema():
            return _validate_tuple(schema, value, strict)
        case MapSchema():
            return _validate_map(schema, value, strict)
        case ObjectSchema():
            return _validate_object(schema, value, strict)
        case AnySchema():
            pass
        case UnionSchema():
            return _validate_union(schema, value, strict)
        case _:
            raise TypeError(f"Cannot validate against {type(schema).__name__}")
    return None


def _validate_array(
    schema: ArraySchema, value: Any, strict: bool
) -> ValidationError | None:
    if not is_sequence(value):
        return ValidationError(f"{to_json(value)} is not an array")
    for i, item in enumerate(value):
        error = _validate(schema.inner, item, strict)
        if error is not None:
            return error.prefixed(i)
    return None


def _validate_tuple(
    schema: TupleSchema, value: Any, strict: bool
) -> ValidationError | None:
    if not is_sequence(value):
        return ValidationError(f"{to_json(value)} is not an array")
    for i, member in enumerate(schema.values):
        item = value[i] if i < len(value) else UNDEFINED
        error = _validate(member, item, strict)
        if error is not None:
            return error.prefixed(i)
    return None


def _validate_map(
    schema: MapSchema, value: Any, strict: bool
) -> ValidationError | None:
    if not is_plain_object(value):
        return ValidationError(f"{to_json(value)} is not a map")
    for key, item in value.items():
        error = _validate(schema.inner, item, strict)
        if error is not None:
            return error.prefixed(key)
    return None


def _validate_object(
    schema: ObjectSchema, value: Any, strict: bool
) -> ValidationError | None:
    if not is_plain_object(value):
        return ValidationError(f"{to_json(value)} is not an object")

    for key, member in schema.required.items():
        error = _validate(member, value.get(key, UNDEFINED), strict)
        if error is not None:
            return error.prefixed(key)

    for key, member in schema.optional.items():
        item = value.get(key, UNDEFINED)
        if item is UNDEFINED:
            continue
        error = _validate(_or_undefined(member), item, strict)
        if error is not None:
            return error.prefixed(key)

    if strict or schema.strict:
        extra = [
            key
            for key in value
            if key not in schema.required and key not in schema.optional
        ]
        if extra:
            names = ", ".join(to_json(key) for key in extra)
            return ValidationError(f"{to_json(value)} contains extra keys: {names}")

    return None


def _validate_union(
    schema: UnionSchema, value: Any, strict: bool
) -> ValidationError | None:
    errors = []
    for member in schema.values:
        error = _validate(member, value, strict)
        if error is not None:
            errors.append(error)
    if len(errors) == len(schema.values):
        # TODO: pick out a discriminating key (e.g. a literal "type") so a
        # tagged union can report only the member that was meant.
        return ValidationError(
            f"{to_json(value)} must satisfy one of:", children=tuple(errors)
        )
    return None


def _or_undefined(schema: Schema) -> Schema:
    """The schema an optional key's value is checked against."""
    if isinstance(schema, UnionSchema) and any(
        isinstance(member, UndefinedSchema) for member in schema.values
    ):
        return schema
    return UnionSchema((schema, UndefinedSchema()))
