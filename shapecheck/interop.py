"""
Pydantic interop for shapecheck schemas.

Provides to_pydantic().
"""

from __future__ import annotations

import logging
from typing import Any as TypingAny
from typing import Literal as TypingLiteral
from typing import Optional as TypingOptional
from typing import Union as TypingUnion

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    create_model,
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

logger = logging.getLogger(__name__)


def to_pydantic(name: str, schema: Schema) -> type[BaseModel]:
    """
    Compile an object schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: An object schema

    Returns:
        A Pydantic BaseModel subclass. Nested object schemas become nested
        models named "<name>_<field>". Optional and Undefined() keys default
        to None and a
        strict object schema forbids extra keys.

    Note:
        Pydantic tuples have a fixed length, so a Tuple() field no longer
        accepts extra trailing elements.

    Usage:
        User = to_pydantic("User", Object({
            "name": String(),
            "email": Optional(String()),
        }))
        user = User(name="Alice")
    """
    if not isinstance(schema, ObjectSchema):
        raise TypeError("Schema must be an object schema")
    return _model(name, schema, ())


def _model(name: str, schema: ObjectSchema, active: tuple[int, ...]) -> type[BaseModel]:
    fields: dict[str, TypingAny] = {}

    for key, member in schema.required.items():
        field_type = _annotation(f"{name}_{key}", member, active)
        # An undefined key is satisfied by its absence
        default = None if isinstance(member, UndefinedSchema) else ...
        fields[key] = (field_type, default)
    for key, member in schema.optional.items():
        field_type = _annotation(f"{name}_{key}", member, active)
        fields[key] = (TypingOptional[field_type], None)

    config = ConfigDict(extra="forbid") if schema.strict else None
    logger.debug("Creating model %s with %d fields", name, len(fields))
    return create_model(name, __config__=config, **fields)


def _annotation(name: str, schema: Schema, active: tuple[int, ...]) -> TypingAny:
    """Pydantic field type for a schema."""
    if id(schema) in active:
        raise ValueError("Cannot compile a self-referential schema")
    active = (*active, id(schema))

    match schema:
        case NullSchema() | UndefinedSchema():
            return None
        case StringSchema():
            return StrictStr
        case NumberSchema():
            return TypingUnion[StrictInt, StrictFloat]
        case BooleanSchema():
            return StrictBool
        case LiteralSchema(value=value):
            return TypingLiteral[value]
        case ArraySchema(inner=inner):
            return list[_annotation(name, inner, active)]  # type: ignore[misc]
        case TupleSchema(values=values):
            members = tuple(_annotation(name, v, active) for v in values)
            return tuple[members]  # type: ignore[misc]
        case MapSchema(inner=inner):
            return dict[str, _annotation(name, inner, active)]  # type: ignore[misc]
        case ObjectSchema():
            return _model(name, schema, active)
        case AnySchema():
            return TypingAny
        case UnionSchema(values=values):
            if not values:
                raise ValueError("Cannot compile a union with no members")
            members = tuple(_annotation(name, v, active) for v in values)
            return TypingUnion[members]  # type: ignore[valid-type]
    raise TypeError(f"Cannot compile {type(schema).__name__}")
