"""
Built-in schema builders for shapecheck.

Provides factory functions that return schema nodes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any as TypingAny

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
    SchemaNode,
    StringSchema,
    TupleSchema,
    UndefinedSchema,
    UnionSchema,
)


def Null() -> NullSchema:
    """Value must be None."""
    return NullSchema()


def Undefined() -> UndefinedSchema:
    """Value must be UNDEFINED (absent)."""
    return UndefinedSchema()


def String() -> StringSchema:
    return StringSchema()


def Number() -> NumberSchema:
    """Value must be an int or float. bool is not a number."""
    return NumberSchema()


def Boolean() -> BooleanSchema:
    return BooleanSchema()


def Literal(value: str | int | float | bool) -> LiteralSchema:
    """
    Value must equal `value` exactly.

    Usage:
        Literal("ready")
        Literal(12)
        Literal(True)
    """
    if not isinstance(value, (str, int, float)):
        raise TypeError(
            f"Literal value must be str, int, float or bool, got {type(value).__name__}"
        )
    return LiteralSchema(value)


def Array(inner: Schema) -> ArraySchema:
    """
    Validate every element of a list or tuple.

    Usage:
        Array(Number())              # [1, 2, 3]
        Array(Array(String()))       # [["a"], []]
    """
    return ArraySchema(_schema(inner))


def Tuple(*values: Schema) -> TupleSchema:
    """
    Validate a list or tuple position by position.

    Extra trailing elements are accepted; missing ones fail.

    Usage:
        Tuple(Number(), String())    # [1, "yes"], [1, "yes", "extra"]
    """
    return TupleSchema(tuple(_schema(v) for v in values))


def Map(inner: Schema) -> MapSchema:
    """Validate every value of a dict. Keys are unconstrained."""
    return MapSchema(_schema(inner))


def Object(
    fields: Mapping[str, Schema] | None = None,
    *,
    required: Mapping[str, Schema] | None = None,
    optional: Mapping[str, Schema] | None = None,
    strict: bool = False,
) -> ObjectSchema:
    """
    Validate a dict with declared keys.

    Fields wrapped with Optional() (or any union with Undefined()) become
    optional keys; everything else is required. `required` and `optional`
    can also be given directly, and are used as-is. A key given more than
    once ends up where it was given last.

    Usage:
        Object({"name": String(), "email": Optional(String())})
        Object(required={"name": String()}, optional={"email": String()})
        Object({"name": String()}, strict=True)    # reject undeclared keys
    """
    placed: dict[str, tuple[Schema, bool]] = {}

    for key, member in (fields or {}).items():
        inner = _strip_undefined(_schema(member))
        if inner is None:
            placed[key] = (member, False)
        else:
            placed[key] = (inner, True)
    for key, member in (required or {}).items():
        placed.pop(key, None)
        placed[key] = (_schema(member), False)
    for key, member in (optional or {}).items():
        placed.pop(key, None)
        placed[key] = (_schema(member), True)

    return ObjectSchema(
        required={k: s for k, (s, is_optional) in placed.items() if not is_optional},
        optional={k: s for k, (s, is_optional) in placed.items() if is_optional},
        strict=strict,
    )


def Any() -> AnySchema:
    """Accept every value."""
    return AnySchema()


def Union(*values: Schema) -> UnionSchema:
    """
    Value must match at least one member.

    Usage:
        Union(Number(), String())
        Union(Object({"type": Literal("loading")}),
              Object({"type": Literal("ready"), "result": Number()}))
    """
    return UnionSchema(tuple(_schema(v) for v in values))


def Optional(inner: Schema) -> UnionSchema:
    """
    Allow UNDEFINED, validate otherwise.

    Inside Object() this marks the key as optional.

    Usage:
        Optional(String())       # "hello" or UNDEFINED
    """
    return Union(inner, Undefined())


def _schema(value: TypingAny) -> Schema:
    if not isinstance(value, SchemaNode):
        raise TypeError(f"Expected a schema, got {type(value).__name__}")
    return value  # type: ignore[return-value]


def _strip_undefined(schema: Schema) -> Schema | None:
    """
    The inner schema of an optional field, or None if it is not optional.

    A union with an Undefined() member and at least one other member is
    optional; the remaining members make up the inner schema.
    """
    if not isinstance(schema, UnionSchema):
        return None
    rest = [v for v in schema.values if not isinstance(v, UndefinedSchema)]
    if not rest or len(rest) == len(schema.values):
        return None
    if len(rest) == 1:
        return rest[0]
    return UnionSchema(tuple(rest))
