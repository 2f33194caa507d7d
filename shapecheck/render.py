"""
Textual rendering of shapecheck schemas.
"""

from __future__ import annotations

import json

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


def render(schema: Schema) -> str:
    """
    Render a schema as a TypeScript-like type expression.

    Examples:
        render(Array(Number()))                       # Array<number>
        render(Tuple(Number(), String()))             # [number, string]
        render(Map(Number()))                         # { [key: string]: number }
        render(Object({"a": Number(), "b": Optional(String())}))
                                                      # { a: number; b?: string }
        render(Union(Literal("x"), Literal(1)))       # "x" | 1
    """
    return _render(schema, ())


def _render(schema: Schema, active: tuple[int, ...]) -> str:
    # Only the meta-schema refers back to itself
    if id(schema) in active:
        return "..."
    active = (*active, id(schema))

    match schema:
        case NullSchema():
            return "null"
        case UndefinedSchema():
            return "undefined"
        case StringSchema():
            return "string"
        case NumberSchema():
            return "number"
        case BooleanSchema():
            return "boolean"
        case LiteralSchema(value=value):
            return json.dumps(value, ensure_ascii=False)
        case ArraySchema(inner=inner):
            return "Array<" + _render(inner, active) + ">"
        case TupleSchema(values=values):
            return "[" + ", ".join(_render(v, active) for v in values) + "]"
        case MapSchema(inner=inner):
            return "{ [key: string]: " + _render(inner, active) + " }"
        case ObjectSchema(required=required, optional=optional):
            members = [
                f"{key}: {_render(member, active)}" for key, member in required.items()
            ] + [
                f"{key}?: {_render(member, active)}"
                for key, member in optional.items()
            ]
            return "{ " + "; ".join(members) + " }"
        case AnySchema():
            return "any"
        case UnionSchema(values=values):
            return " | ".join(_render(v, active) for v in values)
    raise TypeError(f"Cannot render {type(schema).__name__}")
