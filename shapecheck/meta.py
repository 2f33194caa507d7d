"""
The meta-schema: a shapecheck schema describing the plain-data form of schemas.

SCHEMA is a union of one object schema per kind. Kinds with child schemas
(array, tuple, map, object, or) refer back to SCHEMA itself, so the union is
created empty and its members are filled in once, right after they are built.
"""

import logging

from .builders import (
    Array,
    Boolean,
    Literal,
    Map,
    Number,
    Object,
    Optional,
    String,
    Union,
)
from .nodes import ObjectSchema, UnionSchema

logger = logging.getLogger(__name__)

SCHEMA = UnionSchema(())

NULL_SCHEMA = Object({"type": Literal("null")})

UNDEFINED_SCHEMA = Object({"type": Literal("undefined")})

STRING_SCHEMA = Object({"type": Literal("string")})

NUMBER_SCHEMA = Object({"type": Literal("number")})

BOOLEAN_SCHEMA = Object({"type": Literal("boolean")})

LITERAL_SCHEMA = Object(
    {
        "type": Literal("literal"),
        "value": Union(String(), Number(), Boolean()),
    }
)

ARRAY_SCHEMA = Object(
    {
        "type": Literal("array"),
        "inner": SCHEMA,
    }
)

TUPLE_SCHEMA = Object(
    {
        "type": Literal("tuple"),
        "values": Array(SCHEMA),
    }
)

MAP_SCHEMA = Object(
    {
        "type": Literal("map"),
        "inner": SCHEMA,
    }
)

OBJECT_SCHEMA = Object(
    {
        "type": Literal("object"),
        "required": Map(SCHEMA),
        "optional": Map(SCHEMA),
        "strict": Optional(Boolean()),
    }
)

ANY_SCHEMA = Object({"type": Literal("any")})

UNION_SCHEMA = Object(
    {
        "type": Literal("or"),
        "values": Array(SCHEMA),
    }
)

KIND_SCHEMAS: dict[str, ObjectSchema] = {
    "null": NULL_SCHEMA,
    "undefined": UNDEFINED_SCHEMA,
    "string": STRING_SCHEMA,
    "number": NUMBER_SCHEMA,
    "boolean": BOOLEAN_SCHEMA,
    "literal": LITERAL_SCHEMA,
    "array": ARRAY_SCHEMA,
    "tuple": TUPLE_SCHEMA,
    "map": MAP_SCHEMA,
    "object": OBJECT_SCHEMA,
    "any": ANY_SCHEMA,
    "or": UNION_SCHEMA,
}

# The one mutation of a schema node: close the recursive definition.
object.__setattr__(SCHEMA, "values", tuple(KIND_SCHEMAS.values()))

logger.debug("Built meta-schema with %d kinds", len(SCHEMA.values))
