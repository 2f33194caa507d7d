"""
shapecheck - Runtime schemas with path-annotated validation errors.

Usage:
    from shapecheck import Object, Array, Number, String, Optional, format_error

    schema = Object({
        "name": String(),
        "email": Optional(String()),
        "scores": Array(Number()),
    })

    schema.matches({"name": "Alice", "scores": [1, 2]})   # True
    error = schema.validate({"name": "Alice", "scores": [1, "x"]})
    format_error(error)     # '.scores[1]: "x" is not a number'
    str(schema)             # '{ name: string; scores: Array<number>; email?: string }'
    schema.to_data()        # plain, JSON-compatible dict
"""

import logging

from .builders import (
    Any,
    Array,
    Boolean,
    Literal,
    Map,
    Null,
    Number,
    Object,
    Optional,
    String,
    Tuple,
    Undefined,
    Union,
)
from .context import is_strict, validation_context
from .core import check, matches, validate
from .errors import SchemaDecodeError, format_error, path_to_string
from .interop import to_pydantic
from .meta import SCHEMA
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
from .render import render
from .serialize import dumps, from_data, loads, to_data
from .types import Err, Ok, ValidationError
from .undefined import UNDEFINED

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Result types
    "Ok",
    "Err",
    "ValidationError",
    "UNDEFINED",
    # Nodes
    "Schema",
    "SchemaNode",
    "NullSchema",
    "UndefinedSchema",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "LiteralSchema",
    "ArraySchema",
    "TupleSchema",
    "MapSchema",
    "ObjectSchema",
    "AnySchema",
    "UnionSchema",
    # Builders
    "Null",
    "Undefined",
    "String",
    "Number",
    "Boolean",
    "Literal",
    "Array",
    "Tuple",
    "Map",
    "Object",
    "Any",
    "Union",
    "Optional",
    # Operations
    "validate",
    "matches",
    "check",
    "render",
    "format_error",
    "path_to_string",
    # Serialization
    "to_data",
    "from_data",
    "dumps",
    "loads",
    "SchemaDecodeError",
    "SCHEMA",
    # Config
    "validation_context",
    "is_strict",
    # Interop
    "to_pydantic",
]
