"""
Conversion between schema nodes and their plain-data form.

The plain-data form is a JSON-compatible dict tagged by its "type" key:

    {"type": "array", "inner": {"type": "number"}}
    {"type": "object", "required": {"a": {"type": "number"}}, "optional": {}}
    {"type": "or", "values": [{"type": "string"}, {"type": "undefined"}]}
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .core import validate
from .errors import SchemaDecodeError
from .lib.value_helpers import to_json
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
from .types import ValidationError

logger = logging.getLogger(__name__)


def to_data(schema: Schema) -> dict[str, Any]:
    """
    Convert a schema to its plain-data form.

    Raises:
        ValueError: If the schema refers back to itself (e.g. the meta-schema)
        TypeError: If the tree contains something that is not a schema node
    """
    return _to_data(schema, ())


def _to_data(schema: Schema, active: tuple[int, ...]) -> dict[str, Any]:
    if id(schema) in active:
        raise ValueError("Cannot serialize a self-referential schema")
    active = (*active, id(schema))

    match schema:
        case (
            NullSchema()
            | UndefinedSchema()
            | StringSchema()
            | NumberSchema()
            | BooleanSchema()
            | AnySchema()
        ):
            return {"type": schema.kind}
        case LiteralSchema(value=value):
            return {"type": "literal", "value": value}
        case ArraySchema(inner=inner) | MapSchema(inner=inner):
            return {"type": schema.kind, "inner": _to_data(inner, active)}
        case TupleSchema(values=values) | UnionSchema(values=values):
            return {
                "type": schema.kind,
                "values": [_to_data(v, active) for v in values],
            }
        case ObjectSchema(required=required, optional=optional, strict=strict):
            data: dict[str, Any] = {
                "type": "object",
                "required": {k: _to_data(v, active) for k, v in required.items()},
                "optional": {k: _to_data(v, active) for k, v in optional.items()},
            }
            if strict:
                data["strict"] = True
            return data
    raise TypeError(f"Cannot serialize {type(schema).__name__}")


def from_data(data: Any) -> Schema:
    """
    Build a schema from its plain-data form.

    The data is first checked against the meta-schema, with undeclared keys
    rejected.

    Raises:
        SchemaDecodeError: If data does not describe a schema
    """
    # Import here to avoid circular dependency
    from .meta import SCHEMA

    error = validate(SCHEMA, data, strict=True)
    if error is not None:
        logger.debug("Rejected schema data: %s", error.message)
        raise SchemaDecodeError(error)
    return _from_data(data)


def _from_data(data: dict[str, Any]) -> Schema:
    kind = data["type"]
    match kind:
        case "null":
            return NullSchema()
        case "undefined":
            return UndefinedSchema()
        case "string":
            return StringSchema()
        case "number":
            return NumberSchema()
        case "boolean":
            return BooleanSchema()
        case "literal":
            return LiteralSchema(data["value"])
        case "array":
            return ArraySchema(_from_data(data["inner"]))
        case "tuple":
            return TupleSchema(tuple(_from_data(v) for v in data["values"]))
        case "map":
            return MapSchema(_from_data(data["inner"]))
        case "object":
            return ObjectSchema(
                required={k: _from_data(v) for k, v in data["required"].items()},
                optional={k: _from_data(v) for k, v in data["optional"].items()},
                strict=data.get("strict", False),
            )
        case "any":
            return AnySchema()
        case "or":
            return UnionSchema(tuple(_from_data(v) for v in data["values"]))
    raise SchemaDecodeError(
        ValidationError(f"Unknown schema type {to_json(kind)}", path=("type",))
    )


def dumps(schema: Schema, **kwargs: Any) -> str:
    """Serialize a schema to a JSON string. kwargs are passed to json.dumps."""
    return json.dumps(to_data(schema), **kwargs)


def loads(text: str | bytes) -> Schema:
    """Deserialize a schema from a JSON string."""
    return from_data(json.loads(text))
