"""
Schema nodes for shapecheck.

One immutable dataclass per kind. Nodes are plain data: behavior lives in the
stateless dispatchers (core.validate, render.render, serialize.to_data), and
the methods below only delegate to them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar

from .types import Err, Ok, ValidationError


class SchemaNode:
    """Shared behavior for every schema node."""

    __slots__ = ()

    kind: ClassVar[str]

    def validate(
        self, value: Any, *, strict: bool | None = None
    ) -> ValidationError | None:
        """Return the first mismatch (all of them, for unions) or None."""
        # Import here to avoid circular dependency
        from .core import validate

        return validate(self, value, strict=strict)  # type: ignore[arg-type]

    def matches(self, value: Any, *, strict: bool | None = None) -> bool:
        from .core import matches

        return matches(self, value, strict=strict)  # type: ignore[arg-type]

    def __call__(self, value: Any) -> Ok[Any] | Err[ValidationError]:
        """
        Validate a value.

        Returns:
            Ok(value) if validation passes
            Err(ValidationError) if validation fails
        """
        from .core import check

        return check(self, value)  # type: ignore[arg-type]

    def __or__(self, other: SchemaNode) -> UnionSchema:
        """
        Combine into a union: at least one must match.

        Usage:
            String() | Number()
            String() | Undefined()    # same as Optional(String())
        """
        if not isinstance(other, SchemaNode):
            return NotImplemented
        if type(self) is UnionSchema:
            return UnionSchema((*self.values, other))  # type: ignore[attr-defined]
        return UnionSchema((self, other))

    def to_data(self) -> dict[str, Any]:
        """Plain-data (JSON-compatible) form of this schema."""
        from .serialize import to_data

        return to_data(self)  # type: ignore[arg-type]

    def __str__(self) -> str:
        from .render import render

        return render(self)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class NullSchema(SchemaNode):
    kind: ClassVar[str] = "null"


@dataclass(frozen=True, slots=True)
class UndefinedSchema(SchemaNode):
    kind: ClassVar[str] = "undefined"


@dataclass(frozen=True, slots=True)
class StringSchema(SchemaNode):
    kind: ClassVar[str] = "string"


@dataclass(frozen=True, slots=True)
class NumberSchema(SchemaNode):
    kind: ClassVar[str] = "number"


@dataclass(frozen=True, slots=True)
class BooleanSchema(SchemaNode):
    kind: ClassVar[str] = "boolean"


@dataclass(frozen=True, slots=True)
class LiteralSchema(SchemaNode):
    """Value must equal `value` exactly."""

    kind: ClassVar[str] = "literal"

    value: str | int | float | bool


@dataclass(frozen=True, slots=True)
class ArraySchema(SchemaNode):
    """Sequence whose every element matches `inner`."""

    kind: ClassVar[str] = "array"

    inner: Schema


@dataclass(frozen=True, slots=True)
class TupleSchema(SchemaNode):
    """
    Sequence whose element i matches `values[i]`.

    Only the declared positions are checked: extra trailing elements are
    accepted, missing ones are checked as UNDEFINED.
    """

    kind: ClassVar[str] = "tuple"

    values: tuple[Schema, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))


@dataclass(frozen=True, slots=True)
class MapSchema(SchemaNode):
    """Dict whose every value matches `inner`. Keys are unconstrained."""

    kind: ClassVar[str] = "map"

    inner: Schema


@dataclass(frozen=True, slots=True)
class ObjectSchema(SchemaNode):
    """
    Dict with declared keys.

    Required keys must match; optional keys are checked only when present
    and not UNDEFINED. Undeclared keys are ignored unless `strict` is set
    (here or at the validate call).
    """

    kind: ClassVar[str] = "object"

    required: Mapping[str, Schema] = field(default_factory=dict)
    optional: Mapping[str, Schema] = field(default_factory=dict)
    strict: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "required", MappingProxyType(dict(self.required)))
        object.__setattr__(self, "optional", MappingProxyType(dict(self.optional)))

    def __hash__(self) -> int:
        return hash(
            (
                frozenset(self.required.items()),
                frozenset(self.optional.items()),
                self.strict,
            )
        )


@dataclass(frozen=True, slots=True)
class AnySchema(SchemaNode):
    kind: ClassVar[str] = "any"


@dataclass(frozen=True, slots=True)
class UnionSchema(SchemaNode):
    """Value must match at least one member, tried in order."""

    kind: ClassVar[str] = "or"

    values: tuple[Schema, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))


Schema = (
    NullSchema
    | UndefinedSchema
    | StringSchema
    | NumberSchema
    | BooleanSchema
    | LiteralSchema
    | ArraySchema
    | TupleSchema
    | MapSchema
    | ObjectSchema
    | AnySchema
    | UnionSchema
)
