"""
Type definitions for shapecheck.

Provides the ValidationError tree, a minimal Result type (Ok/Err) and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


# Type aliases
PathSegment = str | int
Path = tuple[PathSegment, ...]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    A mismatch between a value and a schema.

    Created with an empty path where the mismatch happens. Every enclosing
    array/tuple/map/object frame rebuilds it with its own index or key in
    front, so once unwound the path reads outer-to-inner.

    `children` is only set when no member of a union matched.
    """

    message: str
    path: Path = ()
    children: tuple[ValidationError, ...] | None = None

    def prefixed(self, segment: PathSegment) -> ValidationError:
        """Return a copy with `segment` prepended to the path."""
        return replace(self, path=(segment, *self.path))

    def __str__(self) -> str:
        from .errors import format_error

        return format_error(self)
