"""
Context manager for validation configuration (e.g., strict mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for strict mode
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


@contextmanager
def validation_context(*, strict: bool = False):
    """
    Context manager for validation configuration.

    Args:
        strict: If True, every object schema rejects keys it does not declare,
               as if each had been built with Object(..., strict=True).
               An explicit `strict=` argument to validate() takes precedence.

    Example:
        from shapecheck import Object, Number, validate, validation_context

        point = Object({"x": Number(), "y": Number()})

        validate(point, {"x": 1, "y": 2, "z": 3})  # None, extra key ignored

        with validation_context(strict=True):
            validate(point, {"x": 1, "y": 2, "z": 3})  # contains extra keys: "z"
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
