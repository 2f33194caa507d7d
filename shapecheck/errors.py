"""
Formatting of validation errors, and the error raised for malformed schema data.
"""

from __future__ import annotations

import json
import re

from .types import Path, ValidationError

IDENTIFIER_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9]*")


class SchemaDecodeError(ValueError):
    """Raised when plain data does not describe a valid schema."""

    def __init__(self, error: ValidationError):
        self.error = error
        super().__init__(format_error(error))


def path_to_string(path: Path) -> str:
    """
    Render a path as an accessor expression.

    Examples:
        path_to_string((2, "a"))           # [2].a
        path_to_string(("user", "e-mail")) # .user["e-mail"]
    """
    parts = []
    for segment in path:
        if isinstance(segment, int) and not isinstance(segment, bool):
            parts.append(f"[{segment}]")
        elif isinstance(segment, str) and IDENTIFIER_PATTERN.fullmatch(segment):
            parts.append(f".{segment}")
        else:
            parts.append(f"[{json.dumps(str(segment), ensure_ascii=False)}]")
    return "".join(parts)


def format_error(error: ValidationError) -> str:
    """
    Format a validation error as a multi-line message.

    Union failures list each member's error beneath, indented two spaces
    per level:

        .b: 2 must satisfy one of:
          2 is not a string
          2 is not undefined
    """
    text = ""
    if error.path:
        text += path_to_string(error.path) + ": "
    text += error.message
    if error.children:
        text += "\n" + _indent("\n".join(format_error(c) for c in error.children))
    return text


def _indent(text: str) -> str:
    return "  " + text.replace("\n", "\n  ")
