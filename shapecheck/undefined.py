"""
UNDEFINED sentinel for absent values.
"""

from enum import Enum


class _Undefined(Enum):
    """
    Sentinel standing for an absent value.

    `None` is a real value (null), so a missing dict key or a missing tuple
    element is looked up as UNDEFINED instead:

        {"a": None}  -> value["a"] is None        (null)
        {}           -> value.get("a", UNDEFINED)  (undefined)
    """

    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined.UNDEFINED
