"""Helpers for loosely-typed JSON values.

Generated messages are plain decoder output (dict, list, str, int, float,
bool, None). Protocol presence rules are looser than Python truthiness:
an empty object or array still counts as present.
"""

from collections.abc import Hashable
from typing import Any


def is_present(value: Any) -> bool:
    """True unless value is None, False, zero, NaN or the empty string."""
    if value is None or value is False:
        return False
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, float)):
        return value == value and value != 0  # NaN != NaN
    if isinstance(value, str):
        return value != ""
    return True


def as_mapping(value: Any) -> dict[str, Any]:
    """Return value if it is a JSON object, else an empty one."""
    return value if isinstance(value, dict) else {}


def id_key(value: Any) -> Hashable:
    """
    Set key for a component ID.

    Keys are tagged with the JSON type so True and 1 stay distinct while
    1 and 1.0 compare equal. Objects and arrays only match themselves.
    """
    if isinstance(value, bool):
        return ("boolean", value)
    if isinstance(value, (int, float)):
        return ("number", value)
    if isinstance(value, str):
        return ("string", value)
    return ("object", id(value))
