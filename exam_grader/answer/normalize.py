"""
Input normalizers for loosely typed answers.

Client surfaces disagree on how they send the same answer: option indices
arrive as ints, numeric strings or option letters, booleans as real
booleans, "yes"/"no" or 0/1. Every helper here maps one primitive kind to
its canonical form and returns None (or "") instead of raising.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

Number = Union[int, float]

OPTION_LABELS: tuple[str, ...] = ("A", "B", "C", "D", "E", "F")

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})

# Leading integer prefix, same reading as JavaScript's parseInt(value, 10)
_INTEGER_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a numeric answer
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_number(value: Any) -> Optional[Number]:
    """
    Convert a value to a number (for index-based answers).

    Numbers pass through unchanged (NaN is rejected). Strings are read as a
    base-10 integer from their leading digits, so "2", " 2" and "2nd" all
    give 2. Anything else gives None.

    Args:
        value: Raw answer or schema value

    Returns:
        The number, or None if the value has no numeric reading
    """
    if _is_number(value):
        if isinstance(value, float) and math.isnan(value):
            return None
        return value
    if isinstance(value, str):
        match = _INTEGER_PREFIX.match(value)
        if match is None:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # Past the interpreter's int conversion digit limit
            return None
    return None


def to_boolean(value: Any) -> Optional[bool]:
    """
    Convert a value to a boolean.

    Accepts booleans, the strings true/false, 1/0, yes/no (any case, outer
    whitespace ignored) and the numbers 1 and 0.

    Returns:
        True/False, or None when the value is not recognized
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.lower().strip()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        return None
    if _is_number(value):
        if value == 1:
            return True
        if value == 0:
            return False
    return None


def display_text(value: Any) -> str:
    """Render a scalar the way a client would show it ("4" not "4.0")."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_string(value: Any) -> str:
    """
    Normalize a value for case and whitespace insensitive text comparison.

    None becomes "", other non-strings are coerced to text first.
    """
    if isinstance(value, str):
        return value.lower().strip()
    if value is None:
        return ""
    return display_text(value).lower().strip()


def label_to_index(value: Any) -> Optional[int]:
    """Convert an option label ("A".."F", any case) to its zero-based index."""
    if not isinstance(value, str):
        return None
    label = value.upper().strip()
    if label in OPTION_LABELS:
        return OPTION_LABELS.index(label)
    return None


def user_answer_to_index(value: Any) -> Optional[Number]:
    """
    Resolve a submitted option to its index.

    Some clients send indices (0, "1"), others send option letters ("B").
    The numeric reading wins when both are possible.
    """
    number = to_number(value)
    if number is not None:
        return number
    return label_to_index(value)


def option_at(options: Any, index: Optional[Number]) -> Optional[str]:
    """
    Look up an option by index without ever raising.

    Returns None for a missing options list, a non-integral or out of range
    index, or an empty option.
    """
    if index is None or not isinstance(options, (list, tuple)):
        return None
    if isinstance(index, float):
        if not index.is_integer():
            return None
        index = int(index)
    if index < 0 or index >= len(options):
        return None
    option = options[index]
    if option is None or option == "":
        return None
    return display_text(option)
