"""
Selection helpers for results pages.

These answer "did the user pick this option / this value?" for
highlighting, independent of whether the answer was correct.
"""

from __future__ import annotations

from typing import Any, Sequence

from .evaluator import is_blank_answer
from .normalize import normalize_string, option_at, to_boolean, to_number


def _picks_option(value: Any, option_index: int, options: Sequence[Any]) -> bool:
    index = to_number(value)
    if index is not None:
        return index == option_index
    if isinstance(value, str):
        option = option_at(options, option_index)
        if option is None:
            return False
        return value == option or normalize_string(value) == normalize_string(option)
    return False


def is_option_selected(user_answer: Any, option_index: int, options: Sequence[Any]) -> bool:
    """
    Check if a specific option was selected by the user.

    Works for single answers and for lists of selections. A selection may
    be an index or the option text itself (compared case-insensitively).
    """
    if is_blank_answer(user_answer):
        return False
    if isinstance(user_answer, (list, tuple)):
        return any(_picks_option(value, option_index, options) for value in user_answer)
    return _picks_option(user_answer, option_index, options)


def is_boolean_selected(user_answer: Any, value: bool) -> bool:
    """Check if the user picked ``value`` on a true/false question."""
    if is_blank_answer(user_answer):
        return False
    selected = to_boolean(user_answer)
    return selected is not None and selected == value
