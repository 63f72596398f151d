"""
Per-type correctness checks.

Each check takes the raw user answer and the relevant piece of the answer
schema and returns a plain bool. A malformed schema or an answer of the
wrong shape is simply not correct.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from .normalize import normalize_string, to_boolean, to_number, user_answer_to_index
from .types import MatchPair


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def check_mcq_single(user_answer: Any, correct_index: Any) -> bool:
    """
    Check a single-choice answer.

    The user answer may be an index (0, "0") or an option letter ("A");
    the stored correct value is always read as an index.
    """
    user_index = user_answer_to_index(user_answer)
    correct = to_number(correct_index)
    if user_index is None or correct is None:
        return False
    return user_index == correct


def check_mcq_multiple(user_answer: Any, correct_indices: Any) -> bool:
    """
    Check a multiple-choice answer against the full set of correct indices.

    Submission order does not matter. Entries that do not resolve to an
    index are dropped before comparing, so the resolved selections must
    match the correct set exactly. There is no partial credit.
    """
    if not _is_sequence(user_answer) or not _is_sequence(correct_indices):
        return False

    selected = sorted(
        index for index in (user_answer_to_index(value) for value in user_answer)
        if index is not None
    )
    correct = sorted(
        index for index in (to_number(value) for value in correct_indices)
        if index is not None
    )
    return selected == correct


def check_true_false(user_answer: Any, correct_answer: Any) -> bool:
    """Check a true/false answer; both sides go through to_boolean."""
    user_value = to_boolean(user_answer)
    correct_value = to_boolean(correct_answer)
    if user_value is None or correct_value is None:
        return False
    return user_value == correct_value


def _acceptable(entry: Any) -> list[Any]:
    return list(entry) if _is_sequence(entry) else [entry]


def _matches_any(value: Any, acceptable: Iterable[Any]) -> bool:
    normalized = normalize_string(value)
    return any(normalized == normalize_string(option) for option in acceptable)


def check_fill_blank(user_answer: Any, blanks: Any) -> bool:
    """
    Check a fill-in-the-blank answer.

    Comparison ignores case and surrounding whitespace.

    - A single string is correct if it matches any acceptable answer at any
      position of ``blanks`` (one blank stored with several spellings).
    - A list is checked position by position: each entry must match one of
      the alternatives stored at the same position, and every entry must
      match. An entry past the last blank has nothing to match.
    """
    if not _is_sequence(blanks):
        return False

    if isinstance(user_answer, str):
        flattened = [option for entry in blanks for option in _acceptable(entry)]
        return _matches_any(user_answer, flattened)

    if _is_sequence(user_answer):
        if not user_answer:
            return False
        for position, value in enumerate(user_answer):
            if position >= len(blanks):
                return False
            if not _matches_any(value, _acceptable(blanks[position])):
                return False
        return True

    return False


def _parse_pairs(pairs: Any) -> Optional[list[MatchPair]]:
    if not _is_sequence(pairs) or not pairs:
        return None
    parsed = []
    for pair in pairs:
        if isinstance(pair, MatchPair):
            parsed.append(pair)
            continue
        if not isinstance(pair, Mapping):
            return None
        try:
            parsed.append(MatchPair.model_validate(pair))
        except ValidationError:
            return None
    return parsed


def check_match(user_answer: Any, pairs: Any) -> bool:
    """
    Check a match-the-pairs answer.

    ``user_answer`` maps each left item to the chosen right item. Every pair
    must be present and correct; the English variants of either side are
    accepted too.
    """
    if not isinstance(user_answer, Mapping):
        return False
    parsed = _parse_pairs(pairs)
    if parsed is None:
        return False

    for pair in parsed:
        chosen = user_answer.get(pair.left)
        if not chosen and pair.left_en:
            chosen = user_answer.get(pair.left_en)
        if chosen is None or chosen == "":
            return False
        if chosen != pair.right and (pair.right_en is None or chosen != pair.right_en):
            return False
    return True
