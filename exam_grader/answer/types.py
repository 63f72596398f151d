"""
Question types and answer schemas.

The question store keeps ``answer_data`` either as a structured value or as
a JSON string, and still holds rows tagged with the legacy ``mcq`` and
``tf`` type names. Both quirks are absorbed here, before dispatch.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.logging import get_logger

logger = get_logger(__name__)


class QuestionType(str, Enum):
    """Canonical question type tags"""
    MCQ_SINGLE = "mcq_single"
    MCQ_TWO = "mcq_two"
    MCQ_THREE = "mcq_three"
    MCQ_MULTIPLE = "mcq_multiple"
    TRUE_FALSE = "true_false"
    FILL_BLANK = "fill_blank"
    MATCH = "match"
    SHORT_ANSWER = "short_answer"
    LONG_ANSWER = "long_answer"
    PROGRAMMING = "programming"


LEGACY_ALIASES: dict[str, QuestionType] = {
    "mcq": QuestionType.MCQ_SINGLE,
    "tf": QuestionType.TRUE_FALSE,
}

MULTIPLE_CHOICE_TYPES = frozenset({
    QuestionType.MCQ_TWO,
    QuestionType.MCQ_THREE,
    QuestionType.MCQ_MULTIPLE,
})

MANUAL_GRADING_TYPES = frozenset({
    QuestionType.SHORT_ANSWER,
    QuestionType.LONG_ANSWER,
    QuestionType.PROGRAMMING,
})

QUESTION_TYPE_LABELS: dict[QuestionType, str] = {
    QuestionType.FILL_BLANK: "Fill in the Blank",
    QuestionType.TRUE_FALSE: "True / False",
    QuestionType.MCQ_SINGLE: "MCQ (1 Correct)",
    QuestionType.MCQ_TWO: "MCQ (2 Correct)",
    QuestionType.MCQ_THREE: "MCQ (3 Correct)",
    QuestionType.MCQ_MULTIPLE: "MCQ (Multiple Correct)",
    QuestionType.MATCH: "Match the Pairs",
    QuestionType.SHORT_ANSWER: "Short Answer",
    QuestionType.LONG_ANSWER: "Long Answer",
    QuestionType.PROGRAMMING: "Programming",
}


def normalize_question_type(tag: Any) -> Optional[QuestionType]:
    """
    Map a stored type tag to its canonical QuestionType.

    Args:
        tag: Type tag from a question row (canonical, legacy alias or enum)

    Returns:
        The canonical QuestionType, or None for an unrecognized tag
    """
    if isinstance(tag, QuestionType):
        return tag
    if not isinstance(tag, str):
        return None
    if tag in LEGACY_ALIASES:
        return LEGACY_ALIASES[tag]
    try:
        return QuestionType(tag)
    except ValueError:
        return None


class MatchPair(BaseModel):
    """One left/right pair of a match question, with optional English variants"""

    model_config = ConfigDict(extra="ignore")

    left: Union[str, int, float]
    right: Any
    left_en: Optional[Union[str, int, float]] = None
    right_en: Any = None


class AnswerData(BaseModel):
    """
    Stored answer schema of a question.

    Which fields are meaningful depends on the question type:

    - mcq_single: ``options`` and a single ``correct`` index
    - mcq_two / mcq_three / mcq_multiple: ``options`` and a list of ``correct`` indices
    - true_false: ``correct`` as a boolean
    - fill_blank: ``blanks``, one entry per blank, each a string or a list of
      acceptable spellings
    - match: ``pairs``
    - short_answer / long_answer / programming: ``answer``, ``sampleAnswer``
      and ``keywords``, kept for reference only

    Field values are kept as stored; the evaluators coerce them.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    options: Any = None
    correct: Any = None
    blanks: Any = None
    pairs: Any = None
    answer: Any = None
    sample_answer: Any = Field(default=None, alias="sampleAnswer")
    keywords: Any = None


def parse_answer_data(raw: Any) -> Optional[AnswerData]:
    """
    Parse answer_data, handling both structured and JSON string forms.

    Args:
        raw: AnswerData, mapping, JSON string, or nothing

    Returns:
        AnswerData, or None when the value is absent or cannot be decoded
        into an object
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, AnswerData):
        return raw
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning(
                "Failed to parse answer_data string",
                extra_data={"answer_data": raw[:500]}
            )
            return None
    if isinstance(raw, Mapping):
        try:
            return AnswerData.model_validate(dict(raw))
        except ValidationError:
            # Only reachable through non-string keys
            logger.warning("Unusable answer_data mapping", extra_data={"answer_data": repr(raw)[:500]})
            return None
    return None


class QuestionRecord(BaseModel):
    """The slice of a stored question the evaluator needs"""

    model_config = ConfigDict(extra="allow")

    id: Union[str, int]
    question_type: str
    answer_data: Any = None
    marks: float = 1


def question_field(question: Any, name: str) -> Any:
    """Read a field from a QuestionRecord, another model, or a plain mapping."""
    if question is None:
        return None
    if isinstance(question, Mapping):
        return question.get(name)
    return getattr(question, name, None)
