"""
Attempt aggregation.

Turns the per-question rows of a scored attempt into the summary shown on
results pages. Two notions are kept apart on purpose: "unanswered" comes
from whether an answer was submitted, "not graded" from the tri-state
``is_correct``. They diverge for manually graded questions.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.logging import get_logger
from .evaluator import is_blank_answer

logger = get_logger(__name__)

DEFAULT_PASSING_PERCENTAGE = 35


class AttemptAnswer(BaseModel):
    """
    One answered (or skipped) question of an attempt.

    Attributes:
        user_answer: Raw submitted answer, None when skipped
        is_correct: True / False, or None when not graded automatically
        marks_obtained: Marks awarded for this answer
        question: Optional question record the row belongs to
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    user_answer: Any = None
    is_correct: Optional[bool] = None
    marks_obtained: float = 0
    question: Any = None

    @field_validator("is_correct", mode="before")
    @classmethod
    def validate_is_correct(cls, v: Any) -> Optional[bool]:
        """Only real booleans count as graded; anything else is ungraded."""
        return v if isinstance(v, bool) else None

    @field_validator("marks_obtained", mode="before")
    @classmethod
    def validate_marks_obtained(cls, v: Any) -> float:
        """Missing or unusable marks count as zero."""
        if v is None or isinstance(v, bool):
            return 0
        try:
            marks = float(v)
        except (TypeError, ValueError, OverflowError):
            logger.warning("Ignoring unusable marks_obtained", extra_data={"marks_obtained": repr(v)})
            return 0
        return marks if math.isfinite(marks) else 0

    def is_answered(self) -> bool:
        """Check if an answer was submitted."""
        return not is_blank_answer(self.user_answer)


class ExamResultStats(BaseModel):
    """
    Attempt-level statistics.

    Computed fresh on every call and never mutated. Serializes with the
    camelCase keys the dashboard reads (``model_dump(by_alias=True)``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_questions: int = Field(alias="totalQuestions")
    attempted_questions: int = Field(alias="attemptedQuestions")
    correct_answers: int = Field(alias="correctAnswers")
    wrong_answers: int = Field(alias="wrongAnswers")
    unanswered: int = Field(alias="unanswered")
    total_marks: float = Field(alias="totalMarks")
    obtained_marks: float = Field(alias="obtainedMarks")
    percentage: int = Field(alias="percentage")
    is_passing: bool = Field(alias="isPassing")


def round_half_up(value: float) -> int:
    """Round halves up, matching the percentages shown on the dashboard."""
    return int(math.floor(value + 0.5))


def calculate_percentage(obtained_marks: float, total_marks: float) -> int:
    """Whole-number percentage, 0 when there are no marks to earn."""
    if not math.isfinite(total_marks) or total_marks <= 0:
        return 0
    ratio = obtained_marks / total_marks * 100
    return round_half_up(ratio) if math.isfinite(ratio) else 0


def calculate_exam_stats(
    answers: Iterable[Union[AttemptAnswer, Mapping[str, Any]]],
    total_marks: float,
    passing_percentage: float = DEFAULT_PASSING_PERCENTAGE,
) -> ExamResultStats:
    """
    Calculate exam result statistics.

    Args:
        answers: Per-question rows (AttemptAnswer or mappings with
            ``user_answer``, ``is_correct``, ``marks_obtained``)
        total_marks: Maximum marks of the attempt
        passing_percentage: Minimum percentage to pass (default 35)

    Returns:
        ExamResultStats for the attempt
    """
    total_questions = 0
    attempted_questions = 0
    correct_answers = 0
    wrong_answers = 0
    obtained_marks: float = 0

    for row in answers:
        answer = row if isinstance(row, AttemptAnswer) else AttemptAnswer.model_validate(dict(row))
        total_questions += 1

        if answer.is_answered():
            attempted_questions += 1

        if answer.is_correct is True:
            correct_answers += 1
        elif answer.is_correct is False:
            wrong_answers += 1

        obtained_marks += answer.marks_obtained

    percentage = calculate_percentage(obtained_marks, total_marks)

    return ExamResultStats(
        total_questions=total_questions,
        attempted_questions=attempted_questions,
        correct_answers=correct_answers,
        wrong_answers=wrong_answers,
        unanswered=total_questions - attempted_questions,
        total_marks=total_marks,
        obtained_marks=obtained_marks,
        percentage=percentage,
        is_passing=percentage >= passing_percentage,
    )
