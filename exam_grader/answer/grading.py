"""
Answer checking entry points.

Single source of truth for deciding whether a submitted answer is correct
and for rendering answers on results pages. Everything here fails closed:
a missing question, a missing or undecodable schema, an unknown type tag
or an answer of the wrong shape yields False or a sentinel string, never
an exception.
"""

from __future__ import annotations

from typing import Any

from ..core.logging import get_logger
from .evaluator import (
    ANSWER_NOT_AVAILABLE,
    NO_ANSWER,
    SEE_EXPLANATION,
    EvaluatorRegistry,
    format_unknown_answer,
    is_blank_answer,
)
from .evaluators import (
    FillBlankEvaluator,
    ManualGradingEvaluator,
    MatchEvaluator,
    MultipleChoiceEvaluator,
    SingleChoiceEvaluator,
    TrueFalseEvaluator,
)
from .result import AnswerCheckResult
from .types import normalize_question_type, parse_answer_data, question_field

logger = get_logger(__name__)

# Global registry instance
default_registry = EvaluatorRegistry()
for _evaluator_class in (
    SingleChoiceEvaluator,
    MultipleChoiceEvaluator,
    TrueFalseEvaluator,
    FillBlankEvaluator,
    MatchEvaluator,
    ManualGradingEvaluator,
):
    default_registry.register(_evaluator_class)


def requires_manual_grading(question_type: Any) -> bool:
    """
    Check if a question type needs a human grader.

    Callers must check this before treating a False from check_answer as
    "wrong" rather than "not graded yet".
    """
    evaluator_class = default_registry.get_evaluator(question_type)
    return evaluator_class is not None and evaluator_class.manual_grading


def is_auto_gradable(question_type: Any) -> bool:
    """Check if a recognized question type can be graded automatically."""
    evaluator_class = default_registry.get_evaluator(question_type)
    return evaluator_class is not None and not evaluator_class.manual_grading


def check_answer(question: Any, user_answer: Any) -> bool:
    """
    Check if an answer is correct based on the question type.

    Args:
        question: QuestionRecord, ORM row or mapping with ``question_type``
            and ``answer_data`` (structured or JSON string)
        user_answer: Raw answer as submitted by the client

    Returns:
        True only when the answer is definitely correct
    """
    if question is None or is_blank_answer(user_answer):
        return False

    raw_data = question_field(question, "answer_data")
    if raw_data is None or raw_data == "":
        return False

    answer_data = parse_answer_data(raw_data)
    if answer_data is None:
        logger.warning(
            "Could not parse answer_data for question",
            extra_data={"question_id": question_field(question, "id")}
        )
        return False

    evaluator = default_registry.create_evaluator(
        question_field(question, "question_type"), answer_data
    )
    if evaluator is None:
        return False
    return evaluator.check(user_answer)


def format_user_answer(user_answer: Any, question_type: Any, answer_data: Any) -> str:
    """
    Format a user's answer for display.

    Args:
        user_answer: Raw answer as submitted by the client
        question_type: Type tag of the question
        answer_data: Answer schema (structured, JSON string or None)

    Returns:
        Display string; "No answer provided" for an absent answer
    """
    if is_blank_answer(user_answer):
        return NO_ANSWER

    evaluator = default_registry.create_evaluator(question_type, parse_answer_data(answer_data))
    if evaluator is None:
        return format_unknown_answer(user_answer)
    return evaluator.format_user_answer(user_answer)


def format_correct_answer(question_type: Any, answer_data: Any) -> str:
    """
    Format the correct answer for display.

    Args:
        question_type: Type tag of the question
        answer_data: Answer schema (structured, JSON string or None)

    Returns:
        Display string; "Answer not available" when the schema is absent or
        does not describe a correct answer
    """
    data = parse_answer_data(answer_data)
    if data is None:
        return ANSWER_NOT_AVAILABLE

    evaluator = default_registry.create_evaluator(question_type, data)
    if evaluator is None:
        return SEE_EXPLANATION
    return evaluator.format_correct_answer()


def check_answer_detailed(question: Any, user_answer: Any) -> AnswerCheckResult:
    """
    Check an answer and render both sides in one call.

    Returns:
        AnswerCheckResult with the verdict, both display strings and the
        manual grading flag
    """
    question_type = question_field(question, "question_type")
    raw_data = question_field(question, "answer_data")
    return AnswerCheckResult(
        is_correct=check_answer(question, user_answer),
        user_answer_formatted=format_user_answer(user_answer, question_type, raw_data),
        correct_answer_formatted=format_correct_answer(question_type, raw_data),
        requires_manual_grading=requires_manual_grading(question_type),
    )


def canonical_type_name(question_type: Any) -> str:
    """Canonical tag for logging and display, the raw tag when unknown."""
    canonical = normalize_question_type(question_type)
    return canonical.value if canonical is not None else str(question_type)
