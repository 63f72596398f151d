"""
Base answer evaluator framework.

Provides the abstract base class for per-type evaluators and a registry
for dispatch on the question type tag.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from .normalize import display_text
from .types import AnswerData, QuestionType, normalize_question_type

NO_ANSWER = "No answer provided"
ANSWER_NOT_AVAILABLE = "Answer not available"
INVALID_ANSWER = "Invalid answer"
SEE_EXPLANATION = "See explanation"


def is_blank_answer(user_answer: Any) -> bool:
    """Absent and empty-string answers count as not answered."""
    return user_answer is None or user_answer == ""


class AnswerEvaluator(BaseModel, ABC):
    """
    Abstract base class for answer evaluators.

    Each evaluator handles one family of question types and is bound to the
    parsed answer schema of a single question.

    Subclasses must implement:
    - check(): Automatic correctness check
    - format_user_answer(): Display string for a submitted answer
    - format_correct_answer(): Display string for the stored correct answer
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Handled question types (set by subclasses)
    question_types: ClassVar[frozenset[QuestionType]] = frozenset()
    manual_grading: ClassVar[bool] = False

    answer_data: AnswerData = Field(default_factory=AnswerData, description="Parsed answer schema")

    @property
    def options(self) -> list[Any]:
        """Option list of the question, empty when absent or malformed."""
        options = self.answer_data.options
        return list(options) if isinstance(options, (list, tuple)) else []

    @abstractmethod
    def check(self, user_answer: Any) -> bool:
        """
        Check a submitted answer.

        Args:
            user_answer: Raw answer as submitted by the client

        Returns:
            True only when the answer is definitely correct
        """

    @abstractmethod
    def format_user_answer(self, user_answer: Any) -> str:
        """
        Format a submitted (non-blank) answer for display.

        Args:
            user_answer: Raw answer as submitted by the client

        Returns:
            Human-readable string
        """

    @abstractmethod
    def format_correct_answer(self) -> str:
        """Format the stored correct answer for display."""


class EvaluatorRegistry:
    """
    Registry for answer evaluators.

    Maps canonical question types to evaluator classes. Legacy aliases are
    resolved before lookup, so they never need their own registration.
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._evaluators: dict[QuestionType, type[AnswerEvaluator]] = {}

    def register(self, evaluator_class: type[AnswerEvaluator]) -> None:
        """
        Register an evaluator for every type it declares.

        Raises:
            TypeError: If evaluator_class is not an AnswerEvaluator subclass
        """
        if not (isinstance(evaluator_class, type) and issubclass(evaluator_class, AnswerEvaluator)):
            raise TypeError(f"evaluator_class must be a subclass of AnswerEvaluator, got {evaluator_class}")
        for question_type in evaluator_class.question_types:
            self._evaluators[question_type] = evaluator_class

    def get_evaluator(self, question_type: Any) -> Optional[type[AnswerEvaluator]]:
        """
        Get the evaluator class for a type tag.

        Args:
            question_type: Canonical tag, legacy alias or QuestionType

        Returns:
            Evaluator class, or None if the tag is unknown
        """
        canonical = normalize_question_type(question_type)
        if canonical is None:
            return None
        return self._evaluators.get(canonical)

    def create_evaluator(
        self,
        question_type: Any,
        answer_data: Optional[AnswerData],
    ) -> Optional[AnswerEvaluator]:
        """
        Create an evaluator bound to one question's answer schema.

        Returns:
            Evaluator instance, or None if the tag is unknown
        """
        evaluator_class = self.get_evaluator(question_type)
        if evaluator_class is None:
            return None
        return evaluator_class(answer_data=answer_data or AnswerData())

    def get_registered_types(self) -> list[QuestionType]:
        """List all registered canonical types."""
        return list(self._evaluators.keys())


def format_unknown_answer(user_answer: Any) -> str:
    """Fallback rendering for answers to questions of an unknown type."""
    if isinstance(user_answer, (dict, list, tuple)):
        return json.dumps(user_answer, separators=(",", ":"), ensure_ascii=False, default=str)
    return display_text(user_answer)
