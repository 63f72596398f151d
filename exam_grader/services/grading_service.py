"""
Grading service for exam attempts.

Runs the answer evaluator over every question of an attempt, assigns the
tri-state correctness and marks, and aggregates the attempt statistics.
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from ..answer import (
    QuestionRecord,
    calculate_exam_stats,
    check_answer,
    format_correct_answer,
    format_user_answer,
    requires_manual_grading,
)
from ..answer.evaluator import is_blank_answer
from ..answer.grading import canonical_type_name
from ..core.config import Settings, settings as default_settings
from ..core.errors import GradingError, QuestionNotFoundError, ValidationError, log_error
from ..core.logging import get_logger
from ..models.domain import AttemptResult, GradedAnswer

logger = get_logger(__name__)

QuestionInput = Union[QuestionRecord, Mapping[str, Any]]


class GradingService:
    """
    Service for grading exam attempts.

    Produces the per-question rows the application persists and the
    attempt statistics shown on results pages.
    """

    def __init__(self, config: Optional[Settings] = None):
        self.settings = config or default_settings

        logger.info(
            "GradingService initialized",
            extra_data={"passing_percentage": self.settings.PASSING_PERCENTAGE}
        )

    def _to_record(self, question: QuestionInput) -> QuestionRecord:
        if isinstance(question, QuestionRecord):
            return question
        try:
            return QuestionRecord.model_validate(question)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid question record: {e.errors()[0]['msg']}", field="questions") from e

    def _check_length(self, question_id: Any, user_answer: Any) -> None:
        values = user_answer if isinstance(user_answer, (list, tuple)) else [user_answer]
        limit = self.settings.MAX_ANSWER_LENGTH
        if any(isinstance(value, str) and len(value) > limit for value in values):
            raise ValidationError(
                f"Answer too long (max {limit} characters)",
                field=str(question_id)
            )

    def grade_answer(self, question: QuestionInput, user_answer: Any) -> GradedAnswer:
        """
        Grade one answer.

        ``is_correct`` is None when nothing was submitted or when the
        question type needs a human grader; otherwise it is the verdict of
        the automatic check. Marks are awarded only for a correct answer.

        Args:
            question: QuestionRecord or mapping with id, question_type,
                answer_data and marks
            user_answer: Raw answer as submitted by the client

        Returns:
            GradedAnswer row

        Raises:
            ValidationError: If the question record or answer is malformed
        """
        record = self._to_record(question)
        self._check_length(record.id, user_answer)

        manual = requires_manual_grading(record.question_type)
        if manual or is_blank_answer(user_answer):
            is_correct = None
        else:
            is_correct = check_answer(record, user_answer)

        return GradedAnswer(
            question_id=record.id,
            question_type=canonical_type_name(record.question_type),
            question=record,
            user_answer=user_answer,
            is_correct=is_correct,
            marks_obtained=record.marks if is_correct else 0,
            requires_manual_grading=manual,
            user_answer_formatted=format_user_answer(
                user_answer, record.question_type, record.answer_data
            ),
            correct_answer_formatted=format_correct_answer(
                record.question_type, record.answer_data
            ),
        )

    def grade_attempt(
        self,
        questions: Sequence[QuestionInput],
        answers: Dict[str, Any],
        passing_percentage: Optional[float] = None,
        attempt_id: Optional[str] = None,
    ) -> AttemptResult:
        """
        Grade every question of an attempt.

        Args:
            questions: Questions of the exam, in display order
            answers: Submitted answers keyed by question id; missing
                questions are graded as unanswered
            passing_percentage: Pass threshold, defaults to the configured one
            attempt_id: Optional attempt identifier for logs and errors

        Returns:
            AttemptResult with graded rows and statistics

        Raises:
            ValidationError: If a question is malformed, repeated, or an
                answer is too long
            QuestionNotFoundError: If an answer targets an unknown question
            GradingError: If grading fails unexpectedly
        """
        threshold = (
            self.settings.PASSING_PERCENTAGE if passing_percentage is None else passing_percentage
        )

        logger.info(
            "Grading attempt",
            extra_data={
                "attempt_id": attempt_id,
                "num_questions": len(questions),
                "num_answers": len(answers),
            }
        )

        records = [self._to_record(question) for question in questions]
        by_id: Dict[str, QuestionRecord] = {}
        for record in records:
            key = str(record.id)
            if key in by_id:
                raise ValidationError(f"Duplicate question '{key}' in attempt", field="questions")
            by_id[key] = record

        submitted = {str(question_id): answer for question_id, answer in answers.items()}
        for question_id in submitted:
            if question_id not in by_id:
                raise QuestionNotFoundError(question_id)

        try:
            graded = [self.grade_answer(record, submitted.get(str(record.id))) for record in records]
            total_marks = sum(record.marks for record in records)
            stats = calculate_exam_stats(graded, total_marks, threshold)
        except ValidationError:
            raise
        except Exception as e:
            log_error(e)
            raise GradingError(str(e), attempt_id) from e

        result = AttemptResult(
            attempt_id=attempt_id,
            answers=graded,
            stats=stats,
            pending_manual_grading=sum(
                1 for answer in graded if answer.requires_manual_grading and answer.is_answered()
            ),
            graded_at=datetime.now(timezone.utc),
        )

        logger.info(
            "Grading completed",
            extra_data={
                "attempt_id": attempt_id,
                "percentage": stats.percentage,
                "is_passing": stats.is_passing,
                "pending_manual_grading": result.pending_manual_grading,
            }
        )

        return result


# Factory function
def get_grading_service(config: Optional[Settings] = None) -> GradingService:
    """Create grading service instance"""
    return GradingService(config)
