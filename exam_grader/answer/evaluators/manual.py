"""Evaluator for free-text question types that need a human grader."""

from __future__ import annotations

from typing import Any

from ..evaluator import SEE_EXPLANATION, AnswerEvaluator
from ..normalize import display_text
from ..types import MANUAL_GRADING_TYPES


class ManualGradingEvaluator(AnswerEvaluator):
    """
    Evaluator for short_answer, long_answer and programming questions.

    The automatic check always reports False. Callers must consult
    ``requires_manual_grading`` before reading that as "wrong".
    """

    question_types = MANUAL_GRADING_TYPES
    manual_grading = True

    def check(self, user_answer: Any) -> bool:
        return False

    def format_user_answer(self, user_answer: Any) -> str:
        return display_text(user_answer)

    def format_correct_answer(self) -> str:
        for reference in (self.answer_data.answer, self.answer_data.sample_answer):
            if reference:
                return display_text(reference)
        return SEE_EXPLANATION
