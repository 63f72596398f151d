"""True/false evaluator."""

from __future__ import annotations

from typing import Any

from ..checkers import check_true_false
from ..evaluator import ANSWER_NOT_AVAILABLE, AnswerEvaluator
from ..normalize import display_text, to_boolean
from ..types import QuestionType


def _label(value: bool) -> str:
    return "True" if value else "False"


class TrueFalseEvaluator(AnswerEvaluator):
    """
    Evaluator for true/false questions.

    Answer data: ``{"correct": true}``
    User answer: boolean, "true"/"false", "yes"/"no", "1"/"0" or 1/0
    """

    question_types = frozenset({QuestionType.TRUE_FALSE})

    def check(self, user_answer: Any) -> bool:
        return check_true_false(user_answer, self.answer_data.correct)

    def format_user_answer(self, user_answer: Any) -> str:
        value = to_boolean(user_answer)
        if value is None:
            return display_text(user_answer)
        return _label(value)

    def format_correct_answer(self) -> str:
        value = to_boolean(self.answer_data.correct)
        if value is None:
            return ANSWER_NOT_AVAILABLE
        return _label(value)
