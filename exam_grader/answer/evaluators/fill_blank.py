"""Fill-in-the-blank evaluator."""

from __future__ import annotations

from typing import Any

from ..checkers import check_fill_blank
from ..evaluator import ANSWER_NOT_AVAILABLE, AnswerEvaluator
from ..normalize import display_text
from ..types import QuestionType


class FillBlankEvaluator(AnswerEvaluator):
    """
    Evaluator for fill-in-the-blank questions.

    Answer data: ``{"blanks": ["Paris"]}`` or
    ``{"blanks": [["cat", "feline"], ["dog"]]}``
    User answer: string for one blank, list of strings for several
    """

    question_types = frozenset({QuestionType.FILL_BLANK})

    def check(self, user_answer: Any) -> bool:
        return check_fill_blank(user_answer, self.answer_data.blanks)

    def format_user_answer(self, user_answer: Any) -> str:
        if isinstance(user_answer, (list, tuple)):
            return ", ".join(display_text(value) for value in user_answer)
        return display_text(user_answer)

    def format_correct_answer(self) -> str:
        blanks = self.answer_data.blanks
        if not isinstance(blanks, (list, tuple)) or not blanks:
            return ANSWER_NOT_AVAILABLE
        rendered = []
        for blank in blanks:
            if isinstance(blank, (list, tuple)):
                rendered.append(" / ".join(display_text(option) for option in blank))
            else:
                rendered.append(display_text(blank))
        return ", ".join(rendered)
