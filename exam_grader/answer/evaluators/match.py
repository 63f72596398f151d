"""Match-the-pairs evaluator."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..checkers import check_match
from ..evaluator import ANSWER_NOT_AVAILABLE, NO_ANSWER, AnswerEvaluator
from ..normalize import display_text
from ..types import QuestionType

ARROW = "→"


class MatchEvaluator(AnswerEvaluator):
    """
    Evaluator for match-the-pairs questions.

    Answer data: ``{"pairs": [{"left": "Cow", "right": "Milk"}, ...]}``
    User answer: ``{"Cow": "Milk", ...}``
    """

    question_types = frozenset({QuestionType.MATCH})

    def check(self, user_answer: Any) -> bool:
        return check_match(user_answer, self.answer_data.pairs)

    def format_user_answer(self, user_answer: Any) -> str:
        if not isinstance(user_answer, Mapping) or not user_answer:
            return NO_ANSWER
        return ", ".join(
            f"{display_text(left)} {ARROW} {display_text(right)}"
            for left, right in user_answer.items()
        )

    def format_correct_answer(self) -> str:
        pairs = self.answer_data.pairs
        if not isinstance(pairs, (list, tuple)):
            return ANSWER_NOT_AVAILABLE
        rendered = [
            f"{display_text(pair.get('left'))} {ARROW} {display_text(pair.get('right'))}"
            for pair in pairs
            if isinstance(pair, Mapping)
        ]
        return ", ".join(rendered) if rendered else ANSWER_NOT_AVAILABLE
