"""
Multiple choice evaluators.

Handles mcq_single (one correct index) and mcq_two / mcq_three /
mcq_multiple (a set of correct indices).
"""

from __future__ import annotations

from typing import Any

from ..checkers import check_mcq_multiple, check_mcq_single
from ..evaluator import ANSWER_NOT_AVAILABLE, INVALID_ANSWER, NO_ANSWER, AnswerEvaluator
from ..normalize import display_text, option_at, to_number
from ..types import MULTIPLE_CHOICE_TYPES, QuestionType


class SingleChoiceEvaluator(AnswerEvaluator):
    """
    Evaluator for single-choice questions.

    Answer data: ``{"options": [...], "correct": 1}``
    User answer: index (1, "1") or option letter ("B")
    """

    question_types = frozenset({QuestionType.MCQ_SINGLE})

    def check(self, user_answer: Any) -> bool:
        """Compare the resolved index with the stored one."""
        return check_mcq_single(user_answer, self.answer_data.correct)

    def format_user_answer(self, user_answer: Any) -> str:
        """Show the selected option text, else the raw text that was sent."""
        option = option_at(self.options, to_number(user_answer))
        if option is not None:
            return option
        if isinstance(user_answer, str) and user_answer.strip():
            return user_answer
        return INVALID_ANSWER

    def format_correct_answer(self) -> str:
        option = option_at(self.options, to_number(self.answer_data.correct))
        return option if option is not None else ANSWER_NOT_AVAILABLE


class MultipleChoiceEvaluator(AnswerEvaluator):
    """
    Evaluator for questions with several correct options.

    Answer data: ``{"options": [...], "correct": [0, 2]}``
    User answer: list of indices or option letters, in any order
    """

    question_types = MULTIPLE_CHOICE_TYPES

    def check(self, user_answer: Any) -> bool:
        """All and only the correct options must be selected."""
        return check_mcq_multiple(user_answer, self.answer_data.correct)

    def format_user_answer(self, user_answer: Any) -> str:
        if not isinstance(user_answer, (list, tuple)) or not user_answer:
            return NO_ANSWER
        labels = []
        for value in user_answer:
            option = option_at(self.options, to_number(value))
            labels.append(option if option is not None else display_text(value))
        return ", ".join(labels)

    def format_correct_answer(self) -> str:
        correct = self.answer_data.correct
        if not isinstance(correct, (list, tuple)) or not correct:
            return ANSWER_NOT_AVAILABLE
        labels = []
        for value in correct:
            index = to_number(value)
            option = option_at(self.options, index)
            if option is None:
                option = f"Option {display_text((index or 0) + 1)}"
            labels.append(option)
        return ", ".join(labels)
