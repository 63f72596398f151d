"""
Shared pytest fixtures for the exam_grader test suite.

This module provides:
- Question records covering every question type
- Settings instances for the service layer
- Helpers for comparing Pydantic models
"""

import pytest
from typing import Any
from pydantic import BaseModel

from exam_grader.answer import QuestionRecord
from exam_grader.core.config import Settings


@pytest.fixture
def make_question():
    """Factory for QuestionRecord instances."""
    def _factory(question_type: str, answer_data: Any, marks: float = 1, id: str = "q1") -> QuestionRecord:
        return QuestionRecord(id=id, question_type=question_type, answer_data=answer_data, marks=marks)
    return _factory


@pytest.fixture
def mcq_single_question(make_question) -> QuestionRecord:
    """Single-choice question whose correct option is 'Mars' (index 1)."""
    return make_question(
        "mcq_single",
        {"options": ["Venus", "Mars", "Jupiter", "Saturn"], "correct": 1},
        id="q-mcq",
    )


@pytest.fixture
def mcq_two_question(make_question) -> QuestionRecord:
    """Two-answer question stored the way the admin editor saves it."""
    return make_question(
        "mcq_two",
        {"options": ["2", "3", "4", "5"], "correct": [1, 3]},
        marks=2,
        id="q-primes",
    )


@pytest.fixture
def true_false_question(make_question) -> QuestionRecord:
    return make_question("true_false", {"correct": False}, id="q-tf")


@pytest.fixture
def fill_blank_question(make_question) -> QuestionRecord:
    return make_question(
        "fill_blank",
        {"blanks": [["cat", "feline"], ["dog"]]},
        marks=2,
        id="q-blank",
    )


@pytest.fixture
def match_question(make_question) -> QuestionRecord:
    return make_question(
        "match",
        {
            "pairs": [
                {"left": "गाय", "right": "दूध", "left_en": "Cow", "right_en": "Milk"},
                {"left": "Bee", "right": "Honey"},
                {"left": "Hen", "right": "Egg"},
            ]
        },
        marks=3,
        id="q-match",
    )


@pytest.fixture
def short_answer_question(make_question) -> QuestionRecord:
    return make_question(
        "short_answer",
        {"sampleAnswer": "Evaporation and condensation", "keywords": ["evaporation"]},
        marks=4,
        id="q-short",
    )


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the default threshold and a short answer limit."""
    return Settings(PASSING_PERCENTAGE=35, MAX_ANSWER_LENGTH=200, LOG_FORMAT="text")


@pytest.fixture
def assert_model_equality():
    """Helper to assert that two Pydantic models are equal."""
    def _assert_equal(model1: BaseModel, model2: BaseModel, ignore_fields: set[str] | None = None) -> None:
        """
        Assert that two models are equal, optionally ignoring certain fields.

        Args:
            model1: First model to compare
            model2: Second model to compare
            ignore_fields: Set of field names to ignore in comparison
        """
        ignore_fields = ignore_fields or set()

        dict1 = model1.model_dump(exclude=ignore_fields)
        dict2 = model2.model_dump(exclude=ignore_fields)

        assert dict1 == dict2, f"Models not equal:\n{dict1}\n!=\n{dict2}"

    return _assert_equal
