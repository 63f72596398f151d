"""Tests for AnswerEvaluator, EvaluatorRegistry and question types."""

from typing import Any

import pytest

from exam_grader.answer import (
    QUESTION_TYPE_LABELS,
    AnswerData,
    AnswerEvaluator,
    EvaluatorRegistry,
    QuestionType,
    default_registry,
    normalize_question_type,
    parse_answer_data,
)
from exam_grader.answer.evaluators import (
    ManualGradingEvaluator,
    MultipleChoiceEvaluator,
    SingleChoiceEvaluator,
    TrueFalseEvaluator,
)


class TestQuestionTypes:
    """Test type tag normalization."""

    def test_canonical_tags(self):
        for question_type in QuestionType:
            assert normalize_question_type(question_type.value) is question_type

    def test_legacy_aliases(self):
        assert normalize_question_type("mcq") is QuestionType.MCQ_SINGLE
        assert normalize_question_type("tf") is QuestionType.TRUE_FALSE

    @pytest.mark.parametrize("tag", ["MCQ_SINGLE", "essay", "", None, 3])
    def test_unknown_tags(self, tag):
        assert normalize_question_type(tag) is None

    def test_every_type_has_a_label(self):
        assert set(QUESTION_TYPE_LABELS) == set(QuestionType)


class TestParseAnswerData:
    """Test answer_data parsing."""

    def test_mapping(self):
        data = parse_answer_data({"options": ["a"], "correct": 0})
        assert data.options == ["a"]
        assert data.correct == 0

    def test_json_string(self):
        data = parse_answer_data('{"sampleAnswer": "x", "keywords": ["k"]}')
        assert data.sample_answer == "x"
        assert data.keywords == ["k"]

    def test_parsed_instance_is_reused(self):
        data = AnswerData(correct=True)
        assert parse_answer_data(data) is data

    def test_unknown_keys_are_kept(self):
        assert parse_answer_data({"max_words": 200}).max_words == 200

    @pytest.mark.parametrize("raw", [None, "", "{oops", "[1, 2]", 42, ["a"]])
    def test_unusable_input(self, raw):
        assert parse_answer_data(raw) is None


class TestEvaluatorRegistry:
    """Test registration and dispatch."""

    def test_default_registry_covers_every_type(self):
        assert set(default_registry.get_registered_types()) == set(QuestionType)

    def test_lookup_by_alias(self):
        assert default_registry.get_evaluator("mcq") is SingleChoiceEvaluator
        assert default_registry.get_evaluator("tf") is TrueFalseEvaluator
        assert default_registry.get_evaluator("mcq_three") is MultipleChoiceEvaluator
        assert default_registry.get_evaluator("programming") is ManualGradingEvaluator

    def test_unknown_type(self):
        assert default_registry.get_evaluator("essay") is None
        assert default_registry.create_evaluator("essay", AnswerData()) is None

    def test_create_without_schema(self):
        evaluator = default_registry.create_evaluator("mcq_single", None)
        assert isinstance(evaluator, SingleChoiceEvaluator)
        assert evaluator.options == []
        assert evaluator.check(0) is False

    def test_register_rejects_non_evaluators(self):
        registry = EvaluatorRegistry()
        with pytest.raises(TypeError):
            registry.register(dict)

    def test_custom_evaluator(self):
        """Test that a registry can be extended with a new evaluator."""
        class AlwaysRight(AnswerEvaluator):
            question_types = frozenset({QuestionType.LONG_ANSWER})

            def check(self, user_answer: Any) -> bool:
                return True

            def format_user_answer(self, user_answer: Any) -> str:
                return "ok"

            def format_correct_answer(self) -> str:
                return "ok"

        registry = EvaluatorRegistry()
        registry.register(AlwaysRight)
        evaluator = registry.create_evaluator("long_answer", AnswerData())
        assert evaluator.check("anything") is True
        assert registry.get_registered_types() == [QuestionType.LONG_ANSWER]

    def test_cannot_instantiate_abstract_class(self):
        with pytest.raises(TypeError):
            AnswerEvaluator()
