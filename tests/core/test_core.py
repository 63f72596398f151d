"""Tests for configuration, structured logging and error payloads."""

import json
import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from exam_grader.core import (
    ExamGraderError,
    GradingError,
    QuestionNotFoundError,
    ValidationError,
    get_context_logger,
    log_error,
    setup_logging,
)
from exam_grader.core.config import Settings, get_settings
from exam_grader.core.logging import StructuredFormatter, TextFormatter


def make_record(message: str = "Attempt graded", **extra_data) -> logging.LogRecord:
    record = logging.LogRecord("exam_grader.test", logging.INFO, __file__, 10, message, None, None)
    if extra_data:
        record.extra_data = extra_data
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestSettings:
    """Test application settings."""

    def test_defaults(self):
        config = Settings(_env_file=None)
        assert config.PASSING_PERCENTAGE == 35
        assert config.MAX_ANSWER_LENGTH == 10000
        assert config.LOG_FORMAT == "json"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PASSING_PERCENTAGE", "50")
        assert Settings(_env_file=None).PASSING_PERCENTAGE == 50

    @pytest.mark.parametrize("value", [-1, 101])
    def test_passing_percentage_bounds(self, value):
        with pytest.raises(PydanticValidationError):
            Settings(PASSING_PERCENTAGE=value)

    def test_answer_length_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            Settings(MAX_ANSWER_LENGTH=0)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestFormatters:
    """Test log formatters."""

    def test_structured_formatter(self):
        output = json.loads(StructuredFormatter().format(make_record(attempt_id="a1", percentage=72)))
        assert output["message"] == "Attempt graded"
        assert output["level"] == "INFO"
        assert output["logger"] == "exam_grader.test"
        assert output["attempt_id"] == "a1"
        assert output["percentage"] == 72

    def test_structured_formatter_handles_arbitrary_payloads(self):
        output = json.loads(StructuredFormatter().format(make_record(answer={1, 2})))
        assert isinstance(output["answer"], str)

    def test_text_formatter(self):
        output = TextFormatter().format(make_record(question_id="q1"))
        assert "exam_grader.test - INFO - Attempt graded" in output
        assert output.endswith("{'question_id': 'q1'}")

    def test_text_formatter_without_extra_data(self):
        assert TextFormatter().format(make_record()).endswith("Attempt graded")


class TestLoggerAdapter:
    """Test the structured logger adapter."""

    def test_context_is_merged(self):
        logger = get_context_logger("exam_grader.test", attempt_id="a1")
        _, kwargs = logger.process("Answer graded", {"extra_data": {"question_id": "q1"}})
        assert kwargs["extra"]["extra_data"] == {"attempt_id": "a1", "question_id": "q1"}

    def test_extra_data_reaches_records(self, caplog):
        logger = get_context_logger("exam_grader.test", attempt_id="a1")
        with caplog.at_level(logging.INFO):
            logger.info("Answer graded")
        assert caplog.records[-1].extra_data == {"attempt_id": "a1"}


class TestSetupLogging:
    """Test logging setup."""

    def test_text_format_with_file(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "grader.log"
        setup_logging(Settings(LOG_FORMAT="text", LOG_LEVEL="debug", LOG_FILE=str(log_file)))

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert all(isinstance(handler.formatter, TextFormatter) for handler in root.handlers)
        assert log_file.exists()

    def test_json_format(self, restore_root_logger):
        setup_logging(Settings(LOG_FORMAT="json", LOG_LEVEL="WARNING"))

        root = restore_root_logger
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)


class TestErrors:
    """Test error payloads."""

    def test_base_error(self):
        error = ExamGraderError("Something failed", {"key": "value"})
        assert str(error) == "Something failed"
        assert error.to_dict() == {
            "error": {"type": "ExamGraderError", "message": "Something failed", "details": {"key": "value"}}
        }

    def test_question_not_found(self):
        error = QuestionNotFoundError("q9")
        assert error.message == "Question 'q9' not found"
        assert error.details == {"question_id": "q9"}

    def test_grading_error_without_attempt(self):
        assert GradingError("boom").details == {"error": "boom"}

    def test_validation_error_field(self):
        assert ValidationError("bad").details == {}
        assert ValidationError("bad", field="questions").details == {"field": "questions"}

    def test_log_error(self, caplog):
        with caplog.at_level(logging.ERROR):
            payload = log_error(QuestionNotFoundError("q9"))
        assert payload["error"]["type"] == "QuestionNotFoundError"
        assert caplog.records[-1].extra_data["question_id"] == "q9"

    def test_log_error_for_foreign_exceptions(self):
        payload = log_error(KeyError("q9"))
        assert payload == {"error": {"type": "KeyError", "message": "'q9'"}}
