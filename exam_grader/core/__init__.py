"""Core utilities package"""

from .config import settings, get_settings, Settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    ExamGraderError,
    QuestionNotFoundError,
    GradingError,
    ValidationError,
    log_error,
)

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "ExamGraderError",
    "QuestionNotFoundError",
    "GradingError",
    "ValidationError",
    "log_error",
]
