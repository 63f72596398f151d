"""Domain models package"""

from .domain import (
    GradedAnswer,
    AttemptResult,
    CompletedExam,
    LearnerProgress,
)

__all__ = [
    "GradedAnswer",
    "AttemptResult",
    "CompletedExam",
    "LearnerProgress",
]
