"""Service layer package"""

from .grading_service import GradingService, get_grading_service
from .progress_service import ProgressService, calculate_streak_days, get_progress_service

__all__ = [
    "GradingService",
    "get_grading_service",
    "ProgressService",
    "calculate_streak_days",
    "get_progress_service",
]
