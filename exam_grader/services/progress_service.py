"""
Learner progress service.

Summarizes a learner's finished attempts for the profile page: how many
exams were taken and passed, the average score, time spent and the
current daily streak.
"""

from collections.abc import Mapping
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Optional, Union

from ..answer.stats import round_half_up
from ..core.config import Settings, settings as default_settings
from ..core.logging import get_logger
from ..models.domain import CompletedExam, LearnerProgress

logger = get_logger(__name__)


def _as_date(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def calculate_streak_days(
    completed_at: Iterable[Optional[Union[date, datetime]]],
    today: Optional[date] = None,
) -> int:
    """
    Count consecutive days with at least one finished exam.

    The streak is alive only if the most recent activity was today or
    yesterday; it then extends back one calendar day at a time.

    Args:
        completed_at: Completion timestamps, None entries are ignored
        today: Reference day, defaults to the current local date

    Returns:
        Streak length in days, 0 when there is no live streak
    """
    days = sorted({_as_date(value) for value in completed_at if value is not None}, reverse=True)
    if not days:
        return 0

    today = today or date.today()
    if days[0] not in (today, today - timedelta(days=1)):
        return 0

    streak = 1
    for previous, current in zip(days, days[1:]):
        if previous - current != timedelta(days=1):
            break
        streak += 1
    return streak


def exam_percentage(exam: CompletedExam) -> float:
    """Stored percentage of an exam, derived from score and total marks if absent."""
    if exam.percentage is not None:
        return exam.percentage
    if exam.score is not None and exam.total_marks:
        return exam.score / exam.total_marks * 100
    return 0


class ProgressService:
    """Service for learner progress summaries"""

    def __init__(self, config: Optional[Settings] = None):
        self.settings = config or default_settings

    def summarize(
        self,
        exams: Iterable[Union[CompletedExam, Mapping[str, Any]]],
        passing_percentage: Optional[float] = None,
        today: Optional[date] = None,
    ) -> LearnerProgress:
        """
        Summarize a learner's finished exams.

        Args:
            exams: Completed attempts (models or mappings)
            passing_percentage: Pass threshold, defaults to the configured one
            today: Reference day for the streak

        Returns:
            LearnerProgress summary
        """
        threshold = (
            self.settings.PASSING_PERCENTAGE if passing_percentage is None else passing_percentage
        )
        history = [
            exam if isinstance(exam, CompletedExam) else CompletedExam.model_validate(exam)
            for exam in exams
        ]

        if not history:
            return LearnerProgress()

        percentages = [exam_percentage(exam) for exam in history]

        time_spent = 0
        for exam in history:
            if exam.started_at and exam.completed_at:
                time_spent += int((exam.completed_at - exam.started_at).total_seconds())

        completed = [exam.completed_at for exam in history if exam.completed_at is not None]

        progress = LearnerProgress(
            exams_taken=len(history),
            exams_passed=sum(1 for pct in percentages if pct >= threshold),
            average_score=round_half_up(sum(percentages) / len(history)),
            total_time_spent_seconds=time_spent,
            streak_days=calculate_streak_days(completed, today=today),
            last_activity_at=max(completed) if completed else None,
        )

        logger.info(
            "Progress summarized",
            extra_data={
                "exams_taken": progress.exams_taken,
                "average_score": progress.average_score,
                "streak_days": progress.streak_days,
            }
        )
        return progress


# Factory function
def get_progress_service(config: Optional[Settings] = None) -> ProgressService:
    """Create progress service instance"""
    return ProgressService(config)
