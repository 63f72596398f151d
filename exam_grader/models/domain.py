"""
Domain models for the grading pipeline.

These are the values exchanged with the surrounding application: graded
answers, graded attempts and learner progress.
"""

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..answer.stats import AttemptAnswer, ExamResultStats


class GradedAnswer(AttemptAnswer):
    """An attempt row produced by the grading service"""
    question_id: Union[str, int]
    question_type: str
    requires_manual_grading: bool = False
    user_answer_formatted: str = ""
    correct_answer_formatted: str = ""


class AttemptResult(BaseModel):
    """A fully graded attempt"""
    attempt_id: Optional[str] = None
    answers: List[GradedAnswer] = Field(default_factory=list)
    stats: ExamResultStats
    pending_manual_grading: int = 0
    graded_at: datetime

    @property
    def is_fully_graded(self) -> bool:
        """True when no answer waits for a human grader"""
        return self.pending_manual_grading == 0

    def answers_by_question(self) -> Dict[Union[str, int], GradedAnswer]:
        """Index graded answers by question id"""
        return {answer.question_id: answer for answer in self.answers}


class CompletedExam(BaseModel):
    """A finished attempt as stored in the learner's history"""

    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[str, int]] = None
    score: Optional[float] = None
    total_marks: Optional[float] = None
    percentage: Optional[float] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class LearnerProgress(BaseModel):
    """Summary of a learner's exam history"""
    exams_taken: int = 0
    exams_passed: int = 0
    average_score: int = 0
    total_time_spent_seconds: int = 0
    streak_days: int = 0
    last_activity_at: Optional[datetime] = None
