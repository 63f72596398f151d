"""
Answer check result data structure.

Bundles the verdict on one answer with the display strings a results page
needs, so callers do not have to run the checker and both formatters
separately.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class AnswerCheckResult(BaseModel):
    """
    Result of checking one answer.

    Attributes:
        is_correct: Verdict of the automatic check (always False for
            manually graded types)
        user_answer_formatted: Submitted answer rendered for display
        correct_answer_formatted: Stored correct answer rendered for display
        requires_manual_grading: True when ``is_correct`` must not be read
            as "wrong"
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_correct: StrictBool = Field(default=False, alias="isCorrect")
    user_answer_formatted: str = Field(default="", alias="userAnswerFormatted")
    correct_answer_formatted: str = Field(default="", alias="correctAnswerFormatted")
    requires_manual_grading: StrictBool = Field(default=False, alias="requiresManualGrading")

    def is_graded(self) -> bool:
        """Check if the verdict is final without a human grader."""
        return not self.requires_manual_grading

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary with the camelCase keys the dashboard expects
        """
        return self.model_dump(by_alias=True)
