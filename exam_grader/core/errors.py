"""
Grading pipeline exceptions.

The answer evaluator never raises; these are raised by the service layer
that drives it over a whole attempt.
"""

from typing import Any, Dict, Optional

from .logging import get_logger

logger = get_logger(__name__)


class ExamGraderError(Exception):
    """Base exception for grading pipeline errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Standardized error payload for callers that serialize errors"""
        return {
            "error": {
                "type": self.__class__.__name__,
                "message": self.message,
                "details": self.details,
            }
        }


class QuestionNotFoundError(ExamGraderError):
    """Raised when an answer references a question that is not part of the attempt"""

    def __init__(self, question_id: str):
        super().__init__(
            message=f"Question '{question_id}' not found",
            details={"question_id": question_id}
        )


class GradingError(ExamGraderError):
    """Raised when grading an attempt fails unexpectedly"""

    def __init__(self, error: str, attempt_id: Optional[str] = None):
        details: Dict[str, Any] = {"error": error}
        if attempt_id:
            details["attempt_id"] = attempt_id
        super().__init__(
            message=f"Failed to grade attempt: {error}",
            details=details
        )


class ValidationError(ExamGraderError):
    """Raised for malformed grading input"""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message=message, details=details)


def log_error(error: Exception) -> Dict[str, Any]:
    """Log an error and return its serializable payload"""
    if isinstance(error, ExamGraderError):
        payload = error.to_dict()
    else:
        payload = {"error": {"type": error.__class__.__name__, "message": str(error)}}

    logger.error(
        f"Error occurred: {error}",
        extra_data={
            "error_type": error.__class__.__name__,
            **(error.details if isinstance(error, ExamGraderError) else {})
        },
        exc_info=error
    )
    return payload
