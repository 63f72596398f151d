"""
answer - Answer checking and result computation for exam attempts

Provides:
- Input normalizers tolerant of heterogeneous client payloads
- Type-specific evaluators dispatched on the question type tag
- Display formatting for submitted and correct answers
- Attempt-level statistics (score, percentage, pass/fail)

Nothing in this package raises on bad input; it fails closed.
"""

from .checkers import (
    check_fill_blank,
    check_match,
    check_mcq_multiple,
    check_mcq_single,
    check_true_false,
)
from .evaluator import AnswerEvaluator, EvaluatorRegistry
from .grading import (
    check_answer,
    check_answer_detailed,
    default_registry,
    format_correct_answer,
    format_user_answer,
    is_auto_gradable,
    requires_manual_grading,
)
from .normalize import (
    OPTION_LABELS,
    label_to_index,
    normalize_string,
    to_boolean,
    to_number,
    user_answer_to_index,
)
from .result import AnswerCheckResult
from .selection import is_boolean_selected, is_option_selected
from .stats import (
    DEFAULT_PASSING_PERCENTAGE,
    AttemptAnswer,
    ExamResultStats,
    calculate_exam_stats,
)
from .types import (
    QUESTION_TYPE_LABELS,
    AnswerData,
    MatchPair,
    QuestionRecord,
    QuestionType,
    normalize_question_type,
    parse_answer_data,
)

__all__ = [
    # Entry points
    "check_answer",
    "check_answer_detailed",
    "requires_manual_grading",
    "is_auto_gradable",
    "format_user_answer",
    "format_correct_answer",
    "calculate_exam_stats",
    # Per-type checks
    "check_mcq_single",
    "check_mcq_multiple",
    "check_true_false",
    "check_fill_blank",
    "check_match",
    # Normalizers
    "OPTION_LABELS",
    "to_number",
    "to_boolean",
    "normalize_string",
    "label_to_index",
    "user_answer_to_index",
    # Selection helpers
    "is_option_selected",
    "is_boolean_selected",
    # Types and models
    "QuestionType",
    "QUESTION_TYPE_LABELS",
    "normalize_question_type",
    "AnswerData",
    "MatchPair",
    "QuestionRecord",
    "parse_answer_data",
    "AnswerCheckResult",
    "AttemptAnswer",
    "ExamResultStats",
    "DEFAULT_PASSING_PERCENTAGE",
    # Dispatch
    "AnswerEvaluator",
    "EvaluatorRegistry",
    "default_registry",
]
