"""
Type-specific answer evaluators.

Each module implements the evaluator for one family of question types.
"""

from .choice import MultipleChoiceEvaluator, SingleChoiceEvaluator
from .fill_blank import FillBlankEvaluator
from .manual import ManualGradingEvaluator
from .match import MatchEvaluator
from .true_false import TrueFalseEvaluator

__all__ = [
    "SingleChoiceEvaluator",
    "MultipleChoiceEvaluator",
    "TrueFalseEvaluator",
    "FillBlankEvaluator",
    "MatchEvaluator",
    "ManualGradingEvaluator",
]
