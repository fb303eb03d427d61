from .scoring import LetterStatus, EvaluationResult, evaluate, pattern, is_win
from .keyboard import merge_key_states, key_status, aggregate
from .constraints import Constraints, filter_candidates, solve
from .validation import validate_guess, rejection_reason

__all__ = [
    "LetterStatus", "EvaluationResult", "evaluate", "pattern", "is_win",
    "merge_key_states", "key_status", "aggregate",
    "Constraints", "filter_candidates", "solve",
    "validate_guess", "rejection_reason",
]
