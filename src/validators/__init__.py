"""Selection validation for word-hunt puzzles."""

from .validate import validate, find_match, read_word, match_message, MESSAGES
from .models import Outcome, OutcomeCode, TOO_SHORT, NOT_STRAIGHT, IMPRECISE_LINE, MATCH, NO_MATCH
from .line import is_straight, unit_step, canonical_line

__all__ = [
    # Main validation
    "validate",
    "find_match",
    "read_word",
    "match_message",
    "MESSAGES",
    # Models
    "Outcome",
    "OutcomeCode",
    "TOO_SHORT",
    "NOT_STRAIGHT",
    "IMPRECISE_LINE",
    "MATCH",
    "NO_MATCH",
    # Line geometry
    "is_straight",
    "unit_step",
    "canonical_line",
]
