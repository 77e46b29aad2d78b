"""Data models for selection validation."""

from typing import Literal, Optional
from pydantic import BaseModel


OutcomeCode = Literal["TOO_SHORT", "NOT_STRAIGHT", "IMPRECISE_LINE", "MATCH", "NO_MATCH"]

TOO_SHORT: OutcomeCode = "TOO_SHORT"
NOT_STRAIGHT: OutcomeCode = "NOT_STRAIGHT"
IMPRECISE_LINE: OutcomeCode = "IMPRECISE_LINE"
MATCH: OutcomeCode = "MATCH"
NO_MATCH: OutcomeCode = "NO_MATCH"


class Outcome(BaseModel):
    """Result of validating one selection."""
    code: OutcomeCode
    message: str
    word: Optional[str] = None  # The hidden word, for MATCH
    selected_word: Optional[str] = None  # Letters read along the line, once one was traced

    @property
    def is_match(self) -> bool:
        return self.code == MATCH
