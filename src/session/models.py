"""
Pydantic models for the session layer.

Configuration and the small result types a front end receives from a Session.
The Session class itself lives in session.py.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from ..puzzle.models import Cell
from ..puzzle.wordlists import DEFAULT_LANGUAGE, WORD_LISTS


class SessionConfig(BaseModel):
    """Configuration for a puzzle session."""
    language: str = DEFAULT_LANGUAGE
    grid_size: int = Field(default=15, ge=1)
    hint_count: int = Field(default=3, ge=0)
    flash_duration: float = Field(default=2.0, gt=0)  # Seconds a hinted word stays highlighted
    seed: Optional[int] = None
    words: Optional[List[str]] = None  # Overrides the language's built-in list
    alphabet: Optional[str] = Field(default=None, min_length=1)  # Overrides the language's fill alphabet

    @field_validator("language")
    @classmethod
    def check_language(cls, value: str) -> str:
        if value not in WORD_LISTS:
            raise ValueError(f"Unknown language '{value}' (known: {', '.join(sorted(WORD_LISTS))})")
        return value


class Hint(BaseModel):
    """A word to flash on the grid for `duration` seconds."""
    word: str
    cells: List[Cell]
    duration: float
