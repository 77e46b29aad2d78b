"""Session layer for Word Hunt."""

from .models import SessionConfig, Hint
from .session import Session, COMPLETE_MESSAGE

__all__ = [
    "SessionConfig",
    "Hint",
    "Session",
    "COMPLETE_MESSAGE",
]
