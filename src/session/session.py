"""
Session class owning the state of one player's word hunt.

Holds the current puzzle, the words found so far and the hints left, and
routes each selection through the validator. Front ends keep one Session and
render from it; nothing here touches a display or a timer.
"""

import random
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set
from pydantic import BaseModel, Field, ConfigDict

from ..puzzle.generator import generate
from ..puzzle.models import Cell, PuzzleState
from ..puzzle.wordlists import get_alphabet, get_word_list
from ..validators.models import Outcome
from ..validators.validate import validate
from .models import SessionConfig, Hint


COMPLETE_MESSAGE = "Congratulations! You found all the words!"


class Session(BaseModel):
    """
    Manages a single word-hunt session.

    Attributes:
        config: Session configuration
        puzzle: The current puzzle (replaced by new_puzzle)
        found_words: Words matched on the current puzzle
        hints_remaining: Hints left for the current puzzle
        message: Latest status line for the player
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: SessionConfig = Field(default_factory=SessionConfig)
    puzzle: Optional[PuzzleState] = None
    found_words: Set[str] = Field(default_factory=set)
    hints_remaining: int = 0
    message: str = ""
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(cls, config: Optional[SessionConfig] = None, **config_kwargs: Any) -> "Session":
        """
        Factory method to create a session with its first puzzle generated.

        Args:
            config: Optional SessionConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            A ready-to-play Session
        """
        if config is None:
            config = SessionConfig(**config_kwargs)

        session = cls(config=config)
        session.new_puzzle()
        return session

    @property
    def word_list(self) -> List[str]:
        """Words requested for each puzzle."""
        if self.config.words is not None:
            return list(self.config.words)
        return get_word_list(self.config.language)

    @property
    def alphabet(self) -> str:
        """Characters used to fill cells no word occupies."""
        return self.config.alphabet or get_alphabet(self.config.language)

    def new_puzzle(self, language: Optional[str] = None) -> PuzzleState:
        """
        Generate a fresh puzzle and reset found words and hints.

        Switching language drops any explicit word list or alphabet overrides.

        Args:
            language: Optional language to switch to

        Returns:
            The new PuzzleState
        """
        if language is not None and language != self.config.language:
            self.config = SessionConfig(
                **self.config.model_dump(exclude={"language", "words", "alphabet"}),
                language=language,
            )

        puzzle = generate(
            self.word_list,
            grid_size=self.config.grid_size,
            fill_alphabet=self.alphabet,
            rng=self._rng,
        )

        # Puzzle and found words are only ever replaced together
        self.puzzle = puzzle
        self.found_words = set()
        self.hints_remaining = self.config.hint_count
        self.message = f"Find all the hidden {self.config.language} words!"
        return puzzle

    def _require_puzzle(self) -> PuzzleState:
        if self.puzzle is None:
            raise ValueError("No puzzle generated yet; call new_puzzle() first")
        return self.puzzle

    @property
    def words_to_find(self) -> List[str]:
        """All hidden words on the current puzzle, alphabetical."""
        if self.puzzle is None:
            return []
        return sorted(self.puzzle.placements)

    @property
    def remaining_words(self) -> List[str]:
        """Hidden words not found yet, alphabetical."""
        return [w for w in self.words_to_find if w not in self.found_words]

    @property
    def is_complete(self) -> bool:
        """Whether every hidden word has been found."""
        return bool(self.words_to_find) and not self.remaining_words

    def submit(self, path: Iterable[Sequence[int]]) -> Outcome:
        """
        Check one selection and record it if it finds a word.

        Args:
            path: Cells in the order they were selected

        Returns:
            The validator's Outcome
        """
        puzzle = self._require_puzzle()
        outcome = validate(path, puzzle, self.found_words)

        if outcome.is_match:
            self.found_words.add(outcome.word)

        self.message = COMPLETE_MESSAGE if self.is_complete else outcome.message
        return outcome

    def get_hint(self) -> Optional[Hint]:
        """
        Reveal the cells of a random unfound word.

        The caller is responsible for un-highlighting after `hint.duration`.

        Returns:
            Hint, or None if no hints are left or nothing remains to find
        """
        puzzle = self._require_puzzle()

        if self.hints_remaining <= 0:
            self.message = "No hints left! Keep searching!"
            return None

        remaining = self.remaining_words
        if not remaining:
            self.message = "All words already found! No need for hints!"
            return None

        word = self._rng.choice(remaining)
        self.hints_remaining -= 1
        self.message = f"Hint: The word '{word.upper()}' is flashing!"

        return Hint(word=word, cells=list(puzzle.placements[word]), duration=self.config.flash_duration)

    def found_cells(self) -> Set[Cell]:
        """Cells belonging to words found so far."""
        if self.puzzle is None:
            return set()
        return {cell for word in self.found_words for cell in self.puzzle.placements[word]}

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Useful for serialization and logging.

        Returns:
            Dictionary containing session state
        """
        return {
            "language": self.config.language,
            "grid_size": self.config.grid_size,
            "words_to_find": self.words_to_find,
            "found_words": sorted(self.found_words),
            "hints_remaining": self.hints_remaining,
            "is_complete": self.is_complete,
            "message": self.message,
        }
