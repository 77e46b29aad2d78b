"""Word-search puzzle generation."""

from .models import Cell, Direction, DIRECTIONS, Grid, PuzzleState, PlacementReport
from .generator import (
    generate,
    prepare_words,
    can_place_word,
    place_word,
    fill_empty_cells,
    placement_report,
    max_attempts,
)
from .wordlists import (
    WORD_LISTS,
    ALPHABETS,
    DEFAULT_LANGUAGE,
    get_word_list,
    get_alphabet,
    load_word_list,
)

__all__ = [
    # Models
    "Cell",
    "Direction",
    "DIRECTIONS",
    "Grid",
    "PuzzleState",
    "PlacementReport",
    # Generation
    "generate",
    "prepare_words",
    "can_place_word",
    "place_word",
    "fill_empty_cells",
    "placement_report",
    "max_attempts",
    # Word lists
    "WORD_LISTS",
    "ALPHABETS",
    "DEFAULT_LANGUAGE",
    "get_word_list",
    "get_alphabet",
    "load_word_list",
]
