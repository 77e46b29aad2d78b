"""
Selection validation for word-search puzzles.

Checks, in order:
1. The selection has at least two cells
2. First and last cells lie on a straight line (horizontal, vertical, 45-degree)
   that has room for every selected cell
3. The selected cells are exactly the cells of that line, nothing skipped or extra
4. The cells are exactly one unfound hidden word's cells and spell it forwards or backwards
"""

from typing import AbstractSet, Iterable, List, Optional, Sequence, Set

from ..puzzle.models import Cell, PuzzleState
from .line import canonical_line, is_straight
from .models import Outcome, TOO_SHORT, NOT_STRAIGHT, IMPRECISE_LINE, MATCH, NO_MATCH


MESSAGES = {
    TOO_SHORT: "Select at least two letters.",
    NOT_STRAIGHT: "Selection must be in a straight line!",
    IMPRECISE_LINE: "Selection must be a precise straight line!",
    NO_MATCH: "Not a hidden word, or already found. Try again!",
}


def match_message(word: str) -> str:
    return f"'{word.upper()}' found! Great job!"


def _as_cells(path: Iterable[Sequence[int]]) -> List[Cell]:
    return [Cell(int(r), int(c)) for r, c in path]


def read_word(puzzle: PuzzleState, cells: Sequence[Cell]) -> str:
    """Letters along `cells`, lowercased."""
    return "".join(puzzle.letter_at(cell) for cell in cells).lower()


def find_match(
    selected_cells: Set[Cell],
    selected_word: str,
    puzzle: PuzzleState,
    already_found: AbstractSet[str],
) -> Optional[str]:
    """Return the unfound hidden word occupying exactly `selected_cells`, if it reads right."""
    for word, cells in puzzle.placements.items():
        if word in already_found:
            continue

        # Anchor to the hidden cells so a lookalike elsewhere in the grid doesn't count
        if set(cells) != selected_cells:
            continue

        if selected_word == word or selected_word == word[::-1]:
            return word
    return None


def validate(
    path: Iterable[Sequence[int]],
    puzzle: PuzzleState,
    already_found: AbstractSet[str] = frozenset(),
) -> Outcome:
    """
    Validate a selection path against the puzzle's hidden words.

    Args:
        path: Cells in the order the user selected them (any direction)
        puzzle: The current puzzle
        already_found: Words found earlier this session; these never match again

    Returns:
        Outcome with one of TOO_SHORT, NOT_STRAIGHT, IMPRECISE_LINE, MATCH, NO_MATCH
    """
    cells = _as_cells(path)

    if len(cells) < 2:
        return Outcome(code=TOO_SHORT, message=MESSAGES[TOO_SHORT])

    start, end = cells[0], cells[-1]
    if not is_straight(start, end):
        return Outcome(code=NOT_STRAIGHT, message=MESSAGES[NOT_STRAIGHT])

    line = canonical_line(start, end)
    selected = set(cells)

    # More distinct cells than the line holds means the drag bent away from it
    if len(selected) > len(line):
        return Outcome(code=NOT_STRAIGHT, message=MESSAGES[NOT_STRAIGHT])

    if set(line) != selected or not all(puzzle.in_bounds(cell) for cell in line):
        return Outcome(code=IMPRECISE_LINE, message=MESSAGES[IMPRECISE_LINE])

    selected_word = read_word(puzzle, line)

    word = find_match(selected, selected_word, puzzle, already_found)
    if word is not None:
        return Outcome(code=MATCH, message=match_message(word), word=word, selected_word=selected_word)

    return Outcome(code=NO_MATCH, message=MESSAGES[NO_MATCH], selected_word=selected_word)

