"""
Word-search puzzle generation.

Places words on a square grid in any of the 8 straight directions with
bounded random retry, then fills the remaining cells from an alphabet.
Words that can't be seated within the attempt budget are dropped.
"""

import logging
import random
import unicodedata
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import Cell, Direction, DIRECTIONS, Grid, PlacementReport, PuzzleState

logger = logging.getLogger(__name__)

# Placeholder for cells no word has claimed yet
EMPTY = ""

# Used when the caller doesn't supply a random source
shared_rng = random.Random()


def prepare_words(words: Iterable[str], grid_size: int) -> Tuple[List[str], List[str]]:
    """
    Normalise a word list for placement.

    Lowercases and NFC-composes, drops blanks and repeats, and splits off
    words that can't fit the grid. Remaining words are sorted longest first
    so they get seated before the grid fills up around them (ties keep their
    original order).

    Returns:
        (words_to_place, too_long)
    """
    seen = set()
    fitting: List[str] = []
    too_long: List[str] = []

    for raw in words:
        word = unicodedata.normalize("NFC", raw.strip().lower())
        if not word or word in seen:
            continue
        seen.add(word)
        if len(word) > grid_size:
            too_long.append(word)
        else:
            fitting.append(word)

    return sorted(fitting, key=len, reverse=True), too_long


def can_place_word(word: str, row: int, col: int, direction: Direction, grid: Grid) -> bool:
    """Check that `word` fits at (row, col) heading `direction` without conflicts."""
    size = len(grid)
    for i, letter in enumerate(word):
        r = row + i * direction.dr
        c = col + i * direction.dc

        if not (0 <= r < size and 0 <= c < size):
            return False
        # Crossing is fine as long as the shared letter agrees
        if grid[r][c] != EMPTY and grid[r][c] != letter:
            return False
    return True


def place_word(word: str, row: int, col: int, direction: Direction, grid: Grid) -> List[Cell]:
    """Write `word` into the grid and return its cells in writing order."""
    cells: List[Cell] = []
    for i, letter in enumerate(word):
        cell = Cell(row + i * direction.dr, col + i * direction.dc)
        grid[cell.row][cell.col] = letter
        cells.append(cell)
    return cells


def max_attempts(grid_size: int) -> int:
    """Attempt budget per word."""
    return grid_size * grid_size * len(DIRECTIONS) * 2


def try_place(word: str, grid: Grid, rng: random.Random) -> Optional[List[Cell]]:
    """Sample random starts and directions until the word fits or the budget runs out."""
    size = len(grid)
    for _ in range(max_attempts(size)):
        row = rng.randrange(size)
        col = rng.randrange(size)
        direction = rng.choice(DIRECTIONS)

        if can_place_word(word, row, col, direction, grid):
            return place_word(word, row, col, direction, grid)
    return None


def fill_empty_cells(grid: Grid, alphabet: Sequence[str], rng: random.Random) -> None:
    """Fill every unclaimed cell with a random letter from `alphabet`."""
    for row in grid:
        for c, letter in enumerate(row):
            if letter == EMPTY:
                row[c] = rng.choice(alphabet)


def generate(
    words: Iterable[str],
    grid_size: int = 15,
    fill_alphabet: Sequence[str] = "abcdefghijklmnopqrstuvwxyz",
    rng: Optional[random.Random] = None,
) -> PuzzleState:
    """
    Generate a word-search puzzle.

    Args:
        words: Words to hide. Duplicates and words longer than the grid are skipped.
        grid_size: Width and height of the grid
        fill_alphabet: Characters used for cells no word occupies
        rng: Random source (defaults to the generator shared by this module, `shared_rng`)

    Returns:
        PuzzleState whose placements hold exactly the words that were seated

    Raises:
        ValueError: If grid_size < 1 or fill_alphabet is empty
    """
    if grid_size < 1:
        raise ValueError(f"Grid size must be at least 1 (got {grid_size})")
    if not fill_alphabet:
        raise ValueError("Fill alphabet must not be empty")

    if rng is None:
        rng = shared_rng
    to_place, too_long = prepare_words(words, grid_size)

    grid: Grid = [[EMPTY] * grid_size for _ in range(grid_size)]
    placements = {}

    for word in to_place:
        cells = try_place(word, grid, rng)
        if cells is None:
            logger.debug("Dropped '%s' after %d attempts", word, max_attempts(grid_size))
            continue
        placements[word] = cells

    logger.info(
        "Placed %d of %d words (%d too long for a %dx%d grid)",
        len(placements), len(to_place) + len(too_long), len(too_long), grid_size, grid_size,
    )

    fill_empty_cells(grid, list(fill_alphabet), rng)

    return PuzzleState(grid=grid, placements=placements)


def placement_report(words: Iterable[str], puzzle: PuzzleState) -> PlacementReport:
    """Summarise which of the requested words ended up on the grid."""
    to_place, too_long = prepare_words(words, puzzle.size)
    return PlacementReport(
        placed=[w for w in to_place if w in puzzle.placements],
        too_long=too_long,
        dropped=[w for w in to_place if w not in puzzle.placements],
    )
