"""Data models for word-search puzzles."""

from typing import Dict, List, NamedTuple
from pydantic import BaseModel, ConfigDict, Field


class Cell(NamedTuple):
    """A 0-indexed grid coordinate."""
    row: int
    col: int


class Direction(NamedTuple):
    """A unit step through the grid."""
    name: str
    dr: int
    dc: int


# All 8 straight directions in a square grid: (row_change, col_change)
DIRECTIONS: List[Direction] = [
    Direction("horizontal_right", 0, 1),
    Direction("vertical_down", 1, 0),
    Direction("diagonal_down_right", 1, 1),
    Direction("diagonal_up_left", -1, -1),
    Direction("horizontal_left", 0, -1),
    Direction("vertical_up", -1, 0),
    Direction("diagonal_down_left", 1, -1),
    Direction("diagonal_up_right", -1, 1),
]


Grid = List[List[str]]


class PuzzleState(BaseModel):
    """
    A generated puzzle: the letter grid plus where each hidden word sits.

    `placements[word][i]` is the cell holding `word[i]`, so the cells are in
    the order the word was written. Read-only once generated.
    """

    model_config = ConfigDict(frozen=True)

    grid: Grid
    placements: Dict[str, List[Cell]] = Field(default_factory=dict)

    @property
    def size(self) -> int:
        """Grid dimension."""
        return len(self.grid)

    @property
    def words(self) -> List[str]:
        """Placed words in placement order."""
        return list(self.placements)

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.size and 0 <= cell.col < self.size

    def letter_at(self, cell: Cell) -> str:
        return self.grid[cell.row][cell.col]


class PlacementReport(BaseModel):
    """Outcome of placing a word list: what made it onto the grid and what didn't."""
    placed: List[str] = Field(default_factory=list)
    too_long: List[str] = Field(default_factory=list)
    dropped: List[str] = Field(default_factory=list)

    @property
    def requested(self) -> int:
        return len(self.placed) + len(self.too_long) + len(self.dropped)
