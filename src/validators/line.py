"""Straight-line geometry for grid selections."""

from typing import List, Tuple

from ..puzzle.models import Cell


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def is_straight(start: Cell, end: Cell) -> bool:
    """True if start and end lie on a horizontal, vertical or 45-degree line."""
    dr = end.row - start.row
    dc = end.col - start.col
    return dr == 0 or dc == 0 or abs(dr) == abs(dc)


def unit_step(start: Cell, end: Cell) -> Tuple[int, int]:
    """Per-cell (row, col) step from start towards end."""
    return _sign(end.row - start.row), _sign(end.col - start.col)


def canonical_line(start: Cell, end: Cell) -> List[Cell]:
    """
    Every cell from start to end inclusive, in order.

    Raises ValueError if the two cells aren't on a straight line.
    """
    if not is_straight(start, end):
        raise ValueError(f"{start} and {end} are not on a straight line")

    step_r, step_c = unit_step(start, end)
    span = max(abs(end.row - start.row), abs(end.col - start.col))

    return [Cell(start.row + i * step_r, start.col + i * step_c) for i in range(span + 1)]
