from typing import Iterable, List, Sequence


def render_grid(grid: Sequence[Sequence[str]], highlight: Iterable[Sequence[int]] = ()) -> str:
    """
    Render a letter grid as text, one row per line.

    Cells in `highlight` are upper-cased, everything else lowercased.
    """
    marked = {(r, c) for r, c in highlight}
    lines: List[str] = []

    for r, row in enumerate(grid):
        lines.append(" ".join(
            letter.upper() if (r, c) in marked else letter.lower()
            for c, letter in enumerate(row)
        ))

    return "\n".join(lines)


def render_with_coordinates(grid: Sequence[Sequence[str]], highlight: Iterable[Sequence[int]] = ()) -> str:
    """Render the grid with row and column indices along the edges."""
    if not grid:
        return ""

    width = len(str(len(grid) - 1))
    header = " " * (width + 1) + " ".join(str(c % 10) for c in range(len(grid[0])))
    body = render_grid(grid, highlight).split("\n")

    return "\n".join([header] + [f"{r:>{width}} {line}" for r, line in enumerate(body)])
