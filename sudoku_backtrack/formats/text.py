"""Plain-text puzzle format: one line per row, '.' for blanks."""

from __future__ import annotations
import logging
import os
from typing import List, Optional, Union

from ..core.errors import PuzzleFormatError
from ..core.grid import BLANK_CHAR, GRID_SIZE, Cell, Grid
from ..solvers.backtracking_solver import solve

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _parse_row(line: str, line_no: int) -> List[Cell]:
    if len(line) != GRID_SIZE:
        raise PuzzleFormatError(
            f"Line {line_no}: expected {GRID_SIZE} characters, got {len(line)}"
        )
    row: List[Cell] = []
    for c in line:
        if c == BLANK_CHAR:
            row.append(None)
        elif c in "123456789":
            row.append(int(c))
        else:
            raise PuzzleFormatError(f"Line {line_no}: invalid character {c!r}")
    return row


def parse_grid(text: str) -> Grid:
    """
    Decode puzzle text into a grid.

    The text holds 9 lines of 9 characters each: '.' for an empty cell,
    '1'-'9' for a filled one. Trailing blank lines are ignored.

    Raises:
        PuzzleFormatError: If the text does not describe a 9x9 grid.
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    if len(lines) != GRID_SIZE:
        raise PuzzleFormatError(f"Expected {GRID_SIZE} rows, got {len(lines)}")

    return Grid(_parse_row(line, i) for i, line in enumerate(lines, 1))


def format_grid(grid: Grid) -> str:
    """Encode a grid as text, each row terminated by a newline."""
    return "".join(
        "".join(BLANK_CHAR if cell is None else str(cell) for cell in row) + "\n"
        for row in grid.rows
    )


def read_grid(path: PathLike) -> Grid:
    """Read a puzzle file."""
    log.debug("Reading puzzle from %s", path)
    with open(path, "r") as f:
        return parse_grid(f.read())


def write_grid(grid: Grid, path: PathLike) -> None:
    """Write a grid to a file in the text format."""
    with open(path, "w") as f:
        f.write(format_grid(grid))


def read_and_solve(path: PathLike) -> Optional[Grid]:
    """Read a puzzle file and solve it. Returns None if it has no solution."""
    return solve(read_grid(path))
