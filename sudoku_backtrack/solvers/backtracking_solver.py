"""Plain depth-first backtracking search."""

from __future__ import annotations
import logging
from typing import Optional

from .base_solver import BaseSolver, SolverStats
from ..core.errors import NoBlankCellError
from ..core.grid import DIGITS, Grid, Position, set_at
from ..core.validator import is_complete, is_valid_grid

log = logging.getLogger(__name__)


def find_blank(grid: Grid) -> Position:
    """
    Return the first empty cell in row-major order.

    Raises:
        NoBlankCellError: If the grid is complete.
    """
    for i, row in enumerate(grid.rows):
        for j, cell in enumerate(row):
            if cell is None:
                return Position(i, j)
    raise NoBlankCellError("find_blank called on a grid with no empty cells")


def solve(grid: Grid, stats: Optional[SolverStats] = None) -> Optional[Grid]:
    """
    Find the first completion of ``grid`` in search order.

    Fills the first blank (see ``find_blank``) with 1, 2, ... 9 in turn and
    recurses, returning the first branch that succeeds. A branch fails as
    soon as its grid breaks a row, column or box constraint. The result is
    deterministic: for puzzles with several solutions, the one returned is
    the smallest in that order.

    Args:
        grid: The puzzle. Never modified.
        stats: Optional counters to update while searching.

    Returns:
        The solved grid, ``grid`` itself if it is already complete and valid,
        or None if no solution exists.
    """
    return _search(grid, stats, 0)


def _search(grid: Grid, stats: Optional[SolverStats], depth: int) -> Optional[Grid]:
    if stats is not None:
        stats.iterations += 1
        if depth > stats.extra.get("max_depth", 0):
            stats.extra["max_depth"] = depth

    if not is_valid_grid(grid):
        return None
    if is_complete(grid):
        return grid

    position = find_blank(grid)
    for value in DIGITS:
        if stats is not None:
            stats.nodes_explored += 1
        solution = _search(set_at(grid, position, value), stats, depth + 1)
        if solution is not None:
            return solution
        if stats is not None:
            stats.backtracks += 1

    return None


class BacktrackingSolver(BaseSolver):
    """
    Solver wrapper around ``solve`` that records search statistics.

    iterations counts search calls, nodes_explored the candidate grids
    built, backtracks the candidates that led nowhere. ``extra`` holds the
    deepest recursion level reached and the number of blanks in the puzzle.
    """

    name = "Backtracking"

    def _solve(self, grid: Grid) -> Optional[Grid]:
        """Solve using plain backtracking."""
        self.stats.extra["max_depth"] = 0
        self.stats.extra["blanks"] = grid.count_empty()

        log.debug("Searching grid with %d blanks", self.stats.extra["blanks"])
        solution = solve(grid, self.stats)
        log.debug(
            "Search finished: %s after %d iterations, %d backtracks",
            "solved" if solution is not None else "no solution",
            self.stats.iterations,
            self.stats.backtracks,
        )
        return solution
