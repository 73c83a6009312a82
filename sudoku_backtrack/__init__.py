"""Backtracking Sudoku solver."""

from .core import Grid, Position, empty_grid, set_at, is_solution_of, is_valid_grid
from .solvers import solve, find_blank

__version__ = "1.0.0"

__all__ = [
    "Grid",
    "Position",
    "empty_grid",
    "set_at",
    "is_solution_of",
    "is_valid_grid",
    "solve",
    "find_blank",
]
