"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .backtracking_solver import BacktrackingSolver, find_blank, solve

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "find_blank",
    "solve",
]
