"""Text encoding of Sudoku puzzles."""

from .text import parse_grid, format_grid, read_grid, write_grid, read_and_solve

__all__ = ["parse_grid", "format_grid", "read_grid", "write_grid", "read_and_solve"]
