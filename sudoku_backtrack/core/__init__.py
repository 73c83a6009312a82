"""Core module for Sudoku grid representation and validation."""

from .errors import (
    SudokuError,
    MalformedGridError,
    PuzzleFormatError,
    InvalidPositionError,
    InvalidValueError,
    NoBlankCellError,
)
from .grid import Grid, Position, empty_grid, replace_at, set_at, GRID_SIZE, BOX_SIZE, DIGITS, BLANK_CHAR
from .validator import (
    Block,
    blocks,
    is_complete,
    is_solution_of,
    is_valid_block,
    is_valid_grid,
    is_well_formed,
)

__all__ = [
    "Grid",
    "Position",
    "Block",
    "empty_grid",
    "replace_at",
    "set_at",
    "blocks",
    "is_complete",
    "is_solution_of",
    "is_valid_block",
    "is_valid_grid",
    "is_well_formed",
    "GRID_SIZE",
    "BOX_SIZE",
    "DIGITS",
    "BLANK_CHAR",
    "SudokuError",
    "MalformedGridError",
    "PuzzleFormatError",
    "InvalidPositionError",
    "InvalidValueError",
    "NoBlankCellError",
]
