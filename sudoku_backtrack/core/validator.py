"""Validation predicates for Sudoku grids."""

from __future__ import annotations
import numpy as np
from typing import List, Sequence, Tuple

from .errors import MalformedGridError
from .grid import BOX_SIZE, GRID_SIZE, Cell, Grid, is_digit


Block = Tuple[Cell, ...]


def is_well_formed(grid: Grid) -> bool:
    """
    Check that a grid has 9 rows of 9 cells and only in-range values.

    Empty cells are None; every other cell must be an int 1-9.
    """
    rows = grid.rows
    if len(rows) != GRID_SIZE:
        return False
    for row in rows:
        if len(row) != GRID_SIZE:
            return False
        if not all(cell is None or is_digit(cell) for cell in row):
            return False
    return True


def is_complete(grid: Grid) -> bool:
    """Check that no cell is empty."""
    return all(None not in row for row in grid.rows)


def blocks(grid: Grid) -> List[Block]:
    """
    Collect the 27 constraint groups of a grid.

    Returns the 9 rows, then the 9 columns, then the 9 boxes. Boxes are
    numbered row-major (box 1 covers rows 0-2, cols 3-5) and their cells
    are read row-major too.

    Raises:
        MalformedGridError: If the grid is not 9x9.
    """
    rows = grid.rows
    if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
        raise MalformedGridError(f"Grid must be {GRID_SIZE}x{GRID_SIZE} to extract blocks")

    cells = np.array([list(row) for row in rows], dtype=object)

    boxes = (
        cells.reshape(BOX_SIZE, BOX_SIZE, BOX_SIZE, BOX_SIZE)
        .swapaxes(1, 2)
        .reshape(GRID_SIZE, GRID_SIZE)
    )
    return [tuple(block) for block in np.vstack([cells, cells.T, boxes]).tolist()]


def is_valid_block(block: Sequence[Cell]) -> bool:
    """Check that the filled cells of a block hold no duplicate values."""
    filled = [cell for cell in block if cell is not None]
    return len(filled) == len(set(filled))


def is_valid_grid(grid: Grid) -> bool:
    """
    Check that no row, column or box contains a repeated value.

    Does not check well-formedness of the values themselves.
    """
    return all(is_valid_block(block) for block in blocks(grid))


def is_solution_of(candidate: Grid, original: Grid) -> bool:
    """
    Check that ``candidate`` solves ``original``.

    The candidate must be valid and complete, and agree with every cell
    that is filled in the original. The original itself need not be valid.
    """
    if not (is_valid_grid(candidate) and is_complete(candidate)):
        return False
    return all(
        given is None or given == value
        for value, given in zip(candidate.cells(), original.cells())
    )
