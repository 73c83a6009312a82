"""Immutable 9x9 Sudoku grid with optional-digit cells."""

from __future__ import annotations
import numpy as np
from typing import Any, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .errors import InvalidPositionError, InvalidValueError, MalformedGridError, PuzzleFormatError


GRID_SIZE = 9
BOX_SIZE = 3
DIGITS = range(1, GRID_SIZE + 1)
BLANK_CHAR = "."

# A cell is either empty (None) or holds a digit.
Cell = Optional[int]
Row = Tuple[Cell, ...]


class Position(NamedTuple):
    """Zero-based (row, col) address of a cell."""
    row: int
    col: int


class Grid:
    """
    A Sudoku grid as a tuple of rows, each a tuple of cells.

    Empty cells are ``None``; filled cells hold an ``int``. Grids are never
    modified after construction: ``set`` returns a new grid, so two search
    branches can never observe each other's writes.

    The constructor accepts any nested sequence and does not check its
    shape or values, so malformed input stays representable and can be
    detected with ``is_well_formed``.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[Cell]]):
        self._rows: Tuple[Row, ...] = tuple(tuple(row) for row in rows)

    @property
    def rows(self) -> Tuple[Row, ...]:
        """The grid's rows, top to bottom."""
        return self._rows

    def get(self, row: int, col: int) -> Cell:
        """Get the value at (row, col). None means empty."""
        return self._rows[row][col]

    def set(self, position: Position, value: Cell) -> Grid:
        """Return a copy of this grid with ``position`` set to ``value``."""
        return set_at(self, position, value)

    def is_empty(self, row: int, col: int) -> bool:
        """Check if the cell at (row, col) is empty."""
        return self._rows[row][col] is None

    def cells(self) -> List[Cell]:
        """All cells in row-major order."""
        return [cell for row in self._rows for cell in row]

    def empty_cells(self) -> List[Position]:
        """Positions of all empty cells in row-major order."""
        return [
            Position(i, j)
            for i, row in enumerate(self._rows)
            for j, cell in enumerate(row)
            if cell is None
        ]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return sum(1 for cell in self.cells() if cell is None)

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return sum(1 for cell in self.cells() if cell is not None)

    def to_array(self) -> np.ndarray:
        """
        Convert to a 9x9 int32 array with 0 for empty cells.

        Raises:
            MalformedGridError: If the grid is not 9x9.
        """
        if len(self._rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in self._rows):
            raise MalformedGridError(f"Grid must be {GRID_SIZE}x{GRID_SIZE} to convert to an array")
        return np.array(
            [[0 if cell is None else cell for cell in row] for row in self._rows],
            dtype=np.int32,
        )

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Grid:
        """Create a grid from a 9x9 array where 0 marks an empty cell."""
        arr = np.asarray(arr)
        if arr.shape != (GRID_SIZE, GRID_SIZE):
            raise MalformedGridError(f"Array shape must be ({GRID_SIZE}, {GRID_SIZE}), got {arr.shape}")
        return cls(
            [None if value == 0 else int(value) for value in row]
            for row in arr.tolist()
        )

    @classmethod
    def from_2d_list(cls, data: Sequence[Sequence[int]]) -> Grid:
        """Create a grid from a 2D list of ints, 0 for empty."""
        return cls.from_array(np.array(data, dtype=np.int32))

    def to_string(self) -> str:
        """Convert to a compact row-major string, '.' for empty cells."""
        return "".join(BLANK_CHAR if cell is None else str(cell) for cell in self.cells())

    @classmethod
    def from_string(cls, s: str) -> Grid:
        """
        Create a grid from a compact 81-character string.

        Args:
            s: Row-major cell values. '0' or '.' for empty, '1'-'9' for digits.
        """
        size = GRID_SIZE * GRID_SIZE
        if len(s) != size:
            raise PuzzleFormatError(f"String length must be {size}, got {len(s)}")

        cells: List[Cell] = []
        for idx, c in enumerate(s):
            if c in ("0", BLANK_CHAR):
                cells.append(None)
            elif c in "123456789":
                cells.append(int(c))
            else:
                raise PuzzleFormatError(f"Invalid character {c!r} at index {idx}")

        return cls(cells[i:i + GRID_SIZE] for i in range(0, size, GRID_SIZE))

    def __str__(self) -> str:
        """Pretty-print the grid with box separators."""
        lines = []
        horizontal_sep = "+" + (("-" * (BOX_SIZE * 2 + 1)) + "+") * BOX_SIZE

        for i, row in enumerate(self._rows):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = "|"
            for j, cell in enumerate(row):
                row_str += f" {BLANK_CHAR}" if cell is None else f" {cell}"
                if (j + 1) % BOX_SIZE == 0:
                    row_str += " |"
            lines.append(row_str)

        lines.append(horizontal_sep)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid(filled={self.count_filled()}, empty={self.count_empty()})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)


def is_digit(value: Any) -> bool:
    """True if ``value`` is an int in 1-9 (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value in DIGITS


def empty_grid() -> Grid:
    """A grid with all 81 cells empty."""
    return Grid([None] * GRID_SIZE for _ in range(GRID_SIZE))


def replace_at(items: Sequence[Any], index: int, value: Any) -> Tuple[Any, ...]:
    """
    Return ``items`` as a tuple with the element at ``index`` replaced.

    An index outside ``0 <= index < len(items)`` leaves the items unchanged.
    """
    if index < 0 or index >= len(items):
        return tuple(items)
    return tuple(items[:index]) + (value,) + tuple(items[index + 1:])


def set_at(grid: Grid, position: Position, value: Cell) -> Grid:
    """
    Return a new grid identical to ``grid`` except at ``position``.

    Args:
        grid: Source grid, left untouched.
        position: Cell to write; must lie inside the 9x9 grid.
        value: A digit 1-9, or None to clear the cell.

    Raises:
        InvalidPositionError: If the position is outside the grid.
        InvalidValueError: If the value is not None or a digit 1-9.
    """
    row, col = position
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise InvalidPositionError(f"Position {tuple(position)} is outside the grid")
    if value is not None and not is_digit(value):
        raise InvalidValueError(f"Value must be None or 1-{GRID_SIZE}, got {value!r}")

    rows = grid.rows
    return Grid(replace_at(rows, row, replace_at(rows[row], col, value)))
