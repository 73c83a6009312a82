"""Exceptions raised by the Sudoku engine and its I/O layer."""


class SudokuError(Exception):
    """Base class for all errors raised by this package."""


class MalformedGridError(SudokuError, ValueError):
    """A grid does not have the 9x9 shape an operation requires."""


class PuzzleFormatError(SudokuError, ValueError):
    """Puzzle text could not be decoded into a well-formed grid."""


class InvalidPositionError(SudokuError, IndexError):
    """A position lies outside the 9x9 grid."""


class InvalidValueError(SudokuError, ValueError):
    """A cell value is neither empty nor a digit 1-9."""


class NoBlankCellError(SudokuError, LookupError):
    """A blank cell was requested from a grid that has none."""
