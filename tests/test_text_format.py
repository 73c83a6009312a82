"""Unit tests for the plain-text puzzle format."""

import pytest
from sudoku_backtrack.core.grid import Grid, Position, empty_grid
from sudoku_backtrack.core.errors import PuzzleFormatError
from sudoku_backtrack.core.validator import is_solution_of, is_well_formed
from sudoku_backtrack.formats import format_grid, parse_grid, read_and_solve, read_grid, write_grid


EXAMPLE_TEXT = (
    "36..712..\n"
    ".5....18.\n"
    "..92.47..\n"
    "....13.28\n"
    "4..5.2..9\n"
    "27.46....\n"
    "..53.89..\n"
    ".83....6.\n"
    "..769..43\n"
)

UNSOLVABLE_TEXT = (
    "12345678.\n"
    ".........\n"
    ".........\n"
    ".........\n"
    "........9\n"
    ".........\n"
    ".........\n"
    ".........\n"
    ".........\n"
)


class TestParseGrid:
    """Tests for parse_grid."""

    def test_parse_example(self):
        grid = parse_grid(EXAMPLE_TEXT)
        assert is_well_formed(grid)
        assert grid.rows[0] == (3, 6, None, None, 7, 1, 2, None, None)
        assert grid.get(8, 8) == 3
        assert grid.count_filled() == 36

    def test_format_roundtrip(self):
        assert format_grid(parse_grid(EXAMPLE_TEXT)) == EXAMPLE_TEXT

    def test_trailing_blank_lines_ignored(self):
        assert parse_grid(EXAMPLE_TEXT + "\n\n") == parse_grid(EXAMPLE_TEXT)

    def test_windows_line_endings(self):
        assert parse_grid(EXAMPLE_TEXT.replace("\n", "\r\n")) == parse_grid(EXAMPLE_TEXT)

    def test_invalid_character(self):
        text = EXAMPLE_TEXT.replace("36..712..", "36..x12..")
        with pytest.raises(PuzzleFormatError, match="Line 1"):
            parse_grid(text)

    def test_zero_is_not_blank(self):
        text = EXAMPLE_TEXT.replace("36..712..", "360.712..")
        with pytest.raises(PuzzleFormatError):
            parse_grid(text)

    def test_short_row(self):
        text = EXAMPLE_TEXT.replace(".5....18.", ".5....18")
        with pytest.raises(PuzzleFormatError, match="Line 2"):
            parse_grid(text)

    def test_wrong_row_count(self):
        lines = EXAMPLE_TEXT.splitlines()
        with pytest.raises(PuzzleFormatError):
            parse_grid("\n".join(lines[:8]))
        with pytest.raises(PuzzleFormatError):
            parse_grid("\n".join(lines + [lines[0]]))

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_grid("")


class TestFormatGrid:
    """Tests for format_grid."""

    def test_empty_grid(self):
        assert format_grid(empty_grid()) == ".........\n" * 9

    def test_filled_cell(self):
        text = format_grid(empty_grid().set(Position(1, 2), 7))
        assert text.splitlines()[1] == "..7......"


class TestFiles:
    """Tests for reading, writing and solving puzzle files."""

    def test_write_then_read(self, tmp_path):
        path = tmp_path / "puzzle.txt"
        grid = parse_grid(EXAMPLE_TEXT)
        write_grid(grid, path)
        assert path.read_text() == EXAMPLE_TEXT
        assert read_grid(path) == grid

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_grid(tmp_path / "missing.txt")

    def test_read_and_solve(self, tmp_path):
        path = tmp_path / "puzzle.txt"
        path.write_text(EXAMPLE_TEXT)

        solution = read_and_solve(path)

        assert solution is not None
        assert is_solution_of(solution, parse_grid(EXAMPLE_TEXT))

    def test_read_and_solve_unsolvable(self, tmp_path):
        path = tmp_path / "puzzle.txt"
        path.write_text(UNSOLVABLE_TEXT)
        assert read_and_solve(path) is None

    def test_read_malformed_file(self, tmp_path):
        path = tmp_path / "puzzle.txt"
        path.write_text("123\n")
        with pytest.raises(PuzzleFormatError):
            read_and_solve(path)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
