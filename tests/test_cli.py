"""Tests for the command-line interface."""

import json

import pytest
from sudoku_backtrack.cli import main, EXIT_OK, EXIT_ERROR, EXIT_NO_SOLUTION


SOLUTION_TEXT = (
    "534678912\n"
    "672195348\n"
    "198342567\n"
    "859761423\n"
    "426853791\n"
    "713924856\n"
    "961537284\n"
    "287419635\n"
    "345286179\n"
)

PUZZLE_TEXT = "........." + SOLUTION_TEXT[9:]

UNSOLVABLE_STRING = "123456780" + "0" * 27 + "000000009" + "0" * 36


@pytest.fixture
def puzzle_file(tmp_path):
    path = tmp_path / "puzzle.txt"
    path.write_text(PUZZLE_TEXT)
    return path


@pytest.fixture
def solution_file(tmp_path):
    path = tmp_path / "solution.txt"
    path.write_text(SOLUTION_TEXT)
    return path


class TestSolveCommand:
    """Tests for `solve`."""

    def test_solve_file(self, puzzle_file, capsys):
        assert main(["solve", str(puzzle_file)]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Input puzzle:" in out
        assert "✓ Solved" in out
        assert "| 5 3 4 | 6 7 8 | 9 1 2 |" in out

    def test_solve_string(self, capsys):
        puzzle = "0" * 9 + SOLUTION_TEXT.replace("\n", "")[9:]
        assert main(["solve", "--puzzle", puzzle, "--verbose"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Iterations:" in out
        assert "Max depth: 9" in out

    def test_solve_writes_output(self, puzzle_file, tmp_path):
        output = tmp_path / "out.txt"
        assert main(["solve", str(puzzle_file), "--output", str(output)]) == EXIT_OK
        assert output.read_text() == SOLUTION_TEXT

    def test_no_solution(self, capsys):
        assert main(["solve", "--puzzle", UNSOLVABLE_STRING]) == EXIT_NO_SOLUTION
        assert "No solution" in capsys.readouterr().out

    def test_malformed_puzzle(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("not a puzzle\n")
        assert main(["solve", str(path)]) == EXIT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["solve", str(tmp_path / "missing.txt")]) == EXIT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_requires_a_puzzle(self):
        with pytest.raises(SystemExit):
            main(["solve"])


class TestVerifyCommand:
    """Tests for `verify`."""

    def test_valid_solution(self, solution_file, puzzle_file, capsys):
        assert main(["verify", str(solution_file), str(puzzle_file)]) == EXIT_OK
        assert "is a solution" in capsys.readouterr().out

    def test_not_a_solution(self, puzzle_file, solution_file, capsys):
        assert main(["verify", str(puzzle_file), str(solution_file)]) == EXIT_NO_SOLUTION
        assert "is not a solution" in capsys.readouterr().out


class TestBatchCommand:
    """Tests for `batch`."""

    def test_batch(self, puzzle_file, tmp_path, capsys):
        output_dir = tmp_path / "results"
        code = main(["batch", str(puzzle_file), "--output", str(output_dir), "--no-progress"])

        assert code == EXIT_OK
        assert "Solved: 1/1" in capsys.readouterr().out
        with open(output_dir / "batch_summary.json") as f:
            assert json.load(f)["total_solved"] == 1

    def test_batch_with_failures(self, puzzle_file, tmp_path, capsys):
        bad = tmp_path / "bad.txt"
        bad.write_text("oops\n")
        code = main(["batch", str(puzzle_file), str(bad), "--no-progress"])

        assert code == EXIT_NO_SOLUTION
        out = capsys.readouterr().out
        assert "Solved: 1/2" in out
        assert str(bad) in out


def test_no_command(capsys):
    assert main([]) == EXIT_ERROR
    assert "usage" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
