"""Command-line interface for the backtracking Sudoku solver."""

import argparse
import logging
import sys
from typing import List, Optional

from .batch import BatchRunner
from .core.errors import SudokuError
from .core.grid import Grid
from .core.validator import is_solution_of
from .formats.text import read_grid, write_grid
from .solvers import BacktrackingSolver

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_SOLUTION = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Backtracking Sudoku Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle file ('.' for blanks, one row per line)
  python -m sudoku_backtrack.cli solve puzzles/example.txt

  # Solve an 81-character puzzle string
  python -m sudoku_backtrack.cli solve --puzzle "36..712...5....18..."

  # Check a solution against its puzzle
  python -m sudoku_backtrack.cli verify solution.txt puzzles/example.txt

  # Solve a directory of puzzles
  python -m sudoku_backtrack.cli batch puzzles/*.txt --output results/
        """
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "file", nargs="?", default=None,
        help="Puzzle file (9 lines of 9 characters, '.' for empty cells)"
    )
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Write the solution to this file"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Verify command
    verify_parser = subparsers.add_parser("verify", help="Check that a grid solves a puzzle")
    verify_parser.add_argument("solution", help="Candidate solution file")
    verify_parser.add_argument("puzzle", help="Original puzzle file")

    # Batch command
    batch_parser = subparsers.add_parser("batch", help="Solve many puzzle files")
    batch_parser.add_argument("paths", nargs="+", help="Puzzle files")
    batch_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output directory for JSON results"
    )
    batch_parser.add_argument(
        "--timeout", "-t", type=float, default=60.0,
        help="Maximum seconds per puzzle (default: 60)"
    )
    batch_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        return EXIT_ERROR

    commands = {
        "solve": cmd_solve,
        "verify": cmd_verify,
        "batch": cmd_batch,
    }
    try:
        return commands[args.command](args)
    except (SudokuError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


def cmd_solve(args) -> int:
    """Handle the solve command."""
    if args.puzzle is not None:
        grid = Grid.from_string(args.puzzle)
    else:
        grid = read_grid(args.file)

    print("Input puzzle:")
    print(grid)
    print()

    solver = BacktrackingSolver()
    solution, stats = solver.solve(grid)

    if args.verbose:
        print(f"  Time: {stats.time_seconds:.4f}s")
        print(f"  Iterations: {stats.iterations:,}")
        print(f"  Backtracks: {stats.backtracks:,}")
        print(f"  Max depth: {stats.extra.get('max_depth', 0)}")
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")

    if "error" in stats.extra:
        print(f"Error: {stats.extra['error']}", file=sys.stderr)
        return EXIT_ERROR

    if solution is None:
        print("✗ No solution")
        return EXIT_NO_SOLUTION

    print(f"✓ Solved in {stats.time_seconds:.4f}s")
    print(solution)

    if args.output:
        write_grid(solution, args.output)
        print(f"\nSolution saved to {args.output}")

    return EXIT_OK


def cmd_verify(args) -> int:
    """Handle the verify command."""
    candidate = read_grid(args.solution)
    puzzle = read_grid(args.puzzle)

    if is_solution_of(candidate, puzzle):
        print(f"✓ {args.solution} is a solution of {args.puzzle}")
        return EXIT_OK

    print(f"✗ {args.solution} is not a solution of {args.puzzle}")
    return EXIT_NO_SOLUTION


def cmd_batch(args) -> int:
    """Handle the batch command."""
    runner = BatchRunner(timeout_seconds=args.timeout)
    runner.run(args.paths, show_progress=not args.no_progress)

    summary = runner.get_summary()

    print("=" * 60)
    print("BATCH SUMMARY")
    print("=" * 60)
    print(f"Solved: {summary['total_solved']}/{summary['total_puzzles']} ({summary['solve_rate']:.1f}%)")
    print(f"Avg Time: {summary['avg_time_seconds']:.4f}s")
    print(f"Max Time: {summary['max_time_seconds']:.4f}s")
    for puzzle, error in summary["errors"].items():
        print(f"  {puzzle}: {error}")

    if args.output:
        runner.save_results(args.output)
        print(f"\nResults saved to {args.output}")

    if summary["total_solved"] == summary["total_puzzles"]:
        return EXIT_OK
    return EXIT_NO_SOLUTION


if __name__ == "__main__":
    sys.exit(main())
