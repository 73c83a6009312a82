"""Solve many puzzle files and collect per-puzzle results."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Sequence
import json
import logging
import multiprocessing
import os

from tqdm import tqdm

from ..core.errors import SudokuError
from ..formats.text import format_grid, read_grid
from ..solvers import BaseSolver, BacktrackingSolver

log = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Result of solving a single puzzle file."""
    puzzle: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    solution: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle": self.puzzle,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "solution": self.solution,
            **self.extra
        }


class BatchRunner:
    """
    Runs a solver over a list of puzzle files.

    Each solve runs in its own worker process with its own copy of the
    solver. The search has no cancellation point, so a puzzle that runs past
    ``timeout_seconds`` has its worker terminated and is reported as a
    timeout.
    """

    def __init__(
        self,
        solver: Optional[BaseSolver] = None,
        timeout_seconds: float = 60.0,
    ):
        """
        Initialize the runner.

        Args:
            solver: Solver to use (default: BacktrackingSolver).
            timeout_seconds: Maximum time per puzzle.
        """
        self.solver = solver or BacktrackingSolver()
        self.timeout_seconds = timeout_seconds
        self.results: List[BatchResult] = []

    def run(self, paths: Sequence[str], show_progress: bool = True) -> List[BatchResult]:
        """
        Solve every puzzle file in ``paths``.

        Returns:
            List of BatchResult objects, in the order of ``paths``.
        """
        self.results = []

        pbar = tqdm(total=len(paths), desc="Solving", disable=not show_progress)

        for path in paths:
            result = self._run_single(path)
            log.debug("%s: %s in %.4fs", path, "solved" if result.solved else "unsolved", result.time_seconds)
            self.results.append(result)
            pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(self, path: str) -> BatchResult:
        """Read and solve a single puzzle file."""
        try:
            grid = read_grid(path)
        except (OSError, SudokuError) as e:
            log.warning("Skipping %s: %s", path, e)
            return self._failed(path, 0.0, str(e))

        # Leaving the block terminates the worker, killing a search that ran
        # past its deadline.
        with multiprocessing.Pool(processes=1) as pool:
            pending = pool.apply_async(self.solver.solve, (grid,))
            try:
                solution, stats = pending.get(timeout=self.timeout_seconds)
            except multiprocessing.TimeoutError:
                log.warning("%s: no result after %ss", path, self.timeout_seconds)
                return self._failed(path, self.timeout_seconds, "Timeout")

        extra = dict(stats.extra)
        if solution is None and "error" not in extra:
            extra["error"] = "No solution"

        return BatchResult(
            puzzle=path,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            solution=format_grid(solution) if solution is not None else None,
            extra=extra
        )

    @staticmethod
    def _failed(path: str, time_seconds: float, error: str) -> BatchResult:
        return BatchResult(
            puzzle=path,
            solved=False,
            time_seconds=time_seconds,
            memory_bytes=0,
            iterations=0,
            backtracks=0,
            nodes_explored=0,
            extra={"error": error}
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from the results."""
        solved = [r for r in self.results if r.solved]
        times = [r.time_seconds for r in self.results]

        return {
            "algorithm": self.solver.name,
            "total_puzzles": len(self.results),
            "total_solved": len(solved),
            "solve_rate": len(solved) / len(self.results) * 100 if self.results else 0.0,
            "avg_time_seconds": sum(times) / len(times) if times else 0.0,
            "max_time_seconds": max(times) if times else 0.0,
            "errors": {r.puzzle: r.extra["error"] for r in self.results if "error" in r.extra},
        }

    def save_results(self, output_dir: str) -> None:
        """Save per-puzzle results and the summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "batch_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "batch_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        log.info("Results saved to %s", output_dir)
