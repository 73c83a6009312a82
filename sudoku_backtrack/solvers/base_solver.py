"""Timing and memory wrapper shared by the Sudoku solvers."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import logging
import time
import tracemalloc

from ..core.grid import Grid
from ..core.validator import is_solution_of

log = logging.getLogger(__name__)


@dataclass
class SolverStats:
    """Counters and measurements from one solve."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """
    Runs a search and measures it.

    Subclasses provide ``_solve``; ``solve`` times it, records the peak
    traced memory and checks the answer against the puzzle.
    """

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, grid: Grid) -> tuple[Optional[Grid], SolverStats]:
        """
        Solve ``grid``, recording time, peak memory and search counters.

        Args:
            grid: The puzzle to solve.

        Returns:
            Tuple of (solution or None, stats). ``stats.solved`` is only set
            when the solution checks out against the puzzle.
        """
        self.stats = SolverStats(algorithm=self.name)

        tracemalloc.start()
        start_time = time.perf_counter()

        try:
            solution = self._solve(grid)
            self.stats.solved = solution is not None and is_solution_of(solution, grid)
        except Exception as e:
            log.exception("%s failed on %r", self.name, grid)
            self.stats.extra["error"] = str(e)
            solution = None

        self.stats.time_seconds = time.perf_counter() - start_time

        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        self.stats.memory_bytes = peak

        return solution, self.stats

    @abstractmethod
    def _solve(self, grid: Grid) -> Optional[Grid]:
        """Return the solved grid, or None. ``grid`` is immutable and shared with the caller."""
