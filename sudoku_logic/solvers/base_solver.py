"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
import time
import tracemalloc

from ..core.board import Board
from ..core.coordinates import CellCoordinate
from ..core.digit import Digit


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0

    # Progress metrics
    passes: int = 0
    cells_evaluated: int = 0
    assignments: List[Tuple[CellCoordinate, Digit]] = field(default_factory=list)

    # Additional metadata
    algorithm: str = ""
    strategies: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "passes": self.passes,
            "cells_evaluated": self.cells_evaluated,
            "assignments": [
                {"row": c.row.value, "column": c.column.value, "digit": int(d)}
                for c, d in self.assignments
            ],
            "algorithm": self.algorithm,
            "strategies": list(self.strategies),
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: Board) -> bool:
        """
        Solve a Sudoku puzzle in place with timing and memory tracking.

        Args:
            board: The puzzle to solve. It is filled in as the solver
                   progresses and is left as-is if the solver gets stuck.

        Returns:
            True if the board ends up solved.
        """
        self.reset_stats()

        # An outer tracemalloc session keeps running with its peak intact,
        # so memory_bytes then reports that session's peak
        owns_tracing = not tracemalloc.is_tracing()
        if owns_tracing:
            tracemalloc.start()
            tracemalloc.reset_peak()

        start_time = time.perf_counter()
        try:
            self.stats.solved = self._solve(board)
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            _, peak = tracemalloc.get_traced_memory()
            if owns_tracing:
                tracemalloc.stop()
            self.stats.memory_bytes = peak

        return self.stats.solved

    @abstractmethod
    def _solve(self, board: Board) -> bool:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: The puzzle to solve (modified in place).

        Returns:
            True if the board was solved.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
