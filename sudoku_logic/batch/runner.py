"""Batch runs comparing strategy sets across a collection of puzzles."""

from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from tqdm import tqdm

from ..core.board import Board, BoardFormatError
from ..core.validator import respects_clues
from ..solvers import EliminationSolver, resolve_strategies

log = logging.getLogger(__name__)

DEFAULT_STRATEGY_SETS: Dict[str, Sequence[str]] = {
    "peer": ("peer",),
    "peer+hidden": ("peer", "hidden"),
}


@dataclass
class BatchResult:
    """Outcome of one strategy set on one puzzle."""
    puzzle: str
    strategy_set: str
    solved: bool
    clues: int
    filled: int
    assignments: int
    passes: int
    cells_evaluated: int
    time_seconds: float
    memory_bytes: int
    valid: bool
    board: str = ""
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle": self.puzzle,
            "strategy_set": self.strategy_set,
            "solved": self.solved,
            "clues": self.clues,
            "filled": self.filled,
            "assignments": self.assignments,
            "passes": self.passes,
            "cells_evaluated": self.cells_evaluated,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "valid": self.valid,
            "board": self.board,
            "error": self.error,
        }


class BatchRunner:
    """
    Runs every strategy set over every puzzle and collects the outcomes.

    Puzzles are parsed fresh for each strategy set, so each run starts from
    the original clues.
    """

    def __init__(
        self,
        puzzles: Dict[str, str],
        strategy_sets: Optional[Dict[str, Sequence[str]]] = None
    ):
        """
        Initialize the runner.

        Args:
            puzzles: Mapping of puzzle name to board text.
            strategy_sets: Mapping of label to strategy names, applied in
                           order (default: peer, and peer+hidden).

        Raises:
            ValueError: if a strategy set names an unknown strategy.
        """
        self.puzzles = dict(puzzles)
        self.strategy_sets = dict(strategy_sets or DEFAULT_STRATEGY_SETS)
        # Fail on unknown names before any puzzle runs
        for names in self.strategy_sets.values():
            resolve_strategies(names)
        self.results: List[BatchResult] = []

    def run(self, show_progress: bool = True) -> List[BatchResult]:
        """
        Run the full batch.

        Returns:
            List of BatchResult objects, grouped by puzzle.
        """
        self.results = []
        total = len(self.puzzles) * len(self.strategy_sets)

        pbar = tqdm(total=total, desc="Solving", disable=not show_progress)
        for puzzle_name, text in self.puzzles.items():
            for set_name, names in self.strategy_sets.items():
                self.results.append(self._run_single(puzzle_name, text, set_name, names))
                pbar.update(1)
        pbar.close()

        return self.results

    def _run_single(
        self,
        puzzle_name: str,
        text: str,
        set_name: str,
        names: Sequence[str]
    ) -> BatchResult:
        """Run a single strategy set on a single puzzle."""
        try:
            puzzle = Board.from_text(text)
        except BoardFormatError as e:
            log.warning("Skipping %s: %s", puzzle_name, e)
            return BatchResult(
                puzzle=puzzle_name,
                strategy_set=set_name,
                solved=False,
                clues=0,
                filled=0,
                assignments=0,
                passes=0,
                cells_evaluated=0,
                time_seconds=0.0,
                memory_bytes=0,
                valid=False,
                error=str(e)
            )

        board = puzzle.copy()
        solver = EliminationSolver(resolve_strategies(names))
        solver.solve(board)
        stats = solver.stats

        return BatchResult(
            puzzle=puzzle_name,
            strategy_set=set_name,
            solved=stats.solved,
            clues=puzzle.count_filled(),
            filled=board.count_filled(),
            assignments=len(stats.assignments),
            passes=stats.passes,
            cells_evaluated=stats.cells_evaluated,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            valid=board.is_valid() and respects_clues(puzzle, board),
            board=str(board)
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from batch results."""
        summary = {
            "total_puzzles": len(self.puzzles),
            "strategy_sets": {k: list(v) for k, v in self.strategy_sets.items()},
            "results_by_strategy_set": {},
            "results_by_puzzle": {}
        }

        for set_name in self.strategy_sets:
            set_results = [r for r in self.results if r.strategy_set == set_name]
            if set_results:
                solved = [r for r in set_results if r.solved]
                times = [r.time_seconds for r in set_results]
                assignments = [r.assignments for r in set_results]

                summary["results_by_strategy_set"][set_name] = {
                    "solve_rate": len(solved) / len(set_results) * 100,
                    "avg_time_seconds": sum(times) / len(times),
                    "avg_assignments": sum(assignments) / len(assignments),
                    "total_solved": len(solved),
                    "total_tested": len(set_results),
                    "all_valid": all(r.valid for r in set_results if r.error is None)
                }

        for puzzle_name in self.puzzles:
            puzzle_results = [r for r in self.results if r.puzzle == puzzle_name]
            if puzzle_results:
                summary["results_by_puzzle"][puzzle_name] = {
                    r.strategy_set: {"solved": r.solved, "filled": r.filled}
                    for r in puzzle_results
                }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save batch results, the summary and every final board to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "batch_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "batch_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        for result in self.results:
            if result.error is not None:
                continue
            set_dir = os.path.join(output_dir, "boards", _safe_name(result.strategy_set))
            os.makedirs(set_dir, exist_ok=True)
            with open(os.path.join(set_dir, f"{_safe_name(result.puzzle)}.txt"), "w") as f:
                f.write(result.board)
                f.write("\n")

        log.info("Results saved to %s", output_dir)


def _safe_name(name: str) -> str:
    return ''.join(ch if ch.isalnum() or ch in "-_" else "_" for ch in name)
