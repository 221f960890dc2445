"""Fixed-point solver that places a digit whenever a cell has one candidate left."""

from __future__ import annotations
import logging
from typing import Optional, Sequence, Set

from .base_solver import BaseSolver
from .strategies import PeerEliminationStrategy, Strategy
from ..core.board import Board
from ..core.cell import Cell
from ..core.digit import ALL_DIGITS, Digit

log = logging.getLogger(__name__)


class EliminationSolver(BaseSolver):
    """
    Sudoku solver driven purely by candidate elimination.

    Each pass scans the unfilled cells row-major. Every cell starts with all
    nine digits as candidates and is run through each strategy in order. The
    first cell whose candidates collapse to a single digit gets that digit,
    and the scan restarts from the top. A pass that places nothing ends the
    solve as stuck.

    No guessing is done, so puzzles that need case analysis come back
    unsolved with whatever progress was made.
    """

    name = "Elimination"

    def __init__(self, strategies: Optional[Sequence[Strategy]] = None):
        """
        Initialize the solver.

        Args:
            strategies: Strategies to apply, in order. Defaults to peer
                        elimination alone.
        """
        super().__init__()
        if strategies is None:
            strategies = [PeerEliminationStrategy()]
        if not strategies:
            raise ValueError("At least one strategy is required")
        self.strategies = list(strategies)
        self.reset_stats()

    def reset_stats(self) -> None:
        super().reset_stats()
        self.stats.strategies = [s.name for s in self.strategies]

    def candidates(self, board: Board, cell: Cell) -> Set[Digit]:
        """Run every strategy over a fresh candidate set for ``cell``."""
        remaining = set(ALL_DIGITS)
        for strategy in self.strategies:
            strategy.eliminate(board, cell, remaining)
            if not remaining:
                log.debug("No candidates left for %s after %s", cell.coordinate, strategy.name)
                break
        return remaining

    def solve_cell(self, board: Board, cell: Cell) -> Optional[Digit]:
        """Return the only digit possible for ``cell``, or None."""
        remaining = self.candidates(board, cell)
        if len(remaining) == 1:
            return next(iter(remaining))
        return None

    def _solve(self, board: Board) -> bool:
        while not board.is_solved():
            self.stats.passes += 1
            placed = False

            for cell in board.unfilled_cells():
                self.stats.cells_evaluated += 1
                digit = self.solve_cell(board, cell)
                if digit is not None:
                    board.assign(cell.coordinate, digit)
                    self.stats.assignments.append((cell.coordinate, digit))
                    log.debug("Pass %d: placed %s at %s", self.stats.passes, digit, cell.coordinate)
                    placed = True
                    break

            if not placed:
                log.info(
                    "Stuck after %d assignments with %d cells unfilled",
                    len(self.stats.assignments), board.count_empty()
                )
                return False

        return True
