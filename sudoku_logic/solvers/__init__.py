"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .strategies import (
    Strategy,
    PeerEliminationStrategy,
    HiddenSingleStrategy,
    STRATEGIES,
    DEFAULT_STRATEGY_NAMES,
    resolve_strategies,
)
from .elimination_solver import EliminationSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "Strategy",
    "PeerEliminationStrategy",
    "HiddenSingleStrategy",
    "STRATEGIES",
    "DEFAULT_STRATEGY_NAMES",
    "resolve_strategies",
    "EliminationSolver",
]
