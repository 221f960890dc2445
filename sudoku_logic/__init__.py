"""Sudoku solving by logical candidate elimination."""

from .core import Board, BoardFormatError, Digit
from .solvers import EliminationSolver

__version__ = "0.1.0"

__all__ = ["Board", "BoardFormatError", "Digit", "EliminationSolver", "__version__"]
