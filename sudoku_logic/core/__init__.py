"""Core module for Sudoku board representation and validation."""

from .digit import Digit, ALL_DIGITS, EMPTY_CHARACTER
from .coordinates import RowIndex, ColumnIndex, SectionIndex, CellCoordinate
from .cell import Cell, CellGroup
from .board import Board, BoardFormatError
from .validator import is_valid_board, find_conflicts, respects_clues, validate_solution

__all__ = [
    "Digit",
    "ALL_DIGITS",
    "EMPTY_CHARACTER",
    "RowIndex",
    "ColumnIndex",
    "SectionIndex",
    "CellCoordinate",
    "Cell",
    "CellGroup",
    "Board",
    "BoardFormatError",
    "is_valid_board",
    "find_conflicts",
    "respects_clues",
    "validate_solution",
]
