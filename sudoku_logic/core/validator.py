"""Validation utilities for boards produced by the solver."""

from __future__ import annotations
from typing import List, TYPE_CHECKING

import numpy as np

from .board import COLUMN_SLOTS, ROW_SLOTS, SECTION_SLOTS
from .coordinates import ColumnIndex, RowIndex, SectionIndex
from .cell import GroupIndex

if TYPE_CHECKING:
    from .board import Board


def is_valid_board(board: Board) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The board to validate.

    Returns:
        True if no digit repeats in a row, column or section.
    """
    return board.is_valid()


def find_conflicts(board: Board) -> List[GroupIndex]:
    """
    List every row, column and section holding a repeated digit.

    Returns:
        Indices of the offending groups, rows first, then columns, then
        sections. Empty for a valid board.
    """
    conflicts: List[GroupIndex] = []
    for index_type, table in (
        (RowIndex, ROW_SLOTS),
        (ColumnIndex, COLUMN_SLOTS),
        (SectionIndex, SECTION_SLOTS),
    ):
        for i, slots in enumerate(table):
            values = board.grid[list(slots)]
            non_zero = values[values != 0]
            if len(non_zero) != len(np.unique(non_zero)):
                conflicts.append(index_type(i))
    return conflicts


def respects_clues(puzzle: Board, result: Board) -> bool:
    """Check that every digit given in ``puzzle`` is unchanged in ``result``."""
    given = puzzle.grid != 0
    return bool(np.array_equal(puzzle.grid[given], result.grid[given]))


def validate_solution(puzzle: Board, solution: Board) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is complete, conflict-free and matches puzzle clues.
    """
    if not respects_clues(puzzle, solution):
        return False
    return solution.is_solved() and solution.is_valid()
