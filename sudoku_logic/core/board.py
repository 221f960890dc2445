"""Sudoku board: a flattened 81-slot grid with row, column and section views."""

from __future__ import annotations
from typing import List, Optional, Set, Tuple, Union, overload

import numpy as np

from .cell import Cell, CellGroup
from .coordinates import (
    BOARD_SIZE,
    BOX_SIZE,
    CellCoordinate,
    ColumnIndex,
    RowIndex,
    SectionIndex,
)
from .digit import ALL_DIGITS, Digit, EMPTY_CHARACTER

CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Slot tables for each projection, in the order the projection reports cells.
ROW_SLOTS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(r * BOARD_SIZE + c for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)
)
COLUMN_SLOTS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(r * BOARD_SIZE + c for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)
)
SECTION_SLOTS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(
        ((s // BOX_SIZE) * BOX_SIZE + i) * BOARD_SIZE + (s % BOX_SIZE) * BOX_SIZE + j
        for i in range(BOX_SIZE)
        for j in range(BOX_SIZE)
    )
    for s in range(BOARD_SIZE)
)


def _peer_slots(slot: int) -> Tuple[int, ...]:
    coordinate = CellCoordinate.from_slot(slot)
    peers = set(ROW_SLOTS[coordinate.row.value])
    peers |= set(COLUMN_SLOTS[coordinate.column.value])
    peers |= set(SECTION_SLOTS[coordinate.section.value])
    peers.discard(slot)
    return tuple(sorted(peers))


PEER_SLOTS: Tuple[Tuple[int, ...], ...] = tuple(_peer_slots(k) for k in range(CELL_COUNT))


class BoardFormatError(ValueError):
    """Raised when text does not describe exactly 81 cells."""

    def __init__(self, symbol_count: int):
        self.symbol_count = symbol_count
        super().__init__(
            f"Board text must contain exactly {CELL_COUNT} cell symbols "
            f"('1'-'9' or '{EMPTY_CHARACTER}'), found {symbol_count}"
        )


def count_symbols(text: str) -> int:
    """Count the characters of ``text`` that occupy a cell slot."""
    return sum(1 for ch in text if ch == EMPTY_CHARACTER or Digit.from_char(ch) is not None)


class Board:
    """
    A standard 9x9 Sudoku board.

    Cells are stored row-major in a single numpy array of 81 slots where 0
    marks an unfilled cell and 1-9 hold a digit. Rows, columns and sections
    are read through ``get``, which returns point-in-time snapshots.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional initial values, either 81 slots or a 9x9 array.
                  0 means unfilled. If None, creates an empty board.
        """
        if grid is None:
            self.grid = np.zeros(CELL_COUNT, dtype=np.int8)
            return

        values = np.asarray(grid)
        if values.shape not in ((CELL_COUNT,), (BOARD_SIZE, BOARD_SIZE)):
            raise ValueError(
                f"Grid shape must be ({CELL_COUNT},) or ({BOARD_SIZE}, {BOARD_SIZE}), "
                f"got {values.shape}"
            )
        if not np.issubdtype(values.dtype, np.integer):
            raise ValueError(f"Grid values must be integers, got {values.dtype}")
        if values.size and (values.min() < 0 or values.max() > BOARD_SIZE):
            raise ValueError(f"Grid values must be 0-{BOARD_SIZE}")
        self.grid = values.reshape(CELL_COUNT).astype(np.int8)

    @classmethod
    def from_text(cls, text: str) -> Board:
        """
        Parse a board from text.

        Each '1'-'9' fills the next cell with that digit and each '-' leaves
        the next cell unfilled; every other character is ignored. Cells fill
        row-major, so the k-th symbol lands in row k // 9, column k % 9.

        Raises:
            BoardFormatError: if the text does not hold exactly 81 symbols.
        """
        slots = []
        for ch in text:
            if ch == EMPTY_CHARACTER:
                slots.append(0)
            else:
                digit = Digit.from_char(ch)
                if digit is not None:
                    slots.append(int(digit))

        if len(slots) != CELL_COUNT:
            raise BoardFormatError(len(slots))

        return cls(np.array(slots, dtype=np.int8))

    def copy(self) -> Board:
        """Create a deep copy of the board."""
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def _cell(self, slot: int) -> Cell:
        value = int(self.grid[slot])
        digit = Digit(value) if value else None
        return Cell(digit, CellCoordinate.from_slot(slot))

    def _group(self, origin, slots: Tuple[int, ...]) -> CellGroup:
        return CellGroup(origin, tuple(self._cell(slot) for slot in slots))

    @overload
    def get(self, index: CellCoordinate) -> Cell: ...

    @overload
    def get(self, index: Union[RowIndex, ColumnIndex, SectionIndex]) -> CellGroup: ...

    def get(self, index):
        """
        Look up a cell or project a group of cells.

        A CellCoordinate returns that Cell. A RowIndex, ColumnIndex or
        SectionIndex returns the CellGroup of its nine cells.
        """
        if isinstance(index, CellCoordinate):
            return self._cell(index.slot)
        if isinstance(index, RowIndex):
            return self._group(index, ROW_SLOTS[index.value])
        if isinstance(index, ColumnIndex):
            return self._group(index, COLUMN_SLOTS[index.value])
        if isinstance(index, SectionIndex):
            return self._group(index, SECTION_SLOTS[index.value])
        raise TypeError(f"Cannot index a board with {type(index).__name__}")

    def assign(self, coordinate: CellCoordinate, digit: Digit) -> None:
        """
        Place ``digit`` in an unfilled cell.

        No check is made against the cell's peers; callers only assign
        digits they have already derived as consistent.

        Raises:
            ValueError: if the cell already holds a digit.
        """
        slot = coordinate.slot
        if self.grid[slot] != 0:
            raise ValueError(f"Cell {coordinate} already holds {self.grid[slot]}")
        self.grid[slot] = int(digit)

    def is_solved(self) -> bool:
        """Check whether every cell holds a digit. Correctness is not checked."""
        return bool(np.all(self.grid != 0))

    def cells(self) -> List[Cell]:
        """All 81 cells in row-major order."""
        return [self._cell(slot) for slot in range(CELL_COUNT)]

    def unfilled_cells(self) -> List[Cell]:
        """Unfilled cells in row-major order."""
        return [self._cell(int(slot)) for slot in np.flatnonzero(self.grid == 0)]

    def count_empty(self) -> int:
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != 0))

    def peer_cells(self, coordinate: CellCoordinate) -> List[Cell]:
        """
        Get the cells sharing a row, column or section with ``coordinate``.

        Returns:
            The 20 distinct peers in slot order, excluding the cell itself.
        """
        return [self._cell(slot) for slot in PEER_SLOTS[coordinate.slot]]

    def peer_digits(self, coordinate: CellCoordinate) -> Set[Digit]:
        """Digits already placed in any peer of ``coordinate``."""
        values = self.grid[list(PEER_SLOTS[coordinate.slot])]
        return {Digit(int(v)) for v in values if v != 0}

    def get_candidates(self, coordinate: CellCoordinate) -> Set[Digit]:
        """
        Get the digits not excluded by any peer of an unfilled cell.

        Returns:
            Set of candidate digits. Empty if the cell is already filled.
        """
        if self.grid[coordinate.slot] != 0:
            return set()
        return set(ALL_DIGITS) - self.peer_digits(coordinate)

    def is_valid(self) -> bool:
        """
        Check that no digit repeats within any row, column or section.

        Does not check if the board is complete, only that no conflicts exist.
        """
        for table in (ROW_SLOTS, COLUMN_SLOTS, SECTION_SLOTS):
            for slots in table:
                values = self.grid[list(slots)]
                non_zero = values[values != 0]
                if len(non_zero) != len(set(non_zero.tolist())):
                    return False
        return True

    def to_text(self) -> str:
        """Compact 81-character form, readable again by ``from_text``."""
        return ''.join(
            chr(ord('0') + int(v)) if v else EMPTY_CHARACTER for v in self.grid
        )

    def pretty(self) -> str:
        """Render the board with section borders."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for r in range(BOARD_SIZE):
            if r % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for c in range(BOARD_SIZE):
                val = int(self.grid[r * BOARD_SIZE + c])
                row_str += f' {val}' if val else ' .'
                if (c + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __str__(self) -> str:
        """Nine lines of nine space-separated symbols, '-' for unfilled."""
        return '\n'.join(str(self.get(RowIndex(r))) for r in range(BOARD_SIZE))

    def __repr__(self) -> str:
        return f"Board(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_text())
