"""Index types addressing rows, columns, sections and single cells of a board."""

from __future__ import annotations
from dataclasses import dataclass

BOARD_SIZE = 9
BOX_SIZE = 3


def _check_range(kind: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{kind} must be an int, got {value!r}")
    if value < 0 or value >= BOARD_SIZE:
        raise ValueError(f"{kind} must be in range 0-{BOARD_SIZE - 1}, got {value}")


@dataclass(frozen=True, order=True)
class RowIndex:
    """A row of the board, 0 (top) to 8 (bottom)."""
    value: int

    def __post_init__(self):
        _check_range("Row index", self.value)


@dataclass(frozen=True, order=True)
class ColumnIndex:
    """A column of the board, 0 (left) to 8 (right)."""
    value: int

    def __post_init__(self):
        _check_range("Column index", self.value)


@dataclass(frozen=True, order=True)
class SectionIndex:
    """
    One of the nine 3x3 sections, numbered row-major.

    Section 0 covers rows 0-2 / columns 0-2, section 1 covers rows 0-2 /
    columns 3-5, ..., section 8 covers rows 6-8 / columns 6-8.
    """
    value: int

    def __post_init__(self):
        _check_range("Section index", self.value)

    @property
    def origin(self) -> CellCoordinate:
        """Top-left cell of the section."""
        return CellCoordinate.at(
            (self.value // BOX_SIZE) * BOX_SIZE,
            (self.value % BOX_SIZE) * BOX_SIZE,
        )


@dataclass(frozen=True, order=True)
class CellCoordinate:
    """Position of a single cell: a (row, column) pair."""
    row: RowIndex
    column: ColumnIndex

    @classmethod
    def at(cls, row: int, column: int) -> CellCoordinate:
        """Build a coordinate from plain integers."""
        return cls(RowIndex(row), ColumnIndex(column))

    @classmethod
    def from_slot(cls, slot: int) -> CellCoordinate:
        """Build a coordinate from a flattened storage slot (0-80)."""
        if not 0 <= slot < BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Slot must be in range 0-80, got {slot}")
        return cls.at(slot // BOARD_SIZE, slot % BOARD_SIZE)

    @property
    def section(self) -> SectionIndex:
        return SectionIndex(
            (self.row.value // BOX_SIZE) * BOX_SIZE + self.column.value // BOX_SIZE
        )

    @property
    def slot(self) -> int:
        """Row-major index into the flattened 81-slot grid."""
        return self.row.value * BOARD_SIZE + self.column.value

    def __str__(self) -> str:
        return f"r{self.row.value}c{self.column.value}"
