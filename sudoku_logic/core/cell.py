"""Single-cell snapshots and the 9-cell groups projected from a board."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from .coordinates import CellCoordinate, ColumnIndex, RowIndex, SectionIndex
from .digit import Digit, EMPTY_CHARACTER

GroupIndex = Union[RowIndex, ColumnIndex, SectionIndex]


@dataclass(frozen=True)
class Cell:
    """A board position and the digit it holds, if any.

    Cells are read-only snapshots; changing the board does not update a Cell
    already handed out.
    """
    digit: Optional[Digit]
    coordinate: CellCoordinate

    @property
    def is_filled(self) -> bool:
        return self.digit is not None

    def __str__(self) -> str:
        if self.digit is None:
            return EMPTY_CHARACTER
        return self.digit.to_char()


@dataclass(frozen=True)
class CellGroup:
    """
    The nine cells of one row, column or section, together with the index
    they were projected from.

    Ordering: a row is ordered by column, a column by row, and a section
    row-major across its 3x3 block.
    """
    origin: GroupIndex
    cells: Tuple[Cell, ...]

    def __post_init__(self):
        if len(self.cells) != 9:
            raise ValueError(f"A cell group holds 9 cells, got {len(self.cells)}")

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, position: int) -> Cell:
        return self.cells[position]

    def digits(self) -> List[Digit]:
        """Digits placed in this group, in group order."""
        return [cell.digit for cell in self.cells if cell.digit is not None]

    def unfilled(self) -> List[Cell]:
        return [cell for cell in self.cells if cell.digit is None]

    def __str__(self) -> str:
        return ' '.join(str(cell) for cell in self.cells)
