"""The nine Sudoku symbols and their numeric and character encodings."""

from __future__ import annotations
from enum import IntEnum
from typing import Optional, Tuple


EMPTY_CHARACTER = '-'


class Digit(IntEnum):
    """One of the nine Sudoku symbols, ordered by its value 1-9."""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9

    @classmethod
    def from_int(cls, value: int) -> Optional[Digit]:
        """Return the digit for ``value``, or None if it is not in 1-9."""
        if 1 <= value <= 9:
            return cls(value)
        return None

    @classmethod
    def from_char(cls, char: str) -> Optional[Digit]:
        """Return the digit for an ASCII character '1'-'9', else None."""
        if len(char) == 1 and '1' <= char <= '9':
            return cls(ord(char) - ord('0'))
        return None

    def to_char(self) -> str:
        return chr(ord('0') + self.value)

    def __str__(self) -> str:
        return self.to_char()


ALL_DIGITS: Tuple[Digit, ...] = tuple(Digit)
