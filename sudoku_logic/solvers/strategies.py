"""Candidate-elimination strategies used by the elimination solver."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Set, Type

from ..core.board import Board
from ..core.cell import Cell
from ..core.digit import Digit


class Strategy(ABC):
    """
    A rule that rules out candidate digits for one unfilled cell.

    Strategies run in sequence over the same candidate set, so each one only
    ever removes digits; none adds them back.
    """

    name: str = "strategy"

    @abstractmethod
    def eliminate(self, board: Board, cell: Cell, candidates: Set[Digit]) -> None:
        """
        Remove from ``candidates`` every digit this rule excludes for ``cell``.

        Args:
            board: Current board state (not modified).
            cell: Snapshot of the unfilled cell being examined.
            candidates: Candidate set, narrowed in place.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PeerEliminationStrategy(Strategy):
    """Drop every digit already placed in the cell's row, column or section."""

    name = "peer"

    def eliminate(self, board: Board, cell: Cell, candidates: Set[Digit]) -> None:
        candidates -= board.peer_digits(cell.coordinate)


class HiddenSingleStrategy(Strategy):
    """
    Pin the cell to a digit that no other cell of one of its groups can take.

    The row is checked first, then the column, then the section; within a
    group, candidates are tried in ascending order. Other cells' options are
    their peer-elimination candidates. Digits already placed among the cell's
    own peers are never picked.
    """

    name = "hidden"

    def eliminate(self, board: Board, cell: Cell, candidates: Set[Digit]) -> None:
        if len(candidates) <= 1:
            return

        coordinate = cell.coordinate
        seen = board.peer_digits(coordinate)
        for index in (coordinate.row, coordinate.column, coordinate.section):
            group = board.get(index)
            others = [
                board.get_candidates(other.coordinate)
                for other in group.unfilled()
                if other.coordinate != coordinate
            ]
            for digit in sorted(candidates):
                if digit in seen:
                    continue
                if not any(digit in options for options in others):
                    candidates.intersection_update({digit})
                    return


STRATEGIES: Dict[str, Type[Strategy]] = {
    PeerEliminationStrategy.name: PeerEliminationStrategy,
    HiddenSingleStrategy.name: HiddenSingleStrategy,
}

DEFAULT_STRATEGY_NAMES = (PeerEliminationStrategy.name,)


def resolve_strategies(names: Iterable[str]) -> List[Strategy]:
    """
    Instantiate strategies by registry name, keeping the given order.

    Raises:
        ValueError: if a name is not registered.
    """
    strategies = []
    for name in names:
        try:
            strategies.append(STRATEGIES[name]())
        except KeyError:
            raise ValueError(
                f"Unknown strategy {name!r}; choose from {', '.join(STRATEGIES)}"
            ) from None
    return strategies
