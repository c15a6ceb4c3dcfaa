"""Abstract interfaces for the game layer.

The session depends on these ABCs, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessgen.core.board import Board
    from chessgen.core.enums import Color
    from chessgen.core.move import Move


class IPlayer(ABC):
    """Interface for a game participant that selects moves."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def choose_move(self, board: Board, moves: Sequence[Move]) -> Move | None:
        """Pick one of *moves* for the position on *board*.

        Returns ``None`` when *moves* is empty or the player passes.
        The board must not be mutated.
        """
