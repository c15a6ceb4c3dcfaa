"""Concrete player implementations."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from chessgen.core.enums import Color
from chessgen.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chessgen.core.board import Board
    from chessgen.core.move import Move


class RandomPlayer(IPlayer):
    """Picks uniformly among the generated moves.

    Each player owns its own :class:`random.Random`, so a fixed *seed*
    reproduces the same game regardless of other users of :mod:`random`.
    """

    __slots__ = ("_color", "_name", "_rng")

    def __init__(self, color: Color, name: str = "", seed: int | None = None) -> None:
        self._color = color
        self._name = name or f"Random ({color})"
        self._rng = random.Random(seed)

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def choose_move(self, board: Board, moves: Sequence[Move]) -> Move | None:
        if not moves:
            return None
        return self._rng.choice(moves)


class CallbackPlayer(IPlayer):
    """A player that delegates the choice to a callback.

    Args:
        color: Side the player plays.
        on_choose: ``(Board, Sequence[Move]) -> Move | None``, invoked on
            every turn. Useful for scripted games and tests.
        name: Display name.
    """

    __slots__ = ("_color", "_name", "_on_choose")

    def __init__(
        self,
        color: Color,
        on_choose: Callable[[Board, Sequence[Move]], Move | None],
        name: str = "Scripted",
    ) -> None:
        self._color = color
        self._name = name
        self._on_choose = on_choose

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def choose_move(self, board: Board, moves: Sequence[Move]) -> Move | None:
        return self._on_choose(board, moves)
