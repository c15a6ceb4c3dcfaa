"""GameSession — alternate sides, asking players for moves and applying them.

The session exclusively owns its board: generation and application for one
turn happen back to back, so no partially applied move is ever visible to
listeners.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgen.core.applicator import apply_move
from chessgen.core.board import Board
from chessgen.core.enums import Color
from chessgen.core.move import Move
from chessgen.core.move_generator import MoveGenerator
from chessgen.game.interfaces import IPlayer
from chessgen.game.player import RandomPlayer

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Color, Board], None]  # move, mover, board after
StalledCallback = Callable[[Color], None]  # side that could not move


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_stalled: list[StalledCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Runs a game loop over pseudo-legal moves.

    There is no check or mate detection: the loop only stops when a side
    has no generated move, its player passes, or the caller's ply budget is
    spent.
    """

    __slots__ = ("_board", "_side_to_move", "_players", "_history", "events")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        players: dict[Color, IPlayer] | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._side_to_move = side_to_move
        if players is None:
            players = {c: RandomPlayer(c) for c in Color}
        missing = [c for c in Color if c not in players]
        if missing:
            raise ValueError(f"No player for {', '.join(map(str, missing))}")
        self._players = dict(players)
        self._history: list[Move] = []
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def history(self) -> list[Move]:
        return list(self._history)

    @property
    def ply(self) -> int:
        return len(self._history)

    @property
    def current_player(self) -> IPlayer:
        return self._players[self._side_to_move]

    def player(self, color: Color) -> IPlayer:
        return self._players[color]

    # ── Turn processing ──────────────────────────────────────────────────

    def legal_moves(self) -> list[Move]:
        """Pseudo-legal moves for the side to move."""
        return MoveGenerator(self._board).generate(self._side_to_move)

    def play_turn(self) -> Move | None:
        """Play one ply. Returns the applied move, or ``None`` if stalled.

        Raises:
            ValueError: the player returned a move that was not generated.
        """
        color = self._side_to_move
        moves = self.legal_moves()
        move = self.current_player.choose_move(self._board, moves)
        if move is None:
            _LOGGER.warning("%s has no move after %d plies", color, self.ply)
            self._emit_stalled(color)
            return None
        if move not in moves:
            raise ValueError(f"{self.current_player.name} chose ungenerated move {move}")

        apply_move(self._board, move)
        self._history.append(move)
        self._side_to_move = color.opposite
        _LOGGER.debug("Ply %d: %s played %s", self.ply, color, move)
        self._emit_move(move, color)
        return move

    def play(self, plies: int) -> list[Move]:
        """Play up to *plies* turns, stopping early when a side stalls."""
        if plies < 0:
            raise ValueError(f"plies must be non-negative, got {plies}")
        _LOGGER.info("Playing up to %d plies, %s to move", plies, self._side_to_move)
        played: list[Move] = []
        for _ in range(plies):
            move = self.play_turn()
            if move is None:
                break
            played.append(move)
        _LOGGER.info("Played %d plies", len(played))
        return played

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move, color: Color) -> None:
        for cb in self.events.on_move:
            cb(move, color, self._board)

    def _emit_stalled(self, color: Color) -> None:
        for cb in self.events.on_stalled:
            cb(color)
