"""Pseudo-legal move generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessgen.core.move import Move
from chessgen.core.rules import rule_for
from chessgen.core.types import Square

if TYPE_CHECKING:
    from chessgen.core.board import Board
    from chessgen.core.enums import Color

_LOGGER = logging.getLogger(__name__)


class MoveGenerator:
    """Generates pseudo-legal moves for a given :class:`Board`.

    Moves obey each piece's geometry and occupancy constraints but are not
    filtered for king safety. The board is never mutated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate(self, color: Color) -> list[Move]:
        """All pseudo-legal moves for *color*, in board scan order."""
        moves: list[Move] = []
        for sq, piece in self._board.occupied():
            if piece.color == color:
                self._gen_piece(sq, moves)
        _LOGGER.debug("Generated %d moves for %s", len(moves), color)
        return moves

    def moves_from(self, sq: Square) -> list[Move]:
        """Pseudo-legal moves of the piece on *sq* (empty if none)."""
        moves: list[Move] = []
        self._gen_piece(sq, moves)
        return moves

    # -- Internals ----------------------------------------------------------

    def _gen_piece(self, sq: Square, moves: list[Move]) -> None:
        piece = self._board[sq]
        if piece is None:
            return
        rule = rule_for(piece.piece_type)
        moves.extend(Move(sq, to_sq) for to_sq in rule(sq, self._board, piece.color))


def generate_moves(board: Board, color: Color) -> list[Move]:
    """Shortcut for ``MoveGenerator(board).generate(color)``."""
    return MoveGenerator(board).generate(color)
