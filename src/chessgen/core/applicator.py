"""Move application: mutate a board in place to reflect a move."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from chessgen.core.enums import MoveKind
from chessgen.core.errors import OffBoardError, UnsupportedMoveError
from chessgen.core.geometry import on_board

if TYPE_CHECKING:
    from chessgen.core.board import Board
    from chessgen.core.move import Move

_LOGGER = logging.getLogger(__name__)


def _apply_basic(board: Board, move: Move) -> None:
    # A capture is just an overwrite of the destination.
    board[move.destination] = board[move.origin]
    board[move.origin] = None


# En passant, castling and promotion stay unregistered until their side
# effects (captured pawn removal, rook hop, piece swap) are modelled.
_APPLIERS: dict[MoveKind, Callable[[Board, Move], None]] = {
    MoveKind.BASIC: _apply_basic,
}


def apply_move(board: Board, move: Move) -> None:
    """Apply *move* to *board* in place.

    The move is not re-validated; callers pass moves obtained from the
    generator for the side to move.

    Raises:
        UnsupportedMoveError: *move* is not a basic move. The board is left
            untouched.
        OffBoardError: origin or destination lies off the board.
    """
    applier = _APPLIERS.get(move.kind)
    if applier is None:
        raise UnsupportedMoveError(move)
    for sq in (move.origin, move.destination):
        if not on_board(sq):
            raise OffBoardError(sq)
    applier(board, move)
    _LOGGER.debug("Applied %s", move)
