"""Bounds checks, occupancy classification and pawn direction helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgen.core.enums import Color
from chessgen.core.types import BOARD_SIZE, Square

if TYPE_CHECKING:
    from chessgen.core.board import Board

# White advances toward rank 0, Black toward rank 7.
_FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_HOME_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def on_board(sq: Square) -> bool:
    """Both coordinates lie in ``[0, 8)``."""
    file, rank = sq
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def is_empty(sq: Square, board: Board) -> bool:
    """The square holds no piece. *sq* must be on the board."""
    return board[sq] is None


def is_enemy(sq: Square, board: Board, color: Color) -> bool:
    """The square holds a piece of the side opposing *color*."""
    piece = board[sq]
    return piece is not None and piece.color != color


def is_empty_or_enemy(sq: Square, board: Board, color: Color) -> bool:
    """Admissible destination for a non-pawn piece of *color*."""
    piece = board[sq]
    return piece is None or piece.color != color


def forward_direction(color: Color) -> int:
    """Rank delta of one pawn step: -1 for White, +1 for Black."""
    return _FORWARD[color]


def home_rank(color: Color) -> int:
    """Rank on which *color*'s pawns start (6 for White, 1 for Black).

    Pawn rules treat a pawn standing here as unmoved. That is a proxy for
    move history: a pawn placed on its home rank by hand also counts.
    """
    return _HOME_RANK[color]
