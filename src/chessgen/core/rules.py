"""Per-piece move rules.

Each rule takes ``(origin, board, color)`` and yields destination squares in
a fixed order. :data:`MOVE_RULES` maps every :class:`PieceType` to exactly one
rule.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from chessgen.core.enums import Color, PieceType
from chessgen.core.geometry import (
    forward_direction,
    home_rank,
    is_empty,
    is_empty_or_enemy,
    is_enemy,
    on_board,
)
from chessgen.core.types import Square

if TYPE_CHECKING:
    from chessgen.core.board import Board

Rule = Callable[[Square, "Board", Color], Iterator[Square]]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


# -- Shared primitives -----------------------------------------------------


def ray_walk(
    origin: Square,
    board: Board,
    color: Color,
    directions: tuple[tuple[int, int], ...],
) -> Iterator[Square]:
    """Walk each direction until leaving the board or hitting a piece.

    Empty squares are yielded and the walk continues. The first occupied
    square ends the ray and is yielded only if it holds an enemy piece.
    """
    for df, dr in directions:
        sq = origin.offset(df, dr)
        while on_board(sq):
            if is_empty(sq, board):
                yield sq
                sq = sq.offset(df, dr)
                continue
            if is_enemy(sq, board, color):
                yield sq
            break


def _leaper(
    origin: Square,
    board: Board,
    color: Color,
    offsets: tuple[tuple[int, int], ...],
) -> Iterator[Square]:
    for df, dr in offsets:
        sq = origin.offset(df, dr)
        if on_board(sq) and is_empty_or_enemy(sq, board, color):
            yield sq


# -- Piece rules -------------------------------------------------------------


def pawn_moves(origin: Square, board: Board, color: Color) -> Iterator[Square]:
    """Forward pushes onto empty squares plus diagonal captures.

    The two-square push is offered from the home rank only, and only when
    both the intermediate and the far square are empty. No en passant and no
    promotion moves are produced.
    """
    d = forward_direction(color)

    one_step = origin.offset(0, d)
    if on_board(one_step) and is_empty(one_step, board):
        yield one_step
        if origin.rank == home_rank(color):
            two_step = origin.offset(0, 2 * d)
            if on_board(two_step) and is_empty(two_step, board):
                yield two_step

    for df in (-1, 1):
        target = origin.offset(df, d)
        if on_board(target) and is_enemy(target, board, color):
            yield target


def knight_moves(origin: Square, board: Board, color: Color) -> Iterator[Square]:
    return _leaper(origin, board, color, KNIGHT_OFFSETS)


def rook_moves(origin: Square, board: Board, color: Color) -> Iterator[Square]:
    return ray_walk(origin, board, color, ROOK_DIRS)


def bishop_moves(origin: Square, board: Board, color: Color) -> Iterator[Square]:
    return ray_walk(origin, board, color, BISHOP_DIRS)


def queen_moves(origin: Square, board: Board, color: Color) -> Iterator[Square]:
    return ray_walk(origin, board, color, QUEEN_DIRS)


def king_moves(origin: Square, board: Board, color: Color) -> Iterator[Square]:
    """Adjacent squares only; moving into an attacked square is not filtered."""
    return _leaper(origin, board, color, KING_OFFSETS)


MOVE_RULES: dict[PieceType, Rule] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.ROOK: rook_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


def rule_for(piece_type: PieceType) -> Rule:
    """The move rule for *piece_type*. Raises ``KeyError`` for unknown kinds."""
    return MOVE_RULES[piece_type]
