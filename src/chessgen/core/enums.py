"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds. Closed set; every kind has exactly one move rule."""

    PAWN = 1
    KNIGHT = 2
    ROOK = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


class MoveKind(IntEnum):
    """Move classification.

    Only ``BASIC`` can be applied to a board; the other kinds are reserved
    so the generator's output type stays stable once they are implemented.
    """

    BASIC = 0
    EN_PASSANT = 1
    CASTLING = 2
    PROMOTION = 3
