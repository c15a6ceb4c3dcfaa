"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgen.core.enums import Color, PieceType

# Layout character ↔ (Color, PieceType). Lowercase is White, uppercase Black.
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "p": (Color.WHITE, PieceType.PAWN),
    "n": (Color.WHITE, PieceType.KNIGHT),
    "r": (Color.WHITE, PieceType.ROOK),
    "b": (Color.WHITE, PieceType.BISHOP),
    "q": (Color.WHITE, PieceType.QUEEN),
    "k": (Color.WHITE, PieceType.KING),
    "P": (Color.BLACK, PieceType.PAWN),
    "N": (Color.BLACK, PieceType.KNIGHT),
    "R": (Color.BLACK, PieceType.ROOK),
    "B": (Color.BLACK, PieceType.BISHOP),
    "Q": (Color.BLACK, PieceType.QUEEN),
    "K": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_LAYOUT_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Layout character (lowercase = white, uppercase = black)."""
        return _LAYOUT_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from layout character, e.g. 'n' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @staticmethod
    def is_piece_char(char: str) -> bool:
        """Whether *char* names a piece in the layout alphabet."""
        return char in _CHAR_MAP

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
