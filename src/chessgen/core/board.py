"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessgen.core.enums import Color, PieceType
from chessgen.core.errors import OffBoardError
from chessgen.core.piece import Piece
from chessgen.core.types import BOARD_SIZE, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of squares, each holding a :class:`Piece` or ``None``.

    The grid is stored by value: :meth:`copy` produces a fully independent
    board, so snapshots never alias each other.
    """

    __slots__ = ("_fields",)

    def __init__(self) -> None:
        # [rank][file]
        self._fields: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        file, rank = self._checked(sq)
        return self._fields[rank][file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        file, rank = self._checked(sq)
        self._fields[rank][file] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    @staticmethod
    def _checked(sq: Square) -> tuple[int, int]:
        file, rank = sq
        # Reject rather than let Python wrap negative indices.
        if not (0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE):
            raise OffBoardError(sq)
        return file, rank

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` pairs in scan order (rank-major, then file)."""
        for rank, row in enumerate(self._fields):
            for file, piece in enumerate(row):
                if piece is not None:
                    yield Square(file, rank), piece

    def pieces(self, color: Color, piece_type: PieceType | None = None) -> list[Square]:
        """Squares occupied by *color* (optionally only *piece_type*)."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color
            and (piece_type is None or piece.piece_type == piece_type)
        ]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._fields = [row.copy() for row in self._fields]
        return b

    def clear(self) -> None:
        self._fields = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, Black on ranks 0-1, White on ranks 6-7."""
        b = cls()
        for f in range(BOARD_SIZE):
            b[Square(f, 1)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(f, 6)] = Piece(Color.WHITE, PieceType.PAWN)

        for f, pt in enumerate(_BACK_RANK):
            b[Square(f, 0)] = Piece(Color.BLACK, pt)
            b[Square(f, 7)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self._fields):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{BOARD_SIZE - rank} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
