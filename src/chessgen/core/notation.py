"""Board layout text codec and plain-text rendering.

A layout is a string of exactly 64 characters, one per square, scanned
rank-major from rank 0 (the top row, chess rank 8) and file-major within a
rank. Letters ``PNRBQK`` name the piece kinds; lowercase is White and
uppercase is Black. Any other character, including space, is an empty
square.
"""

from __future__ import annotations

from chessgen.core.board import Board
from chessgen.core.piece import Piece
from chessgen.core.types import BOARD_SIZE, Square, all_squares

LAYOUT_LENGTH = BOARD_SIZE * BOARD_SIZE

STANDARD_LAYOUT = "RNBQKBNR" + "P" * 8 + " " * 32 + "p" * 8 + "rnbqkbnr"

_EMPTY_CHAR = " "
_DARK_EMPTY = "■"
_FILE_HEADER = "   " + " ".join("ABCDEFGH")


def board_from_layout(layout: str) -> Board:
    """Parse a 64-character layout into a :class:`Board`."""
    if len(layout) != LAYOUT_LENGTH:
        raise ValueError(
            f"Layout must have {LAYOUT_LENGTH} characters, got {len(layout)}: "
            f"{layout!r}"
        )
    board = Board()
    for sq, ch in zip(all_squares(), layout):
        if Piece.is_piece_char(ch):
            board[sq] = Piece.from_char(ch)
    return board


def board_to_layout(board: Board) -> str:
    """Serialize *board* into its 64-character layout."""
    chars: list[str] = []
    for sq in all_squares():
        piece = board[sq]
        chars.append(str(piece) if piece is not None else _EMPTY_CHAR)
    return "".join(chars)


def render_board(board: Board) -> str:
    """Human-readable grid with files A-H and ranks 8-1.

    Pieces are drawn as Unicode symbols; empty dark squares as ``■``.
    """
    lines = [_FILE_HEADER]
    for rank in range(BOARD_SIZE):
        cells: list[str] = []
        for file in range(BOARD_SIZE):
            piece = board[Square(file, rank)]
            if piece is not None:
                cells.append(piece.symbol)
            elif (file + rank) % 2 == 1:
                cells.append(_DARK_EMPTY)
            else:
                cells.append(_EMPTY_CHAR)
        lines.append(f" {BOARD_SIZE - rank} {' '.join(cells)}")
    return "\n".join(lines) + "\n"
