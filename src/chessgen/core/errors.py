"""Exception hierarchy for the core layer."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all chessgen errors."""


class OffBoardError(ChessError, IndexError):
    """A square outside the 8x8 grid was read or written.

    Always a bug in the caller: every board access is gated behind
    :func:`chessgen.core.geometry.on_board`.
    """

    def __init__(self, square: tuple[int, int]) -> None:
        super().__init__(f"Square off the board: {tuple(square)!r}")
        self.square = square


class UnsupportedMoveError(ChessError, NotImplementedError):
    """The move kind has no application semantics yet."""

    def __init__(self, move: object) -> None:
        super().__init__(f"Cannot apply unsupported move: {move!r}")
        self.move = move
