"""Square type and coordinate helpers.

Board layout (rank-from-top):
    a8=(0, 0), b8=(1, 0), ..., h8=(7, 0)
    a7=(0, 1), ...
    ...
    a1=(0, 7), b1=(1, 7), ..., h1=(7, 7)

White starts on ranks 6-7 and advances toward rank 0.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8

_FILE_LETTERS = "abcdefgh"
_RANK_DIGITS = "87654321"


class Square(NamedTuple):
    """An ``(file, rank)`` coordinate pair.

    A square may lie off the board: move rules build candidates by adding
    offsets and filter them afterwards.
    """

    file: int
    rank: int

    def offset(self, df: int, dr: int) -> Square:
        """The square *df* files and *dr* ranks away."""
        return Square(self.file + df, self.rank + dr)

    @property
    def on_board(self) -> bool:
        return 0 <= self.file < BOARD_SIZE and 0 <= self.rank < BOARD_SIZE

    def __str__(self) -> str:
        return square_name(self)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (4, 6) → 'e2'."""
    file, rank = sq
    if not (0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE):
        raise ValueError(f"Square has no name: {tuple(sq)!r}")
    return _FILE_LETTERS[file] + _RANK_DIGITS[rank]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in _FILE_LETTERS or name[1] not in _RANK_DIGITS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_FILE_LETTERS.index(name[0]), _RANK_DIGITS.index(name[1]))


def all_squares() -> list[Square]:
    """Every square in scan order: rank 0..7, file 0..7 within each rank."""
    return [Square(f, r) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)]
