"""Move value object (coordinate-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessgen.core.enums import MoveKind
from chessgen.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    Every kind carries the same ``(origin, destination)`` pair; *kind*
    tags how the applicator should interpret it.
    """

    origin: Square
    destination: Square
    kind: MoveKind = MoveKind.BASIC

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.origin)}{square_name(self.destination)}"

    @property
    def is_basic(self) -> bool:
        return self.kind == MoveKind.BASIC
