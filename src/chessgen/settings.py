"""Demo settings shared by the command line and the Qt viewer."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessgen.core.enums import Color
from chessgen.core.notation import LAYOUT_LENGTH, STANDARD_LAYOUT, board_from_layout
from chessgen.game.interfaces import IPlayer
from chessgen.game.player import RandomPlayer
from chessgen.game.session import GameSession

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class DemoSettings:
    """All user-configurable settings of the random-move demo."""

    # Game
    plies: int = 3
    seed: int | None = None
    layout: str = STANDARD_LAYOUT
    first_to_move: Color = Color.WHITE

    # Output
    log_level: str = "WARNING"

    # Viewer
    gui: bool = False
    step_interval_ms: int = 600

    def validate(self) -> None:
        """Raise ``ValueError`` describing the first invalid field."""
        if self.plies < 0:
            raise ValueError(f"plies must be non-negative, got {self.plies}")
        if len(self.layout) != LAYOUT_LENGTH:
            raise ValueError(
                f"layout must have {LAYOUT_LENGTH} characters, got {len(self.layout)}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        if self.step_interval_ms <= 0:
            raise ValueError(
                f"step interval must be positive, got {self.step_interval_ms}"
            )

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    def player_seed(self, color: Color) -> int | None:
        """Per-side seed derived from :attr:`seed` (``None`` stays random)."""
        if self.seed is None:
            return None
        return self.seed + int(color)

    def create_session(self) -> GameSession:
        """A fresh session on :attr:`layout` with two random players."""
        board = board_from_layout(self.layout)
        players: dict[Color, IPlayer] = {
            c: RandomPlayer(c, seed=self.player_seed(c)) for c in Color
        }
        return GameSession(board, self.first_to_move, players)
