"""Application entry point: random-move demo on the terminal or in Qt."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from chessgen.core.board import Board
from chessgen.core.enums import Color
from chessgen.core.move import Move
from chessgen.core.notation import render_board
from chessgen.settings import LOG_LEVELS, DemoSettings

_LOGGER = logging.getLogger(__name__)

_COLORS = {str(c): c for c in Color}


def build_parser() -> argparse.ArgumentParser:
    defaults = DemoSettings()
    ap = argparse.ArgumentParser(
        prog="chessgen",
        description="Play random pseudo-legal moves from a board layout.",
    )
    ap.add_argument(
        "--plies",
        type=int,
        default=defaults.plies,
        help=f"number of half-moves to play (default {defaults.plies})",
    )
    ap.add_argument("--seed", type=int, default=None, help="random seed")
    ap.add_argument(
        "--layout",
        default=defaults.layout,
        help="64-character board layout (lowercase white, uppercase black)",
    )
    ap.add_argument(
        "--first",
        choices=sorted(_COLORS),
        default=str(defaults.first_to_move),
        help="side to move first",
    )
    ap.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=defaults.log_level,
        type=str.upper,
    )
    ap.add_argument("--gui", action="store_true", help="show the Qt viewer")
    ap.add_argument(
        "--interval",
        type=int,
        default=defaults.step_interval_ms,
        help="viewer delay between plies in milliseconds",
    )
    return ap


def settings_from_args(argv: list[str] | None = None) -> DemoSettings:
    args = build_parser().parse_args(argv)
    settings = DemoSettings(
        plies=args.plies,
        seed=args.seed,
        layout=args.layout,
        first_to_move=_COLORS[args.first],
        log_level=args.log_level,
        gui=args.gui,
        step_interval_ms=args.interval,
    )
    settings.validate()
    return settings


def run_demo(settings: DemoSettings, out: TextIO | None = None) -> list[Move]:
    """Play the terminal demo, printing the board after every ply."""
    if out is None:
        out = sys.stdout
    session = settings.create_session()

    def _print_move(move: Move, color: Color, board: Board) -> None:
        out.write(f"{session.ply}. {color} {move}\n")
        out.write(render_board(board))

    def _print_stalled(color: Color) -> None:
        out.write(f"{color} has no moves\n")

    session.events.on_move.append(_print_move)
    session.events.on_stalled.append(_print_stalled)

    out.write(render_board(session.board))
    return session.play(settings.plies)


def main(argv: list[str] | None = None) -> int:
    """Launch the chessgen demo."""
    try:
        settings = settings_from_args(argv)
    except ValueError as exc:
        print(f"chessgen: error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.info("Starting demo with %s", settings)

    if settings.gui:
        from chessgen.ui.bootstrap import run_application

        return run_application(settings)

    run_demo(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
