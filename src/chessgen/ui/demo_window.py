"""DemoWindow — plays random moves on a timer and shows each position."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer, pyqtSignal
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from chessgen.core.board import Board
from chessgen.core.enums import Color
from chessgen.core.move import Move
from chessgen.game.session import GameSession
from chessgen.settings import DemoSettings
from chessgen.ui.board_widget import BoardWidget

_LOGGER = logging.getLogger(__name__)


class DemoWindow(QMainWindow):
    """Main window of the viewer.

    Signals:
        finished(int): Emitted once with the number of plies played.
    """

    finished = pyqtSignal(int)

    def __init__(
        self,
        settings: DemoSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else DemoSettings()
        self._session: GameSession = self._settings.create_session()
        self._done = False

        self.setWindowTitle("chessgen")

        self._board_widget = BoardWidget()
        self._status = QLabel()

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(self._board_widget, 1)
        layout.addWidget(self._status)
        self.setCentralWidget(central)

        self._timer = QTimer(self)
        self._timer.setInterval(self._settings.step_interval_ms)
        self._timer.timeout.connect(self.step)

        self._session.events.on_move.append(self._on_move)
        self._session.events.on_stalled.append(self._on_stalled)

        self._board_widget.set_board(self._session.board)
        self._set_status(f"{self._session.side_to_move} to move")

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    @property
    def status_text(self) -> str:
        return self._status.text()

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    @property
    def is_done(self) -> bool:
        return self._done

    def start(self) -> None:
        """Begin stepping through plies on the timer."""
        if self._done:
            return
        if self._session.ply >= self._settings.plies:
            self._finish()
            return
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def step(self) -> Move | None:
        """Play a single ply. Returns the move, or ``None`` once finished."""
        if self._done:
            return None
        if self._session.ply >= self._settings.plies:
            self._finish()
            return None
        move = self._session.play_turn()
        if move is None or self._session.ply >= self._settings.plies:
            self._finish()
        return move

    # ── Session listeners ────────────────────────────────────────────────

    def _on_move(self, move: Move, color: Color, board: Board) -> None:
        self._board_widget.set_board(board)
        self._board_widget.set_last_move(move)
        self._set_status(f"{self._session.ply}. {color} {move}")

    def _on_stalled(self, color: Color) -> None:
        self._set_status(f"{color} has no moves")

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self) -> None:
        if self._done:
            return
        self._done = True
        self._timer.stop()
        _LOGGER.info("Viewer finished after %d plies", self._session.ply)
        self.finished.emit(self._session.ply)

    def _set_status(self, text: str) -> None:
        self._status.setText(text)
