"""Tests for the DemoWindow timer-driven viewer."""

from __future__ import annotations

from chessgen.core.board import Board
from chessgen.core.enums import Color
from chessgen.settings import DemoSettings
from chessgen.ui.demo_window import DemoWindow


def test_initial_state(qapp: object) -> None:
    window = DemoWindow(DemoSettings(plies=2, seed=1))
    assert window.session.ply == 0
    assert window.board_widget.board == Board.initial()
    assert "white to move" in window.status_text
    assert not window.is_running
    assert not window.is_done


def test_step_updates_widget(qapp: object) -> None:
    window = DemoWindow(DemoSettings(plies=2, seed=1))
    move = window.step()
    assert move is not None
    assert window.board_widget.board == window.session.board
    assert window.board_widget.last_move == move
    assert str(move) in window.status_text


def test_finishes_after_ply_budget(qapp: object) -> None:
    finished: list[int] = []
    window = DemoWindow(DemoSettings(plies=2, seed=1))
    window.finished.connect(finished.append)

    assert window.step() is not None
    assert window.step() is not None
    assert window.is_done
    assert window.step() is None
    assert finished == [2]
    assert window.session.ply == 2


def test_finishes_when_stalled(qapp: object) -> None:
    finished: list[int] = []
    layout = " " * 63 + "k"
    window = DemoWindow(DemoSettings(plies=5, layout=layout, seed=0))
    window.finished.connect(finished.append)

    assert window.step() is not None
    assert window.step() is None
    assert window.is_done
    assert finished == [1]
    assert "black has no moves" in window.status_text


def test_start_and_stop_timer(qapp: object) -> None:
    window = DemoWindow(DemoSettings(plies=3, seed=2, step_interval_ms=10))
    window.start()
    assert window.is_running
    window.stop()
    assert not window.is_running


def test_start_with_zero_plies_finishes(qapp: object) -> None:
    window = DemoWindow(DemoSettings(plies=0, first_to_move=Color.BLACK))
    window.start()
    assert window.is_done
    assert not window.is_running
