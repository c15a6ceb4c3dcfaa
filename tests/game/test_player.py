"""Tests for Player implementations."""

from chessgen.core.board import Board
from chessgen.core.enums import Color
from chessgen.core.move_generator import generate_moves
from chessgen.game.player import CallbackPlayer, RandomPlayer


class TestRandomPlayer:
    def test_properties(self) -> None:
        p = RandomPlayer(Color.BLACK, "Dice")
        assert p.color == Color.BLACK
        assert p.name == "Dice"

    def test_default_name(self) -> None:
        p = RandomPlayer(Color.WHITE)
        assert "white" in p.name.lower()

    def test_empty_moves_returns_none(self) -> None:
        p = RandomPlayer(Color.WHITE, seed=1)
        assert p.choose_move(Board(), []) is None

    def test_picks_generated_move(self) -> None:
        board = Board.initial()
        moves = generate_moves(board, Color.WHITE)
        p = RandomPlayer(Color.WHITE, seed=3)
        for _ in range(20):
            assert p.choose_move(board, moves) in moves

    def test_seed_is_reproducible(self) -> None:
        board = Board.initial()
        moves = generate_moves(board, Color.WHITE)
        a = RandomPlayer(Color.WHITE, seed=42)
        b = RandomPlayer(Color.WHITE, seed=42)
        assert [a.choose_move(board, moves) for _ in range(10)] == [
            b.choose_move(board, moves) for _ in range(10)
        ]

    def test_does_not_mutate_board(self) -> None:
        board = Board.initial()
        RandomPlayer(Color.WHITE, seed=0).choose_move(
            board, generate_moves(board, Color.WHITE)
        )
        assert board == Board.initial()


class TestCallbackPlayer:
    def test_properties(self) -> None:
        p = CallbackPlayer(Color.WHITE, lambda board, moves: None, name="Script")
        assert p.color == Color.WHITE
        assert p.name == "Script"

    def test_choose_calls_callback(self) -> None:
        calls = []

        def _first(board, moves):
            calls.append((board, list(moves)))
            return moves[0] if moves else None

        board = Board.initial()
        moves = generate_moves(board, Color.WHITE)
        p = CallbackPlayer(Color.WHITE, _first)
        assert p.choose_move(board, moves) == moves[0]
        assert len(calls) == 1
        assert calls[0][0] is board
