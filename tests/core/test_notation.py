"""Tests for the layout codec and text rendering."""

import pytest

from chessgen.core.applicator import apply_move
from chessgen.core.board import Board
from chessgen.core.enums import Color, PieceType
from chessgen.core.move import Move
from chessgen.core.move_generator import generate_moves
from chessgen.core.notation import (
    STANDARD_LAYOUT,
    board_from_layout,
    board_to_layout,
    render_board,
)
from chessgen.core.piece import Piece
from chessgen.core.types import Square
from chessgen.game.player import RandomPlayer


class TestLayoutParsing:
    def test_standard_layout_is_initial_board(self) -> None:
        assert board_from_layout(STANDARD_LAYOUT) == Board.initial()

    def test_case_selects_color(self) -> None:
        layout = "K" + " " * 62 + "k"
        board = board_from_layout(layout)
        assert board[Square(0, 0)] == Piece(Color.BLACK, PieceType.KING)
        assert board[Square(7, 7)] == Piece(Color.WHITE, PieceType.KING)

    def test_unknown_characters_are_empty(self) -> None:
        board = board_from_layout(".x-#0 " * 10 + "abcd")
        assert list(board.occupied()) == [(Square(5, 7), Piece.from_char("b"))]

    @pytest.mark.parametrize("length", [0, 63, 65])
    def test_wrong_length(self, length: int) -> None:
        with pytest.raises(ValueError, match="64 characters"):
            board_from_layout(" " * length)


class TestLayoutSerialization:
    def test_initial(self) -> None:
        assert board_to_layout(Board.initial()) == STANDARD_LAYOUT

    def test_empty(self) -> None:
        assert board_to_layout(Board()) == " " * 64

    def test_roundtrip_after_random_play(self) -> None:
        board = Board.initial()
        color = Color.WHITE
        player = RandomPlayer(color, seed=7)
        for _ in range(40):
            move = player.choose_move(board, generate_moves(board, color))
            if move is None:
                break
            apply_move(board, move)
            color = color.opposite
            assert board_from_layout(board_to_layout(board)) == board


class TestRender:
    def test_header_and_labels(self) -> None:
        lines = render_board(Board.initial()).splitlines()
        assert lines[0] == "   A B C D E F G H"
        assert len(lines) == 9
        assert lines[1].startswith(" 8 ")
        assert lines[8].startswith(" 1 ")

    def test_symbols(self) -> None:
        lines = render_board(Board.initial()).splitlines()
        assert lines[1] == " 8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜"
        assert lines[8] == " 1 ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖"

    def test_dark_squares_marked(self) -> None:
        lines = render_board(Board()).splitlines()
        assert lines[1] == " 8   ■   ■   ■   ■"
        assert lines[2] == " 7 ■   ■   ■   ■  "

    def test_reflects_moves(self) -> None:
        board = Board.initial()
        apply_move(board, Move(Square(4, 6), Square(4, 4)))
        lines = render_board(board).splitlines()
        # Cells start at column 3, two columns per file.
        assert lines[5][3 + 2 * 4] == "♙"
        assert lines[7][3 + 2 * 4] == " "
