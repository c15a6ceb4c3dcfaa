"""Core domain layer — pseudo-legal move generation with zero external dependencies.

Quick start::

    from chessgen.core import Board, Color, apply_move, generate_moves

    board = Board.initial()
    moves = generate_moves(board, Color.WHITE)
    apply_move(board, moves[0])
"""

from chessgen.core.applicator import apply_move
from chessgen.core.board import Board
from chessgen.core.enums import Color, MoveKind, PieceType
from chessgen.core.errors import ChessError, OffBoardError, UnsupportedMoveError
from chessgen.core.geometry import (
    forward_direction,
    home_rank,
    is_empty,
    is_empty_or_enemy,
    is_enemy,
    on_board,
)
from chessgen.core.move import Move
from chessgen.core.move_generator import MoveGenerator, generate_moves
from chessgen.core.notation import (
    STANDARD_LAYOUT,
    board_from_layout,
    board_to_layout,
    render_board,
)
from chessgen.core.piece import Piece
from chessgen.core.rules import MOVE_RULES, ray_walk, rule_for
from chessgen.core.types import Square, all_squares, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "MoveKind",
    "PieceType",
    # Errors
    "ChessError",
    "OffBoardError",
    "UnsupportedMoveError",
    # Types / helpers
    "Square",
    "all_squares",
    "parse_square",
    "square_name",
    # Geometry
    "forward_direction",
    "home_rank",
    "is_empty",
    "is_empty_or_enemy",
    "is_enemy",
    "on_board",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    # Rules / generation / application
    "MOVE_RULES",
    "apply_move",
    "generate_moves",
    "ray_walk",
    "rule_for",
    # Notation
    "STANDARD_LAYOUT",
    "board_from_layout",
    "board_to_layout",
    "render_board",
]
