"""BoardWidget — paints a :class:`Board` with Unicode piece glyphs."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, QSize, Qt
from PyQt6.QtGui import QBrush, QFont, QPainter, QPainterPath, QPaintEvent, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from chessgen.core.board import Board
from chessgen.core.enums import Color
from chessgen.core.move import Move
from chessgen.core.piece import Piece
from chessgen.core.types import BOARD_SIZE, Square
from chessgen.ui.theme import BoardTheme


class BoardWidget(QWidget):
    """Read-only board display that scales to fit the widget.

    Rank 0 is drawn at the top, matching the layout order.
    """

    DEFAULT_TILE = 64  # px per square at the preferred size

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board = Board()
        self._last_move: Move | None = None
        self._show_coordinates = True

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(BOARD_SIZE * 24, BOARD_SIZE * 24)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def last_move(self) -> Move | None:
        return self._last_move

    def set_board(self, board: Board) -> None:
        """Display a snapshot of *board*."""
        self._board = board.copy()
        self.update()

    def set_last_move(self, move: Move | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._last_move = move
        self.update()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self.update()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        self.update()

    def sizeHint(self) -> QSize:
        side = BOARD_SIZE * self.DEFAULT_TILE
        return QSize(side, side)

    # ── Geometry ─────────────────────────────────────────────────────────

    def tile_size(self) -> float:
        return min(self.width(), self.height()) / BOARD_SIZE

    def _origin(self) -> QPointF:
        side = self.tile_size() * BOARD_SIZE
        return QPointF((self.width() - side) / 2, (self.height() - side) / 2)

    def square_rect(self, sq: Square) -> QRectF:
        t = self.tile_size()
        origin = self._origin()
        return QRectF(origin.x() + sq.file * t, origin.y() + sq.rank * t, t, t)

    def square_at(self, pos: QPointF) -> Square | None:
        """Square under widget coordinate *pos*, or ``None`` outside the board."""
        t = self.tile_size()
        if t <= 0:
            return None
        origin = self._origin()
        file = int((pos.x() - origin.x()) // t)
        rank = int((pos.y() - origin.y()) // t)
        sq = Square(file, rank)
        return sq if sq.on_board else None

    # ── Painting ─────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent | None) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            self._paint_squares(painter)
            self._paint_last_move(painter)
            self._paint_pieces(painter)
            if self._show_coordinates:
                self._paint_coordinates(painter)
        finally:
            painter.end()

    def _is_dark(self, sq: Square) -> bool:
        return (sq.file + sq.rank) % 2 == 1

    def _paint_squares(self, painter: QPainter) -> None:
        painter.setPen(Qt.PenStyle.NoPen)
        for rank in range(BOARD_SIZE):
            for file in range(BOARD_SIZE):
                sq = Square(file, rank)
                color = (
                    self._theme.dark_square if self._is_dark(sq) else self._theme.light_square
                )
                painter.fillRect(self.square_rect(sq), color)

    def _paint_last_move(self, painter: QPainter) -> None:
        move = self._last_move
        if move is None:
            return
        painter.fillRect(self.square_rect(move.origin), self._theme.last_move_from)
        painter.fillRect(self.square_rect(move.destination), self._theme.last_move_to)

    def _paint_pieces(self, painter: QPainter) -> None:
        t = self.tile_size()
        font = QFont()
        font.setPixelSize(max(1, int(t * 0.75)))
        outline = QPen(self._theme.black_piece)
        outline.setWidthF(max(1.0, t / 40))

        for sq, piece in self._board.occupied():
            # Solid glyphs for both sides; the fill colour tells them apart.
            glyph = Piece(Color.BLACK, piece.piece_type).symbol
            rect = self.square_rect(sq)
            path = QPainterPath()
            path.addText(0, 0, font, glyph)
            bounds = path.boundingRect()
            path.translate(
                rect.center().x() - bounds.center().x(),
                rect.center().y() - bounds.center().y(),
            )
            fill = (
                self._theme.white_piece
                if piece.color == Color.WHITE
                else self._theme.black_piece
            )
            painter.fillPath(path, QBrush(fill))
            painter.strokePath(path, outline)

    def _paint_coordinates(self, painter: QPainter) -> None:
        t = self.tile_size()
        font = QFont()
        font.setPixelSize(max(8, int(t / 6)))
        painter.setFont(font)
        for rank in range(BOARD_SIZE):
            for file in range(BOARD_SIZE):
                sq = Square(file, rank)
                if file != 0 and rank != BOARD_SIZE - 1:
                    continue
                dark = self._is_dark(sq)
                painter.setPen(self._theme.coord_light if dark else self._theme.coord_dark)
                rect = self.square_rect(sq).adjusted(2, 1, -3, -2)
                # Rank numbers (left edge)
                if file == 0:
                    painter.drawText(
                        rect,
                        Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
                        str(BOARD_SIZE - rank),
                    )
                # File letters (bottom edge)
                if rank == BOARD_SIZE - 1:
                    painter.drawText(
                        rect,
                        Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignBottom,
                        chr(ord("a") + file),
                    )
