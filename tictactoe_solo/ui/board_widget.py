from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import LINES, Mark, empty_board

GRID = 3
X_COLOR = QColor("#6EE7B7")
O_COLOR = QColor("#F59E0B")
WIN_CELL_COLOR = QColor("#38544A")
WIN_LINE_COLOR = QColor("#FBBF24")
LINES_BY_ID = {line.id: line for line in LINES}


class BoardWidget(QWidget):
    """
    custom widget to draw and click on the tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits row-major index on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._board = empty_board()
        self._winning_line = None   # line id from the last session event
        self._accept_clicks = True  # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def show_board(self, board, winning_line=None):
        # snapshot from the session, repaint
        self._board = board
        self._winning_line = winning_line
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def _cell_center(self, index, ox, oy, cell):
        r, c = divmod(index, GRID)
        return QPointF(ox + c * cell + cell / 2, oy + r * cell + cell / 2)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        ox, oy, side = self._geometry()
        painter.fillRect(self.rect(), QColor("#1A2E28"))
        cell = side / GRID
        line = LINES_BY_ID.get(self._winning_line)
        # tint winning cells first so marks sit on top
        if line:
            for i in line.cells:
                r, c = divmod(i, GRID)
                painter.fillRect(QRectF(ox + c * cell, oy + r * cell, cell, cell), WIN_CELL_COLOR)
        # grid lines
        painter.setPen(QPen(QColor("#2A4039"), 2))
        for i in range(1, GRID):
            x = ox + i * cell
            painter.drawLine(QPointF(x, oy), QPointF(x, oy + side))
            y = oy + i * cell
            painter.drawLine(QPointF(ox, y), QPointF(ox + side, y))
        # marks
        rad = cell / 2 * 0.6
        for i, mark in enumerate(self._board):
            if mark is None:
                continue
            center = self._cell_center(i, ox, oy, cell)
            cx, cy = center.x(), center.y()
            if mark is Mark.X:
                painter.setPen(QPen(X_COLOR, 6, Qt.SolidLine, Qt.RoundCap))
                painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
            else:
                painter.setPen(QPen(O_COLOR, 6))
                painter.drawEllipse(center, rad, rad)
        # stroke through the winning triple
        if line:
            painter.setPen(QPen(WIN_LINE_COLOR, 6, Qt.SolidLine, Qt.RoundCap))
            first, _, last = line.cells
            painter.drawLine(self._cell_center(first, ox, oy, cell),
                             self._cell_center(last, ox, oy, cell))
        painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board index and emit
        """
        if not self._accept_clicks:
            return
        ox, oy, side = self._geometry()
        x, y = event.position().x(), event.position().y()
        # only inside grid
        if not (ox <= x < ox + side and oy <= y < oy + side):
            return
        cell = side / GRID
        if cell <= 0:
            return
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, GRID - 1)); col = max(0, min(col, GRID - 1))
        self.cell_clicked.emit(row * GRID + col)  # notify main window
