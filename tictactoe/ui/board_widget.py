from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_CELL_COLOR = QColor("#4a6b3a")

class BoardWidget(QWidget):
    """
    custom widget to draw and click on an n x n board
    """
    cell_clicked = Signal(int)  # emits row-major cell index on click

    def __init__(self, game_state, parent=None):
        super().__init__(parent)
        self.game_state = game_state  # read-only reference, never mutated here
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centred in widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def paintEvent(self, event):
        """
        draw grid, highlight winning cells, then X/O marks
        """
        board = self.game_state.current_squares
        size = self.game_state.board_size
        info = self.game_state.winner_info
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / size
            # winning line behind the marks
            for i in (info.line if info else ()):
                r, c = divmod(i, size)
                painter.fillRect(QRectF(offset_x + c*cell_size, offset_y + r*cell_size,
                                        cell_size, cell_size), WIN_CELL_COLOR)
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, size):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # thinner strokes on big boards
            stroke = max(1, min(4, int(cell_size / 15)))
            for i, sym in enumerate(board):
                if not sym: continue
                r, c = divmod(i, size)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if sym == 'X':
                    painter.setPen(QPen(X_COLOR, stroke))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(O_COLOR, stroke))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        map left-click coords to a cell index and emit
        """
        if event.button() != Qt.LeftButton:
            return
        ox, oy, side = self._geometry()
        x, y = event.position().x(), event.position().y()
        # only inside grid
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return
        size = self.game_state.board_size
        cell = side / size
        if cell <= 0: return
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, size-1)); col = max(0, min(col, size-1))
        self.cell_clicked.emit(row*size + col)  # game state decides if it counts
