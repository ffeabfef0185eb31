"""Graphics items for maze cells, the goal and the player token."""

import math

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen
from PySide6.QtWidgets import QGraphicsItem, QGraphicsRectItem

from ..domain.types import Cell


class CellTile(QGraphicsRectItem):
    """Graphics item representing a single maze cell."""

    # Outer fill and inner texture per cell state
    COLORS = {
        Cell.WALL: (QColor("#8B4513"), QColor("#A0522D")),  # Saddle brown / sienna
        Cell.PATH: (QColor("#90EE90"), QColor("#98FB98")),  # Light green / pale green
    }
    INSETS = {Cell.WALL: 2, Cell.PATH: 1}

    def __init__(self, x: int, y: int, size: float, cell: Cell):
        super().__init__(0, 0, size, size)
        self.grid_x = x
        self.grid_y = y
        self.size = size
        self.cell = cell

        self.setPos(x * size, y * size)
        self.setPen(QPen(Qt.NoPen))
        self.update_appearance()

    def set_cell(self, cell: Cell):
        if cell != self.cell:
            self.cell = cell
            self.update_appearance()

    def update_appearance(self):
        """Update the tile fill based on cell state."""
        outer, _ = self.COLORS[self.cell]
        self.setBrush(QBrush(outer))
        self.update()

    def paint(self, painter: QPainter, option, widget=None):
        super().paint(painter, option, widget)
        _, inner = self.COLORS[self.cell]
        inset = self.INSETS[self.cell]
        painter.fillRect(
            QRectF(inset, inset, self.size - 2 * inset, self.size - 2 * inset), inner
        )


class GoalTile(QGraphicsRectItem):
    """Gold goal cell with a spiral marker."""

    def __init__(self, size: float):
        super().__init__(0, 0, size, size)
        self.size = size
        self.setBrush(QBrush(QColor("#FFD700")))
        self.setPen(QPen(Qt.NoPen))
        self.setZValue(1)

    def set_cell(self, x: int, y: int):
        self.setPos(x * self.size, y * self.size)

    def paint(self, painter: QPainter, option, widget=None):
        super().paint(painter, option, widget)
        painter.fillRect(QRectF(3, 3, self.size - 6, self.size - 6), QColor("#FFA500"))

        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(QPen(QColor("#8B4513"), 3))
        center = self.size / 2
        previous = None
        for i in range(20):
            angle = i * 0.3
            radius = i * 0.8 * self.size / 40
            point = QPointF(center + radius * math.cos(angle), center + radius * math.sin(angle))
            if previous is not None:
                painter.drawLine(previous, point)
            previous = point


class PlayerToken(QGraphicsItem):
    """The kiwi the player steers through the maze."""

    GLYPH = "\U0001F95D"  # kiwi fruit

    def __init__(self, size: float):
        super().__init__()
        self.size = size
        self.setZValue(2)

    def set_cell(self, x: int, y: int):
        self.setPos(x * self.size, y * self.size)

    def boundingRect(self) -> QRectF:
        return QRectF(0, 0, self.size, self.size)

    def paint(self, painter: QPainter, option, widget=None):
        font = QFont("Arial")
        font.setPixelSize(max(8, int(self.size - 8)))
        painter.setFont(font)

        # Shadow first so the glyph sits on top
        painter.setPen(QColor(0, 0, 0, 77))
        painter.drawText(self.boundingRect().translated(1, 1), Qt.AlignCenter, self.GLYPH)
        painter.setPen(Qt.black)
        painter.drawText(self.boundingRect(), Qt.AlignCenter, self.GLYPH)

