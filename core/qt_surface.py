from __future__ import annotations

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter, QPen

from models.marker import Color
from utils.geometry import Rectangle


def to_qcolor(color: Color) -> QColor:
    return QColor(color.red, color.green, color.blue, color.alpha)


def to_qrectf(rect: Rectangle) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


class QPainterSurface:
    """Paint surface that forwards marker requests to an active QPainter."""

    def __init__(self, painter: QPainter):
        self._painter = painter

    def fill_rectangle(self, rect: Rectangle, color: Color) -> None:
        self._painter.fillRect(to_qrectf(rect), QBrush(to_qcolor(color)))

    def stroke_rectangle(self, rect: Rectangle, color: Color, width: float) -> None:
        self._painter.save()
        try:
            self._painter.setPen(QPen(to_qcolor(color), width))
            self._painter.setBrush(Qt.BrushStyle.NoBrush)
            self._painter.drawRect(to_qrectf(rect))
        finally:
            self._painter.restore()
