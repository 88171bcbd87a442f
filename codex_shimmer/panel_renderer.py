"""
Panel background painting - rounded glass look behind the shimmer text
"""
from PyQt6.QtGui import QColor, QPainter, QPainterPath, QPen
from PyQt6.QtCore import QRectF


BG_COLOR = QColor(23, 28, 40, 180)  # Semi-transparent background
BORDER_TOP_COLOR = QColor(255, 255, 255, 50)  # Lighter top edge
BORDER_COLOR = QColor(255, 255, 255, 25)  # Subtle border


def paint_panel(widget, painter):
    """Draws the panel background; the text is painted by its child widget"""
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    rect = widget.rect()
    radius = widget.radius

    path = QPainterPath()
    path.addRoundedRect(QRectF(rect), radius, radius)
    painter.fillPath(path, BG_COLOR)

    # Top edge highlight
    painter.setPen(QPen(BORDER_TOP_COLOR, 1))
    painter.drawLine(radius, 0, rect.width() - radius, 0)

    painter.setPen(QPen(BORDER_COLOR, 1))
    painter.drawRoundedRect(QRectF(rect.adjusted(0, 0, -1, -1)), radius, radius)
