"""Programmatic icon rendering for the player panel buttons.

Generates QIcon instances with QPainter; no asset files required.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QIcon, QPainter, QPainterPath, QPen, QPixmap

from cornerplayer.ui.styles.tokens import COLORS_DARK

ICON_NAMES = {"close", "playlist"}


def render_icon(name: str, size: int = 32, color: str = COLORS_DARK["ICON"]) -> QIcon:
    """Render a panel button icon.

    Args:
        name: One of "close", "playlist"
        size: Icon size in pixels
        color: Stroke color

    Raises:
        ValueError: If name is not recognized
    """
    if name not in ICON_NAMES:
        raise ValueError(f"Invalid icon '{name}'. Must be one of {ICON_NAMES}")

    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    pen = QPen(QColor(color), max(1.5, size / 16))
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    painter.setPen(pen)
    painter.setBrush(Qt.BrushStyle.NoBrush)

    if name == "close":
        _draw_close(painter, size)
    else:
        _draw_playlist(painter, size)

    painter.end()
    return QIcon(pixmap)


def _draw_close(painter: QPainter, size: int) -> None:
    """X mark."""
    low = size * 0.25
    high = size * 0.75
    path = QPainterPath()
    path.moveTo(low, low)
    path.lineTo(high, high)
    path.moveTo(high, low)
    path.lineTo(low, high)
    painter.drawPath(path)


def _draw_playlist(painter: QPainter, size: int) -> None:
    """Three list lines of decreasing length next to a music note."""
    scale = size / 32.0
    path = QPainterPath()
    # list lines
    path.moveTo(4 * scale, 8 * scale)
    path.lineTo(27 * scale, 8 * scale)
    path.moveTo(4 * scale, 16 * scale)
    path.lineTo(20 * scale, 16 * scale)
    path.moveTo(4 * scale, 24 * scale)
    path.lineTo(14 * scale, 24 * scale)
    # note stem and flag
    path.moveTo(24 * scale, 25 * scale)
    path.lineTo(24 * scale, 14 * scale)
    path.lineTo(29 * scale, 15.5 * scale)
    painter.drawPath(path)
    painter.drawEllipse(int(19 * scale), int(23 * scale), int(5 * scale), int(5 * scale))
