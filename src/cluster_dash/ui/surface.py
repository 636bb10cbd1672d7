"""QPainter-backed rendering surface."""

from __future__ import annotations

from PySide6.QtCore import QRect, Qt
from PySide6.QtGui import QColor, QFont, QImage, QPainter

from cluster_dash.models.display import FONT_PX, SCREEN_H, SCREEN_W, Color, Rect


def to_qcolor(color: Color) -> QColor:
    """Convert a hue/level color to RGB."""
    if color.hue is None:
        return QColor(color.level, color.level, color.level)
    return QColor.fromHsv(color.hue % 360, 255, color.level)


class QImageSurface:
    """
    Framebuffer backed by a QImage.

    Pixel coordinates are logical screen pixels; the widget that shows the
    image scales it up.
    """

    def __init__(self, width: int = SCREEN_W, height: int = SCREEN_H):
        self.image = QImage(width, height, QImage.Format_RGB32)
        self.image.fill(QColor(0, 0, 0))

    def fill_region(self, rect: Rect, color: Color) -> None:
        p = QPainter(self.image)
        try:
            p.fillRect(rect.x, rect.y, rect.w, rect.h, to_qcolor(color))
        finally:
            p.end()

    def draw_bitmap(self, x: int, y: int, bitmap: bytes, w: int, h: int, color: Color) -> None:
        rgb = to_qcolor(color).rgb()
        bytes_per_row = (w + 7) // 8
        for row in range(h):
            for col in range(w):
                byte = bitmap[row * bytes_per_row + col // 8]
                if byte & (0x80 >> (col % 8)):
                    px, py = x + col, y + row
                    if self.image.valid(px, py):
                        self.image.setPixel(px, py, rgb)

    def draw_text(self, x: int, y: int, text: str, color: Color, scale: int = 1) -> None:
        p = QPainter(self.image)
        try:
            font = QFont("Monospace")
            font.setStyleHint(QFont.TypeWriter)
            font.setPixelSize(FONT_PX * scale)
            p.setFont(font)
            p.setPen(to_qcolor(color))
            # y is the top of the text cell, like the composite library cursor
            cell = QRect(x, y, self.image.width() - x, FONT_PX * scale + 2)
            p.drawText(cell, Qt.AlignLeft | Qt.AlignTop, text)
        finally:
            p.end()
