from PySide6.QtGui import QIcon, QPixmap, QPainter, QColor, QPainterPath
from PySide6.QtCore import Qt

def create_app_icon(color_hex="#3B82F6"):
    """
    Generates the window icon: a droplet filled with the current color.
    """
    size = 64
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)

    # Outer ring
    painter.setBrush(QColor("#ffffff"))
    painter.setPen(Qt.NoPen)
    painter.drawEllipse(4, 4, 56, 56)

    painter.setBrush(QColor("#121212"))
    painter.drawEllipse(8, 8, 48, 48)

    # Droplet in the current color
    path = QPainterPath()
    path.moveTo(32, 12)
    path.cubicTo(50, 18, 50, 44, 32, 52)
    path.cubicTo(14, 44, 14, 18, 32, 12)

    painter.setBrush(QColor(color_hex))
    painter.drawPath(path)

    painter.end()

    return QIcon(pixmap)
