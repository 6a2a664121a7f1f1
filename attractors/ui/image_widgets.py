import numpy

from PyQt5 import QtCore
from PyQt5.Qt import QImage, QPixmap, pyqtSignal as Signal
from PyQt5.QtWidgets import QLabel

from ..buffer import PixelBuffer


def toImage(data: numpy.ndarray):
    height, width = data.shape[:2]
    # QImage does not own the memory, copy so the buffer can keep changing
    return QImage(data.data, width, height, 4 * width, QImage.Format_RGBA8888).copy()


def toPixmap(buffer: PixelBuffer):
    pixmap = QPixmap()
    # noinspection PyArgumentList
    pixmap.convertFromImage(toImage(buffer.data))
    return pixmap


def mouseButtonsState(mouseEvent):
    return bool(QtCore.Qt.LeftButton & mouseEvent.buttons()), bool(QtCore.Qt.RightButton & mouseEvent.buttons())


class AttractorImage(QLabel):
    """
    Display surface for a PixelBuffer. Reports clicks and hovering in pixel
    coordinates; converting them into plane coordinates is up to the owner.
    """

    pixelClicked = Signal(int, int, bool, bool)

    pixelHovered = Signal(int, int)

    def __init__(self, shape: tuple = (512, 512), background=QtCore.Qt.white):
        super().__init__()
        self.setMouseTracking(True)
        self.setFixedSize(*shape)
        self.setAlignment(QtCore.Qt.AlignLeft | QtCore.Qt.AlignTop)
        self.setAutoFillBackground(True)
        palette = self.palette()
        palette.setColor(self.backgroundRole(), background)
        self.setPalette(palette)

    def setBuffer(self, buffer: PixelBuffer):
        if (self.width(), self.height()) != buffer.shape():
            self.setFixedSize(*buffer.shape())
        self.setPixmap(toPixmap(buffer))

    def mousePressEvent(self, event):
        super().mousePressEvent(event)
        left, right = mouseButtonsState(event)
        self.pixelClicked.emit(event.x(), event.y(), left, right)

    def mouseMoveEvent(self, event):
        super().mouseMoveEvent(event)
        self.pixelHovered.emit(event.x(), event.y())
