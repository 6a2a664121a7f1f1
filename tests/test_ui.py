import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtWidgets import QApplication

from attractors.app import AttractorApp
from attractors.buffer import PixelBuffer
from attractors.config import normalizeConfig
from attractors.errors import ConfigurationError
from attractors.ui import AttractorImage, toPixmap
from attractors.ui.image_widgets import toImage


def application():
    return QApplication.instance() or QApplication([])


class TestDisplaySurface(unittest.TestCase):

    def setUp(self):
        self.app = application()

    def test_to_image(self):
        buffer = PixelBuffer(5, 3)
        buffer.setPixel(1, 2, 255, 0, 0, 255)
        image = toImage(buffer.data)
        assert (image.width(), image.height()) == (5, 3)
        color = image.pixelColor(1, 2)
        assert (color.red(), color.green(), color.blue(), color.alpha()) == (255, 0, 0, 255)
        assert image.pixelColor(0, 0).alpha() == 0

    def test_set_buffer(self):
        widget = AttractorImage((16, 8))
        buffer = PixelBuffer(32, 24)
        buffer.setPixel(0, 0, 0, 0, 0, 255)
        widget.setBuffer(buffer)
        assert (widget.width(), widget.height()) == (32, 24)
        assert widget.pixmap().width() == 32
        assert toPixmap(buffer).height() == 24


class TestAttractorApp(unittest.TestCase):

    def setUp(self):
        self.app = application()

    def test_build_from_default_config(self):
        window = AttractorApp(argv=["attractors"])
        attractor = window.attractor
        assert attractor.getSystem().name == "Peter de Jong"
        assert attractor.buffer().shape() == (512, 512)

        window._onPixelClicked(256, 256, False, True)
        assert attractor.getZoom() == 50
        assert attractor.isRunning()
        window._onPixelClicked(0, 0, True, False)
        assert attractor.getZoom() == 100
        assert attractor.generation() == 2
        attractor.stopRun()
        assert not attractor.isRunning()
        window._onPixelHovered(10, 10)
        assert window.positionLabel.text().startswith("x = ")

    def test_unknown_selection_in_config(self):
        for raw in [{"system": "Lorenz"}, {"system": 42}, {"parameterSet": 99}, {"colourMode": 7}]:
            with self.assertRaises(ConfigurationError, msg=str(raw)):
                AttractorApp._makeAttractor(normalizeConfig(raw))
