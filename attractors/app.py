import logging
import sys

from PyQt5.Qt import QApplication, QDesktopWidget
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QLabel, QProgressBar, QWidget

from .config import configFromArgv, logLevel
from .core import Attractor
from .errors import ConfigurationError
from .engine import Outcome
from .logging_config import setup_logging
from .ui import AttractorImage, vStack, hStack

log = logging.getLogger(__name__)

OUTCOME_MESSAGES = {
    Outcome.COMPLETED: "Done",
    Outcome.STOPPED: "Stopped",
    Outcome.ESCAPED: "Infinite attractor",
    Outcome.CONVERGED: "Point attractor",
    Outcome.FAULTED: "Iteration function failed",
}


class AttractorApp(QWidget):
    """
    Minimal explorer window: the attractor image and a status line.

    Left click centres on the point under the cursor and zooms in by 2, right
    click zooms out by 2, Escape stops the current run.
    """

    def __init__(self, title="Strange attractors", argv=None):
        argv = sys.argv if argv is None else argv
        self.app = QApplication.instance() or QApplication(argv)
        super().__init__(parent=None)
        self.setWindowTitle(title)

        self.config = configFromArgv(argv)
        setup_logging(logLevel(self.config), self.config["logFile"])
        log.info("Loaded configuration: %s", self.config)

        self.attractor = self._makeAttractor(self.config)

        self.image = AttractorImage(self.config["imageShape"])
        self.lyapunovLabel = QLabel()
        self.statusLabel = QLabel()
        self.positionLabel = QLabel()
        self.progressBar = QProgressBar()
        self.progressBar.setRange(0, 1000)

        self.attractor.frameReady.connect(self.image.setBuffer)
        self.attractor.runProgress.connect(self._onProgress)
        self.attractor.runStarted.connect(lambda generation: self.statusLabel.setText("Running"))
        self.attractor.runStopped.connect(self._onRunStopped)
        self.attractor.iterationFault.connect(self._onIterationFault)
        self.image.pixelClicked.connect(self._onPixelClicked)
        self.image.pixelHovered.connect(self._onPixelHovered)

        self.setLayout(vStack(
            self.image,
            hStack(self.statusLabel, self.lyapunovLabel, self.positionLabel, cm=(4, 4, 4, 4)),
            self.progressBar,
        ))

    @staticmethod
    def _makeAttractor(config):
        attractor = Attractor(
            imageShape=config["imageShape"],
            iterations=config["iterations"],
            sliceSize=config["sliceSize"],
        )
        system = config["system"]
        try:
            attractor.selectSystem(attractor.catalog().indexOf(system) if isinstance(system, str) else system)
            attractor.selectParameterSet(config["parameterSet"])
            attractor.selectColourMode(config["colourMode"])
        except (KeyError, IndexError) as e:
            raise ConfigurationError("Invalid selection in configuration: {}".format(e)) from e
        attractor.setCentre(*config["centre"])
        if config["zoom"] is not None:
            attractor.setZoom(config["zoom"])
        return attractor

    def redraw(self):
        self.attractor.startRun()

    def _onProgress(self, fraction):
        self.progressBar.setValue(int(fraction * 1000))
        self._showLyapunov(self.attractor.getLyapunovEstimate())

    def _onRunStopped(self, result):
        self.statusLabel.setText(OUTCOME_MESSAGES[result.outcome])
        self._showLyapunov(result.lyapunovExponent)

    def _onIterationFault(self, point, error):
        message = "Iteration function failed at ({}, {})".format(*point)
        if error is not None:
            message += ": {}".format(error)
        self.statusLabel.setToolTip(message)

    def _showLyapunov(self, value):
        self.lyapunovLabel.setText("λ = {:.5f}".format(value) if value is not None else "λ = ?")

    def _onPixelClicked(self, col, row, left, right):
        if left:
            self.attractor.centreOnPixel(col, row, 2)
        elif right:
            self.attractor.zoomOutBy(2)
        else:
            return
        self.redraw()

    def _onPixelHovered(self, col, row):
        x, y = self.attractor.pixelToPoint(col, row)
        self.positionLabel.setText("x = {:.6f}  |  y = {:.6f}".format(x, y))

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.attractor.stopRun()
        else:
            super().keyPressEvent(event)

    def run(self):
        screen = QDesktopWidget().screenGeometry()
        self.show()
        x = ((screen.width() - self.width()) // 2) if screen.width() > self.width() else 0
        y = ((screen.height() - self.height()) // 2) if screen.height() > self.height() else 0
        self.move(x, y)
        self.redraw()
        sys.exit(self.app.exec_())


def main():
    AttractorApp().run()
