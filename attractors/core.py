import logging

from PyQt5.QtCore import QObject, pyqtSignal as Signal

from .buffer import PixelBuffer
from .colours import COLOUR_MODES
from .engine import RunSnapshot, Simulation, RunResult
from .scheduler import SliceScheduler, SLICE_SIZE, postToEventLoop
from .systems import SystemCatalog
from .validation import checkIterationFunction, checkParameters
from .viewport import Viewport

log = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 100000


class Attractor(QObject):
    """
    Control surface of the explorer: holds the selection, the viewport and the
    pixel buffer, and starts/stops runs.

    Everything set here takes effect on the next startRun(); a run in progress
    keeps using what was captured when it started.
    """

    runStarted = Signal(int)

    runProgress = Signal(float)

    runStopped = Signal(object)

    iterationFault = Signal(object, object)

    frameReady = Signal(object)

    def __init__(self, imageShape: tuple = (512, 512),
                 catalog: SystemCatalog = None,
                 colourModes=COLOUR_MODES,
                 iterations: int = DEFAULT_ITERATIONS,
                 sliceSize: int = SLICE_SIZE,
                 post=postToEventLoop,
                 parent=None):
        super().__init__(parent)
        self._catalog = catalog if catalog is not None else SystemCatalog()
        self._colourModes = tuple(colourModes)
        self._systemIndex = 0
        self._parameterSetIndex = 0
        self._colourModeIndex = 0
        self._iterations = 0
        self.setIterationBudget(iterations)
        width, height = imageShape
        self._viewport = Viewport((0.0, 0.0), self.getSystem().initialZoom, width, height)
        self._buffer = PixelBuffer(width, height)
        self._lastResult = None

        self._scheduler = SliceScheduler(sliceSize=sliceSize, post=post, parent=self)
        self._scheduler.runStopped.connect(self._onRunStopped)
        self._scheduler.runStarted.connect(self.runStarted)
        self._scheduler.runProgress.connect(self.runProgress)
        self._scheduler.runStopped.connect(self.runStopped)
        self._scheduler.iterationFault.connect(self.iterationFault)
        self._scheduler.frameReady.connect(self.frameReady)

    # selection

    def catalog(self) -> SystemCatalog:
        return self._catalog

    def getSystemIndex(self):
        return self._systemIndex

    def selectSystem(self, index):
        system = self._catalog.system(index)
        self._systemIndex = index
        self._parameterSetIndex = 0
        self._viewport = self._viewport.withZoom(system.initialZoom)
        log.debug("Selected system %d (%s)", index, system.name)
        return self

    def getSystem(self):
        return self._catalog.system(self._systemIndex)

    def getParameterSetIndex(self):
        return self._parameterSetIndex

    def selectParameterSet(self, index):
        self._catalog.parameterSet(self._systemIndex, index)
        self._parameterSetIndex = index
        return self

    def getParameterSet(self):
        return self._catalog.parameterSet(self._systemIndex, self._parameterSetIndex)

    def getIterationFunction(self):
        return self.getSystem().iterate

    def setCustomIterate(self, fn):
        self._catalog.setCustomIterate(checkIterationFunction(fn))
        return self

    def setCustomParameters(self, mapping):
        self._catalog.setCustomParameters(self._systemIndex, checkParameters(mapping))
        return self

    def colourModes(self):
        return self._colourModes

    def getColourModeIndex(self):
        return self._colourModeIndex

    def selectColourMode(self, index):
        if not 0 <= index < len(self._colourModes):
            raise IndexError("Colour mode index {} is out of range ({} modes)".format(index, len(self._colourModes)))
        self._colourModeIndex = index
        return self

    # viewport

    def getViewport(self) -> Viewport:
        return self._viewport

    def setViewport(self, centre, zoom, pixelWidth, pixelHeight):
        viewport = Viewport(centre, zoom, pixelWidth, pixelHeight)
        if viewport.shape() != self._buffer.shape():
            # a running simulation still maps points into the old dimensions
            self._scheduler.stop()
        self._viewport = viewport
        if self._buffer.resize(pixelWidth, pixelHeight):
            log.debug("Pixel buffer reallocated to %dx%d", pixelWidth, pixelHeight)
        return self

    def getCentre(self):
        return tuple(self._viewport.centre)

    def setCentre(self, x, y):
        self._viewport = self._viewport.withCentre(x, y)
        return self

    def getZoom(self):
        return self._viewport.zoom

    def setZoom(self, zoom):
        self._viewport = self._viewport.withZoom(zoom)
        return self

    def zoomBy(self, factor):
        self._viewport = self._viewport.zoomBy(factor)
        return self

    def zoomOutBy(self, factor):
        self._viewport = self._viewport.zoomOutBy(factor)
        return self

    def pixelToPoint(self, col, row):
        return self._viewport.colToX(col), self._viewport.rowToY(row)

    def centreOnPixel(self, col, row, factor=2.0):
        self.setCentre(*self.pixelToPoint(col, row))
        return self.zoomBy(factor)

    def getIterationBudget(self):
        return self._iterations

    def setIterationBudget(self, n):
        if isinstance(n, bool) or int(n) != n or n < 0:
            raise ValueError("Iteration budget should be a non-negative integer, got {}".format(n))
        self._iterations = int(n)
        return self

    # lifecycle

    def snapshot(self) -> RunSnapshot:
        system = self.getSystem()
        return RunSnapshot(
            systemName=system.name,
            iterate=system.iterate,
            parameters=self.getParameterSet(),
            initialPoint=system.initialPoint,
            viewport=self._viewport,
            iterationBudget=self._iterations,
            colour=self._colourModes[self._colourModeIndex].getColour,
        )

    def startRun(self):
        snapshot = self.snapshot()
        # invalidate the previous run before its buffer is reused
        self._scheduler.stop()
        self._buffer.clear()
        return self._scheduler.start(Simulation(snapshot, self._buffer))

    def stopRun(self):
        self._scheduler.stop()
        return self

    def isRunning(self):
        return self._scheduler.isRunning()

    def generation(self):
        return self._scheduler.generation()

    def scheduler(self) -> SliceScheduler:
        return self._scheduler

    # readback

    def buffer(self) -> PixelBuffer:
        return self._buffer

    def runState(self):
        simulation = self._scheduler.currentSimulation()
        return None if simulation is None else simulation.state

    def lastResult(self) -> RunResult:
        return self._lastResult

    def getLyapunovEstimate(self):
        simulation = self._scheduler.currentSimulation()
        return None if simulation is None else simulation.state.lyapunovExponent()

    def _onRunStopped(self, result):
        if result.generation == self._scheduler.generation():
            self._lastResult = result
