import logging

from PyQt5.QtCore import QObject, QTimer, pyqtSignal as Signal

from .engine import Outcome, Simulation

log = logging.getLogger(__name__)

SLICE_SIZE = 1000


def postToEventLoop(fn):
    QTimer.singleShot(0, fn)


class _Run:

    def __init__(self, generation, simulation):
        self.generation = generation
        self.simulation = simulation
        self.running = True
        self.notified = False


class SliceScheduler(QObject):
    """
    Runs a Simulation in bounded slices, giving control back to the event loop
    between them.

    Each run gets a generation number. Only the run whose generation is current
    may touch the buffer or emit signals; callbacks of older generations that
    are still queued find out they are stale and return.
    """

    runStarted = Signal(int)

    runProgress = Signal(float)

    runStopped = Signal(object)

    iterationFault = Signal(object, object)

    frameReady = Signal(object)

    def __init__(self, sliceSize: int = SLICE_SIZE, post=postToEventLoop, parent=None):
        super().__init__(parent)
        if sliceSize <= 0:
            raise ValueError("Slice size should be positive, got {}".format(sliceSize))
        self._sliceSize = sliceSize
        self._post = post
        self._generation = 0
        self._run = None

    def sliceSize(self):
        return self._sliceSize

    def setSliceSize(self, sliceSize):
        if sliceSize <= 0:
            raise ValueError("Slice size should be positive, got {}".format(sliceSize))
        self._sliceSize = sliceSize

    def generation(self):
        return self._generation

    def isRunning(self):
        return self._run is not None and self._run.running

    def currentSimulation(self):
        return None if self._run is None else self._run.simulation

    def start(self, simulation: Simulation):
        previous = self._run
        if previous is not None and not previous.notified:
            # superseded run won't get to observe its stop, report it here
            previous.running = False
            self._finish(previous, previous.simulation.stop())

        self._generation += 1
        simulation.state.generation = self._generation
        run = _Run(self._generation, simulation)
        self._run = run
        log.info("Run %d started: %s, %d iterations",
                 run.generation, simulation.snapshot.systemName, simulation.snapshot.iterationBudget)
        self.runStarted.emit(run.generation)
        self._schedule(run.generation)
        return run.generation

    def stop(self):
        run = self._run
        if run is not None and run.running:
            log.debug("Stop requested for run %d", run.generation)
            run.running = False

    def _schedule(self, generation):
        self._post(lambda: self._slice(generation))

    def _slice(self, generation):
        if generation != self._generation:
            log.debug("Stale slice of run %d ignored (current is %d)", generation, self._generation)
            return
        run = self._run
        if run.notified:
            return
        if not run.running:
            self._finish(run, run.simulation.stop())
            return

        simulation = run.simulation
        outcome = simulation.advance(self._sliceSize, keepRunning=lambda: run.running)

        self.frameReady.emit(simulation.buffer)
        self.runProgress.emit(simulation.progress())

        # a listener may have started another run in the meantime
        if generation != self._generation:
            return
        if outcome is None:
            self._schedule(generation)
        else:
            self._finish(run, outcome)

    def _finish(self, run, outcome):
        run.running = False
        run.notified = True
        result = run.simulation.result()
        if outcome is Outcome.FAULTED:
            error = result.error
            self.iterationFault.emit(result.point, None if error is None else error.__cause__)
        log.info("Run %d finished: %s after %d iterations, lyapunov exponent %s",
                 run.generation, outcome.value, result.iterationIndex, result.lyapunovExponent)
        self.runStopped.emit(result)
