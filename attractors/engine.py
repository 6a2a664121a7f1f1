"""
Iterate-plot-measure loop.

A run advances the primary trajectory together with a "shadow" trajectory that
starts a tiny distance away. After a warm-up the separation of the two is
measured every iteration and the shadow is pulled back to the initial
separation; the mean log-growth of that separation estimates the largest
Lyapunov exponent.
"""
import enum
import logging
import math

from typing import NamedTuple, Optional, Callable

from .buffer import PixelBuffer
from .errors import IterationFault
from .systems import IterationFunction, Parameters
from .viewport import Point, Viewport

log = logging.getLogger(__name__)

# small offset of the shadow point, also the fixed-point detection tolerance
ETA = 1e-12
# initial distance between the primary and the shadow point
D0 = math.sqrt(2) * ETA
# if the point exceeds these bounds it is assumed to escape to infinity
ESCAPE_BOUND = float(2 ** 32)
# fixed points are not reported before this many iterations
CONVERGENCE_WARMUP = 50
# Lyapunov samples are taken from this iteration on, to let the trajectory reach the attractor
LYAPUNOV_WARMUP = 1000


class Outcome(enum.Enum):
    COMPLETED = "completed"
    STOPPED = "stopped"
    ESCAPED = "escaped"
    CONVERGED = "converged"
    FAULTED = "faulted"


class RunSnapshot(NamedTuple):
    """
    Everything a run needs, captured when it starts.
    """
    systemName: str
    iterate: IterationFunction
    parameters: Parameters
    initialPoint: Point
    viewport: Viewport
    iterationBudget: int
    colour: Callable


class RunResult(NamedTuple):
    generation: int
    outcome: Outcome
    iterationIndex: int
    iterationBudget: int
    lyapunovExponent: Optional[float]
    lyapunovSampleCount: int
    point: Point
    error: Optional[BaseException]


class RunState:

    def __init__(self, generation: int, initialPoint: Point):
        self.generation = generation
        self.iterationIndex = 0
        self.primaryPoint = Point(*initialPoint)
        self.shadowPoint = Point(initialPoint[0] + ETA, initialPoint[1] + ETA)
        self.previousX = 0.0
        self.lyapunovSum = 0.0
        self.lyapunovSampleCount = 0
        self.running = False
        self.outcome = None
        self.error = None

    def lyapunovExponent(self):
        if self.outcome is Outcome.FAULTED or not self.lyapunovSampleCount:
            return None
        return self.lyapunovSum / self.lyapunovSampleCount

    def __repr__(self):
        return "RunState(generation={}, iterationIndex={}, running={}, outcome={})".format(
            self.generation, self.iterationIndex, self.running, self.outcome
        )


def _evaluate(iterate, point, parameters, state):
    try:
        x, y = iterate(point, parameters)
        finite = math.isfinite(x) and math.isfinite(y)
    except Exception as e:
        raise IterationFault(
            "Iteration function failed at {}: {}".format(tuple(point), e),
            point=point, iterationIndex=state.iterationIndex
        ) from e
    if not finite:
        raise IterationFault(
            "Iteration function returned a non-finite point ({}, {})".format(x, y),
            point=point, iterationIndex=state.iterationIndex
        )
    return float(x), float(y)


class Simulation:
    """
    One run of one system. Not reusable: a new run needs a new Simulation.
    """

    def __init__(self, snapshot: RunSnapshot, buffer: PixelBuffer, generation: int = 0):
        if snapshot.iterationBudget < 0:
            raise ValueError("Iteration budget should be non-negative, got {}".format(snapshot.iterationBudget))
        self.snapshot = snapshot
        self.buffer = buffer
        self.state = RunState(generation, snapshot.initialPoint)
        self.state.running = True

    def isFinished(self):
        return self.state.outcome is not None

    def progress(self):
        if self.snapshot.iterationBudget == 0:
            return 1.0
        return self.state.iterationIndex / self.snapshot.iterationBudget

    def advance(self, maxIterations: int, keepRunning: Callable[[], bool] = None) -> Optional[Outcome]:
        """
        Performs up to `maxIterations` iterations.

        :returns: terminal outcome if the run has finished, None otherwise.
        """
        state = self.state
        if state.outcome is not None:
            return state.outcome

        snapshot = self.snapshot
        iterate, parameters = snapshot.iterate, snapshot.parameters
        toPixel, colour, setPixel = snapshot.viewport.toPixel, snapshot.colour, self.buffer.setPixel
        budget = snapshot.iterationBudget
        end = min(state.iterationIndex + maxIterations, budget)

        x, y = state.primaryPoint
        xe, ye = state.shadowPoint
        previousX = state.previousX
        i = state.iterationIndex

        try:
            while i < end:
                if keepRunning is not None and not keepRunning():
                    return self._finish(Outcome.STOPPED)

                pixel = toPixel(x, y)
                if pixel is not None:
                    col, row = pixel
                    r, g, b = colour(i, row, col, previousX)
                    setPixel(col, row, r, g, b, 255)

                if not (-ESCAPE_BOUND <= x <= ESCAPE_BOUND and -ESCAPE_BOUND <= y <= ESCAPE_BOUND):
                    log.info("Infinite attractor detected after %d iterations", i)
                    return self._finish(Outcome.ESCAPED)

                nx, ny = _evaluate(iterate, (x, y), parameters, state)

                if abs(nx - x) < ETA and abs(ny - y) < ETA and i > CONVERGENCE_WARMUP:
                    log.info("Point attractor detected after %d iterations", i)
                    return self._finish(Outcome.CONVERGED)

                nxe, nye = _evaluate(iterate, (xe, ye), parameters, state)

                if i >= LYAPUNOV_WARMUP:
                    dx, dy = nxe - nx, nye - ny
                    d = math.hypot(dx, dy)
                    if not (d > 0 and math.isfinite(d)):
                        raise IterationFault(
                            "Degenerate separation {} between trajectory and shadow".format(d),
                            point=Point(x, y), iterationIndex=i
                        )
                    state.lyapunovSum += math.log(d / D0)
                    if not math.isfinite(state.lyapunovSum):
                        raise IterationFault(
                            "Non-finite Lyapunov exponent sum", point=Point(x, y), iterationIndex=i
                        )
                    state.lyapunovSampleCount += 1
                    nxe, nye = nx + D0 * dx / d, ny + D0 * dy / d

                previousX = x
                x, y, xe, ye = nx, ny, nxe, nye
                i += 1
                state.iterationIndex = i
                state.primaryPoint = Point(x, y)
                state.shadowPoint = Point(xe, ye)
                state.previousX = previousX
        except IterationFault as e:
            log.warning("Run %d faulted after %d iterations: %s", state.generation, state.iterationIndex, e)
            state.error = e
            return self._finish(Outcome.FAULTED)

        if i >= budget:
            return self._finish(Outcome.COMPLETED)
        return None

    def stop(self):
        if self.state.outcome is None:
            self._finish(Outcome.STOPPED)
        return self.state.outcome

    def result(self) -> RunResult:
        state = self.state
        return RunResult(
            generation=state.generation,
            outcome=state.outcome,
            iterationIndex=state.iterationIndex,
            iterationBudget=self.snapshot.iterationBudget,
            lyapunovExponent=state.lyapunovExponent(),
            lyapunovSampleCount=state.lyapunovSampleCount,
            point=state.primaryPoint,
            error=state.error,
        )

    def _finish(self, outcome):
        self.state.outcome = outcome
        self.state.running = False
        return outcome
