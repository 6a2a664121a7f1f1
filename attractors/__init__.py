from .viewport import Point, Viewport
from .systems import Parameters, System, SystemCatalog, BUILTIN_SYSTEMS
from .colours import ColourMode, COLOUR_MODES, hsv2rgb
from .buffer import PixelBuffer
from .engine import Outcome, RunResult, RunSnapshot, RunState, Simulation
from .scheduler import SliceScheduler
from .core import Attractor
from .errors import (
    AttractorError, IterationFault, InvalidIterationFunction, InvalidParameters, ConfigurationError
)
