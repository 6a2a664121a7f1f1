"""
Catalog of two-dimensional maps.

Equations and parameter values come from Paul Bourke's random attractors
gallery and Jared Tarbell's Peter de Jong renderings.

Peter de Jong's nonlinear system:
    x(n+1) = sin(a*y(n)) - cos(b*x(n)),
    y(n+1) = sin(c*x(n)) - cos(d*y(n))
"""
import math

from collections.abc import Mapping
from typing import Callable, Tuple

from .viewport import Point


class Parameters(Mapping):
    """
    Immutable name -> value mapping handed to an iteration function as a whole.
    """

    def __init__(self, **values):
        self._values = {name: float(value) for name, value in values.items()}

    @staticmethod
    def fromMapping(mapping):
        return Parameters(**dict(mapping))

    def __getitem__(self, name):
        return self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __hash__(self):
        return hash(tuple(sorted(self._values.items())))

    def __repr__(self):
        return "Parameters({})".format(", ".join(
            "{}={!r}".format(name, value) for name, value in self._values.items()
        ))


IterationFunction = Callable[[Point, Parameters], Tuple[float, float]]


class System:

    def __init__(self, name: str, iterate: IterationFunction, initialPoint: Tuple[float, float],
                 initialZoom: float, parameterSets):
        if not parameterSets:
            raise ValueError("System '{}' should have at least one parameter set".format(name))
        self.name = name
        self.iterate = iterate
        self.initialPoint = Point(*map(float, initialPoint))
        self.initialZoom = float(initialZoom)
        self.parameterSets = tuple(parameterSets)

    def withIterate(self, iterate: IterationFunction):
        return System(self.name, iterate, self.initialPoint, self.initialZoom, self.parameterSets)

    def __repr__(self):
        return "System({!r})".format(self.name)


def peterDeJong(point, p):
    x, y = point
    return math.sin(p["a"] * y) - math.cos(p["b"] * x), \
           math.sin(p["c"] * x) - math.cos(p["d"] * y)


def quadratic(point, p):
    # x' = a0 + a1 x + a2 x^2 + a3 xy + a4 y + a5 y^2, and the same for y' with b0..b5
    x, y = point
    return p["a0"] + p["a1"] * x + p["a2"] * x * x + p["a3"] * x * y + p["a4"] * y + p["a5"] * y * y, \
           p["b0"] + p["b1"] * x + p["b2"] * x * x + p["b3"] * x * y + p["b4"] * y + p["b5"] * y * y


def duffing(point, p):
    x, y = point
    return y, -p["b"] * x + p["a"] * y - y * y * y


def henon(point, p):
    x, y = point
    return 1 - p["a"] * x * x + y, p["b"] * x


def gingerbreadMan(point, p):
    x, y = point
    return 1 - y + abs(x), x


def tinkerbell(point, p):
    x, y = point
    return x * x - y * y + p["a"] * x + p["b"] * y, \
           2 * x * y + p["c"] * x + p["d"] * y


def swap(point, p):
    x, y = point
    return y, x


BUILTIN_SYSTEMS = (
    System("Peter de Jong", peterDeJong, (1, 1), 100, (
        Parameters(a=-0.89567065, b=1.59095860, c=1.8515863, d=2.197430600),
        Parameters(a=-1.97378990, b=-0.29585147, c=-2.3156738, d=0.040812516),
        Parameters(a=2.03372000, b=-0.78980076, c=-0.5964787, d=-1.758290150),
        Parameters(a=-2.09892100, b=-0.30945826, c=1.4205422, d=0.232973580),
        Parameters(a=-1.21448970, b=-0.59580576, c=-2.2561285, d=0.960403900),
        Parameters(a=1.41914030, b=-2.28415230, c=2.4275403, d=-2.177196000),
        Parameters(a=-0.5206013, b=-2.083939, c=0.7189889, d=-2.40354),
        Parameters(a=-2.830518, b=1.967394, c=1.700244, d=1.746933),
    )),
    System("Quadratic map", quadratic, (0.5, 0.5), 100, (
        Parameters(a0=0, a1=0, a2=0, a3=0, a4=1, a5=0,
                   b0=0, b1=0.7, b2=-0.7, b3=0, b4=0, b5=0),
    )),
    System("Duffing", duffing, (1, 1), 100, (
        Parameters(a=2.75, b=0.2),
    )),
    System("Hénon", henon, (0, 0), 30, (
        Parameters(a=0.2, b=0.9991),
        Parameters(a=1.4, b=0.3),
        Parameters(a=0.2, b=1.01),
        Parameters(a=0.2, b=-0.99999),
    )),
    System("Gingerbread man", gingerbreadMan, (-0.1, 0), 30, (
        Parameters(),
    )),
    System("Tinkerbell map", tinkerbell, (-0.72, -0.64), 100, (
        Parameters(a=0.9, b=-0.6013, c=2, d=0.50),
    )),
    # iterate is replaceable at runtime, see SystemCatalog.setCustomIterate
    System("Custom", swap, (0, 0), 30, (
        Parameters(),
    )),
)


class SystemCatalog:
    """
    Built-in systems plus a fixed-size table of user overrides.

    Every system gets one extra "custom" parameter set appended after its
    built-in ones, initially equal to the last built-in set. The last system's
    iteration function is replaceable as well. Overrides never change the number
    or the order of entries.
    """

    def __init__(self, systems=BUILTIN_SYSTEMS):
        if not systems:
            raise ValueError("Catalog should contain at least one system")
        self._builtins = tuple(systems)
        self._customParameters = [system.parameterSets[-1] for system in self._builtins]
        self._customIterate = self._builtins[-1].iterate

    def systemCount(self):
        return len(self._builtins)

    def names(self):
        return [system.name for system in self._builtins]

    def indexOf(self, name):
        for i, system in enumerate(self._builtins):
            if system.name == name:
                return i
        raise KeyError("No system named '{}'".format(name))

    def isCustomSystem(self, systemIndex):
        return self._checkSystemIndex(systemIndex) == len(self._builtins) - 1

    def system(self, systemIndex) -> System:
        systemIndex = self._checkSystemIndex(systemIndex)
        system = self._builtins[systemIndex]
        if systemIndex == len(self._builtins) - 1:
            return system.withIterate(self._customIterate)
        return system

    def systems(self):
        return [self.system(i) for i in range(len(self._builtins))]

    def parameterSets(self, systemIndex):
        systemIndex = self._checkSystemIndex(systemIndex)
        return self._builtins[systemIndex].parameterSets + (self._customParameters[systemIndex],)

    def parameterSet(self, systemIndex, parameterSetIndex) -> Parameters:
        sets = self.parameterSets(systemIndex)
        if not 0 <= parameterSetIndex < len(sets):
            raise IndexError("Parameter set index {} is out of range for system '{}' ({} sets)".format(
                parameterSetIndex, self._builtins[systemIndex].name, len(sets)
            ))
        return sets[parameterSetIndex]

    def customParameterSetIndex(self, systemIndex):
        return len(self._builtins[self._checkSystemIndex(systemIndex)].parameterSets)

    def setCustomParameters(self, systemIndex, parameters):
        systemIndex = self._checkSystemIndex(systemIndex)
        if not isinstance(parameters, Parameters):
            parameters = Parameters.fromMapping(parameters)
        self._customParameters[systemIndex] = parameters

    def setCustomIterate(self, iterate: IterationFunction):
        self._customIterate = iterate

    def customIterate(self):
        return self._customIterate

    def _checkSystemIndex(self, systemIndex):
        if not 0 <= systemIndex < len(self._builtins):
            raise IndexError("System index {} is out of range ({} systems)".format(
                systemIndex, len(self._builtins)
            ))
        return systemIndex
