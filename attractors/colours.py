"""
Methods of colouring the points.

These exist mostly to show that they don't work well: there is no simple
relationship between iteration count and location of point for a chaotic
attractor.
"""
import math

from typing import Callable, Tuple

RGB = Tuple[int, int, int]
ColourFunction = Callable[[int, int, int, float], RGB]


def _channel(v):
    return int(min(max(round(v), 0), 255))


def hsv2rgb(h, s, v) -> RGB:
    """
    h in degrees (wrapped into [0, 360)), s and v in [0, 1].
    """
    h = math.fmod(h, 360.0)
    if h < 0:
        h += 360.0
    c = s * v
    x = c * (1 - abs(math.fmod(h / 60, 2) - 1))
    if 0 <= h < 60:
        rgb = (c, x, 0)
    elif 60 <= h < 120:
        rgb = (x, c, 0)
    elif 120 <= h < 180:
        rgb = (0, c, x)
    elif 180 <= h < 240:
        rgb = (0, x, c)
    elif 240 <= h < 300:
        rgb = (x, 0, c)
    else:
        rgb = (c, 0, x)
    m = v - c
    return tuple(_channel(255 * (component + m)) for component in rgb)


def previousXColour(i, row, col, previousX):
    if not math.isfinite(previousX):
        return 0, 0, 0
    return hsv2rgb(360 * previousX, 1, 1)


def blackColour(i, row, col, previousX):
    return 0, 0, 0


def sineColour(i, row, col, previousX):
    r, g, b = math.sin(i), math.cos(i), -math.sin(i)
    return _channel(127 * (r + 1)), _channel(127 * (g + 1)), _channel(127 * (b + 1))


def alternatingColour(i, row, col, previousX):
    return (255, 0, 0) if i % 2 else (0, 0, 255)


class ColourMode:

    def __init__(self, name: str, getColour: ColourFunction):
        self.name = name
        self.getColour = getColour

    def __call__(self, i, row, col, previousX):
        return self.getColour(i, row, col, previousX)

    def __repr__(self):
        return "ColourMode({!r})".format(self.name)


COLOUR_MODES = (
    ColourMode("Prev X co-ord", previousXColour),
    ColourMode("Black", blackColour),
    ColourMode("Sine", sineColour),
    ColourMode("Alternating", alternatingColour),
)
