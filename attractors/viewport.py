import math

from typing import NamedTuple, Optional, Tuple


class Point(NamedTuple):
    x: float
    y: float


class Viewport:
    """
    Affine map between the logical plane and a pixel grid.

    Pixel columns grow to the right, rows grow downward, so the Y axis is
    inverted relative to the plane. Pixel centres sit half a pixel off the
    integer grid: column c is centred at c + 0.5, row r at r - 0.5.
    """

    def __init__(self, centre: Tuple[float, float] = (0.0, 0.0), zoom: float = 100.0,
                 width: int = 512, height: int = 512):
        if not zoom > 0 or not math.isfinite(zoom):
            raise ValueError("Zoom should be a positive finite number, got {}".format(zoom))
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError("Pixel dimensions should be positive, got {}x{}".format(width, height))
        self.centre = Point(float(centre[0]), float(centre[1]))
        self.zoom = float(zoom)
        self.width = int(width)
        self.height = int(height)

    def __eq__(self, other):
        if not isinstance(other, Viewport):
            return NotImplemented
        return self.asTuple() == other.asTuple()

    def __hash__(self):
        return hash(self.asTuple())

    def __repr__(self):
        return "Viewport(centre={}, zoom={}, width={}, height={})".format(
            tuple(self.centre), self.zoom, self.width, self.height
        )

    def asTuple(self):
        return self.centre.x, self.centre.y, self.zoom, self.width, self.height

    def shape(self):
        return self.width, self.height

    def colToX(self, c):
        return (c + 0.5 - self.width / 2) / self.zoom + self.centre.x

    def rowToY(self, r):
        return (r - 0.5 - self.height / 2) / -self.zoom + self.centre.y

    def xToCol(self, x):
        return math.floor((x - self.centre.x) * self.zoom + self.width / 2)

    def yToRow(self, y):
        return math.ceil((y - self.centre.y) * -self.zoom + self.height / 2)

    def toPixel(self, x, y) -> Optional[Tuple[int, int]]:
        """
        Returns (col, row) of the pixel the point falls into, or None when the
        point is outside of the image.
        """
        gx = (x - self.centre.x) * self.zoom + self.width / 2
        gy = (y - self.centre.y) * -self.zoom + self.height / 2
        # rejects NaN as well
        if not (0 <= gx < self.width and -1 < gy <= self.height - 1):
            return None
        return math.floor(gx), math.ceil(gy)

    def bounds(self):
        # (left, right, bottom, top) in plane coordinates
        return (
            self.centre.x - self.width / 2 / self.zoom,
            self.centre.x + self.width / 2 / self.zoom,
            self.centre.y - (self.height / 2 - 1) / self.zoom,
            self.centre.y + (self.height / 2 + 1) / self.zoom,
        )

    def withCentre(self, x, y):
        return Viewport((x, y), self.zoom, self.width, self.height)

    def withZoom(self, zoom):
        return Viewport(self.centre, zoom, self.width, self.height)

    def withSize(self, width, height):
        return Viewport(self.centre, self.zoom, width, height)

    def zoomBy(self, factor):
        return self.withZoom(self.zoom * factor)

    def zoomOutBy(self, factor):
        return self.zoomBy(1 / factor)
