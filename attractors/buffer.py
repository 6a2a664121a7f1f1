import numpy


class PixelBuffer:
    """
    Dense RGBA grid, row-major with the origin in the top-left corner.

    Backed by a (height, width, 4) uint8 array, so the byte of (col, row) lives
    at row*width*4 + col*4 of the flat data.
    """

    def __init__(self, width: int, height: int):
        self.width, self.height = 0, 0
        self.data = None
        self.resize(width, height)

    def shape(self):
        return self.width, self.height

    def resize(self, width, height):
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise ValueError("Buffer dimensions should be positive, got {}x{}".format(width, height))
        if (width, height) == (self.width, self.height):
            return False
        self.width, self.height = width, height
        self.data = numpy.zeros((height, width, 4), dtype=numpy.uint8)
        return True

    def clear(self, color=(0, 0, 0, 0)):
        self.data[...] = color

    def setPixel(self, col, row, r, g, b, a=255):
        # no bounds checking beyond numpy's own, callers do the visibility test
        self.data[row, col] = (r, g, b, a)

    def pixel(self, col, row):
        return tuple(int(v) for v in self.data[row, col])

    def offset(self, col, row):
        return row * self.width * 4 + col * 4

    def flat(self):
        return self.data.reshape(-1)

    def writtenPixelCount(self):
        return int(numpy.count_nonzero(self.data[..., 3]))

    def copy(self):
        buffer = PixelBuffer.__new__(PixelBuffer)
        buffer.width, buffer.height = self.width, self.height
        buffer.data = self.data.copy()
        return buffer
