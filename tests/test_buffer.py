import unittest

import numpy

from attractors.buffer import PixelBuffer


class TestPixelBuffer(unittest.TestCase):

    def test_layout(self):
        buffer = PixelBuffer(7, 5)
        assert buffer.data.shape == (5, 7, 4)
        assert buffer.data.dtype == numpy.uint8
        assert buffer.writtenPixelCount() == 0

        buffer.setPixel(3, 2, 10, 20, 30, 255)
        offset = buffer.offset(3, 2)
        assert offset == 2 * 7 * 4 + 3 * 4
        assert list(buffer.flat()[offset:offset + 4]) == [10, 20, 30, 255]
        assert buffer.pixel(3, 2) == (10, 20, 30, 255)
        assert buffer.writtenPixelCount() == 1

    def test_clear(self):
        buffer = PixelBuffer(4, 4)
        buffer.setPixel(0, 0, 1, 2, 3)
        buffer.setPixel(3, 3, 1, 2, 3)
        assert buffer.writtenPixelCount() == 2
        buffer.clear()
        assert buffer.writtenPixelCount() == 0
        assert not buffer.flat().any()

    def test_resize(self):
        buffer = PixelBuffer(4, 4)
        data = buffer.data
        assert not buffer.resize(4, 4)
        assert buffer.data is data
        assert buffer.resize(8, 2)
        assert buffer.shape() == (8, 2)
        assert buffer.data.shape == (2, 8, 4)
        with self.assertRaises(ValueError):
            buffer.resize(0, 2)

    def test_out_of_range(self):
        buffer = PixelBuffer(4, 4)
        with self.assertRaises(IndexError):
            buffer.setPixel(4, 0, 0, 0, 0)

    def test_copy_is_independent(self):
        buffer = PixelBuffer(2, 2)
        copy = buffer.copy()
        buffer.setPixel(1, 1, 5, 5, 5)
        assert copy.writtenPixelCount() == 0
        assert copy.shape() == (2, 2)
