"""Unit tests for the canvas."""

import numpy as np
import pytest

from whitted.core.canvas import Canvas
from whitted.core.color import BLACK, Color


class TestCanvas:
    """Tests for Canvas."""

    def test_new_canvas_is_black(self):
        """Test that every pixel starts black."""
        c = Canvas(10, 20)
        assert (c.width, c.height) == (10, 20)
        assert c.pixels.shape == (20, 10, 3)
        assert all(c.pixel_at(x, y) == BLACK for y in range(20) for x in range(10))

    def test_write_pixel(self):
        """Test writing and reading back a pixel."""
        c = Canvas(10, 20)
        c.write_pixel(2, 3, Color(1.0, 0.0, 0.0))
        assert c.pixel_at(2, 3) == Color(1.0, 0.0, 0.0)
        assert c.pixels[3, 2, 0] == 1.0

    def test_values_not_clamped(self):
        """Test that values above 1.0 and below 0.0 are kept."""
        c = Canvas(2, 2)
        c.write_pixel(0, 0, Color(1.5, -0.5, 7.0))
        assert c.pixel_at(0, 0) == Color(1.5, -0.5, 7.0)

    def test_pixel_at_returns_copy(self):
        """Test that the returned color does not alias the buffer."""
        c = Canvas(2, 2)
        color = c.pixel_at(0, 0)
        color.data[0] = 5.0
        assert c.pixel_at(0, 0) == BLACK

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 0), (0, 20)])
    def test_out_of_bounds(self, x, y):
        """Test that out-of-bounds access raises IndexError."""
        c = Canvas(10, 20)
        with pytest.raises(IndexError):
            c.write_pixel(x, y, BLACK)
        with pytest.raises(IndexError):
            c.pixel_at(x, y)

    @pytest.mark.parametrize("size", [(0, 5), (5, 0), (-3, 2)])
    def test_invalid_size(self, size):
        """Test that non-positive dimensions are rejected."""
        with pytest.raises(ValueError):
            Canvas(*size)

    def test_write_row(self):
        """Test storing a full scanline."""
        c = Canvas(3, 2)
        row = np.array([[0.1, 0.2, 0.3], [0.4, 0.5, 0.6], [0.7, 0.8, 0.9]])
        c.write_row(1, row)
        assert c.pixel_at(2, 1) == Color(0.7, 0.8, 0.9)
        assert c.pixel_at(2, 0) == BLACK

    def test_write_row_errors(self):
        """Test row index and shape validation."""
        c = Canvas(3, 2)
        with pytest.raises(IndexError):
            c.write_row(2, np.zeros((3, 3)))
        with pytest.raises(ValueError):
            c.write_row(0, np.zeros((2, 3)))

    def test_to_numpy_is_copy(self):
        """Test that to_numpy does not expose the internal buffer."""
        c = Canvas(2, 2)
        array = c.to_numpy()
        array[:] = 1.0
        assert c.pixel_at(1, 1) == BLACK
