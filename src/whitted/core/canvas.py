"""Pixel buffer for rendered images.

The canvas stores linear, unclamped RGB values in a NumPy array of shape
(height, width, 3), top row first. Tone mapping, clamping and
quantization happen only when the image is exported.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from whitted.core.color import Color


class Canvas:
    """A width x height grid of linear RGB colors, initialised to black.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        pixels: Float64 array of shape (height, width, 3).
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def _check_pixel(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        self._check_pixel(x, y)
        self.pixels[y, x] = color.data

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_pixel(x, y)
        return Color.from_array(self.pixels[y, x].copy())

    def write_row(self, y: int, row: npt.NDArray[np.float64]) -> None:
        """Store one full scanline.

        Args:
            y: Row index (0 is the top row).
            row: Array of shape (width, 3).

        Raises:
            IndexError: If y is outside the canvas.
            ValueError: If the row has the wrong shape.
        """
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} outside canvas of height {self.height}")
        if row.shape != (self.width, 3):
            raise ValueError(f"Row shape {row.shape} does not match ({self.width}, 3)")
        self.pixels[y] = row

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Get a copy of the pixel buffer."""
        return self.pixels.copy()

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"
