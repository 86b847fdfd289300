"""Linear RGB colors.

Colors are unclamped: components may exceed 1.0 while light is being
accumulated. Clamping belongs to the output stage (see whitted.preview).
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from whitted.core.tuples import EQUALITY_TOLERANCE


class Color:
    """An (r, g, b) color backed by a float64 array.

    Multiplying two colors is the component-wise (Hadamard) product;
    multiplying by a number scales every channel.
    """

    __slots__ = ("data",)

    def __init__(self, r: float, g: float, b: float) -> None:
        self.data = np.array((r, g, b), dtype=np.float64)

    @classmethod
    def from_array(cls, data: npt.ArrayLike) -> Color:
        result = cls.__new__(cls)
        result.data = np.asarray(data, dtype=np.float64)
        return result

    @property
    def r(self) -> float:
        return float(self.data[0])

    @property
    def g(self) -> float:
        return float(self.data[1])

    @property
    def b(self) -> float:
        return float(self.data[2])

    def __add__(self, other: Color) -> Color:
        return Color.from_array(self.data + other.data)

    def __sub__(self, other: Color) -> Color:
        return Color.from_array(self.data - other.data)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color.from_array(self.data * other.data)
        return Color.from_array(self.data * other)

    def __rmul__(self, other: float) -> Color:
        return Color.from_array(self.data * other)

    def approx_equals(self, other: Color, tolerance: float = EQUALITY_TOLERANCE) -> bool:
        return bool(np.all(np.abs(self.data - other.data) < tolerance))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.approx_equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
