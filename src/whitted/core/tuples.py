"""Homogeneous 4-component tuples for points and direction vectors.

A tuple with w = 1.0 is a point, a tuple with w = 0.0 is a vector. Affine
matrices preserve w, so translating a vector leaves it unchanged while
translating a point moves it.

Example:
    >>> from whitted.core.tuples import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> (p + v).z
    4.0
    >>> (p + v).is_point()
    True
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

# Per-component tolerance for tuple and matrix equality
EQUALITY_TOLERANCE = 1e-5


class Tuple:
    """A homogeneous (x, y, z, w) tuple backed by a float64 array.

    Attributes:
        data: The underlying array of shape (4,).
    """

    __slots__ = ("data",)

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        self.data = np.array((x, y, z, w), dtype=np.float64)

    @classmethod
    def from_array(cls, data: npt.ArrayLike) -> Tuple:
        """Wrap an array-like of length 4 without copying component by component."""
        result = cls.__new__(cls)
        result.data = np.asarray(data, dtype=np.float64)
        return result

    @property
    def x(self) -> float:
        return float(self.data[0])

    @property
    def y(self) -> float:
        return float(self.data[1])

    @property
    def z(self) -> float:
        return float(self.data[2])

    @property
    def w(self) -> float:
        return float(self.data[3])

    def is_point(self) -> bool:
        return self.data[3] == 1.0

    def is_vector(self) -> bool:
        return self.data[3] == 0.0

    def __add__(self, other: Tuple) -> Tuple:
        return Tuple.from_array(self.data + other.data)

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple.from_array(self.data - other.data)

    def __neg__(self) -> Tuple:
        return Tuple.from_array(-self.data)

    def __mul__(self, scalar: float) -> Tuple:
        return Tuple.from_array(self.data * scalar)

    def __rmul__(self, scalar: float) -> Tuple:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Tuple:
        return Tuple.from_array(self.data / scalar)

    def magnitude(self) -> float:
        return math.sqrt(float(np.dot(self.data, self.data)))

    def normalize(self) -> Tuple:
        """Scale to unit length.

        Returns:
            A tuple of magnitude 1 in the same direction. A zero-length
            tuple is returned unchanged.
        """
        length = self.magnitude()
        if length == 0.0:
            return Tuple.from_array(self.data.copy())
        return self / length

    def dot(self, other: Tuple) -> float:
        return float(np.dot(self.data, other.data))

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of the xyz parts; the result is always a vector."""
        c = np.cross(self.data[:3], other.data[:3])
        return vector(c[0], c[1], c[2])

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this vector about a unit normal."""
        return self - normal * (2.0 * self.dot(normal))

    def approx_equals(self, other: Tuple, tolerance: float = EQUALITY_TOLERANCE) -> bool:
        return bool(np.all(np.abs(self.data - other.data) < tolerance))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.approx_equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1)."""
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a direction vector (w = 0)."""
    return Tuple(x, y, z, 0.0)


def dot(a: Tuple, b: Tuple) -> float:
    return a.dot(b)


def cross(a: Tuple, b: Tuple) -> Tuple:
    return a.cross(b)


def reflect(incident: Tuple, normal: Tuple) -> Tuple:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        incident - normal * 2 * dot(incident, normal).
    """
    return incident.reflect(normal)
