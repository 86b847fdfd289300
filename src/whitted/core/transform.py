"""Affine transform factories and a fluent composer.

Each Transform method right-multiplies the accumulated matrix by the new
one, so `Transform().scale(...).rotate_z(...)` yields `S @ Rz`. The
composer is immutable: every call returns a new Transform.

Example:
    >>> import math
    >>> from whitted.core.transform import Transform
    >>> from whitted.core.tuples import point
    >>> m = Transform().translate(10.0, 5.0, 7.0).scale(5.0, 5.0, 5.0).matrix
    >>> m @ point(1.0, 0.0, 1.0)
    Tuple(15.0, 5.0, 12.0, 1.0)
"""

from __future__ import annotations

import math

from whitted.core.matrix import Matrix
from whitted.core.tuples import Tuple


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear matrix; `xy` moves x in proportion to y, and so on."""
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Build the world-to-camera matrix for an eye looking at a point.

    Args:
        from_point: Eye position in world space.
        to_point: Point the eye looks at.
        up: Approximate up direction; need not be normalized or exactly
            perpendicular to the view direction.

    Returns:
        The orientation matrix composed with a translation by -from_point.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)


class Transform:
    """Immutable fluent builder for composed affine transforms.

    Attributes:
        matrix: The accumulated 4x4 matrix.
    """

    __slots__ = ("matrix",)

    def __init__(self, matrix: Matrix | None = None) -> None:
        self.matrix = matrix if matrix is not None else Matrix.identity(4)

    def then(self, other: Matrix) -> Transform:
        """Right-multiply the accumulated matrix by an arbitrary matrix."""
        return Transform(self.matrix @ other)

    def translate(self, x: float, y: float, z: float) -> Transform:
        return self.then(translation(x, y, z))

    def scale(self, x: float, y: float, z: float) -> Transform:
        return self.then(scaling(x, y, z))

    def rotate_x(self, radians: float) -> Transform:
        return self.then(rotation_x(radians))

    def rotate_y(self, radians: float) -> Transform:
        return self.then(rotation_y(radians))

    def rotate_z(self, radians: float) -> Transform:
        return self.then(rotation_z(radians))

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Transform:
        return self.then(shearing(xy, xz, yx, yz, zx, zy))

    view_transform = staticmethod(view_transform)

    def __repr__(self) -> str:
        return f"Transform({self.matrix!r})"
