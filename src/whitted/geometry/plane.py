"""Infinite plane primitive: the object-space x-z plane (y = 0)."""

from __future__ import annotations

from whitted.config import EPSILON
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, vector
from whitted.geometry.shape import Shape

UP = vector(0.0, 1.0, 0.0)


class Plane(Shape):
    """The x-z plane, facing +y everywhere."""

    def local_intersect(self, local_ray: Ray) -> list[float]:
        # Parallel or coplanar rays never register a hit
        if abs(local_ray.direction.y) < EPSILON:
            return []
        return [-local_ray.origin.y / local_ray.direction.y]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return UP
