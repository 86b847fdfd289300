"""Unit sphere primitive.

The sphere is centred on the object-space origin with radius 1; position
and size come from the shape transform. Intersection solves

    |origin + t * direction|^2 = 1

which expands to a*t^2 + b*t + c = 0 with

    a = dot(direction, direction)
    b = 2 * dot(direction, origin - center)
    c = dot(origin - center, origin - center) - 1

A negative discriminant is a miss. A tangent ray reports the same root
twice, so every sphere intersection list has either zero or two entries.
"""

from __future__ import annotations

import math

from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, point
from whitted.geometry.shape import Shape
from whitted.materials.material import Material

ORIGIN = point(0.0, 0.0, 0.0)


class Sphere(Shape):
    """A unit sphere at the object-space origin."""

    def local_intersect(self, local_ray: Ray) -> list[float]:
        sphere_to_ray = local_ray.origin - ORIGIN
        a = local_ray.direction.dot(local_ray.direction)
        b = 2.0 * local_ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return [t1, t2] if t1 <= t2 else [t2, t1]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return (local_point - ORIGIN).normalize()


def glass_sphere() -> Sphere:
    """Create a unit sphere of clear glass (transparency 1.0, index 1.5)."""
    return Sphere(material=Material(transparency=1.0, refractive_index=1.5))
