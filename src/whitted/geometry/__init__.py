"""Geometry module for shape primitives.

Components:
    shape: Abstract Shape with identity handle, transform and material
    sphere: Unit sphere at the origin, plus the glass_sphere preset
    plane: The x-z plane

New primitives subclass Shape and implement two object-space rules:
    local_intersect(local_ray) -> sorted t values
    local_normal_at(local_point) -> normal vector
Transforms, materials and world-space conversion are inherited.
"""

from .plane import Plane
from .shape import Shape
from .sphere import Sphere, glass_sphere

__all__ = [
    "Shape",
    "Sphere",
    "Plane",
    "glass_sphere",
]
