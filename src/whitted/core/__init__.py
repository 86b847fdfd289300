"""Core math and per-ray bookkeeping.

Components:
    tuples: Homogeneous points and vectors
    color: Linear RGB colors
    matrix: Square matrices with cofactor inversion
    transform: Affine transform factories, fluent composer, view transform
    ray: Ray data structure
    intersection: Intersection records, hit selection, shading frame, Schlick
    canvas: Unclamped RGB pixel buffer

Nothing here depends on shapes, materials or the world; geometry and scene
modules build on top of it.
"""

from .canvas import Canvas
from .color import BLACK, WHITE, Color
from .intersection import (
    Computations,
    Intersection,
    hit,
    prepare_computations,
    schlick,
    sort_intersections,
)
from .matrix import IDENTITY, Matrix, SingularMatrixError
from .ray import Ray
from .transform import (
    Transform,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuples import Tuple, cross, dot, point, reflect, vector

__all__ = [
    # Tuples and colors
    "Tuple",
    "point",
    "vector",
    "dot",
    "cross",
    "reflect",
    "Color",
    "BLACK",
    "WHITE",
    # Matrices and transforms
    "Matrix",
    "IDENTITY",
    "SingularMatrixError",
    "Transform",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    # Rays and intersections
    "Ray",
    "Intersection",
    "Computations",
    "hit",
    "sort_intersections",
    "prepare_computations",
    "schlick",
    # Output buffer
    "Canvas",
]
