"""Abstract shape with transform and material plumbing.

Concrete primitives only describe themselves in object space:

    local_intersect(local_ray) -> list of t values
    local_normal_at(local_point) -> object-space normal

Shape handles the rest: moving rays into object space through the inverse
transform, and moving normals back to world space through the transpose
of the inverse (correct under non-uniform scaling).

Every shape carries an opaque identity handle generated at construction.
Equality and hashing use only that handle, so copies of a shape that
travel through intersection lists (or across worker processes) still
compare equal to the original.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod

from whitted.core.intersection import Intersection
from whitted.core.matrix import Matrix, SingularMatrixError
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, vector
from whitted.materials.material import Material

logger = logging.getLogger(__name__)


class Shape(ABC):
    """Base class for geometric primitives.

    Attributes:
        handle: Opaque identity token, unique per constructed shape.
        material: Surface appearance of the shape.
    """

    def __init__(self, transform: Matrix | None = None, material: Material | None = None) -> None:
        self.handle = uuid.uuid4().int
        self._transform = transform if transform is not None else Matrix.identity(4)
        self._inverse: Matrix | None = None
        self.material = material if material is not None else Material()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self.set_transform(matrix)

    def set_transform(self, matrix: Matrix) -> None:
        """Replace the object-to-world transform.

        The matrix is not checked here; a singular transform surfaces the
        first time the shape is intersected or shaded.
        """
        self._transform = matrix
        self._inverse = None

    @property
    def inverse_transform(self) -> Matrix:
        """World-to-object matrix, computed once and cached.

        Raises:
            SingularMatrixError: If the shape's transform cannot be inverted.
        """
        if self._inverse is None:
            try:
                self._inverse = self._transform.inverse()
            except SingularMatrixError as exc:
                logger.error("Transform of %r is singular", self)
                raise SingularMatrixError(f"{self!r} has a non-invertible transform: {exc}") from exc
        return self._inverse

    def world_to_object(self, world_point: Tuple) -> Tuple:
        return self.inverse_transform @ world_point

    def intersects(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Args:
            ray: The ray in world space.

        Returns:
            Intersections in ascending t order; empty on a miss.
        """
        local_ray = ray.transform(self.inverse_transform)
        return [Intersection(t, self) for t in self.local_intersect(local_ray)]

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Unit surface normal at a world-space point."""
        inverse = self.inverse_transform
        local_normal = self.local_normal_at(inverse @ world_point)
        world_normal = inverse.transpose() @ local_normal
        # The translation row leaks into w; normals are always vectors.
        return vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> list[float]:
        """Return the t values where an object-space ray meets the shape, ascending."""

    @abstractmethod
    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Return the object-space normal at an object-space point."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.handle == other.handle

    def __hash__(self) -> int:
        return hash(self.handle)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(handle={self.handle:032x})"
