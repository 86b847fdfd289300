"""Procedural two-color patterns.

A pattern is evaluated in its own space. The world point is first moved
into the shape's object space and then into pattern space, so a pattern
follows its shape around and can also be scaled or rotated on its own.

Example:
    >>> from whitted.core.color import BLACK, WHITE
    >>> from whitted.core.tuples import point
    >>> stripes = StripePattern(WHITE, BLACK)
    >>> stripes.pattern_at(point(0.9, 0.0, 0.0)) == WHITE
    True
    >>> stripes.pattern_at(point(1.0, 0.0, 0.0)) == BLACK
    True
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from whitted.core.color import Color
from whitted.core.matrix import Matrix, SingularMatrixError
from whitted.core.tuples import Tuple

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape

logger = logging.getLogger(__name__)


class Pattern(ABC):
    """Base class for two-color patterns.

    Attributes:
        a: First color.
        b: Second color.
    """

    def __init__(self, a: Color, b: Color, transform: Matrix | None = None) -> None:
        self.a = a
        self.b = b
        self._transform = transform if transform is not None else Matrix.identity(4)
        self._inverse: Matrix | None = None

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self._transform = matrix
        self._inverse = None

    @property
    def inverse_transform(self) -> Matrix:
        """Object-to-pattern matrix, computed once and cached.

        Raises:
            SingularMatrixError: If the pattern's transform cannot be inverted.
        """
        if self._inverse is None:
            try:
                self._inverse = self._transform.inverse()
            except SingularMatrixError as exc:
                logger.error("Transform of %r is singular", self)
                raise SingularMatrixError(f"{self!r} has a non-invertible transform: {exc}") from exc
        return self._inverse

    def pattern_at_object(self, shape: Shape, world_point: Tuple) -> Color:
        """Evaluate the pattern for a world-space point on a shape."""
        object_point = shape.world_to_object(world_point)
        return self.pattern_at(self.inverse_transform @ object_point)

    @abstractmethod
    def pattern_at(self, pattern_point: Tuple) -> Color:
        """Return the color at a point already in pattern space."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={self.a!r}, b={self.b!r})"


class StripePattern(Pattern):
    """Alternating unit-wide stripes along x."""

    def pattern_at(self, pattern_point: Tuple) -> Color:
        return self.a if math.floor(pattern_point.x) % 2 == 0 else self.b


class RingPattern(Pattern):
    """Concentric unit-wide rings around the y axis."""

    def pattern_at(self, pattern_point: Tuple) -> Color:
        distance = math.hypot(pattern_point.x, pattern_point.z)
        return self.a if math.floor(distance) % 2 == 0 else self.b


class CheckerPattern(Pattern):
    """Unit cubes alternating in all three dimensions."""

    def pattern_at(self, pattern_point: Tuple) -> Color:
        total = (
            math.floor(pattern_point.x)
            + math.floor(pattern_point.y)
            + math.floor(pattern_point.z)
        )
        return self.a if total % 2 == 0 else self.b


class GradientPattern(Pattern):
    """Linear blend from a to b across each unit of x."""

    def pattern_at(self, pattern_point: Tuple) -> Color:
        x = pattern_point.x
        fraction = x - math.floor(x)
        return self.a + (self.b - self.a) * fraction
