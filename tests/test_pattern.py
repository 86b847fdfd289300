"""Unit tests for procedural patterns.

Tests cover:
- Stripe, ring, checker and gradient evaluation in pattern space
- The object -> pattern space chain in pattern_at_object
- Singular pattern transforms
"""

import pytest

from whitted.core.color import BLACK, WHITE, Color
from whitted.core.matrix import IDENTITY, SingularMatrixError
from whitted.core.transform import scaling, translation
from whitted.core.tuples import point
from whitted.geometry.sphere import Sphere
from whitted.materials.pattern import (
    CheckerPattern,
    GradientPattern,
    RingPattern,
    StripePattern,
)


class TestStripePattern:
    """Tests for StripePattern."""

    def test_colors(self):
        """Test that the pattern stores both colors and an identity transform."""
        p = StripePattern(WHITE, BLACK)
        assert p.a == WHITE
        assert p.b == BLACK
        assert p.transform == IDENTITY

    def test_constant_in_y_and_z(self):
        """Test that stripes do not change along y or z."""
        p = StripePattern(WHITE, BLACK)
        for at in (point(0.0, 1.0, 0.0), point(0.0, 2.0, 0.0), point(0.0, 0.0, 1.0), point(0.0, 0.0, 2.0)):
            assert p.pattern_at(at) == WHITE

    @pytest.mark.parametrize(
        "x,expected",
        [(0.0, WHITE), (0.9, WHITE), (1.0, BLACK), (-0.1, BLACK), (-1.0, BLACK), (-1.1, WHITE)],
    )
    def test_alternates_in_x(self, x, expected):
        """Test alternation along x, including negative x."""
        assert StripePattern(WHITE, BLACK).pattern_at(point(x, 0.0, 0.0)) == expected

    def test_object_transform(self):
        """Test stripes on a scaled object."""
        shape = Sphere(transform=scaling(2.0, 2.0, 2.0))
        assert StripePattern(WHITE, BLACK).pattern_at_object(shape, point(1.5, 0.0, 0.0)) == WHITE

    def test_pattern_transform(self):
        """Test stripes with their own scaling."""
        p = StripePattern(WHITE, BLACK, transform=scaling(2.0, 2.0, 2.0))
        assert p.pattern_at_object(Sphere(), point(1.5, 0.0, 0.0)) == WHITE

    def test_object_and_pattern_transform(self):
        """Test that both transforms are applied in order."""
        shape = Sphere(transform=scaling(2.0, 2.0, 2.0))
        p = StripePattern(WHITE, BLACK, transform=translation(0.5, 0.0, 0.0))
        assert p.pattern_at_object(shape, point(2.5, 0.0, 0.0)) == WHITE


class TestPatternSpace:
    """Tests for the world -> object -> pattern conversion."""

    def test_object_transform(self, point_pattern):
        """Test that the shape transform is applied first."""
        shape = Sphere(transform=scaling(2.0, 2.0, 2.0))
        assert point_pattern.pattern_at_object(shape, point(2.0, 3.0, 4.0)) == Color(1.0, 1.5, 2.0)

    def test_pattern_transform(self, point_pattern):
        """Test that the pattern transform is applied after the shape's."""
        point_pattern.transform = scaling(2.0, 2.0, 2.0)
        assert point_pattern.pattern_at_object(Sphere(), point(2.0, 3.0, 4.0)) == Color(1.0, 1.5, 2.0)

    def test_both_transforms(self, point_pattern):
        """Test the full chain with both transforms."""
        shape = Sphere(transform=scaling(2.0, 2.0, 2.0))
        point_pattern.transform = translation(0.5, 1.0, 1.5)
        result = point_pattern.pattern_at_object(shape, point(2.5, 3.0, 3.5))
        assert result == Color(0.75, 0.5, 0.25)

    def test_transform_setter_resets_cache(self, point_pattern):
        """Test that replacing the transform invalidates the cached inverse."""
        point_pattern.transform = scaling(2.0, 2.0, 2.0)
        assert point_pattern.inverse_transform == scaling(0.5, 0.5, 0.5)
        point_pattern.transform = translation(1.0, 0.0, 0.0)
        assert point_pattern.inverse_transform == translation(-1.0, 0.0, 0.0)

    def test_singular_pattern_transform(self):
        """Test that a singular pattern transform raises and names the pattern."""
        p = RingPattern(WHITE, BLACK, transform=scaling(0.0, 0.0, 0.0))
        with pytest.raises(SingularMatrixError, match="RingPattern"):
            p.pattern_at_object(Sphere(), point(0.0, 0.0, 0.0))


class TestOtherPatterns:
    """Tests for gradient, ring and checker."""

    @pytest.mark.parametrize(
        "x,expected",
        [
            (0.0, Color(1.0, 1.0, 1.0)),
            (0.25, Color(0.75, 0.75, 0.75)),
            (0.5, Color(0.5, 0.5, 0.5)),
            (0.75, Color(0.25, 0.25, 0.25)),
            (1.25, Color(0.75, 0.75, 0.75)),
        ],
    )
    def test_gradient(self, x, expected):
        """Test linear interpolation by the fractional part of x."""
        assert GradientPattern(WHITE, BLACK).pattern_at(point(x, 0.0, 0.0)) == expected

    @pytest.mark.parametrize(
        "at,expected",
        [
            (point(0.0, 0.0, 0.0), WHITE),
            (point(1.0, 0.0, 0.0), BLACK),
            (point(0.0, 0.0, 1.0), BLACK),
            (point(0.708, 0.0, 0.708), BLACK),
            (point(0.0, 5.0, 0.5), WHITE),
        ],
    )
    def test_ring(self, at, expected):
        """Test that rings extend in both x and z."""
        assert RingPattern(WHITE, BLACK).pattern_at(at) == expected

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_checker_repeats_along_each_axis(self, axis):
        """Test that checkers alternate along x, y and z."""
        p = CheckerPattern(WHITE, BLACK)

        def along(value):
            coords = [0.0, 0.0, 0.0]
            coords[axis] = value
            return point(*coords)

        assert p.pattern_at(along(0.0)) == WHITE
        assert p.pattern_at(along(0.99)) == WHITE
        assert p.pattern_at(along(1.01)) == BLACK

    def test_checker_negative_coordinates(self):
        """Test that checkers use floor for negative coordinates."""
        p = CheckerPattern(WHITE, BLACK)
        assert p.pattern_at(point(-0.5, 0.0, 0.0)) == BLACK
        assert p.pattern_at(point(-0.5, -0.5, 0.0)) == WHITE
