"""Unit tests for colors."""

import pytest

from whitted.core.color import BLACK, WHITE, Color


class TestColor:
    """Tests for color arithmetic."""

    def test_components(self):
        """Test that colors expose red, green and blue."""
        c = Color(-0.5, 0.4, 1.7)
        assert c.r == pytest.approx(-0.5)
        assert c.g == pytest.approx(0.4)
        assert c.b == pytest.approx(1.7)

    def test_add_and_subtract(self):
        """Test adding and subtracting colors."""
        c1 = Color(0.9, 0.6, 0.75)
        c2 = Color(0.7, 0.1, 0.25)
        assert c1 + c2 == Color(1.6, 0.7, 1.0)
        assert c1 - c2 == Color(0.2, 0.5, 0.5)

    def test_scalar_multiply(self):
        """Test scaling a color on either side."""
        assert Color(0.2, 0.3, 0.4) * 2.0 == Color(0.4, 0.6, 0.8)
        assert 2.0 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)

    def test_hadamard_product(self):
        """Test that multiplying colors is component-wise."""
        assert Color(1.0, 0.2, 0.4) * Color(0.9, 1.0, 0.1) == Color(0.9, 0.2, 0.04)

    def test_values_are_not_clamped(self):
        """Test that accumulation may exceed 1.0."""
        assert (WHITE + WHITE).r == pytest.approx(2.0)

    def test_constants(self):
        """Test the black and white constants."""
        assert BLACK == Color(0.0, 0.0, 0.0)
        assert WHITE == Color(1.0, 1.0, 1.0)
