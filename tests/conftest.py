"""Pytest configuration for whitted tests.

Shared fixtures: the reference two-sphere world and a pattern that
reports its pattern-space point as a color, which makes transform
plumbing visible in assertions.
"""

import pytest

from whitted.core.color import Color
from whitted.core.tuples import Tuple
from whitted.materials.pattern import Pattern
from whitted.scene.presets import default_world as make_default_world


class PointPattern(Pattern):
    """Pattern whose color is the pattern-space point itself."""

    def __init__(self) -> None:
        super().__init__(Color(1.0, 1.0, 1.0), Color(0.0, 0.0, 0.0))

    def pattern_at(self, pattern_point: Tuple) -> Color:
        return Color(pattern_point.x, pattern_point.y, pattern_point.z)


@pytest.fixture
def default_world():
    """Fresh reference world for each test."""
    return make_default_world()


@pytest.fixture
def point_pattern():
    """Pattern that echoes its pattern-space point as a color."""
    return PointPattern()
