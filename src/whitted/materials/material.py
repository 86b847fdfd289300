"""Phong surface material.

A Material describes how a surface responds to light: its base color (or
a procedural pattern), the three Phong coefficients, and how much of the
recursive reflected and refracted light it lets through.

Example:
    >>> from whitted.core.color import Color
    >>> from whitted.materials.material import Material
    >>> glass = Material(color=Color(0.1, 0.1, 0.1), transparency=0.9, refractive_index=1.5)
    >>> glass.reflectiveness
    0.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from whitted.core.color import Color
from whitted.core.tuples import Tuple
from whitted.materials.pattern import Pattern

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape

# Common refractive indices
VACUUM = 1.0
AIR = 1.00029
WATER = 1.333
GLASS = 1.5
DIAMOND = 2.417


@dataclass
class Material:
    """Surface appearance parameters.

    Attributes:
        color: Flat base color, used when no pattern is set.
        ambient: Ambient reflection coefficient, conventionally in [0, 1].
        diffuse: Diffuse reflection coefficient, conventionally in [0, 1].
        specular: Specular reflection coefficient, conventionally in [0, 1].
        shininess: Phong exponent; larger values give a tighter highlight.
        reflectiveness: Fraction of reflected light added, in [0, 1].
        transparency: Fraction of refracted light added, in [0, 1].
        refractive_index: Index of refraction (1.0 is vacuum).
        pattern: Optional procedural pattern replacing the flat color.
    """

    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflectiveness: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM
    pattern: Pattern | None = None

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"{name} = {value} is negative.")
        if self.shininess <= 0.0:
            raise ValueError(f"shininess = {self.shininess} must be positive.")
        for name in ("reflectiveness", "transparency"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} = {value} is outside [0, 1].")
        if self.refractive_index <= 0.0:
            raise ValueError(
                f"Index of refraction = {self.refractive_index} must be positive "
                "(1.0 is vacuum)."
            )

    def color_at(self, shape: Shape, world_point: Tuple) -> Color:
        """Base color at a world-space point on the given shape."""
        if self.pattern is None:
            return self.color
        return self.pattern.pattern_at_object(shape, world_point)
