"""World container and recursive Whitted shading.

color_at() is the entry point for a camera ray. It finds the hit, builds
the shading frame and hands it to shade_hit(), which adds three terms:

    surface   = Phong lighting at the hit, with a shadow test
    reflected = color_at(reflected ray) * reflectiveness
    refracted = color_at(refracted ray) * transparency

Both secondary rays recurse with one less unit of depth. Recursion stops
at depth 0, on a miss, on an opaque and non-reflective surface, or under
total internal reflection. None of these stops is an error; each simply
contributes black.

A world is read-only while it is being rendered, so the same instance can
be shared across render workers.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from whitted.config import DEFAULT_MAX_DEPTH
from whitted.core.color import BLACK, Color
from whitted.core.intersection import (
    Computations,
    Intersection,
    hit,
    prepare_computations,
    schlick,
    sort_intersections,
)
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple
from whitted.geometry.shape import Shape
from whitted.scene.light import PointLight, lighting


class MissingLightError(RuntimeError):
    """Raised when shading is requested from a world with no light."""


class World:
    """A light and an ordered collection of shapes.

    Attributes:
        light: The single point light, or None for an unlit world.
        shapes: Shapes in insertion order.
        fresnel_blend: When True, a surface that is both reflective and
            transparent weights its reflected term by the Schlick
            reflectance and its refracted term by the remainder. The
            default adds both terms unweighted.
    """

    def __init__(
        self,
        light: PointLight | None = None,
        shapes: Iterable[Shape] = (),
        fresnel_blend: bool = False,
    ) -> None:
        self.light = light
        self.shapes: list[Shape] = list(shapes)
        self.fresnel_blend = fresnel_blend

    def add(self, *shapes: Shape) -> None:
        self.shapes.extend(shapes)

    def require_light(self) -> PointLight:
        """Return the light, raising MissingLightError if there is none."""
        if self.light is None:
            raise MissingLightError("World has no light; add a PointLight before shading.")
        return self.light

    def intersect_world(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray with every shape, sorted by ascending t."""
        xs: list[Intersection] = []
        for shape in self.shapes:
            xs.extend(shape.intersects(ray))
        return sort_intersections(xs)

    def is_shadowed(self, point: Tuple) -> bool:
        """Check whether anything lies between a point and the light.

        Raises:
            MissingLightError: If the world has no light.
        """
        light = self.require_light()
        to_light = light.position - point
        distance = to_light.magnitude()
        ray = Ray(point, to_light.normalize())
        h = hit(self.intersect_world(ray))
        return h is not None and h.t < distance

    def shade_hit(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        """Color of a prepared hit, including reflection and refraction.

        Args:
            comps: Shading frame of the hit.
            remaining: Recursion budget for secondary rays.

        Raises:
            MissingLightError: If the world has no light.
        """
        light = self.require_light()
        material = comps.shape.material
        surface = lighting(
            material,
            comps.shape,
            light,
            comps.over_point,
            comps.eyev,
            comps.normalv,
            self.is_shadowed(comps.over_point),
        )
        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if self.fresnel_blend and material.reflectiveness > 0.0 and material.transparency > 0.0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def reflected_color(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        reflectiveness = comps.shape.material.reflectiveness
        if remaining <= 0 or reflectiveness == 0.0:
            return BLACK
        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflectiveness

    def refracted_color(self, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        """Color seen through a transparent surface, via Snell's law.

        Returns black at depth 0, for opaque surfaces and under total
        internal reflection.
        """
        transparency = comps.shape.material.transparency
        if remaining <= 0 or transparency == 0.0:
            return BLACK

        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def color_at(self, ray: Ray, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
        """Trace a ray into the world.

        Args:
            ray: The ray to trace.
            remaining: Recursion budget for reflection and refraction.

        Returns:
            The shaded color, or black when the ray hits nothing.
        """
        xs = self.intersect_world(ray)
        h = hit(xs)
        if h is None:
            return BLACK
        return self.shade_hit(prepare_computations(h, ray, xs), remaining)

    def __repr__(self) -> str:
        return f"World(light={self.light!r}, shapes={len(self.shapes)})"
