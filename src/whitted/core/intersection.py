"""Intersection records, hit selection and the shading frame.

This module holds the per-ray bookkeeping between geometry and shading:

- Intersection: a parametric distance t paired with the shape that was hit
- hit(): the visible intersection (smallest non-negative t)
- prepare_computations(): everything shading needs for one hit, including
  the refractive indices on both sides of the surface
- schlick(): Fresnel reflectance approximation for a prepared hit

The n1/n2 derivation walks every intersection along the ray in order,
keeping a list of the shapes the ray is currently inside. Entering a shape
appends it, leaving removes it, so nested and overlapping transparent
volumes each report the medium that actually surrounds the ray.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.sphere import Sphere
    >>> ray = Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
    >>> xs = Sphere().intersects(ray)
    >>> comps = prepare_computations(hit(xs), ray, xs)
    >>> comps.point
    Tuple(0.0, 0.0, -1.0, 1.0)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from whitted.config import EPSILON
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape

# Refractive index used when the ray is not inside any shape
VACUUM_INDEX = 1.0


@dataclass(frozen=True)
class Intersection:
    """A single ray-shape intersection.

    Attributes:
        t: Parametric distance along the ray.
        shape: The shape that was hit. Shapes compare by identity handle,
            so two intersections are equal when t and the shape match.
    """

    t: float
    shape: Shape


def sort_intersections(xs: Iterable[Intersection]) -> list[Intersection]:
    """Return the intersections ordered by ascending t."""
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Select the visible intersection.

    Args:
        xs: Intersections in any order.

    Returns:
        The intersection with the smallest non-negative t, or None if every
        intersection lies behind the ray origin (or there are none).
    """
    best: Intersection | None = None
    for i in xs:
        if i.t >= 0.0 and (best is None or i.t < best.t):
            best = i
    return best


@dataclass(frozen=True)
class Computations:
    """Precomputed shading frame for one resolved hit.

    Attributes:
        t: Parametric distance of the hit.
        shape: The shape that was hit.
        point: World-space hit point.
        eyev: Vector toward the eye (negated ray direction).
        normalv: Surface normal, flipped to face the eye when inside.
        inside: True if the ray originated inside the shape.
        reflectv: Ray direction reflected about the normal.
        over_point: Point nudged along the normal, for shadow and
            reflection rays.
        under_point: Point nudged against the normal, for refraction rays.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    shape: Shape
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool
    reflectv: Tuple
    over_point: Tuple
    under_point: Tuple
    n1: float
    n2: float


def _refractive_indices(target: Intersection, xs: Iterable[Intersection]) -> tuple[float, float]:
    containers: list[Shape] = []
    n1 = n2 = VACUUM_INDEX
    for i in sort_intersections(xs):
        is_target = i == target
        if is_target:
            n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

        if i.shape in containers:
            containers.remove(i.shape)
        else:
            containers.append(i.shape)

        if is_target:
            n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
            break
    return n1, n2


def prepare_computations(
    intersection: Intersection,
    ray: Ray,
    xs: Sequence[Intersection] | None = None,
) -> Computations:
    """Build the shading frame for a hit.

    Args:
        intersection: The hit to shade.
        ray: The ray that produced it.
        xs: Every intersection along the ray, used to derive n1 and n2.
            Defaults to just the hit itself.

    Returns:
        The Computations for the hit.
    """
    if xs is None:
        xs = [intersection]

    point = ray.position(intersection.t)
    eyev = -ray.direction
    normalv = intersection.shape.normal_at(point)
    inside = normalv.dot(eyev) < 0.0
    if inside:
        normalv = -normalv

    offset = normalv * EPSILON
    n1, n2 = _refractive_indices(intersection, xs)

    return Computations(
        t=intersection.t,
        shape=intersection.shape,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        reflectv=ray.direction.reflect(normalv),
        over_point=point + offset,
        under_point=point - offset,
        n1=n1,
        n2=n2,
    )


def schlick(comps: Computations) -> float:
    """Approximate the Fresnel reflectance at a prepared hit.

    Total internal reflection is only possible when leaving a denser medium
    (n1 > n2); in that case the transmitted angle replaces the incident one.

    Args:
        comps: The shading frame of the hit.

    Returns:
        Reflectance in [0, 1]; exactly 1.0 under total internal reflection.
    """
    cos = comps.eyev.dot(comps.normalv)

    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5
