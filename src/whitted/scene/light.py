"""Point light and the Phong reflection model.

lighting() combines three terms for one light:

    ambient  = effective_color * material.ambient
    diffuse  = effective_color * material.diffuse * dot(lightv, normalv)
    specular = light.intensity * material.specular * dot(reflectv, eyev)^shininess

where effective_color is the surface color multiplied channel-wise by the
light intensity. A point in shadow receives the ambient term only.

Example:
    >>> from whitted.core.color import Color
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.sphere import Sphere
    >>> from whitted.materials.material import Material
    >>> light = PointLight(point(0.0, 0.0, -10.0), Color(1.0, 1.0, 1.0))
    >>> eyev = vector(0.0, 0.0, -1.0)
    >>> normalv = vector(0.0, 0.0, -1.0)
    >>> color = lighting(Material(), Sphere(), light, point(0.0, 0.0, 0.0), eyev, normalv)
    >>> color == Color(1.9, 1.9, 1.9)
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.color import BLACK, Color
from whitted.core.tuples import Tuple
from whitted.geometry.shape import Shape
from whitted.materials.material import Material


@dataclass
class PointLight:
    """A light with no size, radiating equally in every direction.

    Attributes:
        position: World-space position (a point).
        intensity: Color and brightness of the light.
    """

    position: Tuple
    intensity: Color


def lighting(
    material: Material,
    shape: Shape,
    light: PointLight,
    point: Tuple,
    eyev: Tuple,
    normalv: Tuple,
    in_shadow: bool = False,
) -> Color:
    """Shade one surface point lit by one point light.

    Args:
        material: Surface material.
        shape: Shape being shaded, used to evaluate the material's pattern.
        light: The light source.
        point: World-space point being shaded.
        eyev: Unit vector toward the eye.
        normalv: Unit surface normal.
        in_shadow: True if the point is occluded from the light.

    Returns:
        The unclamped surface color.
    """
    effective_color = material.color_at(shape, point) * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    lightv = (light.position - point).normalize()
    light_dot_normal = lightv.dot(normalv)

    if light_dot_normal < 0.0:
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)

    reflectv = (-lightv).reflect(normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
