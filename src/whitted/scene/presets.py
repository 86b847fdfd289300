"""Ready-made scenes.

default_world() is the two-sphere reference world that shading tests are
written against. create_showcase_scene() is a small demo: three spheres
standing on a floor in front of two walls.

The floor and walls are planes rather than flattened spheres. A sphere
squashed to 0.01 units leaves its hit points far off unit scale, and the
1e-10 surface offset then lets shadow rays hit their own surface.

Example:
    >>> from whitted.scene.presets import create_showcase_scene
    >>> world, camera = create_showcase_scene(width=100, height=50)
    >>> len(world.shapes)
    6
"""

from __future__ import annotations

import math

from whitted.camera.camera import Camera
from whitted.core.color import Color
from whitted.core.transform import Transform, scaling, view_transform
from whitted.core.tuples import point, vector
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.materials.material import Material
from whitted.scene.light import PointLight
from whitted.scene.world import World

WALL_COLOR = Color(1.0, 0.9, 0.9)


def default_world() -> World:
    """Create the reference world.

    A white light at (-10, 10, -10), an outer unit sphere with color
    (0.8, 1.0, 0.6), diffuse 0.7 and specular 0.2, and an inner sphere
    scaled by 0.5 with the default material.
    """
    light = PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))
    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
    return World(light=light, shapes=[outer, inner])


def _backdrop(transform: Transform) -> Plane:
    return Plane(transform=transform.matrix, material=Material(color=WALL_COLOR, specular=0.0))


def create_showcase_scene(width: int = 100, height: int = 50) -> tuple[World, Camera]:
    """Create the demo scene and a camera framing it.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Tuple of (world, camera).
    """
    world = World(light=PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0)))

    floor = _backdrop(Transform())
    left_wall = _backdrop(Transform().translate(0.0, 0.0, 5.0).rotate_y(-math.pi / 4.0).rotate_x(math.pi / 2.0))
    right_wall = _backdrop(Transform().translate(0.0, 0.0, 5.0).rotate_y(math.pi / 4.0).rotate_x(math.pi / 2.0))

    middle = Sphere(
        transform=Transform().translate(-0.5, 1.0, 0.5).matrix,
        material=Material(color=Color(0.1, 1.0, 0.5), diffuse=0.7, specular=0.3),
    )
    right = Sphere(
        transform=Transform().translate(1.5, 0.5, -0.5).scale(0.5, 0.5, 0.5).matrix,
        material=Material(color=Color(0.5, 1.0, 0.1), diffuse=0.7, specular=0.3),
    )
    left = Sphere(
        transform=Transform().translate(-1.8, 1.8, -1.0).scale(0.33, 0.33, 0.33).matrix,
        material=Material(color=Color(1.0, 0.8, 0.1), diffuse=0.7, specular=0.3),
    )

    world.add(floor, left_wall, right_wall, middle, right, left)

    camera = Camera(
        width,
        height,
        math.pi / 3.0,
        transform=view_transform(point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)),
    )
    return world, camera
