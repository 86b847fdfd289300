"""Scene module for lights, worlds and preset scenes.

Components:
    light: Point light and the Phong lighting function
    world: World container with recursive reflection and refraction
    presets: Reference two-sphere world and a demo scene

A World holds one light and an ordered list of shapes. It is never
mutated while rendering, so workers share it without locking.
"""

from .light import PointLight, lighting
from .presets import create_showcase_scene, default_world
from .world import MissingLightError, World

__all__ = [
    "PointLight",
    "lighting",
    "World",
    "MissingLightError",
    "default_world",
    "create_showcase_scene",
]
