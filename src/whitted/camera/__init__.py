"""Camera module for primary rays and rendering.

Components:
    camera: Pinhole camera with a scanline-parallel render

Ray generation uses pixel coordinates:
    x in [0, hsize): left to right across the image
    y in [0, vsize): top to bottom across the image

Each render call owns its worker pool; nothing about the pool outlives
the call.
"""

from .camera import Camera, ProgressCallback

__all__ = [
    "Camera",
    "ProgressCallback",
]
