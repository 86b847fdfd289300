"""Preview module for output and visualization.

Components:
    display: Tone mapping, gamma and a Matplotlib preview window
    export: PPM and PNG writers plus image comparison

The canvas keeps linear, unclamped color. Clamping, tone mapping and
gamma only ever happen on the way out, in this package.

Example:
    >>> from whitted.preview import save_png, show_preview
    >>> show_preview(canvas)
    >>> save_png(canvas, "scene.png")
"""

from .display import (
    ToneMapMethod,
    apply_gamma,
    process_image_for_display,
    show_preview,
    tone_map_exposure,
    tone_map_reinhard,
)
from .export import (
    canvas_to_ppm,
    compute_rmse,
    image_to_uint8,
    save_png,
    save_ppm,
)

__all__ = [
    # Display
    "show_preview",
    "tone_map_reinhard",
    "tone_map_exposure",
    "apply_gamma",
    "process_image_for_display",
    "ToneMapMethod",
    # Export
    "canvas_to_ppm",
    "save_ppm",
    "save_png",
    "image_to_uint8",
    "compute_rmse",
]
