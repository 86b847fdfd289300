"""Image export for rendered canvases.

Supported formats:
    - PPM (plain-text P3, no third-party dependency)
    - PNG (8-bit via Pillow)

Both writers clamp each channel to [0, 1] and scale to 0..255 with
round-half-up. The canvas itself is never modified.

Example:
    >>> from whitted.core.canvas import Canvas
    >>> from whitted.core.color import Color
    >>> from whitted.preview.export import canvas_to_ppm
    >>> canvas = Canvas(2, 1)
    >>> canvas.write_pixel(0, 0, Color(1.5, 0.0, 0.5))
    >>> print(canvas_to_ppm(canvas), end="")
    P3
    2 1
    255
    255 0 128 0 0 0
"""

from __future__ import annotations

import logging
import os

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from whitted.core.canvas import Canvas
from whitted.preview.display import (
    ImageLike,
    ToneMapMethod,
    as_image_array,
    process_image_for_display,
)

logger = logging.getLogger(__name__)

# PPM readers are only required to accept lines up to this length
PPM_MAX_LINE = 70


def image_to_uint8(
    image: ImageLike,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a linear image to 8-bit channels.

    Args:
        image: Canvas or (H, W, 3) linear array.
        tone_map: Tone mapping method.
        gamma: Display gamma.
        exposure: Exposure for the exposure operator.

    Returns:
        (H, W, 3) uint8 array.
    """
    processed = process_image_for_display(image, tone_map=tone_map, gamma=gamma, exposure=exposure)
    return np.floor(processed * 255.0 + 0.5).astype(np.uint8)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as plain-text PPM (P3).

    Each scanline starts on a new line and long scanlines are wrapped so
    no line exceeds 70 characters. The result ends with a newline.
    """
    pixels = image_to_uint8(canvas)
    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]

    for row in pixels:
        line = ""
        for value in row.reshape(-1):
            token = str(int(value))
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_MAX_LINE:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | os.PathLike[str]) -> None:
    """Write a canvas to a PPM file."""
    with open(filepath, "w", encoding="ascii") as f:
        f.write(canvas_to_ppm(canvas))
    logger.info("Wrote %dx%d PPM to %s", canvas.width, canvas.height, filepath)


def save_png(
    image: ImageLike,
    filepath: str | os.PathLike[str],
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> None:
    """Write a canvas or linear array to an 8-bit PNG file.

    Args:
        image: Canvas or (H, W, 3) linear array.
        filepath: Output path, normally ending in .png.
        tone_map: Tone mapping method.
        gamma: Display gamma.
        exposure: Exposure for the exposure operator.
    """
    pixels = image_to_uint8(image, tone_map=tone_map, gamma=gamma, exposure=exposure)
    PILImage.fromarray(pixels).save(filepath)
    logger.info("Wrote %dx%d PNG to %s", pixels.shape[1], pixels.shape[0], filepath)


def compute_rmse(image_a: ImageLike, image_b: ImageLike) -> float:
    """Root mean squared error between two images of the same shape.

    Raises:
        ValueError: If the shapes differ.
    """
    a = as_image_array(image_a)
    b = as_image_array(image_b)
    if a.shape != b.shape:
        raise ValueError(f"Image shapes must match: {a.shape} vs {b.shape}")
    return float(np.sqrt(np.mean((a - b) ** 2)))
