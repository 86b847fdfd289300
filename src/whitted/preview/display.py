"""Tone mapping and Matplotlib preview for rendered canvases.

The renderer produces linear, unclamped RGB. Everything that squeezes
those values into a displayable [0, 1] range lives here:

    tone map (optional) -> gamma (optional) -> clamp

The default pipeline is a plain clamp, which matches how Phong-shaded
scenes are normally authored. Reinhard and exposure mapping help with
scenes whose highlights run well past 1.0.

Example:
    >>> from whitted.preview.display import show_preview
    >>> show_preview(canvas, tone_map="reinhard")
"""

from __future__ import annotations

from typing import Literal, Union

import numpy as np
import numpy.typing as npt

from whitted.core.canvas import Canvas

ToneMapMethod = Literal["none", "reinhard", "exposure"]

ImageLike = Union[Canvas, npt.NDArray[np.float64]]


def as_image_array(image: ImageLike) -> npt.NDArray[np.float64]:
    """Get an (H, W, 3) float64 array from a canvas or an array."""
    if isinstance(image, Canvas):
        return image.to_numpy()
    array = np.asarray(image, dtype=np.float64)
    if array.ndim != 3 or array.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (H, W, 3), got {array.shape}")
    return array


def tone_map_reinhard(image: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Reinhard operator c / (1 + c), applied per channel."""
    image = np.maximum(image, 0.0)
    return image / (1.0 + image)


def tone_map_exposure(image: npt.NDArray[np.float64], exposure: float = 1.0) -> npt.NDArray[np.float64]:
    """Exposure operator 1 - exp(-c * exposure).

    Args:
        image: Linear image.
        exposure: Brightness multiplier; larger values brighten.
    """
    image = np.maximum(image, 0.0)
    return 1.0 - np.exp(-image * exposure)


def apply_gamma(image: npt.NDArray[np.float64], gamma: float = 1.0) -> npt.NDArray[np.float64]:
    """Encode a [0, 1] image with out = in^(1/gamma).

    Values are clamped first so negative channels never reach the power.
    A gamma of 1.0 returns the input untouched.
    """
    if gamma <= 0.0:
        raise ValueError(f"gamma = {gamma} must be positive.")
    if gamma == 1.0:
        return image
    return np.power(np.clip(image, 0.0, 1.0), 1.0 / gamma)


def process_image_for_display(
    image: ImageLike,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
) -> npt.NDArray[np.float64]:
    """Run the full display pipeline on a linear image.

    Args:
        image: Canvas or (H, W, 3) linear array.
        tone_map: "none", "reinhard" or "exposure".
        gamma: Display gamma; 1.0 leaves values linear.
        exposure: Used by the exposure operator only.

    Returns:
        A new (H, W, 3) array in [0, 1].

    Raises:
        ValueError: For an unknown tone mapping method.
    """
    result = as_image_array(image)

    if tone_map == "reinhard":
        result = tone_map_reinhard(result)
    elif tone_map == "exposure":
        result = tone_map_exposure(result, exposure)
    elif tone_map != "none":
        raise ValueError(f"Unknown tone mapping method: {tone_map}")

    return np.clip(apply_gamma(result, gamma), 0.0, 1.0)


def show_preview(
    image: ImageLike,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
    exposure: float = 1.0,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Show a rendered image in a Matplotlib window.

    Args:
        image: Canvas or (H, W, 3) linear array.
        tone_map: Tone mapping method.
        gamma: Display gamma.
        exposure: Exposure for the exposure operator.
        title: Figure title; defaults to the image size.
        figsize: Figure size in inches.
        block: Whether to block until the window is closed.
    """
    import matplotlib.pyplot as plt

    display_image = process_image_for_display(image, tone_map=tone_map, gamma=gamma, exposure=exposure)
    height, width = display_image.shape[:2]

    if title is None:
        title = f"Render {width}x{height}"
        if tone_map != "none":
            title += f" ({tone_map})"

    _, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image, interpolation="nearest")
    ax.axis("off")
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
