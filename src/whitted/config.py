"""Render configuration and shared numeric constants.

Example:
    >>> from whitted.config import RenderSettings
    >>> settings = RenderSettings(max_depth=3, workers=4, backend="thread")
    >>> settings.resolved_workers()
    4
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

# Offset used for over/under points and for the plane parallel test.
# Tuned for unit-scale primitives.
EPSILON = 1e-10

# Recursion budget handed to color_at for every camera ray
DEFAULT_MAX_DEPTH = 5

Backend = Literal["process", "thread"]


@dataclass
class RenderSettings:
    """Settings for a single call to Camera.render.

    Attributes:
        max_depth: Recursion budget for reflection and refraction rays.
            0 disables both. Default is 5.
        workers: Number of workers in the render pool. None uses the
            machine's CPU count; 1 renders in-process without a pool.
        backend: "process" for a ProcessPoolExecutor, "thread" for a
            ThreadPoolExecutor.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    workers: int | None = None
    backend: Backend = "process"

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth = {self.max_depth} is negative.")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers = {self.workers} must be at least 1.")
        if self.backend not in ("process", "thread"):
            raise ValueError(f"Unknown render backend: {self.backend}")

    def resolved_workers(self) -> int:
        """Get the effective worker count."""
        if self.workers is not None:
            return self.workers
        return os.cpu_count() or 1
