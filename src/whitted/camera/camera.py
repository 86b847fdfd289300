"""Pinhole camera and parallel scanline renderer.

The camera sits at the origin of its own space looking down -z, with a
virtual image plane at z = -1. The field of view spans the longer image
side, and the camera transform (usually from view_transform) maps world
space into camera space.

Rendering fans out one task per scanline over a concurrent.futures pool
that is created for, and closed by, each render call. Every pixel depends
only on its own ray and the read-only world, so rows are written back at
their index in whatever order they finish.

Example:
    >>> import math
    >>> from whitted.camera.camera import Camera
    >>> from whitted.config import RenderSettings
    >>> from whitted.scene.presets import default_world
    >>> camera = Camera(11, 11, math.pi / 2.0)
    >>> canvas = camera.render(default_world(), RenderSettings(workers=1))
    >>> canvas.width, canvas.height
    (11, 11)
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from concurrent.futures import (
    Executor,
    Future,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from whitted.config import DEFAULT_MAX_DEPTH, RenderSettings
from whitted.core.canvas import Canvas
from whitted.core.matrix import Matrix, SingularMatrixError
from whitted.core.ray import Ray
from whitted.core.tuples import point

if TYPE_CHECKING:
    from whitted.scene.world import World

logger = logging.getLogger(__name__)

# Called after each finished scanline with (rows_done, rows_total)
ProgressCallback = Callable[[int, int], None]


class Camera:
    """A pinhole camera producing one ray per pixel center.

    Attributes:
        hsize: Horizontal resolution in pixels.
        vsize: Vertical resolution in pixels.
        field_of_view: Angle in radians covered by the longer image side.
        half_width: Half the image plane width at z = -1.
        half_height: Half the image plane height at z = -1.
        pixel_size: World-space size of one pixel on the image plane.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix | None = None,
    ) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"field_of_view = {field_of_view} must be in (0, pi).")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self._transform = transform if transform is not None else Matrix.identity(4)
        self._inverse: Matrix | None = None

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / hsize

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self._transform = matrix
        self._inverse = None

    @property
    def inverse_transform(self) -> Matrix:
        """Camera-to-world matrix, computed once and cached.

        Raises:
            SingularMatrixError: If the camera transform cannot be inverted.
        """
        if self._inverse is None:
            try:
                self._inverse = self._transform.inverse()
            except SingularMatrixError as exc:
                logger.error("Transform of %r is singular", self)
                raise SingularMatrixError(f"{self!r} has a non-invertible transform: {exc}") from exc
        return self._inverse

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Create the world-space ray through the center of a pixel.

        Args:
            px: Column, 0 at the left.
            py: Row, 0 at the top.

        Returns:
            A ray from the camera origin with a normalized direction.
        """
        # Image plane x grows to the left since the camera looks down -z
        world_x = self.half_width - (px + 0.5) * self.pixel_size
        world_y = self.half_height - (py + 0.5) * self.pixel_size

        inverse = self.inverse_transform
        pixel = inverse @ point(world_x, world_y, -1.0)
        origin = inverse @ point(0.0, 0.0, 0.0)
        return Ray(origin, (pixel - origin).normalize())

    def render_row(self, world: World, y: int, max_depth: int = DEFAULT_MAX_DEPTH) -> npt.NDArray[np.float64]:
        """Trace every pixel of one scanline.

        Returns:
            Array of shape (hsize, 3) with unclamped linear RGB values.
        """
        row = np.zeros((self.hsize, 3), dtype=np.float64)
        for x in range(self.hsize):
            row[x] = world.color_at(self.ray_for_pixel(x, y), max_depth).data
        return row

    def render(
        self,
        world: World,
        settings: RenderSettings | None = None,
        *,
        executor: Executor | None = None,
        callback: ProgressCallback | None = None,
    ) -> Canvas:
        """Render the world into a new canvas.

        Args:
            world: Scene to render. It must not be mutated during the call.
            settings: Recursion depth and worker pool configuration.
                Defaults to RenderSettings().
            executor: Optional caller-owned executor. When given, it is
                used as is and not shut down; settings.workers and
                settings.backend are ignored.
            callback: Optional function called after each finished row
                with (rows_done, rows_total).

        Returns:
            Canvas of size hsize x vsize.

        Raises:
            MissingLightError: If the world has no light. Nothing is
                scheduled in that case.
            SingularMatrixError: If the camera or any shape or pattern has
                a non-invertible transform. Nothing is scheduled in that
                case.
            Exception: Whatever a row raises while rendering; the pending
                rows are cancelled first.
        """
        if settings is None:
            settings = RenderSettings()

        world.require_light()
        # Every inverse is cached here; workers only read the camera and world
        _ = self.inverse_transform
        for shape in world.shapes:
            _ = shape.inverse_transform
            if shape.material.pattern is not None:
                _ = shape.material.pattern.inverse_transform

        canvas = Canvas(self.hsize, self.vsize)
        workers = settings.resolved_workers()
        start = time.perf_counter()

        if executor is not None:
            logger.info("Rendering %dx%d with a caller-provided executor", self.hsize, self.vsize)
            self._render_with(executor, world, canvas, settings.max_depth, callback)
        elif workers == 1:
            logger.info("Rendering %dx%d in-process", self.hsize, self.vsize)
            for y in range(self.vsize):
                canvas.write_row(y, self.render_row(world, y, settings.max_depth))
                logger.debug("Row %d done", y)
                if callback is not None:
                    callback(y + 1, self.vsize)
        else:
            logger.info(
                "Rendering %dx%d with %d %s workers",
                self.hsize,
                self.vsize,
                workers,
                settings.backend,
            )
            pool_cls = ProcessPoolExecutor if settings.backend == "process" else ThreadPoolExecutor
            with pool_cls(max_workers=workers) as pool:
                self._render_with(pool, world, canvas, settings.max_depth, callback)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return canvas

    def _render_with(
        self,
        executor: Executor,
        world: World,
        canvas: Canvas,
        max_depth: int,
        callback: ProgressCallback | None,
    ) -> None:
        futures: dict[Future[npt.NDArray[np.float64]], int] = {
            executor.submit(_render_row, self, world, y, max_depth): y for y in range(self.vsize)
        }
        done = 0
        for future in as_completed(futures):
            y = futures[future]
            try:
                row = future.result()
            except Exception:
                logger.error("Row %d failed, cancelling remaining rows", y)
                for pending in futures:
                    pending.cancel()
                raise
            canvas.write_row(y, row)
            done += 1
            logger.debug("Row %d done (%d/%d)", y, done, self.vsize)
            if callback is not None:
                callback(done, self.vsize)

    def __repr__(self) -> str:
        return f"Camera(hsize={self.hsize}, vsize={self.vsize}, field_of_view={self.field_of_view})"


def _render_row(camera: Camera, world: World, y: int, max_depth: int) -> npt.NDArray[np.float64]:
    # Module-level so process pools can pickle it
    return camera.render_row(world, y, max_depth)
