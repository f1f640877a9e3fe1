"""Pinhole camera and the render loop.

The camera sits at the origin of its own space looking down -z, with the
canvas one unit in front of it. field_of_view spans the longer side of the
image; pixel_size is derived so pixels are square.

Rendering walks the image row by row. render_rows() is a generator that
yields after each finished row, so callers can report progress or stop
between rows; render() drives it and optionally reports through a callback.

Example:
    >>> import math
    >>> from whitted.camera.camera import Camera
    >>> from whitted.core.transforms import view_transform
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.scene.world import World
    >>> camera = Camera(11, 11, math.pi / 2)
    >>> camera.transform = view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0))
    >>> image = camera.render(World.default())
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Generator
from typing import TYPE_CHECKING

from whitted.core.config import MAX_RECURSION_DEPTH
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import point
from whitted.preview.canvas import Canvas

if TYPE_CHECKING:
    from whitted.scene.world import World

logger = logging.getLogger(__name__)

# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


class Camera:
    """Maps canvas pixels to world-space rays.

    Attributes:
        hsize: Canvas width in pixels.
        vsize: Canvas height in pixels.
        field_of_view: Angle (radians) covered by the longer canvas side.
        half_width: Half the canvas width in world units at z = -1.
        half_height: Half the canvas height in world units at z = -1.
        pixel_size: World-space size of one pixel at z = -1.
    """

    def __init__(self, hsize: int, vsize: int, field_of_view: float) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = Matrix.identity()

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
        self._inverse = matrix.inverse()
        self._transform = matrix

    def ray_for_pixel(self, px: float, py: float) -> Ray:
        """World-space ray through the center of pixel (px, py)."""
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse.multiply_tuple(point(world_x, world_y, -1.0))
        origin = self._inverse.multiply_tuple(point(0.0, 0.0, 0.0))
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render_rows(
        self,
        world: World,
        canvas: Canvas,
        max_depth: int = MAX_RECURSION_DEPTH,
    ) -> Generator[tuple[int, int], None, None]:
        """Render into canvas one row at a time, yielding after each row.

        Args:
            world: The scene to render.
            canvas: Target canvas, at least hsize x vsize.
            max_depth: Recursion budget for reflection and refraction.

        Yields:
            Tuple of (rows_done, total_rows).

        Example:
            >>> canvas = Canvas(camera.hsize, camera.vsize)
            >>> for done, total in camera.render_rows(world, canvas):
            ...     print(f"{done}/{total} rows")
        """
        for y in range(self.vsize):
            for x in range(self.hsize):
                ray = self.ray_for_pixel(x, y)
                canvas.write_pixel(x, y, world.color_at(ray, max_depth))
            logger.debug("Rendered row %d/%d", y + 1, self.vsize)
            yield (y + 1, self.vsize)

    def render(
        self,
        world: World,
        *,
        max_depth: int = MAX_RECURSION_DEPTH,
        callback: ProgressCallback | None = None,
    ) -> Canvas:
        """Render the world to a new canvas.

        Args:
            world: The scene to render.
            max_depth: Recursion budget for reflection and refraction.
            callback: Optional function called after each row with
                (rows_done, total_rows).

        Returns:
            A canvas of hsize x vsize pixels.
        """
        canvas = Canvas(self.hsize, self.vsize)
        start = time.perf_counter()
        for done, total in self.render_rows(world, canvas, max_depth):
            if callback is not None:
                callback(done, total)
        logger.info(
            "Rendered %dx%d image in %.2fs", self.hsize, self.vsize, time.perf_counter() - start
        )
        return canvas
