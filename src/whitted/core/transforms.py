"""Affine 4x4 transform constructors and the camera view transform.

Every constructor starts from the 4x4 identity and fills in the cells the
transform needs. Transforms compose right to left: to scale, then rotate,
then translate, build ``translation(...) @ rotation_x(...) @ scaling(...)``.

Example:
    >>> import math
    >>> from whitted.core.transforms import rotation_x, scaling, translation
    >>> from whitted.core.tuples import point
    >>> t = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)
    >>> t @ point(1, 0, 1) == point(15, 0, 7)
    True
"""

import math

import numpy as np

from whitted.core.matrix import Matrix
from whitted.core.tuples import Tuple


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z). Vectors are unaffected."""
    cells = np.identity(4)
    cells[0, 3] = x
    cells[1, 3] = y
    cells[2, 3] = z
    return Matrix(cells)


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scale along each axis. Negative values reflect."""
    cells = np.identity(4)
    cells[0, 0] = x
    cells[1, 1] = y
    cells[2, 2] = z
    return Matrix(cells)


def rotation_x(radians: float) -> Matrix:
    """Rotate around the x axis (left-handed)."""
    c = math.cos(radians)
    s = math.sin(radians)
    cells = np.identity(4)
    cells[1, 1] = c
    cells[1, 2] = -s
    cells[2, 1] = s
    cells[2, 2] = c
    return Matrix(cells)


def rotation_y(radians: float) -> Matrix:
    """Rotate around the y axis (left-handed)."""
    c = math.cos(radians)
    s = math.sin(radians)
    cells = np.identity(4)
    cells[0, 0] = c
    cells[0, 2] = s
    cells[2, 0] = -s
    cells[2, 2] = c
    return Matrix(cells)


def rotation_z(radians: float) -> Matrix:
    """Rotate around the z axis (left-handed)."""
    c = math.cos(radians)
    s = math.sin(radians)
    cells = np.identity(4)
    cells[0, 0] = c
    cells[0, 1] = -s
    cells[1, 0] = s
    cells[1, 1] = c
    return Matrix(cells)


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each component in proportion to the other two.

    Args:
        xy: x moved in proportion to y.
        xz: x moved in proportion to z.
        yx: y moved in proportion to x.
        yz: y moved in proportion to z.
        zx: z moved in proportion to x.
        zy: z moved in proportion to y.
    """
    cells = np.identity(4)
    cells[0, 1] = xy
    cells[0, 2] = xz
    cells[1, 0] = yx
    cells[1, 2] = yz
    cells[2, 0] = zx
    cells[2, 1] = zy
    return Matrix(cells)


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Orient the world relative to an eye at from_point looking at to_point.

    Builds an orthonormal basis (left, true_up, -forward) and moves the
    scene so the eye sits at the origin.

    Args:
        from_point: Eye position.
        to_point: Point the eye is looking at.
        up: Approximate up vector; need not be exactly perpendicular.

    Returns:
        The 4x4 world-to-eye transform.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
