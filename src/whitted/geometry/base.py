"""Types shared by every geometry variant.

ShapeKind tags the closed set of variants the Shape wrapper dispatches on;
LocalHit is what a variant's local_intersect() returns before the wrapper
turns it into a world-level Intersection.
"""

from enum import IntEnum
from typing import NamedTuple


class ShapeKind(IntEnum):
    """Geometry variant tag."""

    SPHERE = 0
    PLANE = 1
    CUBE = 2
    CYLINDER = 3
    CONE = 4
    TRIANGLE = 5
    SMOOTH_TRIANGLE = 6
    GROUP = 7


class LocalHit(NamedTuple):
    """An object-space intersection: ray parameter plus barycentric u, v.

    u and v are only meaningful for triangles.
    """

    t: float
    u: float = 0.0
    v: float = 0.0
