"""Axis-aligned cube with faces at +/-1 on every axis.

Intersection uses the slab method: each axis contributes an entry/exit
interval, and the ray hits the cube when the latest entry comes before the
earliest exit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple, vector
from whitted.geometry.base import LocalHit, ShapeKind


def check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Return the (tmin, tmax) interval for the slab -1 <= x <= 1 on one axis.

    A direction component within EPSILON of zero is treated as parallel to
    the slab, giving infinite bounds with the sign of the numerator.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = math.copysign(math.inf, tmin_numerator)
        tmax = math.copysign(math.inf, tmax_numerator)

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


@dataclass(frozen=True)
class Cube:
    """Cube spanning [-1, 1] on x, y and z."""

    kind: ClassVar[ShapeKind] = ShapeKind.CUBE

    def local_intersect(self, ray: Ray) -> list[LocalHit]:
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)
        if tmin > tmax:
            return []
        return [LocalHit(tmin), LocalHit(tmax)]

    def local_normal_at(self, local_point: Tuple, uv: tuple[float, float] = (0.0, 0.0)) -> Tuple:
        abs_x = abs(local_point.x)
        abs_y = abs(local_point.y)
        abs_z = abs(local_point.z)
        maxc = max(abs_x, abs_y, abs_z)

        if maxc == abs_x:
            return vector(local_point.x, 0.0, 0.0)
        if maxc == abs_y:
            return vector(0.0, local_point.y, 0.0)
        return vector(0.0, 0.0, local_point.z)
