"""Unit-radius cylinder along the y axis, optionally truncated and capped.

The wall test solves x^2 + z^2 = 1 for the ray; each root is kept only when
its y lies strictly between minimum and maximum. A closed cylinder also
tests the two end caps (discs of radius 1 at y = minimum and y = maximum).
A ray that misses the infinite wall can still pass through both caps, so
the caps are tested on every path.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.cylinder import Cylinder
    >>> c = Cylinder(minimum=1.0, maximum=2.0, closed=True)
    >>> len(c.local_intersect(Ray(point(0, 3, 0), vector(0, -1, 0))))
    2
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple, vector
from whitted.geometry.base import LocalHit, ShapeKind


def check_cap(ray: Ray, t: float, radius: float) -> bool:
    """Whether the ray at t lies within radius of the y axis."""
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= radius * radius


@dataclass(frozen=True)
class Cylinder:
    """Cylinder of radius 1 around the y axis.

    Attributes:
        minimum: Lower y bound (exclusive for the wall), default -inf.
        maximum: Upper y bound (exclusive for the wall), default +inf.
        closed: Whether the ends are capped.
    """

    minimum: float = -math.inf
    maximum: float = math.inf
    closed: bool = False

    kind: ClassVar[ShapeKind] = ShapeKind.CYLINDER

    def intersect_caps(self, ray: Ray) -> list[LocalHit]:
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return []

        xs = []
        t = (self.minimum - ray.origin.y) / ray.direction.y
        if check_cap(ray, t, 1.0):
            xs.append(LocalHit(t))

        t = (self.maximum - ray.origin.y) / ray.direction.y
        if check_cap(ray, t, 1.0):
            xs.append(LocalHit(t))
        return xs

    def local_intersect(self, ray: Ray) -> list[LocalHit]:
        direction = ray.direction
        origin = ray.origin

        a = direction.x**2 + direction.z**2
        if abs(a) < EPSILON:
            # Parallel to the axis: only the caps can be hit
            return self.intersect_caps(ray)

        b = 2.0 * origin.x * direction.x + 2.0 * origin.z * direction.z
        c = origin.x**2 + origin.z**2 - 1.0
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return self.intersect_caps(ray)

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        if t0 > t1:
            t0, t1 = t1, t0

        xs = []
        y0 = origin.y + t0 * direction.y
        if self.minimum < y0 < self.maximum:
            xs.append(LocalHit(t0))

        y1 = origin.y + t1 * direction.y
        if self.minimum < y1 < self.maximum:
            xs.append(LocalHit(t1))

        xs.extend(self.intersect_caps(ray))
        return xs

    def local_normal_at(self, local_point: Tuple, uv: tuple[float, float] = (0.0, 0.0)) -> Tuple:
        dist = local_point.x**2 + local_point.z**2

        if dist < 1.0 and local_point.y >= self.maximum - EPSILON:
            return vector(0.0, 1.0, 0.0)
        if dist < 1.0 and local_point.y <= self.minimum + EPSILON:
            return vector(0.0, -1.0, 0.0)
        return vector(local_point.x, 0.0, local_point.z)
