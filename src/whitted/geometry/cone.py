"""Double-napped cone along the y axis, optionally truncated and capped.

The wall satisfies x^2 + z^2 = y^2, so the radius at height y is |y|. The
quadratic degenerates when the ray is parallel to one of the cone's halves
(a == 0): it then crosses the wall at most once, at t = -c / 2b.

Wall and cap handling mirror the cylinder: every wall root is gated by
minimum < y < maximum, and the caps are tested even when the wall quadratic
has no real roots.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple, vector
from whitted.geometry.base import LocalHit, ShapeKind
from whitted.geometry.cylinder import check_cap


@dataclass(frozen=True)
class Cone:
    """Cone with apex at the origin, opening up and down the y axis.

    Attributes:
        minimum: Lower y bound (exclusive for the wall), default -inf.
        maximum: Upper y bound (exclusive for the wall), default +inf.
        closed: Whether the ends are capped.
    """

    minimum: float = -math.inf
    maximum: float = math.inf
    closed: bool = False

    kind: ClassVar[ShapeKind] = ShapeKind.CONE

    def intersect_caps(self, ray: Ray) -> list[LocalHit]:
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return []

        xs = []
        t = (self.minimum - ray.origin.y) / ray.direction.y
        if check_cap(ray, t, abs(self.minimum)):
            xs.append(LocalHit(t))

        t = (self.maximum - ray.origin.y) / ray.direction.y
        if check_cap(ray, t, abs(self.maximum)):
            xs.append(LocalHit(t))
        return xs

    def _within_bounds(self, ray: Ray, t: float) -> bool:
        y = ray.origin.y + t * ray.direction.y
        return self.minimum < y < self.maximum

    def local_intersect(self, ray: Ray) -> list[LocalHit]:
        direction = ray.direction
        origin = ray.origin

        a = direction.x**2 - direction.y**2 + direction.z**2
        b = 2.0 * (origin.x * direction.x - origin.y * direction.y + origin.z * direction.z)
        c = origin.x**2 - origin.y**2 + origin.z**2

        xs = []
        if abs(a) < EPSILON:
            if abs(b) >= EPSILON:
                t = -c / (2.0 * b)
                if self._within_bounds(ray, t):
                    xs.append(LocalHit(t))
            xs.extend(self.intersect_caps(ray))
            return xs

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return self.intersect_caps(ray)

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        if t0 > t1:
            t0, t1 = t1, t0

        if self._within_bounds(ray, t0):
            xs.append(LocalHit(t0))
        if self._within_bounds(ray, t1):
            xs.append(LocalHit(t1))

        xs.extend(self.intersect_caps(ray))
        return xs

    def local_normal_at(self, local_point: Tuple, uv: tuple[float, float] = (0.0, 0.0)) -> Tuple:
        dist = local_point.x**2 + local_point.z**2

        if dist < self.maximum**2 and local_point.y >= self.maximum - EPSILON:
            return vector(0.0, 1.0, 0.0)
        if dist < self.minimum**2 and local_point.y <= self.minimum + EPSILON:
            return vector(0.0, -1.0, 0.0)

        y = math.sqrt(dist)
        if local_point.y > 0.0:
            y = -y
        return vector(local_point.x, y, local_point.z)
