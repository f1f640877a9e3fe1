"""Unit sphere at the object-space origin.

Intersection solves |O + tD|^2 = 1 with the textbook quadratic:

    a = D.D,  b = 2 (O.D),  c = O.O - 1,  disc = b^2 - 4ac

Both roots are reported (tangent rays give the same t twice) so the
refraction bookkeeping sees every entry and exit.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.sphere import Sphere
    >>> hits = Sphere().local_intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [h.t for h in hits]
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from whitted.core.ray import Ray
from whitted.core.tuples import Tuple, point
from whitted.geometry.base import LocalHit, ShapeKind

ORIGIN = point(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Sphere:
    """Sphere of radius 1 centered at the origin."""

    kind: ClassVar[ShapeKind] = ShapeKind.SPHERE

    def local_intersect(self, ray: Ray) -> list[LocalHit]:
        sphere_to_ray = ray.origin - ORIGIN
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        return [LocalHit(t0), LocalHit(t1)]

    def local_normal_at(self, local_point: Tuple, uv: tuple[float, float] = (0.0, 0.0)) -> Tuple:
        return local_point - ORIGIN
