"""Infinite xz-plane through the origin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple, vector
from whitted.geometry.base import LocalHit, ShapeKind

UP = vector(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Plane:
    """The plane y = 0 with a constant +y normal."""

    kind: ClassVar[ShapeKind] = ShapeKind.PLANE

    def local_intersect(self, ray: Ray) -> list[LocalHit]:
        # Parallel (or coplanar) rays never hit
        if abs(ray.direction.y) < EPSILON:
            return []
        return [LocalHit(-ray.origin.y / ray.direction.y)]

    def local_normal_at(self, local_point: Tuple, uv: tuple[float, float] = (0.0, 0.0)) -> Tuple:
        return UP
