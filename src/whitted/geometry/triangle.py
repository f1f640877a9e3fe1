"""Flat and smooth triangles.

Both variants intersect with the Moller-Trumbore algorithm, which yields
the barycentric (u, v) of the hit along with t. A flat Triangle always
reports its face normal; a SmoothTriangle interpolates the three vertex
normals at (u, v):

    n = n2 * u + n3 * v + n1 * (1 - u - v)

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.triangle import Triangle
    >>> tri = Triangle(point(0, 1, 0), point(-1, 0, 0), point(1, 0, 0))
    >>> [h.t for h in tri.local_intersect(Ray(point(0, 0.5, -2), vector(0, 0, 1)))]
    [2.0]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from whitted.core.errors import DegenerateTriangleError
from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple
from whitted.geometry.base import LocalHit, ShapeKind


def moller_trumbore(
    ray: Ray, p1: Tuple, e1: Tuple, e2: Tuple
) -> LocalHit | None:
    """Intersect a ray with the triangle (p1, p1 + e1, p1 + e2).

    Returns:
        The hit with its barycentric coordinates, or None on a miss
        (including rays parallel to the triangle's plane).
    """
    dir_cross_e2 = ray.direction.cross(e2)
    det = e1.dot(dir_cross_e2)
    if abs(det) < EPSILON:
        return None

    f = 1.0 / det
    p1_to_origin = ray.origin - p1
    u = f * p1_to_origin.dot(dir_cross_e2)
    if u < 0.0 or u > 1.0:
        return None

    origin_cross_e1 = p1_to_origin.cross(e1)
    v = f * ray.direction.dot(origin_cross_e1)
    if v < 0.0 or u + v > 1.0:
        return None

    t = f * e2.dot(origin_cross_e1)
    return LocalHit(t, u, v)


def is_degenerate(p1: Tuple, p2: Tuple, p3: Tuple) -> bool:
    """True when the three points are collinear, so the triangle has no area."""
    return (p3 - p1).cross(p2 - p1).magnitude() == 0.0


@dataclass(frozen=True)
class Triangle:
    """Triangle with a precomputed face normal.

    Attributes:
        p1, p2, p3: Vertices (points).
        e1: Edge p2 - p1 (derived).
        e2: Edge p3 - p1 (derived).
        normal: normalize(e2 x e1) (derived).
    """

    p1: Tuple
    p2: Tuple
    p3: Tuple
    e1: Tuple = field(init=False, repr=False)
    e2: Tuple = field(init=False, repr=False)
    normal: Tuple = field(init=False, repr=False)

    kind: ClassVar[ShapeKind] = ShapeKind.TRIANGLE

    def __post_init__(self) -> None:
        e1 = self.p2 - self.p1
        e2 = self.p3 - self.p1
        if is_degenerate(self.p1, self.p2, self.p3):
            raise DegenerateTriangleError(
                f"Triangle vertices are collinear: {self.p1}, {self.p2}, {self.p3}"
            )
        object.__setattr__(self, "e1", e1)
        object.__setattr__(self, "e2", e2)
        object.__setattr__(self, "normal", e2.cross(e1).normalize())

    def local_intersect(self, ray: Ray) -> list[LocalHit]:
        hit = moller_trumbore(ray, self.p1, self.e1, self.e2)
        return [] if hit is None else [hit]

    def local_normal_at(self, local_point: Tuple, uv: tuple[float, float] = (0.0, 0.0)) -> Tuple:
        return self.normal


@dataclass(frozen=True)
class SmoothTriangle:
    """Triangle whose normal is interpolated from per-vertex normals."""

    p1: Tuple
    p2: Tuple
    p3: Tuple
    n1: Tuple
    n2: Tuple
    n3: Tuple
    e1: Tuple = field(init=False, repr=False)
    e2: Tuple = field(init=False, repr=False)

    kind: ClassVar[ShapeKind] = ShapeKind.SMOOTH_TRIANGLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "e1", self.p2 - self.p1)
        object.__setattr__(self, "e2", self.p3 - self.p1)

    def local_intersect(self, ray: Ray) -> list[LocalHit]:
        hit = moller_trumbore(ray, self.p1, self.e1, self.e2)
        return [] if hit is None else [hit]

    def local_normal_at(self, local_point: Tuple, uv: tuple[float, float] = (0.0, 0.0)) -> Tuple:
        u, v = uv
        return self.n2 * u + self.n3 * v + self.n1 * (1.0 - u - v)
