"""Intersection records and the shading inputs derived from a hit.

Intersections keeps a list of hits sorted by t (stable, so equal t values
keep their insertion order). prepare_computations() turns the chosen hit
into a Computations record holding everything shade_hit() needs, including
the refractive indices on either side of the surface.

The n1/n2 pass walks the sorted intersections while tracking which objects
the ray is currently inside:

    for each intersection i:
        if i is the hit: n1 = index of the innermost containing object (or 1.0)
        leave i.object if inside it, else enter it
        if i is the hit: n2 = index of the innermost containing object (or 1.0); stop

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.shape import sphere
    >>> from whitted.scene.intersection import Intersection, Intersections
    >>> s = sphere()
    >>> xs = Intersections([Intersection(2.0, s), Intersection(-1.0, s)])
    >>> xs.hit().t
    2.0
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Tuple

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape


@dataclass(frozen=True)
class Intersection:
    """A ray hit on a shape.

    Attributes:
        t: Ray parameter of the hit.
        object: The (leaf) shape that was hit.
        u: Barycentric u, meaningful for smooth triangles only.
        v: Barycentric v, meaningful for smooth triangles only.
    """

    t: float
    object: Shape
    u: float = 0.0
    v: float = 0.0


class Intersections(Sequence[Intersection]):
    """Intersections sorted ascending by t."""

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        self._items = sorted(intersections, key=lambda i: i.t)

    @overload
    def __getitem__(self, index: int) -> Intersection: ...

    @overload
    def __getitem__(self, index: slice) -> list[Intersection]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def hit(self) -> Intersection | None:
        """Return the first intersection with t >= 0, or None."""
        for intersection in self._items:
            if intersection.t >= 0.0:
                return intersection
        return None

    def __repr__(self) -> str:
        return f"Intersections({self._items!r})"


@dataclass
class Computations:
    """Precomputed shading inputs for one hit.

    Attributes:
        t: Ray parameter of the hit.
        object: Shape that was hit.
        point: World-space hit point.
        eyev: Unit vector toward the eye (negated ray direction).
        normalv: Unit surface normal, flipped to face the eye when inside.
        inside: Whether the ray hit the surface from inside the object.
        over_point: point nudged along the normal (shadow/reflection origin).
        under_point: point nudged against the normal (refraction origin).
        reflectv: Ray direction reflected about the normal.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    object: Shape
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool
    over_point: Tuple
    under_point: Tuple
    reflectv: Tuple
    n1: float = 1.0
    n2: float = 1.0

    def schlick(self) -> float:
        """Schlick's approximation of the Fresnel reflectance at the hit.

        Returns:
            Fraction of light reflected, in [0, 1]; exactly 1.0 under total
            internal reflection.
        """
        cos = self.eyev.dot(self.normalv)

        if self.n1 > self.n2:
            n = self.n1 / self.n2
            sin2_t = n * n * (1.0 - cos * cos)
            if sin2_t > 1.0:
                return 1.0
            cos = math.sqrt(1.0 - sin2_t)

        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5


def _refractive_indices(hit: Intersection, xs: Iterable[Intersection]) -> tuple[float, float]:
    n1 = n2 = 1.0
    containers: list[Shape] = []

    for intersection in xs:
        is_hit = intersection == hit
        if is_hit:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        if intersection.object in containers:
            containers.remove(intersection.object)
        else:
            containers.append(intersection.object)

        if is_hit:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break

    return n1, n2


def prepare_computations(
    hit: Intersection, ray: Ray, xs: Iterable[Intersection] | None = None
) -> Computations:
    """Derive the shading inputs for a hit.

    Args:
        hit: The intersection being shaded.
        ray: The ray that produced it.
        xs: All intersections along the ray, sorted by t, used to find the
            refractive indices on either side of the surface. Defaults to
            just the hit.

    Returns:
        The Computations for the hit.
    """
    if xs is None:
        xs = Intersections([hit])

    point = ray.position(hit.t)
    eyev = -ray.direction
    normalv = hit.object.normal_at(point, (hit.u, hit.v))

    inside = normalv.dot(eyev) < 0.0
    if inside:
        normalv = -normalv

    n1, n2 = _refractive_indices(hit, xs)

    return Computations(
        t=hit.t,
        object=hit.object,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        over_point=point + normalv * EPSILON,
        under_point=point - normalv * EPSILON,
        reflectv=ray.direction.reflect(normalv),
        n1=n1,
        n2=n2,
    )
