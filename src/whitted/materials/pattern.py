"""Procedural surface patterns.

A pattern maps a point in pattern space to a color. Each variant holds its
own transform; a world-space point reaches pattern space through the shape
first (world -> object, including any parent groups) and then through the
inverse of the pattern transform.

Variants:
    StripePattern: alternates a/b with floor(x)
    GradientPattern: linear blend from a to b across each unit of x
    RingPattern: alternates a/b with floor of the distance from the y axis
    CheckerPattern: 3-D checkerboard over floor(x) + floor(y) + floor(z)
    TestPattern: returns the pattern-space point itself as a color

Example:
    >>> from whitted.core.tuples import BLACK, WHITE, point
    >>> from whitted.materials.pattern import StripePattern
    >>> stripes = StripePattern(WHITE, BLACK)
    >>> stripes.pattern_at(point(1.0, 0.0, 0.0)) == BLACK
    True
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from whitted.core.matrix import Matrix
from whitted.core.tuples import Tuple, color

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape


@dataclass(eq=False)
class Pattern:
    """Base class holding the pattern transform and its cached inverse.

    Attributes:
        transform: Pattern-space transform (default identity). Assigning a new
            matrix refreshes the cached inverse.
    """

    transform: Matrix = field(default_factory=Matrix.identity, kw_only=True)

    def __setattr__(self, name: str, value: object) -> None:
        super().__setattr__(name, value)
        if name == "transform":
            # Runs from the generated __init__ too, so the cache is always set
            super().__setattr__("_inverse", value.inverse())  # type: ignore[attr-defined]

    @property
    def inverse_transform(self) -> Matrix:
        return self._inverse

    def pattern_at(self, pattern_point: Tuple) -> Tuple:
        """Evaluate the pattern at a point already in pattern space."""
        raise NotImplementedError

    def pattern_at_shape(self, shape: Shape, world_point: Tuple) -> Tuple:
        """Evaluate the pattern for a world-space point on a shape."""
        object_point = shape.world_to_object(world_point)
        pattern_point = self._inverse.multiply_tuple(object_point)
        return self.pattern_at(pattern_point)


@dataclass(eq=False)
class StripePattern(Pattern):
    """Stripes along x: a where floor(x) is even, b where it is odd."""

    a: Tuple
    b: Tuple

    def pattern_at(self, pattern_point: Tuple) -> Tuple:
        if math.floor(pattern_point.x) % 2 == 0:
            return self.a
        return self.b


@dataclass(eq=False)
class GradientPattern(Pattern):
    """Linear interpolation from a to b as x goes from n to n+1."""

    a: Tuple
    b: Tuple

    def pattern_at(self, pattern_point: Tuple) -> Tuple:
        distance = self.b - self.a
        fraction = pattern_point.x - math.floor(pattern_point.x)
        return self.a + distance * fraction


@dataclass(eq=False)
class RingPattern(Pattern):
    """Concentric rings around the y axis."""

    a: Tuple
    b: Tuple

    def pattern_at(self, pattern_point: Tuple) -> Tuple:
        radius = math.sqrt(pattern_point.x**2 + pattern_point.z**2)
        if math.floor(radius) % 2 == 0:
            return self.a
        return self.b


@dataclass(eq=False)
class CheckerPattern(Pattern):
    """Alternating unit cubes in three dimensions."""

    a: Tuple
    b: Tuple

    def pattern_at(self, pattern_point: Tuple) -> Tuple:
        total = (
            math.floor(pattern_point.x)
            + math.floor(pattern_point.y)
            + math.floor(pattern_point.z)
        )
        if total % 2 == 0:
            return self.a
        return self.b


@dataclass(eq=False)
class TestPattern(Pattern):
    """Returns the pattern-space coordinates as a color.

    Only useful for checking that world, object and pattern transforms
    compose correctly.
    """

    __test__ = False  # keep pytest from collecting this class

    def pattern_at(self, pattern_point: Tuple) -> Tuple:
        return color(pattern_point.x, pattern_point.y, pattern_point.z)
