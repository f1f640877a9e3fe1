"""Four-component tuples used for points, vectors and colors.

A single Tuple type covers all three roles. The w component tells them
apart under affine transforms: w=1 is a point (translations move it), w=0
is a vector (translations don't). Colors reuse vector semantics with
(x, y, z) read as (red, green, blue).

Equality is fuzzy: two tuples compare equal when every component differs
by less than EPSILON.

Example:
    >>> from whitted.core.tuples import point, vector
    >>> p = point(3.0, -2.0, 5.0)
    >>> v = vector(-2.0, 3.0, 1.0)
    >>> p + v == point(1.0, 1.0, 6.0)
    True
"""

from __future__ import annotations

import math

# Shared threshold for fuzzy comparisons, surface offsets and near-zero tests
EPSILON = 1e-5


def fuzzy_equal(a: float, b: float) -> bool:
    """Return True when a and b differ by less than EPSILON."""
    return abs(a - b) < EPSILON


class Tuple:
    """An immutable (x, y, z, w) value.

    Attributes:
        x: First component (red for colors).
        y: Second component (green for colors).
        z: Third component (blue for colors).
        w: 1.0 for points, 0.0 for vectors and colors.
    """

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))
        object.__setattr__(self, "w", float(w))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Tuple is immutable (cannot set {name!r})")

    # -------------------------------------------------------------------------
    # Role checks and accessors
    # -------------------------------------------------------------------------

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    @property
    def red(self) -> float:
        return self.x

    @property
    def green(self) -> float:
        return self.y

    @property
    def blue(self) -> float:
        return self.z

    def to_vector(self) -> Tuple:
        """Return a copy with w forced to 0."""
        return Tuple(self.x, self.y, self.z, 0.0)

    def as_list(self) -> list[float]:
        return [self.x, self.y, self.z, self.w]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Tuple) -> Tuple:
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def hadamard(self, other: Tuple) -> Tuple:
        """Component-wise product, used to blend colors."""
        return Tuple(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> Tuple:
        """Divide all four components by the magnitude."""
        m = self.magnitude()
        return Tuple(self.x / m, self.y / m, self.z / m, self.w / m)

    def dot(self, other: Tuple) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of two vectors. The result is always a vector."""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this vector about a (unit) normal: v - n * 2(v . n)."""
        return self - normal * (2.0 * self.dot(normal))

    # -------------------------------------------------------------------------
    # Comparison and display
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            fuzzy_equal(self.x, other.x)
            and fuzzy_equal(self.y, other.y)
            and fuzzy_equal(self.z, other.z)
            and fuzzy_equal(self.w, other.w)
        )

    # Fuzzy equality is not transitive, so tuples can't be hashed consistently
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tuple({self.x:g}, {self.y:g}, {self.z:g}, {self.w:g})"


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w=1)."""
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w=0)."""
    return Tuple(x, y, z, 0.0)


def color(red: float, green: float, blue: float) -> Tuple:
    """Create a color. Colors share the vector representation."""
    return Tuple(red, green, blue, 0.0)


BLACK = color(0.0, 0.0, 0.0)
WHITE = color(1.0, 1.0, 1.0)
