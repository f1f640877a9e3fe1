"""Shape wrapper and shape factories.

Every renderable object is a Shape: a stable integer id, a transform, a
material, an optional parent group, and one geometry variant doing the
object-space math. The wrapper owns every transform step:

    intersect(world_ray):  ray -> object space -> variant.local_intersect
    normal_at(world_point): point -> object space (through all parents)
                            -> variant.local_normal_at -> world space

Setting a transform caches its inverse and inverse-transpose, so neither is
recomputed per ray.

Parents are held through weak references: a group owns its children, and a
child only points back at its group. A shape has at most one parent; adding
it to a second group detaches it from the first.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.transforms import scaling
    >>> from whitted.core.tuples import point, vector
    >>> from whitted.geometry.shape import sphere
    >>> s = sphere(transform=scaling(2, 2, 2))
    >>> [i.t for i in s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))]
    [3.0, 7.0]
"""

from __future__ import annotations

import itertools
import math
import weakref
from typing import Iterable, Union

from whitted.core.errors import InvalidAddChildError, RayTracerError
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Tuple
from whitted.geometry.base import ShapeKind
from whitted.geometry.cone import Cone
from whitted.geometry.cube import Cube
from whitted.geometry.cylinder import Cylinder
from whitted.geometry.group import Group
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.geometry.triangle import SmoothTriangle, Triangle
from whitted.materials.material import Material
from whitted.scene.intersection import Intersection

Geometry = Union[Sphere, Plane, Cube, Cylinder, Cone, Triangle, SmoothTriangle, Group]

# Process-wide id source for shapes created without an explicit id
_shape_ids = itertools.count(1)


class Shape:
    """A geometry variant placed in the scene.

    Attributes:
        id: Stable integer identity. Two shapes are equal when they share
            both kind and id.
        geometry: The variant implementing the object-space math.
        material: Surface material used when shading hits on this shape.
    """

    def __init__(
        self,
        geometry: Geometry,
        transform: Matrix | None = None,
        material: Material | None = None,
        shape_id: int | None = None,
    ) -> None:
        self.id = next(_shape_ids) if shape_id is None else shape_id
        self.geometry = geometry
        self.material = material if material is not None else Material()
        self._parent: weakref.ref[Shape] | None = None
        self.transform = transform if transform is not None else Matrix.identity()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def kind(self) -> ShapeKind:
        return self.geometry.kind

    @property
    def is_group(self) -> bool:
        return self.geometry.kind == ShapeKind.GROUP

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        """Set the object-to-parent transform.

        Raises:
            NonInvertibleMatrixError: If the matrix cannot be inverted.
        """
        inverse = matrix.inverse()
        self._transform = matrix
        self._inverse = inverse
        self._inverse_transpose = inverse.transpose()

    @property
    def inverse_transform(self) -> Matrix:
        return self._inverse

    @property
    def parent(self) -> Shape | None:
        if self._parent is None:
            return None
        return self._parent()

    @property
    def children(self) -> list[Shape]:
        """Children of a group shape.

        Raises:
            RayTracerError: If this shape is not a group.
        """
        if not self.is_group:
            raise RayTracerError(f"{self.kind.name.lower()} shapes have no children")
        return self.geometry.children

    # =========================================================================
    # Intersection and normals
    # =========================================================================

    def intersect(self, world_ray: Ray) -> list[Intersection]:
        """Intersect a ray given in this shape's parent space.

        For a top-level shape that is world space. Groups return their
        children's intersections, each carrying the leaf shape that was hit.
        """
        local_ray = world_ray.transform(self._inverse)
        if self.is_group:
            return self.geometry.intersect_children(local_ray)
        return [
            Intersection(hit.t, self, hit.u, hit.v)
            for hit in self.geometry.local_intersect(local_ray)
        ]

    def world_to_object(self, world_point: Tuple) -> Tuple:
        parent = self.parent
        if parent is not None:
            world_point = parent.world_to_object(world_point)
        return self._inverse.multiply_tuple(world_point)

    def normal_to_world(self, object_normal: Tuple) -> Tuple:
        normal = self._inverse_transpose.multiply_tuple(object_normal)
        normal = normal.to_vector().normalize()
        parent = self.parent
        if parent is not None:
            normal = parent.normal_to_world(normal)
        return normal

    def normal_at(self, world_point: Tuple, uv: tuple[float, float] = (0.0, 0.0)) -> Tuple:
        """Unit world-space surface normal at a point on this shape.

        Args:
            world_point: Point on the surface, in world space.
            uv: Barycentric coordinates of the hit (smooth triangles only).

        Raises:
            RayTracerError: If called on a group.
        """
        if self.is_group:
            raise RayTracerError("groups have no surface normal")
        local_point = self.world_to_object(world_point)
        local_normal = self.geometry.local_normal_at(local_point, uv)
        return self.normal_to_world(local_normal)

    # =========================================================================
    # Group membership
    # =========================================================================

    def add_child(self, child: Shape) -> Shape:
        """Append a child to this group and make this group its parent.

        Returns:
            The child, for chaining.

        Raises:
            InvalidAddChildError: If this shape is not a group, or if the
                child is this group or one of its ancestors.
        """
        if not self.is_group:
            raise InvalidAddChildError(f"Cannot add a child to a {self.kind.name.lower()} shape")

        ancestor: Shape | None = self
        while ancestor is not None:
            if ancestor is child:
                raise InvalidAddChildError("A group cannot contain itself or its ancestors")
            ancestor = ancestor.parent

        previous = child.parent
        if previous is not None:
            previous.geometry.children[:] = [c for c in previous.geometry.children if c is not child]

        self.geometry.children.append(child)
        child._parent = weakref.ref(self)
        return child

    # =========================================================================
    # Identity
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.kind == other.kind and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.kind, self.id))

    def __repr__(self) -> str:
        return f"Shape({self.kind.name.lower()}, id={self.id})"


# =============================================================================
# Factories
# =============================================================================


def sphere(
    *, transform: Matrix | None = None, material: Material | None = None, shape_id: int | None = None
) -> Shape:
    """Unit sphere at the origin."""
    return Shape(Sphere(), transform, material, shape_id)


def glass_sphere(
    *, transform: Matrix | None = None, material: Material | None = None, shape_id: int | None = None
) -> Shape:
    """Unit sphere with a clear glass material.

    The given material (or a default one) gets transparency 1.0 and
    refractive index 1.5.
    """
    material = material if material is not None else Material()
    material.transparency = 1.0
    material.refractive_index = 1.5
    return Shape(Sphere(), transform, material, shape_id)


def plane(
    *, transform: Matrix | None = None, material: Material | None = None, shape_id: int | None = None
) -> Shape:
    return Shape(Plane(), transform, material, shape_id)


def cube(
    *, transform: Matrix | None = None, material: Material | None = None, shape_id: int | None = None
) -> Shape:
    return Shape(Cube(), transform, material, shape_id)


def cylinder(
    minimum: float = -math.inf,
    maximum: float = math.inf,
    closed: bool = False,
    *,
    transform: Matrix | None = None,
    material: Material | None = None,
    shape_id: int | None = None,
) -> Shape:
    """Unit-radius cylinder along y, truncated to (minimum, maximum)."""
    return Shape(Cylinder(minimum, maximum, closed), transform, material, shape_id)


def cone(
    minimum: float = -math.inf,
    maximum: float = math.inf,
    closed: bool = False,
    *,
    transform: Matrix | None = None,
    material: Material | None = None,
    shape_id: int | None = None,
) -> Shape:
    """Double cone along y, truncated to (minimum, maximum)."""
    return Shape(Cone(minimum, maximum, closed), transform, material, shape_id)


def triangle(
    p1: Tuple,
    p2: Tuple,
    p3: Tuple,
    *,
    transform: Matrix | None = None,
    material: Material | None = None,
    shape_id: int | None = None,
) -> Shape:
    return Shape(Triangle(p1, p2, p3), transform, material, shape_id)


def smooth_triangle(
    p1: Tuple,
    p2: Tuple,
    p3: Tuple,
    n1: Tuple,
    n2: Tuple,
    n3: Tuple,
    *,
    transform: Matrix | None = None,
    material: Material | None = None,
    shape_id: int | None = None,
) -> Shape:
    return Shape(SmoothTriangle(p1, p2, p3, n1, n2, n3), transform, material, shape_id)


def group(
    children: Iterable[Shape] = (),
    *,
    transform: Matrix | None = None,
    material: Material | None = None,
    shape_id: int | None = None,
) -> Shape:
    """Group shape, optionally pre-populated with children."""
    shape = Shape(Group(), transform, material, shape_id)
    for child in children:
        shape.add_child(child)
    return shape
