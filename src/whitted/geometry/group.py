"""Group variant: an ordered collection of child shapes.

A group has no surface of its own. Intersecting it moves the ray into the
group's object space and hands that ray to each child, which applies its
own transform in turn, so nested groups compose their transforms.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from whitted.core.ray import Ray
from whitted.geometry.base import ShapeKind

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape
    from whitted.scene.intersection import Intersection


@dataclass(eq=False)
class Group:
    """Children owned by a group shape, in insertion order."""

    children: list[Shape] = field(default_factory=list)

    kind: ClassVar[ShapeKind] = ShapeKind.GROUP

    def __len__(self) -> int:
        return len(self.children)

    def __contains__(self, shape: object) -> bool:
        return any(child is shape for child in self.children)

    def intersect_children(self, local_ray: Ray) -> list[Intersection]:
        """Concatenate every child's intersections with a group-space ray.

        The result is unsorted; callers sort through Intersections.
        """
        xs: list[Intersection] = []
        for child in self.children:
            xs.extend(child.intersect(local_ray))
        return xs
