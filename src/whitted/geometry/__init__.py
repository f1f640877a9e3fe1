"""Geometry module for shape primitives and the shape wrapper.

Components:
    shape: Shape wrapper (transform, material, parent) and factories
    sphere: Unit sphere
    plane: xz-plane
    cube: Axis-aligned cube at +/-1
    cylinder: Truncatable, cappable cylinder along y
    cone: Truncatable, cappable double cone along y
    triangle: Flat and smooth triangles (Moller-Trumbore)
    group: Child container with composed transforms

Variants work in object space and return LocalHit(t, u, v) records; the
Shape wrapper converts rays and normals between world and object space.
"""

from .base import LocalHit, ShapeKind
from .cone import Cone
from .cube import Cube
from .cylinder import Cylinder
from .group import Group
from .plane import Plane
from .shape import (
    Shape,
    cone,
    cube,
    cylinder,
    glass_sphere,
    group,
    plane,
    smooth_triangle,
    sphere,
    triangle,
)
from .sphere import Sphere
from .triangle import SmoothTriangle, Triangle

__all__ = [
    "ShapeKind",
    "LocalHit",
    "Shape",
    "Sphere",
    "Plane",
    "Cube",
    "Cylinder",
    "Cone",
    "Triangle",
    "SmoothTriangle",
    "Group",
    "sphere",
    "glass_sphere",
    "plane",
    "cube",
    "cylinder",
    "cone",
    "triangle",
    "smooth_triangle",
    "group",
]
