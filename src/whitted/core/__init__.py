"""Core math and runtime module.

This module contains the building blocks everything else calls:

Components:
    tuples: Points, vectors and colors with fuzzy equality
    matrix: Dense matrices with determinant, cofactor and inverse
    transforms: Affine 4x4 constructors and the view transform
    ray: Ray data structure
    errors: Exception types raised by the renderer
    config: Render configuration dataclass
    runtime: One-time Taichi initialization

All geometric comparisons share a single EPSILON (1e-5).
"""

from .config import MAX_RECURSION_DEPTH, RenderConfig
from .errors import (
    DegenerateTriangleError,
    InvalidAddChildError,
    MalformedObjNumberError,
    MismatchedMatrixShapeError,
    NonInvertibleMatrixError,
    RayTracerError,
)
from .matrix import Matrix
from .ray import Ray
from .runtime import ensure_runtime, init_runtime
from .transforms import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuples import BLACK, EPSILON, WHITE, Tuple, color, fuzzy_equal, point, vector

__all__ = [
    "EPSILON",
    "Tuple",
    "point",
    "vector",
    "color",
    "fuzzy_equal",
    "BLACK",
    "WHITE",
    "Matrix",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Ray",
    "RayTracerError",
    "NonInvertibleMatrixError",
    "MismatchedMatrixShapeError",
    "InvalidAddChildError",
    "DegenerateTriangleError",
    "MalformedObjNumberError",
    "RenderConfig",
    "MAX_RECURSION_DEPTH",
    "init_runtime",
    "ensure_runtime",
]
