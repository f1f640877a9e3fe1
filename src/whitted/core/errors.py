"""Exception types raised by the ray tracer.

All of these are fatal construction or input errors: the renderer has no
partial-recovery path, so callers are expected to let them propagate.
"""


class RayTracerError(Exception):
    """Base class for every error raised by the ray tracer."""


class NonInvertibleMatrixError(RayTracerError, ValueError):
    """Raised by Matrix.inverse() when the determinant is (fuzzy) zero."""


class MismatchedMatrixShapeError(RayTracerError, ValueError):
    """Raised when matrix dimensions don't agree for an operation."""


class InvalidAddChildError(RayTracerError, TypeError):
    """Raised when add_child() is called on a shape that is not a group."""


class DegenerateTriangleError(RayTracerError, ValueError):
    """Raised when a triangle's vertices are collinear (zero area)."""


class MalformedObjNumberError(RayTracerError, ValueError):
    """Raised when an OBJ record holds a field that isn't a valid number.

    Attributes:
        line_number: 1-based line number of the offending record.
        line: The raw text of the offending record.
    """

    def __init__(self, message: str, line_number: int, line: str) -> None:
        super().__init__(f"line {line_number}: {message} ({line.strip()!r})")
        self.line_number = line_number
        self.line = line
