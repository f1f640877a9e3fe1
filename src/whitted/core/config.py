"""Render configuration.

RenderConfig gathers the knobs a render needs (image size, field of view,
recursion budget, Taichi backend) in one dataclass that round-trips through
plain dicts, so it can be loaded from JSON or built from CLI flags.

Example:
    >>> from whitted.core.config import RenderConfig
    >>> config = RenderConfig.from_dict({"width": 320, "height": 160})
    >>> config.max_depth
    4
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Any

from whitted.core.runtime import ARCHES

# Default number of reflection/refraction hops before a ray gives up
MAX_RECURSION_DEPTH = 4


@dataclass
class RenderConfig:
    """Configuration for a single render.

    Attributes:
        width: Image width in pixels (camera hsize).
        height: Image height in pixels (camera vsize).
        field_of_view: Horizontal/vertical field of view in radians, applied
            to the longer image side.
        max_depth: Recursion budget for reflection and refraction.
        arch: Taichi backend used for canvas kernels.
    """

    width: int = 100
    height: int = 50
    field_of_view: float = math.pi / 3.0
    max_depth: int = MAX_RECURSION_DEPTH
    arch: str = "cpu"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check that every field is in range.

        Raises:
            ValueError: If a size is not positive, the field of view is not in
                (0, pi), the depth is negative, or the arch is unknown.
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi) radians, got {self.field_of_view}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.arch not in ARCHES:
            raise ValueError(f"Unknown arch {self.arch!r}; expected one of {sorted(ARCHES)}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RenderConfig:
        """Build a config from a dict, ignoring unknown keys.

        Raises:
            ValueError: If a value is out of range.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
