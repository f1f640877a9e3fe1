"""Point light source."""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.tuples import Tuple


@dataclass(frozen=True)
class PointLight:
    """A light with no size, emitting equally in every direction.

    Attributes:
        position: Location of the light (point).
        intensity: Light color and brightness.
    """

    position: Tuple
    intensity: Tuple
