"""Materials module for surface appearance.

Components:
    material: Phong material parameters and the lighting() model
    pattern: Procedural stripe, gradient, ring, checker and test patterns
"""

from .material import Material
from .pattern import (
    CheckerPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
    TestPattern,
)

__all__ = [
    "Material",
    "Pattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckerPattern",
    "TestPattern",
]
