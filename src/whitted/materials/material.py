"""Surface material and Phong lighting.

A Material carries the Phong reflection coefficients plus the parameters
the world needs for recursive reflection and refraction. lighting() computes
the local (non-recursive) color of a surface point lit by a single point
light:

    ambient  = effective * ambient
    diffuse  = effective * diffuse * (L . N)              when L . N > 0
    specular = intensity * specular * (R . E)^shininess   when R . E > 0

where effective = surface color (or pattern color) * light intensity. Points
in shadow receive only the ambient term.

Example:
    >>> from whitted.core.tuples import color, point, vector
    >>> from whitted.geometry.shape import sphere
    >>> from whitted.materials.material import Material
    >>> from whitted.scene.light import PointLight
    >>> m = Material()
    >>> light = PointLight(point(0, 0, -10), color(1, 1, 1))
    >>> result = m.lighting(sphere(), light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
    >>> result == color(1.9, 1.9, 1.9)
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from whitted.core.tuples import BLACK, Tuple, color
from whitted.materials.pattern import Pattern

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape
    from whitted.scene.light import PointLight


@dataclass
class Material:
    """Surface parameters for Phong shading, reflection and refraction.

    Attributes:
        color: Base surface color, used when no pattern is set.
        ambient: Fraction of light reflected regardless of orientation.
        diffuse: Fraction of light reflected from a matte surface.
        specular: Brightness of the specular highlight.
        shininess: Size of the specular highlight; larger is tighter.
        reflective: 0 for matte, 1 for a perfect mirror.
        transparency: 0 for opaque, 1 for fully transparent.
        refractive_index: How strongly light bends entering the material.
            Common values: vacuum/air 1.0, water 1.333, glass 1.52,
            diamond 2.417.
        pattern: Optional pattern that replaces color.
    """

    color: Tuple = field(default_factory=lambda: color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    pattern: Pattern | None = None

    def lighting(
        self,
        shape: Shape,
        light: PointLight,
        point: Tuple,
        eyev: Tuple,
        normalv: Tuple,
        in_shadow: bool = False,
    ) -> Tuple:
        """Compute the Phong color at a surface point.

        Args:
            shape: The shape being shaded (used for pattern lookup).
            light: The point light illuminating the scene.
            point: World-space point being shaded.
            eyev: Unit vector from the point toward the eye.
            normalv: Unit surface normal at the point.
            in_shadow: Whether the light is blocked from the point.

        Returns:
            The color contribution of the light at the point.
        """
        if self.pattern is not None:
            surface = self.pattern.pattern_at_shape(shape, point)
        else:
            surface = self.color

        effective = surface.hadamard(light.intensity)
        ambient = effective * self.ambient

        lightv = (light.position - point).normalize()
        light_dot_normal = lightv.dot(normalv)
        if in_shadow or light_dot_normal <= 0.0:
            # Light is on the other side of the surface (or blocked)
            return ambient

        diffuse = effective * (self.diffuse * light_dot_normal)

        reflectv = (-lightv).reflect(normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            factor = reflect_dot_eye**self.shininess
            specular = light.intensity * (self.specular * factor)

        return ambient + diffuse + specular
