"""World: the scene's light and top-level shapes, plus recursive shading.

Shading is Whitted-style recursion: color_at() finds the hit, shade_hit()
combines Phong surface lighting with reflected and refracted contributions,
and those two re-enter color_at() with one less hop of budget. When a
material is both reflective and transparent, the two contributions are
weighted by Schlick's reflectance.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import BLACK, point, vector
    >>> from whitted.scene.world import World
    >>> world = World.default()
    >>> world.color_at(Ray(point(0, 0, -5), vector(0, 1, 0))) == BLACK
    True
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from whitted.core.config import MAX_RECURSION_DEPTH
from whitted.core.ray import Ray
from whitted.core.transforms import scaling
from whitted.core.tuples import BLACK, Tuple, color, point
from whitted.geometry.shape import Shape, sphere
from whitted.materials.material import Material
from whitted.scene.intersection import Computations, Intersections, prepare_computations
from whitted.scene.light import PointLight


class World:
    """A point light and the shapes it illuminates.

    The world is read-only while a frame renders.

    Attributes:
        light: The single light source, or None for an unlit world.
        objects: Top-level shapes (groups carry their own children).
    """

    def __init__(self, light: PointLight | None = None, objects: Iterable[Shape] = ()) -> None:
        self.light = light
        self.objects: list[Shape] = list(objects)

    @classmethod
    def default(cls) -> World:
        """The two-sphere world used throughout the shading tests."""
        light = PointLight(point(-10.0, 10.0, -10.0), color(1.0, 1.0, 1.0))
        outer = sphere(
            material=Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
        )
        inner = sphere(transform=scaling(0.5, 0.5, 0.5))
        return cls(light, [outer, inner])

    def add(self, shape: Shape) -> Shape:
        self.objects.append(shape)
        return shape

    def contains(self, shape: Shape) -> bool:
        return shape in self.objects

    def __contains__(self, shape: object) -> bool:
        return shape in self.objects

    # =========================================================================
    # Ray queries
    # =========================================================================

    def intersect_world(self, ray: Ray) -> Intersections:
        """All intersections of a world-space ray, sorted by t."""
        xs = []
        for shape in self.objects:
            xs.extend(shape.intersect(ray))
        return Intersections(xs)

    def is_shadowed(self, world_point: Tuple) -> bool:
        """Whether something blocks the light from reaching a point.

        Raises:
            RuntimeError: If the world has no light.
        """
        light = self._require_light()
        v = light.position - world_point
        distance = v.magnitude()
        hit = self.intersect_world(Ray(world_point, v.normalize())).hit()
        return hit is not None and hit.t < distance

    # =========================================================================
    # Shading
    # =========================================================================

    def color_at(self, ray: Ray, remaining: int = MAX_RECURSION_DEPTH) -> Tuple:
        """Color seen along a ray; black when it hits nothing."""
        xs = self.intersect_world(ray)
        hit = xs.hit()
        if hit is None:
            return BLACK
        comps = prepare_computations(hit, ray, xs)
        return self.shade_hit(comps, remaining)

    def shade_hit(self, comps: Computations, remaining: int = MAX_RECURSION_DEPTH) -> Tuple:
        light = self._require_light()
        material = comps.object.material

        surface = material.lighting(
            comps.object,
            light,
            comps.over_point,
            comps.eyev,
            comps.normalv,
            self.is_shadowed(comps.over_point),
        )
        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = comps.schlick()
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def reflected_color(self, comps: Computations, remaining: int = MAX_RECURSION_DEPTH) -> Tuple:
        reflective = comps.object.material.reflective
        if remaining <= 0 or reflective == 0.0:
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = MAX_RECURSION_DEPTH) -> Tuple:
        transparency = comps.object.material.transparency
        if remaining <= 0 or transparency == 0.0:
            return BLACK

        # Snell's law; sin2_t > 1 means total internal reflection
        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def _require_light(self) -> PointLight:
        if self.light is None:
            raise RuntimeError("World has no light source; set world.light before shading")
        return self.light
