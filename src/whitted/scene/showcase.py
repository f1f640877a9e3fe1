"""Showcase scene exercising every shape, pattern and material feature.

The scene contains:
- A checkered floor plane with a faint reflection
- A mirror sphere and a hollow glass sphere (reflective + transparent,
  so shading weights the two by Schlick reflectance)
- A striped cube, a capped ringed cylinder and a capped gradient cone
- A hexagon group built from spheres and cylinders, rotated as a unit
  to show nested group transforms

Example:
    >>> from whitted.scene.showcase import ShowcaseParams, create_showcase_scene
    >>> world, camera = create_showcase_scene(ShowcaseParams(width=80, height=40))
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.camera.camera import Camera
from whitted.core.transforms import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    translation,
    view_transform,
)
from whitted.core.tuples import color, point, vector
from whitted.geometry.shape import Shape, cone, cube, cylinder, glass_sphere, group, plane, sphere
from whitted.materials.material import Material
from whitted.materials.pattern import (
    CheckerPattern,
    GradientPattern,
    RingPattern,
    StripePattern,
)
from whitted.scene.light import PointLight
from whitted.scene.world import World

# =============================================================================
# Showcase Parameters
# =============================================================================


@dataclass
class ShowcaseParams:
    """Parameters for configuring the showcase scene.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        field_of_view: Camera field of view in radians.
        light_position: World-space position of the point light.
        light_color: RGB intensity of the light.
        floor_colors: The two checker colors of the floor.
        camera_from: Camera position.
        camera_to: Point the camera looks at.
        include_hexagon: Whether to add the hexagon group.

    Example:
        >>> params = ShowcaseParams()
        >>> params.width
        200
        >>> warm = ShowcaseParams(light_color=(1.0, 0.9, 0.8))
    """

    width: int = 200
    height: int = 100
    field_of_view: float = math.pi / 3.0
    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0)
    light_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    floor_colors: tuple[tuple[float, float, float], tuple[float, float, float]] = (
        (0.35, 0.35, 0.35),
        (0.65, 0.65, 0.65),
    )
    camera_from: tuple[float, float, float] = (0.0, 2.5, -7.0)
    camera_to: tuple[float, float, float] = (0.0, 1.0, 0.0)
    include_hexagon: bool = True


# =============================================================================
# Hexagon group
# =============================================================================


def hexagon_corner() -> Shape:
    return sphere(
        transform=translation(0.0, 0.0, -1.0) @ scaling(0.25, 0.25, 0.25),
        material=Material(color=color(0.9, 0.5, 0.2), reflective=0.2),
    )


def hexagon_edge() -> Shape:
    return cylinder(
        0.0,
        1.0,
        transform=(
            translation(0.0, 0.0, -1.0)
            @ rotation_y(-math.pi / 6.0)
            @ rotation_z(-math.pi / 2.0)
            @ scaling(0.25, 1.0, 0.25)
        ),
        material=Material(color=color(0.9, 0.5, 0.2)),
    )


def hexagon_side(index: int) -> Shape:
    return group(
        [hexagon_corner(), hexagon_edge()],
        transform=rotation_y(index * math.pi / 3.0),
    )


def hexagon() -> Shape:
    """Six (corner, edge) pairs around the y axis, each pair a nested group."""
    return group(hexagon_side(i) for i in range(6))


# =============================================================================
# Scene
# =============================================================================


def create_showcase_scene(params: ShowcaseParams | None = None) -> tuple[World, Camera]:
    """Create the showcase world and a camera looking at it.

    Args:
        params: Scene parameters; defaults to ShowcaseParams().

    Returns:
        Tuple of (world, camera).
    """
    if params is None:
        params = ShowcaseParams()

    light = PointLight(point(*params.light_position), color(*params.light_color))
    world = World(light)

    floor_a, floor_b = params.floor_colors
    world.add(
        plane(
            material=Material(
                pattern=CheckerPattern(color(*floor_a), color(*floor_b)),
                specular=0.0,
                reflective=0.1,
            )
        )
    )

    # Mirror sphere
    world.add(
        sphere(
            transform=translation(-1.8, 1.0, 1.5),
            material=Material(
                color=color(0.1, 0.1, 0.1), diffuse=0.3, specular=1.0, shininess=300, reflective=0.9
            ),
        )
    )

    # Glass sphere with an air bubble inside
    glass = glass_sphere(
        transform=translation(0.2, 1.0, -0.5),
        material=Material(
            color=color(0.05, 0.05, 0.05),
            ambient=0.0,
            diffuse=0.1,
            specular=1.0,
            shininess=300,
            reflective=0.9,
        ),
    )
    world.add(glass)
    world.add(
        sphere(
            transform=translation(0.2, 1.0, -0.5) @ scaling(0.5, 0.5, 0.5),
            material=Material(
                color=color(0.05, 0.05, 0.05),
                ambient=0.0,
                diffuse=0.1,
                specular=1.0,
                shininess=300,
                reflective=0.9,
                transparency=1.0,
                refractive_index=1.00029,
            ),
        )
    )

    world.add(
        cube(
            transform=translation(2.2, 0.5, 1.0) @ rotation_y(math.pi / 5.0) @ scaling(0.5, 0.5, 0.5),
            material=Material(
                pattern=StripePattern(
                    color(0.8, 0.2, 0.2),
                    color(0.95, 0.95, 0.95),
                    transform=scaling(0.2, 0.2, 0.2) @ rotation_z(math.pi / 4.0),
                )
            ),
        )
    )

    world.add(
        cylinder(
            0.0,
            1.5,
            closed=True,
            transform=translation(-3.0, 0.0, 4.0) @ scaling(0.6, 1.0, 0.6),
            material=Material(
                pattern=RingPattern(
                    color(0.2, 0.4, 0.9),
                    color(0.9, 0.9, 1.0),
                    transform=scaling(0.2, 0.2, 0.2),
                )
            ),
        )
    )

    world.add(
        cone(
            -1.0,
            0.0,
            closed=True,
            transform=translation(1.5, 1.0, 3.5) @ scaling(0.7, 1.0, 0.7),
            material=Material(
                pattern=GradientPattern(
                    color(0.2, 0.8, 0.3),
                    color(0.9, 0.9, 0.2),
                    transform=translation(-1.0, 0.0, 0.0) @ scaling(2.0, 1.0, 1.0),
                )
            ),
        )
    )

    if params.include_hexagon:
        world.add(
            group(
                [hexagon()],
                transform=translation(0.0, 2.8, 4.5) @ rotation_x(-math.pi / 6.0) @ scaling(0.8, 0.8, 0.8),
            )
        )

    camera = Camera(params.width, params.height, params.field_of_view)
    camera.transform = view_transform(
        point(*params.camera_from),
        point(*params.camera_to),
        vector(0.0, 1.0, 0.0),
    )
    return world, camera
