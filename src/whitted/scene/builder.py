"""Build worlds from plain-dict scene descriptions.

A SceneConfig is a JSON-friendly description of a light, a camera and a
list of objects. build_world() turns it into a World of Shapes;
build_camera() turns its camera entry into a Camera.

Object entries:
    {"type": "sphere" | "glass_sphere" | "plane" | "cube",
     "transform": [["scale", 2, 2, 2], ["translate", 0, 1, 0]],
     "material": {"color": [1, 0.2, 1], "reflective": 0.5,
                  "pattern": {"type": "checker", "a": [1, 1, 1], "b": [0, 0, 0],
                              "transform": [["scale", 0.25, 0.25, 0.25]]}}}
    {"type": "cylinder" | "cone", "minimum": 0, "maximum": 1, "closed": true, ...}
    {"type": "triangle", "points": [[0, 1, 0], [-1, 0, 0], [1, 0, 0]], ...}
    {"type": "group", "children": [...], ...}
    {"type": "obj", "path": "teapot.obj", ...}

A group entry takes no material of its own. An obj entry's material, when
given, is shared by every triangle of the model.

Transform steps are applied in list order, so the example above scales
first and then translates. Rotation angles are in radians.

Example:
    >>> from whitted.scene.builder import SceneConfig, build_world
    >>> config = SceneConfig.from_dict({
    ...     "light": {"position": [-10, 10, -10], "intensity": [1, 1, 1]},
    ...     "objects": [{"type": "sphere", "material": {"color": [1, 0, 0]}}],
    ... })
    >>> len(build_world(config).objects)
    1
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Callable

from whitted.camera.camera import Camera
from whitted.core.matrix import Matrix
from whitted.core.transforms import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from whitted.core.tuples import Tuple, color, point, vector
from whitted.geometry import shape as shapes
from whitted.geometry.shape import Shape
from whitted.materials.material import Material
from whitted.materials.pattern import (
    CheckerPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
)
from whitted.scene.light import PointLight
from whitted.scene.objfile import parse_obj_file
from whitted.scene.world import World

logger = logging.getLogger(__name__)

TRANSFORM_STEPS: dict[str, tuple[Callable[..., Matrix], int]] = {
    "translate": (translation, 3),
    "scale": (scaling, 3),
    "rotate_x": (rotation_x, 1),
    "rotate_y": (rotation_y, 1),
    "rotate_z": (rotation_z, 1),
    "shear": (shearing, 6),
}

PATTERN_TYPES: dict[str, type[Pattern]] = {
    "stripe": StripePattern,
    "gradient": GradientPattern,
    "ring": RingPattern,
    "checker": CheckerPattern,
}

_MATERIAL_FIELDS = {f.name for f in fields(Material)}


@dataclass
class SceneConfig:
    """Serializable scene description.

    Attributes:
        light: {"position": [x, y, z], "intensity": [r, g, b]}, or None for
            an unlit scene.
        camera: {"from": [...], "to": [...], "up": [...]}; optional
            "field_of_view" in radians overrides the render setting.
        objects: Object entries (see module docstring).
        base_dir: Directory that relative OBJ paths are resolved against.
    """

    light: dict[str, Any] | None = None
    camera: dict[str, Any] = field(default_factory=dict)
    objects: list[dict[str, Any]] = field(default_factory=list)
    base_dir: str = "."

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SceneConfig:
        """Build a config from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


# =============================================================================
# Entry parsing
# =============================================================================


def _triple(values: Any, what: str) -> tuple[float, float, float]:
    if not isinstance(values, (list, tuple)) or len(values) != 3:
        raise ValueError(f"{what} must be a list of 3 numbers, got {values!r}")
    return float(values[0]), float(values[1]), float(values[2])


def _color(values: Any) -> Tuple:
    return color(*_triple(values, "color"))


def parse_transform(steps: list[Any] | None) -> Matrix:
    """Compose transform steps, applying them in list order.

    Raises:
        ValueError: If a step is unknown or has the wrong number of arguments.
    """
    matrix = Matrix.identity()
    for step in steps or []:
        if not step:
            raise ValueError("Empty transform step")
        name, args = step[0], step[1:]
        if name not in TRANSFORM_STEPS:
            raise ValueError(f"Unknown transform step {name!r}; expected one of {sorted(TRANSFORM_STEPS)}")
        build, arity = TRANSFORM_STEPS[name]
        if len(args) != arity:
            raise ValueError(f"Transform step {name!r} takes {arity} arguments, got {len(args)}")
        matrix = build(*(float(a) for a in args)) @ matrix
    return matrix


def parse_pattern(entry: dict[str, Any]) -> Pattern:
    """Build a pattern from {"type", "a", "b", "transform"}."""
    pattern_type = str(entry.get("type", "")).lower()
    if pattern_type not in PATTERN_TYPES:
        raise ValueError(f"Unknown pattern type {pattern_type!r}; expected one of {sorted(PATTERN_TYPES)}")
    return PATTERN_TYPES[pattern_type](
        _color(entry.get("a", [1.0, 1.0, 1.0])),
        _color(entry.get("b", [0.0, 0.0, 0.0])),
        transform=parse_transform(entry.get("transform")),
    )


def parse_material(entry: dict[str, Any] | None) -> Material:
    """Build a Material from field names, with lists for color and a pattern dict.

    Raises:
        ValueError: If the entry names a field Material doesn't have.
    """
    if not entry:
        return Material()

    unknown = set(entry) - _MATERIAL_FIELDS
    if unknown:
        raise ValueError(f"Unknown material fields: {sorted(unknown)}")

    kwargs: dict[str, Any] = {}
    for key, value in entry.items():
        if key == "color":
            kwargs[key] = _color(value)
        elif key == "pattern":
            kwargs[key] = parse_pattern(value) if value else None
        else:
            kwargs[key] = float(value)
    return Material(**kwargs)


def _apply_material(shape: Shape, material: Material) -> None:
    """Give every leaf under shape the same material."""
    if shape.is_group:
        for child in shape.children:
            _apply_material(child, material)
    else:
        shape.material = material


def build_shape(entry: dict[str, Any], base_dir: str = ".") -> Shape:
    """Build one shape (recursively for groups) from an object entry.

    Raises:
        ValueError: If the type is unknown or a field is malformed.
    """
    shape_type = str(entry.get("type", "")).lower()
    transform = parse_transform(entry.get("transform"))
    material = parse_material(entry.get("material"))
    common = {"transform": transform, "material": material}

    if shape_type == "sphere":
        return shapes.sphere(**common)
    if shape_type == "glass_sphere":
        return shapes.glass_sphere(**common)
    if shape_type == "plane":
        return shapes.plane(**common)
    if shape_type == "cube":
        return shapes.cube(**common)
    if shape_type in ("cylinder", "cone"):
        factory = shapes.cylinder if shape_type == "cylinder" else shapes.cone
        return factory(
            float(entry.get("minimum", -math.inf)),
            float(entry.get("maximum", math.inf)),
            bool(entry.get("closed", False)),
            **common,
        )
    if shape_type == "triangle":
        points = entry.get("points", [])
        if len(points) != 3:
            raise ValueError(f"triangle needs 3 points, got {len(points)}")
        p1, p2, p3 = (point(*_triple(p, "triangle point")) for p in points)
        return shapes.triangle(p1, p2, p3, **common)
    if shape_type == "group":
        if "material" in entry:
            raise ValueError("group entries take no material; set it on the children")
        children = [build_shape(child, base_dir) for child in entry.get("children", [])]
        return shapes.group(children, transform=transform, material=material)
    if shape_type == "obj":
        if "path" not in entry:
            raise ValueError("obj entries need a 'path'")
        path = os.path.join(base_dir, entry["path"])
        model = parse_obj_file(path).to_group()
        model.transform = transform
        if "material" in entry:
            _apply_material(model, material)
        return model

    raise ValueError(f"Unknown object type {shape_type!r}")


# =============================================================================
# Scene assembly
# =============================================================================


def build_world(config: SceneConfig) -> World:
    """Build a World from a SceneConfig.

    Raises:
        ValueError: If any entry is malformed.
    """
    light = None
    if config.light is not None:
        light = PointLight(
            point(*_triple(config.light.get("position"), "light position")),
            _color(config.light.get("intensity", [1.0, 1.0, 1.0])),
        )

    world = World(light)
    for entry in config.objects:
        world.add(build_shape(entry, config.base_dir))

    logger.debug("Built world with %d top-level objects", len(world.objects))
    return world


def build_camera(config: SceneConfig, width: int, height: int, field_of_view: float) -> Camera:
    """Build the camera described by config.camera at the given resolution."""
    entry = config.camera
    camera = Camera(width, height, float(entry.get("field_of_view", field_of_view)))
    camera.transform = view_transform(
        point(*_triple(entry.get("from", [0.0, 0.0, -5.0]), "camera from")),
        point(*_triple(entry.get("to", [0.0, 0.0, 0.0]), "camera to")),
        vector(*_triple(entry.get("up", [0.0, 1.0, 0.0]), "camera up")),
    )
    return camera
