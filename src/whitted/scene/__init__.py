"""Scene module: lights, intersections, the world and scene construction.

Components:
    light: Point light source
    intersection: Intersection records, hit selection and shading inputs
    world: Light plus shapes, with recursive Whitted shading
    objfile: Wavefront OBJ parser producing triangle groups
    builder: Worlds and cameras from plain-dict scene descriptions
    showcase: A ready-made scene exercising every feature
"""

from .intersection import Computations, Intersection, Intersections, prepare_computations
from .light import PointLight
from .world import World
from .objfile import ObjFile, obj_to_group, parse_obj, parse_obj_file
from .builder import SceneConfig, build_camera, build_shape, build_world
from .showcase import ShowcaseParams, create_showcase_scene

__all__ = [
    "PointLight",
    "Intersection",
    "Intersections",
    "Computations",
    "prepare_computations",
    "World",
    "ObjFile",
    "parse_obj",
    "parse_obj_file",
    "obj_to_group",
    "SceneConfig",
    "build_world",
    "build_shape",
    "build_camera",
    "ShowcaseParams",
    "create_showcase_scene",
]
