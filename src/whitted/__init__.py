"""Whitted-style recursive ray tracer.

This package renders scenes of spheres, planes, cubes, cylinders, cones,
triangles and groups with:
- Phong shading from a single point light, with hard shadows
- Recursive reflection and refraction, blended by Schlick reflectance
- Procedural stripe, gradient, ring and checker patterns
- Wavefront OBJ mesh import
- PPM and PNG output, with a Taichi kernel for pixel quantization

Subpackages:
    core: Tuples, matrices, transforms, rays, errors, config and runtime
    geometry: Shape wrapper and primitive intersection
    materials: Phong materials and patterns
    scene: Lights, intersections, world, OBJ parsing and scene builders
    camera: Pinhole camera and render loop
    preview: Canvas, image export and Matplotlib preview
"""

__version__ = "0.1.0"

# scene must load before geometry: shapes build scene Intersection records,
# and the scene modules import the shape factories.
from whitted import core, materials, scene  # noqa: E402,F401  isort:skip
from whitted import camera, geometry, preview  # noqa: E402,F401  isort:skip
