"""Unit tests for building worlds from dict scene descriptions.

Tests cover:
- Transform step parsing and ordering
- Material and pattern parsing
- Every object type, including groups and OBJ models
- World and camera assembly from a SceneConfig
"""

import math

import pytest


class TestParseTransform:
    """Test transform step parsing."""

    def test_empty_is_identity(self):
        """Test that no steps gives the identity matrix."""
        from whitted.core.matrix import Matrix
        from whitted.scene.builder import parse_transform

        assert parse_transform(None) == Matrix.identity()
        assert parse_transform([]) == Matrix.identity()

    def test_steps_apply_in_list_order(self):
        """Test that the first step is applied to points first."""
        from whitted.core.transforms import scaling, translation
        from whitted.scene.builder import parse_transform

        m = parse_transform([["scale", 2, 2, 2], ["translate", 1, 0, 0]])
        assert m == translation(1, 0, 0) @ scaling(2, 2, 2)

    def test_rotation_and_shear(self):
        """Test single-argument rotations and six-argument shears."""
        from whitted.core.transforms import rotation_x, shearing
        from whitted.scene.builder import parse_transform

        assert parse_transform([["rotate_x", math.pi / 2]]) == rotation_x(math.pi / 2)
        assert parse_transform([["shear", 1, 0, 0, 0, 0, 0]]) == shearing(1, 0, 0, 0, 0, 0)

    @pytest.mark.parametrize(
        "steps,message",
        [
            ([["spin", 1]], "Unknown transform step"),
            ([["translate", 1, 2]], "takes 3 arguments"),
            ([[]], "Empty transform step"),
        ],
    )
    def test_invalid_steps(self, steps, message):
        """Test that malformed steps raise ValueError."""
        from whitted.scene.builder import parse_transform

        with pytest.raises(ValueError, match=message):
            parse_transform(steps)


class TestParseMaterial:
    """Test material and pattern parsing."""

    def test_empty_gives_default(self):
        """Test that a missing material is the default material."""
        from whitted.materials.material import Material
        from whitted.scene.builder import parse_material

        assert parse_material(None) == Material()

    def test_fields(self):
        """Test that fields map onto Material attributes."""
        from whitted.core.tuples import color
        from whitted.scene.builder import parse_material

        m = parse_material({"color": [1, 0.2, 1], "diffuse": 0.7, "reflective": 0.5})
        assert m.color == color(1, 0.2, 1)
        assert m.diffuse == 0.7
        assert m.reflective == 0.5
        assert m.ambient == 0.1

    def test_pattern(self):
        """Test that a pattern dict becomes a transformed pattern."""
        from whitted.core.transforms import scaling
        from whitted.core.tuples import BLACK, WHITE
        from whitted.materials.pattern import CheckerPattern
        from whitted.scene.builder import parse_material

        m = parse_material(
            {
                "pattern": {
                    "type": "checker",
                    "a": [1, 1, 1],
                    "b": [0, 0, 0],
                    "transform": [["scale", 0.25, 0.25, 0.25]],
                }
            }
        )
        assert isinstance(m.pattern, CheckerPattern)
        assert m.pattern.a == WHITE
        assert m.pattern.b == BLACK
        assert m.pattern.transform == scaling(0.25, 0.25, 0.25)

    def test_unknown_field(self):
        """Test that unknown material fields are rejected."""
        from whitted.scene.builder import parse_material

        with pytest.raises(ValueError, match="Unknown material fields"):
            parse_material({"glossiness": 1.0})

    def test_unknown_pattern(self):
        """Test that unknown pattern types are rejected."""
        from whitted.scene.builder import parse_pattern

        with pytest.raises(ValueError, match="Unknown pattern type"):
            parse_pattern({"type": "plaid"})

    def test_bad_color(self):
        """Test that colors must have three components."""
        from whitted.scene.builder import parse_material

        with pytest.raises(ValueError, match="color"):
            parse_material({"color": [1, 0]})


class TestBuildShape:
    """Test building individual shapes."""

    @pytest.mark.parametrize(
        "shape_type,kind",
        [
            ("sphere", "SPHERE"),
            ("glass_sphere", "SPHERE"),
            ("plane", "PLANE"),
            ("cube", "CUBE"),
            ("cylinder", "CYLINDER"),
            ("cone", "CONE"),
        ],
    )
    def test_simple_types(self, shape_type, kind):
        """Test that each simple type builds the matching variant."""
        from whitted.geometry.base import ShapeKind
        from whitted.scene.builder import build_shape

        shape = build_shape({"type": shape_type})
        assert shape.kind == ShapeKind[kind]

    def test_transform_and_material(self):
        """Test that transform and material are applied to the shape."""
        from whitted.core.transforms import translation
        from whitted.core.tuples import color
        from whitted.scene.builder import build_shape

        shape = build_shape(
            {"type": "sphere", "transform": [["translate", 0, 1, 0]], "material": {"color": [1, 0, 0]}}
        )
        assert shape.transform == translation(0, 1, 0)
        assert shape.material.color == color(1, 0, 0)

    def test_glass_sphere_keeps_other_fields(self):
        """Test that glass spheres get glass optics on top of the given material."""
        from whitted.scene.builder import build_shape

        shape = build_shape({"type": "glass_sphere", "material": {"reflective": 0.9}})
        assert shape.material.transparency == 1.0
        assert shape.material.refractive_index == 1.5
        assert shape.material.reflective == 0.9

    def test_cylinder_bounds(self):
        """Test that cylinder bounds and caps are read."""
        from whitted.scene.builder import build_shape

        shape = build_shape({"type": "cylinder", "minimum": 0, "maximum": 2, "closed": True})
        assert shape.geometry.minimum == 0.0
        assert shape.geometry.maximum == 2.0
        assert shape.geometry.closed is True

    def test_cone_defaults_are_infinite(self):
        """Test that omitted cone bounds are infinite."""
        from whitted.scene.builder import build_shape

        shape = build_shape({"type": "cone"})
        assert shape.geometry.minimum == -math.inf
        assert shape.geometry.maximum == math.inf

    def test_triangle(self):
        """Test that triangle points are read in order."""
        from whitted.core.tuples import point
        from whitted.scene.builder import build_shape

        shape = build_shape({"type": "triangle", "points": [[0, 1, 0], [-1, 0, 0], [1, 0, 0]]})
        assert shape.geometry.p1 == point(0, 1, 0)
        assert shape.geometry.p3 == point(1, 0, 0)

    def test_triangle_needs_three_points(self):
        """Test that triangles with the wrong number of points are rejected."""
        from whitted.scene.builder import build_shape

        with pytest.raises(ValueError, match="3 points"):
            build_shape({"type": "triangle", "points": [[0, 1, 0]]})

    def test_group(self):
        """Test that group children are built recursively and parented."""
        from whitted.scene.builder import build_shape

        g = build_shape(
            {
                "type": "group",
                "transform": [["scale", 2, 2, 2]],
                "children": [{"type": "sphere"}, {"type": "group", "children": [{"type": "cube"}]}],
            }
        )
        assert len(g.children) == 2
        sphere_child, inner = g.children
        assert sphere_child.parent is g
        assert inner.children[0].parent is inner

    def test_obj_model(self, tmp_path):
        """Test that OBJ models are loaded relative to base_dir."""
        from whitted.core.transforms import translation
        from whitted.scene.builder import build_shape

        (tmp_path / "tri.obj").write_text("v 0 1 0\nv -1 0 0\nv 1 0 0\nf 1 2 3\n", encoding="utf-8")
        model = build_shape(
            {"type": "obj", "path": "tri.obj", "transform": [["translate", 0, 0, 3]]},
            str(tmp_path),
        )
        assert model.is_group
        assert model.transform == translation(0, 0, 3)
        (default_group,) = model.children
        assert len(default_group.children) == 1

    def test_obj_material_reaches_every_triangle(self, tmp_path):
        """Test that an obj entry's material is shared by all of its triangles."""
        from whitted.core.tuples import color
        from whitted.scene.builder import build_shape

        (tmp_path / "quad.obj").write_text(
            "v -1 1 0\nv -1 0 0\nv 1 0 0\nv 1 1 0\ng A\nf 1 2 3\ng B\nf 1 3 4\n", encoding="utf-8"
        )
        model = build_shape(
            {"type": "obj", "path": "quad.obj", "material": {"color": [0, 0, 1]}}, str(tmp_path)
        )
        leaves = [tri for named in model.children for tri in named.children]
        assert len(leaves) == 2
        assert all(tri.material.color == color(0, 0, 1) for tri in leaves)

    def test_group_rejects_material(self):
        """Test that a material on a group entry is an error, not silently dropped."""
        from whitted.scene.builder import build_shape

        with pytest.raises(ValueError, match="group entries take no material"):
            build_shape({"type": "group", "material": {"color": [1, 0, 0]}, "children": []})

    def test_obj_needs_path(self):
        """Test that obj entries without a path are rejected."""
        from whitted.scene.builder import build_shape

        with pytest.raises(ValueError, match="path"):
            build_shape({"type": "obj"})

    def test_unknown_type(self):
        """Test that unknown object types are rejected."""
        from whitted.scene.builder import build_shape

        with pytest.raises(ValueError, match="Unknown object type"):
            build_shape({"type": "torus"})


class TestBuildScene:
    """Test assembling worlds and cameras from a SceneConfig."""

    @pytest.fixture
    def scene_config(self):
        from whitted.scene.builder import SceneConfig

        return SceneConfig.from_dict(
            {
                "light": {"position": [-10, 10, -10], "intensity": [1, 1, 1]},
                "camera": {"from": [0, 1.5, -5], "to": [0, 1, 0], "up": [0, 1, 0]},
                "objects": [
                    {"type": "plane"},
                    {"type": "sphere", "transform": [["translate", 0, 1, 0]]},
                ],
                "comment": "ignored",
            }
        )

    def test_from_dict_ignores_unknown_keys(self, scene_config):
        """Test that unknown top-level keys are dropped."""
        assert "comment" not in scene_config.to_dict()
        assert len(scene_config.objects) == 2

    def test_round_trip(self, scene_config):
        """Test that to_dict and from_dict round-trip."""
        from whitted.scene.builder import SceneConfig

        assert SceneConfig.from_dict(scene_config.to_dict()) == scene_config

    def test_build_world(self, scene_config):
        """Test that the world has the light and every object."""
        from whitted.core.tuples import color, point
        from whitted.scene.builder import build_world

        world = build_world(scene_config)
        assert world.light.position == point(-10, 10, -10)
        assert world.light.intensity == color(1, 1, 1)
        assert len(world.objects) == 2

    def test_build_world_without_light(self):
        """Test that a config without a light builds an unlit world."""
        from whitted.scene.builder import SceneConfig, build_world

        world = build_world(SceneConfig(objects=[{"type": "sphere"}]))
        assert world.light is None

    def test_build_camera(self, scene_config):
        """Test that the camera gets the view transform and resolution."""
        from whitted.core.transforms import view_transform
        from whitted.core.tuples import point, vector
        from whitted.scene.builder import build_camera

        camera = build_camera(scene_config, 40, 20, math.pi / 3)
        assert (camera.hsize, camera.vsize) == (40, 20)
        assert camera.field_of_view == pytest.approx(math.pi / 3)
        assert camera.transform == view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0))

    def test_camera_field_of_view_override(self, scene_config):
        """Test that the scene's field_of_view wins over the argument."""
        from whitted.scene.builder import build_camera

        scene_config.camera["field_of_view"] = 1.0
        assert build_camera(scene_config, 40, 20, math.pi / 3).field_of_view == 1.0

    def test_built_scene_renders(self, scene_config):
        """Test rendering a built scene end to end."""
        from whitted.core.tuples import BLACK
        from whitted.scene.builder import build_camera, build_world

        canvas = build_camera(scene_config, 8, 4, math.pi / 3).render(build_world(scene_config))
        assert canvas.pixel_at(4, 2) != BLACK
