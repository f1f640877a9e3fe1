"""Unit tests for plane and cube primitives.

Tests cover:
- Plane normal and parallel/coplanar/above/below intersections
- Cube slab intersection on every face, from inside, and misses
- Cube face normals, including corners
"""

import pytest


class TestPlane:
    """Tests for the xz-plane."""

    def test_normal_is_constant(self):
        from whitted.core.tuples import point, vector
        from whitted.geometry.plane import Plane

        p = Plane()
        for pt in (point(0, 0, 0), point(10, 0, -10), point(-5, 0, 150)):
            assert p.local_normal_at(pt) == vector(0, 1, 0)

    @pytest.mark.parametrize(
        "origin",
        [
            (0, 10, 0),  # parallel
            (0, 0, 0),  # coplanar
        ],
    )
    def test_parallel_and_coplanar_miss(self, origin):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.plane import Plane

        assert Plane().local_intersect(Ray(point(*origin), vector(0, 0, 1))) == []

    @pytest.mark.parametrize("y", [1.0, -1.0])
    def test_hit_from_above_and_below(self, y):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.shape import plane

        p = plane()
        xs = p.intersect(Ray(point(0, y, 0), vector(0, -y, 0)))
        assert len(xs) == 1
        assert xs[0].t == pytest.approx(1.0)
        assert xs[0].object is p


class TestCube:
    """Tests for the axis-aligned cube."""

    @pytest.mark.parametrize(
        "origin,direction,t1,t2",
        [
            ((5, 0.5, 0), (-1, 0, 0), 4, 6),
            ((-5, 0.5, 0), (1, 0, 0), 4, 6),
            ((0.5, 5, 0), (0, -1, 0), 4, 6),
            ((0.5, -5, 0), (0, 1, 0), 4, 6),
            ((0.5, 0, 5), (0, 0, -1), 4, 6),
            ((0.5, 0, -5), (0, 0, 1), 4, 6),
            ((0, 0.5, 0), (0, 0, 1), -1, 1),
        ],
    )
    def test_ray_intersects_cube(self, origin, direction, t1, t2):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.cube import Cube

        hits = Cube().local_intersect(Ray(point(*origin), vector(*direction)))
        assert [h.t for h in hits] == pytest.approx([t1, t2])

    @pytest.mark.parametrize(
        "origin,direction",
        [
            ((-2, 0, 0), (0.2673, 0.5345, 0.8018)),
            ((0, -2, 0), (0.8018, 0.2673, 0.5345)),
            ((0, 0, -2), (0.5345, 0.8018, 0.2673)),
            ((2, 0, 2), (0, 0, -1)),
            ((0, 2, 2), (0, -1, 0)),
            ((2, 2, 0), (-1, 0, 0)),
        ],
    )
    def test_ray_misses_cube(self, origin, direction):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.cube import Cube

        assert Cube().local_intersect(Ray(point(*origin), vector(*direction))) == []

    @pytest.mark.parametrize(
        "p,expected",
        [
            ((1, 0.5, -0.8), (1, 0, 0)),
            ((-1, -0.2, 0.9), (-1, 0, 0)),
            ((-0.4, 1, -0.1), (0, 1, 0)),
            ((0.3, -1, -0.7), (0, -1, 0)),
            ((-0.6, 0.3, 1), (0, 0, 1)),
            ((0.4, 0.4, -1), (0, 0, -1)),
            ((1, 1, 1), (1, 0, 0)),
            ((-1, -1, -1), (-1, 0, 0)),
        ],
    )
    def test_normal_on_cube(self, p, expected):
        from whitted.core.tuples import point, vector
        from whitted.geometry.cube import Cube

        assert Cube().local_normal_at(point(*p)) == vector(*expected)

    def test_check_axis_parallel_gives_infinite_bounds(self):
        import math

        from whitted.geometry.cube import check_axis

        assert check_axis(0.0, 0.0) == (-math.inf, math.inf)
        assert check_axis(2.0, 0.0) == (-math.inf, -math.inf)
