"""Unit tests for sphere intersection and normals.

Tests cover:
- Ray hitting the sphere from outside, tangent, missing
- Ray starting inside the sphere and in front of it
- Transformed spheres (scaled, translated)
- Normals on the axes, off-axis, and under transforms
- The glass sphere factory
"""

import math

import pytest


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    @pytest.mark.parametrize(
        "origin,expected",
        [
            ((0, 0, -5), [4.0, 6.0]),
            # Tangent: both roots coincide
            ((0, 1, -5), [5.0, 5.0]),
            ((0, 2, -5), []),
            # Origin inside the sphere
            ((0, 0, 0), [-1.0, 1.0]),
            # Sphere behind the ray
            ((0, 0, 5), [-6.0, -4.0]),
        ],
    )
    def test_local_intersect(self, origin, expected):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.sphere import Sphere

        hits = Sphere().local_intersect(Ray(point(*origin), vector(0, 0, 1)))
        assert [h.t for h in hits] == pytest.approx(expected)

    def test_intersect_sets_object(self):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector
        from whitted.geometry.shape import sphere

        s = sphere()
        xs = s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert len(xs) == 2
        assert xs[0].object is s
        assert xs[1].object is s

    def test_scaled_sphere(self):
        from whitted.core.ray import Ray
        from whitted.core.transforms import scaling
        from whitted.core.tuples import point, vector
        from whitted.geometry.shape import sphere

        s = sphere(transform=scaling(2, 2, 2))
        xs = s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([3.0, 7.0])

    def test_translated_sphere_misses(self):
        from whitted.core.ray import Ray
        from whitted.core.transforms import translation
        from whitted.core.tuples import point, vector
        from whitted.geometry.shape import sphere

        s = sphere(transform=translation(5, 0, 0))
        assert s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1))) == []

    def test_transform_does_not_change_the_ray(self):
        from whitted.core.ray import Ray
        from whitted.core.transforms import scaling
        from whitted.core.tuples import point, vector
        from whitted.geometry.shape import sphere

        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        sphere(transform=scaling(2, 2, 2)).intersect(r)
        assert r.origin == point(0, 0, -5)
        assert r.direction == vector(0, 0, 1)


class TestSphereNormal:
    """Tests for sphere surface normals."""

    @pytest.mark.parametrize(
        "p,expected",
        [
            ((1, 0, 0), (1, 0, 0)),
            ((0, 1, 0), (0, 1, 0)),
            ((0, 0, 1), (0, 0, 1)),
        ],
    )
    def test_normal_on_axes(self, p, expected):
        from whitted.core.tuples import point, vector
        from whitted.geometry.shape import sphere

        assert sphere().normal_at(point(*p)) == vector(*expected)

    def test_normal_is_normalized(self):
        from whitted.core.tuples import point, vector
        from whitted.geometry.shape import sphere

        k = math.sqrt(3) / 3
        n = sphere().normal_at(point(k, k, k))
        assert n == vector(k, k, k)
        assert n == n.normalize()

    def test_normal_on_translated_sphere(self):
        from whitted.core.transforms import translation
        from whitted.core.tuples import point, vector
        from whitted.geometry.shape import sphere

        s = sphere(transform=translation(0, 1, 0))
        assert s.normal_at(point(0, 1.70711, -0.70711)) == vector(0, 0.70711, -0.70711)

    def test_normal_on_transformed_sphere(self):
        from whitted.core.transforms import rotation_z, scaling
        from whitted.core.tuples import point, vector
        from whitted.geometry.shape import sphere

        s = sphere(transform=scaling(1, 0.5, 1) @ rotation_z(math.pi / 5))
        root = math.sqrt(2) / 2
        assert s.normal_at(point(0, root, -root)) == vector(0, 0.97014, -0.24254)


class TestGlassSphere:
    """Tests for the glass sphere factory."""

    def test_glass_sphere_material(self):
        from whitted.core.matrix import Matrix
        from whitted.geometry.shape import glass_sphere

        s = glass_sphere()
        assert s.transform == Matrix.identity()
        assert s.material.transparency == 1.0
        assert s.material.refractive_index == 1.5
