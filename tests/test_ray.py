"""Unit tests for the Ray type.

Tests cover:
- Construction and immutability
- position(t) along the ray
- Transforming rays by translation and scaling
"""

import dataclasses

import pytest


class TestRayBasics:
    """Tests for Ray construction and position."""

    def test_create_ray(self):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector

        origin = point(1, 2, 3)
        direction = vector(4, 5, 6)
        r = Ray(origin, direction)
        assert r.origin == origin
        assert r.direction == direction

    def test_ray_is_frozen(self):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector

        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.origin = point(1, 1, 1)

    @pytest.mark.parametrize(
        "t,expected",
        [(0, (2, 3, 4)), (1, (3, 3, 4)), (-1, (1, 3, 4)), (2.5, (4.5, 3, 4))],
    )
    def test_position(self, t, expected):
        from whitted.core.ray import Ray
        from whitted.core.tuples import point, vector

        r = Ray(point(2, 3, 4), vector(1, 0, 0))
        assert r.position(t) == point(*expected)


class TestRayTransform:
    """Tests for Ray.transform."""

    def test_translate_ray(self):
        from whitted.core.ray import Ray
        from whitted.core.transforms import translation
        from whitted.core.tuples import point, vector

        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r2 = r.transform(translation(3, 4, 5))
        assert r2.origin == point(4, 6, 8)
        assert r2.direction == vector(0, 1, 0)

    def test_scale_ray(self):
        from whitted.core.ray import Ray
        from whitted.core.transforms import scaling
        from whitted.core.tuples import point, vector

        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r2 = r.transform(scaling(2, 3, 4))
        assert r2.origin == point(2, 6, 12)
        assert r2.direction == vector(0, 3, 0)

    def test_transform_returns_new_ray(self):
        from whitted.core.ray import Ray
        from whitted.core.transforms import translation
        from whitted.core.tuples import point, vector

        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r.transform(translation(3, 4, 5))
        assert r.origin == point(1, 2, 3)
