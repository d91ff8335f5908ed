"""Unit tests for the axis-aligned bounding box and vector helpers."""

import pytest

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


@pytest.fixture
def unit_box():
    return AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))


class TestSlabTest:
    """Tests for AABB.hit."""

    def test_axis_aligned_ray_through_box(self, unit_box):
        """A ray with two zero direction components still hits."""
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert unit_box.hit(ray, 0.0, float("inf"))

    def test_axis_aligned_ray_outside_slab_misses(self, unit_box):
        """Zero direction on an axis where the origin lies outside the slab."""
        ray = Ray(Vector3(2, 0, -5), Vector3(0, 0, 1))
        assert not unit_box.hit(ray, 0.0, float("inf"))

    def test_negative_direction_swaps_bounds(self, unit_box):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert unit_box.hit(ray, 0.0, float("inf"))

    def test_box_behind_ray_misses(self, unit_box):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, 1))
        assert not unit_box.hit(ray, 0.0, float("inf"))

    def test_interval_ends_before_box(self, unit_box):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert not unit_box.hit(ray, 0.0, 3.0)

    def test_diagonal_ray(self, unit_box):
        ray = Ray(Vector3(-5, -5, -5), Vector3(1, 1, 1))
        assert unit_box.hit(ray, 0.0, float("inf"))

    def test_diagonal_ray_passing_beside(self, unit_box):
        ray = Ray(Vector3(-5, 5, 0), Vector3(1, 1, 0))
        assert not unit_box.hit(ray, 0.0, float("inf"))


class TestBoxUnion:
    """Tests for surrounding_box and contains."""

    def test_surrounding_box_is_componentwise(self):
        a = AABB(Vector3(0, -2, 1), Vector3(1, 0, 3))
        b = AABB(Vector3(-1, 0, 2), Vector3(0.5, 4, 5))
        box = AABB.surrounding_box(a, b)
        assert box.minimum == Vector3(-1, -2, 1)
        assert box.maximum == Vector3(1, 4, 5)
        assert box.contains(a)
        assert box.contains(b)

    def test_contains_rejects_larger_box(self, unit_box):
        bigger = AABB(Vector3(-2, -1, -1), Vector3(1, 1, 1))
        assert not unit_box.contains(bigger)
        assert bigger.contains(unit_box)


class TestVector3:
    """Tests for the small vector helpers the engine relies on."""

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-9, 1e-3, 0).near_zero()

    def test_normalize_zero_vector(self):
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_indexing_by_axis(self):
        v = Vector3(1, 2, 3)
        assert [v[0], v[1], v[2]] == [1, 2, 3]
        with pytest.raises(IndexError):
            v[3]

    def test_random_stays_in_range(self, rng):
        for _ in range(50):
            v = Vector3.random(rng, -2, 2)
            assert all(-2 <= c < 2 for c in v.to_tuple())
