"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside (front face)
- Ray missing sphere
- Ray starting inside sphere (back face)
- Ray tangent to sphere
- Hit points lying on the ray for random rays
"""

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere

T_MIN = 0.001
T_MAX = float("inf")


@pytest.fixture
def unit_sphere():
    return Sphere(Vector3(0, 0, 0), 1.0, material="mat")


class TestSphereIntersection:
    """Tests for Sphere.hit."""

    def test_direct_hit(self, unit_sphere):
        rec = unit_sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), T_MIN, T_MAX)
        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert rec.p.to_tuple() == pytest.approx((0, 0, 1))
        assert rec.normal.to_tuple() == pytest.approx((0, 0, 1))
        assert rec.front_face
        assert rec.material == "mat"

    def test_miss(self, unit_sphere):
        assert unit_sphere.hit(Ray(Vector3(5, 0, 0), Vector3(0, 0, -1)), T_MIN, T_MAX) is None

    def test_inside_uses_far_root_and_flips_normal(self, unit_sphere):
        rec = unit_sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)), T_MIN, T_MAX)
        assert rec is not None
        assert rec.t == pytest.approx(1.0)
        assert not rec.front_face
        assert rec.normal.to_tuple() == pytest.approx((0, 0, -1))

    def test_both_roots_out_of_range(self, unit_sphere):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert unit_sphere.hit(ray, T_MIN, 3.0) is None
        assert unit_sphere.hit(ray, 6.5, T_MAX) is None

    def test_negative_radius_reports_back_face(self):
        hollow = Sphere(Vector3(0, 0, 0), -1.0, None)
        rec = hollow.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), T_MIN, T_MAX)
        assert rec.t == pytest.approx(4.0)
        assert not rec.front_face
        assert rec.normal.to_tuple() == pytest.approx((0, 0, 1))

    def test_hit_at_interval_bound_is_accepted(self, unit_sphere):
        rec = unit_sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), T_MIN, 4.0)
        assert rec.t == pytest.approx(4.0)

    def test_tangent_ray_is_stable(self, unit_sphere):
        """A grazing ray is classified the same way on every evaluation."""
        ray = Ray(Vector3(1, 0, -5), Vector3(0, 0, 1))
        results = [unit_sphere.hit(ray, T_MIN, T_MAX) for _ in range(100)]
        hits = {rec is not None for rec in results}
        assert len(hits) == 1
        if results[0] is not None:
            assert {rec.t for rec in results} == {results[0].t}

    def test_hit_point_lies_on_ray(self, rng):
        sphere = Sphere(Vector3(1, -2, 3), 1.5, material=None)
        checked = 0
        for _ in range(200):
            origin = Vector3.random(rng, -10, 10)
            target = sphere.center + Vector3.random(rng, -1, 1)
            ray = Ray(origin, target - origin)
            rec = sphere.hit(ray, T_MIN, T_MAX)
            if rec is None:
                continue
            checked += 1
            assert T_MIN <= rec.t <= T_MAX
            expected = ray.at(rec.t)
            assert rec.p.to_tuple() == pytest.approx(expected.to_tuple())
            assert (rec.p - sphere.center).length() == pytest.approx(1.5)
            assert rec.normal.dot(ray.direction) <= 0
        assert checked > 0


class TestSphereBoundingBox:
    def test_box_is_center_plus_minus_radius(self):
        box = Sphere(Vector3(1, 2, 3), 0.5, None).bounding_box()
        assert box.minimum.to_tuple() == pytest.approx((0.5, 1.5, 2.5))
        assert box.maximum.to_tuple() == pytest.approx((1.5, 2.5, 3.5))

    def test_negative_radius_box_is_not_inverted(self):
        box = Sphere(Vector3(0, 0, 0), -2.0, None).bounding_box()
        assert box.minimum.to_tuple() == pytest.approx((-2, -2, -2))
        assert box.maximum.to_tuple() == pytest.approx((2, 2, 2))

    def test_box_encloses_hit_points(self, rng):
        sphere = Sphere(Vector3(0, 0, 0), 2.0, None)
        box = sphere.bounding_box()
        for _ in range(50):
            direction = Vector3.random(rng, -1, 1)
            rec = sphere.hit(Ray(Vector3(0, 0, 0), direction), T_MIN, T_MAX)
            if rec is None:
                continue
            for axis in range(3):
                assert box.minimum[axis] - 1e-9 <= rec.p[axis] <= box.maximum[axis] + 1e-9
        assert box.maximum - box.minimum == Vector3(4, 4, 4)
