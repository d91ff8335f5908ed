"""Tests for material scattering and emission."""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials import (
    Dielectric,
    DiffuseLight,
    EmissiveLambertian,
    EmissiveMetal,
    Lambertian,
    Metal,
)
from pathtracer.materials.dielectric import schlick

UP = Vector3(0, 1, 0)


def _record(normal=UP, front_face=True, material=None):
    return HitRecord(p=Vector3(0, 0, 0), normal=normal, t=1.0,
                     front_face=front_face, material=material)


class TestLambertian:
    def test_attenuation_is_albedo(self, rng):
        albedo = Color(0.2, 0.4, 0.6)
        ray, attenuation = Lambertian(albedo).scatter(
            Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), _record(), rng)
        assert attenuation is albedo
        assert ray.origin == Vector3(0, 0, 0)

    def test_scatters_into_upper_hemisphere(self, rng):
        material = Lambertian(Color(0.5, 0.5, 0.5))
        for _ in range(100):
            ray, _ = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)),
                                      _record(), rng)
            assert ray.direction.dot(UP) >= 0

    def test_degenerate_direction_falls_back_to_normal(self, scripted_rng):
        # The unit vector drawn is exactly -normal.
        rng = scripted_rng(uniforms=[0.0, -0.5, 0.0])
        ray, _ = Lambertian(Color(1, 1, 1)).scatter(
            Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), _record(), rng)
        assert ray.direction == UP


class TestMetal:
    def test_mirror_reflection(self, rng):
        incoming = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
        ray, attenuation = Metal(Color(0.9, 0.9, 0.9), 0.0).scatter(incoming, _record(), rng)
        s = 1 / math.sqrt(2)
        assert ray.direction.to_tuple() == pytest.approx((s, s, 0))
        assert attenuation == Color(0.9, 0.9, 0.9)

    def test_absorbs_when_reflection_goes_below_surface(self, rng):
        # A ray leaving the surface reflects into it and is absorbed.
        incoming = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
        assert Metal(Color(1, 1, 1)).scatter(incoming, _record(), rng) is None

    @pytest.mark.parametrize("fuzz, expected", [(-0.5, 0.0), (0.3, 0.3), (4.0, 1.0)])
    def test_fuzz_is_clamped(self, fuzz, expected):
        assert Metal(Color(1, 1, 1), fuzz).fuzz == expected

    def test_fuzzy_reflection_stays_above_surface(self, rng):
        material = Metal(Color(1, 1, 1), 1.0)
        incoming = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
        for _ in range(100):
            result = material.scatter(incoming, _record(), rng)
            if result is not None:
                assert result[0].direction.dot(UP) > 0


class TestDielectric:
    def test_schlick_at_normal_incidence(self):
        assert schlick(1.0, 1.5) == pytest.approx(0.04)
        assert schlick(0.0, 1.5) == pytest.approx(1.0)

    def test_total_internal_reflection(self, scripted_rng):
        # Inside glass at a grazing angle: no refracted ray exists.
        incoming = Ray(Vector3(0, 0, 0), Vector3(1, -0.1, 0))
        rec = _record(front_face=False)
        ray, attenuation = Dielectric(1.5).scatter(incoming, rec, scripted_rng(randoms=[0.99]))
        expected = Vector3(1, 0.1, 0).normalize()
        assert ray.direction.to_tuple() == pytest.approx(expected.to_tuple())
        assert attenuation == Color(1, 1, 1)

    def test_refracts_straight_through_at_normal_incidence(self, scripted_rng):
        incoming = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        ray, _ = Dielectric(1.5).scatter(incoming, _record(), scripted_rng(randoms=[0.5]))
        assert ray.direction.to_tuple() == pytest.approx((0, -1, 0))

    def test_fresnel_reflection_when_draw_is_small(self, scripted_rng):
        incoming = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        ray, _ = Dielectric(1.5).scatter(incoming, _record(), scripted_rng(randoms=[0.01]))
        assert ray.direction.to_tuple() == pytest.approx((0, 1, 0))

    def test_refraction_bends_towards_normal(self, scripted_rng):
        incoming = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
        ray, _ = Dielectric(1.5).scatter(incoming, _record(), scripted_rng(randoms=[0.99]))
        direction = ray.direction.normalize()
        sin_out = abs(direction.x)
        assert sin_out == pytest.approx(math.sin(math.pi / 4) / 1.5)
        assert direction.y < 0


class TestEmission:
    def test_diffuse_light_emits_and_absorbs(self, rng):
        light = DiffuseLight(Color(4, 4, 4))
        assert light.emitted() == Color(4, 4, 4)
        assert light.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), _record(), rng) is None

    @pytest.mark.parametrize("material", [
        Lambertian(Color(0.5, 0.5, 0.5)),
        Metal(Color(0.5, 0.5, 0.5)),
        Dielectric(1.5),
    ])
    def test_non_emitters_are_black(self, material):
        assert material.emitted() == Color(0, 0, 0)

    def test_emissive_lambertian_defaults_to_albedo(self):
        assert EmissiveLambertian(Color(0.3, 0.2, 0.1)).emitted() == Color(0.3, 0.2, 0.1)
        glowing = EmissiveLambertian(Color(0.3, 0.2, 0.1), Color(2, 2, 2))
        assert glowing.emitted() == Color(2, 2, 2)

    def test_emissive_metal_still_reflects(self, rng):
        material = EmissiveMetal(Color(0.5, 0.5, 0.5), 0.0, Color(1, 1, 1))
        assert material.emitted() == Color(1, 1, 1)
        result = material.scatter(Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0)), _record(), rng)
        assert result is not None
