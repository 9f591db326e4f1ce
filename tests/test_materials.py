"""Tests for Lambertian, metal and dielectric scattering."""

import math
import random

import pytest

from core.errors import ConfigurationError
from core.ray import Ray
from core.utils import reflect
from core.vector import Color, Point3, Vector3
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal

from helpers import FixedRandom


def make_record(material, normal=Vector3(0, 1, 0), front_face=True):
    return HitRecord(p=Point3(0, 0, 0), normal=normal, t=1.0, front_face=front_face, material=material)


class TestLambertian:
    @pytest.mark.parametrize("albedo", [Color(0.1, 0.5, 0.9), Color(1, 1, 1), Color(0, 0, 0)])
    def test_never_amplifies_energy(self, albedo):
        material = Lambertian(albedo)
        rng = random.Random(11)
        for _ in range(50):
            ray = Ray(Point3(0, 1, 0), Vector3(0.3, -1, 0.2))
            scattered, attenuation = material.scatter(ray, make_record(material), rng)
            assert all(0.0 <= c <= 1.0 for c in attenuation)

    def test_always_scatters_into_normal_hemisphere(self):
        material = Lambertian(Color(0.5, 0.5, 0.5))
        rng = random.Random(5)
        for _ in range(100):
            result = material.scatter(Ray(Point3(0, 1, 0), Vector3(0, -1, 0)), make_record(material), rng)
            assert result is not None
            scattered, _ = result
            assert scattered.origin == Point3(0, 0, 0)
            assert scattered.direction.dot(Vector3(0, 1, 0)) >= 0

    def test_degenerate_direction_falls_back_to_normal(self):
        material = Lambertian(Color(0.5, 0.5, 0.5))
        # The unit vector drawn is exactly -normal, cancelling it.
        rng = FixedRandom(uniforms=[0.0, -0.5, 0.0])
        scattered, _ = material.scatter(Ray(Point3(0, 1, 0), Vector3(0, -1, 0)), make_record(material), rng)
        assert scattered.direction == Vector3(0, 1, 0)


class TestMetal:
    def test_zero_fuzz_reflects_exactly(self):
        material = Metal(Color(0.8, 0.6, 0.2), 0.0)
        incoming = Vector3(1, -1, 0)
        scattered, attenuation = material.scatter(Ray(Point3(-1, 1, 0), incoming), make_record(material))
        expected = reflect(incoming.normalize(), Vector3(0, 1, 0))
        assert scattered.direction.isclose(expected)
        assert attenuation == Color(0.8, 0.6, 0.2)

    def test_absorbs_when_reflection_goes_below_surface(self):
        material = Metal(Color(0.8, 0.8, 0.8), 0.0)
        # A ray travelling along the normal reflects into the surface.
        assert material.scatter(Ray(Point3(0, -1, 0), Vector3(1, 1, 0)), make_record(material)) is None

    def test_fuzzy_reflection_stays_near_mirror_direction(self):
        material = Metal(Color(0.8, 0.8, 0.8), 0.1)
        incoming = Vector3(1, -1, 0)
        mirror = reflect(incoming.normalize(), Vector3(0, 1, 0))
        rng = random.Random(3)
        for _ in range(50):
            result = material.scatter(Ray(Point3(-1, 1, 0), incoming), make_record(material), rng)
            if result is not None:
                assert (result[0].direction - mirror).length() < 0.1 + 1e-9

    def test_fuzz_is_clamped(self):
        assert Metal(Color(1, 1, 1), 3.0).fuzz == 1.0

    def test_negative_fuzz_rejected(self):
        with pytest.raises(ConfigurationError):
            Metal(Color(1, 1, 1), -0.1)


class TestDielectric:
    def test_index_one_passes_straight_through_at_normal_incidence(self):
        material = Dielectric(1.0)
        rng = random.Random(0)
        for _ in range(20):
            scattered, attenuation = material.scatter(
                Ray(Point3(0, 1, 0), Vector3(0, -2, 0)), make_record(material), rng)
            assert scattered.direction.isclose(Vector3(0, -1, 0))
            assert attenuation == Color(1, 1, 1)

    def test_index_one_passes_straight_through_at_oblique_incidence(self):
        material = Dielectric(1.0)
        incoming = Vector3(0.6, -0.8, 0)
        scattered, _ = material.scatter(Ray(Point3(-0.6, 0.8, 0), incoming), make_record(material),
                                        FixedRandom(0.5))
        assert scattered.direction.isclose(incoming)

    def test_total_internal_reflection_always_reflects(self):
        material = Dielectric(1.5)
        incoming = Vector3(math.sin(math.radians(60)), -math.cos(math.radians(60)), 0)
        # Leaving the glass: the hit is on the back face.
        record = make_record(material, front_face=False)
        # A draw of 0.99 would refract whenever refraction is possible.
        scattered, attenuation = material.scatter(Ray(Point3(0, 1, 0), incoming), record, FixedRandom(0.99))
        assert scattered.direction.isclose(reflect(incoming, Vector3(0, 1, 0)))
        assert attenuation == Color(1, 1, 1)

    def test_schlick_draw_selects_reflection(self):
        material = Dielectric(1.5)
        incoming = Vector3(0, -1, 0)
        reflected, _ = material.scatter(Ray(Point3(0, 1, 0), incoming), make_record(material), FixedRandom(0.0))
        refracted, _ = material.scatter(Ray(Point3(0, 1, 0), incoming), make_record(material), FixedRandom(0.99))
        assert reflected.direction.isclose(Vector3(0, 1, 0))
        assert refracted.direction.isclose(Vector3(0, -1, 0))

    def test_invalid_index_rejected(self):
        with pytest.raises(ConfigurationError):
            Dielectric(0.0)
