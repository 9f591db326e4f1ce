"""Tests for ray generation by the thin-lens camera."""

import math
import random

import pytest

from camera.camera import Camera
from core.config import CameraConfig
from core.errors import ConfigurationError
from core.vector import Point3, Vector3

from helpers import NoRandom


def pinhole(aspect_ratio=2.0):
    return Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0), 90.0, aspect_ratio)


class TestPinholeCamera:
    def test_center_ray_points_at_look_at(self):
        ray = pinhole().get_ray(0.5, 0.5)
        assert ray.origin == Point3(0, 0, 0)
        assert ray.direction.normalize().isclose(Vector3(0, 0, -1))

    def test_corners_span_the_viewport(self):
        camera = pinhole()
        # vfov 90 gives a viewport 2 high and 4 wide at distance 1.
        assert camera.get_ray(0, 0).direction.isclose(Vector3(-2, -1, -1))
        assert camera.get_ray(1, 1).direction.isclose(Vector3(2, 1, -1))
        assert camera.get_ray(1, 0).direction.isclose(Vector3(2, -1, -1))

    def test_draws_no_random_numbers(self):
        pinhole().get_ray(0.3, 0.7, NoRandom())

    def test_orthonormal_basis(self):
        camera = Camera(Point3(3, 2, 1), Point3(0, 0, 0), Vector3(0, 1, 0), 40.0, 1.5)
        for axis in (camera.u, camera.v, camera.w):
            assert math.isclose(axis.length(), 1.0, rel_tol=1e-9)
        assert abs(camera.u.dot(camera.v)) < 1e-9
        assert abs(camera.u.dot(camera.w)) < 1e-9
        assert abs(camera.v.dot(camera.w)) < 1e-9


class TestDepthOfField:
    def test_lens_rays_converge_on_the_focus_plane(self):
        camera = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0), 90.0, 2.0,
                        aperture=2.0, focus_dist=5.0)
        rng = random.Random(4)
        origins = set()
        for _ in range(20):
            ray = camera.get_ray(0.5, 0.5, rng)
            assert ray.origin.z == 0
            assert ray.origin.length() <= 1.0
            assert ray.at(1.0).isclose(Point3(0, 0, -5))
            origins.add(ray.origin)
        assert len(origins) > 1

    def test_same_random_stream_same_ray(self):
        camera = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0), 60.0, 1.0,
                        aperture=0.5, focus_dist=2.0)
        a = camera.get_ray(0.2, 0.8, random.Random(42))
        b = camera.get_ray(0.2, 0.8, random.Random(42))
        assert a.origin == b.origin
        assert a.direction == b.direction


class TestFromConfig:
    def test_uses_image_aspect_ratio(self, forward_camera_config):
        camera = Camera.from_config(forward_camera_config, aspect_ratio=2.0)
        assert camera.aspect_ratio == 2.0
        assert camera.get_ray(0, 0).direction.isclose(Vector3(-2, -1, -1))

    def test_config_aspect_ratio_wins(self):
        config = CameraConfig(aspect_ratio=1.0)
        assert Camera.from_config(config, aspect_ratio=2.0).aspect_ratio == 1.0

    def test_invalid_config_rejected(self):
        with pytest.raises(ConfigurationError):
            Camera.from_config(CameraConfig(aperture=-1.0), aspect_ratio=1.0)

    def test_missing_aspect_ratio_rejected(self):
        with pytest.raises(ConfigurationError):
            Camera.from_config(CameraConfig())


class TestDirectConstruction:
    @pytest.mark.parametrize("look_from, look_at, vup", [
        (Point3(0, 0, 0), Point3(0, 0, 0), Vector3(0, 1, 0)),
        (Point3(0, 0, 0), Point3(0, 5, 0), Vector3(0, 1, 0)),
    ])
    def test_degenerate_view_rejected(self, look_from, look_at, vup):
        with pytest.raises(ConfigurationError):
            Camera(look_from, look_at, vup, 90.0, 1.0)

    @pytest.mark.parametrize("vfov, aspect_ratio, aperture, focus_dist", [
        (0.0, 1.0, 0.0, 1.0),
        (90.0, -1.0, 0.0, 1.0),
        (90.0, 1.0, -0.5, 1.0),
        (90.0, 1.0, 0.1, 0.0),
    ])
    def test_invalid_lens_rejected(self, vfov, aspect_ratio, aperture, focus_dist):
        with pytest.raises(ConfigurationError):
            Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0), vfov, aspect_ratio,
                   aperture, focus_dist)
