"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Make the src/ packages importable without installing the project.
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from core.config import CameraConfig, RenderSettings  # noqa: E402
from core.vector import Color, Point3  # noqa: E402
from geometry.sphere import Sphere  # noqa: E402
from geometry.world import HittableList  # noqa: E402
from materials.dielectric import Dielectric  # noqa: E402
from materials.lambertian import Lambertian  # noqa: E402
from materials.metal import Metal  # noqa: E402


@pytest.fixture
def small_settings():
    """A tiny single-worker render, fast enough for unit tests."""
    return RenderSettings(width=8, height=6, samples_per_pixel=2, max_depth=5,
                          workers=1, tile_size=4, seed=7, executor="thread")


@pytest.fixture
def forward_camera_config():
    """Pinhole camera at the origin looking down -z with a 90 degree field of view."""
    return CameraConfig(look_from=Point3(0, 0, 0), look_at=Point3(0, 0, -1),
                        vup=Point3(0, 1, 0), vfov=90.0, aperture=0.0, focus_dist=1.0)


@pytest.fixture
def mixed_world():
    """Ground, a diffuse, a fuzzy metal and a hollow glass sphere."""
    glass = Dielectric(1.5)
    return HittableList([
        Sphere(Point3(0, -100.5, -1), 100, Lambertian(Color(0.8, 0.8, 0.0))),
        Sphere(Point3(0, 0, -1), 0.5, Lambertian(Color(0.1, 0.2, 0.5))),
        Sphere(Point3(1, 0, -1), 0.5, Metal(Color(0.8, 0.6, 0.2), 0.3)),
        Sphere(Point3(-1, 0, -1), 0.5, glass),
        Sphere(Point3(-1, 0, -1), -0.4, glass),
    ])
