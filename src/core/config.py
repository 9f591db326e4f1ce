"""Render configuration: environment defaults, camera and render settings."""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Tuple

from core.errors import ConfigurationError
from core.vector import Vector3

# Logging settings
LOG_LEVEL = os.getenv("RAYTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("RAYTRACER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Paths
OUTPUT_DIR = Path(os.getenv("RAYTRACER_OUTPUT_DIR", "output"))


def env_int(name: str, default: int) -> int:
    """Reads a positive integer from the environment variable name."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be > 0, got {value}")
    return value


# Parallelism
DEFAULT_WORKERS = env_int("RAYTRACER_WORKERS", os.cpu_count() or 1)

EXECUTORS = ("process", "thread")

# Quality levels, from a quick look at the scene to a final frame.
QUALITY_PRESETS = {
    "interactive": {"samples_per_pixel": 4, "max_depth": 8},
    "balanced": {"samples_per_pixel": 32, "max_depth": 25},
    "high_quality": {"samples_per_pixel": 100, "max_depth": 50},
}


def _as_vector(value, name: str) -> Vector3:
    if isinstance(value, Vector3):
        return value
    try:
        return Vector3.from_sequence(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{name} must be a 3-component vector, got {value!r}") from e


@dataclass(frozen=True)
class CameraConfig:
    """
    Where the camera sits and how its lens behaves.

    Args:
        look_from: Camera position.
        look_at: Point the camera looks at.
        vup: World "up" used to orient the image plane.
        vfov: Vertical field of view in degrees.
        aperture: Lens diameter; 0 gives a pinhole camera with no blur.
        focus_dist: Distance to the plane in perfect focus.
        aspect_ratio: Width / height; derived from the image size when None.
    """
    look_from: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    look_at: Vector3 = field(default_factory=lambda: Vector3(0, 0, -1))
    vup: Vector3 = field(default_factory=lambda: Vector3(0, 1, 0))
    vfov: float = 90.0
    aperture: float = 0.0
    focus_dist: float = 1.0
    aspect_ratio: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "look_from", _as_vector(self.look_from, "look_from"))
        object.__setattr__(self, "look_at", _as_vector(self.look_at, "look_at"))
        object.__setattr__(self, "vup", _as_vector(self.vup, "vup"))

    def validate(self) -> "CameraConfig":
        if not 0.0 < self.vfov < 180.0:
            raise ConfigurationError(f"vfov must be in (0, 180) degrees, got {self.vfov}")
        if self.aperture < 0:
            raise ConfigurationError(f"aperture must be >= 0, got {self.aperture}")
        if self.focus_dist <= 0:
            raise ConfigurationError(f"focus_dist must be > 0, got {self.focus_dist}")
        if self.aspect_ratio is not None and self.aspect_ratio <= 0:
            raise ConfigurationError(f"aspect_ratio must be > 0, got {self.aspect_ratio}")
        view = self.look_from - self.look_at
        if view.near_zero():
            raise ConfigurationError("look_from and look_at must be different points")
        if self.vup.cross(view).near_zero():
            raise ConfigurationError("vup must not be parallel to the viewing direction")
        return self


@dataclass(frozen=True)
class RenderSettings:
    """
    Image size, sampling and scheduling parameters for one render.
    """
    width: int = 400
    height: int = 225
    samples_per_pixel: int = 32
    max_depth: int = 50
    workers: int = DEFAULT_WORKERS
    tile_size: int = 16
    seed: Optional[int] = 0
    executor: str = "process"
    gamma: float = 2.0

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def validate(self) -> "RenderSettings":
        for name in ("width", "height", "samples_per_pixel", "workers", "tile_size"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(self.max_depth, int) or self.max_depth < 0:
            raise ConfigurationError(f"max_depth must be a non-negative integer, got {self.max_depth!r}")
        if self.seed is not None and (not isinstance(self.seed, int) or self.seed < 0):
            raise ConfigurationError(f"seed must be a non-negative integer or None, got {self.seed!r}")
        if self.executor not in EXECUTORS:
            raise ConfigurationError(f"executor must be one of {EXECUTORS}, got {self.executor!r}")
        if self.gamma <= 0:
            raise ConfigurationError(f"gamma must be > 0, got {self.gamma}")
        return self

    def with_overrides(self, **overrides) -> "RenderSettings":
        """Returns a copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_quality(cls, quality: str, **overrides) -> "RenderSettings":
        if quality not in QUALITY_PRESETS:
            raise ConfigurationError(
                f"Unknown quality preset {quality!r}; choose from {sorted(QUALITY_PRESETS)}")
        return cls(**QUALITY_PRESETS[quality]).with_overrides(**overrides)
