# camera/camera.py
import math
import random
from typing import Optional
from core.config import CameraConfig
from core.errors import ConfigurationError
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    A positionable thin-lens camera.

    Raises ConfigurationError for parameters that give no usable view.

    The basis (u, v, w) is built from look_from/look_at/vup: w points backwards
    out of the screen, u to the right and v up. The viewport sits at
    focus_dist in front of the lens, so points on that plane are always sharp.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0, focus_dist: float = 1.0):
        CameraConfig(look_from, look_at, vup, vfov, aperture, focus_dist, aspect_ratio).validate()

        self.origin = look_from
        self.vfov = vfov  # Degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0

        # Compute viewport dimensions based on fov
        theta = math.radians(vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = aspect_ratio * viewport_height

        self.w = (look_from - look_at).normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance
        self.horizontal = self.u * viewport_width * focus_dist
        self.vertical = self.v * viewport_height * focus_dist
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * focus_dist)

    @classmethod
    def from_config(cls, config: CameraConfig, aspect_ratio: Optional[float] = None) -> "Camera":
        """
        Builds a camera from a configuration. The config's own aspect ratio
        wins; otherwise the image's aspect ratio is used.
        """
        if config.aspect_ratio is not None:
            aspect_ratio = config.aspect_ratio
        if aspect_ratio is None:
            raise ConfigurationError("aspect_ratio is required when the camera config has none")
        return cls(config.look_from, config.look_at, config.vup, config.vfov,
                   aspect_ratio, config.aperture, config.focus_dist)

    def get_ray(self, s: float, t: float, rng=random) -> Ray:
        """
        Generates the ray through normalized image-plane coordinates (s, t),
        with s growing to the right and t growing upwards.
        """
        target = self.lower_left_corner + self.horizontal * s + self.vertical * t
        if self.lens_radius <= 0:
            return Ray(self.origin, target - self.origin)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y
        ray_origin = self.origin + offset
        return Ray(ray_origin, target - ray_origin)
