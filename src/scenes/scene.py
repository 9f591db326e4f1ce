# scenes/scene.py
from dataclasses import dataclass, field

from core.config import CameraConfig
from geometry.world import HittableList


@dataclass
class Scene:
    """A world to render and the camera configuration to render it with."""
    name: str
    world: HittableList = field(default_factory=HittableList)
    camera: CameraConfig = field(default_factory=CameraConfig)
