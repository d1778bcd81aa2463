"""Interface of configured scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from raytracer.camera import Camera
from raytracer.world import World


class SceneConfig(ABC):
    """A ready-made scene: a camera and the world it looks at."""

    @abstractmethod
    def camera(self) -> Camera:
        """The camera to render the scene with."""

    @abstractmethod
    def world(self) -> World:
        """The objects of the scene, with metadata up to date."""