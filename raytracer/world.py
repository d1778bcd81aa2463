"""The scene to render: objects plus a sky box."""

from __future__ import annotations

import random
from typing import Optional

from raytracer.aabb import AABB
from raytracer.container import Container
from raytracer.hittable import HitRecord, Hittable
from raytracer.ray import Ray
from raytracer.skybox import ColorGradientSkyBox, SkyBox
from raytracer.vec import Vec3


class World(Hittable):
    """All objects of a scene and the background seen where nothing is hit."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._container = Container(rng)
        self.skybox: SkyBox = ColorGradientSkyBox(
            v1=Vec3(1.0, 1.0, 1.0), v2=Vec3(0.5, 0.7, 1.0)
        )

    def add_hittable(self, hittable: Hittable) -> None:
        self._container.add_hittable(hittable)

    def update_metadata(self) -> None:
        self._container.update_metadata()

    def clear(self) -> None:
        self._container.clear()

    def bounding_box(self) -> Optional[AABB]:
        return self._container.bounding_box()

    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self._container.hit(r, t_min, t_max)