"""The classic Cornell box with two rotated blocks."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from raytracer.camera import Camera
from raytracer.cube import Cube
from raytracer.material import DiffuseLight, LambertianDiffuse
from raytracer.rect import XYRect, XZRect, YZRect
from raytracer.rotate import RotateY
from raytracer.scene import SceneConfig
from raytracer.skybox import ColorGradientSkyBox
from raytracer.texture import SolidColor
from raytracer.vec import Vec3
from raytracer.world import World


@dataclass
class CornellBoxScene(SceneConfig):
    """Closed box lit by a ceiling lamp, open towards the camera."""

    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    def camera(self) -> Camera:
        look_from = Vec3(273.0, 273.0, 1300.0)
        look_at = Vec3(273.0, 273.0, 0.0)
        return Camera.look_from(
            look_from,
            look_at,
            Vec3(0.0, 1.0, 0.0),
            40.0,
            1.0,
            0.0,
            (look_at - look_from).length(),
            0.0,
            0.01,
        )

    def world(self) -> World:
        red = LambertianDiffuse(SolidColor(Vec3(0.65, 0.05, 0.05)))
        white = LambertianDiffuse(SolidColor(Vec3(0.73, 0.73, 0.73)))
        green = LambertianDiffuse(SolidColor(Vec3(0.12, 0.45, 0.15)))
        light = DiffuseLight(SolidColor(Vec3(1.0, 1.0, 1.0)), 15.0)

        world = World(self.rng)
        walls = (
            YZRect((0.0, 0.0), (555.0, 555.0), 555.0, green),
            YZRect((0.0, 0.0), (555.0, 555.0), 0.0, red),
            XZRect((0.0, 0.0), (555.0, 555.0), 0.0, white),
            XZRect((0.0, 0.0), (555.0, 555.0), 555.0, white),
            XYRect((0.0, 0.0), (555.0, 555.0), 0.0, white),
            XZRect((213.0, 227.0), (343.0, 332.0), 554.0, light),
        )
        for wall in walls:
            world.add_hittable(wall)

        short_block = Cube(Vec3(265.0, 0.0, 295.0), Vec3(430.0, 165.0, 460.0), white, self.rng)
        tall_block = Cube(Vec3(130.0, 0.0, 100.0), Vec3(295.0, 330.0, 300.0), white, self.rng)
        world.add_hittable(RotateY(short_block, -5.0))
        world.add_hittable(RotateY(tall_block, 10.0))

        world.skybox = ColorGradientSkyBox(Vec3.zero(), Vec3.zero())
        world.update_metadata()
        return world