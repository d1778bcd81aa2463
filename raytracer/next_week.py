"""The showcase scene: boxes, fog, glass, metal, a globe and noise."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from itertools import product
from typing import Optional

from raytracer.camera import Camera
from raytracer.constant_medium import ConstantMedium
from raytracer.container import Container
from raytracer.cube import Cube
from raytracer.imagefile import PathLike, read_picture
from raytracer.material import Dielectric, DiffuseLight, LambertianDiffuse, Metal
from raytracer.perlin import Perlin
from raytracer.rect import XZRect
from raytracer.scene import SceneConfig
from raytracer.skybox import ColorGradientSkyBox
from raytracer.sphere import MovingSphere, Sphere, make_sphere
from raytracer.texture import ImageTexture, NoiseTexture, SolidColor
from raytracer.vec import Vec3
from raytracer.world import World

BOXES_PER_SIDE = 20
BOX_WIDTH = 100.0
BALL_COUNT = 1000


@dataclass
class NextWeekFinalScene(SceneConfig):
    """Final scene of many features; the globe texture is read from ``texture_path``."""

    texture_path: PathLike = "assets/textures/earthmap.jpg"
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    @property
    def _source(self):
        return self.rng if self.rng is not None else random

    def camera(self) -> Camera:
        look_from = Vec3(478.0, 278.0, -600.0)
        look_at = Vec3(278.0, 278.0, 0.0)
        return Camera.look_from(
            look_from,
            look_at,
            Vec3(0.0, 1.0, 0.0),
            40.0,
            1.0,
            0.0,
            (look_at - look_from).length(),
            0.0,
            1.0,
        )

    def _ground(self) -> Container:
        ground = LambertianDiffuse(SolidColor(Vec3(0.48, 0.83, 0.53)), self.rng)
        boxes = Container(self.rng)
        for i, j in product(range(BOXES_PER_SIDE), repeat=2):
            x0 = -1000.0 + i * BOX_WIDTH
            z0 = -1000.0 + j * BOX_WIDTH
            y1 = self._source.uniform(1.0, 101.0)
            boxes.add_hittable(
                Cube(
                    Vec3(x0, 0.0, z0),
                    Vec3(x0 + BOX_WIDTH, y1, z0 + BOX_WIDTH),
                    ground,
                    self.rng,
                )
            )
        boxes.update_metadata()
        return boxes

    def world(self) -> World:
        rng = self.rng
        world = World(rng)
        world.add_hittable(self._ground())

        white = SolidColor(Vec3(1.0, 1.0, 1.0))
        light = DiffuseLight(white, 7.0)
        world.add_hittable(XZRect((123.0, 147.0), (423.0, 412.0), 554.0, light))

        center1 = Vec3(400.0, 400.0, 200.0)
        center2 = center1 + Vec3(30.0, 0.0, 0.0)
        moving_mat = LambertianDiffuse(SolidColor(Vec3(0.7, 0.3, 0.1)), rng)
        world.add_hittable(MovingSphere(center1, center2, 0.0, 1.0, 50.0, moving_mat))

        world.add_hittable(Sphere(Vec3(260.0, 150.0, 45.0), 50.0, Dielectric(1.5, Vec3.one(), rng)))
        world.add_hittable(
            Sphere(Vec3(0.0, 150.0, 145.0), 50.0, Metal(5.0, Vec3(0.8, 0.8, 0.9), rng))
        )

        glass = Dielectric(1.5, Vec3.one(), rng)
        boundary = make_sphere(Vec3(360.0, 150.0, 45.0), 70.0, glass)
        world.add_hittable(boundary)
        world.add_hittable(ConstantMedium(boundary, 0.2, SolidColor(Vec3(0.2, 0.4, 0.9)), rng))

        # Thin fog over the whole scene for a glowing look.
        everything = Sphere(Vec3.zero(), 5000.0, glass)
        world.add_hittable(ConstantMedium(everything, 0.0001, SolidColor(Vec3.one()), rng))

        earth = LambertianDiffuse(ImageTexture(read_picture(self.texture_path)), rng)
        world.add_hittable(make_sphere(Vec3(400.0, 200.0, 400.0), 100.0, earth))

        balls = Container(rng)
        white_mat = LambertianDiffuse(white, rng)
        offset = Vec3(-100.0, 270.0, 395.0)
        for _ in range(BALL_COUNT):
            balls.add_hittable(make_sphere(Vec3.random(0.0, 165.0, rng) + offset, 10.0, white_mat))
        balls.update_metadata()
        world.add_hittable(balls)

        noise = NoiseTexture(Perlin(rng), 1.0, shifted=False)
        world.add_hittable(
            make_sphere(Vec3(220.0, 280.0, 300.0), 80.0, LambertianDiffuse(noise, rng))
        )

        world.update_metadata()
        world.skybox = ColorGradientSkyBox(Vec3.zero(), Vec3.zero())
        return world