"""Many small random spheres around three large ones."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from itertools import product
from typing import Optional

from raytracer.camera import Camera
from raytracer.hittable import Hittable
from raytracer.material import Dielectric, LambertianDiffuse, Material, Metal
from raytracer.scene import SceneConfig
from raytracer.sphere import make_bouncing_sphere, make_sphere
from raytracer.texture import CheckerTexture, SolidColor
from raytracer.vec import Vec3
from raytracer.world import World


@dataclass
class RandomSpheresScene(SceneConfig):
    """Random field of spheres; with ``bounce`` the matte ones move during the shot."""

    bounce: bool = True
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    @property
    def _source(self):
        return self.rng if self.rng is not None else random

    def camera(self) -> Camera:
        look_from = Vec3(13.0, 2.0, 4.0)
        look_at = Vec3(0.0, 0.0, 0.0)
        return Camera.look_from(
            look_from,
            look_at,
            Vec3(0.0, 1.0, 0.0),
            20.0,
            1.5,
            0.0,
            (look_at - look_from).length(),
            0.0,
            0.25,
        )

    def _small_sphere(self, center: Vec3, mat: Material) -> Hittable:
        if self.bounce and isinstance(mat, LambertianDiffuse):
            height = self._source.uniform(0.0, 1.0)
            return make_bouncing_sphere(center, 0.3, height, 0.0, 0.5, mat)
        return make_sphere(center, 0.3, mat)

    def _random_material(self) -> Material:
        rng = self._source
        choice = rng.random()
        if choice < 0.65:
            return LambertianDiffuse(SolidColor.random(self.rng))
        if choice < 0.9:
            return Metal(
                fuzziness=rng.uniform(0.0, 0.5), albedo=Vec3.random(0.5, 1.0, self.rng)
            )
        return Dielectric(1.33, Vec3.one())

    def world(self) -> World:
        rng = self._source
        world = World(self.rng)

        ground = LambertianDiffuse(
            CheckerTexture(
                odd_color=SolidColor(Vec3(1.0, 1.0, 1.0)),
                even_color=SolidColor(Vec3(0.2, 0.3, 0.1)),
            )
        )
        world.add_hittable(make_sphere(Vec3(0.0, -1000.0, -1.0), 1000.0, ground))

        for i, j in product(range(-11, 12), repeat=2):
            if j == 0:
                continue
            center = Vec3(
                i * 1.2 + rng.uniform(-0.5, 0.5),
                0.3,
                j * 1.2 + rng.uniform(-0.5, 0.5),
            )
            world.add_hittable(self._small_sphere(center, self._random_material()))

        m1 = LambertianDiffuse(SolidColor.random(self.rng))
        m2 = Dielectric(1.33, Vec3.one())
        m3 = Metal(fuzziness=0.1, albedo=Vec3(0.7, 0.6, 0.5))
        world.add_hittable(make_sphere(Vec3(-4.0, 1.0, 0.0), 1.0, m1))
        world.add_hittable(make_sphere(Vec3(0.0, 1.0, 0.0), 1.0, m2))
        world.add_hittable(make_sphere(Vec3(4.0, 1.0, 0.0), 1.0, m3))
        world.update_metadata()
        return world