"""The random spheres scene at night, lit by glowing spheres."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from itertools import product
from typing import Optional

from raytracer.camera import Camera
from raytracer.hittable import Hittable
from raytracer.material import Dielectric, DiffuseLight, LambertianDiffuse, Material, Metal
from raytracer.scene import SceneConfig
from raytracer.skybox import ColorGradientSkyBox
from raytracer.sphere import make_bouncing_sphere, make_sphere
from raytracer.texture import CheckerTexture, SolidColor
from raytracer.vec import Vec3
from raytracer.world import World

DEFAULT_LAYOUT_SEED = 1010101


def _checker() -> CheckerTexture:
    return CheckerTexture(
        odd_color=SolidColor(Vec3(1.0, 1.0, 1.0)),
        even_color=SolidColor(Vec3(0.2, 0.3, 0.1)),
    )


@dataclass
class RandomSpheresNightScene(SceneConfig):
    """Random spheres under a black sky.

    The positions and material choices come from a generator seeded with
    ``seed``, so the layout is the same on every run; colors use ``rng``.
    """

    bounce: bool = False
    seed: int = DEFAULT_LAYOUT_SEED
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    def camera(self) -> Camera:
        look_from = Vec3(12.0, 3.0, 4.0)
        look_at = Vec3(0.0, 0.0, 0.0)
        return Camera.look_from(
            look_from,
            look_at,
            Vec3(0.0, 1.0, 0.0),
            35.0,
            1.5,
            0.0,
            (look_at - look_from).length(),
            0.0,
            0.25,
        )

    def _random_material(self, layout: random.Random) -> Material:
        choice = layout.random()
        if choice < 0.25:
            return LambertianDiffuse(SolidColor.random(self.rng), self.rng)
        if choice < 0.5:
            return DiffuseLight(SolidColor.random(self.rng), layout.uniform(0.5, 2.0))
        if choice < 0.8:
            return Metal(
                fuzziness=layout.uniform(0.0, 0.5),
                albedo=Vec3.random(0.5, 1.0, self.rng),
                rng=self.rng,
            )
        return Dielectric(1.33, Vec3.one(), self.rng)

    def _small_sphere(self, layout: random.Random, center: Vec3, mat: Material) -> Hittable:
        if self.bounce and isinstance(mat, LambertianDiffuse):
            return make_bouncing_sphere(center, 0.3, layout.uniform(0.0, 1.0), 0.0, 0.5, mat)
        return make_sphere(center, 0.3, mat)

    def world(self) -> World:
        world = World(self.rng)
        world.skybox = ColorGradientSkyBox(Vec3.zero(), Vec3.zero())

        ground = LambertianDiffuse(_checker(), self.rng)
        world.add_hittable(make_sphere(Vec3(0.0, -1000.0, -1.0), 1000.0, ground))

        layout = random.Random(self.seed)
        for i, j in product(range(-11, 12), repeat=2):
            if j == 0:
                continue
            center = Vec3(
                i * 1.2 + layout.uniform(-0.5, 0.5),
                0.3,
                j * 1.2 + layout.uniform(-0.5, 0.5),
            )
            mat = self._random_material(layout)
            world.add_hittable(self._small_sphere(layout, center, mat))

        m1 = DiffuseLight(SolidColor.random(self.rng), 3.0)
        m2 = DiffuseLight(_checker(), 1.5)
        m3 = Dielectric(1.33, Vec3.one(), self.rng)
        world.add_hittable(make_sphere(Vec3(-4.0, 1.0, 0.0), 1.0, m1))
        world.add_hittable(make_sphere(Vec3(0.0, 1.0, 0.0), 1.0, m2))
        world.add_hittable(make_sphere(Vec3(4.0, 1.0, 0.0), 1.0, m3))
        world.update_metadata()
        return world