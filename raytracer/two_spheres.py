"""A glowing image-mapped globe above a noisy ground sphere."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from raytracer.camera import Camera
from raytracer.imagefile import PathLike, read_picture
from raytracer.material import DiffuseLight, LambertianDiffuse
from raytracer.perlin import Perlin
from raytracer.scene import SceneConfig
from raytracer.skybox import ColorGradientSkyBox
from raytracer.sphere import make_sphere
from raytracer.texture import ImageTexture, NoiseTexture
from raytracer.vec import Vec3
from raytracer.world import World


@dataclass
class TwoSpheresScene(SceneConfig):
    """Two spheres in the dark; the globe texture is read from ``texture_path``."""

    texture_path: PathLike = "assets/textures/earthmap.jpg"
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

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
            0.01,
        )

    def world(self) -> World:
        perlin = Perlin(self.rng)
        image_texture = ImageTexture(read_picture(self.texture_path))
        glowing_material = DiffuseLight(image_texture, 10.0)
        ground_material = LambertianDiffuse(NoiseTexture(perlin, 2.0, shifted=True))

        world = World(self.rng)
        world.add_hittable(make_sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, ground_material))
        world.add_hittable(make_sphere(Vec3(0.0, 2.0, 0.0), 2.0, glowing_material))
        world.skybox = ColorGradientSkyBox(Vec3.zero(), Vec3.zero())
        world.update_metadata()
        return world