import random

import pytest

from raytracer.material import LambertianDiffuse
from raytracer.ray import Ray
from raytracer.skybox import ColorGradientSkyBox
from raytracer.sphere import Sphere
from raytracer.texture import SolidColor
from raytracer.vec import Vec3
from raytracer.world import World


@pytest.fixture
def mat():
    return LambertianDiffuse(SolidColor(Vec3(0.5, 0.5, 0.5)))


def test_default_skybox():
    w = World()
    assert w.skybox == ColorGradientSkyBox(Vec3(1.0, 1.0, 1.0), Vec3(0.5, 0.7, 1.0))


def test_set_skybox():
    w = World()
    dark = ColorGradientSkyBox(Vec3.zero(), Vec3.zero())
    w.skybox = dark
    assert w.skybox.get_color(Ray(Vec3.zero(), Vec3(0.0, 1.0, 0.0))) == Vec3.zero()


def test_hit_after_update(mat):
    w = World(random.Random(4))
    s = Sphere(Vec3(0.0, 0.0, -3.0), 1.0, mat)
    w.add_hittable(s)
    w.add_hittable(Sphere(Vec3(0.0, -100.5, -1.0), 100.0, mat))
    w.update_metadata()
    r = Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0))
    assert w.hit(r, 0.001, float("inf")).t == pytest.approx(s.hit(r, 0.001, float("inf")).t)
    assert w.bounding_box().max.z >= s.bounding_box().max.z


def test_empty_world():
    w = World()
    w.update_metadata()
    assert w.bounding_box() is None
    assert w.hit(Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0)), 0.001, float("inf")) is None


def test_clear(mat):
    w = World()
    w.add_hittable(Sphere(Vec3(0.0, 0.0, -3.0), 1.0, mat))
    w.update_metadata()
    w.clear()
    assert w.bounding_box() is None
    assert w.hit(Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0)), 0.001, float("inf")) is None