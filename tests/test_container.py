import random

import pytest

from raytracer.aabb import AABB
from raytracer.container import Container
from raytracer.material import LambertianDiffuse
from raytracer.ray import Ray
from raytracer.sphere import Sphere
from raytracer.texture import SolidColor
from raytracer.vec import Vec3


@pytest.fixture
def mat():
    return LambertianDiffuse(SolidColor(Vec3(0.5, 0.5, 0.5)))


def test_empty_container_has_no_box_and_no_hit():
    c = Container()
    c.update_metadata()
    assert c.bounding_box() is None
    assert c.hit(Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0)), 0.0, float("inf")) is None


def test_no_hit_before_update(mat):
    c = Container()
    c.add_hittable(Sphere(Vec3(0.0, 0.0, -3.0), 1.0, mat))
    assert c.hit(Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0)), 0.001, float("inf")) is None


def test_box_includes_origin(mat):
    c = Container(random.Random(1))
    c.add_hittable(Sphere(Vec3(10.0, 10.0, 10.0), 1.0, mat))
    c.update_metadata()
    assert c.bounding_box() == AABB(Vec3(0.0, 0.0, 0.0), Vec3(11.0, 11.0, 11.0))


def test_add_hittables_and_hit(mat):
    near = Sphere(Vec3(0.0, 0.0, -3.0), 1.0, mat)
    far = Sphere(Vec3(0.0, 0.0, -8.0), 1.0, mat)
    c = Container(random.Random(2))
    c.add_hittables([far, near])
    c.update_metadata()
    r = Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0))
    rec = c.hit(r, 0.001, float("inf"))
    assert rec.t == pytest.approx(near.hit(r, 0.001, float("inf")).t)
    assert len(c.hittables) == 2


def test_clear(mat):
    c = Container()
    c.add_hittable(Sphere(Vec3(0.0, 0.0, -3.0), 1.0, mat))
    c.update_metadata()
    c.clear()
    assert c.hittables == []
    assert c.bounding_box() is None
    assert c.hit(Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0)), 0.001, float("inf")) is None