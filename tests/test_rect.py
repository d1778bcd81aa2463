import math

import pytest

from raytracer.hittable import Face
from raytracer.material import LambertianDiffuse
from raytracer.ray import Ray
from raytracer.rect import XYRect, XZRect, YZRect
from raytracer.texture import SolidColor
from raytracer.vec import Vec3


@pytest.fixture
def mat():
    return LambertianDiffuse(SolidColor(Vec3(0.73, 0.73, 0.73)))


def test_xy_rect_hit_from_front(mat):
    rect = XYRect((0.0, 0.0), (2.0, 2.0), 1.0, mat)
    rec = rect.hit(Ray(Vec3(1.0, 1.0, 5.0), Vec3(0.0, 0.0, -1.0)), 0.0, math.inf)
    assert rec.t == pytest.approx(4.0)
    assert rec.p == Vec3(1.0, 1.0, 1.0)
    assert (rec.u, rec.v) == (0.5, 0.5)
    assert rec.normal == Vec3(0.0, 0.0, 1.0)
    assert rec.f is Face.INWARD
    assert rec.mat is mat


def test_xy_rect_hit_from_back_flips_normal(mat):
    rect = XYRect((0.0, 0.0), (2.0, 2.0), 1.0, mat)
    rec = rect.hit(Ray(Vec3(1.0, 1.0, -3.0), Vec3(0.0, 0.0, 1.0)), 0.0, math.inf)
    assert rec.f is Face.OUTWARD
    assert rec.normal == Vec3(0.0, 0.0, -1.0)


def test_xy_rect_miss_outside_bounds(mat):
    rect = XYRect((0.0, 0.0), (2.0, 2.0), 1.0, mat)
    assert rect.hit(Ray(Vec3(3.0, 1.0, 5.0), Vec3(0.0, 0.0, -1.0)), 0.0, math.inf) is None


def test_rect_respects_t_range(mat):
    rect = XYRect((0.0, 0.0), (2.0, 2.0), 1.0, mat)
    ray = Ray(Vec3(1.0, 1.0, 5.0), Vec3(0.0, 0.0, -1.0))
    assert rect.hit(ray, 0.0, 3.0) is None
    assert rect.hit(ray, 4.5, math.inf) is None


def test_parallel_ray_misses(mat):
    rect = XZRect((0.0, 0.0), (2.0, 2.0), 1.0, mat)
    assert rect.hit(Ray(Vec3(1.0, 3.0, 1.0), Vec3(1.0, 0.0, 0.0)), 0.0, math.inf) is None


def test_xz_rect_hit(mat):
    rect = XZRect((0.0, 0.0), (4.0, 2.0), 3.0, mat)
    rec = rect.hit(Ray(Vec3(1.0, 0.0, 1.0), Vec3(0.0, 1.0, 0.0)), 0.0, math.inf)
    assert rec.p == Vec3(1.0, 3.0, 1.0)
    assert rec.u == pytest.approx(0.25)
    assert rec.v == pytest.approx(0.5)
    assert rec.normal.dot(Vec3(0.0, 1.0, 0.0)) < 0.0


def test_yz_rect_hit(mat):
    rect = YZRect((0.0, 0.0), (2.0, 2.0), -1.0, mat)
    rec = rect.hit(Ray(Vec3(5.0, 0.5, 1.5), Vec3(-1.0, 0.0, 0.0)), 0.0, math.inf)
    assert rec.p == Vec3(-1.0, 0.5, 1.5)
    assert rec.u == pytest.approx(0.25)
    assert rec.v == pytest.approx(0.75)
    assert rec.f is Face.INWARD
    assert rec.normal == Vec3(1.0, 0.0, 0.0)


def test_bounding_boxes(mat):
    xy = XYRect((0.0, 1.0), (2.0, 3.0), 5.0, mat).bounding_box()
    assert xy.min == Vec3(0.0, 1.0, 5.0 - 0.001)
    assert xy.max == Vec3(2.0, 3.0, 5.0 + 0.001)
    xz = XZRect((0.0, 1.0), (2.0, 3.0), 5.0, mat).bounding_box()
    assert xz.min == Vec3(0.0, 5.0 - 0.001, 1.0)
    assert xz.max == Vec3(2.0, 5.0, 3.0)
    yz = YZRect((0.0, 1.0), (2.0, 3.0), 5.0, mat).bounding_box()
    assert yz.min == Vec3(5.0 - 0.001, 0.0, 1.0)
    assert yz.max == Vec3(5.0 + 0.001, 2.0, 3.0)


def test_named_bounds(mat):
    rect = YZRect((1.0, 2.0), (3.0, 4.0), 7.0, mat)
    assert (rect.y0, rect.z0, rect.y1, rect.z1, rect.x) == (1.0, 2.0, 3.0, 4.0, 7.0)