import random

import pytest

from raytracer.constant_medium import ConstantMedium
from raytracer.hittable import Face
from raytracer.material import Dielectric, Isotropic
from raytracer.ray import Ray
from raytracer.sphere import Sphere
from raytracer.texture import SolidColor
from raytracer.vec import Vec3


@pytest.fixture
def boundary():
    return Sphere(Vec3.zero(), 1.0, Dielectric(1.5, Vec3.one()))


@pytest.fixture
def fog():
    return SolidColor(Vec3(0.2, 0.4, 0.9))


RAY = Ray(Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, -1.0), 0.3)


def test_bounding_box_is_boundary(boundary, fog):
    cm = ConstantMedium(boundary, 0.2, fog)
    assert cm.bounding_box() == boundary.bounding_box()


def test_miss_boundary(boundary, fog):
    cm = ConstantMedium(boundary, 1e6, fog, random.Random(0))
    r = Ray(Vec3(5.0, 5.0, 5.0), Vec3(0.0, 0.0, -1.0))
    assert cm.hit(r, 0.001, float("inf")) is None


@pytest.mark.parametrize("seed", range(5))
def test_dense_medium_scatters_at_entry(boundary, fog, seed):
    cm = ConstantMedium(boundary, 1e6, fog, random.Random(seed))
    rec = cm.hit(RAY, 0.001, float("inf"))
    entry = boundary.hit(RAY, 0.001, float("inf")).t
    assert rec.t == pytest.approx(entry, abs=1e-3)
    assert rec.f is Face.OUTWARD
    assert rec.normal == Vec3(1.0, 0.0, 0.0)
    assert rec.p == RAY.at(rec.t)
    assert isinstance(rec.mat, Isotropic)
    assert rec.mat.albedo is fog


@pytest.mark.parametrize("seed", range(5))
def test_thin_medium_lets_ray_through(boundary, fog, seed):
    cm = ConstantMedium(boundary, 1e-12, fog, random.Random(seed))
    assert cm.hit(RAY, 0.001, float("inf")) is None


def test_zero_density_never_scatters(boundary, fog):
    cm = ConstantMedium(boundary, 0.0, fog, random.Random(1))
    assert all(cm.hit(RAY, 0.001, float("inf")) is None for _ in range(20))


def test_t_max_before_entry(boundary, fog):
    cm = ConstantMedium(boundary, 1e6, fog, random.Random(2))
    assert cm.hit(RAY, 0.001, 2.0) is None


@pytest.mark.parametrize("seed", range(10))
def test_hit_lies_inside_volume(boundary, fog, seed):
    cm = ConstantMedium(boundary, 0.5, fog, random.Random(seed))
    rec = cm.hit(RAY, 0.001, float("inf"))
    if rec is not None:
        assert rec.p.length() <= 1.0 + 1e-9
    assert cm.neg_inv_density == pytest.approx(-2.0)