import random

import pytest

from raytracer.camera import Camera, random_in_unit_disk
from raytracer.vec import Vec3

LOOK_FROM = Vec3(13.0, 2.0, 4.0)
LOOK_AT = Vec3(0.0, 0.0, 0.0)


def make_camera(aperture=0.0):
    return Camera.look_from(
        LOOK_FROM,
        LOOK_AT,
        Vec3(0.0, 1.0, 0.0),
        20.0,
        1.5,
        aperture,
        (LOOK_AT - LOOK_FROM).length(),
        0.0,
        0.25,
    )


def test_random_in_unit_disk_from_benchmark():
    rng = random.Random(2)
    for _ in range(500):
        p = random_in_unit_disk(rng)
        assert p.length_square() < 1.0
        assert p.z == 0.0


def test_aspect_ratio():
    assert make_camera().aspect_ratio() == pytest.approx(1.5)


def test_center_ray_points_at_target():
    cam = make_camera()
    r = cam.get_ray(0.5, 0.5, random.Random(1))
    assert r.orig == LOOK_FROM
    expected = (LOOK_AT - LOOK_FROM).unit_vector()
    for got, want in zip(r.dir.unit_vector(), expected):
        assert got == pytest.approx(want)


def test_ray_time_within_shutter():
    cam = make_camera()
    rng = random.Random(4)
    for _ in range(100):
        assert 0.0 <= cam.get_ray(0.2, 0.7, rng).t < 0.25


def test_lens_offsets_stay_within_radius():
    cam = make_camera(aperture=2.0)
    rng = random.Random(8)
    for _ in range(100):
        r = cam.get_ray(0.3, 0.6, rng)
        assert (r.orig - LOOK_FROM).length() < cam.lens_radius + 1e-9


def test_basis_is_orthonormal():
    cam = make_camera()
    assert cam.u.dot(cam.v) == pytest.approx(0.0, abs=1e-12)
    assert cam.u.dot(cam.w) == pytest.approx(0.0, abs=1e-12)
    assert cam.v.length() == pytest.approx(1.0)


def test_empty_shutter_interval_rejected():
    with pytest.raises(ValueError):
        Camera.look_from(
            LOOK_FROM, LOOK_AT, Vec3(0.0, 1.0, 0.0), 20.0, 1.5, 0.0, 1.0, 0.5, 0.5
        )