import random

import pytest
from PIL import Image

from raytracer.aabb import AABB
from raytracer.next_week import NextWeekFinalScene
from raytracer.ray import Ray
from raytracer.skybox import ColorGradientSkyBox
from raytracer.vec import Vec3


@pytest.fixture(scope="module")
def texture_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("tex") / "earth.png"
    Image.new("RGB", (4, 2), (10, 20, 30)).save(path)
    return path


@pytest.fixture(scope="module")
def world(texture_path):
    return NextWeekFinalScene(texture_path=texture_path, rng=random.Random(3)).world()


def test_camera_placement():
    cam = NextWeekFinalScene().camera()
    assert cam.origin == Vec3(478.0, 278.0, -600.0)
    assert cam.aspect_ratio() == pytest.approx(1.0)
    assert cam.t0 == 0.0
    assert cam.t1 == 1.0
    assert cam.lens_radius == 0.0


def test_bounding_box_is_the_fog_sphere(world):
    assert world.bounding_box() == AABB(
        Vec3(-5000.0, -5000.0, -5000.0), Vec3(5000.0, 5000.0, 5000.0)
    )


def test_skybox_is_black(world):
    assert world.skybox == ColorGradientSkyBox(Vec3.zero(), Vec3.zero())


def test_downward_ray_stops_at_or_above_ground(world):
    ray = Ray(Vec3(50.0, 500.0, 50.0), Vec3(0.0, -1.0, 0.0), 0.5)
    rec = world.hit(ray, 0.001, float("inf"))
    assert rec is not None
    assert rec.t <= 499.0


def test_same_seed_gives_same_hits(texture_path):
    ray = Ray(Vec3(50.0, 500.0, 50.0), Vec3(0.0, -1.0, 0.0), 0.5)
    a = NextWeekFinalScene(texture_path=texture_path, rng=random.Random(11)).world()
    b = NextWeekFinalScene(texture_path=texture_path, rng=random.Random(11)).world()
    ra = a.hit(ray, 0.001, float("inf"))
    rb = b.hit(ray, 0.001, float("inf"))
    assert ra.t == rb.t
    assert ra.p == rb.p


def test_missing_texture_raises(tmp_path):
    scene = NextWeekFinalScene(texture_path=tmp_path / "missing.jpg", rng=random.Random(1))
    with pytest.raises(FileNotFoundError):
        scene.world()