import pytest

from raytracer.ray import Ray
from raytracer.skybox import ColorGradientSkyBox, SkyBox
from raytracer.vec import Vec3

V1 = Vec3(1.0, 1.0, 1.0)
V2 = Vec3(0.5, 0.7, 1.0)


def ray(direction):
    return Ray(Vec3.zero(), direction)


def test_up_gives_v2():
    sky = ColorGradientSkyBox(V1, V2)
    assert sky.get_color(ray(Vec3(0.0, 5.0, 0.0))) == V2


def test_down_gives_v1():
    sky = ColorGradientSkyBox(V1, V2)
    assert sky.get_color(ray(Vec3(0.0, -2.0, 0.0))) == V1


def test_horizontal_gives_midpoint():
    sky = ColorGradientSkyBox(V1, V2)
    color = sky.get_color(ray(Vec3(3.0, 0.0, 1.0)))
    expected = (V1 + V2) * 0.5
    for got, want in zip(color, expected):
        assert got == pytest.approx(want)


def test_black_sky_is_black_everywhere():
    sky = ColorGradientSkyBox(Vec3.zero(), Vec3.zero())
    assert sky.get_color(ray(Vec3(0.3, 0.2, -0.9))) == Vec3.zero()


def test_skybox_is_abstract():
    with pytest.raises(TypeError):
        SkyBox()