"""Reading and writing pictures as image files."""

from __future__ import annotations

import os
from itertools import islice
from typing import Union

from PIL import Image

from raytracer.picture import Picture
from raytracer.vec import Vec3

PathLike = Union[str, "os.PathLike[str]"]


def _channel(value: float) -> int:
    if value != value or value > 1.0:
        value = 1.0
    scaled = value * 255.0
    if scaled <= 0.0:
        return 0
    return min(int(scaled), 255)


def to_color24(color: Vec3) -> tuple[int, int, int]:
    """Convert a linear color to 8-bit RGB, clamping values above 1."""
    return (_channel(color.x), _channel(color.y), _channel(color.z))


def _check_size(picture: Picture) -> None:
    expected = picture.width * picture.height
    if len(picture.data) != expected:
        raise ValueError(
            f"picture holds {len(picture.data)} pixels, expected {expected}"
        )


def write_to_ppm(picture: Picture, filename: PathLike) -> None:
    """Write a picture as a plain-text (P3) PPM file."""
    _check_size(picture)
    pixels = iter(picture.data)
    with open(filename, "w", encoding="ascii") as stream:
        stream.write("P3\n")
        stream.write(f"{picture.width} {picture.height}\n")
        stream.write("255\n")
        for _ in range(picture.width):
            line = "".join(
                " {} {} {}".format(*to_color24(c)) for c in islice(pixels, picture.height)
            )
            stream.write(line + "\n")


def write_to_png(picture: Picture, filename: PathLike) -> None:
    """Write a picture to an image file; the format follows the file extension."""
    _check_size(picture)
    raw = bytes(channel for c in picture.data for channel in to_color24(c))
    Image.frombytes("RGB", (picture.width, picture.height), raw).save(filename)


def read_picture(filename: PathLike) -> Picture:
    """Load any image Pillow can open as a picture with channels in [0, 1]."""
    with Image.open(filename) as img:
        rgb = img.convert("RGB")
        width, height = rgb.size
        raw = rgb.tobytes()
    channels = iter(raw)
    data = [Vec3(r / 255.0, g / 255.0, b / 255.0) for r, g, b in zip(channels, channels, channels)]
    return Picture(width, height, data)