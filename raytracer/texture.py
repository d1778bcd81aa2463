"""Textures mapping surface coordinates to colors."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from raytracer.perlin import Perlin
from raytracer.picture import Picture
from raytracer.vec import Vec3


def _to_index(value: float) -> int:
    """Truncate to a non-negative integer like an unsigned cast."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if math.isinf(value):
        return 2**64 - 1
    return int(value)


class Texture(ABC):
    """Color as a function of surface coordinates and position."""

    @abstractmethod
    def get_color(self, u: float, v: float, p: Vec3) -> Vec3:
        """Color at texture coordinates (u, v) and point ``p``."""


@dataclass(frozen=True)
class SolidColor(Texture):
    """The same color everywhere."""

    color: Vec3

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> SolidColor:
        """A random color biased towards darker tones."""
        return cls(Vec3.random(0.0, 1.0, rng) * Vec3.random(0.0, 1.0, rng))

    def get_color(self, u: float, v: float, p: Vec3) -> Vec3:
        return self.color


@dataclass(frozen=True)
class CheckerTexture(Texture):
    """3D checker pattern alternating between two textures."""

    odd_color: Texture
    even_color: Texture

    def get_color(self, u: float, v: float, p: Vec3) -> Vec3:
        s = math.sin(10.0 * p.x) * math.sin(10.0 * p.y) * math.sin(10.0 * p.z)
        if s < 0.0:
            return self.odd_color.get_color(u, v, p)
        return self.even_color.get_color(u, v, p)


@dataclass(frozen=True)
class HashTexture(Texture):
    """Blocky grey noise."""

    generator: Perlin
    frequency: float

    def get_color(self, u: float, v: float, p: Vec3) -> Vec3:
        return Vec3.one() * self.generator.noise(p, self.frequency)


@dataclass(frozen=True)
class NoiseTexture(Texture):
    """Smooth grey noise; ``shifted`` selects gradient noise."""

    generator: Perlin
    frequency: float
    shifted: bool = False

    def get_color(self, u: float, v: float, p: Vec3) -> Vec3:
        if self.shifted:
            value = self.generator.smoothed_shifted_noise(p, self.frequency)
        else:
            value = self.generator.smoothed_noise(p, self.frequency)
        return Vec3.one() * value


@dataclass(frozen=True)
class MarbleTexture(Texture):
    """Marble-like stripes.

    ``scale`` sets the stripe density, ``turbulence`` how strongly they are
    perturbed.
    """

    generator: Perlin
    scale: float
    turbulence: float

    def get_color(self, u: float, v: float, p: Vec3) -> Vec3:
        phase = self.scale * p.z + self.turbulence * self.generator.turbulence(p, 7)
        return Vec3.one() * (0.5 * (1.0 + math.sin(phase)))


@dataclass(frozen=True)
class ImageTexture(Texture):
    """A picture wrapped around a sphere using (u, v) coordinates."""

    image: Picture

    def get_color(self, u: float, v: float, p: Vec3) -> Vec3:
        x = _to_index(u * self.image.width)
        y = _to_index((1.0 - v) * self.image.height)
        return self.image.at(x, y)