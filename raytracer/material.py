"""Surface materials deciding how light is emitted and scattered."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from raytracer.hittable import Face, HitRecord
from raytracer.ray import Ray
from raytracer.texture import Texture
from raytracer.vec import Vec3


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0.0 else math.nan


def random_unit_vector(rng: Optional[random.Random] = None) -> Vec3:
    """Uniformly distributed direction on the unit sphere."""
    source = rng if rng is not None else random
    a = source.uniform(0.0, 2.0 * math.pi)
    z = source.uniform(-1.0, 1.0)
    r = math.sqrt(1.0 - z * z)
    return Vec3(r * math.cos(a), r * math.sin(a), z)


@dataclass(frozen=True)
class FilteredRay:
    """A scattered ray and the color it is attenuated by."""

    attenuation: Vec3
    scattered: Ray


class Material(ABC):
    """How a surface emits and scatters light."""

    def emit(self, u: float, v: float, p: Vec3) -> Vec3:
        """Emitted light; black unless the material glows."""
        return Vec3.zero()

    @abstractmethod
    def scatter(self, r: Ray, h: HitRecord) -> Optional[FilteredRay]:
        """The scattered ray, or None when the ray is absorbed."""


@dataclass
class LambertianDiffuse(Material):
    """Ideal matte surface."""

    texture: Texture
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    def scatter(self, r: Ray, h: HitRecord) -> Optional[FilteredRay]:
        direction = h.normal + random_unit_vector(self.rng)
        return FilteredRay(
            attenuation=self.texture.get_color(h.u, h.v, h.p),
            scattered=Ray(h.p, direction, r.t),
        )


@dataclass
class Metal(Material):
    """Reflective surface; ``fuzziness`` is capped at 1."""

    fuzziness: float
    albedo: Vec3
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.fuzziness > 1.0:
            self.fuzziness = 1.0

    def scatter(self, r: Ray, h: HitRecord) -> Optional[FilteredRay]:
        d = r.dir
        reflect_dir = (
            d
            - h.normal * (2.0 * d.dot(h.normal))
            + random_unit_vector(self.rng) * self.fuzziness
        )
        if reflect_dir.dot(h.normal) > 0.0:
            return FilteredRay(self.albedo, Ray(h.p, reflect_dir, r.t))
        return None


@dataclass
class Dielectric(Material):
    """Transparent material with refractive index ``eta``."""

    eta: float
    albedo: Vec3
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)
    eta_inv: float = field(init=False, repr=False)
    r0: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.eta_inv = 1.0 / self.eta
        r0 = (1.0 - self.eta) / (1.0 + self.eta)
        self.r0 = r0 * r0

    def schlick(self, cosine: float) -> float:
        """Schlick's approximation of the reflection probability."""
        return self.r0 + (1.0 - self.r0) * (1.0 - cosine) ** 5

    def scatter(self, r: Ray, h: HitRecord) -> Optional[FilteredRay]:
        er = self.eta_inv if h.f is Face.INWARD else self.eta
        ru = r.dir.unit_vector()
        cos_theta = -ru.dot(h.normal)
        sin_theta = _sqrt(1.0 - cos_theta * cos_theta)
        source = self.rng if self.rng is not None else random
        rnd = source.random()
        if sin_theta * er > 1.0 or rnd < self.schlick(cos_theta):
            direction = ru - h.normal * (2.0 * cos_theta)
        else:
            r_parallel = (ru + h.normal * cos_theta) * er
            r_perp = h.normal * -_sqrt(1.0 - r_parallel.length_square())
            direction = r_parallel + r_perp
        return FilteredRay(self.albedo, Ray(h.p, direction, r.t))


@dataclass
class DiffuseLight(Material):
    """Light source emitting its texture scaled by ``brightness``."""

    texture: Texture
    brightness: float

    def emit(self, u: float, v: float, p: Vec3) -> Vec3:
        return self.texture.get_color(u, v, p) * self.brightness

    def scatter(self, r: Ray, h: HitRecord) -> Optional[FilteredRay]:
        return None


@dataclass
class Isotropic(Material):
    """Phase function scattering uniformly in every direction."""

    albedo: Texture
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    def scatter(self, r: Ray, h: HitRecord) -> Optional[FilteredRay]:
        return FilteredRay(
            attenuation=self.albedo.get_color(h.u, h.v, h.p),
            scattered=Ray(h.p, random_unit_vector(self.rng), r.t),
        )