"""Static and moving spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from raytracer.aabb import AABB
from raytracer.hittable import Face, HitRecord, Hittable
from raytracer.material import Material
from raytracer.ray import Ray
from raytracer.vec import Vec3


def _asin(value: float) -> float:
    return math.asin(value) if -1.0 <= value <= 1.0 else math.nan


def _sphere_uv(p: Vec3, radius: float) -> tuple[float, float]:
    """Texture coordinates of ``p``, given relative to the sphere center."""
    phi = math.atan2(p.z, p.x)
    theta = _asin(p.y / radius)
    return 0.5 - phi / (2.0 * math.pi), 0.5 + theta / math.pi


def _nearest_root(
    center: Vec3, radius: float, r: Ray, t_min: float, t_max: float
) -> Optional[float]:
    oc = r.orig - center
    a = r.dir.length_square()
    half_b = oc.dot(r.dir)
    c = oc.length_square() - radius * radius
    discriminant = half_b * half_b - a * c
    if not discriminant > 0.0:
        return None
    root = math.sqrt(discriminant)
    t = (-half_b - root) / a
    if t > t_max or t < t_min:
        t += 2.0 * root / a
        if t > t_max or t < t_min:
            return None
    return t


def _record(
    center: Vec3, radius: float, mat: Material, r: Ray, t: float
) -> HitRecord:
    p = r.at(t)
    normal = (p - center) / radius
    f = Face.calc(normal, r)
    if f is Face.OUTWARD:
        normal = -normal
    u, v = _sphere_uv(p - center, radius)
    return HitRecord(f=f, t=t, p=p, u=u, v=v, normal=normal, mat=mat)


@dataclass(eq=False)
class Sphere(Hittable):
    """A sphere fixed in place."""

    center: Vec3
    radius: float
    mat: Material
    _bbox: AABB = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._bbox = AABB(self.center - self.radius, self.center + self.radius)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        t = _nearest_root(self.center, self.radius, r, t_min, t_max)
        if t is None:
            return None
        return _record(self.center, self.radius, self.mat, r, t)


@dataclass(eq=False)
class MovingSphere(Hittable):
    """A sphere moving linearly from ``c0`` at time ``t0`` to ``c1`` at ``t1``."""

    c0: Vec3
    c1: Vec3
    t0: float
    t1: float
    radius: float
    mat: Material
    _bbox: AABB = field(init=False, repr=False)

    def __post_init__(self) -> None:
        start = AABB(self.c0 - self.radius, self.c0 + self.radius)
        end = AABB(self.c1 - self.radius, self.c1 + self.radius)
        self._bbox = start.union(end)

    def center(self, t: float) -> Vec3:
        return self.c0 + (self.c1 - self.c0) * ((t - self.t0) / (self.t1 - self.t0))

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center(r.t)
        t = _nearest_root(center, self.radius, r, t_min, t_max)
        if t is None:
            return None
        return _record(center, self.radius, self.mat, r, t)


def make_sphere(center: Vec3, radius: float, mat: Material) -> Sphere:
    return Sphere(center, radius, mat)


def make_bouncing_sphere(
    center: Vec3, radius: float, height: float, t0: float, t1: float, mat: Material
) -> MovingSphere:
    """A sphere travelling ``height`` along x during [t0, t1]."""
    end = Vec3(center.x + height, center.y, center.z)
    return MovingSphere(center, end, t0, t1, radius, mat)