"""Thin-lens camera generating primary rays."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from raytracer.ray import Ray
from raytracer.vec import Vec3


def random_in_unit_disk(rng: Optional[random.Random] = None) -> Vec3:
    """Uniform random point inside the unit disk of the z = 0 plane."""
    source = rng if rng is not None else random
    while True:
        p = Vec3(source.uniform(-1.0, 1.0), source.uniform(-1.0, 1.0), 0.0)
        if p.length_square() < 1.0:
            return p


@dataclass(frozen=True)
class Camera:
    """Camera with depth of field and a shutter open over [t0, t1)."""

    start_corner: Vec3
    horizontal: Vec3
    vertical: Vec3
    origin: Vec3
    lens_radius: float
    u: Vec3
    v: Vec3
    w: Vec3
    t0: float
    t1: float

    @classmethod
    def look_from(
        cls,
        origin: Vec3,
        look_at: Vec3,
        v_up: Vec3,
        vfov: float,
        aspect: float,
        aperture: float,
        focus_dist: float,
        t0: float,
        t1: float,
    ) -> Camera:
        """Build a camera at ``origin`` facing ``look_at``; ``vfov`` is in degrees."""
        if not t0 < t1:
            raise ValueError(f"invalid shutter interval: t0={t0} must be below t1={t1}")
        theta = math.radians(vfov)
        half_height = math.tan(theta / 2.0)
        half_width = half_height * aspect

        w = (look_at - origin).unit_vector()
        u = w.cross(v_up).unit_vector()
        v = u.cross(w)
        return cls(
            start_corner=origin + (w - u * half_width - v * half_height) * focus_dist,
            horizontal=u * (2.0 * half_width * focus_dist),
            vertical=v * (2.0 * half_height * focus_dist),
            origin=origin,
            lens_radius=aperture / 2.0,
            u=u,
            v=v,
            w=w,
            t0=t0,
            t1=t1,
        )

    def get_ray(self, u: float, v: float, rng: Optional[random.Random] = None) -> Ray:
        """Ray through the viewport point (u, v), both in [0, 1]."""
        source = rng if rng is not None else random
        r = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * r.x + self.v * r.y
        orig = self.origin + offset
        direction = self.start_corner + self.horizontal * u + self.vertical * v - orig
        time = self.t0 + (self.t1 - self.t0) * source.random()
        return Ray(orig, direction, time)

    def aspect_ratio(self) -> float:
        return self.horizontal.length() / self.vertical.length()