"""Volumes of constant density such as fog or smoke."""

from __future__ import annotations

import math
import random
from typing import Optional

from raytracer.aabb import AABB
from raytracer.hittable import Face, HitRecord, Hittable
from raytracer.material import Isotropic
from raytracer.ray import Ray
from raytracer.texture import Texture
from raytracer.vec import Vec3


def _log2(value: float) -> float:
    return math.log2(value) if value > 0.0 else -math.inf


class ConstantMedium(Hittable):
    """Participating medium filling ``boundary`` with the given ``density``."""

    def __init__(
        self,
        boundary: Hittable,
        density: float,
        texture: Texture,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.boundary = boundary
        if density == 0.0:
            self.neg_inv_density = -math.copysign(math.inf, density)
        else:
            self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(texture, rng)
        self._rng = rng

    def bounding_box(self) -> Optional[AABB]:
        return self.boundary.bounding_box()

    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        enter = self.boundary.hit(r, -math.inf, math.inf)
        if enter is None:
            return None
        leave = self.boundary.hit(r, enter.t + 0.0001, math.inf)
        if leave is None:
            return None
        t1 = max(enter.t, t_min, 0.0)
        t2 = min(leave.t, t_max)
        if t1 > t2:
            return None
        speed = r.dir.length()
        distance_within = speed * (t2 - t1)
        source = self._rng if self._rng is not None else random
        hit_distance = self.neg_inv_density * _log2(source.random())
        if not hit_distance <= distance_within:
            return None
        t = enter.t + hit_distance / speed
        return HitRecord(
            f=Face.OUTWARD,
            t=t,
            p=r.at(t),
            u=0.0,
            v=0.0,
            normal=Vec3(1.0, 0.0, 0.0),
            mat=self.phase_function,
        )