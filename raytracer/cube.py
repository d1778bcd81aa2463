"""Axis-aligned boxes built from six rectangles."""

from __future__ import annotations

import random
from typing import Optional

from raytracer.aabb import AABB
from raytracer.bvh import BVHNode
from raytracer.hittable import HitRecord, Hittable
from raytracer.material import Material
from raytracer.ray import Ray
from raytracer.rect import XYRect, XZRect, YZRect
from raytracer.vec import Vec3


class Cube(Hittable):
    """Box with opposite corners ``p0`` and ``p1``."""

    def __init__(
        self, p0: Vec3, p1: Vec3, mat: Material, rng: Optional[random.Random] = None
    ) -> None:
        if not (p0.x <= p1.x and p0.y <= p1.y and p0.z <= p1.z):
            raise ValueError(f"corner {p0} must not exceed corner {p1}")
        self.mat = mat
        self.sides: tuple[Hittable, ...] = (
            XYRect((p0.x, p0.y), (p1.x, p1.y), p0.z, mat),
            XYRect((p0.x, p0.y), (p1.x, p1.y), p1.z, mat),
            XZRect((p0.x, p0.z), (p1.x, p1.z), p0.y, mat),
            XZRect((p0.x, p0.z), (p1.x, p1.z), p1.y, mat),
            YZRect((p0.y, p0.z), (p1.y, p1.z), p0.x, mat),
            YZRect((p0.y, p0.z), (p1.y, p1.z), p1.x, mat),
        )
        self._bvh = BVHNode(self.sides, rng)
        self._bbox = AABB(p0, p1)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self._bvh.hit(r, t_min, t_max)