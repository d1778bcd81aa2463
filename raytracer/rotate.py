"""Rotation of an object around the y axis."""

from __future__ import annotations

import dataclasses
import math
from itertools import product
from typing import Optional

from raytracer.aabb import AABB
from raytracer.hittable import Face, HitRecord, Hittable
from raytracer.ray import Ray
from raytracer.vec import Vec3


class RotateY(Hittable):
    """Wraps an object, rotating it by ``angle`` degrees around the y axis."""

    def __init__(self, hittable: Hittable, angle: float) -> None:
        self.hittable = hittable
        radians = math.radians(angle)
        self._sin = math.sin(radians)
        self._cos = math.cos(radians)
        self._bbox = self._rotated_box(hittable.bounding_box())

    def _rotated_box(self, box: Optional[AABB]) -> Optional[AABB]:
        if box is None:
            return None
        lo = [math.inf] * 3
        # The upper corner starts at +inf as well, so it never shrinks.
        hi = [math.inf] * 3
        for i, j, k in product((0, 1), repeat=3):
            x = box.max.x if i else box.min.x
            y = box.max.y if j else box.min.y
            z = box.max.z if k else box.min.z
            corner = (self._cos * x + self._sin * z, y, -self._sin * x + self._cos * z)
            lo = [min(a, b) for a, b in zip(lo, corner)]
            hi = [max(a, b) for a, b in zip(hi, corner)]
        return AABB(Vec3(*lo), Vec3(*hi))

    def bounding_box(self) -> Optional[AABB]:
        return self._bbox

    def _to_object(self, v: Vec3) -> Vec3:
        return Vec3(self._cos * v.x - self._sin * v.z, v.y, self._sin * v.x + self._cos * v.z)

    def _to_world(self, v: Vec3) -> Vec3:
        return Vec3(self._cos * v.x + self._sin * v.z, v.y, -self._sin * v.x + self._cos * v.z)

    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        local = Ray(self._to_object(r.orig), self._to_object(r.dir), r.t)
        record = self.hittable.hit(local, t_min, t_max)
        if record is None:
            return None
        p = self._to_world(record.p)
        return dataclasses.replace(
            record, p=p, normal=self._to_world(record.normal), f=Face.calc(p, local)
        )