"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.ray import Ray
from raytracer.vec import Vec3


@dataclass(frozen=True)
class AABB:
    """Box spanned by the corners ``min`` and ``max``."""

    min: Vec3 = field(default_factory=Vec3)
    max: Vec3 = field(default_factory=Vec3)

    def hit(self, r: Ray, t_min: float, t_max: float) -> bool:
        """Slab test: does the ray cross the box within [t_min, t_max]?"""
        near = (self.min - r.orig) / r.dir
        far = (self.max - r.orig) / r.dir
        for t0, t1, d in zip(near, far, r.dir):
            if d < 0.0:
                t0, t1 = t1, t0
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max <= t_min:
                return False
        return True

    def union(self, other: AABB) -> AABB:
        return AABB(Vec3(*map(min, self.min, other.min)), Vec3(*map(max, self.max, other.max)))