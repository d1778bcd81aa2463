"""A collection of hittable objects accelerated by a BVH."""

from __future__ import annotations

import random
from typing import Iterable, Optional

from raytracer.aabb import AABB
from raytracer.bvh import BVHNode
from raytracer.hittable import HitRecord, Hittable
from raytracer.ray import Ray


class Container(Hittable):
    """Group of objects; call ``update_metadata`` after changing its contents."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.hittables: list[Hittable] = []
        self._rng = rng
        self._bbox: Optional[AABB] = None
        self._bvh: Optional[BVHNode] = None

    def add_hittable(self, hittable: Hittable) -> None:
        self.hittables.append(hittable)

    def add_hittables(self, hittables: Iterable[Hittable]) -> None:
        self.hittables.extend(hittables)

    def update_metadata(self) -> None:
        """Rebuild the hierarchy and bounding box from the current contents."""
        if not self.hittables:
            self._bvh = None
            self._bbox = None
            return
        self._bvh = BVHNode(self.hittables, self._rng)
        box = AABB()
        for obj in self.hittables:
            other = obj.bounding_box()
            if other is not None:
                box = box.union(other)
        self._bbox = box

    def clear(self) -> None:
        self.hittables.clear()
        self._bvh = None
        self._bbox = None

    def bounding_box(self) -> Optional[AABB]:
        return self._bbox

    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self._bvh is None:
            return None
        return self._bvh.hit(r, t_min, t_max)