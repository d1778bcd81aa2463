"""Bounding volume hierarchy for fast ray queries over many objects."""

from __future__ import annotations

import random
from typing import Iterable, Optional

from raytracer.aabb import AABB
from raytracer.hittable import HitRecord, Hittable
from raytracer.ray import Ray


def _require_bbox(hittable: Hittable) -> AABB:
    box = hittable.bounding_box()
    if box is None:
        raise ValueError("object has no bounding box and cannot be put in a BVH")
    return box


class BVHNode(Hittable):
    """Binary tree of objects, split along a randomly chosen axis."""

    def __init__(
        self, hittables: Iterable[Hittable], rng: Optional[random.Random] = None
    ) -> None:
        items = list(hittables)
        if not items:
            raise ValueError("hittable list shouldn't be empty")
        if len(items) == 1:
            # A single object becomes both children of one node.
            only = items[0]
            self.left: Hittable = only
            self.right: Hittable = only
            self._bbox = _require_bbox(only)
            return

        source = rng if rng is not None else random
        axis = source.randrange(3)
        items.sort(key=lambda h: tuple(_require_bbox(h).min)[axis])
        middle = len(items) // 2
        self.left = self._subtree(items[:middle], rng)
        self.right = self._subtree(items[middle:], rng)
        self._bbox = _require_bbox(self.left).union(_require_bbox(self.right))

    @staticmethod
    def _subtree(items: list[Hittable], rng: Optional[random.Random]) -> Hittable:
        return items[0] if len(items) == 1 else BVHNode(items, rng)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self._bbox.hit(r, t_min, t_max):
            return None
        first = self.left.hit(r, t_min, t_max)
        if first is None:
            return self.right.hit(r, t_min, t_max)
        second = self.right.hit(r, t_min, first.t)
        return second if second is not None else first