"""Core interfaces for objects a ray can hit."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from raytracer.aabb import AABB
from raytracer.ray import Ray
from raytracer.vec import Vec3

if TYPE_CHECKING:
    from raytracer.material import Material


class Face(enum.Enum):
    """Which side of a surface a ray arrives from."""

    INWARD = "Inward"
    OUTWARD = "Outward"

    @classmethod
    def calc(cls, normal: Vec3, r: Ray) -> Face:
        """Facing from the outward normal and the ray direction."""
        return cls.INWARD if normal.dot(r.dir) < 0.0 else cls.OUTWARD


@dataclass
class HitRecord:
    """A ray-surface intersection.

    ``normal`` always points against the incoming ray; ``f`` tells whether the
    ray entered or left the surface.
    """

    f: Face
    t: float
    p: Vec3
    u: float
    v: float
    normal: Vec3
    mat: Material

    def __str__(self) -> str:
        return f"{self.f.value} t={self.t} p={self.p} normal={self.normal}"


class Hittable(ABC):
    """Something a ray can intersect."""

    @abstractmethod
    def bounding_box(self) -> Optional[AABB]:
        """The enclosing box, or None for unbounded objects."""

    @abstractmethod
    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """The nearest intersection with ``t`` in [t_min, t_max], if any."""