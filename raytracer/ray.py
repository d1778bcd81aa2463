"""Rays with an origin, a direction and a time stamp."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from raytracer.vec import Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line ``orig + t * dir`` shot at time ``t``."""

    orig: Vec3
    dir: Vec3
    t: float = 0.0

    def at(self, t: float) -> Vec3:
        return self.orig + self.dir * t

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> Ray:
        """A ray with components in [0, 1), used for debugging and benchmarks."""
        source = rng if rng is not None else random
        direction = Vec3(source.random(), source.random(), source.random())
        origin = Vec3(source.random(), source.random(), source.random())
        return cls(orig=origin, dir=direction, t=1.0)