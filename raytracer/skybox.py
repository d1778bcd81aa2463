"""Backgrounds returned for rays that hit nothing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from raytracer.ray import Ray
from raytracer.vec import Vec3


class SkyBox(ABC):
    """Gives the color seen along a ray that escapes the scene."""

    @abstractmethod
    def get_color(self, r: Ray) -> Vec3:
        """Color for the escaping ray ``r``."""


@dataclass(frozen=True)
class ColorGradientSkyBox(SkyBox):
    """Vertical blend from ``v1`` (straight down) to ``v2`` (straight up)."""

    v1: Vec3
    v2: Vec3

    def get_color(self, r: Ray) -> Vec3:
        unit = r.dir.unit_vector()
        t = 0.5 * (unit.y + 1.0)
        return self.v1 * (1.0 - t) + self.v2 * t