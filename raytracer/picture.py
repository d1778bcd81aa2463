"""In-memory picture made of linear RGB colors."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.vec import Vec3


@dataclass
class Picture:
    """A row-major grid of colors."""

    width: int
    height: int
    data: list[Vec3] = field(default_factory=list)

    @classmethod
    def blank(cls, width: int, height: int) -> Picture:
        return cls(width, height, [Vec3.zero() for _ in range(width * height)])

    def at(self, x: int, y: int) -> Vec3:
        return self.data[y * self.width + x]