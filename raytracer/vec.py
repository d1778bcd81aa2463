"""Three-component vectors used for points, directions and colors."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Callable, Iterator, Optional


def _fdiv(a: float, b: float) -> float:
    """Divide following IEEE-754 rules instead of raising on a zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector with element-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vec3:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def random(
        cls, low: float, high: float, rng: Optional[random.Random] = None
    ) -> Vec3:
        """Vector whose components are drawn uniformly from [low, high)."""
        if not low < high:
            raise ValueError(f"invalid range: low={low} must be below high={high}")
        source = rng if rng is not None else random
        span = high - low
        return cls(
            low + span * source.random(),
            low + span * source.random(),
            low + span * source.random(),
        )

    def apply(self, f: Callable[[float], float]) -> Vec3:
        return Vec3(f(self.x), f(self.y), f(self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def _combine(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, Vec3):
            return Vec3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if _is_scalar(other):
            return Vec3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._combine(other, lambda a, b: b + a)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._combine(other, lambda a, b: b - a)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._combine(other, lambda a, b: b * a)

    def __truediv__(self, other):
        return self._combine(other, _fdiv)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def dot(self, rhs: Vec3) -> float:
        return self.x * rhs.x + self.y * rhs.y + self.z * rhs.z

    def cross(self, rhs: Vec3) -> Vec3:
        return Vec3(
            self.y * rhs.z - self.z * rhs.y,
            -(self.x * rhs.z - self.z * rhs.x),
            self.x * rhs.y - self.y * rhs.x,
        )

    def ele_mul(self, rhs: Vec3) -> Vec3:
        return self * rhs

    def length_square(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_square())

    def unit_vector(self) -> Vec3:
        return self / self.length()