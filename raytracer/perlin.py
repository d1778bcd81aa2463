"""Perlin-style noise generator."""

from __future__ import annotations

import math
import random
from itertools import product
from typing import Optional

from raytracer.vec import Vec3

_TABLE_SIZE = 256
_USIZE_MAX = 2**64 - 1


def _to_index(value: float) -> int:
    """Truncate to a non-negative integer, saturating like an unsigned cast."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return _USIZE_MAX
    return min(int(value), _USIZE_MAX)


def _floor(value: float) -> float:
    return float(math.floor(value)) if math.isfinite(value) else value


def _hermite(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def _corner_weight(corner: int, t: float) -> float:
    return t if corner else 1.0 - t


class Perlin:
    """Noise generator built from shuffled permutation tables."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        source = rng if rng is not None else random
        self._random_float = tuple(source.random() for _ in range(_TABLE_SIZE))
        self._random_vector = tuple(
            Vec3.random(-1.0, 1.0, rng) for _ in range(_TABLE_SIZE)
        )
        perms = []
        for _ in range(3):
            perm = list(range(_TABLE_SIZE))
            source.shuffle(perm)
            perms.append(tuple(perm))
        self._perm_x, self._perm_y, self._perm_z = perms

    def _hash(self, i: int, j: int, k: int) -> int:
        return self._perm_x[i & 255] ^ self._perm_y[j & 255] ^ self._perm_z[k & 255]

    def noise(self, p: Vec3, frequency: float) -> float:
        """Blocky hash noise in [0, 1)."""
        i, j, k = p.apply(lambda c: _to_index(frequency * c))
        return self._random_float[self._hash(i, j, k)]

    def smoothed_noise(self, p: Vec3, frequency: float) -> float:
        """Trilinearly interpolated value noise with Hermite smoothing."""
        p = p * frequency
        u, v, w = p.apply(lambda c: _hermite(c - _floor(c)))
        i, j, k = p.apply(lambda c: _to_index(_floor(c)))
        total = 0.0
        for di, dj, dk in product((0, 1), repeat=3):
            value = self._random_float[self._hash(i + di, j + dj, k + dk)]
            total += (
                _corner_weight(di, u)
                * _corner_weight(dj, v)
                * _corner_weight(dk, w)
                * value
            )
        return total

    def smoothed_shifted_noise(self, p: Vec3, frequency: float) -> float:
        """Gradient noise mapped into [0, 1]."""
        p = p * frequency
        u, v, w = p.apply(lambda c: c - _floor(c))
        i, j, k = p.apply(lambda c: _to_index(_floor(c)))
        hu, hv, hw = _hermite(u), _hermite(v), _hermite(w)
        total = 0.0
        for di, dj, dk in product((0, 1), repeat=3):
            gradient = self._random_vector[self._hash(i + di, j + dj, k + dk)]
            offset = Vec3(u - di, v - dj, w - dk)
            total += (
                _corner_weight(di, hu)
                * _corner_weight(dj, hv)
                * _corner_weight(dk, hw)
                * gradient.dot(offset)
            )
        return 0.5 * (1.0 + total)

    def turbulence(self, p: Vec3, depth: int) -> float:
        """Sum of ``depth`` octaves of smoothed noise with halving weights."""
        total = 0.0
        weight = 1.0
        frequency = 1.0
        for _ in range(depth):
            total += weight * self.smoothed_noise(p, frequency)
            weight *= 0.5
            frequency *= 2.0
        return total