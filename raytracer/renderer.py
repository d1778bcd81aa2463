"""Multi-threaded path-tracing renderer."""

from __future__ import annotations

import enum
import logging
import math
import operator
import os
import random
import time
from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from typing import Optional

from raytracer.camera import Camera
from raytracer.filters import GammaFilter
from raytracer.picture import Picture
from raytracer.ray import Ray
from raytracer.vec import Vec3
from raytracer.world import World

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when a picture cannot be rendered."""


class PresetLevel(enum.Enum):
    """Quality presets: samples per pixel and picture height."""

    LOW = (128, 128)
    MEDIUM = (512, 256)
    HIGH = (1024, 512)
    ULTRA = (8192, 1024)

    @property
    def samples(self) -> int:
        return self.value[0]

    @property
    def height(self) -> int:
        return self.value[1]

    @classmethod
    def from_number(cls, num: int) -> PresetLevel:
        """Preset for 0 (low) through 3 (ultra)."""
        levels = list(cls)
        if not 0 <= num < len(levels):
            raise ValueError(f"invalid preset level {num}, expected 0 to {len(levels) - 1}")
        return levels[num]


def ray_color(world: World, r: Ray, depth: int) -> Vec3:
    """Light gathered along ``r``, following at most ``depth`` bounces."""
    coeff = Vec3.one()
    total = Vec3.zero()
    for _ in range(depth):
        h = world.hit(r, 0.001, math.inf)
        if h is None:
            return total + coeff * world.skybox.get_color(r)
        total = total + coeff * h.mat.emit(h.u, h.v, h.p)
        filtered = h.mat.scatter(r, h)
        if filtered is None:
            return total
        coeff = coeff * filtered.attenuation
        r = filtered.scattered
    return Vec3.zero()


class MultiRenderer:
    """Renders a world through a camera, splitting the samples across threads."""

    def __init__(
        self,
        camera: Optional[Camera] = None,
        world: Optional[World] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.camera = camera
        self.world = world
        self.width = 128
        self.height = 128
        self.sample_per_unit = 128
        self.recursion_depth = 16
        self.use_gamma_correction = True
        self.thread_count = os.cpu_count() or 1
        self._rng = rng

    def apply_preset(self, preset: PresetLevel) -> None:
        """Set the sample count and size; the width follows the camera's aspect ratio."""
        if self.camera is None:
            raise RenderError("Camera not set.")
        aspect = self.camera.aspect_ratio()
        self.sample_per_unit = preset.samples
        self.height = preset.height
        self.width = int(self.height * aspect)

    def _render_samples(self, samples: int, seed: int) -> list[Vec3]:
        assert self.world is not None and self.camera is not None
        rng = random.Random(seed)
        world, camera = self.world, self.camera
        width, height, depth = self.width, self.height, self.recursion_depth
        pixels = []
        for i in range(height):
            bv = (height - i - 1) / height
            for j in range(width):
                bu = j / width
                color = Vec3.zero()
                for _ in range(samples):
                    v = bv + rng.random() / height
                    u = bu + rng.random() / width
                    color = color + ray_color(world, camera.get_ray(u, v, rng), depth)
                pixels.append(color)
        return pixels

    def render(self) -> Picture:
        """Render the scene and return the (optionally gamma-corrected) picture."""
        if self.world is None:
            raise RenderError("World not set.")
        if self.camera is None:
            raise RenderError("Camera not set.")
        if self.thread_count < 1:
            raise RenderError(f"invalid thread count {self.thread_count}")
        logger.info(
            "Configuration: Picture size = %d * %d, sample = %d, recursion depth = %d",
            self.width,
            self.height,
            self.sample_per_unit,
            self.recursion_depth,
        )
        started = time.perf_counter()
        per_thread = -(-self.sample_per_unit // self.thread_count)
        source = self._rng if self._rng is not None else random
        seeds = [source.getrandbits(64) for _ in range(self.thread_count)]
        logger.info("Initializing threads... Thread count = %d", self.thread_count)
        try:
            with ThreadPoolExecutor(max_workers=self.thread_count) as pool:
                futures = [pool.submit(self._render_samples, per_thread, s) for s in seeds]
                results = [f.result() for f in futures]
        except Exception as exc:
            raise RenderError("Error occurred during multi-threaded rendering.") from exc

        data = [reduce(operator.add, colors) / self.sample_per_unit for colors in zip(*results)]
        picture = Picture(self.width, self.height, data)
        if self.use_gamma_correction:
            GammaFilter(gamma=2.0).apply(picture)
        logger.info("Done, time elapsed = %.3fs", time.perf_counter() - started)
        return picture