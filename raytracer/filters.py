"""Post-processing filters applied to rendered pictures."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from raytracer.picture import Picture


class Filter(ABC):
    """A transformation applied to a picture in place."""

    @abstractmethod
    def apply(self, picture: Picture) -> None:
        """Modify ``picture`` in place."""


def _power(value: float, exponent: float) -> float:
    return value**exponent if value >= 0 else math.nan


@dataclass(frozen=True)
class GammaFilter(Filter):
    """Gamma correction: raises every channel to ``1 / gamma``."""

    gamma: float

    def apply(self, picture: Picture) -> None:
        exponent = 1.0 / self.gamma
        picture.data[:] = [c.apply(lambda v: _power(v, exponent)) for c in picture.data]