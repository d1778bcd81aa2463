"""Axis-aligned rectangles."""

from __future__ import annotations

import math
from typing import Optional

from raytracer.aabb import AABB
from raytracer.hittable import Face, HitRecord, Hittable
from raytracer.material import Material
from raytracer.ray import Ray
from raytracer.vec import Vec3


def _ratio(value: float, lo: float, hi: float) -> float:
    span = hi - lo
    return (value - lo) / span if span != 0.0 else math.nan


class _AxisRect(Hittable):
    """Rectangle lying in a plane perpendicular to one coordinate axis."""

    # Indices of the two in-plane axes and of the plane normal.
    _u_axis: int
    _v_axis: int
    _normal_axis: int

    def _setup(
        self,
        p0: tuple[float, float],
        p1: tuple[float, float],
        k: float,
        mat: Material,
        bbox: AABB,
    ) -> None:
        self._lo = p0
        self._hi = p1
        self._k = k
        self.mat = mat
        self._bbox = bbox

    def _hit_plane(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        origin = tuple(r.orig)
        direction = tuple(r.dir)
        n = self._normal_axis
        if direction[n] == 0.0:
            return None
        t = (self._k - origin[n]) / direction[n]
        if t < t_min or t > t_max:
            return None
        a = origin[self._u_axis] + t * direction[self._u_axis]
        b = origin[self._v_axis] + t * direction[self._v_axis]
        (a0, b0), (a1, b1) = self._lo, self._hi
        if a < a0 or a > a1 or b < b0 or b > b1:
            return None
        normal = Vec3(*(1.0 if axis == n else 0.0 for axis in range(3)))
        f = Face.calc(normal, r)
        if f is Face.OUTWARD:
            normal = -normal
        return HitRecord(
            f=f,
            t=t,
            p=r.at(t),
            u=_ratio(a, a0, a1),
            v=_ratio(b, b0, b1),
            normal=normal,
            mat=self.mat,
        )


class XYRect(_AxisRect):
    """Rectangle [x0, x1] x [y0, y1] in the plane z = ``z``."""

    _u_axis, _v_axis, _normal_axis = 0, 1, 2

    def __init__(
        self, p0: tuple[float, float], p1: tuple[float, float], z: float, mat: Material
    ) -> None:
        self.x0, self.y0 = p0
        self.x1, self.y1 = p1
        self.z = z
        bbox = AABB(Vec3(p0[0], p0[1], z - 0.001), Vec3(p1[0], p1[1], z + 0.001))
        self._setup(p0, p1, z, mat, bbox)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self._hit_plane(r, t_min, t_max)


class XZRect(_AxisRect):
    """Rectangle [x0, x1] x [z0, z1] in the plane y = ``y``."""

    _u_axis, _v_axis, _normal_axis = 0, 2, 1

    def __init__(
        self, p0: tuple[float, float], p1: tuple[float, float], y: float, mat: Material
    ) -> None:
        self.x0, self.z0 = p0
        self.x1, self.z1 = p1
        self.y = y
        bbox = AABB(Vec3(p0[0], y - 0.001, p0[1]), Vec3(p1[0], y, p1[1]))
        self._setup(p0, p1, y, mat, bbox)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self._hit_plane(r, t_min, t_max)


class YZRect(_AxisRect):
    """Rectangle [y0, y1] x [z0, z1] in the plane x = ``x``."""

    _u_axis, _v_axis, _normal_axis = 1, 2, 0

    def __init__(
        self, p0: tuple[float, float], p1: tuple[float, float], x: float, mat: Material
    ) -> None:
        self.y0, self.z0 = p0
        self.y1, self.z1 = p1
        self.x = x
        bbox = AABB(Vec3(x - 0.001, p0[0], p0[1]), Vec3(x + 0.001, p1[0], p1[1]))
        self._setup(p0, p1, x, mat, bbox)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self._hit_plane(r, t_min, t_max)