"""Axis-aligned box primitive using the slab method.

Each axis contributes an interval of t values where the ray is between the
two bounding planes of that axis; the ray hits the box when the three
intervals overlap. The entry distance is the largest of the per-axis entry
values.

Python float division by zero raises instead of producing an infinity, so
the reciprocal of a zero direction component is taken to be a signed
infinity explicitly. The slab comparisons then behave exactly as with IEEE
division (a NaN from 0 * inf fails every comparison).

Example:
    >>> from cornell_rt.core.ray import Ray, Vector3
    >>> from cornell_rt.geometry.box import Box
    >>> from cornell_rt.materials import Material
    >>> box = Box(Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0), Material(Vector3(1.0, 1.0, 1.0)))
    >>> t, normal = box.intersect(Ray(Vector3(0.0, 5.0, 0.0), Vector3(0.0, -1.0, 0.0)))
    >>> t, normal
    (4.0, Vector3(x=0.0, y=1.0, z=0.0))
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from cornell_rt.core.ray import EPSILON, Ray, Vector3
from cornell_rt.geometry.sphere import HitRecord
from cornell_rt.materials.material import Material
from cornell_rt.materials.texture import Texture

# Hits farther than this are ignored
MAX_HIT_DISTANCE = 1000.0

# Distance within which a hit point is considered to lie on a face
FACE_EPSILON = 1e-3


def _reciprocal(value: float) -> float:
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass(frozen=True)
class Box:
    """An axis-aligned box.

    Attributes:
        min_corner: Corner with the smallest coordinates.
        max_corner: Corner with the largest coordinates.
        material: Surface material.
        texture: Optional texture applied at the hit point.
    """

    min_corner: Vector3
    max_corner: Vector3
    material: Material
    texture: Texture | None = None

    casts_shadow = True

    def __post_init__(self) -> None:
        lo = Vector3(*self.min_corner)
        hi = Vector3(*self.max_corner)
        if lo.x > hi.x or lo.y > hi.y or lo.z > hi.z:
            raise ValueError(f"Box min corner {tuple(lo)} exceeds max corner {tuple(hi)}.")
        object.__setattr__(self, "min_corner", lo)
        object.__setattr__(self, "max_corner", hi)

    @property
    def center(self) -> Vector3:
        return (self.min_corner + self.max_corner) * 0.5

    def intersect(self, ray: Ray) -> tuple[float, Vector3] | None:
        """Intersect a ray with the box.

        Args:
            ray: The ray to test.

        Returns:
            A (t, normal) tuple for the entry point, with t in
            (EPSILON, MAX_HIT_DISTANCE], or None on a miss.
        """
        lo, hi = self.min_corner, self.max_corner
        origin, direction = ray.origin, ray.direction

        inv_x = _reciprocal(direction.x)
        t_min = (lo.x - origin.x) * inv_x
        t_max = (hi.x - origin.x) * inv_x
        if t_min > t_max:
            t_min, t_max = t_max, t_min

        inv_y = _reciprocal(direction.y)
        ty_min = (lo.y - origin.y) * inv_y
        ty_max = (hi.y - origin.y) * inv_y
        if ty_min > ty_max:
            ty_min, ty_max = ty_max, ty_min
        if t_min > ty_max or ty_min > t_max:
            return None
        if ty_min > t_min:
            t_min = ty_min
        if ty_max < t_max:
            t_max = ty_max

        inv_z = _reciprocal(direction.z)
        tz_min = (lo.z - origin.z) * inv_z
        tz_max = (hi.z - origin.z) * inv_z
        if tz_min > tz_max:
            tz_min, tz_max = tz_max, tz_min
        if t_min > tz_max or tz_min > t_max:
            return None
        if tz_min > t_min:
            t_min = tz_min

        t = t_min
        if t < EPSILON or t > MAX_HIT_DISTANCE:
            return None
        return t, self.face_normal(ray.at(t), direction)

    def hit_distance(self, ray: Ray) -> float | None:
        result = self.intersect(ray)
        return None if result is None else result[0]

    def face_normal(self, point: Vector3, direction: Vector3) -> Vector3:
        """Surface normal at a hit point.

        The min face of an axis is matched only while the ray travels in the
        negative direction of that axis, and the max face only while it
        travels in the positive direction. An entry hit from outside never
        satisfies that test, so those hits take the fallback: the normalized
        vector from the box center to the point. It is exact at face centers
        and tilts toward the edges, which is what shades the crate.
        """
        lo, hi = self.min_corner, self.max_corner
        if abs(point.x - lo.x) < FACE_EPSILON and direction.x < 0.0:
            return Vector3(-1.0, 0.0, 0.0)
        if abs(point.x - hi.x) < FACE_EPSILON and direction.x > 0.0:
            return Vector3(1.0, 0.0, 0.0)
        if abs(point.y - lo.y) < FACE_EPSILON and direction.y < 0.0:
            return Vector3(0.0, -1.0, 0.0)
        if abs(point.y - hi.y) < FACE_EPSILON and direction.y > 0.0:
            return Vector3(0.0, 1.0, 0.0)
        if abs(point.z - lo.z) < FACE_EPSILON and direction.z < 0.0:
            return Vector3(0.0, 0.0, -1.0)
        if abs(point.z - hi.z) < FACE_EPSILON and direction.z > 0.0:
            return Vector3(0.0, 0.0, 1.0)
        return (point - self.center).normalize()

    def hit(self, ray: Ray) -> HitRecord | None:
        result = self.intersect(ray)
        if result is None:
            return None
        t, normal = result
        point = ray.at(t)
        material = self.material
        if self.texture is not None:
            material = self.texture.apply(material, point, normal)
        return HitRecord(t=t, point=point, normal=normal, material=material)
