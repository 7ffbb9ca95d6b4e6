"""Axis-aligned bounded plane used for the walls, floor and ceiling.

The ray is intersected with the infinite plane through ``point`` with unit
``normal``; the hit is kept only when it falls inside the inclusive
rectangular extent on the two axes lying in the plane. The axis along the
normal is not bounds-checked.

Example:
    >>> from cornell_rt.core.ray import Ray, Vector3
    >>> from cornell_rt.geometry.plane import BoundedPlane
    >>> from cornell_rt.materials import Material
    >>> floor = BoundedPlane(
    ...     point=Vector3(0.0, 0.0, 0.0),
    ...     normal=Vector3(0.0, 1.0, 0.0),
    ...     lower=Vector3(-1.5, 0.0, -1.5),
    ...     upper=Vector3(1.5, 3.0, 1.5),
    ...     material=Material(Vector3(0.5, 0.5, 0.5)),
    ... )
    >>> floor.intersect(Ray(Vector3(0.0, 2.0, 0.0), Vector3(0.0, -1.0, 0.0)))
    2.0
"""

from __future__ import annotations

from dataclasses import dataclass

from cornell_rt.core.ray import EPSILON, Ray, Vector3
from cornell_rt.geometry.sphere import HitRecord
from cornell_rt.materials.material import Material
from cornell_rt.materials.texture import Texture

# Rays with |d.n| at or below this are treated as parallel to the plane
PARALLEL_EPSILON = 1e-3


@dataclass(frozen=True)
class BoundedPlane:
    """A plane clipped to an axis-aligned rectangle.

    Attributes:
        point: Any point on the plane.
        normal: Unit plane normal (one of the coordinate axes, signed).
        lower: Lower bounds; only the components of in-plane axes are used.
        upper: Upper bounds; only the components of in-plane axes are used.
        material: Surface material.
        texture: Optional texture applied at the hit point.
    """

    point: Vector3
    normal: Vector3
    lower: Vector3
    upper: Vector3
    material: Material
    texture: Texture | None = None

    # Room planes never occlude the light
    casts_shadow = False

    def __post_init__(self) -> None:
        normal = Vector3(*self.normal)
        if normal.length() == 0.0:
            raise ValueError("Plane normal must have non-zero length")
        object.__setattr__(self, "point", Vector3(*self.point))
        object.__setattr__(self, "normal", normal.normalize())
        object.__setattr__(self, "lower", Vector3(*self.lower))
        object.__setattr__(self, "upper", Vector3(*self.upper))

    def in_bounds(self, point: Vector3) -> bool:
        """Inclusive bounds check on the in-plane axes."""
        for axis in range(3):
            if abs(self.normal[axis]) >= 0.5:
                continue
            if point[axis] < self.lower[axis] or point[axis] > self.upper[axis]:
                return False
        return True

    def intersect(self, ray: Ray) -> float | None:
        """Intersect a ray with the bounded plane.

        Returns:
            The hit distance t > EPSILON, or None when the ray is parallel,
            the plane is behind the origin, or the hit is out of bounds.
        """
        denom = self.normal.dot(ray.direction)
        if abs(denom) <= PARALLEL_EPSILON:
            return None
        t = (self.point - ray.origin).dot(self.normal) / denom
        if t <= EPSILON:
            return None
        if not self.in_bounds(ray.at(t)):
            return None
        return t

    hit_distance = intersect

    def hit(self, ray: Ray) -> HitRecord | None:
        t = self.intersect(ray)
        if t is None:
            return None
        point = ray.at(t)
        material = self.material
        if self.texture is not None:
            material = self.texture.apply(material, point, self.normal)
        return HitRecord(t=t, point=point, normal=self.normal, material=material)
