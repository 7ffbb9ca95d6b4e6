"""Sphere primitive and the shared hit record.

The ray-sphere intersection solves the quadratic

    a*t^2 + b*t + c = 0
    a = d.d,  b = 2(o - c).d,  c = (o - c).(o - c) - r^2

and returns the nearest root beyond EPSILON: the smaller root when it is in
front of the origin, otherwise the larger one (the ray starts inside the
sphere). Roots at or below EPSILON are rejected so that secondary rays
spawned on the surface do not hit it again.

Example:
    >>> from cornell_rt.core.ray import Ray, Vector3
    >>> from cornell_rt.geometry.sphere import Sphere
    >>> from cornell_rt.materials import Material
    >>> sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, Material(Vector3(1.0, 1.0, 1.0)))
    >>> sphere.intersect(Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0)))
    4.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from cornell_rt.core.ray import EPSILON, Ray, Vector3
from cornell_rt.materials.material import Material
from cornell_rt.materials.texture import Texture


@dataclass(frozen=True)
class HitRecord:
    """Record of a ray-object intersection.

    Attributes:
        t: Distance along the ray to the hit point.
        point: The 3D hit point.
        normal: Unit surface normal at the hit point. For closed shapes it
            points outward; for planes it is the plane normal.
        material: The surface material with any texture already applied.
    """

    t: float
    point: Vector3
    normal: Vector3
    material: Material


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
        material: Surface material.
        texture: Optional texture applied at the hit point.
    """

    center: Vector3
    radius: float
    material: Material
    texture: Texture | None = None

    # Spheres block shadow rays
    casts_shadow = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", Vector3(*self.center))
        if self.radius <= 0.0:
            raise ValueError(f"Sphere radius = {self.radius} must be positive.")

    def intersect(self, ray: Ray) -> float | None:
        """Find the nearest intersection distance along a ray.

        Args:
            ray: The ray to test.

        Returns:
            The distance t > EPSILON of the nearest hit, or None on a miss.
        """
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return None

        sqrt_d = math.sqrt(discriminant)
        t = (-b - sqrt_d) / (2.0 * a)
        if t <= EPSILON:
            # Origin inside the sphere (or sphere behind): try the far root
            t = (-b + sqrt_d) / (2.0 * a)
        if t > EPSILON:
            return t
        return None

    hit_distance = intersect

    def normal_at(self, point: Vector3) -> Vector3:
        """Outward unit normal at a point on the surface."""
        return (point - self.center).normalize()

    def hit(self, ray: Ray) -> HitRecord | None:
        t = self.intersect(ray)
        if t is None:
            return None
        point = ray.at(t)
        normal = self.normal_at(point)
        material = self.material
        if self.texture is not None:
            material = self.texture.apply(material, point, normal)
        return HitRecord(t=t, point=point, normal=normal, material=material)
