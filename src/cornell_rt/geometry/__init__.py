"""Geometry module for shape primitives.

Components:
    sphere: Sphere primitive and the HitRecord shared by all primitives
    box: Axis-aligned box (slab method)
    plane: Axis-aligned bounded plane for room surfaces

Every primitive implements the same scene object interface:
    hit(ray) -> HitRecord | None
with the hit material already resolved through the primitive's optional
texture, plus a ``casts_shadow`` flag consulted by shadow rays.
"""

from .box import Box
from .plane import BoundedPlane
from .sphere import HitRecord, Sphere

__all__ = [
    "HitRecord",
    "Sphere",
    "Box",
    "BoundedPlane",
]
