"""Scene container and ray-scene queries.

A Scene owns every primitive, the single point light, the background color,
the camera and the gradient noise instance used by procedural textures. It
is immutable after construction and picklable, so the renderer can ship a
copy to each worker process.

Objects are tested in a fixed order (spheres, boxes, then the room planes in
the order floor, left, right, back, ceiling) and the nearest hit wins. Only
a strictly nearer hit replaces the current one, so ties go to the object
tested first.

Example:
    >>> from cornell_rt.scene import create_cornell_box_scene
    >>> scene = create_cornell_box_scene()
    >>> ray = scene.camera.primary_ray(400, 300, 800, 600)
    >>> record = scene.intersect(ray)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from cornell_rt.camera.pinhole import PinholeCamera
from cornell_rt.core.noise import GradientNoise
from cornell_rt.core.ray import EPSILON, Ray, Vector3
from cornell_rt.geometry.box import Box
from cornell_rt.geometry.plane import BoundedPlane
from cornell_rt.geometry.sphere import HitRecord, Sphere

# Hits at or beyond this distance are ignored
FAR_DISTANCE = 1e5


class SceneObject(Protocol):
    """Interface shared by every primitive placed in a scene."""

    casts_shadow: bool

    def hit(self, ray: Ray) -> HitRecord | None: ...

    def hit_distance(self, ray: Ray) -> float | None: ...


@dataclass(frozen=True)
class PointLight:
    """Point light source.

    Attributes:
        position: Light position in world space.
        color: Light color; components may exceed 1 for brighter lights.
    """

    position: Vector3
    color: Vector3

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", Vector3(*self.position))
        object.__setattr__(self, "color", Vector3(*self.color))


@dataclass(frozen=True)
class Scene:
    """Everything needed to trace rays.

    Attributes:
        spheres: Sphere primitives.
        boxes: Axis-aligned box primitives.
        planes: Room planes in test order (floor, left, right, back, ceiling).
        light: The point light.
        background: Color returned for rays that miss everything.
        camera: The viewing camera.
        noise: Gradient noise shared by the textures in this scene.
        objects: All primitives in intersection order.
        occluders: Primitives that block shadow rays (spheres and boxes).
    """

    spheres: tuple[Sphere, ...]
    boxes: tuple[Box, ...]
    planes: tuple[BoundedPlane, ...]
    light: PointLight
    background: Vector3
    camera: PinholeCamera
    noise: GradientNoise = field(default_factory=GradientNoise)
    # Derived in __post_init__ so queries do not rebuild them per ray
    objects: tuple[SceneObject, ...] = field(init=False, repr=False, compare=False, default=())
    occluders: tuple[SceneObject, ...] = field(init=False, repr=False, compare=False, default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "spheres", tuple(self.spheres))
        object.__setattr__(self, "boxes", tuple(self.boxes))
        object.__setattr__(self, "planes", tuple(self.planes))
        object.__setattr__(self, "background", Vector3(*self.background))
        objects = (*self.spheres, *self.boxes, *self.planes)
        object.__setattr__(self, "objects", objects)
        object.__setattr__(self, "occluders", tuple(obj for obj in objects if obj.casts_shadow))

    def intersect(self, ray: Ray) -> HitRecord | None:
        """Find the nearest hit of a ray against all objects.

        Args:
            ray: The ray to trace.

        Returns:
            The HitRecord of the nearest object, or None if nothing is hit
            closer than FAR_DISTANCE.
        """
        nearest: HitRecord | None = None
        t_nearest = FAR_DISTANCE
        for obj in self.objects:
            record = obj.hit(ray)
            if record is not None and record.t < t_nearest:
                nearest = record
                t_nearest = record.t
        return nearest

    def occluded(self, ray: Ray, max_distance: float) -> bool:
        """Whether any shadow-casting object blocks a ray before max_distance.

        Hits must lie strictly closer than ``max_distance - EPSILON``.
        """
        limit = max_distance - EPSILON
        for obj in self.occluders:
            t = obj.hit_distance(ray)
            if t is not None and t < limit:
                return True
        return False
