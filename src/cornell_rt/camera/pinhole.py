"""Pinhole camera model for perspective projection ray generation.

The camera builds an orthonormal basis from its position, the point it looks
at and the world up axis (0, 1, 0):

- forward: from the position toward the look-at point
- right: forward x world_up
- up: right x forward

Pixel (x, y), with y = 0 the top row, maps to the image plane at unit
distance in front of the camera:

    u = (2x/W - 1) * tan(fov/2) * W/H
    v = (1 - 2y/H) * tan(fov/2)

and the primary ray direction is normalize(forward + u*right + v*up).
Rays go through the pixel corner; there is no jitter or anti-aliasing.

Example:
    >>> from cornell_rt.camera.pinhole import PinholeCamera
    >>> camera = PinholeCamera(position=(0.0, 1.5, 2.5), look_at=(0.0, 1.5, 0.0))
    >>> ray = camera.primary_ray(400, 300, 800, 600)
    >>> ray.direction
    Vector3(x=0.0, y=0.0, z=-1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from cornell_rt.core.ray import Ray, Vector3

WORLD_UP = Vector3(0.0, 1.0, 0.0)


# =============================================================================
# Camera Data Structures
# =============================================================================


@dataclass(frozen=True)
class CameraBasis:
    """Orthonormal camera frame.

    Attributes:
        forward: Viewing direction.
        right: Image-plane right direction.
        up: Image-plane up direction.
    """

    forward: Vector3
    right: Vector3
    up: Vector3


@dataclass(frozen=True)
class PinholeCamera:
    """Configuration for a pinhole (perspective) camera.

    Attributes:
        position: Camera position in world space.
        look_at: Point the camera is looking at.
        fov_degrees: Vertical field of view in degrees, in (0, 180).

    Raises:
        ValueError: If the field of view is out of range or the camera looks
            straight along the world up axis.
    """

    position: Vector3
    look_at: Vector3
    fov_degrees: float = 90.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", Vector3(*self.position))
        object.__setattr__(self, "look_at", Vector3(*self.look_at))
        if not 0.0 < self.fov_degrees < 180.0:
            raise ValueError(f"Field of view = {self.fov_degrees} must be in (0, 180) degrees.")
        forward = self.look_at - self.position
        if forward.length() == 0.0:
            raise ValueError("Camera position and look-at point must differ.")
        if forward.normalize().cross(WORLD_UP).length() == 0.0:
            raise ValueError("Camera cannot look straight along the world up axis.")

    @property
    def fov(self) -> float:
        """Vertical field of view in radians."""
        return math.radians(self.fov_degrees)

    def basis(self) -> CameraBasis:
        """Compute the orthonormal (forward, right, up) camera frame."""
        forward = (self.look_at - self.position).normalize()
        right = forward.cross(WORLD_UP).normalize()
        up = right.cross(forward).normalize()
        return CameraBasis(forward=forward, right=right, up=up)

    def primary_ray(
        self, x: int, y: int, width: int, height: int, basis: CameraBasis | None = None
    ) -> Ray:
        """Generate the primary ray through pixel (x, y).

        Args:
            x: Pixel column, 0 at the left.
            y: Pixel row, 0 at the top.
            width: Image width in pixels.
            height: Image height in pixels.
            basis: Precomputed basis() result; computed when omitted.

        Returns:
            A Ray from the camera position through the pixel.
        """
        if basis is None:
            basis = self.basis()
        half_height = math.tan(self.fov / 2.0)
        u = (2.0 * x / width - 1.0) * half_height * (width / height)
        v = (1.0 - 2.0 * y / height) * half_height
        direction = basis.forward + basis.right * u + basis.up * v
        return Ray(self.position, direction)
