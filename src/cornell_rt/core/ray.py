"""Ray data structure and vector utilities for CPU ray tracing.

This module provides the immutable Vector3 value type, the Ray dataclass and
the handful of vector helpers shared by the geometry, material and
integrator modules. Everything here is plain Python float arithmetic so it
can run inside worker processes without any runtime initialization.

Example:
    >>> from cornell_rt.core.ray import Ray, Vector3
    >>> ray = Ray(origin=Vector3(0.0, 0.0, 0.0), direction=Vector3(0.0, 0.0, -2.0))
    >>> ray.direction
    Vector3(x=0.0, y=0.0, z=-1.0)
    >>> ray.at(5.0)
    Vector3(x=0.0, y=0.0, z=-5.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

# =============================================================================
# Ray Tracing Constants
# =============================================================================

# Guard distance for spawned rays and minimum accepted hit distance
EPSILON = 1e-3

# Maximum recursion depth; trace() recurses only while depth < MAX_DEPTH
MAX_DEPTH = 6


class Vector3(NamedTuple):
    """A 3-component vector used for points, directions and RGB colors.

    Vectors are immutable; every operator returns a new instance.
    Multiplying two vectors gives the component-wise (Hadamard) product,
    which is how colors are modulated.

    Attributes:
        x: First component (red for colors).
        y: Second component (green for colors).
        z: Third component (blue for colors).
    """

    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:  # type: ignore[override]
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Vector3 | float) -> Vector3:  # type: ignore[override]
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> Vector3:  # type: ignore[override]
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vector3) -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Compute the cross product self x other."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Compute the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3:
        """Return a unit vector in the same direction.

        A zero-length vector is returned unchanged rather than raising.
        """
        norm = self.length()
        if norm > 0.0:
            inv = 1.0 / norm
            return Vector3(self.x * inv, self.y * inv, self.z * inv)
        return self


ZERO = Vector3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and a unit direction vector.

    The direction is normalized at construction, so ``ray.direction`` is
    always unit length.

    Attributes:
        origin: The starting point of the ray.
        direction: The normalized direction of the ray.

    Raises:
        ValueError: If the direction has zero length.
    """

    origin: Vector3
    direction: Vector3

    def __post_init__(self) -> None:
        direction = Vector3(*self.direction)
        if direction.length() == 0.0:
            raise ValueError("Ray direction must have non-zero length")
        object.__setattr__(self, "origin", Vector3(*self.origin))
        object.__setattr__(self, "direction", direction.normalize())

    def at(self, t: float) -> Vector3:
        """Compute the point origin + t * direction."""
        return self.origin + self.direction * t


def reflect(incident: Vector3, normal: Vector3) -> Vector3:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction (pointing toward the surface).
        normal: The unit surface normal.

    Returns:
        The normalized mirror direction.
    """
    return (incident - normal * (2.0 * incident.dot(normal))).normalize()


def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    """Linearly interpolate between two vectors (t=0 gives a, t=1 gives b)."""
    return a * (1.0 - t) + b * t
