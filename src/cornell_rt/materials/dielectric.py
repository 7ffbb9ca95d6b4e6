"""Dielectric (glass) material implementation.

Glass splits every hit into a refracted and a reflected ray and blends the
two with Schlick's approximation of the Fresnel term:

    R0 = ((eta - 1) / (eta + 1))^2
    F  = R0 + (1 - R0) * (1 - cos_i)^5

The reflected ray is weighted by F and the refracted ray by 1 - F, so the
weights always sum to one. When sin^2 of the transmitted angle reaches 1
the ray is totally internally reflected and only the mirror ray is traced.

Example:
    >>> from cornell_rt.materials.dielectric import schlick_fresnel
    >>> round(schlick_fresnel(1.0, 1.5), 4)
    0.04
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from cornell_rt.core.ray import Vector3


@dataclass(frozen=True)
class Glass:
    """Refractive material.

    Attributes:
        eta: Refractive index (> 0; 1.0 is vacuum, 1.5 typical glass).
    """

    eta: float = 1.5

    def __post_init__(self) -> None:
        if self.eta <= 0.0:
            raise ValueError(f"Refractive index eta = {self.eta} must be positive.")


@dataclass(frozen=True)
class Interface:
    """Orientation of a ray crossing a refractive boundary.

    Attributes:
        normal: The normal on the incident side (flipped when exiting).
        cos_i: Cosine of the incidence angle, always >= 0.
        eta: Index ratio used by Snell's law (inverted when exiting).
    """

    normal: Vector3
    cos_i: float
    eta: float


def orient_interface(direction: Vector3, normal: Vector3, eta: float) -> Interface:
    """Work out whether a ray enters or exits the medium.

    Args:
        direction: Unit ray direction.
        normal: Outward unit surface normal.
        eta: Refractive index of the material.

    Returns:
        The incident-side Interface.
    """
    cos_i = -direction.dot(normal)
    if cos_i > 0.0:
        return Interface(normal=normal, cos_i=cos_i, eta=eta)
    return Interface(normal=-normal, cos_i=-cos_i, eta=1.0 / eta)


def sin2_transmitted(cos_i: float, eta: float) -> float:
    """Squared sine of the transmitted angle, eta^2 * (1 - cos_i^2)."""
    return eta * eta * (1.0 - cos_i * cos_i)


def is_total_internal_reflection(cos_i: float, eta: float) -> bool:
    """True when no transmitted ray exists."""
    return sin2_transmitted(cos_i, eta) >= 1.0


def refract(direction: Vector3, interface: Interface) -> Vector3:
    """Compute the Snell refraction direction.

    Args:
        direction: Unit incident direction.
        interface: The oriented boundary from orient_interface().

    Returns:
        The normalized transmitted direction.

    Raises:
        ValueError: If the configuration is total internal reflection.
    """
    sin2_t = sin2_transmitted(interface.cos_i, interface.eta)
    if sin2_t >= 1.0:
        raise ValueError("No refracted direction under total internal reflection.")
    cos_t = math.sqrt(1.0 - sin2_t)
    eta = interface.eta
    return (direction * eta + interface.normal * (eta * interface.cos_i - cos_t)).normalize()


def schlick_fresnel(cos_i: float, eta: float) -> float:
    """Compute Fresnel reflectance using Schlick's approximation.

    Args:
        cos_i: Cosine of the incidence angle in [0, 1].
        eta: Refractive index (or its inverse; the result is the same).

    Returns:
        The reflected fraction in [0, 1].
    """
    r0 = ((eta - 1.0) / (eta + 1.0)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos_i) ** 5


def fresnel_weights(cos_i: float, eta: float) -> tuple[float, float]:
    """Return (reflected_weight, refracted_weight), summing to one."""
    fresnel = schlick_fresnel(cos_i, eta)
    return fresnel, 1.0 - fresnel
