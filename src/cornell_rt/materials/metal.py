"""Reflective material kinds and glossy reflection sampling.

This module implements the three reflective kinds:

- Mirror: perfect specular reflection blended with local shading by kr.
- Glossy: non-metallic reflection blurred by a roughness perturbation.
- Metal: reflection tinted by the material color, optionally rough. Metals
  also get a strongly reduced diffuse term during local shading.

Blurred reflection is approximated by Monte Carlo sampling: the perfect
mirror direction is perturbed by a random unit vector scaled by roughness
and renormalized. Samples that end up below the surface fall back to the
unperturbed mirror direction.

The reflection formula is:
    R = I - 2(I . N)N

Example:
    >>> import numpy as np
    >>> from cornell_rt.core.ray import Vector3
    >>> from cornell_rt.materials.metal import sample_reflection_directions
    >>> rng = np.random.default_rng(0)
    >>> dirs = sample_reflection_directions(
    ...     Vector3(0.0, 1.0, 0.0), Vector3(0.0, 1.0, 0.0), 0.2, rng
    ... )
    >>> len(dirs)
    16
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from cornell_rt.core.ray import Vector3

# Samples traced for a rough reflection
GLOSSY_SAMPLES = 16

# Roughness at or below this value is treated as a perfect mirror
ROUGHNESS_THRESHOLD = 1e-3


def _check_unit_interval(name: str, value: float) -> None:
    if value < 0.0 or value > 1.0:
        raise ValueError(f"{name} = {value} is outside [0, 1].")


@dataclass(frozen=True)
class Mirror:
    """Perfectly smooth, non-metallic reflector.

    Attributes:
        kr: Reflective weight in [0, 1]. 1 gives a pure mirror.
    """

    kr: float = 1.0

    def __post_init__(self) -> None:
        _check_unit_interval("kr", self.kr)


@dataclass(frozen=True)
class Glossy:
    """Non-metallic reflector with blurred reflections.

    Attributes:
        kr: Reflective weight in [0, 1].
        roughness: Perturbation scale in [0, 1] (0 = perfect mirror).
    """

    kr: float
    roughness: float

    def __post_init__(self) -> None:
        _check_unit_interval("kr", self.kr)
        _check_unit_interval("roughness", self.roughness)


@dataclass(frozen=True)
class Metal:
    """Metallic reflector; reflections and highlights take the surface color.

    Attributes:
        kr: Reflective weight in [0, 1].
        roughness: Perturbation scale in [0, 1] (0 = polished).
    """

    kr: float
    roughness: float = 0.0

    def __post_init__(self) -> None:
        _check_unit_interval("kr", self.kr)
        _check_unit_interval("roughness", self.roughness)


def sample_reflection_directions(
    mirror_direction: Vector3,
    normal: Vector3,
    roughness: float,
    rng: np.random.Generator,
) -> list[Vector3]:
    """Generate the reflection directions to trace for one hit.

    Args:
        mirror_direction: The perfect (unit) mirror direction.
        normal: The unit surface normal.
        roughness: Surface roughness. At or below ROUGHNESS_THRESHOLD the
            mirror direction alone is returned.
        rng: Random generator owned by the calling render worker.

    Returns:
        A list with either 1 or GLOSSY_SAMPLES unit directions, none of which
        points below the surface.
    """
    if roughness <= ROUGHNESS_THRESHOLD:
        return [mirror_direction]

    offsets = rng.uniform(-1.0, 1.0, size=(GLOSSY_SAMPLES, 3))
    directions = []
    for ox, oy, oz in offsets.tolist():
        random_vec = Vector3(ox, oy, oz).normalize()
        perturbed = (mirror_direction + random_vec * roughness).normalize()
        if perturbed.dot(normal) < 0.0:
            perturbed = mirror_direction
        directions.append(perturbed)
    return directions
