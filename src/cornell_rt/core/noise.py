"""Two-dimensional gradient noise for procedural textures.

A simplified Perlin-style noise over a shuffled 256-entry permutation table.
The table is shuffled once from a seeded NumPy generator and duplicated to
512 entries so corner lookups never need to wrap.

The field is deterministic for a given seed and continuous everywhere,
including across integer cell boundaries, which is what keeps the wood grain
free of visible seams.

Example:
    >>> from cornell_rt.core.noise import GradientNoise
    >>> noise = GradientNoise(seed=7)
    >>> value = noise(1.25, 3.5)
"""

from __future__ import annotations

import math

import numpy as np

PERMUTATION_SIZE = 256

# Gradient coefficients (gx, gy) indexed by the low 4 bits of a corner hash.
# Only the first 8 codes select a direction; the remaining codes contribute 0.
_GRADIENTS = (
    (1.0, 1.0),
    (-1.0, 1.0),
    (1.0, -1.0),
    (-1.0, -1.0),
    (1.0, 0.0),
    (-1.0, 0.0),
    (0.0, 1.0),
    (0.0, -1.0),
) + ((0.0, 0.0),) * 8


def fade(t: float) -> float:
    """Quintic fade curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def gradient(hash_value: int, x: float, y: float) -> float:
    """Dot product of the hashed pseudo-gradient with the offset (x, y)."""
    gx, gy = _GRADIENTS[hash_value & 0xF]
    return gx * x + gy * y


def _mix(a: float, b: float, t: float) -> float:
    return (1.0 - t) * a + t * b


class GradientNoise:
    """Seeded 2D gradient noise.

    Attributes:
        seed: Seed used to shuffle the permutation table.
        permutation: The 512-entry permutation table (first 256 entries
            repeated).
    """

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        rng = np.random.default_rng(seed)
        base = rng.permutation(PERMUTATION_SIZE)
        self.permutation: tuple[int, ...] = tuple(int(v) for v in np.concatenate([base, base]))

    def noise(self, x: float, y: float) -> float:
        """Evaluate the noise field at (x, y).

        Args:
            x: First coordinate.
            y: Second coordinate.

        Returns:
            A scalar noise value, roughly in [-1, 1].
        """
        p = self.permutation

        floor_x = math.floor(x)
        floor_y = math.floor(y)
        cell_x = int(floor_x) & 255
        cell_y = int(floor_y) & 255

        x -= floor_x
        y -= floor_y

        u = fade(x)
        v = fade(y)

        a = p[cell_x] + cell_y
        b = p[cell_x + 1] + cell_y

        lower = _mix(gradient(p[a], x, y), gradient(p[b], x - 1.0, y), u)
        upper = _mix(gradient(p[a + 1], x, y - 1.0), gradient(p[b + 1], x - 1.0, y - 1.0), u)
        return _mix(lower, upper, v)

    __call__ = noise

    def __repr__(self) -> str:
        return f"GradientNoise(seed={self.seed})"
