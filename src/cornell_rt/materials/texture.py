"""Procedural textures for the wooden crate and the board floor.

A texture rewrites the material of a surface at the hit point. Two are
provided:

- WoodGrainTexture: long wood stripes projected onto the face the normal
  points along, with the stripe phase perturbed by gradient noise.
- FloorBoardTexture: a two-tone board pattern from a sine ripple along x and
  an integer-parity stripe along z. It does not use noise.

Both are plain picklable dataclasses so scenes can be shipped to render
worker processes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Protocol

from cornell_rt.core.noise import GradientNoise
from cornell_rt.core.ray import Vector3, lerp
from cornell_rt.materials.material import Material

LIGHT_WOOD = Vector3(0.65, 0.45, 0.25)
DARK_WOOD = Vector3(0.45, 0.25, 0.1)

LIGHT_BOARD = Vector3(0.55, 0.35, 0.15)
DARK_BOARD = Vector3(0.45, 0.25, 0.1)


class Texture(Protocol):
    """Anything that can derive a hit-point material from a base material."""

    def apply(self, material: Material, point: Vector3, normal: Vector3) -> Material: ...


@dataclass(frozen=True)
class WoodGrainTexture:
    """Noise-perturbed wood stripes.

    Attributes:
        noise: Gradient noise used to wobble the stripe phase.
        scale: Spatial frequency applied to hit coordinates.
        stripe_density: Stripe period; smaller values give wider stripes.
        noise_strength: Phase perturbation strength.
        light_color: Color at pattern value 0.
        dark_color: Color at pattern value 1.
    """

    noise: GradientNoise
    scale: float = 10.0
    stripe_density: float = 0.3
    noise_strength: float = 0.3
    light_color: Vector3 = LIGHT_WOOD
    dark_color: Vector3 = DARK_WOOD

    def pattern(self, point: Vector3, normal: Vector3) -> float:
        """Sharpened stripe value in [0, 1] at a point on a face."""
        scale = self.scale
        half = scale * 0.5
        if abs(normal.y) > 0.9:
            # top/bottom: stripes run along z
            stripe_coord = point.z * scale
            noise_val = self.noise(point.x * half, point.z * half)
        elif abs(normal.x) > 0.9:
            stripe_coord = point.y * scale
            noise_val = self.noise(point.y * half, point.z * half)
        else:
            stripe_coord = point.y * scale
            noise_val = self.noise(point.x * half, point.y * half)

        value = math.sin(
            stripe_coord * 2.0 * math.pi / self.stripe_density
            + noise_val * self.noise_strength * 10.0
        )
        value = (value + 1.0) * 0.5
        value = abs(value - 0.5) * 2.0
        return value * value

    def color_at(self, point: Vector3, normal: Vector3) -> Vector3:
        return lerp(self.light_color, self.dark_color, self.pattern(point, normal))

    def apply(self, material: Material, point: Vector3, normal: Vector3) -> Material:
        return replace(material, color=self.color_at(point, normal))


@dataclass(frozen=True)
class FloorBoardTexture:
    """Two-tone floor boards.

    Attributes:
        ripple_frequency: Frequency of the sine ripple along x.
        board_frequency: Frequency of the parity stripes along z.
    """

    ripple_frequency: float = 15.0
    board_frequency: float = 40.0

    def color_at(self, point: Vector3) -> Vector3:
        pattern = math.sin(point.x * self.ripple_frequency) * 0.5 + 0.5
        stripe = int(point.z * self.board_frequency) % 2
        base = LIGHT_BOARD if stripe else DARK_BOARD
        return base * (0.8 + pattern * 0.2)

    def apply(self, material: Material, point: Vector3, normal: Vector3) -> Material:
        return replace(material, color=self.color_at(point))
