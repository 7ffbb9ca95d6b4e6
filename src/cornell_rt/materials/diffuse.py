"""Diffuse (non-reflective) material kind.

A diffuse surface is shaded with the local Phong model only: no mirror
reflection and no refraction are traced from it. Walls, the floor and the
wooden crate are diffuse.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Diffuse:
    """Purely locally shaded surface (kr = 0)."""
