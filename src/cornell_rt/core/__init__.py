"""Core rendering module.

Components:
    ray: Vector3, Ray and shared vector helpers
    noise: Seeded 2D gradient noise
    integrator: Recursive trace with Phong shading, shadows, reflection and
        refraction
    framebuffer: 8-bit RGB pixel storage and gamma correction
    renderer: Render settings and the tiled worker-pool renderer
"""

from .framebuffer import GAMMA_EXPONENT, Framebuffer, encode_colors, gamma_correct
from .noise import GradientNoise
from .ray import EPSILON, MAX_DEPTH, ZERO, Ray, Vector3, lerp, reflect

# Note: integrator and renderer are NOT imported here to avoid circular imports.
# Import directly from cornell_rt.core.integrator or cornell_rt.core.renderer.

__all__ = [
    "EPSILON",
    "MAX_DEPTH",
    "ZERO",
    "Ray",
    "Vector3",
    "lerp",
    "reflect",
    "GradientNoise",
    "Framebuffer",
    "GAMMA_EXPONENT",
    "gamma_correct",
    "encode_colors",
]
