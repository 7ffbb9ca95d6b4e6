"""Camera module for primary ray generation.

Components:
    pinhole: Pinhole perspective camera with look-at positioning
"""

from .pinhole import WORLD_UP, CameraBasis, PinholeCamera

__all__ = [
    "PinholeCamera",
    "CameraBasis",
    "WORLD_UP",
]
