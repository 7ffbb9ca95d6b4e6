"""Image export utilities for rendered framebuffers.

The framebuffer already holds gamma-encoded 8-bit RGB, so export is a
straight copy into a Pillow image.

Supported formats:
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from cornell_rt.core.renderer import Renderer, RenderSettings
    >>> from cornell_rt.preview.export import save_png
    >>> from cornell_rt.scene import create_cornell_box_scene
    >>>
    >>> renderer = Renderer(create_cornell_box_scene(), RenderSettings(width=80, height=60))
    >>> save_png(renderer.render(), "output.png")
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from cornell_rt.core.framebuffer import Framebuffer


def save_png(framebuffer: Framebuffer, filepath: str | os.PathLike[str]) -> None:
    """Save a framebuffer as a PNG file.

    Args:
        framebuffer: The rendered framebuffer.
        filepath: Output file path (should end in .png).

    Example:
        >>> save_png(renderer.render(), "cornell_box.png")
    """
    framebuffer.to_image().save(filepath, format="PNG")


def save_png_from_array(image: npt.NDArray[np.uint8], filepath: str | os.PathLike[str]) -> None:
    """Save an 8-bit RGB array as a PNG file.

    Args:
        image: Array of shape (H, W, 3) with dtype uint8.
        filepath: Output file path.

    Raises:
        ValueError: If the array is not an 8-bit RGB image.
    """
    if image.ndim != 3 or image.shape[2] != 3 or image.dtype != np.uint8:
        raise ValueError(
            f"Expected a uint8 array of shape (H, W, 3), got {image.dtype} {image.shape}"
        )
    PILImage.fromarray(np.ascontiguousarray(image)).save(filepath, format="PNG")


def load_png(filepath: str | os.PathLike[str]) -> npt.NDArray[np.uint8]:
    """Load a PNG file as an (H, W, 3) uint8 array."""
    with PILImage.open(filepath) as image:
        return np.asarray(image.convert("RGB"), dtype=np.uint8).copy()
