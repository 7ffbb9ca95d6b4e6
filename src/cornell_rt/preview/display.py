"""Matplotlib-based preview display for rendered framebuffers.

Example:
    >>> from cornell_rt.core.renderer import Renderer, RenderSettings
    >>> from cornell_rt.preview.display import show_preview
    >>> from cornell_rt.scene import create_cornell_box_scene
    >>>
    >>> renderer = Renderer(create_cornell_box_scene(), RenderSettings(width=160, height=120))
    >>> show_preview(renderer.render())
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from cornell_rt.core.framebuffer import Framebuffer


def to_display_image(framebuffer: Framebuffer) -> npt.NDArray[np.float32]:
    """Convert the framebuffer bytes to float RGB in [0, 1].

    The bytes are already gamma-encoded, so no further correction is
    applied.

    Returns:
        Array of shape (H, W, 3) with dtype float32.
    """
    return framebuffer.pixels.astype(np.float32) / 255.0


def show_preview(
    framebuffer: Framebuffer,
    *,
    title: str | None = None,
    render_seconds: float | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display a framebuffer as a Matplotlib figure.

    Args:
        framebuffer: The rendered framebuffer.
        title: Custom title (default shows the image size).
        render_seconds: Optional render time appended to the default title.
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    # Row 0 is the top row, which is imshow's default origin
    ax.imshow(to_display_image(framebuffer))
    ax.axis("off")

    if title is None:
        title = f"Cornell Box - {framebuffer.width}x{framebuffer.height}"
        if render_seconds is not None:
            title += f" ({render_seconds:.2f} s)"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
