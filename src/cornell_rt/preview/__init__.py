"""Preview module for output and visualization.

Components:
    display: Matplotlib-based static preview
    export: PNG export via Pillow
    interactive: Taichi GGUI window (SPACE re-renders, ESC closes)

Example:
    >>> from cornell_rt.preview import save_png, show_preview
    >>> framebuffer = renderer.render()
    >>> save_png(framebuffer, "output.png")
    >>> show_preview(framebuffer)

The interactive window needs Taichi initialized first and is imported from
its own module:
    >>> from cornell_rt.preview.interactive import InteractivePreview
"""

from cornell_rt.preview.display import show_preview, to_display_image
from cornell_rt.preview.export import load_png, save_png, save_png_from_array

__all__ = [
    # Display
    "show_preview",
    "to_display_image",
    # Export
    "save_png",
    "save_png_from_array",
    "load_png",
]
