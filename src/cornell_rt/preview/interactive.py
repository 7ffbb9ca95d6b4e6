"""Interactive preview window using Taichi GGUI.

The window shows the renderer's framebuffer. Keys:

    SPACE: render the scene again and show the new frame
    ESC:   close the window

Rendering and presenting are serialized: a re-render blocks the event loop,
and the window only ever shows a fully written framebuffer.

Taichi must be initialized (``ti.init``) before a preview is created, since
the display image is a Taichi field.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from cornell_rt.core.renderer import Renderer, RenderSettings
    >>> from cornell_rt.preview.interactive import InteractivePreview
    >>> from cornell_rt.scene import create_cornell_box_scene
    >>>
    >>> renderer = Renderer(create_cornell_box_scene(), RenderSettings())
    >>> InteractivePreview(renderer).run()
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import numpy as np
import taichi as ti

if TYPE_CHECKING:
    import numpy.typing as npt

    from cornell_rt.core.framebuffer import Framebuffer
    from cornell_rt.core.renderer import Renderer

logger = logging.getLogger(__name__)


class InteractivePreview:
    """Interactive preview window using Taichi GGUI.

    Attributes:
        renderer: The renderer whose framebuffer is displayed.
        width: Window width in pixels.
        height: Window height in pixels.
        display_image: Taichi field storing the display image (RGB float).
    """

    def __init__(
        self,
        renderer: Renderer,
        *,
        title: str = "CPU Ray Tracer - Cornell Box with Wood Grain",
    ) -> None:
        self.renderer = renderer
        self.width = renderer.width
        self.height = renderer.height
        self._title = title
        self._is_initialized = False

        # Window creation is deferred to run() so headless code can build a preview
        self._window: ti.ui.Window | None = None
        self._canvas: ti.ui.Canvas | None = None

        # Taichi fields use (x, y) indexing: shape is (width, height)
        self.display_image: ti.MatrixField = ti.Vector.field(
            3, dtype=ti.f32, shape=(self.width, self.height)
        )

    def _initialize_window(self) -> None:
        if self._is_initialized:
            return

        self._window = ti.ui.Window(
            name=self._title,
            res=(self.width, self.height),
            vsync=True,
        )
        self._canvas = self._window.get_canvas()
        self._is_initialized = True

    @property
    def window(self) -> ti.ui.Window:
        """Get the Taichi GGUI window, initializing if needed."""
        if self._window is None:
            self._initialize_window()
        assert self._window is not None
        return self._window

    @property
    def canvas(self) -> ti.ui.Canvas:
        if self._canvas is None:
            self._initialize_window()
        assert self._canvas is not None
        return self._canvas

    def update_image(self, image: npt.NDArray[np.float32]) -> None:
        """Update the display image from a numpy array.

        Args:
            image: Array of shape (height, width, 3), values in [0, 1], row 0
                at the top.

        Raises:
            ValueError: If image shape doesn't match (height, width, 3).
        """
        expected_shape = (self.height, self.width, 3)
        if image.shape != expected_shape:
            raise ValueError(f"Image shape {image.shape} doesn't match expected {expected_shape}")

        # Taichi's origin is bottom-left: flip rows, then swap to (x, y)
        image_transposed = np.ascontiguousarray(
            np.transpose(np.flipud(image), (1, 0, 2)), dtype=np.float32
        )
        self.display_image.from_numpy(image_transposed)

    def update_from_framebuffer(self, framebuffer: Framebuffer) -> None:
        """Copy the framebuffer bytes into the display image."""
        self.update_image(framebuffer.pixels.astype(np.float32) / 255.0)

    def refresh(self) -> None:
        """Render the scene and load the result into the display image."""
        framebuffer = self.renderer.render()
        self.update_from_framebuffer(framebuffer)
        logger.info("Frame ready (%.3f s)", self.renderer.last_render_seconds or 0.0)

    def is_running(self) -> bool:
        return self.window.running

    def show_frame(self) -> None:
        """Present the current display image."""
        self.canvas.set_image(self.display_image)
        self.window.show()

    def handle_events(self) -> None:
        """Process pending key presses (SPACE re-renders, ESC closes)."""
        window = self.window
        while window.get_event(ti.ui.PRESS):
            key = window.event.key
            if key == ti.ui.ESCAPE:
                self.close()
                return
            if key == ti.ui.SPACE:
                print("\nRe-rendering...")
                self.refresh()

    def run(self) -> None:
        """Render once, then run the event loop until the window closes."""
        self._initialize_window()
        self.refresh()

        while self.is_running():
            self.handle_events()
            if not self.is_running():
                break
            self.show_frame()

    def close(self) -> None:
        if self._window is not None:
            self._window.running = False

    @staticmethod
    def is_display_available() -> bool:
        """Check if a display is available for GUI rendering.

        Returns:
            True if a display is available, False for headless environments.
        """
        display = os.environ.get("DISPLAY")
        wayland = os.environ.get("WAYLAND_DISPLAY")

        if os.name == "nt":
            return True

        if os.uname().sysname == "Darwin":
            # SSH session without X forwarding
            if os.environ.get("SSH_CONNECTION") and not display:
                return False
            return True

        return bool(display or wayland)
