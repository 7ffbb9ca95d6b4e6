"""Tiled multi-process renderer.

The image is split into horizontal tiles of ``rows_per_tile`` rows. Each
tile is traced independently, either in-process (``workers=1``) or on a
``concurrent.futures.ProcessPoolExecutor``, and the encoded rows are copied
into the renderer's framebuffer as tiles complete. The scene is sent to each
worker once, through the pool initializer, and tasks carry only row ranges.

Every tile owns its random generator, seeded from ``(seed, first_row)``, so
an image depends only on the scene, the image size and the seed; the number
of workers and the order in which tiles finish do not change a single byte.

Example:
    >>> from cornell_rt.core.renderer import Renderer, RenderSettings
    >>> from cornell_rt.scene import create_cornell_box_scene
    >>> renderer = Renderer(create_cornell_box_scene(), RenderSettings(width=80, height=60))
    >>> framebuffer = renderer.render()
    >>> framebuffer.pixels.shape
    (60, 80, 3)
"""

from __future__ import annotations

import logging
import multiprocessing
import os
import time
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from cornell_rt.core.framebuffer import Framebuffer, encode_colors
from cornell_rt.core.integrator import trace
from cornell_rt.scene.world import Scene

logger = logging.getLogger(__name__)

# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]


# =============================================================================
# Render Configuration
# =============================================================================


@dataclass
class RenderSettings:
    """Configuration for a render.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        workers: Number of worker processes. None uses os.cpu_count();
            1 renders in the calling process.
        seed: Base seed for the per-tile random generators (>= 0).
        rows_per_tile: Number of image rows traced per task.
    """

    width: int = 800
    height: int = 600
    workers: int | None = None
    seed: int = 0
    rows_per_tile: int = 8

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size {self.width}x{self.height} must be positive.")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers = {self.workers} must be at least 1.")
        if self.seed < 0:
            raise ValueError(f"seed = {self.seed} must be non-negative.")
        if self.rows_per_tile < 1:
            raise ValueError(f"rows_per_tile = {self.rows_per_tile} must be at least 1.")

    @property
    def worker_count(self) -> int:
        return self.workers if self.workers is not None else (os.cpu_count() or 1)


def make_tiles(height: int, rows_per_tile: int) -> list[tuple[int, int]]:
    """Split rows [0, height) into (start, stop) ranges."""
    return [(y, min(y + rows_per_tile, height)) for y in range(0, height, rows_per_tile)]


# =============================================================================
# Tile Worker
# =============================================================================


def render_tile(
    scene: Scene, start_row: int, stop_row: int, width: int, height: int, seed: int
) -> npt.NDArray[np.uint8]:
    """Trace and encode the rows [start_row, stop_row) of an image.

    Runs in a worker process, so it only takes picklable arguments.

    Returns:
        uint8 array of shape (stop_row - start_row, width, 3).
    """
    rng = np.random.default_rng((seed, start_row))
    camera = scene.camera
    basis = camera.basis()

    colors = np.empty((stop_row - start_row, width, 3), dtype=np.float64)
    for j, y in enumerate(range(start_row, stop_row)):
        for x in range(width):
            ray = camera.primary_ray(x, y, width, height, basis)
            colors[j, x] = trace(scene, ray, 0, rng)
    return encode_colors(colors)


# Scene shipped once to each worker process by _init_worker
_worker_scene: Scene | None = None


def _init_worker(scene: Scene) -> None:
    global _worker_scene
    _worker_scene = scene


def _render_tile_task(args: tuple[int, int, int, int, int]) -> tuple[int, npt.NDArray[np.uint8]]:
    start_row, stop_row, width, height, seed = args
    if _worker_scene is None:
        raise RuntimeError("Worker process was not initialized with a scene.")
    return start_row, render_tile(_worker_scene, start_row, stop_row, width, height, seed)


# =============================================================================
# Renderer
# =============================================================================


class Renderer:
    """Renders a scene into a framebuffer that is reused across renders.

    Attributes:
        scene: The scene being rendered.
        settings: Image size, worker count and seed.
        framebuffer: The output buffer, overwritten by every render().
        last_render_seconds: Wall time of the most recent render, or None.
    """

    def __init__(
        self,
        scene: Scene,
        settings: RenderSettings | None = None,
        *,
        mp_context: multiprocessing.context.BaseContext | None = None,
    ) -> None:
        self.scene = scene
        self.settings = settings if settings is not None else RenderSettings()
        self.framebuffer = Framebuffer(self.settings.width, self.settings.height)
        self.last_render_seconds: float | None = None
        self._mp_context = mp_context

    @property
    def width(self) -> int:
        return self.settings.width

    @property
    def height(self) -> int:
        return self.settings.height

    def render(self, callback: ProgressCallback | None = None) -> Framebuffer:
        """Render every pixel of the image.

        Blocks until all tiles are written.

        Args:
            callback: Optional function called after each tile with
                (rows_completed, total_rows).

        Returns:
            The renderer's framebuffer.
        """
        settings = self.settings
        tiles = make_tiles(settings.height, settings.rows_per_tile)
        tasks = [
            (start, stop, settings.width, settings.height, settings.seed) for start, stop in tiles
        ]
        workers = min(settings.worker_count, len(tasks))

        logger.info(
            "Rendering %dx%d in %d tiles with %d worker(s)",
            settings.width,
            settings.height,
            len(tasks),
            workers,
        )
        t0 = time.perf_counter()
        rows_done = 0

        def on_tile(start_row: int, rows: npt.NDArray[np.uint8]) -> None:
            nonlocal rows_done
            self.framebuffer.write_rows(start_row, rows)
            rows_done += rows.shape[0]
            logger.debug(
                "Tile at row %d done, progress: %d%%",
                start_row,
                rows_done * 100 // settings.height,
            )
            if callback is not None:
                callback(rows_done, settings.height)

        if workers == 1:
            for task in tasks:
                on_tile(task[0], render_tile(self.scene, *task))
        else:
            with ProcessPoolExecutor(
                max_workers=workers,
                mp_context=self._mp_context,
                initializer=_init_worker,
                initargs=(self.scene,),
            ) as executor:
                futures = [executor.submit(_render_tile_task, task) for task in tasks]
                for future in as_completed(futures):
                    on_tile(*future.result())

        self.last_render_seconds = time.perf_counter() - t0
        logger.info("Render complete in %.3f s", self.last_render_seconds)
        return self.framebuffer

    def __repr__(self) -> str:
        return (
            f"Renderer(width={self.width}, height={self.height}, "
            f"workers={self.settings.workers}, seed={self.settings.seed})"
        )
