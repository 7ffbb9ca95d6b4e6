"""8-bit RGB framebuffer and display encoding.

Linear colors are encoded for display by clamping each channel to [0, 1],
raising it to GAMMA_EXPONENT (approximately 1/2.2), scaling by 255 and
truncating to a byte.

The pixel storage is a numpy uint8 array of shape (height, width, 3), row 0
at the top, so the raw bytes are in row-major order and pixel (x, y) starts
at byte offset (y * width + x) * 3.

Example:
    >>> import numpy as np
    >>> from cornell_rt.core.framebuffer import Framebuffer, encode_colors
    >>> fb = Framebuffer(4, 2)
    >>> fb.write_rows(0, encode_colors(np.ones((2, 4, 3))))
    >>> fb.pixels[1, 3].tolist()
    [255, 255, 255]
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

# Display gamma exponent (1 / 2.2)
GAMMA_EXPONENT = 0.454


def gamma_correct(colors: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Clamp linear colors to [0, 1] and apply display gamma.

    Args:
        colors: Linear RGB values of any shape.

    Returns:
        Gamma-encoded values in [0, 1], same shape as the input.
    """
    clamped = np.clip(np.asarray(colors, dtype=np.float64), 0.0, 1.0)
    return np.power(clamped, GAMMA_EXPONENT)


def encode_colors(colors: npt.ArrayLike) -> npt.NDArray[np.uint8]:
    """Convert linear colors to display bytes.

    Args:
        colors: Linear RGB array of shape (..., 3).

    Returns:
        uint8 array of the same shape.
    """
    scaled = np.minimum(255.0, gamma_correct(colors) * 255.0)
    # astype truncates toward zero, matching a byte cast
    return scaled.astype(np.uint8)


class Framebuffer:
    """Fixed-size RGB byte buffer.

    The buffer is allocated once; every render overwrites it in place.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        pixels: uint8 array of shape (height, width, 3).
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Framebuffer size {width}x{height} must be positive.")
        self.width = width
        self.height = height
        self.pixels: npt.NDArray[np.uint8] = np.zeros((height, width, 3), dtype=np.uint8)

    @property
    def shape(self) -> tuple[int, int, int]:
        return (self.height, self.width, 3)

    def write_rows(self, start_row: int, rows: npt.NDArray[np.uint8]) -> None:
        """Copy a block of encoded rows into the buffer.

        Args:
            start_row: Index of the first row to overwrite.
            rows: uint8 array of shape (n, width, 3).

        Raises:
            ValueError: If the block does not fit the buffer.
        """
        n = rows.shape[0]
        if rows.shape[1:] != (self.width, 3) or start_row < 0 or start_row + n > self.height:
            raise ValueError(
                f"Cannot write rows of shape {rows.shape} at row {start_row} "
                f"into a {self.width}x{self.height} framebuffer."
            )
        self.pixels[start_row : start_row + n] = rows

    def tobytes(self) -> bytes:
        """Raw RGB bytes, top row first."""
        return self.pixels.tobytes()

    def to_image(self) -> PILImage.Image:
        """Copy of the buffer as a Pillow RGB image."""
        return PILImage.fromarray(self.pixels.copy())

    def __repr__(self) -> str:
        return f"Framebuffer(width={self.width}, height={self.height})"
