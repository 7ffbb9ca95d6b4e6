"""Unit tests for display encoding and the framebuffer."""

import numpy as np
import pytest


class TestGammaEncoding:
    """Tests for gamma_correct and encode_colors."""

    def test_black_and_white(self):
        from cornell_rt.core.framebuffer import encode_colors

        assert encode_colors(np.zeros(3)).tolist() == [0, 0, 0]
        assert encode_colors(np.ones(3)).tolist() == [255, 255, 255]

    def test_out_of_range_clamped(self):
        """Negative values encode to 0 and values above 1 to 255."""
        from cornell_rt.core.framebuffer import encode_colors

        assert encode_colors(np.array([-0.5, 1.7, 100.0])).tolist() == [0, 255, 255]

    def test_mid_grey(self):
        """0.5 ** 0.454 * 255 truncates to 186."""
        from cornell_rt.core.framebuffer import encode_colors

        assert encode_colors(np.array([0.5, 0.5, 0.5])).tolist() == [186, 186, 186]

    def test_gamma_is_monotonic(self):
        from cornell_rt.core.framebuffer import gamma_correct

        values = gamma_correct(np.linspace(0.0, 1.0, 101))
        assert np.all(np.diff(values) > 0.0)
        assert values[0] == 0.0
        assert values[-1] == pytest.approx(1.0)

    def test_encode_dtype_and_shape(self):
        from cornell_rt.core.framebuffer import encode_colors

        encoded = encode_colors(np.full((4, 5, 3), 0.3))
        assert encoded.dtype == np.uint8
        assert encoded.shape == (4, 5, 3)


class TestFramebuffer:
    """Tests for the Framebuffer container."""

    def test_shape_and_initial_black(self):
        from cornell_rt.core.framebuffer import Framebuffer

        fb = Framebuffer(8, 4)
        assert fb.shape == (4, 8, 3)
        assert fb.pixels.shape == (4, 8, 3)
        assert not fb.pixels.any()

    def test_invalid_size(self):
        from cornell_rt.core.framebuffer import Framebuffer

        with pytest.raises(ValueError):
            Framebuffer(0, 10)

    def test_byte_layout(self):
        """Pixel (x, y) starts at byte (y * width + x) * 3."""
        from cornell_rt.core.framebuffer import Framebuffer

        fb = Framebuffer(5, 3)
        rows = np.zeros((3, 5, 3), dtype=np.uint8)
        rows[2, 4] = (10, 20, 30)
        fb.write_rows(0, rows)
        data = fb.tobytes()
        offset = (2 * 5 + 4) * 3
        assert len(data) == 5 * 3 * 3
        assert list(data[offset : offset + 3]) == [10, 20, 30]

    def test_write_rows_at_offset(self):
        from cornell_rt.core.framebuffer import Framebuffer

        fb = Framebuffer(2, 4)
        fb.write_rows(2, np.full((2, 2, 3), 7, dtype=np.uint8))
        assert not fb.pixels[:2].any()
        assert (fb.pixels[2:] == 7).all()

    @pytest.mark.parametrize(
        "start, shape",
        [(3, (2, 2, 3)), (-1, (1, 2, 3)), (0, (1, 3, 3))],
    )
    def test_write_rows_rejects_bad_blocks(self, start, shape):
        from cornell_rt.core.framebuffer import Framebuffer

        fb = Framebuffer(2, 4)
        with pytest.raises(ValueError):
            fb.write_rows(start, np.zeros(shape, dtype=np.uint8))

    def test_to_image(self):
        from cornell_rt.core.framebuffer import Framebuffer

        fb = Framebuffer(6, 4)
        image = fb.to_image()
        assert image.size == (6, 4)
        assert image.mode == "RGB"
