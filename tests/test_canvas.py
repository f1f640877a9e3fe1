"""Unit tests for the canvas and its PPM output.

Tests cover:
- Construction, pixel writes and reads
- Out-of-range writes and reads
- 8-bit quantization (clamping and rounding)
- PPM header, pixel data, line wrapping and trailing newline
"""

import numpy as np
import pytest


class TestCanvasPixels:
    """Test Canvas construction and pixel access."""

    def test_new_canvas_is_black(self):
        """Test that every pixel of a new canvas is black."""
        from whitted.core.tuples import BLACK
        from whitted.preview.canvas import Canvas

        canvas = Canvas(10, 20)
        assert canvas.width == 10
        assert canvas.height == 20
        assert all(canvas.pixel_at(x, y) == BLACK for x in range(10) for y in range(20))

    def test_write_pixel(self):
        """Test writing and reading back a pixel."""
        from whitted.core.tuples import color
        from whitted.preview.canvas import Canvas

        canvas = Canvas(10, 20)
        canvas.write_pixel(2, 3, color(1, 0, 0))
        assert canvas.pixel_at(2, 3) == color(1, 0, 0)

    def test_write_outside_is_ignored(self):
        """Test that writes outside the canvas are dropped."""
        from whitted.core.tuples import color
        from whitted.preview.canvas import Canvas

        canvas = Canvas(4, 4)
        canvas.write_pixel(4, 0, color(1, 1, 1))
        canvas.write_pixel(-1, 2, color(1, 1, 1))
        assert not canvas.to_numpy().any()

    def test_read_outside_raises(self):
        """Test that reading outside the canvas raises IndexError."""
        from whitted.preview.canvas import Canvas

        with pytest.raises(IndexError):
            Canvas(4, 4).pixel_at(0, 4)

    @pytest.mark.parametrize("width,height", [(0, 1), (1, 0)])
    def test_invalid_size(self, width, height):
        """Test that empty canvases are rejected."""
        from whitted.preview.canvas import Canvas

        with pytest.raises(ValueError):
            Canvas(width, height)

    def test_to_numpy_is_a_copy(self):
        """Test that to_numpy returns (H, W, 3) data that can be modified freely."""
        from whitted.core.tuples import BLACK
        from whitted.preview.canvas import Canvas

        canvas = Canvas(3, 2)
        data = canvas.to_numpy()
        assert data.shape == (2, 3, 3)
        data[:] = 1.0
        assert canvas.pixel_at(0, 0) == BLACK


class TestQuantization:
    """Test 8-bit quantization."""

    def test_clamps_and_rounds(self):
        """Test that channels are clamped to [0, 255] and rounded half up."""
        from whitted.core.tuples import color
        from whitted.preview.canvas import Canvas

        canvas = Canvas(3, 1)
        canvas.write_pixel(0, 0, color(1.5, 0, 0))
        canvas.write_pixel(1, 0, color(0, 0.5, 0))
        canvas.write_pixel(2, 0, color(-0.5, 0, 1))

        data = canvas.to_bytes()
        assert data.dtype == np.uint8
        assert data.tolist() == [[[255, 0, 0], [0, 128, 0], [0, 0, 255]]]

    def test_kernel_annotations_are_evaluated(self):
        """Test that the kernel module keeps its ndarray annotations as real types.

        Taichi cannot compile a kernel whose argument annotations are strings.
        """
        from whitted.preview import canvas as canvas_module

        assert "annotations" not in vars(canvas_module)


class TestPPM:
    """Test PPM serialization."""

    def test_header(self):
        """Test the three header lines."""
        from whitted.preview.canvas import Canvas

        lines = Canvas(5, 3).to_ppm().splitlines()
        assert lines[:3] == ["P3", "5 3", "255"]

    def test_pixel_data(self):
        """Test that each canvas row becomes one line of clamped values."""
        from whitted.core.tuples import color
        from whitted.preview.canvas import Canvas

        canvas = Canvas(5, 3)
        canvas.write_pixel(0, 0, color(1.5, 0, 0))
        canvas.write_pixel(2, 1, color(0, 0.5, 0))
        canvas.write_pixel(4, 2, color(-0.5, 0, 1))

        lines = canvas.to_ppm().splitlines()
        assert lines[3:6] == [
            "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
        ]

    def test_long_lines_are_split(self):
        """Test that no line exceeds 70 characters and numbers are not broken."""
        from whitted.core.tuples import color
        from whitted.preview.canvas import Canvas

        canvas = Canvas(10, 2)
        canvas.fill(color(1, 0.8, 0.6))

        lines = canvas.to_ppm().splitlines()
        assert lines[3:7] == [
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
        ]
        assert all(len(line) <= 70 for line in lines)

    def test_ends_with_newline(self):
        """Test that PPM output is terminated by a newline."""
        from whitted.preview.canvas import Canvas

        assert Canvas(5, 3).to_ppm().endswith("\n")
