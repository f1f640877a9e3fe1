"""Canvas: the render target and its PPM serialization.

Pixels are stored as linear float64 RGB in a numpy array of shape
(height, width, 3), zero-initialized (black). Colors outside [0, 1] are
kept as-is and only clamped when quantized for output.

Quantization to 8 bits runs as a Taichi kernel over the whole array:

    byte = floor(clamp(c * 255, 0, 255) + 0.5)

i.e. round-half-up after clamping.

PPM output is plain-text P3: a three-line header, then the pixel values
row by row. Each image row starts a new line, and long rows wrap before
any line would exceed 70 characters, never inside a number.

Example:
    >>> from whitted.core.tuples import color
    >>> from whitted.preview.canvas import Canvas
    >>> canvas = Canvas(5, 3)
    >>> canvas.write_pixel(0, 0, color(1.5, 0, 0))
    >>> canvas.to_ppm().splitlines()[3]
    '255 0 0 0 0 0 0 0 0 0 0 0 0 0 0'
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from whitted.core.runtime import ensure_runtime
from whitted.core.tuples import Tuple, color

# Longest line allowed in PPM output
PPM_LINE_LIMIT = 70
PPM_MAX_VALUE = 255


# =============================================================================
# Taichi Kernels
# =============================================================================


@ti.kernel
def _quantize(
    src: ti.types.ndarray(dtype=ti.f64, ndim=3),
    dst: ti.types.ndarray(dtype=ti.i32, ndim=3),
):
    """Clamp and round every channel of src into [0, 255]."""
    for i, j, k in ti.ndrange(src.shape[0], src.shape[1], src.shape[2]):
        scaled = ti.min(ti.max(src[i, j, k] * 255.0, 0.0), 255.0)
        dst[i, j, k] = ti.cast(ti.floor(scaled + 0.5), ti.i32)


class Canvas:
    """A width x height grid of colors.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, x: int, y: int, c: Tuple) -> None:
        """Set a pixel. Writes outside the canvas are ignored."""
        if not self._in_bounds(x, y):
            return
        self._pixels[y, x] = (c.x, c.y, c.z)

    def pixel_at(self, x: int, y: int) -> Tuple:
        """Color of a pixel.

        Raises:
            IndexError: If (x, y) is outside the canvas.
        """
        if not self._in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        r, g, b = self._pixels[y, x]
        return color(float(r), float(g), float(b))

    def fill(self, c: Tuple) -> None:
        self._pixels[:, :] = (c.x, c.y, c.z)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Copy of the linear pixel data, shape (height, width, 3)."""
        return self._pixels.copy()

    def to_bytes(self) -> npt.NDArray[np.uint8]:
        """Quantize to 8-bit channels, shape (height, width, 3)."""
        ensure_runtime()
        src = np.ascontiguousarray(self._pixels, dtype=np.float64)
        dst = np.zeros(src.shape, dtype=np.int32)
        _quantize(src, dst)
        return dst.astype(np.uint8)

    def to_ppm(self) -> str:
        """Serialize as plain PPM (P3) text, ending in a newline."""
        lines = ["P3", f"{self.width} {self.height}", str(PPM_MAX_VALUE)]
        quantized = self.to_bytes()

        for row in quantized:
            line = ""
            for value in row.reshape(-1):
                token = str(int(value))
                if not line:
                    line = token
                elif len(line) + 1 + len(token) > PPM_LINE_LIMIT:
                    lines.append(line)
                    line = token
                else:
                    line = f"{line} {token}"
            lines.append(line)

        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"
