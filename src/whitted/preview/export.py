"""Image export utilities for rendered canvases.

Supported formats:
    - PPM (plain P3 text, bit-exact)
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from whitted.preview.export import save_png, write_ppm
    >>> canvas = camera.render(world)
    >>> write_ppm(canvas, "output.ppm")
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, TextIO

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from whitted.preview.display import apply_gamma

if TYPE_CHECKING:
    from whitted.preview.canvas import Canvas

logger = logging.getLogger(__name__)


def write_ppm(canvas: Canvas, target: str | os.PathLike[str] | TextIO | None = None) -> None:
    """Write a canvas as PPM text.

    Args:
        canvas: The canvas to write.
        target: A file path, an open text stream, or None for stdout.
    """
    text = canvas.to_ppm()
    if target is None:
        sys.stdout.write(text)
    elif hasattr(target, "write"):
        target.write(text)
    else:
        with open(target, "w", encoding="ascii", newline="\n") as f:
            f.write(text)
        logger.info("Wrote %s", os.fspath(target))


def image_to_uint8(canvas: Canvas, *, gamma: float = 1.0) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit (H, W, 3) array.

    With gamma 1.0 this is exactly the PPM quantization.
    """
    if gamma == 1.0:
        return canvas.to_bytes()
    processed = apply_gamma(canvas.to_numpy(), gamma)
    return np.floor(processed * 255.0 + 0.5).astype(np.uint8)


def save_png(canvas: Canvas, filepath: str | os.PathLike[str], *, gamma: float = 1.0) -> None:
    """Save a canvas as an 8-bit RGB PNG.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).
        gamma: Gamma encoding applied before quantization.
    """
    pil_image = PILImage.fromarray(image_to_uint8(canvas, gamma=gamma))
    pil_image.save(filepath)
    logger.info("Wrote %s", os.fspath(filepath))
