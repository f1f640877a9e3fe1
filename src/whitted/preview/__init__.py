"""Preview module for the render target and image output.

Components:
    canvas: Pixel storage, Taichi quantization kernel and PPM text
    export: PPM and PNG writers
    display: Matplotlib-based static preview

Example:
    >>> from whitted.preview import save_png, show_preview, write_ppm
    >>> canvas = camera.render(world)
    >>> write_ppm(canvas)  # PPM to stdout
    >>> save_png(canvas, "output.png")
    >>> show_preview(canvas)
"""

from whitted.preview.canvas import Canvas
from whitted.preview.display import apply_gamma, show_preview
from whitted.preview.export import image_to_uint8, save_png, write_ppm

__all__ = [
    "Canvas",
    # Display functions
    "show_preview",
    "apply_gamma",
    # Export functions
    "write_ppm",
    "save_png",
    "image_to_uint8",
]
