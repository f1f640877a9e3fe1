"""Camera module for ray generation and rendering.

Components:
    camera: Pinhole camera with row-by-row render loop
"""

from .camera import Camera, ProgressCallback

__all__ = [
    "Camera",
    "ProgressCallback",
]
