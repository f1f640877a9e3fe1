"""Matplotlib-based preview of a rendered canvas.

Example:
    >>> from whitted.preview.display import show_preview
    >>> canvas = camera.render(world)
    >>> show_preview(canvas, gamma=2.2)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from whitted.preview.canvas import Canvas


def apply_gamma(
    image: npt.NDArray[np.floating],
    gamma: float = 1.0,
) -> npt.NDArray[np.float64]:
    """Clamp to [0, 1] and apply gamma encoding (out = in^(1/gamma)).

    The ray tracer writes display-ready colors, so the default gamma of 1.0
    only clamps.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value; must be positive.

    Returns:
        Clamped, gamma-encoded float64 image in [0, 1].

    Raises:
        ValueError: If gamma is not positive.
    """
    if gamma <= 0.0:
        raise ValueError(f"gamma must be positive, got {gamma}")

    # Clamp first so negative values can't produce NaN
    result = np.clip(image.astype(np.float64), 0.0, 1.0)
    if gamma != 1.0:
        result = np.power(result, 1.0 / gamma)
    return result


def show_preview(
    canvas: Canvas,
    title: str | None = None,
    *,
    gamma: float = 1.0,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display a canvas as a Matplotlib figure.

    Args:
        canvas: The rendered canvas.
        title: Figure title (default shows the image size).
        gamma: Gamma applied before display.
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    display_image = apply_gamma(canvas.to_numpy(), gamma)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image, interpolation="nearest")
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render Preview - {canvas.width}x{canvas.height}")

    plt.tight_layout()
    plt.show(block=block)
