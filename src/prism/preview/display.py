"""Matplotlib-based preview display for rendered images.

The renderer already clamps and gamma encodes its output, so the preview
shows the 8-bit raster exactly as it would be written to disk. Matplotlib is
imported lazily so that rendering and export never require a display
backend.

Example:
    >>> from prism.core.renderer import render
    >>> from prism.preview.display import show_preview
    >>>
    >>> show_preview(render(scene, samples_per_pixel=4, seed=0))
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def show_preview(
    image: npt.NDArray[np.uint8],
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display an encoded raster as a Matplotlib figure.

    Args:
        image: uint8 array of shape (H, W, 3), as returned by render().
        title: Custom title (default shows the image size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.

    Raises:
        ValueError: If the raster is not (H, W, 3) uint8.
    """
    import matplotlib.pyplot as plt

    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] != 3 or image.dtype != np.uint8:
        raise ValueError(f"Expected an (H, W, 3) uint8 raster, got {image.dtype} {image.shape}")

    if title is None:
        title = f"Render Preview - {image.shape[1]}x{image.shape[0]}"

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(image)
    ax.axis("off")
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
