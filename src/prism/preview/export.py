"""Image export for rendered images.

Rasters are row-major with the top row first, matching the pixel order of
the renderer, so they can be handed to Pillow unchanged.

Example:
    >>> from prism.core.renderer import render
    >>> from prism.preview.export import save_png
    >>>
    >>> image = render(scene, samples_per_pixel=4, seed=0)
    >>> save_png(image, "output.png")
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

logger = logging.getLogger(__name__)


def save_png(image: npt.NDArray[np.uint8], filepath: str | Path) -> None:
    """Save an 8-bit RGB raster (as returned by render()) as a PNG file.

    Args:
        image: uint8 array of shape (H, W, 3).
        filepath: Output file path (should end in .png).

    Raises:
        ValueError: If the raster is not (H, W, 3) uint8.
    """
    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) raster, got shape {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 raster, got {image.dtype}")

    pil_image = PILImage.fromarray(image)
    pil_image.save(filepath)
    logger.info("Saved %dx%d image to %s", image.shape[1], image.shape[0], filepath)
