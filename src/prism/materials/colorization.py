"""Surface colorization: a constant color or a texture lookup.

A Colorization is one of two variants:

- SolidColor: returns the same linear color everywhere.
- Texture: samples an 8-bit image at texture coordinates. Coordinates are
  scaled by the image size and wrapped with a floor-mod, so textures tile in
  both directions (negative coordinates wrap forward). The texel is gamma
  decoded to linear space.

Textures hold a read-only numpy array and are safe to share across worker
processes. Loading from disk goes through Pillow; a missing or unreadable
file yields a 1x1 neutral placeholder instead of aborting the render.

Example:
    >>> from prism.materials.colorization import SolidColor, TextureCoordinates
    >>> from prism.core.color import Color
    >>> SolidColor(Color(0.4, 1.0, 0.4)).sample(TextureCoordinates(0.3, 0.7))
    Color(red=0.4, green=1.0, blue=0.4)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from prism.core.color import Color

logger = logging.getLogger(__name__)

# RGB value of the fallback texel (neutral mid gray, gamma encoded)
PLACEHOLDER_TEXEL = (128, 128, 128)


@dataclass(frozen=True, slots=True)
class TextureCoordinates:
    """2D surface parameterization of a hit point.

    Attributes:
        x: Horizontal coordinate (u).
        y: Vertical coordinate (v).
    """

    x: float
    y: float


def wrap(value: float, bound: int) -> int:
    """Map a texture coordinate to a texel index in [0, bound).

    Computes ((floor(value * bound) mod bound) + bound) mod bound.

    Args:
        value: Texture coordinate, any real number.
        bound: Texture size along this axis (must be positive).

    Returns:
        The wrapped texel index.
    """
    signed = math.floor(value * bound) % bound
    return (signed + bound) % bound


@dataclass(frozen=True, slots=True)
class SolidColor:
    """Constant colorization."""

    color: Color

    def sample(self, coords: TextureCoordinates) -> Color:
        return self.color


@dataclass(frozen=True, eq=False)
class Texture:
    """Image-backed colorization.

    Attributes:
        image: uint8 array of shape (height, width) or (height, width, C)
            with C in {1, 3, 4}. Channels are gamma encoded.
        path: Where the texture was loaded from, if anywhere.
    """

    image: npt.NDArray[np.uint8]
    path: Path | None = field(default=None)

    def __post_init__(self) -> None:
        image = np.asarray(self.image, dtype=np.uint8)
        if image.ndim == 2:
            image = image[:, :, np.newaxis]
        if image.ndim != 3 or image.shape[0] == 0 or image.shape[1] == 0:
            raise ValueError(f"Texture image must be a non-empty 2D raster, got shape {image.shape}")
        image = image.copy()
        image.setflags(write=False)
        object.__setattr__(self, "image", image)

    @property
    def width(self) -> int:
        return int(self.image.shape[1])

    @property
    def height(self) -> int:
        return int(self.image.shape[0])

    def sample(self, coords: TextureCoordinates) -> Color:
        """Look up the texel at the given coordinates in linear space."""
        tex_x = wrap(coords.x, self.width)
        tex_y = wrap(coords.y, self.height)
        texel = self.image[tex_y, tex_x]
        if texel.shape[0] < 3:
            gray = int(texel[0])
            return Color.from_rgb8(gray, gray, gray)
        return Color.from_rgb8(int(texel[0]), int(texel[1]), int(texel[2]))


Colorization = Union[SolidColor, Texture]


def placeholder_texture(path: Path | None = None) -> Texture:
    """Create the 1x1 neutral texture used when a texture fails to load.

    The requested path is kept so the scene still exports as it was written.
    """
    image = np.array([[PLACEHOLDER_TEXEL]], dtype=np.uint8)
    return Texture(image=image, path=path)


def load_texture(path: str | Path) -> Texture:
    """Load a texture image from disk.

    The image is converted to RGB. If the file is missing or cannot be
    decoded, a warning is logged and the placeholder texture is returned,
    still carrying the requested path.

    Args:
        path: Path to any image format Pillow can read.

    Returns:
        The loaded Texture, or the placeholder on failure.
    """
    path = Path(path)
    try:
        with PILImage.open(path) as pil_image:
            image = np.asarray(pil_image.convert("RGB"), dtype=np.uint8)
    except OSError as exc:
        logger.warning("Could not load texture %s (%s); using placeholder", path, exc)
        return placeholder_texture(path)
    logger.debug("Loaded texture %s (%dx%d)", path, image.shape[1], image.shape[0])
    return Texture(image=image, path=path)
