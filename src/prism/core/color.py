"""Linear-space RGB color and gamma conversion.

Colors are kept in linear light space during shading. Arithmetic never
clamps; clamping is an explicit step applied once per terminal shading result
and again before encoding to the displayable 8-bit representation.

The display encoding is a plain power-law gamma:
    encoded = clamp(linear) ** (1 / GAMMA)
    linear = encoded ** GAMMA
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Display gamma for 8-bit encoding (sRGB approximation)
GAMMA = 2.2


def gamma_encode(linear: float) -> float:
    """Convert a linear channel value in [0, 1] to gamma space."""
    return linear ** (1.0 / GAMMA)


def gamma_decode(encoded: float) -> float:
    """Convert a gamma-space channel value in [0, 1] to linear space."""
    return encoded**GAMMA


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB triple in linear light space.

    Attributes:
        red: Red channel. Unconstrained during arithmetic.
        green: Green channel. Unconstrained during arithmetic.
        blue: Blue channel. Unconstrained during arithmetic.
    """

    red: float
    green: float
    blue: float

    @staticmethod
    def black() -> Color:
        return BLACK

    @staticmethod
    def from_sequence(values) -> Color:
        r, g, b = values
        return Color(float(r), float(g), float(b))

    @staticmethod
    def from_rgb8(red: int, green: int, blue: int) -> Color:
        """Decode an 8-bit gamma-encoded pixel to linear space."""
        return Color(
            gamma_decode(red / 255.0),
            gamma_decode(green / 255.0),
            gamma_decode(blue / 255.0),
        )

    def clamp(self) -> Color:
        """Return a copy with every channel clamped to [0, 1]."""
        return Color(_clamp01(self.red), _clamp01(self.green), _clamp01(self.blue))

    def to_rgb8(self) -> tuple[int, int, int]:
        """Clamp, gamma encode and scale to 8-bit channels."""
        clamped = self.clamp()
        return (
            int(gamma_encode(clamped.red) * 255.0),
            int(gamma_encode(clamped.green) * 255.0),
            int(gamma_encode(clamped.blue) * 255.0),
        )

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Color:
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __truediv__(self, other: float) -> Color:
        if isinstance(other, (int, float)):
            return Color(self.red / other, self.green / other, self.blue / other)
        return NotImplemented


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)


def encode_image(linear: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Encode a linear float raster to 8-bit display values.

    Vectorized counterpart of Color.to_rgb8: clamp to [0, 1], gamma encode,
    scale to 255 and truncate.

    Args:
        linear: Array of shape (..., 3) in linear light space.

    Returns:
        uint8 array of the same shape.
    """
    clamped = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    encoded = np.power(clamped, 1.0 / GAMMA)
    return (encoded * 255.0).astype(np.uint8)
