"""Surface types and the Material record attached to every element.

Three surface behaviours are supported:

- Diffuse: ideal Lambertian reflection of direct light, f_r = albedo / pi.
- Reflective: a blend of diffuse shading and a mirror reflection, weighted
  by ``reflectivity`` in [0, 1].
- Refractive: a dielectric (glass, water) with index of refraction ``index``.
  Reflection and transmission are blended by the Fresnel reflectance and the
  result is scaled by ``transparency`` and the surface color.

Common indices of refraction:
    Air: 1.0, Water: 1.33, Glass: 1.5, Diamond: 2.4

Example:
    >>> from prism.core.color import Color
    >>> from prism.materials.colorization import SolidColor
    >>> from prism.materials.surface import Material, Reflective
    >>> mirror = Material(SolidColor(Color(1.0, 1.0, 1.0)), 0.18, Reflective(0.9))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from prism.materials.colorization import Colorization

# Default diffuse reflectance (18% gray card)
DEFAULT_ALBEDO = 0.18


@dataclass(frozen=True, slots=True)
class Diffuse:
    """Pure Lambertian surface."""


@dataclass(frozen=True, slots=True)
class Reflective:
    """Partially mirrored surface.

    Attributes:
        reflectivity: Fraction of the final color taken from the mirror
            reflection, in [0, 1].
    """

    reflectivity: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.reflectivity <= 1.0:
            raise ValueError(f"Reflectivity = {self.reflectivity} is outside [0, 1]")


@dataclass(frozen=True, slots=True)
class Refractive:
    """Transparent dielectric surface.

    Attributes:
        index: Index of refraction of the interior medium.
        transparency: Scale applied to the blended reflection/refraction.
    """

    index: float
    transparency: float

    def __post_init__(self) -> None:
        if self.index <= 0.0:
            raise ValueError(f"Index of refraction = {self.index} must be positive")
        if self.transparency < 0.0:
            raise ValueError(f"Transparency = {self.transparency} must be non-negative")


SurfaceType = Union[Diffuse, Reflective, Refractive]


@dataclass(frozen=True)
class Material:
    """Shading parameters owned by a single element.

    Attributes:
        color: Solid color or texture sampled at the hit's texture coordinates.
        albedo: Diffuse reflectance coefficient.
        surface: Which shading path the element takes.
    """

    color: Colorization
    albedo: float = DEFAULT_ALBEDO
    surface: SurfaceType = field(default_factory=Diffuse)

    def __post_init__(self) -> None:
        if self.albedo < 0.0:
            raise ValueError(f"Albedo = {self.albedo} must be non-negative")
