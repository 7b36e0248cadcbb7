"""Materials module: surface colorization and shading behaviour.

Components:
    colorization: Solid colors and wrapped texture lookups
    surface: Diffuse, reflective and refractive surface types, and Material

Each element in a scene owns exactly one Material. The shading engine
dispatches on Material.surface to pick the diffuse, mirror or dielectric path
and samples Material.color at the hit's texture coordinates.
"""

from .colorization import (
    PLACEHOLDER_TEXEL,
    Colorization,
    SolidColor,
    Texture,
    TextureCoordinates,
    load_texture,
    placeholder_texture,
    wrap,
)
from .surface import (
    DEFAULT_ALBEDO,
    Diffuse,
    Material,
    Reflective,
    Refractive,
    SurfaceType,
)

__all__ = [
    # Colorization
    "Colorization",
    "SolidColor",
    "Texture",
    "TextureCoordinates",
    "load_texture",
    "placeholder_texture",
    "wrap",
    "PLACEHOLDER_TEXEL",
    # Surface
    "Material",
    "SurfaceType",
    "Diffuse",
    "Reflective",
    "Refractive",
    "DEFAULT_ALBEDO",
]
