"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Vector3 and Point value types
    color: Linear RGB color and gamma encoding
    ray: Ray data structure, reflection/transmission rays and Fresnel
    integrator: Recursive Whitted-style shading (cast_ray)
    renderer: Per-pixel sampling loop and the row-parallel driver
    progressive: Sample accumulation across repeated passes

Everything here is plain Python over immutable values, so any number of
worker processes can shade against the same scene.
"""

from .color import BLACK, GAMMA, WHITE, Color, encode_image, gamma_decode, gamma_encode
from .ray import (
    Ray,
    create_reflection,
    create_transmission,
    fresnel,
    ray_at,
    reflect,
)
from .vector import Point, Vector3

# Note: integrator, renderer and progressive are NOT imported here to avoid
# circular imports (they depend on prism.scene, which depends on this package).
# Import directly from prism.core.renderer or prism.core.progressive when needed.

__all__ = [
    "Vector3",
    "Point",
    "Color",
    "BLACK",
    "WHITE",
    "GAMMA",
    "gamma_encode",
    "gamma_decode",
    "encode_image",
    "Ray",
    "ray_at",
    "reflect",
    "create_reflection",
    "create_transmission",
    "fresnel",
]
