"""Geometry module for shape primitives.

This module provides the renderable primitives and their intersection
routines:

Components:
    sphere: Sphere primitive with geometric ray-sphere intersection
    plane: Infinite plane with planar texture projection
    element: The Element sum type and capability dispatch

Every primitive supports the same capability set:
    distance = intersect(element, ray)
    normal = surface_normal(element, hit_point)
    uv = texture_coordinates(element, hit_point)
"""

from .element import (
    Element,
    element_material,
    intersect,
    surface_normal,
    texture_coordinates,
)
from .plane import (
    PARALLEL_EPSILON,
    Plane,
    hit_plane,
    make_plane,
    plane_basis,
    plane_normal,
    plane_texture_coordinates,
)
from .sphere import (
    Sphere,
    hit_sphere,
    make_sphere,
    sphere_normal,
    sphere_texture_coordinates,
)

__all__ = [
    "Element",
    "intersect",
    "surface_normal",
    "texture_coordinates",
    "element_material",
    "Sphere",
    "hit_sphere",
    "make_sphere",
    "sphere_normal",
    "sphere_texture_coordinates",
    "Plane",
    "hit_plane",
    "make_plane",
    "plane_basis",
    "plane_normal",
    "plane_texture_coordinates",
    "PARALLEL_EPSILON",
]
