"""Dispatch over the closed set of renderable elements.

An Element is either a Sphere or a Plane. Every primitive provides the same
three capabilities, exposed here as free functions:

    intersect(element, ray)              -> distance or None
    surface_normal(element, point)       -> Vector3
    texture_coordinates(element, point)  -> TextureCoordinates

Adding a primitive means adding a variant to Element and a case to each of
these functions.
"""

from __future__ import annotations

from typing import Union

from prism.core.ray import Ray
from prism.core.vector import Point, Vector3
from prism.materials.colorization import TextureCoordinates
from prism.materials.surface import Material

from .plane import Plane, hit_plane, plane_normal, plane_texture_coordinates
from .sphere import Sphere, hit_sphere, sphere_normal, sphere_texture_coordinates

Element = Union[Sphere, Plane]


def _unknown(element: object) -> TypeError:
    return TypeError(f"Unsupported element type: {type(element).__name__}")


def intersect(element: Element, ray: Ray) -> float | None:
    """Distance along the ray to the element, or None on a miss."""
    if isinstance(element, Sphere):
        return hit_sphere(ray, element)
    if isinstance(element, Plane):
        return hit_plane(ray, element)
    raise _unknown(element)


def surface_normal(element: Element, hit_point: Point) -> Vector3:
    """Unit shading normal of the element at a hit point."""
    if isinstance(element, Sphere):
        return sphere_normal(element, hit_point)
    if isinstance(element, Plane):
        return plane_normal(element, hit_point)
    raise _unknown(element)


def texture_coordinates(element: Element, hit_point: Point) -> TextureCoordinates:
    """Texture coordinates of a hit point on the element."""
    if isinstance(element, Sphere):
        return sphere_texture_coordinates(element, hit_point)
    if isinstance(element, Plane):
        return plane_texture_coordinates(element, hit_point)
    raise _unknown(element)


def element_material(element: Element) -> Material:
    return element.material
