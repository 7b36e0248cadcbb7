"""Sphere primitive with geometric ray-sphere intersection.

The intersection uses the classic geometric construction rather than the
quadratic formula:

    L     = center - ray.origin
    hypo  = L . dir              (projection of L onto the ray)
    dist2 = L . L - hypo^2       (squared distance from center to the ray)

If dist2 > radius^2 the ray misses. Otherwise the half chord is
thc = sqrt(radius^2 - dist2) and the roots are hypo - thc and hypo + thc.
Negative roots lie behind the ray origin and are discarded; a ray starting
inside the sphere therefore returns the far root.

Example:
    >>> from prism.geometry.sphere import make_sphere, hit_sphere
    >>> from prism.core.ray import Ray
    >>> from prism.core.vector import Point, Vector3
    >>> sphere = make_sphere(Point(0.0, 0.0, -5.0), 1.0, material)
    >>> hit_sphere(Ray(Point.zero(), Vector3(0.0, 0.0, -1.0)), sphere)
    4.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from prism.core.ray import Ray
from prism.core.vector import Point, Vector3
from prism.materials.colorization import TextureCoordinates
from prism.materials.surface import Material


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
        material: The material owned by this sphere.
    """

    center: Point
    radius: float
    material: Material


def hit_sphere(ray: Ray, sphere: Sphere) -> float | None:
    """Test for ray-sphere intersection.

    Args:
        ray: The ray to test. Its direction should be unit length so the
            returned value is a distance.
        sphere: The sphere to test against.

    Returns:
        The distance to the nearest non-negative intersection, or None if
        the sphere is missed or lies entirely behind the ray origin.
    """
    l = sphere.center - ray.origin
    hypo = l.dot(ray.direction)
    dist2 = l.dot(l) - hypo * hypo

    radius2 = sphere.radius * sphere.radius
    if dist2 > radius2:
        return None

    thc = math.sqrt(radius2 - dist2)
    t0 = hypo - thc
    t1 = hypo + thc

    if t0 < 0.0 and t1 < 0.0:
        return None
    if t0 < 0.0:
        return t1
    if t1 < 0.0:
        return t0
    return min(t0, t1)


def sphere_normal(sphere: Sphere, hit_point: Point) -> Vector3:
    """Outward unit normal at a point on the sphere."""
    return (hit_point - sphere.center).normalize()


def sphere_texture_coordinates(sphere: Sphere, hit_point: Point) -> TextureCoordinates:
    """Spherical UV mapping, normalized to [0, 1] x [0, 1].

    u follows the longitude around the y axis and v the polar angle from +y.
    """
    hit_vec = hit_point - sphere.center
    # Rounding can push |dy| slightly past the radius
    cos_polar = max(-1.0, min(1.0, hit_vec.y / sphere.radius))
    return TextureCoordinates(
        x=(1.0 + math.atan2(hit_vec.z, hit_vec.x) / math.pi) * 0.5,
        y=math.acos(cos_polar) / math.pi,
    )


def make_sphere(center: Point, radius: float, material: Material) -> Sphere:
    """Create a sphere after validating its radius.

    Raises:
        ValueError: If the radius is not a positive finite number.
    """
    if not (radius > 0.0 and math.isfinite(radius)):
        raise ValueError(f"Sphere radius = {radius} must be positive and finite")
    return Sphere(center=center, radius=float(radius), material=material)
