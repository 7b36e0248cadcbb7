"""Ray data structure and secondary ray construction.

This module provides the Ray value type together with the vector utilities
the shading engine needs to spawn secondary rays:

- reflect(): mirror an incident direction about a normal
- create_reflection(): reflection ray offset by the shadow bias
- create_transmission(): refracted ray via Snell's law
- fresnel(): dielectric Fresnel reflectance (average of s and p polarization)

Secondary ray origins are pushed off the surface by the scene's shadow bias
along the normal to avoid immediate self-intersection.

Example:
    >>> from prism.core.ray import Ray, ray_at
    >>> from prism.core.vector import Point, Vector3
    >>> ray = Ray(origin=Point(0.0, 0.0, 0.0), direction=Vector3(0.0, 0.0, -1.0))
    >>> ray_at(ray, 5.0)
    Point(x=0.0, y=0.0, z=-5.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from prism.core.vector import Point, Vector3


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Conventionally unit length;
            intersection distances are measured in units of this vector.
    """

    origin: Point
    direction: Vector3


def ray_at(ray: Ray, t: float) -> Point:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point ray.origin + t * ray.direction.
    """
    return ray.origin + ray.direction * t


def reflect(incident: Vector3, normal: Vector3) -> Vector3:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector.
    """
    return incident - normal * (2.0 * incident.dot(normal))


def create_reflection(normal: Vector3, incident: Vector3, hit_point: Point, bias: float) -> Ray:
    """Build the mirror reflection ray leaving a hit point.

    Args:
        normal: The surface normal at the hit point.
        incident: The direction of the ray that hit the surface.
        hit_point: The intersection point.
        bias: Offset along the normal applied to the origin.

    Returns:
        The reflected ray.
    """
    return Ray(origin=hit_point + normal * bias, direction=reflect(incident, normal))


def create_transmission(
    normal: Vector3,
    incident: Vector3,
    hit_point: Point,
    bias: float,
    index: float,
) -> Ray | None:
    """Build the refracted ray through a dielectric boundary.

    Whether the ray enters or exits the medium is decided by the sign of
    incident . normal. When exiting, the normal is flipped and the indices of
    refraction are swapped (1.0 outside, ``index`` inside).

    Args:
        normal: The outward surface normal at the hit point.
        incident: The direction of the incoming ray (normalized).
        hit_point: The intersection point.
        bias: Offset applied against the (possibly flipped) normal.
        index: Index of refraction of the medium.

    Returns:
        The transmitted ray, or None under total internal reflection.
    """
    ref_n = normal
    eta_t = float(index)
    eta_i = 1.0
    i_dot_n = incident.dot(normal)
    if i_dot_n < 0.0:
        # Outside the surface
        i_dot_n = -i_dot_n
    else:
        # Inside the surface; invert the normal and swap the indices
        ref_n = -normal
        eta_t = 1.0
        eta_i = float(index)

    eta = eta_i / eta_t
    k = 1.0 - (eta * eta) * (1.0 - i_dot_n * i_dot_n)
    if k < 0.0:
        return None

    direction = (incident + ref_n * i_dot_n) * eta - ref_n * math.sqrt(k)
    return Ray(origin=hit_point + ref_n * -bias, direction=direction)


def fresnel(incident: Vector3, normal: Vector3, index: float) -> float:
    """Compute the dielectric Fresnel reflectance.

    Uses the full Fresnel equations rather than Schlick's approximation,
    averaging the s- and p-polarized reflectances.

    Args:
        incident: The direction of the incoming ray (normalized).
        normal: The outward surface normal (normalized).
        index: Index of refraction of the medium (exterior is 1.0).

    Returns:
        The reflected fraction kr in [0, 1]. Total internal reflection
        returns exactly 1.0.
    """
    i_dot_n = incident.dot(normal)
    eta_i = 1.0
    eta_t = float(index)
    if i_dot_n > 0.0:
        eta_i = eta_t
        eta_t = 1.0

    sin_t = eta_i / eta_t * math.sqrt(max(1.0 - i_dot_n * i_dot_n, 0.0))
    if sin_t > 1.0:
        # Total internal reflection
        return 1.0

    cos_t = math.sqrt(max(1.0 - sin_t * sin_t, 0.0))
    cos_i = abs(i_dot_n)
    if cos_i == 0.0 and cos_t == 0.0:
        # Exactly grazing incidence on a matched boundary
        return 1.0
    r_s = ((eta_t * cos_i) - (eta_i * cos_t)) / ((eta_t * cos_i) + (eta_i * cos_t))
    r_p = ((eta_i * cos_i) - (eta_t * cos_t)) / ((eta_i * cos_i) + (eta_t * cos_t))
    return (r_s * r_s + r_p * r_p) / 2.0
