"""Infinite plane primitive.

A plane is defined by a point on it and a unit normal. The normal points
away from the side the camera sees; a ray hits the plane only when its
direction has a positive component along the normal, and the shading normal
reported for the plane is the negated normal.

Texture coordinates are a planar projection onto two in-plane axes built
from the normal. They are expressed in scene units and are not wrapped, so a
texture repeats every unit along each axis.

Example:
    >>> from prism.geometry.plane import make_plane, hit_plane
    >>> from prism.core.ray import Ray
    >>> from prism.core.vector import Point, Vector3
    >>> floor = make_plane(Point(0.0, -2.0, 0.0), Vector3(0.0, -1.0, 0.0), material)
    >>> hit_plane(Ray(Point.zero(), Vector3(0.0, -1.0, 0.0)), floor)
    2.0
"""

from __future__ import annotations

from dataclasses import dataclass

from prism.core.ray import Ray
from prism.core.vector import Point, Vector3
from prism.materials.colorization import TextureCoordinates
from prism.materials.surface import Material

# Rays with normal . direction at or below this are treated as parallel
PARALLEL_EPSILON = 1e-6

_Z_AXIS = Vector3(0.0, 0.0, 1.0)
_Y_AXIS = Vector3(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Plane:
    """An infinite plane.

    Attributes:
        origin: Any point on the plane; texture coordinates are measured
            from here.
        normal: Unit normal, pointing away from the visible side.
        material: The material owned by this plane.
    """

    origin: Point
    normal: Vector3
    material: Material


def hit_plane(ray: Ray, plane: Plane) -> float | None:
    """Test for ray-plane intersection.

    Args:
        ray: The ray to test.
        plane: The plane to test against.

    Returns:
        The non-negative distance to the plane, or None if the ray is
        parallel to it, faces away from it, or the plane is behind the ray.
    """
    denom = plane.normal.dot(ray.direction)
    if denom <= PARALLEL_EPSILON:
        return None

    v = plane.origin - ray.origin
    distance = v.dot(plane.normal) / denom
    if distance >= 0.0:
        return distance
    return None


def plane_normal(plane: Plane, hit_point: Point) -> Vector3:
    """Shading normal of the plane, facing the camera side."""
    return -plane.normal


def plane_basis(plane: Plane) -> tuple[Vector3, Vector3]:
    """Build the two in-plane axes used for texture projection.

    The first axis is normal x (0, 0, 1). When the normal is parallel to z
    that product vanishes and normal x (0, 1, 0) is used instead; a normal
    parallel to z is never parallel to y, so the fallback always succeeds.
    The second axis is normal x first.
    """
    x_axis = plane.normal.cross(_Z_AXIS)
    if x_axis.is_zero():
        x_axis = plane.normal.cross(_Y_AXIS)
    y_axis = plane.normal.cross(x_axis)
    return x_axis, y_axis


def plane_texture_coordinates(plane: Plane, hit_point: Point) -> TextureCoordinates:
    """Planar projection of the hit point onto the in-plane axes."""
    x_axis, y_axis = plane_basis(plane)
    hit_vec = hit_point - plane.origin
    return TextureCoordinates(x=hit_vec.dot(x_axis), y=hit_vec.dot(y_axis))


def make_plane(origin: Point, normal: Vector3, material: Material) -> Plane:
    """Create a plane, normalizing its normal.

    Raises:
        DegenerateGeometryError: If the normal has zero length.
    """
    return Plane(origin=origin, normal=normal.normalize(), material=material)
