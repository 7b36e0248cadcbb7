"""Vector and point value types.

Vector3 is a free vector and Point a position. Both are immutable, so they
can be shared freely between pixel computations and pickled into worker
processes.

The arithmetic follows the usual affine rules:
    Point - Point  -> Vector3
    Point + Vector3 -> Point
    Point - Vector3 -> Point

Example:
    >>> from prism.core.vector import Point, Vector3
    >>> p = Point(0.0, 0.0, 0.0) + Vector3(0.0, 0.0, -5.0)
    >>> (p - Point(0.0, 0.0, 0.0)).length()
    5.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from prism.errors import DegenerateGeometryError


@dataclass(frozen=True, slots=True)
class Vector3:
    """A free 3D vector with double precision components."""

    x: float
    y: float
    z: float

    @staticmethod
    def zero() -> Vector3:
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def from_sequence(values) -> Vector3:
        """Build a vector from any 3-item sequence (list, tuple, ndarray)."""
        x, y, z = values
        return Vector3(float(x), float(y), float(z))

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vector3:
        """Return a unit vector pointing in the same direction.

        Raises:
            DegenerateGeometryError: If the vector has zero length.
        """
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise DegenerateGeometryError(f"Cannot normalize vector of length {length}: {self}")
        factor = 1.0 / length
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        # Vector * Vector is the component-wise product
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)


@dataclass(frozen=True, slots=True)
class Point:
    """A position in world space."""

    x: float
    y: float
    z: float

    @staticmethod
    def zero() -> Point:
        return Point(0.0, 0.0, 0.0)

    @staticmethod
    def from_sequence(values) -> Point:
        """Build a point from any 3-item sequence (list, tuple, ndarray)."""
        x, y, z = values
        return Point(float(x), float(y), float(z))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __sub__(self, other: Point | Vector3) -> Vector3 | Point:
        if isinstance(other, Point):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __add__(self, other: Vector3) -> Point:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)
