"""Light sources.

Two kinds of light are supported:

- DirectionalLight: parallel rays from infinitely far away (sunlight).
  Constant intensity and infinite distance, so any occluder along the
  shadow ray blocks it.
- SphericalLight: a point light. Intensity falls off with the inverse
  square of the distance, spread over a sphere: intensity / (4 pi r^2).

Like elements, lights are a closed set of variants dispatched by the free
functions direction_from(), light_distance() and light_intensity().
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from prism.core.color import Color
from prism.core.vector import Point, Vector3


@dataclass(frozen=True, slots=True)
class DirectionalLight:
    """Light arriving along a single direction.

    Attributes:
        direction: Unit direction the light travels in (from the light
            toward the scene).
        color: Linear light color.
        intensity: Irradiance scale.
    """

    direction: Vector3
    color: Color
    intensity: float


@dataclass(frozen=True, slots=True)
class SphericalLight:
    """Point light radiating uniformly in all directions.

    Attributes:
        position: Location of the light.
        color: Linear light color.
        intensity: Total emitted power before inverse-square falloff.
    """

    position: Point
    color: Color
    intensity: float


Light = Union[DirectionalLight, SphericalLight]


def _unknown(light: object) -> TypeError:
    return TypeError(f"Unsupported light type: {type(light).__name__}")


def direction_from(light: Light, hit_point: Point) -> Vector3:
    """Unit direction from the light toward the hit point."""
    if isinstance(light, DirectionalLight):
        return light.direction
    if isinstance(light, SphericalLight):
        return (hit_point - light.position).normalize()
    raise _unknown(light)


def light_distance(light: Light, hit_point: Point) -> float:
    """Distance from the hit point to the light (infinite for directional)."""
    if isinstance(light, DirectionalLight):
        return math.inf
    if isinstance(light, SphericalLight):
        return (light.position - hit_point).length()
    raise _unknown(light)


def light_intensity(light: Light, hit_point: Point) -> float:
    """Light intensity arriving at the hit point."""
    if isinstance(light, DirectionalLight):
        return light.intensity
    if isinstance(light, SphericalLight):
        r2 = (light.position - hit_point).length_squared()
        return light.intensity / (4.0 * math.pi * r2)
    raise _unknown(light)


def make_directional_light(direction: Vector3, color: Color, intensity: float) -> DirectionalLight:
    """Create a directional light, normalizing its direction.

    Raises:
        DegenerateGeometryError: If the direction has zero length.
        ValueError: If the intensity is negative.
    """
    if intensity < 0.0:
        raise ValueError(f"Light intensity = {intensity} must be non-negative")
    return DirectionalLight(direction=direction.normalize(), color=color, intensity=float(intensity))


def make_spherical_light(position: Point, color: Color, intensity: float) -> SphericalLight:
    """Create a point light.

    Raises:
        ValueError: If the intensity is negative.
    """
    if intensity < 0.0:
        raise ValueError(f"Light intensity = {intensity} must be non-negative")
    return SphericalLight(position=position, color=color, intensity=float(intensity))
