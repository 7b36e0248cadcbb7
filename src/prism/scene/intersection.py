"""Scene-level nearest-hit queries.

The scene query is a linear scan: every element is intersected and the hit
with the smallest distance wins. Ties keep the element that appears first in
the scene's element sequence.

An Intersection stores the index of the hit element rather than the element
itself, so it stays valid only for the scene it was produced from.

Example:
    >>> from prism.scene.intersection import trace
    >>> hit = trace(scene, ray)
    >>> if hit is not None:
    ...     element = scene.elements[hit.element_index]
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from prism.core.ray import Ray
from prism.errors import DegenerateGeometryError
from prism.geometry.element import intersect

if TYPE_CHECKING:
    from prism.geometry.element import Element
    from prism.scene.scene import Scene


@dataclass(frozen=True, slots=True)
class Intersection:
    """Record of the nearest ray-scene intersection.

    Attributes:
        distance: Distance along the ray to the hit. Always finite and
            non-negative.
        element_index: Index of the hit element in Scene.elements.
    """

    distance: float
    element_index: int

    def __post_init__(self) -> None:
        if not math.isfinite(self.distance) or self.distance < 0.0:
            raise DegenerateGeometryError(
                f"Intersection must have a finite, non-negative distance, got {self.distance}"
            )


def intersect_elements(elements: tuple[Element, ...], ray: Ray) -> Intersection | None:
    """Return the nearest hit among the given elements.

    Args:
        elements: The elements to scan, in scene order.
        ray: The ray to trace.

    Returns:
        The closest Intersection, or None if nothing is hit.
    """
    closest: Intersection | None = None
    for index, element in enumerate(elements):
        distance = intersect(element, ray)
        if distance is None:
            continue
        hit = Intersection(distance=distance, element_index=index)
        if closest is None or hit.distance < closest.distance:
            closest = hit
    return closest


def trace(scene: Scene, ray: Ray) -> Intersection | None:
    """Find the nearest element hit by the ray in the scene."""
    return intersect_elements(scene.elements, ray)
