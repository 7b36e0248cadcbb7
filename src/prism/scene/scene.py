"""The Scene value consumed by the renderer.

A Scene bundles the image dimensions, camera parameters, elements, lights and
the two shading limits (shadow bias and maximum recursion depth). It is
frozen: it is built once before rendering and only read afterwards, which is
what lets pixel rows be rendered in parallel without locks.

Example:
    >>> from prism.scene.scene import Scene
    >>> scene = Scene(
    ...     width=800,
    ...     height=600,
    ...     fov=90.0,
    ...     elements=[sphere, floor],
    ...     lights=[sun],
    ...     shadow_bias=1e-13,
    ...     max_recursion=10,
    ... )
    >>> scene.element_count
    2
"""

from __future__ import annotations

from dataclasses import dataclass, field

from prism.core.ray import Ray
from prism.core.vector import Point, Vector3
from prism.geometry.element import Element
from prism.scene.intersection import Intersection, trace
from prism.scene.lights import Light

DEFAULT_FOV = 90.0
DEFAULT_SHADOW_BIAS = 1e-13
DEFAULT_MAX_RECURSION = 10


@dataclass(frozen=True)
class Scene:
    """Everything the renderer needs to produce an image.

    Attributes:
        width: Image width in pixels. Must exceed height (landscape camera).
        height: Image height in pixels.
        fov: Horizontal-scaled field of view in degrees.
        elements: Renderable primitives, in scan order.
        lights: Light sources, in accumulation order.
        shadow_bias: Offset along the normal applied to secondary ray origins.
        max_recursion: Maximum ray depth; rays at this depth return black.
        origin: Camera position.
        direction: Offset added to every primary ray direction before
            normalization (zero looks down -z).
    """

    width: int
    height: int
    fov: float = DEFAULT_FOV
    elements: tuple[Element, ...] = ()
    lights: tuple[Light, ...] = ()
    shadow_bias: float = DEFAULT_SHADOW_BIAS
    max_recursion: int = DEFAULT_MAX_RECURSION
    origin: Point = field(default_factory=Point.zero)
    direction: Vector3 = field(default_factory=Vector3.zero)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image dimensions ({self.width}x{self.height}) must be positive")
        if self.max_recursion < 0:
            raise ValueError(f"max_recursion = {self.max_recursion} must be non-negative")
        if self.shadow_bias < 0.0:
            raise ValueError(f"shadow_bias = {self.shadow_bias} must be non-negative")
        # Accept any sequence but store tuples so the scene stays immutable
        object.__setattr__(self, "elements", tuple(self.elements))
        object.__setattr__(self, "lights", tuple(self.lights))

    @property
    def element_count(self) -> int:
        return len(self.elements)

    @property
    def light_count(self) -> int:
        return len(self.lights)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def trace(self, ray: Ray) -> Intersection | None:
        """Find the nearest element hit by the ray."""
        return trace(self, ray)

    def element(self, intersection: Intersection) -> Element:
        """Resolve the element recorded in an intersection."""
        return self.elements[intersection.element_index]
