"""Pinhole camera model for primary ray generation.

The camera sits at the scene origin and looks down -z. The image plane is at
unit distance; its half-height is tan(fov / 2) and its half-width is that
value scaled by the aspect ratio. Pixel (0, 0) is the top-left corner.

For each pixel (x, y) and sub-pixel offset (jx, jy) in [0, 1):

    sensor_x = tan(fov/2) * aspect * (((x + jx) / width) * 2 - 1)
    sensor_y = tan(fov/2) * (1 - ((y + jy) / height) * 2)
    direction = normalize((sensor_x, sensor_y, -1) + scene.direction)

Without jitter the offset is (0.5, 0.5), the pixel center.

The model assumes a landscape image (width > height) and refuses anything
else.

Example:
    >>> from prism.camera.pinhole import create_prime
    >>> ray = create_prime(400, 300, scene)            # pixel center
    >>> ray = create_prime(400, 300, scene, (0.1, 0.9))  # jittered sample
"""

from __future__ import annotations

import math

from prism.core.ray import Ray
from prism.core.vector import Vector3
from prism.errors import CameraModelError
from prism.scene.scene import Scene

# Sub-pixel offset of the pixel center
PIXEL_CENTER = (0.5, 0.5)


def fov_adjustment(fov: float) -> float:
    """Half-height of the image plane at unit distance."""
    return math.tan(math.radians(fov) / 2.0)


def check_camera_model(scene: Scene) -> None:
    """Raise if the scene cannot be rendered by the landscape camera.

    Raises:
        CameraModelError: If width <= height.
    """
    if scene.width <= scene.height:
        raise CameraModelError(
            f"Camera requires a landscape image (width > height), got {scene.width}x{scene.height}"
        )


def create_prime(
    pixel_x: float,
    pixel_y: float,
    scene: Scene,
    jitter: tuple[float, float] | None = None,
) -> Ray:
    """Generate the primary ray through a pixel.

    Args:
        pixel_x: Pixel column (0 = left).
        pixel_y: Pixel row (0 = top).
        scene: The scene providing dimensions, fov and camera placement.
        jitter: Optional sub-pixel offset in [0, 1) x [0, 1). Defaults to
            the pixel center.

    Returns:
        A unit-direction ray from the camera origin.

    Raises:
        CameraModelError: If the scene is not landscape.
    """
    check_camera_model(scene)

    offset_x, offset_y = PIXEL_CENTER if jitter is None else jitter
    adjustment = fov_adjustment(scene.fov)
    aspect = scene.width / scene.height

    sensor_x = adjustment * (aspect * (((pixel_x + offset_x) / scene.width) * 2.0 - 1.0))
    sensor_y = adjustment * (1.0 - ((pixel_y + offset_y) / scene.height) * 2.0)

    direction = Vector3(sensor_x, sensor_y, -1.0) + scene.direction
    return Ray(origin=scene.origin, direction=direction.normalize())
