"""Camera module for primary ray generation.

Components:
    pinhole: Landscape pinhole camera looking down -z

Camera responsibilities:
    - Map a pixel (plus optional sub-pixel jitter) to a world-space ray
    - Scale the image plane by the field of view and aspect ratio
    - Reject scenes that do not fit the landscape camera model

Ray generation is a pure function of the scene and the pixel, so any number
of workers can generate rays concurrently.
"""

from .pinhole import (
    PIXEL_CENTER,
    check_camera_model,
    create_prime,
    fov_adjustment,
)

__all__ = [
    "create_prime",
    "check_camera_model",
    "fov_adjustment",
    "PIXEL_CENTER",
]
