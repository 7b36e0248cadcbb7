"""Pytest configuration for prism tests.

This module provides shared fixtures for all test modules: small scenes
built from plain value types, a seeded random generator and a texture file
written to a temporary directory.
"""

import numpy as np
import pytest
from PIL import Image as PILImage


@pytest.fixture
def green_material():
    """Diffuse material with a solid green-ish color."""
    from prism.core.color import Color
    from prism.materials.colorization import SolidColor
    from prism.materials.surface import Diffuse, Material

    return Material(color=SolidColor(Color(0.4, 1.0, 0.4)), albedo=0.18, surface=Diffuse())


@pytest.fixture
def sun():
    """Directional light shining straight down -z (toward the scene)."""
    from prism.core.color import Color
    from prism.core.vector import Vector3
    from prism.scene.lights import make_directional_light

    return make_directional_light(Vector3(0.0, 0.0, -1.0), Color(1.0, 1.0, 1.0), 20.0)


@pytest.fixture
def single_sphere_scene(green_material, sun):
    """800x600 scene with one unit sphere five units in front of the camera."""
    from prism.core.vector import Point
    from prism.geometry.sphere import make_sphere
    from prism.scene.scene import Scene

    sphere = make_sphere(Point(0.0, 0.0, -5.0), 1.0, green_material)
    return Scene(width=800, height=600, fov=90.0, elements=[sphere], lights=[sun])


@pytest.fixture
def small_scene(green_material, sun):
    """Tiny 16x12 version of the single sphere scene for full renders."""
    from prism.core.vector import Point
    from prism.geometry.sphere import make_sphere
    from prism.scene.scene import Scene

    sphere = make_sphere(Point(0.0, 0.0, -5.0), 2.0, green_material)
    return Scene(width=16, height=12, fov=90.0, elements=[sphere], lights=[sun])


@pytest.fixture
def rng():
    """Seeded numpy generator for reproducible jitter."""
    return np.random.default_rng(1234)


@pytest.fixture
def texture_file(tmp_path):
    """A 2x2 RGB PNG: red, green / blue, white."""
    pixels = np.array(
        [
            [[255, 0, 0], [0, 255, 0]],
            [[0, 0, 255], [255, 255, 255]],
        ],
        dtype=np.uint8,
    )
    path = tmp_path / "checker.png"
    PILImage.fromarray(pixels).save(path)
    return path


@pytest.fixture
def read_png():
    """Read an image file back as an (H, W, 3) uint8 raster."""

    def _read(path):
        with PILImage.open(path) as image:
            return np.asarray(image.convert("RGB"), dtype=np.uint8)

    return _read
