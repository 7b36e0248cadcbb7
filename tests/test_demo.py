"""Tests for the demo scene and end-to-end rendering of it.

Tests cover:
- Scene creation and element/light counts
- Sphere positions and materials (diffuse, reflective, refractive)
- Floor plane orientation and optional texture
- Full renders: valid range, no NaN, lit floor, PNG export
"""

from pathlib import Path

import numpy as np
import pytest


@pytest.fixture
def demo_scene():
    """A small demo scene suitable for full renders."""
    from prism.scene.demo import create_demo_scene

    return create_demo_scene(width=32, height=24)


class TestSceneCreation:
    """Tests for basic scene creation."""

    def test_default_dimensions(self):
        from prism.scene.demo import create_demo_scene

        scene = create_demo_scene()
        assert (scene.width, scene.height, scene.fov) == (800, 600, 90.0)

    def test_element_and_light_counts(self, demo_scene):
        assert demo_scene.element_count == 4
        assert demo_scene.light_count == 2

    def test_custom_limits(self):
        from prism.scene.demo import create_demo_scene

        scene = create_demo_scene(width=40, height=30, max_recursion=3, shadow_bias=1e-6)
        assert scene.max_recursion == 3
        assert scene.shadow_bias == 1e-6


class TestMaterials:
    """Each sphere exercises a different surface kind."""

    def test_sphere_surfaces(self, demo_scene):
        from prism.geometry.sphere import Sphere
        from prism.materials.surface import Diffuse, Reflective, Refractive
        from prism.scene.demo import GLASS_INDEX, GLASS_TRANSPARENCY, MIRROR_REFLECTIVITY

        spheres = [e for e in demo_scene.elements if isinstance(e, Sphere)]
        assert len(spheres) == 3

        center, mirror, glass = spheres
        assert isinstance(center.material.surface, Diffuse)
        assert mirror.material.surface == Reflective(MIRROR_REFLECTIVITY)
        assert glass.material.surface == Refractive(GLASS_INDEX, GLASS_TRANSPARENCY)

    def test_all_geometry_in_front_of_camera(self, demo_scene):
        from prism.geometry.sphere import Sphere

        for element in demo_scene.elements:
            if isinstance(element, Sphere):
                assert element.center.z + element.radius < 0.0

    def test_floor_plane(self, demo_scene):
        from prism.core.vector import Vector3
        from prism.geometry.plane import Plane
        from prism.materials.colorization import SolidColor

        floor = demo_scene.elements[-1]
        assert isinstance(floor, Plane)
        assert floor.origin.y == -2.0
        assert floor.normal == Vector3(0.0, -1.0, 0.0)
        assert isinstance(floor.material.color, SolidColor)


class TestParams:
    def test_light_params(self):
        from prism.core.color import Color
        from prism.scene.demo import DemoSceneParams, create_demo_scene
        from prism.scene.lights import DirectionalLight, SphericalLight

        params = DemoSceneParams(sun_intensity=5.0, lamp_color=(1.0, 0.5, 0.25))
        sun, lamp = create_demo_scene(width=40, height=30, params=params).lights

        assert isinstance(sun, DirectionalLight)
        assert sun.intensity == 5.0
        assert isinstance(lamp, SphericalLight)
        assert lamp.color == Color(1.0, 0.5, 0.25)

    def test_textured_floor(self, texture_file):
        from prism.materials.colorization import Texture
        from prism.scene.demo import DemoSceneParams, create_demo_scene

        params = DemoSceneParams(floor_texture=texture_file)
        floor = create_demo_scene(width=40, height=30, params=params).elements[-1]

        assert isinstance(floor.material.color, Texture)
        assert (floor.material.color.width, floor.material.color.height) == (2, 2)

    def test_missing_texture_uses_placeholder(self, tmp_path):
        from prism.materials.colorization import PLACEHOLDER_TEXEL
        from prism.scene.demo import DemoSceneParams, create_demo_scene

        params = DemoSceneParams(floor_texture=tmp_path / "missing.png")
        floor = create_demo_scene(width=40, height=30, params=params).elements[-1]

        assert floor.material.color.image.shape == (1, 1, 3)
        assert tuple(floor.material.color.image[0, 0]) == PLACEHOLDER_TEXEL


class TestDemoRender:
    """End-to-end renders of the demo scene."""

    def test_linear_output_is_finite(self, demo_scene):
        from prism.core.renderer import render_linear

        image = render_linear(demo_scene)
        assert image.shape == (24, 32, 3)
        assert np.all(np.isfinite(image))
        assert np.all(image >= 0.0)

    def test_floor_is_lit(self, demo_scene):
        from prism.core.renderer import render

        image = render(demo_scene)
        # The bottom rows look down onto the floor
        assert image[-1].any()
        assert image[-1].mean() > 0

    def test_has_nonzero_illumination(self, demo_scene):
        from prism.core.renderer import render

        image = render(demo_scene)
        assert image.max() > 0
        # The top row looks into empty sky
        assert not image[0].any()

    def test_supersampled_render_saves(self, demo_scene, tmp_path: Path, read_png):
        from prism.core.renderer import render
        from prism.preview.export import save_png

        image = render(demo_scene, 2, seed=0)
        path = tmp_path / "demo.png"
        save_png(image, path)

        assert path.exists()
        np.testing.assert_array_equal(read_png(path), image)

    def test_scene_survives_config_round_trip(self, demo_scene):
        from prism.core.renderer import render
        from prism.scene.config import scene_from_dict, scene_to_dict

        restored = scene_from_dict(scene_to_dict(demo_scene))
        assert restored.element_count == demo_scene.element_count
        # Re-normalizing directions may move the last bit
        diff = render(restored).astype(int) - render(demo_scene).astype(int)
        assert np.abs(diff).max() <= 1
