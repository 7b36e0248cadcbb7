"""Scene module for scene description and ray-scene queries.

This module handles scene representation and ray-scene queries:

Components:
    scene: The frozen Scene value consumed by the renderer
    intersection: Intersection records and the nearest-hit query
    lights: Directional and spherical light sources
    config: Building scenes from dicts/JSON and exporting them back
    demo: A ready-made showcase scene

The scene module manages:
    - Element storage as an immutable tuple scanned linearly per ray
    - Light enumeration for direct lighting and shadow rays
    - Camera placement and the shading limits (shadow bias, recursion depth)
"""

from .config import load_scene, save_scene, scene_from_dict, scene_to_dict
from .demo import DemoSceneParams, create_demo_scene
from .intersection import Intersection, intersect_elements, trace
from .lights import (
    DirectionalLight,
    Light,
    SphericalLight,
    direction_from,
    light_distance,
    light_intensity,
    make_directional_light,
    make_spherical_light,
)
from .scene import DEFAULT_FOV, DEFAULT_MAX_RECURSION, DEFAULT_SHADOW_BIAS, Scene

__all__ = [
    # Scene
    "Scene",
    "DEFAULT_FOV",
    "DEFAULT_SHADOW_BIAS",
    "DEFAULT_MAX_RECURSION",
    # Intersection
    "Intersection",
    "intersect_elements",
    "trace",
    # Lights
    "Light",
    "DirectionalLight",
    "SphericalLight",
    "direction_from",
    "light_distance",
    "light_intensity",
    "make_directional_light",
    "make_spherical_light",
    # Configuration
    "scene_from_dict",
    "scene_to_dict",
    "load_scene",
    "save_scene",
    # Demo scene
    "create_demo_scene",
    "DemoSceneParams",
]
