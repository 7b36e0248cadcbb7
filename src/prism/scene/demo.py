"""Demo scene configuration.

This module provides a factory function for a small showcase scene that
exercises every shading path of the renderer:

- A green diffuse sphere in the middle
- A mirror sphere to the right (reflective surface)
- A glass sphere in front on the left (refractive surface)
- A gray floor plane below everything, optionally textured
- A directional light (sun) and a colored spherical point light

The camera sits at the origin looking down -z, so all geometry is placed at
negative z.

Example:
    >>> from prism.scene.demo import create_demo_scene
    >>> from prism.core.renderer import render
    >>>
    >>> scene = create_demo_scene(width=400, height=300)
    >>> image = render(scene, samples_per_pixel=4, seed=0)
"""

from dataclasses import dataclass
from pathlib import Path

from prism.core.color import Color
from prism.core.vector import Point, Vector3
from prism.geometry.plane import make_plane
from prism.geometry.sphere import make_sphere
from prism.materials.colorization import Colorization, SolidColor, load_texture
from prism.materials.surface import DEFAULT_ALBEDO, Diffuse, Material, Reflective, Refractive
from prism.scene.lights import make_directional_light, make_spherical_light
from prism.scene.scene import DEFAULT_MAX_RECURSION, DEFAULT_SHADOW_BIAS, Scene

# =============================================================================
# Demo Scene Parameters
# =============================================================================


@dataclass
class DemoSceneParams:
    """Parameters for configuring the demo scene.

    Attributes:
        sun_intensity: Intensity of the directional light.
        sun_color: Linear RGB color of the directional light.
        lamp_intensity: Emitted power of the spherical light before falloff.
        lamp_color: Linear RGB color of the spherical light.
        floor_texture: Optional image path for the floor. None keeps it a
            solid gray.

    Example:
        >>> params = DemoSceneParams(sun_intensity=10.0, lamp_color=(1.0, 0.8, 0.6))
        >>> scene = create_demo_scene(params=params)
    """

    sun_intensity: float = 20.0
    sun_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    lamp_intensity: float = 10000.0
    lamp_color: tuple[float, float, float] = (0.3, 0.8, 0.3)
    floor_texture: str | Path | None = None


# =============================================================================
# Demo Scene Constants
# =============================================================================

CENTER_SPHERE_COLOR = (0.4, 1.0, 0.4)
MIRROR_SPHERE_COLOR = (1.0, 0.4, 0.4)
GLASS_SPHERE_COLOR = (1.0, 1.0, 1.0)
FLOOR_COLOR = (0.6, 0.6, 0.6)

MIRROR_REFLECTIVITY = 0.7
GLASS_INDEX = 1.5
GLASS_TRANSPARENCY = 0.9

SUN_DIRECTION = (-0.25, -1.0, -1.0)
LAMP_POSITION = (-2.0, 10.0, -3.0)


# =============================================================================
# Demo Scene Factory
# =============================================================================


def create_demo_scene(
    width: int = 800,
    height: int = 600,
    fov: float = 90.0,
    params: DemoSceneParams | None = None,
    *,
    max_recursion: int = DEFAULT_MAX_RECURSION,
    shadow_bias: float = DEFAULT_SHADOW_BIAS,
) -> Scene:
    """Create the demo scene.

    Args:
        width: Image width in pixels. Must exceed height.
        height: Image height in pixels.
        fov: Field of view in degrees.
        params: Optional DemoSceneParams for the lights and floor.
        max_recursion: Maximum ray depth.
        shadow_bias: Offset applied to secondary ray origins.

    Returns:
        A Scene with four elements and two lights.
    """
    if params is None:
        params = DemoSceneParams()

    floor_color: Colorization = SolidColor(Color(*FLOOR_COLOR))
    if params.floor_texture is not None:
        floor_color = load_texture(params.floor_texture)

    elements = [
        make_sphere(
            center=Point(0.0, 0.0, -5.0),
            radius=1.0,
            material=Material(SolidColor(Color(*CENTER_SPHERE_COLOR)), DEFAULT_ALBEDO, Diffuse()),
        ),
        make_sphere(
            center=Point(2.5, 0.5, -6.0),
            radius=1.5,
            material=Material(
                SolidColor(Color(*MIRROR_SPHERE_COLOR)),
                DEFAULT_ALBEDO,
                Reflective(reflectivity=MIRROR_REFLECTIVITY),
            ),
        ),
        make_sphere(
            center=Point(-1.5, -0.5, -3.5),
            radius=0.75,
            material=Material(
                SolidColor(Color(*GLASS_SPHERE_COLOR)),
                DEFAULT_ALBEDO,
                Refractive(index=GLASS_INDEX, transparency=GLASS_TRANSPARENCY),
            ),
        ),
        # Normal points away from the visible (upper) side
        make_plane(
            origin=Point(0.0, -2.0, -5.0),
            normal=Vector3(0.0, -1.0, 0.0),
            material=Material(floor_color, DEFAULT_ALBEDO, Diffuse()),
        ),
    ]

    lights = [
        make_directional_light(
            direction=Vector3(*SUN_DIRECTION),
            color=Color(*params.sun_color),
            intensity=params.sun_intensity,
        ),
        make_spherical_light(
            position=Point(*LAMP_POSITION),
            color=Color(*params.lamp_color),
            intensity=params.lamp_intensity,
        ),
    ]

    return Scene(
        width=width,
        height=height,
        fov=fov,
        elements=elements,
        lights=lights,
        shadow_bias=shadow_bias,
        max_recursion=max_recursion,
    )
