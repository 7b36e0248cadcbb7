"""Scene configuration: building a Scene from plain data and back.

A scene document is a dict (usually parsed from JSON) with the image and
camera parameters at the top level and two lists, "elements" and "lights".
Each element and light carries a "type" key that selects its variant:

    elements: "sphere" (center, radius) | "plane" (origin, normal)
    lights: "directional" (direction) | "spherical" (position)
    surface: "diffuse" | "reflective" (reflectivity) | "refractive" (index, transparency)

A material has either a "color" (linear RGB triple) or a "texture" (image
path, resolved against base_path when relative).

Example:
    >>> from prism.scene.config import load_scene
    >>> scene = load_scene("scenes/demo.json")
    >>> scene.element_count
    4
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from prism.core.color import Color
from prism.core.vector import Point, Vector3
from prism.geometry.element import Element
from prism.geometry.plane import Plane, make_plane
from prism.geometry.sphere import Sphere, make_sphere
from prism.materials.colorization import Colorization, SolidColor, Texture, load_texture
from prism.materials.surface import (
    DEFAULT_ALBEDO,
    Diffuse,
    Material,
    Reflective,
    Refractive,
    SurfaceType,
)
from prism.scene.lights import (
    DirectionalLight,
    Light,
    SphericalLight,
    make_directional_light,
    make_spherical_light,
)
from prism.scene.scene import (
    DEFAULT_FOV,
    DEFAULT_MAX_RECURSION,
    DEFAULT_SHADOW_BIAS,
    Scene,
)

logger = logging.getLogger(__name__)


def _triple(values: Any, name: str) -> tuple[float, float, float]:
    try:
        x, y, z = values
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a list of three numbers, got {values!r}") from exc
    return (float(x), float(y), float(z))


def _require(data: dict[str, Any], key: str, context: str) -> Any:
    if key not in data:
        raise ValueError(f"{context} is missing required key '{key}'")
    return data[key]


# =============================================================================
# Loading
# =============================================================================


def surface_from_dict(data: dict[str, Any]) -> SurfaceType:
    """Build a surface type from its configuration.

    Raises:
        ValueError: If the surface type is unknown or a parameter is invalid.
    """
    surface_type = str(data.get("type", "diffuse")).lower()
    if surface_type == "diffuse":
        return Diffuse()
    if surface_type == "reflective":
        return Reflective(reflectivity=float(_require(data, "reflectivity", "Reflective surface")))
    if surface_type == "refractive":
        return Refractive(
            index=float(_require(data, "index", "Refractive surface")),
            transparency=float(_require(data, "transparency", "Refractive surface")),
        )
    raise ValueError(f"Unknown surface type: {surface_type}")


def colorization_from_dict(data: dict[str, Any], base_path: Path | None = None) -> Colorization:
    """Build a solid color or texture from a material configuration."""
    if "texture" in data:
        texture_path = Path(data["texture"])
        if base_path is not None and not texture_path.is_absolute():
            texture_path = base_path / texture_path
        return load_texture(texture_path)
    if "color" in data:
        return SolidColor(Color(*_triple(data["color"], "Material color")))
    raise ValueError("Material requires either 'color' or 'texture'")


def material_from_dict(data: dict[str, Any], base_path: Path | None = None) -> Material:
    """Build a Material from its configuration."""
    return Material(
        color=colorization_from_dict(data, base_path),
        albedo=float(data.get("albedo", DEFAULT_ALBEDO)),
        surface=surface_from_dict(data.get("surface", {})),
    )


def element_from_dict(data: dict[str, Any], base_path: Path | None = None) -> Element:
    """Build a sphere or plane from its configuration.

    Raises:
        ValueError: If the element type is unknown or its geometry is invalid.
    """
    element_type = str(data.get("type", "")).lower()
    material = material_from_dict(_require(data, "material", "Element"), base_path)

    if element_type == "sphere":
        return make_sphere(
            center=Point(*_triple(_require(data, "center", "Sphere"), "Sphere center")),
            radius=float(_require(data, "radius", "Sphere")),
            material=material,
        )
    if element_type == "plane":
        return make_plane(
            origin=Point(*_triple(_require(data, "origin", "Plane"), "Plane origin")),
            normal=Vector3(*_triple(_require(data, "normal", "Plane"), "Plane normal")),
            material=material,
        )
    raise ValueError(f"Unknown element type: {element_type}")


def light_from_dict(data: dict[str, Any]) -> Light:
    """Build a directional or spherical light from its configuration.

    Raises:
        ValueError: If the light type is unknown.
    """
    light_type = str(data.get("type", "")).lower()
    color = Color(*_triple(data.get("color", [1.0, 1.0, 1.0]), "Light color"))
    intensity = float(_require(data, "intensity", "Light"))

    if light_type == "directional":
        direction = Vector3(*_triple(_require(data, "direction", "Directional light"), "Light direction"))
        return make_directional_light(direction, color, intensity)
    if light_type == "spherical":
        position = Point(*_triple(_require(data, "position", "Spherical light"), "Light position"))
        return make_spherical_light(position, color, intensity)
    raise ValueError(f"Unknown light type: {light_type}")


def scene_from_dict(data: dict[str, Any], base_path: str | Path | None = None) -> Scene:
    """Build a Scene from a configuration dictionary.

    Args:
        data: Scene document (see module docstring for the schema).
        base_path: Directory that relative texture paths are resolved from.

    Returns:
        The constructed Scene.

    Raises:
        ValueError: If the document is malformed or names an unknown type.
    """
    base = Path(base_path) if base_path is not None else None
    elements = [element_from_dict(item, base) for item in data.get("elements", [])]
    lights = [light_from_dict(item) for item in data.get("lights", [])]

    scene = Scene(
        width=int(_require(data, "width", "Scene")),
        height=int(_require(data, "height", "Scene")),
        fov=float(data.get("fov", DEFAULT_FOV)),
        elements=elements,
        lights=lights,
        shadow_bias=float(data.get("shadow_bias", DEFAULT_SHADOW_BIAS)),
        max_recursion=int(data.get("max_recursion", DEFAULT_MAX_RECURSION)),
        origin=Point(*_triple(data.get("origin", [0.0, 0.0, 0.0]), "Scene origin")),
        direction=Vector3(*_triple(data.get("direction", [0.0, 0.0, 0.0]), "Scene direction")),
    )
    logger.debug(
        "Built scene %dx%d with %d element(s) and %d light(s)",
        scene.width,
        scene.height,
        scene.element_count,
        scene.light_count,
    )
    return scene


def load_scene(path: str | Path) -> Scene:
    """Load a Scene from a JSON file.

    Relative texture paths are resolved from the file's directory.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    logger.info("Loaded scene file %s", path)
    return scene_from_dict(data, base_path=path.parent)


# =============================================================================
# Exporting
# =============================================================================


def surface_to_dict(surface: SurfaceType) -> dict[str, Any]:
    if isinstance(surface, Diffuse):
        return {"type": "diffuse"}
    if isinstance(surface, Reflective):
        return {"type": "reflective", "reflectivity": surface.reflectivity}
    if isinstance(surface, Refractive):
        return {"type": "refractive", "index": surface.index, "transparency": surface.transparency}
    raise TypeError(f"Unsupported surface type: {type(surface).__name__}")


def material_to_dict(material: Material) -> dict[str, Any]:
    """Export a Material.

    Textures are exported by path; a texture built in memory has no path
    and cannot be exported.

    Raises:
        ValueError: If the material uses a texture without a source path.
    """
    config: dict[str, Any] = {}
    if isinstance(material.color, SolidColor):
        config["color"] = list(material.color.color.to_tuple())
    elif isinstance(material.color, Texture):
        if material.color.path is None:
            raise ValueError("Cannot export a texture that was not loaded from a file")
        config["texture"] = str(material.color.path)
    else:
        raise TypeError(f"Unsupported colorization: {type(material.color).__name__}")
    config["albedo"] = material.albedo
    config["surface"] = surface_to_dict(material.surface)
    return config


def element_to_dict(element: Element) -> dict[str, Any]:
    if isinstance(element, Sphere):
        return {
            "type": "sphere",
            "center": list(element.center.to_tuple()),
            "radius": element.radius,
            "material": material_to_dict(element.material),
        }
    if isinstance(element, Plane):
        return {
            "type": "plane",
            "origin": list(element.origin.to_tuple()),
            "normal": list(element.normal.to_tuple()),
            "material": material_to_dict(element.material),
        }
    raise TypeError(f"Unsupported element type: {type(element).__name__}")


def light_to_dict(light: Light) -> dict[str, Any]:
    if isinstance(light, DirectionalLight):
        return {
            "type": "directional",
            "direction": list(light.direction.to_tuple()),
            "color": list(light.color.to_tuple()),
            "intensity": light.intensity,
        }
    if isinstance(light, SphericalLight):
        return {
            "type": "spherical",
            "position": list(light.position.to_tuple()),
            "color": list(light.color.to_tuple()),
            "intensity": light.intensity,
        }
    raise TypeError(f"Unsupported light type: {type(light).__name__}")


def scene_to_dict(scene: Scene) -> dict[str, Any]:
    """Export a Scene to a dictionary (for JSON serialization).

    Returns:
        A dictionary that scene_from_dict() turns back into an equal scene.
    """
    return {
        "width": scene.width,
        "height": scene.height,
        "fov": scene.fov,
        "shadow_bias": scene.shadow_bias,
        "max_recursion": scene.max_recursion,
        "origin": list(scene.origin.to_tuple()),
        "direction": list(scene.direction.to_tuple()),
        "elements": [element_to_dict(element) for element in scene.elements],
        "lights": [light_to_dict(light) for light in scene.lights],
    }


def save_scene(scene: Scene, path: str | Path) -> None:
    """Write a Scene to a JSON file."""
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(scene_to_dict(scene), f, indent=2)
    logger.info("Saved scene file %s", path)
