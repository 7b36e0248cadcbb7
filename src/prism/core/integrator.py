"""Recursive Whitted-style shading.

This module computes the color carried back along a ray. It is the only
place where the scene query, lights, materials and secondary rays meet.

cast_ray(scene, ray, depth) is plain recursion bounded by the scene's
max_recursion:

1. A ray at depth >= max_recursion returns black.
2. A ray that hits nothing returns black (there is no environment).
3. Otherwise the hit element's surface type decides the shading path:
   - Diffuse: direct lighting with shadow rays (shade_diffuse).
   - Reflective: diffuse shading blended with a mirror reflection,
     diffuse * (1 - r) + reflection * r.
   - Refractive: Fresnel-weighted blend of reflection and transmission,
     scaled by transparency and the surface color.

Direct lighting per light:
    max(n . l, 0) * intensity * (albedo / pi) * light_color * surface_color

The sum over lights is clamped to [0, 1] per channel. A light contributes
nothing when the shadow ray toward it hits an element closer than the light.

Example:
    >>> from prism.camera.pinhole import create_prime
    >>> from prism.core.integrator import cast_ray
    >>> color = cast_ray(scene, create_prime(400, 300, scene), 0)
"""

from __future__ import annotations

import math

from prism.core.color import BLACK, Color
from prism.core.ray import (
    Ray,
    create_reflection,
    create_transmission,
    fresnel,
    ray_at,
)
from prism.core.vector import Point, Vector3
from prism.geometry.element import (
    Element,
    element_material,
    surface_normal,
    texture_coordinates,
)
from prism.materials.surface import Diffuse, Reflective, Refractive
from prism.scene.intersection import Intersection, trace
from prism.scene.lights import direction_from, light_distance, light_intensity
from prism.scene.scene import Scene


def is_in_shadow(scene: Scene, shadow_ray: Ray, distance_to_light: float) -> bool:
    """Check whether anything blocks the shadow ray before the light.

    Args:
        scene: The scene to query.
        shadow_ray: Ray from the (biased) hit point toward the light.
        distance_to_light: Distance to the light; infinite for directional
            lights, so any hit occludes them.

    Returns:
        True if an element is hit strictly closer than the light.
    """
    occluder = trace(scene, shadow_ray)
    return occluder is not None and occluder.distance < distance_to_light


def shade_diffuse(
    scene: Scene,
    element: Element,
    hit_point: Point,
    normal: Vector3,
) -> Color:
    """Compute Lambertian direct lighting at a hit point.

    Args:
        scene: The scene providing lights and occluders.
        element: The element that was hit.
        hit_point: The intersection point.
        normal: The unit shading normal at the hit point.

    Returns:
        The summed light contribution, clamped to [0, 1].
    """
    material = element_material(element)
    surface_color = material.color.sample(texture_coordinates(element, hit_point))
    light_reflected = material.albedo / math.pi
    shadow_origin = hit_point + normal * scene.shadow_bias

    color = BLACK
    for light in scene.lights:
        direction_to_light = -direction_from(light, hit_point)
        shadow_ray = Ray(origin=shadow_origin, direction=direction_to_light)

        if is_in_shadow(scene, shadow_ray, light_distance(light, hit_point)):
            continue

        light_power = max(normal.dot(direction_to_light), 0.0) * light_intensity(light, hit_point)
        light_color = light.color * (light_power * light_reflected)
        color = color + surface_color * light_color

    return color.clamp()


def shade_reflective(
    scene: Scene,
    ray: Ray,
    element: Element,
    hit_point: Point,
    normal: Vector3,
    reflectivity: float,
    depth: int,
) -> Color:
    """Blend diffuse shading with a mirror reflection."""
    diffuse = shade_diffuse(scene, element, hit_point, normal)
    reflection_ray = create_reflection(normal, ray.direction, hit_point, scene.shadow_bias)
    reflection = cast_ray(scene, reflection_ray, depth + 1)
    return diffuse * (1.0 - reflectivity) + reflection * reflectivity


def shade_refractive(
    scene: Scene,
    ray: Ray,
    element: Element,
    hit_point: Point,
    normal: Vector3,
    index: float,
    transparency: float,
    depth: int,
) -> Color:
    """Fresnel-weighted blend of reflection and refraction.

    Total internal reflection (kr == 1, or no transmission ray) leaves the
    refraction term black.
    """
    kr = fresnel(ray.direction, normal, index)
    surface_color = element_material(element).color.sample(texture_coordinates(element, hit_point))

    refraction = BLACK
    if kr < 1.0:
        transmission_ray = create_transmission(
            normal, ray.direction, hit_point, scene.shadow_bias, index
        )
        if transmission_ray is not None:
            refraction = cast_ray(scene, transmission_ray, depth + 1)

    reflection_ray = create_reflection(normal, ray.direction, hit_point, scene.shadow_bias)
    reflection = cast_ray(scene, reflection_ray, depth + 1)

    color = reflection * kr + refraction * (1.0 - kr)
    return color * transparency * surface_color


def get_color(scene: Scene, ray: Ray, intersection: Intersection, depth: int) -> Color:
    """Shade a known intersection according to the element's surface type."""
    element = scene.element(intersection)
    hit_point = ray_at(ray, intersection.distance)
    normal = surface_normal(element, hit_point)
    surface = element_material(element).surface

    if isinstance(surface, Diffuse):
        return shade_diffuse(scene, element, hit_point, normal)
    if isinstance(surface, Reflective):
        return shade_reflective(
            scene, ray, element, hit_point, normal, surface.reflectivity, depth
        )
    if isinstance(surface, Refractive):
        return shade_refractive(
            scene, ray, element, hit_point, normal, surface.index, surface.transparency, depth
        )
    raise TypeError(f"Unsupported surface type: {type(surface).__name__}")


def cast_ray(scene: Scene, ray: Ray, depth: int) -> Color:
    """Compute the color seen along a ray.

    Args:
        scene: The scene to render.
        ray: The ray to follow.
        depth: Current recursion depth; primary rays start at 0.

    Returns:
        The linear color carried back along the ray. Black when the depth
        limit is reached or nothing is hit.
    """
    if depth >= scene.max_recursion:
        return BLACK

    intersection = trace(scene, ray)
    if intersection is None:
        return BLACK
    return get_color(scene, ray, intersection, depth)
