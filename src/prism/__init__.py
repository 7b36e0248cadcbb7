"""prism: an offline recursive (Whitted-style) ray tracer.

Given a scene of spheres and planes, directional and point lights and
diffuse, reflective or refractive materials, prism computes a color per
pixel and produces an 8-bit RGB raster.

Subpackages:
    core: Vectors, colors, rays, shading, the render loop and progressive rendering
    geometry: Sphere and plane primitives and their intersection routines
    materials: Solid colors, textures and surface types
    scene: Scene description, lights, nearest-hit query and JSON configuration
    camera: Landscape pinhole camera
    preview: PNG export and Matplotlib preview
"""

__version__ = "0.1.0"
