"""Preview module for output and visualization.

Components:
    display: Matplotlib preview of an encoded raster
    export: PNG export through Pillow

Example:
    >>> from prism.preview import save_png, show_preview
    >>> from prism.core.renderer import render
    >>>
    >>> image = render(scene)
    >>> save_png(image, "output.png")
    >>> show_preview(image)
"""

from prism.preview.display import show_preview
from prism.preview.export import save_png

__all__ = [
    "show_preview",
    "save_png",
]
