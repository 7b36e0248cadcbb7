"""Exceptions raised by the rendering core.

Fatal conditions derive from RenderError and abort the whole image. They
indicate a malformed scene rather than a transient failure, so the renderer
never tries to salvage a partial result.

Expected absences (a ray that hits nothing, total internal reflection, a
point in shadow) are not errors and are reported as None or as a zero
contribution by the functions that detect them.
"""


class RenderError(Exception):
    """Base class for fatal rendering conditions."""


class DegenerateGeometryError(RenderError, ValueError):
    """Raised when geometry cannot be evaluated.

    Examples are normalizing a zero-length vector or recording an
    intersection whose distance is not a finite, non-negative number.
    """


class CameraModelError(RenderError, ValueError):
    """Raised when the scene does not fit the landscape camera model."""
