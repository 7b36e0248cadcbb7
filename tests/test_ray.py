"""Unit tests for rays, reflection, transmission and Fresnel.

Tests cover:
- Ray evaluation
- Mirror reflection about a normal
- Snell transmission, including index 1.0 and total internal reflection
- Fresnel reflectance at normal incidence and under total internal reflection
"""

import math

import pytest


def _approx_vec(v, expected, abs_tol=1e-12):
    return all(math.isclose(a, b, abs_tol=abs_tol) for a, b in zip(v.to_tuple(), expected))


class TestRay:
    """Tests for Ray and ray_at."""

    def test_ray_at(self):
        from prism.core.ray import Ray, ray_at
        from prism.core.vector import Point, Vector3

        ray = Ray(Point(1.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert ray_at(ray, 0.0) == Point(1.0, 0.0, 0.0)
        assert ray_at(ray, 2.5) == Point(1.0, 0.0, -2.5)


class TestReflection:
    """Tests for reflect and create_reflection."""

    def test_reflect_about_normal(self):
        from prism.core.ray import reflect
        from prism.core.vector import Vector3

        incident = Vector3(1.0, -1.0, 0.0)
        normal = Vector3(0.0, 1.0, 0.0)
        assert reflect(incident, normal) == Vector3(1.0, 1.0, 0.0)

    def test_create_reflection_offsets_origin_along_normal(self):
        from prism.core.ray import create_reflection
        from prism.core.vector import Point, Vector3

        ray = create_reflection(
            Vector3(0.0, 1.0, 0.0),
            Vector3(0.0, -1.0, 0.0),
            Point(0.0, 0.0, 0.0),
            0.01,
        )
        assert ray.origin == Point(0.0, 0.01, 0.0)
        assert ray.direction == Vector3(0.0, 1.0, 0.0)


class TestTransmission:
    """Tests for create_transmission."""

    def test_index_one_is_collinear_entering(self):
        """Refraction with index 1.0 leaves the direction unchanged."""
        from prism.core.ray import create_transmission
        from prism.core.vector import Point, Vector3

        incident = Vector3(0.3, -0.8, 0.1).normalize()
        ray = create_transmission(Vector3(0.0, 1.0, 0.0), incident, Point.zero(), 1e-6, 1.0)

        assert ray is not None
        assert _approx_vec(ray.direction, incident.to_tuple())

    def test_index_one_is_collinear_exiting(self):
        from prism.core.ray import create_transmission
        from prism.core.vector import Point, Vector3

        incident = Vector3(0.3, 0.8, -0.1).normalize()
        ray = create_transmission(Vector3(0.0, 1.0, 0.0), incident, Point.zero(), 1e-6, 1.0)

        assert ray is not None
        assert _approx_vec(ray.direction, incident.to_tuple())

    def test_entering_bends_toward_normal(self):
        from prism.core.ray import create_transmission
        from prism.core.vector import Point, Vector3

        normal = Vector3(0.0, 1.0, 0.0)
        incident = Vector3(1.0, -1.0, 0.0).normalize()
        ray = create_transmission(normal, incident, Point.zero(), 1e-6, 1.5)

        assert ray is not None
        sin_i = math.sqrt(1.0 - incident.dot(normal) ** 2)
        direction = ray.direction.normalize()
        sin_t = math.sqrt(1.0 - direction.dot(normal) ** 2)
        # Snell's law: sin_i = 1.5 * sin_t
        assert sin_i == pytest.approx(1.5 * sin_t, rel=1e-9)
        # Origin moves to the far side of the surface
        assert ray.origin.y < 0.0

    def test_total_internal_reflection_returns_none(self):
        """Grazing exit from glass has no transmitted ray."""
        from prism.core.ray import create_transmission
        from prism.core.vector import Point, Vector3

        incident = Vector3(1.0, 0.1, 0.0).normalize()
        ray = create_transmission(Vector3(0.0, 1.0, 0.0), incident, Point.zero(), 1e-6, 1.5)
        assert ray is None


class TestFresnel:
    """Tests for the Fresnel reflectance."""

    def test_normal_incidence(self):
        """At normal incidence kr = ((n - 1) / (n + 1))^2."""
        from prism.core.ray import fresnel
        from prism.core.vector import Vector3

        kr = fresnel(Vector3(0.0, 0.0, -1.0), Vector3(0.0, 0.0, 1.0), 1.5)
        assert kr == pytest.approx(0.04)

    def test_matched_index_reflects_nothing(self):
        from prism.core.ray import fresnel
        from prism.core.vector import Vector3

        incident = Vector3(0.5, -0.5, 0.0).normalize()
        assert fresnel(incident, Vector3(0.0, 1.0, 0.0), 1.0) == pytest.approx(0.0)

    def test_total_internal_reflection_is_one(self):
        from prism.core.ray import fresnel
        from prism.core.vector import Vector3

        incident = Vector3(1.0, 0.1, 0.0).normalize()
        assert fresnel(incident, Vector3(0.0, 1.0, 0.0), 1.5) == 1.0

    def test_in_unit_range(self):
        from prism.core.ray import fresnel
        from prism.core.vector import Vector3

        normal = Vector3(0.0, 1.0, 0.0)
        for angle in [0.0, 0.3, 0.7, 1.0, 1.4, 1.55]:
            incident = Vector3(math.sin(angle), -math.cos(angle), 0.0)
            kr = fresnel(incident, normal, 1.33)
            assert 0.0 <= kr <= 1.0

    def test_exact_grazing_on_matched_boundary(self):
        from prism.core.ray import fresnel
        from prism.core.vector import Vector3

        assert fresnel(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), 1.0) == 1.0
