"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside
- Ray missing sphere
- Ray starting inside sphere
- Sphere behind the ray origin
- Hit records and texture resolution
"""

import math

import pytest


@pytest.fixture
def unit_sphere(white_material):
    from cornell_rt.core.ray import Vector3
    from cornell_rt.geometry import Sphere

    return Sphere(Vector3(0.0, 0.0, 0.0), 1.0, white_material)


class TestSphereBasics:
    """Tests for Sphere construction."""

    def test_non_positive_radius_raises(self, white_material):
        """Zero or negative radius is rejected."""
        from cornell_rt.core.ray import Vector3
        from cornell_rt.geometry import Sphere

        with pytest.raises(ValueError, match="radius"):
            Sphere(Vector3(0.0, 0.0, 0.0), 0.0, white_material)
        with pytest.raises(ValueError, match="radius"):
            Sphere(Vector3(0.0, 0.0, 0.0), -1.0, white_material)

    def test_spheres_cast_shadows(self, unit_sphere):
        """Spheres occlude shadow rays."""
        assert unit_sphere.casts_shadow is True


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_direct_hit(self, unit_sphere):
        """Ray from z=5 toward the origin hits at t=4."""
        from cornell_rt.core.ray import Ray, Vector3

        ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))
        assert unit_sphere.intersect(ray) == pytest.approx(4.0)

    def test_hit_record_normal_points_outward(self, unit_sphere):
        """The hit point is (0, 0, 1) with normal (0, 0, 1)."""
        from cornell_rt.core.ray import Ray, Vector3

        record = unit_sphere.hit(Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0)))
        assert record is not None
        assert record.t == pytest.approx(4.0)
        assert record.point.z == pytest.approx(1.0)
        assert record.normal.x == pytest.approx(0.0)
        assert record.normal.y == pytest.approx(0.0)
        assert record.normal.z == pytest.approx(1.0)
        assert record.material is unit_sphere.material

    def test_miss(self, unit_sphere):
        """A ray passing beside the sphere misses."""
        from cornell_rt.core.ray import Ray, Vector3

        ray = Ray(Vector3(0.0, 2.0, 5.0), Vector3(0.0, 0.0, -1.0))
        assert unit_sphere.intersect(ray) is None
        assert unit_sphere.hit(ray) is None

    def test_from_inside_uses_far_root(self, unit_sphere):
        """A ray starting at the center exits at t = radius."""
        from cornell_rt.core.ray import Ray, Vector3

        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
        assert unit_sphere.intersect(ray) == pytest.approx(1.0)

    def test_sphere_behind_ray(self, unit_sphere):
        """Both roots negative is a miss."""
        from cornell_rt.core.ray import Ray, Vector3

        ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 1.0))
        assert unit_sphere.intersect(ray) is None

    def test_surface_origin_ignores_self_hit(self, unit_sphere):
        """A ray leaving the surface outward does not hit it again."""
        from cornell_rt.core.ray import Ray, Vector3

        ray = Ray(Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, 1.0))
        assert unit_sphere.intersect(ray) is None

    def test_surface_origin_inward_hits_far_side(self, unit_sphere):
        """A ray leaving the surface inward hits the opposite side."""
        from cornell_rt.core.ray import Ray, Vector3

        ray = Ray(Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, -1.0))
        assert unit_sphere.intersect(ray) == pytest.approx(2.0)

    def test_oblique_hit_normal_is_unit(self, unit_sphere):
        """Normals are unit length away from the axis too."""
        from cornell_rt.core.ray import Ray, Vector3

        record = unit_sphere.hit(Ray(Vector3(0.5, 0.3, 5.0), Vector3(0.0, 0.0, -1.0)))
        assert record is not None
        assert math.isclose(record.normal.length(), 1.0)
        assert record.normal.dot(Vector3(0.0, 0.0, 1.0)) > 0.0


class TestSphereTexture:
    """Tests for texture resolution on hits."""

    def test_texture_applied_at_hit(self, white_material):
        """The hit material is the textured one."""
        from cornell_rt.core.ray import Ray, Vector3
        from cornell_rt.geometry import Sphere
        from cornell_rt.materials import FloorBoardTexture

        texture = FloorBoardTexture()
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, white_material, texture=texture)
        record = sphere.hit(Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0)))
        assert record is not None
        assert record.material.color == texture.color_at(record.point)
        assert record.material.kd == white_material.kd
