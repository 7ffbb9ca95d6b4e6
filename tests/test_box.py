"""Unit tests for the axis-aligned box (slab method)."""

import math

import pytest


@pytest.fixture
def cube(white_material):
    """Cube spanning [-1, 1] on every axis."""
    from cornell_rt.core.ray import Vector3
    from cornell_rt.geometry import Box

    return Box(Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0), white_material)


class TestBoxBasics:
    """Tests for Box construction."""

    def test_inverted_corners_raise(self, white_material):
        """min must not exceed max on any axis."""
        from cornell_rt.core.ray import Vector3
        from cornell_rt.geometry import Box

        with pytest.raises(ValueError):
            Box(Vector3(0.0, 1.0, 0.0), Vector3(1.0, 0.0, 1.0), white_material)

    def test_center(self, cube):
        """The center is the midpoint of the corners."""
        from cornell_rt.core.ray import Vector3

        assert cube.center == Vector3(0.0, 0.0, 0.0)


class TestBoxIntersection:
    """Tests for ray-box intersection."""

    def test_hit_from_above(self, cube):
        """Straight down from y=5 enters the top face at t=4, normal +y."""
        from cornell_rt.core.ray import Ray, Vector3

        result = cube.intersect(Ray(Vector3(0.0, 5.0, 0.0), Vector3(0.0, -1.0, 0.0)))
        assert result is not None
        t, normal = result
        assert t == pytest.approx(4.0)
        assert normal == Vector3(0.0, 1.0, 0.0)

    @pytest.mark.parametrize(
        "origin, direction, expected",
        [
            ((5.0, 0.0, 0.0), (-1.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
            ((-5.0, 0.0, 0.0), (1.0, 0.0, 0.0), (-1.0, 0.0, 0.0)),
            ((0.0, -5.0, 0.0), (0.0, 1.0, 0.0), (0.0, -1.0, 0.0)),
            ((0.0, 0.0, 5.0), (0.0, 0.0, -1.0), (0.0, 0.0, 1.0)),
            ((0.0, 0.0, -5.0), (0.0, 0.0, 1.0), (0.0, 0.0, -1.0)),
        ],
    )
    def test_face_centers_get_axis_normals(self, cube, origin, direction, expected):
        """At a face center the centroid direction is the face's axis."""
        from cornell_rt.core.ray import Ray, Vector3

        result = cube.intersect(Ray(Vector3(*origin), Vector3(*direction)))
        assert result is not None
        t, normal = result
        assert t == pytest.approx(4.0)
        assert normal == Vector3(*expected)

    def test_off_center_entry_uses_centroid_direction(self, white_material):
        """Entry hits from outside take normalize(hit - center), not the face axis."""
        from cornell_rt.core.ray import Ray, Vector3
        from cornell_rt.geometry import Box

        crate = Box(Vector3(0.5, 0.0, -1.3), Vector3(1.3, 1.0, -0.5), white_material)
        result = crate.intersect(Ray(Vector3(0.6, 5.0, -0.6), Vector3(0.0, -1.0, 0.0)))
        assert result is not None
        t, normal = result
        assert t == pytest.approx(4.0)
        expected = Vector3(-0.3, 0.5, 0.3).normalize()
        assert normal.dot(expected) == pytest.approx(1.0)
        assert normal.y == pytest.approx(0.7624928516630234)

    def test_off_center_normal_selects_side_grain(self, white_material):
        """The tilted normal projects the wood grain as a side face would."""
        from cornell_rt.core.noise import GradientNoise
        from cornell_rt.core.ray import Ray, Vector3
        from cornell_rt.geometry import Box
        from cornell_rt.materials import WoodGrainTexture

        texture = WoodGrainTexture(GradientNoise(seed=0))
        crate = Box(
            Vector3(0.5, 0.0, -1.3), Vector3(1.3, 1.0, -0.5), white_material, texture=texture
        )
        record = crate.hit(Ray(Vector3(0.6, 5.0, -0.6), Vector3(0.0, -1.0, 0.0)))
        assert abs(record.normal.y) < 0.9
        assert record.material.color == texture.color_at(record.point, record.normal)

    @pytest.mark.parametrize(
        "point, direction, expected",
        [
            ((-1.0, 0.3, 0.2), (-1.0, 0.0, 0.0), (-1.0, 0.0, 0.0)),
            ((1.0, 0.3, 0.2), (1.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
            ((0.3, -1.0, 0.2), (0.0, -1.0, 0.0), (0.0, -1.0, 0.0)),
            ((0.3, 1.0, 0.2), (0.0, 1.0, 0.0), (0.0, 1.0, 0.0)),
            ((0.3, 0.2, -1.0), (0.0, 0.0, -1.0), (0.0, 0.0, -1.0)),
            ((0.3, 0.2, 1.0), (0.0, 0.0, 1.0), (0.0, 0.0, 1.0)),
        ],
    )
    def test_face_match_needs_outgoing_sign(self, cube, point, direction, expected):
        """A face matches only when the ray moves away from the box through it."""
        from cornell_rt.core.ray import Vector3

        assert cube.face_normal(Vector3(*point), Vector3(*direction)) == Vector3(*expected)

    def test_unit_box_on_floor(self, white_material):
        """Box (-1,0,-1)-(1,1,1) hit straight down from (0,5,0): t=4, normal +y."""
        from cornell_rt.core.ray import Ray, Vector3
        from cornell_rt.geometry import Box

        box = Box(Vector3(-1.0, 0.0, -1.0), Vector3(1.0, 1.0, 1.0), white_material)
        record = box.hit(Ray(Vector3(0.0, 5.0, 0.0), Vector3(0.0, -1.0, 0.0)))
        assert record is not None
        assert record.t == pytest.approx(4.0)
        assert record.normal == Vector3(0.0, 1.0, 0.0)
        assert record.point == Vector3(0.0, 1.0, 0.0)

    def test_miss(self, cube):
        """A ray passing beside the box misses."""
        from cornell_rt.core.ray import Ray, Vector3

        ray = Ray(Vector3(3.0, 5.0, 0.0), Vector3(0.0, -1.0, 0.0))
        assert cube.intersect(ray) is None
        assert cube.hit(ray) is None

    def test_box_behind_ray(self, cube):
        """A box behind the origin is not hit."""
        from cornell_rt.core.ray import Ray, Vector3

        ray = Ray(Vector3(0.0, 5.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert cube.intersect(ray) is None

    def test_origin_inside_is_miss(self, cube):
        """From inside, the entry distance is negative and rejected."""
        from cornell_rt.core.ray import Ray, Vector3

        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert cube.intersect(ray) is None

    def test_far_hit_rejected(self, white_material):
        """Hits beyond the maximum distance are ignored."""
        from cornell_rt.core.ray import Ray, Vector3
        from cornell_rt.geometry import Box

        far_box = Box(Vector3(-1.0, -1.0, -2001.0), Vector3(1.0, 1.0, -2000.0), white_material)
        assert far_box.intersect(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))) is None

    def test_oblique_hit(self, cube):
        """Diagonal rays produce a hit on the box surface."""
        from cornell_rt.core.ray import Ray, Vector3

        ray = Ray(Vector3(3.0, 4.0, 0.2), Vector3(-1.0, -1.5, 0.0))
        record = cube.hit(ray)
        assert record is not None
        assert math.isclose(record.normal.length(), 1.0)
        assert all(-1.0 - 1e-6 <= c <= 1.0 + 1e-6 for c in record.point)

    def test_edge_hit_uses_centroid_fallback(self, cube):
        """A ray grazing an edge gets a unit normal from the center."""
        from cornell_rt.core.ray import Ray, Vector3

        # On the x=-1 / y=1 edge, travelling along -z: no face matches
        normal = cube.face_normal(Vector3(-1.0, 1.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert math.isclose(normal.length(), 1.0)
        assert normal.x == pytest.approx(-math.sqrt(0.5))
        assert normal.y == pytest.approx(math.sqrt(0.5))

    def test_wood_texture_resolved(self, white_material):
        """A textured box returns wood colors at the hit."""
        from cornell_rt.core.noise import GradientNoise
        from cornell_rt.core.ray import Ray, Vector3
        from cornell_rt.geometry import Box
        from cornell_rt.materials import WoodGrainTexture

        texture = WoodGrainTexture(GradientNoise(seed=0))
        box = Box(
            Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0), white_material, texture=texture
        )
        record = box.hit(Ray(Vector3(0.3, 5.0, 0.1), Vector3(0.0, -1.0, 0.0)))
        assert record is not None
        assert record.material.color == texture.color_at(record.point, record.normal)
