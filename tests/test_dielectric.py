"""Unit tests for refraction and the Schlick Fresnel term."""

import math

import pytest


class TestSchlickFresnel:
    """Tests for Fresnel reflectance."""

    def test_normal_incidence(self):
        """At normal incidence F = R0 = ((eta-1)/(eta+1))^2."""
        from cornell_rt.materials.dielectric import schlick_fresnel

        assert schlick_fresnel(1.0, 1.5) == pytest.approx(0.04)

    def test_grazing_incidence(self):
        """At grazing incidence everything reflects."""
        from cornell_rt.materials.dielectric import schlick_fresnel

        assert schlick_fresnel(0.0, 1.5) == pytest.approx(1.0)

    def test_inverse_eta_same_r0(self):
        """Entering and exiting share R0."""
        from cornell_rt.materials.dielectric import schlick_fresnel

        assert schlick_fresnel(0.7, 1.5) == pytest.approx(schlick_fresnel(0.7, 1.0 / 1.5))

    @pytest.mark.parametrize("eta", [1.0, 1.33, 1.5, 2.4, 1.0 / 1.5])
    def test_weights_conserve_energy(self, eta):
        """Reflected and refracted weights lie in [0, 1] and sum to one."""
        from cornell_rt.materials.dielectric import fresnel_weights

        for i in range(11):
            cos_i = i / 10.0
            reflected, refracted = fresnel_weights(cos_i, eta)
            assert 0.0 <= reflected <= 1.0
            assert 0.0 <= refracted <= 1.0
            assert reflected + refracted == pytest.approx(1.0)


class TestInterface:
    """Tests for entering/exiting orientation."""

    def test_entering(self):
        """A ray against the normal keeps the normal and eta."""
        from cornell_rt.core.ray import Vector3
        from cornell_rt.materials.dielectric import orient_interface

        interface = orient_interface(Vector3(0.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0), 1.5)
        assert interface.normal == Vector3(0.0, 1.0, 0.0)
        assert interface.cos_i == pytest.approx(1.0)
        assert interface.eta == 1.5

    def test_exiting(self):
        """A ray along the normal flips it and inverts eta."""
        from cornell_rt.core.ray import Vector3
        from cornell_rt.materials.dielectric import orient_interface

        interface = orient_interface(Vector3(0.0, 1.0, 0.0), Vector3(0.0, 1.0, 0.0), 1.5)
        assert interface.normal == Vector3(0.0, -1.0, 0.0)
        assert interface.cos_i == pytest.approx(1.0)
        assert interface.eta == pytest.approx(1.0 / 1.5)


class TestRefract:
    """Tests for Snell refraction."""

    def test_normal_incidence_passes_straight(self):
        """A ray along the normal is not bent."""
        from cornell_rt.core.ray import Vector3
        from cornell_rt.materials.dielectric import orient_interface, refract

        d = Vector3(0.0, -1.0, 0.0)
        out = refract(d, orient_interface(d, Vector3(0.0, 1.0, 0.0), 1.5))
        assert out.y == pytest.approx(-1.0)

    def test_snell_law(self):
        """sin(theta_t) = sin(theta_i) * eta for the entering ratio."""
        from cornell_rt.core.ray import Vector3
        from cornell_rt.materials.dielectric import orient_interface, refract

        d = Vector3(1.0, -1.0, 0.0).normalize()
        eta = 1.0 / 1.5
        out = refract(d, orient_interface(d, Vector3(0.0, 1.0, 0.0), eta))
        assert math.isclose(out.length(), 1.0)
        assert out.x == pytest.approx(math.sin(math.pi / 4) * eta)
        assert out.y < 0.0

    def test_total_internal_reflection(self):
        """A ratio above one at a steep angle has no refracted ray."""
        from cornell_rt.core.ray import Vector3
        from cornell_rt.materials.dielectric import (
            Interface,
            is_total_internal_reflection,
            refract,
        )

        # 60 degrees from the normal: 1.5^2 * sin^2(60) > 1
        d = Vector3(math.sin(math.radians(60)), -math.cos(math.radians(60)), 0.0)
        cos_i = math.cos(math.radians(60))
        assert is_total_internal_reflection(cos_i, 1.5)
        assert not is_total_internal_reflection(cos_i, 1.0 / 1.5)
        with pytest.raises(ValueError):
            refract(d, Interface(Vector3(0.0, 1.0, 0.0), cos_i, 1.5))

    def test_normal_incidence_never_reflects_totally(self):
        """cos_i = 1 always transmits."""
        from cornell_rt.materials.dielectric import is_total_internal_reflection

        assert not is_total_internal_reflection(1.0, 2.4)
