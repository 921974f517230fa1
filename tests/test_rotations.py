"""Tests for elementary rotations, the Rotation type and angle helpers."""

import math

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from loxjax.rotations import Rotation, Rx, Ry, Rz, skew
from loxjax.utils import mod_two_pi, mod_two_pi_signed, normalize_two_pi, to_radians


class TestElementaryRotations:
    @pytest.mark.parametrize("fn", [Rx, Ry, Rz])
    def test_inverse(self, fn):
        np.testing.assert_allclose(np.asarray(fn(0.7) @ fn(-0.7)), np.eye(3), atol=1e-15)

    @pytest.mark.parametrize("fn", [Rx, Ry, Rz])
    def test_orthonormal(self, fn):
        m = np.asarray(fn(1.234))
        np.testing.assert_allclose(m @ m.T, np.eye(3), atol=1e-15)
        assert np.linalg.det(m) == pytest.approx(1.0, abs=1e-15)

    def test_rz_is_frame_rotation(self):
        # A vector on +x seen from a frame rotated 90 deg about +z lies on -y
        v = np.asarray(Rz(math.pi / 2) @ jnp.array([1.0, 0.0, 0.0]))
        np.testing.assert_allclose(v, [0.0, -1.0, 0.0], atol=1e-15)

    def test_rx_is_frame_rotation(self):
        v = np.asarray(Rx(math.pi / 2) @ jnp.array([0.0, 1.0, 0.0]))
        np.testing.assert_allclose(v, [0.0, 0.0, -1.0], atol=1e-15)

    def test_ry_is_frame_rotation(self):
        v = np.asarray(Ry(math.pi / 2) @ jnp.array([0.0, 0.0, 1.0]))
        np.testing.assert_allclose(v, [-1.0, 0.0, 0.0], atol=1e-15)

    def test_degrees(self):
        np.testing.assert_allclose(np.asarray(Rz(90.0, use_degrees=True)), np.asarray(Rz(math.pi / 2)), atol=1e-15)

    def test_jit(self):
        np.testing.assert_allclose(np.asarray(jax.jit(Ry)(0.3)), np.asarray(Ry(0.3)), atol=0.0)


class TestSkew:
    def test_cross_product(self):
        a = jnp.array([1.0, -2.0, 3.0])
        b = jnp.array([0.5, 4.0, -1.5])
        np.testing.assert_allclose(np.asarray(skew(a) @ b), np.cross(np.asarray(a), np.asarray(b)), atol=1e-15)

    def test_antisymmetric(self):
        s = np.asarray(skew([0.1, 0.2, 0.3]))
        np.testing.assert_allclose(s, -s.T, atol=0.0)


class TestRotation:
    def test_default_derivative_is_zero(self):
        rot = Rotation(Rz(0.2))
        np.testing.assert_array_equal(np.asarray(rot.dm), np.zeros((3, 3)))

    def test_identity(self):
        r, v = Rotation.identity().rotate_state([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        np.testing.assert_allclose(np.asarray(r), [1.0, 2.0, 3.0])
        np.testing.assert_allclose(np.asarray(v), [4.0, 5.0, 6.0])

    def test_angular_velocity_round_trip(self):
        omega = jnp.array([1e-5, -2e-5, 7.292115e-5])
        rot = Rotation.from_angular_velocity(Rx(0.4) @ Rz(1.1), omega)
        np.testing.assert_allclose(np.asarray(rot.angular_velocity), np.asarray(omega), rtol=1e-12)

    def test_rotating_frame_velocity(self):
        # A point at rest in the source frame moves against the spin in the target frame
        w = 7.292115e-5
        rot = Rotation.from_angular_velocity(jnp.eye(3), [0.0, 0.0, w])
        r, v = rot.rotate_state([7000.0, 0.0, 0.0], [0.0, 0.0, 0.0])
        np.testing.assert_allclose(np.asarray(r), [7000.0, 0.0, 0.0])
        np.testing.assert_allclose(np.asarray(v), [0.0, -w * 7000.0, 0.0], rtol=1e-14)

    def test_matches_rotating_matrix_derivative(self):
        # dm of Rz(w t) at t = 0.3 against a central difference
        w, t, h = 2e-3, 0.3, 1e-3
        rot = Rotation.from_angular_velocity(Rz(w * t), [0.0, 0.0, w])
        fd = (np.asarray(Rz(w * (t + h))) - np.asarray(Rz(w * (t - h)))) / (2 * h)
        np.testing.assert_allclose(np.asarray(rot.dm), fd, atol=1e-12)

    def test_compose_order(self):
        a = Rotation(Rx(0.3))
        b = Rotation(Rz(0.8))
        np.testing.assert_allclose(np.asarray(a.compose(b).m), np.asarray(Rz(0.8) @ Rx(0.3)), atol=1e-15)
        np.testing.assert_allclose(np.asarray((b @ a).m), np.asarray(a.compose(b).m), atol=0.0)

    def test_compose_with_transpose_is_identity(self):
        rot = Rotation.from_angular_velocity(Ry(0.5) @ Rz(2.0), [0.0, 1e-4, 7.3e-5])
        ident = rot.compose(rot.transpose())
        np.testing.assert_allclose(np.asarray(ident.m), np.eye(3), atol=1e-15)
        np.testing.assert_allclose(np.asarray(ident.dm), np.zeros((3, 3)), atol=1e-18)

    def test_state_round_trip(self):
        rot = Rotation.from_angular_velocity(Rx(-0.2) @ Rz(3.0), [0.0, 0.0, 7.292115e-5])
        r0 = jnp.array([6068.27927, -1692.84394, -2516.61918])
        v0 = jnp.array([-0.660415582, 5.495938726, -5.303093233])
        r1, v1 = rot.rotate_state(r0, v0)
        r2, v2 = rot.T.rotate_state(r1, v1)
        np.testing.assert_allclose(np.asarray(r2), np.asarray(r0), rtol=1e-14)
        np.testing.assert_allclose(np.asarray(v2), np.asarray(v0), rtol=1e-12)

    def test_apply_state(self):
        rot = Rotation.from_angular_velocity(Rz(0.5), [0.0, 0.0, 1e-3])
        x = jnp.array([1.0, 2.0, 3.0, 0.1, 0.2, 0.3])
        r, v = rot.rotate_state(x[:3], x[3:])
        np.testing.assert_allclose(np.asarray(rot.apply_state(x)), np.concatenate([r, v]), atol=0.0)

    def test_pytree(self):
        rot = Rotation.from_angular_velocity(Rz(0.5), [0.0, 0.0, 1e-3])
        leaves = jax.tree_util.tree_leaves(rot)
        assert len(leaves) == 2

    def test_jit(self):
        @jax.jit
        def build(angle):
            return Rotation.from_angular_velocity(Rz(angle), jnp.array([0.0, 0.0, 1e-3]))

        rot = build(0.5)
        assert isinstance(rot, Rotation)
        np.testing.assert_allclose(np.asarray(rot.m), np.asarray(Rz(0.5)), atol=1e-15)


class TestAngles:
    def test_to_radians(self):
        assert float(to_radians(180.0, True)) == pytest.approx(math.pi)
        assert float(to_radians(1.5, False)) == 1.5

    def test_mod_two_pi(self):
        assert float(mod_two_pi(-0.5)) == pytest.approx(2 * math.pi - 0.5)

    def test_mod_two_pi_signed_keeps_sign(self):
        assert float(mod_two_pi_signed(-7.0)) == pytest.approx(-7.0 + 2 * math.pi)
        assert float(mod_two_pi_signed(7.0)) == pytest.approx(7.0 - 2 * math.pi)

    @pytest.mark.parametrize(
        ("center", "low", "high"),
        [
            (0.0, -math.pi, math.pi),
            (math.pi, 0.0, 2 * math.pi),
            (-math.pi, -2 * math.pi, 0.0),
        ],
    )
    def test_normalize_two_pi(self, center, low, high):
        for angle in (-10.0, -3.0, 0.0, 1.0, 4.0, 12.5):
            wrapped = float(normalize_two_pi(angle, center))
            assert low <= wrapped < high
            assert math.cos(wrapped) == pytest.approx(math.cos(angle), abs=1e-12)
            assert math.sin(wrapped) == pytest.approx(math.sin(angle), abs=1e-12)
