"""Time-dependent frame rotation.

A :class:`Rotation` pairs a direction cosine matrix ``m`` with its time
derivative ``dm``, so that position and velocity are transformed together:

    r' = m @ r
    v' = dm @ r + m @ v

For a frame rotating with angular velocity ``omega`` (expressed in the
target frame) the derivative is ``dm = -[omega]x @ m``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from loxjax.config import get_dtype


def skew(v: ArrayLike) -> Array:
    """Cross-product matrix ``[v]x`` such that ``skew(v) @ u == cross(v, u)``."""
    v = jnp.asarray(v, dtype=get_dtype())
    zero = jnp.zeros_like(v[0])
    return jnp.stack(
        [
            jnp.stack([zero, -v[2], v[1]]),
            jnp.stack([v[2], zero, -v[0]]),
            jnp.stack([-v[1], v[0], zero]),
        ]
    )


class Rotation:
    """Rotation matrix with its time derivative.

    Composition follows the chain rule; :meth:`transpose` is the physical
    inverse.  Registered as a JAX pytree with ``m`` and ``dm`` as leaves.

    Args:
        m (ArrayLike): 3x3 direction cosine matrix.
        dm (ArrayLike | None): 3x3 time derivative of ``m`` [1/s]. Default:
            zero (a frame at rest).

    Examples:
        ```python
        from loxjax.rotations import Rotation, Rz

        rot = Rotation.from_angular_velocity(Rz(0.5), [0.0, 0.0, 7.292115e-5])
        r, v = rot.rotate_state([7000e3, 0.0, 0.0], [0.0, 7.5e3, 0.0])
        ```
    """

    __slots__ = ("_m", "_dm")

    def __init__(self, m: ArrayLike, dm: ArrayLike | None = None) -> None:
        dtype = get_dtype()
        self._m = jnp.asarray(m, dtype=dtype)
        self._dm = jnp.zeros((3, 3), dtype=dtype) if dm is None else jnp.asarray(dm, dtype=dtype)

    @classmethod
    def _from_internal(cls, m: Array, dm: Array) -> Rotation:
        obj = object.__new__(cls)
        obj._m = m
        obj._dm = dm
        return obj

    @classmethod
    def identity(cls) -> Rotation:
        return cls(jnp.eye(3, dtype=get_dtype()))

    @classmethod
    def from_matrix(cls, m: ArrayLike, dm: ArrayLike | None = None) -> Rotation:
        """Build a rotation from a matrix and an optional explicit derivative."""
        return cls(m, dm)

    @classmethod
    def from_angular_velocity(cls, m: ArrayLike, omega: ArrayLike) -> Rotation:
        """Build a rotation whose target frame spins at *omega* [rad/s].

        Args:
            m: 3x3 direction cosine matrix.
            omega: Angular velocity of the target frame relative to the
                source frame, in target-frame components.

        Returns:
            Rotation: With ``dm = -[omega]x @ m``.
        """
        m = jnp.asarray(m, dtype=get_dtype())
        return cls(m, -skew(omega) @ m)

    @property
    def m(self) -> Array:
        return self._m

    @property
    def dm(self) -> Array:
        return self._dm

    @property
    def angular_velocity(self) -> Array:
        """Angular velocity recovered from ``dm = -[omega]x @ m``."""
        w = -self._dm @ self._m.T
        return jnp.array([w[2, 1], w[0, 2], w[1, 0]])

    def compose(self, other: Rotation) -> Rotation:
        """Rotation that applies ``self`` first, then *other*."""
        return Rotation(other._m @ self._m, other._dm @ self._m + other._m @ self._dm)

    def __matmul__(self, other: Rotation) -> Rotation:
        # Matrix order: (a @ b) applies b first.
        if not isinstance(other, Rotation):
            return NotImplemented
        return other.compose(self)

    def transpose(self) -> Rotation:
        return Rotation(self._m.T, self._dm.T)

    @property
    def T(self) -> Rotation:
        return self.transpose()

    def apply(self, r: ArrayLike) -> Array:
        """Rotate a position vector."""
        return self._m @ jnp.asarray(r, dtype=get_dtype())

    def rotate_state(self, r: ArrayLike, v: ArrayLike) -> tuple[Array, Array]:
        """Transform a position and velocity.

        Args:
            r: Position vector.
            v: Velocity vector.

        Returns:
            tuple: ``(m @ r, dm @ r + m @ v)``.
        """
        dtype = get_dtype()
        r = jnp.asarray(r, dtype=dtype)
        v = jnp.asarray(v, dtype=dtype)
        return self._m @ r, self._dm @ r + self._m @ v

    def apply_state(self, x: ArrayLike) -> Array:
        """Transform a 6-element state ``[x, y, z, vx, vy, vz]``."""
        x = jnp.asarray(x, dtype=get_dtype())
        r, v = self.rotate_state(x[:3], x[3:6])
        return jnp.concatenate([r, v])

    def __repr__(self) -> str:
        return f"Rotation(m={self._m!r}, dm={self._dm!r})"


jax.tree_util.register_pytree_node(
    Rotation,
    lambda r: ((r._m, r._dm), None),
    lambda _, children: Rotation._from_internal(*children),
)
