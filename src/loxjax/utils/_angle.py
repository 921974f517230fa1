"""Angle conversion and reduction helpers.

``to_radians`` implements the ``use_degrees`` convention of the
rotation-matrix helpers.  The reductions are used by :mod:`loxjax.sofa` for
fundamental arguments and sidereal angles.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

TWO_PI = 2.0 * jnp.pi


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert *angle* to radians if ``use_degrees`` is True."""
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def mod_two_pi(angle: ArrayLike) -> Array:
    """Reduce *angle* to ``[0, 2*pi)``."""
    return jnp.mod(angle, TWO_PI)


def mod_two_pi_signed(angle: ArrayLike) -> Array:
    """Reduce *angle* modulo ``2*pi`` keeping its sign, i.e. to ``(-2*pi, 2*pi)``."""
    return jnp.fmod(angle, TWO_PI)


def normalize_two_pi(angle: ArrayLike, center: ArrayLike = 0.0) -> Array:
    """Wrap *angle* into ``[center - pi, center + pi)``.

    Args:
        angle: Angle [rad].
        center: Center of the output interval [rad]. Default: 0.0

    Returns:
        The wrapped angle.
    """
    return angle - TWO_PI * jnp.floor((angle + jnp.pi - center) / TWO_PI)
