"""ICRF to IAU body-fixed frame transformations.

The body-fixed frame of a body is defined by its IAU rotational elements
(:mod:`loxjax.bodies`): the pole at right ascension ``alpha`` and
declination ``delta`` and the prime meridian at angle ``W`` from the node
of the body equator on the ICRF equator.  Elements are evaluated at TDB.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from loxjax.bodies import Origin, rotational_elements
from loxjax.config import get_dtype
from loxjax.frames.iers import to_scale
from loxjax.rotations import Rotation, Rx, Rz
from loxjax.time import Time, TimeScale, Utc


def iau_rotation(
    right_ascension: ArrayLike,
    declination: ArrayLike,
    rotation_angle: ArrayLike,
    right_ascension_rate: ArrayLike = 0.0,
    declination_rate: ArrayLike = 0.0,
    rotation_rate: ArrayLike = 0.0,
) -> Rotation:
    """ICRF to body-fixed rotation from rotational elements.

    ``Rz(W mod 2pi) @ Rx(pi/2 - delta) @ Rz(alpha + pi/2)`` with angular
    velocity ``(alpha_dot, -delta_dot, W_dot)`` in the body frame.

    Args:
        right_ascension: Pole right ascension [rad].
        declination: Pole declination [rad].
        rotation_angle: Prime-meridian angle W [rad].
        right_ascension_rate: [rad/s]. Default: 0.0
        declination_rate: [rad/s]. Default: 0.0
        rotation_rate: [rad/s]. Default: 0.0

    Returns:
        Rotation: ICRF -> body-fixed.
    """
    m = (
        Rz(jnp.fmod(rotation_angle, 2.0 * jnp.pi))
        @ Rx(jnp.pi / 2.0 - declination)
        @ Rz(right_ascension + jnp.pi / 2.0)
    )
    omega = jnp.stack([right_ascension_rate, -declination_rate, rotation_rate]).astype(get_dtype())
    return Rotation.from_angular_velocity(m, omega)


def tdb_seconds(time: Time | Utc, provider=None) -> float:
    """TDB seconds since J2000 of *time*."""
    return to_scale(time, TimeScale.TDB, provider).seconds_since_j2000()


def icrf_to_iau(time: Time | Utc, origin: Origin | str, provider=None) -> Rotation:
    """Rotation from ICRF to the IAU body-fixed frame of *origin*.

    Args:
        time: Instant of evaluation, converted to TDB.
        origin (Origin | str): Body, by enum member or name.
        provider: ΔUT1 provider, only needed for UT1 instants.

    Returns:
        Rotation: ICRF -> body-fixed.

    Raises:
        UndefinedRotationalElements: If *origin* has no rotational model.

    Examples:
        ```python
        from loxjax.bodies import Origin
        from loxjax.frames import icrf_to_iau
        from loxjax.time import Time

        rot = icrf_to_iau(Time.j2000("TDB"), Origin.JUPITER)
        r_body = rot.apply([6068.27927, -1692.84394, -2516.61918])
        ```
    """
    if isinstance(origin, str):
        origin = Origin.parse(origin)
    model = rotational_elements(origin)
    t = tdb_seconds(time, provider)
    alpha, delta, w = model.elements(t)
    alpha_dot, delta_dot, w_dot = model.rates(t)
    return iau_rotation(alpha, delta, w, alpha_dot, delta_dot, w_dot)


def iau_to_icrf(time: Time | Utc, origin: Origin | str, provider=None) -> Rotation:
    """Rotation from the IAU body-fixed frame of *origin* to ICRF."""
    return icrf_to_iau(time, origin, provider).transpose()


def state_icrf_to_iau(time: Time | Utc, origin: Origin | str, x_icrf: ArrayLike, provider=None) -> Array:
    """Transform a 6-element ICRF state into the body-fixed frame of *origin*."""
    return icrf_to_iau(time, origin, provider).apply_state(x_icrf)


def state_iau_to_icrf(time: Time | Utc, origin: Origin | str, x_iau: ArrayLike, provider=None) -> Array:
    """Transform a 6-element body-fixed state of *origin* into ICRF."""
    return iau_to_icrf(time, origin, provider).apply_state(x_iau)
