"""ICRF-ITRF transformations using the IAU 2006/2000A CIO-based model.

The chain is split at the intermediate frames:

- **ICRF -> CIRF**: bias-precession-nutation from the CIP X, Y and the CIO
  locator s, with the EOP celestial pole offsets dX, dY added to X, Y.
- **CIRF -> TIRF**: Earth rotation angle about the CIP, with the frame
  spinning at ``OMEGA_EARTH``.
- **TIRF -> ITRF**: polar motion and the TIO locator s'.

Each step returns a :class:`~loxjax.rotations.Rotation`, so positions and
velocities are transformed together.  The composed ICRF -> ITRF rotation
is ``PM @ ER @ BPN`` with the velocity term ``-omega x r`` from the Earth
rotation step.

Functions take an ``eop`` argument that may be an
:class:`~loxjax.eop.EopProvider` or a bare :class:`~loxjax.eop.EOPData`
table.  Steps that need UT1 or the pole raise
:class:`~loxjax.errors.MissingEopProvider` when it is ``None``; pass
:func:`~loxjax.eop.zero_eop` to opt out of Earth orientation corrections.

All inputs and outputs use SI base units (metres, metres/second).

Uses routines and computations derived from software provided by SOFA
under license. Does not itself constitute software provided by and/or
endorsed by SOFA.
"""

from __future__ import annotations

import logging

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from loxjax.config import get_dtype
from loxjax.constants import OMEGA_EARTH
from loxjax.eop import as_eop_provider
from loxjax.errors import MissingEopProvider, MissingProvider, ProviderOutOfRange
from loxjax.frames.iers import (
    cio_locator,
    cip_coords,
    earth_rotation_angle,
    pole_coords,
    polar_motion_matrix,
    to_scale,
)
from loxjax.rotations import Rotation, Rz
from loxjax.time import Time, TimeScale, Utc

logger = logging.getLogger(__name__)


def _require_eop(eop, step: str):
    provider = as_eop_provider(eop)
    if provider is None:
        raise MissingEopProvider(f"{step} requires EOP data; pass zero_eop() to ignore Earth orientation")
    return provider


def _out_of_range(exc: ProviderOutOfRange, step: str) -> ProviderOutOfRange:
    return ProviderOutOfRange(exc.mjd, exc.mjd_min, exc.mjd_max, context=step)


# ---------------------------------------------------------------------------
# Individual steps
# ---------------------------------------------------------------------------


def icrf_to_cirf(time: Time | Utc, eop=None) -> Rotation:
    """Bias-precession-nutation rotation (ICRF -> CIRF).

    X, Y and s follow the IAU 2006/2000A model; s is evaluated from the
    model X, Y before the EOP offsets dX, dY are added.  Without EOP data
    the offsets are taken as zero.

    Args:
        time: Instant of evaluation.
        eop: EOP provider or table. Optional.

    Returns:
        Rotation: Time-invariant rotation (``dm = 0``).

    Raises:
        ProviderOutOfRange: If *eop* has no data for the instant.
    """
    provider = as_eop_provider(eop)
    try:
        xy = cip_coords(time, provider)
        s = cio_locator(time, xy, provider)
        if provider is not None:
            xy = xy + provider.cip_corrections(to_scale(time, TimeScale.TAI, provider))
    except ProviderOutOfRange as exc:
        raise _out_of_range(exc, "ICRF -> CIRF") from exc
    return Rotation.from_matrix(xy.celestial_to_intermediate_matrix(s))


def cirf_to_tirf(time: Time | Utc, eop=None) -> Rotation:
    """Earth rotation (CIRF -> TIRF).

    ``Rz(ERA)`` with angular velocity ``(0, 0, OMEGA_EARTH)``.

    Args:
        time: Instant of evaluation.
        eop: EOP provider or table for UT1. Not needed for UT1 instants.

    Raises:
        MissingEopProvider: If UT1 is needed and *eop* is None.
        ProviderOutOfRange: If *eop* has no data for the instant.
    """
    provider = as_eop_provider(eop)
    try:
        era = earth_rotation_angle(time, provider)
    except MissingProvider as exc:
        raise MissingEopProvider("CIRF -> TIRF requires EOP data for UT1") from exc
    except ProviderOutOfRange as exc:
        raise _out_of_range(exc, "CIRF -> TIRF") from exc
    dtype = get_dtype()
    return Rotation.from_angular_velocity(Rz(era), jnp.array([0.0, 0.0, OMEGA_EARTH], dtype=dtype))


def tirf_to_itrf(time: Time | Utc, eop=None) -> Rotation:
    """Polar motion (TIRF -> ITRF).

    Raises:
        MissingEopProvider: If *eop* is None.
        ProviderOutOfRange: If *eop* has no data for the instant.
    """
    provider = _require_eop(eop, "TIRF -> ITRF")
    try:
        pole = pole_coords(time, provider)
        m = polar_motion_matrix(time, pole, provider)
    except ProviderOutOfRange as exc:
        raise _out_of_range(exc, "TIRF -> ITRF") from exc
    return Rotation.from_matrix(m)


def cirf_to_icrf(time: Time | Utc, eop=None) -> Rotation:
    return icrf_to_cirf(time, eop).transpose()


def tirf_to_cirf(time: Time | Utc, eop=None) -> Rotation:
    return cirf_to_tirf(time, eop).transpose()


def itrf_to_tirf(time: Time | Utc, eop=None) -> Rotation:
    return tirf_to_itrf(time, eop).transpose()


# ---------------------------------------------------------------------------
# Combined transformations
# ---------------------------------------------------------------------------


def icrf_to_itrf(time: Time | Utc, eop=None) -> Rotation:
    """Full rotation from ICRF to ITRF, ``PM @ ER @ BPN``.

    Args:
        time: Instant of evaluation.
        eop: EOP provider or table.

    Returns:
        Rotation: Matrix and derivative for position and velocity.

    Raises:
        MissingEopProvider: If *eop* is None.

    Examples:
        ```python
        from loxjax.eop import zero_eop
        from loxjax.frames import icrf_to_itrf
        from loxjax.time import Utc

        rot = icrf_to_itrf(Utc.from_iso("2024-01-01T00:00:00"), zero_eop())
        r_itrf, v_itrf = rot.rotate_state([7000e3, 0.0, 0.0], [0.0, 7.5e3, 0.0])
        ```
    """
    provider = _require_eop(eop, "ICRF -> ITRF")
    logger.debug("Computing ICRF -> ITRF rotation at %s", time)
    return (
        icrf_to_cirf(time, provider)
        .compose(cirf_to_tirf(time, provider))
        .compose(tirf_to_itrf(time, provider))
    )


def itrf_to_icrf(time: Time | Utc, eop=None) -> Rotation:
    """Full rotation from ITRF to ICRF, the transpose of :func:`icrf_to_itrf`."""
    return icrf_to_itrf(time, eop).transpose()


def state_icrf_to_itrf(time: Time | Utc, x_icrf: ArrayLike, eop=None) -> Array:
    """Transform a 6-element state vector from ICRF to ITRF.

    Args:
        time: Instant of evaluation.
        x_icrf: State ``[x, y, z, vx, vy, vz]``. Units: m, m/s.
        eop: EOP provider or table.

    Returns:
        6-element ITRF state. Units: m, m/s.
    """
    return icrf_to_itrf(time, eop).apply_state(x_icrf)


def state_itrf_to_icrf(time: Time | Utc, x_itrf: ArrayLike, eop=None) -> Array:
    """Transform a 6-element state vector from ITRF to ICRF.

    Args:
        time: Instant of evaluation.
        x_itrf: State ``[x, y, z, vx, vy, vz]``. Units: m, m/s.
        eop: EOP provider or table.

    Returns:
        6-element ICRF state. Units: m, m/s.
    """
    return itrf_to_icrf(time, eop).apply_state(x_itrf)
