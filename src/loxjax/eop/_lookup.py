"""Interpolation of tabulated EOP values.

All functions use only JAX primitives (``jnp.searchsorted``, indexing and
``jnp.where``) and can be traced by ``jax.jit`` and ``jax.vmap``.  The
``extrapolation`` argument is resolved at trace time.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from loxjax.eop._types import EOPData, EOPExtrapolation


def _interpolate_scalar(
    eop: EOPData,
    mjd: Array,
    values: Array,
    extrapolation: EOPExtrapolation = EOPExtrapolation.HOLD,
    remove_steps: bool = False,
) -> Array:
    """Linearly interpolate one EOP column at *mjd*.

    The bracketing segment is always a pair of neighbouring rows, so
    ``LINEAR`` extrapolation extends the first or last segment.

    Args:
        eop: EOP table with sorted MJDs.
        mjd: Scalar UTC MJD.
        values: Column to interpolate, shape ``(N,)``.
        extrapolation: Behaviour outside the table.
        remove_steps: Remove whole-second steps between daily rows before
            interpolating (UT1 - UTC jumps by one second at a leap second).
            The returned value then follows the earlier row's offset for
            the whole day.

    Returns:
        Interpolated scalar.
    """
    n = eop.mjd.shape[0]

    idx = jnp.searchsorted(eop.mjd, mjd, side="right")
    idx_lo = jnp.clip(idx - 1, 0, max(n - 2, 0))
    idx_hi = jnp.minimum(idx_lo + 1, n - 1)

    mjd_lo = eop.mjd[idx_lo]
    mjd_hi = eop.mjd[idx_hi]
    val_lo = values[idx_lo]
    val_hi = values[idx_hi]

    dmjd = mjd_hi - mjd_lo
    if remove_steps:
        step = jnp.where((dmjd > 0.0) & (dmjd <= 1.0), jnp.round(val_hi - val_lo), 0.0)
        val_hi = val_hi - step

    frac = jnp.where(dmjd > 0.0, (mjd - mjd_lo) / jnp.where(dmjd > 0.0, dmjd, 1.0), 0.0)
    if extrapolation != EOPExtrapolation.LINEAR:
        frac = jnp.clip(frac, 0.0, 1.0)
    interpolated = val_lo + frac * (val_hi - val_lo)

    if extrapolation == EOPExtrapolation.ZERO:
        in_range = (mjd >= eop.mjd_min) & (mjd <= eop.mjd_max)
        return jnp.where(in_range, interpolated, 0.0)
    return interpolated


def get_ut1_utc(
    eop: EOPData,
    mjd: ArrayLike,
    extrapolation: EOPExtrapolation = EOPExtrapolation.HOLD,
) -> Array:
    """UT1 - UTC at a UTC MJD.

    Leap-second steps between daily rows are removed before interpolation,
    so the result is continuous within each UTC day.

    Args:
        eop: EOP table.
        mjd: UTC Modified Julian Date.
        extrapolation: Behaviour outside the table.

    Returns:
        UT1 - UTC [s].

    Examples:
        ```python
        from loxjax.eop import zero_eop, get_ut1_utc
        ut1_utc = get_ut1_utc(zero_eop(), 59569.0)
        ```
    """
    mjd = jnp.asarray(mjd, dtype=eop.mjd.dtype)
    return _interpolate_scalar(eop, mjd, eop.ut1_utc, extrapolation, remove_steps=True)


def get_pm(
    eop: EOPData,
    mjd: ArrayLike,
    extrapolation: EOPExtrapolation = EOPExtrapolation.HOLD,
) -> tuple[Array, Array]:
    """Polar motion (x_p, y_p) [rad] at a UTC MJD."""
    mjd = jnp.asarray(mjd, dtype=eop.mjd.dtype)
    pm_x = _interpolate_scalar(eop, mjd, eop.pm_x, extrapolation)
    pm_y = _interpolate_scalar(eop, mjd, eop.pm_y, extrapolation)
    return pm_x, pm_y


def get_dxdy(
    eop: EOPData,
    mjd: ArrayLike,
    extrapolation: EOPExtrapolation = EOPExtrapolation.HOLD,
) -> tuple[Array, Array]:
    """CIP offsets (dX, dY) [rad] at a UTC MJD.

    Values are NaN where the table has no offsets (e.g. far predictions).
    """
    mjd = jnp.asarray(mjd, dtype=eop.mjd.dtype)
    dx = _interpolate_scalar(eop, mjd, eop.dX, extrapolation)
    dy = _interpolate_scalar(eop, mjd, eop.dY, extrapolation)
    return dx, dy


def get_lod(
    eop: EOPData,
    mjd: ArrayLike,
    extrapolation: EOPExtrapolation = EOPExtrapolation.HOLD,
) -> Array:
    """Excess length of day [s] at a UTC MJD; NaN where not tabulated."""
    mjd = jnp.asarray(mjd, dtype=eop.mjd.dtype)
    return _interpolate_scalar(eop, mjd, eop.lod, extrapolation)


def get_eop(
    eop: EOPData,
    mjd: ArrayLike,
    extrapolation: EOPExtrapolation = EOPExtrapolation.HOLD,
) -> tuple[Array, Array, Array, Array, Array, Array]:
    """All EOP values at a UTC MJD.

    Returns:
        Tuple of (pm_x, pm_y, ut1_utc, lod, dX, dY).
        Units: pm_x/pm_y [rad], ut1_utc [s], lod [s], dX/dY [rad].
    """
    pm_x, pm_y = get_pm(eop, mjd, extrapolation)
    dx, dy = get_dxdy(eop, mjd, extrapolation)
    return pm_x, pm_y, get_ut1_utc(eop, mjd, extrapolation), get_lod(eop, mjd, extrapolation), dx, dy
