"""Containers for IERS Earth Orientation Parameters (EOP).

- :class:`EOPData`: immutable table of sorted EOP arrays, interpolated with
  ``jnp.searchsorted`` by :mod:`loxjax.eop._lookup`.
- :class:`EOPExtrapolation`: behaviour of lookups outside the tabulated
  window.

``EOPData`` is a :class:`~typing.NamedTuple`, so JAX treats it as a pytree
and it can be passed straight through ``jax.jit`` and ``jax.vmap``.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

from jax import Array


class EOPData(NamedTuple):
    """Tabulated Earth Orientation Parameters keyed by UTC Modified Julian Date.

    Optional columns (dX, dY, lod) are NaN where the source has no value,
    typically in the prediction part of a ``finals`` file.

    Attributes:
        mjd: Sorted UTC Modified Julian Dates, shape ``(N,)``.
        pm_x: Polar motion x [rad], shape ``(N,)``.
        pm_y: Polar motion y [rad], shape ``(N,)``.
        ut1_utc: UT1 - UTC [s], shape ``(N,)``.
        dX: CIP offset X w.r.t. IAU 2006/2000A [rad], shape ``(N,)``.
        dY: CIP offset Y w.r.t. IAU 2006/2000A [rad], shape ``(N,)``.
        lod: Excess length of day [s], shape ``(N,)``.
        mjd_min: First MJD of the table.
        mjd_max: Last MJD of the table.
        mjd_last_lod: Last MJD with a valid LOD value.
        mjd_last_dxdy: Last MJD with valid dX/dY values.
    """

    mjd: Array
    pm_x: Array
    pm_y: Array
    ut1_utc: Array
    dX: Array
    dY: Array
    lod: Array
    mjd_min: Array
    mjd_max: Array
    mjd_last_lod: Array
    mjd_last_dxdy: Array


class EOPExtrapolation(enum.Enum):
    """Lookup behaviour outside ``[mjd_min, mjd_max]``.

    Resolved at trace time, so it may be passed to jitted lookups as a
    static argument.

    Attributes:
        HOLD: Clamp to the nearest boundary value.
        ZERO: Return zero.
        LINEAR: Extend the first or last tabulated segment.
    """

    HOLD = "hold"
    ZERO = "zero"
    LINEAR = "linear"
