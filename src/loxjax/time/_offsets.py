"""Analytical offsets between the continuous time scales.

Each function takes the instant as a :class:`~loxjax.time.TimeDelta` since
J2000 on the *origin* scale and returns ``target - origin`` as a
:class:`~loxjax.time.TimeDelta`.  The small linear and periodic terms are
evaluated in double precision on offsets relative to the 1977 epoch, which
keeps the result well below a nanosecond in error.

References:

    1. G. Petit and B. Luzum, *IERS Conventions (2010)*, IERS Technical Note 36, ch. 10.
    2. IAU 2006 Resolution B3, re-definition of Barycentric Dynamical Time.
    3. G. H. Kaplan, *The IAU Resolutions on Astronomical Reference Systems,
       Time Scales, and Earth Rotation Models*, USNO Circular 179, 2005, eq. 2.6.
"""

from __future__ import annotations

import math

from loxjax.constants import SECONDS_PER_JULIAN_CENTURY
from loxjax.time._deltas import TimeDelta
from loxjax.time._scales import TimeScale

# TT - TAI offset in seconds (constant by definition)
TT_TAI: float = 32.184

D_TAI_TT = TimeDelta(32, 184_000_000_000_000_000)
"""TT - TAI as an exact delta."""

LG: float = 6.969290134e-10
"""Rate of TCG relative to TT."""

INV_LG: float = LG / (1.0 - LG)

LB: float = 1.550519768e-8
"""Rate of TCB relative to TDB."""

INV_LB: float = LB / (1.0 - LB)

TDB_0: float = -6.55e-5
"""TDB - TCB at the 1977 epoch. Units: *s*"""

J77 = TimeDelta(-725803168, 184_000_000_000_000_000)
"""1977-01-01T00:00:32.184 on TT/TCG/TDB/TCB, -725803167.816 s from J2000."""

# Periodic TDB - TT series: (amplitude [s], frequency [rad/century], phase [rad])
_TDB_TT_TERMS = (
    (0.001657, 628.3076, 6.2401),
    (0.000022, 575.3385, 4.2970),
    (0.000014, 1256.6152, 6.1969),
    (0.000005, 606.9777, 4.0212),
    (0.000005, 52.9691, 0.4444),
    (0.000002, 21.3299, 5.5431),
)
# Mixed secular term: amplitude * T * sin(...)
_TDB_TT_T_TERM = (0.000010, 628.3076, 4.2490)

_TDB_TT_ITERATIONS = 3


def _since_j77(delta: TimeDelta) -> float:
    return (delta - J77).to_seconds_f64()


def tdb_minus_tt(tt: TimeDelta) -> float:
    """Periodic difference TDB - TT in seconds at the given TT instant.

    Terms are summed smallest first.

    Args:
        tt (TimeDelta): TT seconds since J2000.

    Returns:
        float: TDB - TT [s]; ``nan`` for non-finite input.
    """
    t = tt.to_seconds_f64() / SECONDS_PER_JULIAN_CENTURY
    if not math.isfinite(t):
        return math.nan
    amplitude, frequency, phase = _TDB_TT_T_TERM
    total = amplitude * t * math.sin(frequency * t + phase)
    for amplitude, frequency, phase in reversed(_TDB_TT_TERMS):
        total += amplitude * math.sin(math.fmod(frequency * t + phase, 2.0 * math.pi))
    return total


def tai_to_tt(tai: TimeDelta) -> TimeDelta:
    return D_TAI_TT


def tt_to_tai(tt: TimeDelta) -> TimeDelta:
    return -D_TAI_TT


def tt_to_tcg(tt: TimeDelta) -> TimeDelta:
    return TimeDelta.from_seconds_f64(INV_LG * _since_j77(tt))


def tcg_to_tt(tcg: TimeDelta) -> TimeDelta:
    return TimeDelta.from_seconds_f64(-LG * _since_j77(tcg))


def tt_to_tdb(tt: TimeDelta) -> TimeDelta:
    return TimeDelta.from_seconds_f64(tdb_minus_tt(tt))


def tdb_to_tt(tdb: TimeDelta) -> TimeDelta:
    """Invert :func:`tdb_minus_tt` by fixed-point iteration on the TT instant."""
    tt = tdb
    offset = 0.0
    for _ in range(_TDB_TT_ITERATIONS):
        offset = tdb_minus_tt(tt)
        tt = tdb - TimeDelta.from_seconds_f64(offset)
    return TimeDelta.from_seconds_f64(-offset)


def tdb_to_tcb(tdb: TimeDelta) -> TimeDelta:
    return TimeDelta.from_seconds_f64(INV_LB * _since_j77(tdb) - TDB_0 / (1.0 - LB))


def tcb_to_tdb(tcb: TimeDelta) -> TimeDelta:
    return TimeDelta.from_seconds_f64(-LB * _since_j77(tcb) + TDB_0)


_HOPS = {
    (TimeScale.TAI, TimeScale.TT): tai_to_tt,
    (TimeScale.TT, TimeScale.TAI): tt_to_tai,
    (TimeScale.TT, TimeScale.TCG): tt_to_tcg,
    (TimeScale.TCG, TimeScale.TT): tcg_to_tt,
    (TimeScale.TT, TimeScale.TDB): tt_to_tdb,
    (TimeScale.TDB, TimeScale.TT): tdb_to_tt,
    (TimeScale.TDB, TimeScale.TCB): tdb_to_tcb,
    (TimeScale.TCB, TimeScale.TDB): tcb_to_tdb,
}


def hop_offset(origin: TimeScale, target: TimeScale, delta: TimeDelta) -> TimeDelta:
    """Offset ``target - origin`` across a single analytical edge of the scale graph.

    Raises:
        KeyError: If the pair is not an analytical edge (e.g. involves UT1).
    """
    return _HOPS[(origin, target)](delta)
