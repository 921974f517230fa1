"""JAX versions of the IAU SOFA routines behind the Earth orientation models.

Covers the IAU 2006/2000A CIO-based chain (CIP X, Y, CIO locator s, Earth
rotation angle, TIO locator s', polar motion), the equinox-based sidereal
times and equations of the equinoxes, the IAU 1980, 2000B and 2006A nutation
models and the fundamental arguments they are built on.  Uses
routines and computations derived from software provided by SOFA under
license to the user. Does not itself constitute software provided by
and/or endorsed by SOFA.

Dates are passed as two-part Julian Dates ``(date1, date2)`` as in SOFA,
fundamental arguments take TDB Julian centuries since J2000.0.  Series are
accumulated from the smallest terms upwards with ``jax.lax.scan`` and every
argument is reduced modulo 2*pi (keeping its sign) before the trigonometry.

All functions respect :func:`~loxjax.config.get_dtype` for float precision.
The full IAU 2000A series is evaluated by ERFA (:func:`erfa.nut00a`) and is
therefore not traceable by ``jax.jit``.
"""

from __future__ import annotations

import erfa
import jax
import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.typing import ArrayLike

from loxjax._sofa_nutation_data import (
    CIO_LOCATOR_POLYNOMIAL,
    CIO_LOCATOR_TERMS,
    EQUINOX_COMPLEMENTARY_TERMS,
    EQUINOX_COMPLEMENTARY_TERMS_T,
    LUNI_SOLAR_2000B_COEFFS,
    NUTATION_1980_COEFFS,
)
from loxjax.config import get_dtype
from loxjax.rotations import Rx, Ry, Rz
from loxjax.utils import mod_two_pi, mod_two_pi_signed, normalize_two_pi

DJ00: float = 2451545.0
"""Julian Date of J2000.0."""

DJC: float = 36525.0
"""Days per Julian century."""

DAS2R: float = 4.848136811095359935899141e-6
"""Arcseconds to radians."""

D2PI: float = 6.283185307179586476925287
"""2*pi."""

TURNAS: float = 1296000.0
"""Arcseconds in a full circle."""

MJD_ZERO: float = 2400000.5
"""Julian Date of MJD zero-point."""

DAYSEC: float = 86400.0
"""Seconds per day."""

DS2R: float = 7.272205216643039903848712e-5
"""Seconds of time to radians."""

# 0.1 microarcsecond to radians
_U2R: float = DAS2R / 1e7

# 0.1 milliarcsecond to radians
_U2R_1980: float = DAS2R / 1e4

# IAU 2000B fixed offsets standing in for the planetary terms [rad]
_DPPLAN: float = -0.135e-3 * DAS2R
_DEPLAN: float = 0.388e-3 * DAS2R


def _centuries(date1: ArrayLike, date2: ArrayLike) -> Array:
    return jnp.asarray(((date1 - DJ00) + date2) / DJC, dtype=get_dtype())


def _poly(t: ArrayLike, coeffs: tuple[float, ...]) -> Array:
    # Horner evaluation, coefficients in ascending powers of t
    result = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        result = c + t * result
    return result


def _arcsec_angle(t: ArrayLike, coeffs: tuple[float, ...]) -> Array:
    return jnp.fmod(_poly(t, coeffs), TURNAS) * DAS2R


def _radian_angle(t: ArrayLike, coeffs: tuple[float, ...]) -> Array:
    return mod_two_pi_signed(_poly(t, coeffs))


def _fold_ascending(multipliers: Array, fundamentals: Array, sin_amp: Array, cos_amp: Array) -> Array:
    """Sum ``sin_amp * sin(arg) + cos_amp * cos(arg)`` from the last row to the first.

    Tables are ordered by descending magnitude, so the scan adds the small
    terms first.

    Args:
        multipliers: Integer argument multipliers, shape ``(N, K)``.
        fundamentals: Fundamental arguments [rad], shape ``(K,)``.
        sin_amp: Sine amplitudes, shape ``(N, M)``.
        cos_amp: Cosine amplitudes, shape ``(N, M)``.

    Returns:
        Sums of shape ``(M,)``.
    """

    def step(acc, row):
        nfa, s, c = row
        arg = mod_two_pi_signed(nfa @ fundamentals)
        return acc + s * jnp.sin(arg) + c * jnp.cos(arg), None

    init = jnp.zeros(sin_amp.shape[1:], dtype=sin_amp.dtype)
    total, _ = jax.lax.scan(step, init, (multipliers, sin_amp, cos_amp), reverse=True)
    return total


# ---------------------------------------------------------------------------
# Fundamental arguments (IERS Conventions 2003)
# ---------------------------------------------------------------------------

_L_03 = (485868.249036, 1717915923.2178, 31.8792, 0.051635, -0.00024470)
_LP_03 = (1287104.793048, 129596581.0481, -0.5532, 0.000136, -0.00001149)
_F_03 = (335779.526232, 1739527262.8478, -12.7512, -0.001037, 0.00000417)
_D_03 = (1072260.703692, 1602961601.2090, -6.3706, 0.006593, -0.00003169)
_OM_03 = (450160.398036, -6962890.5431, 7.4722, 0.007702, -0.00005939)

# Planetary mean longitudes [rad, rad/century]
_ME_03 = (4.402608842, 2608.7903141574)
_VE_03 = (3.176146697, 1021.3285546211)
_E_03 = (1.753470314, 628.3075849991)
_MA_03 = (6.203480913, 334.0612426700)
_JU_03 = (0.599546497, 52.9690962641)
_SA_03 = (0.874016757, 21.3299104960)
_UR_03 = (5.481293872, 7.4781598567)
_NE_03 = (5.311886287, 3.8133035638)


def fal03(t: ArrayLike) -> Array:
    """Mean anomaly of the Moon, l (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        l in radians.
    """
    return _arcsec_angle(t, _L_03)


def falp03(t: ArrayLike) -> Array:
    """Mean anomaly of the Sun, l' (IERS 2003)."""
    return _arcsec_angle(t, _LP_03)


def faf03(t: ArrayLike) -> Array:
    """Mean longitude of the Moon minus that of its ascending node, F (IERS 2003)."""
    return _arcsec_angle(t, _F_03)


def fad03(t: ArrayLike) -> Array:
    """Mean elongation of the Moon from the Sun, D (IERS 2003)."""
    return _arcsec_angle(t, _D_03)


def faom03(t: ArrayLike) -> Array:
    """Mean longitude of the Moon's ascending node, Omega (IERS 2003)."""
    return _arcsec_angle(t, _OM_03)


def fame03(t: ArrayLike) -> Array:
    """Mean longitude of Mercury (IERS 2003)."""
    return _radian_angle(t, _ME_03)


def fave03(t: ArrayLike) -> Array:
    """Mean longitude of Venus (IERS 2003)."""
    return _radian_angle(t, _VE_03)


def fae03(t: ArrayLike) -> Array:
    """Mean longitude of Earth (IERS 2003)."""
    return _radian_angle(t, _E_03)


def fama03(t: ArrayLike) -> Array:
    """Mean longitude of Mars (IERS 2003)."""
    return _radian_angle(t, _MA_03)


def faju03(t: ArrayLike) -> Array:
    """Mean longitude of Jupiter (IERS 2003)."""
    return _radian_angle(t, _JU_03)


def fasa03(t: ArrayLike) -> Array:
    """Mean longitude of Saturn (IERS 2003)."""
    return _radian_angle(t, _SA_03)


def faur03(t: ArrayLike) -> Array:
    """Mean longitude of Uranus (IERS 2003)."""
    return _radian_angle(t, _UR_03)


def fane03(t: ArrayLike) -> Array:
    """Mean longitude of Neptune (IERS 2003)."""
    return _radian_angle(t, _NE_03)


def fapa03(t: ArrayLike) -> Array:
    """General accumulated precession in longitude, p_A (IERS 2003).

    Not reduced modulo 2*pi; the value stays small over the model's range.
    """
    return _poly(t, (0.0, 0.024381750, 0.00000538691))


# ---------------------------------------------------------------------------
# Fundamental arguments (Simon et al. 1994)
# ---------------------------------------------------------------------------

# Linear terms only, as used by the IAU 2000B nutation model [arcsec]


def fal_simon94(t: ArrayLike) -> Array:
    """Mean anomaly of the Moon (Simon et al. 1994)."""
    return _arcsec_angle(t, (485868.249036, 1717915923.2178))


def falp_simon94(t: ArrayLike) -> Array:
    """Mean anomaly of the Sun (Simon et al. 1994)."""
    return _arcsec_angle(t, (1287104.79305, 129596581.0481))


def faf_simon94(t: ArrayLike) -> Array:
    """Mean argument of latitude of the Moon (Simon et al. 1994)."""
    return _arcsec_angle(t, (335779.526232, 1739527262.8478))


def fad_simon94(t: ArrayLike) -> Array:
    """Mean elongation of the Moon from the Sun (Simon et al. 1994)."""
    return _arcsec_angle(t, (1072260.70369, 1602961601.2090))


def faom_simon94(t: ArrayLike) -> Array:
    """Mean longitude of the Moon's ascending node (Simon et al. 1994)."""
    return _arcsec_angle(t, (450160.398036, -6962890.5431))


# ---------------------------------------------------------------------------
# Fundamental arguments (MHB 2000)
# ---------------------------------------------------------------------------


def fad_mhb2000_luni_solar(t: ArrayLike) -> Array:
    """Mean elongation of the Moon from the Sun, luni-solar series (MHB 2000)."""
    return _arcsec_angle(t, (1072260.70369, 1602961601.2090, -6.3706, 0.006593, -0.00003169))


def fad_mhb2000_planetary(t: ArrayLike) -> Array:
    """Mean elongation of the Moon from the Sun, planetary series (MHB 2000)."""
    return _radian_angle(t, (5.198466741, 7771.3771468121))


def falp_mhb2000(t: ArrayLike) -> Array:
    """Mean anomaly of the Sun (MHB 2000)."""
    return _arcsec_angle(t, (1287104.79305, 129596581.0481, -0.5532, 0.000136, -0.00001149))


def fal_mhb2000(t: ArrayLike) -> Array:
    """Mean anomaly of the Moon, planetary series (MHB 2000)."""
    return _radian_angle(t, (2.35555598, 8328.6914269554))


def faf_mhb2000(t: ArrayLike) -> Array:
    """Mean argument of latitude of the Moon, planetary series (MHB 2000)."""
    return _radian_angle(t, (1.627905234, 8433.466158131))


def faom_mhb2000(t: ArrayLike) -> Array:
    """Mean longitude of the Moon's ascending node, planetary series (MHB 2000)."""
    return _radian_angle(t, (2.18243920, -33.757045))


def fane_mhb2000(t: ArrayLike) -> Array:
    """Mean longitude of Neptune (MHB 2000)."""
    return _radian_angle(t, (5.3211590, 3.81277740))


# ---------------------------------------------------------------------------
# Precession
# ---------------------------------------------------------------------------

_OBLIQUITY_06 = (84381.406, -46.836769, -0.0001831, 0.00200340, -0.000000576, -0.0000000434)
_GAMB_06 = (-0.052928, 10.556378, 0.4932044, -0.00031238, -0.000002788, 0.0000000260)
_PHIB_06 = (84381.412819, -46.811016, 0.0511268, 0.00053289, -0.000000440, -0.0000000176)
_PSIB_06 = (-0.041775, 5038.481484, 1.5584175, -0.00018522, -0.000026452, -0.0000000148)

_OBLIQUITY_80 = (84381.448, -46.8150, -0.00059, 0.001813)

# IAU 2000 corrections to the IAU 1976 precession rates [rad/century]
_PRECOR = -0.29965 * DAS2R
_OBLCOR = -0.02524 * DAS2R


def obl06(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic, IAU 2006 precession.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Obliquity of the ecliptic in radians.
    """
    return _poly(_centuries(date1, date2), _OBLIQUITY_06) * DAS2R


def obl80(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic, IAU 1980 model [rad]."""
    return _poly(_centuries(date1, date2), _OBLIQUITY_80) * DAS2R


def pr00(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Precession-rate part of the IAU 2000 precession-nutation models.

    Returns:
        Tuple of (dpsipr, depspr), the corrections to the IAU 1976
        precession in longitude and obliquity [rad].
    """
    t = _centuries(date1, date2)
    return _PRECOR * t, _OBLCOR * t


def pfw06(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array, Array, Array]:
    """Precession angles, IAU 2006, Fukushima-Williams 4-angle formulation.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (gamb, phib, psib, epsa) in radians.
    """
    t = _centuries(date1, date2)
    gamb = _poly(t, _GAMB_06) * DAS2R
    phib = _poly(t, _PHIB_06) * DAS2R
    psib = _poly(t, _PSIB_06) * DAS2R
    return gamb, phib, psib, obl06(date1, date2)


def fw2m(gamb: ArrayLike, phib: ArrayLike, psi: ArrayLike, eps: ArrayLike) -> Array:
    """Fukushima-Williams angles to rotation matrix.

    ``NxPxB = R_1(-eps) . R_3(-psi) . R_1(phib) . R_3(gamb)``
    """
    return Rx(-eps) @ Rz(-psi) @ Rx(phib) @ Rz(gamb)


# ---------------------------------------------------------------------------
# Nutation
# ---------------------------------------------------------------------------

# Longitude of the Moon's ascending node, IAU 1980 [arcsec]
_OM_80 = (450160.280, -482890.539, 7.455, 0.008)


def _angle_1980(t: ArrayLike, coeffs: tuple[float, ...], revolutions: float) -> Array:
    # Polynomial part plus whole revolutions per century, wrapped to [-pi, pi)
    return normalize_two_pi(_poly(t, coeffs) * DAS2R + jnp.fmod(revolutions * t, 1.0) * D2PI)


def nut00a(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 2000A model (MHB2000 luni-solar and planetary).

    The 678 luni-solar and 687 planetary terms are evaluated by ERFA.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (dpsi, deps) nutation in longitude and obliquity [radians].
    """
    dtype = get_dtype()
    dpsi, deps = erfa.nut00a(np.asarray(date1, dtype=np.float64), np.asarray(date2, dtype=np.float64))
    return jnp.asarray(dpsi, dtype=dtype), jnp.asarray(deps, dtype=dtype)


def nut00b(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 2000B model.

    77 luni-solar terms in the Simon et al. (1994) arguments plus fixed
    offsets in place of the planetary series.  Agrees with IAU 2000A to
    better than 1 mas between 1995 and 2050.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (dpsi, deps) nutation in longitude and obliquity [radians].
    """
    dtype = get_dtype()
    t = _centuries(date1, date2)

    fa = jnp.stack([fal_simon94(t), falp_simon94(t), faf_simon94(t), fad_simon94(t), faom_simon94(t)])

    c = jnp.array(LUNI_SOLAR_2000B_COEFFS, dtype=dtype)
    sin_amp = jnp.stack([c[:, 5] + c[:, 6] * t, c[:, 10]], axis=1)
    cos_amp = jnp.stack([c[:, 7], c[:, 8] + c[:, 9] * t], axis=1)
    total = _fold_ascending(c[:, :5], fa, sin_amp, cos_amp) * _U2R

    return total[0] + _DPPLAN, total[1] + _DEPLAN


def nut06a(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 2006/2000A.

    IAU 2000A nutation with the adjustments for the IAU 2006 precession
    (Wallace & Capitaine 2006): the J2 secular change and the
    precession-rate consistency factor.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (dpsi, deps) nutation in longitude and obliquity [radians].
    """
    fj2 = -2.7774e-6 * _centuries(date1, date2)
    dp, de = nut00a(date1, date2)
    return dp + dp * (0.4697e-6 + fj2), de + de * fj2


def nut80(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 1980 model (106 terms).

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (dpsi, deps) nutation in longitude and obliquity [radians].
    """
    dtype = get_dtype()
    t = _centuries(date1, date2)

    fa = jnp.stack([
        _angle_1980(t, (485866.733, 715922.633, 31.310, 0.064), 1325.0),
        _angle_1980(t, (1287099.804, 1292581.224, -0.577, -0.012), 99.0),
        _angle_1980(t, (335778.877, 295263.137, -13.257, 0.011), 1342.0),
        _angle_1980(t, (1072261.307, 1105601.328, -6.891, 0.019), 1236.0),
        _angle_1980(t, _OM_80, -5.0),
    ])

    c = jnp.array(NUTATION_1980_COEFFS, dtype=dtype)
    zero = jnp.zeros_like(c[:, 5])
    sin_amp = jnp.stack([c[:, 5] + c[:, 6] * t, zero], axis=1)
    cos_amp = jnp.stack([zero, c[:, 7] + c[:, 8] * t], axis=1)
    total = _fold_ascending(c[:, :5], fa, sin_amp, cos_amp) * _U2R_1980

    return total[0], total[1]


def numat(epsa: ArrayLike, dpsi: ArrayLike, deps: ArrayLike) -> Array:
    """Nutation matrix from the mean obliquity and the nutation components.

    Returns:
        3x3 matrix ``R_1(-(epsa + deps)) . R_3(-dpsi) . R_1(epsa)``.
    """
    return Rx(-(epsa + deps)) @ Rz(-dpsi) @ Rx(epsa)


# ---------------------------------------------------------------------------
# CIP and CIO
# ---------------------------------------------------------------------------


def pnm06a(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Bias-precession-nutation matrix, IAU 2006/2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 GCRS-to-true matrix.
    """
    gamb, phib, psib, epsa = pfw06(date1, date2)
    dpsi, deps = nut06a(date1, date2)
    return fw2m(gamb, phib, psib + dpsi, epsa + deps)


def bpn2xy(rbpn: Array) -> tuple[Array, Array]:
    """CIP X, Y coordinates: the bottom row of the BPN matrix."""
    return rbpn[2, 0], rbpn[2, 1]


def s06(date1: ArrayLike, date2: ArrayLike, x: ArrayLike, y: ArrayLike) -> Array:
    """CIO locator s, IAU 2006 (compatible with IAU 2006/2000A).

    The series is for ``s + XY/2``; the product term is removed at the end.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        x: CIP X coordinate.
        y: CIP Y coordinate.

    Returns:
        CIO locator s in radians.
    """
    dtype = get_dtype()
    t = _centuries(date1, date2)

    fa = jnp.stack([fal03(t), falp03(t), faf03(t), fad03(t), faom03(t), fave03(t), fae03(t), fapa03(t)])

    # Coefficient of each power of t [uas]
    w = []
    for poly, terms in zip(CIO_LOCATOR_POLYNOMIAL, CIO_LOCATOR_TERMS + ((),)):
        if terms:
            nfa = jnp.array([row[0] for row in terms], dtype=dtype)
            sc = jnp.array([row[1:] for row in terms], dtype=dtype)
            poly = poly + _fold_ascending(nfa, fa, sc[:, :1], sc[:, 1:])[0]
        w.append(poly)

    return _poly(t, tuple(w)) * DAS2R * 1e-6 - x * y / 2.0


def xys06a(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array, Array]:
    """CIP X, Y coordinates and CIO locator s, IAU 2006/2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (x, y, s) in radians.
    """
    x, y = bpn2xy(pnm06a(date1, date2))
    return x, y, s06(date1, date2, x, y)


def c2ixys(x: ArrayLike, y: ArrayLike, s: ArrayLike) -> Array:
    """Celestial-to-intermediate matrix from CIP X, Y and the CIO locator s.

    ``Rz(-(e + s)) @ Ry(d) @ Rz(e)`` with ``e = atan2(y, x)`` and
    ``d = atan(sqrt(r2 / (1 - r2)))``, ``r2 = x^2 + y^2``.
    """
    r2 = x * x + y * y
    e = jnp.where(r2 > 0.0, jnp.arctan2(y, x), 0.0)
    d = jnp.arctan(jnp.sqrt(r2 / (1.0 - r2)))
    return Rz(-(e + s)) @ Ry(d) @ Rz(e)


# ---------------------------------------------------------------------------
# Earth rotation
# ---------------------------------------------------------------------------


def era00(dj1: ArrayLike, dj2: ArrayLike) -> Array:
    """Earth Rotation Angle (IAU 2000 model).

    Args:
        dj1: UT1 as 2-part Julian Date (part 1).
        dj2: UT1 as 2-part Julian Date (part 2).

    Returns:
        Earth Rotation Angle in radians, in ``[0, 2*pi)``.
    """
    t = dj1 + dj2 - DJ00
    f = jnp.fmod(dj1, 1.0) + jnp.fmod(dj2, 1.0)
    return mod_two_pi(D2PI * (f + 0.7790572732640 + 0.00273781191135448 * t))


def gmst06(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike) -> Array:
    """Greenwich mean sidereal time, consistent with IAU 2006 precession.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        Greenwich mean sidereal time in radians, in ``[0, 2*pi)``.
    """
    t = _centuries(tta, ttb)
    poly = _poly(t, (0.014506, 4612.156534, 1.3915817, -0.00000044, -0.000029956, -0.0000000368))
    return mod_two_pi(era00(uta, utb) + poly * DAS2R)


# ---------------------------------------------------------------------------
# Sidereal time and the equation of the equinoxes
# ---------------------------------------------------------------------------

# IAU 1982 GMST - UT1 [s of time], ascending powers of t
_GMST_82 = (24110.54841 - DAYSEC / 2.0, 8640184.812866, 0.093104, -6.2e-6)


def gmst00(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike) -> Array:
    """Greenwich mean sidereal time, consistent with IAU 2000 resolutions.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        Greenwich mean sidereal time in radians, in ``[0, 2*pi)``.
    """
    t = _centuries(tta, ttb)
    poly = _poly(t, (0.014506, 4612.15739966, 1.39667721, -0.00009344, 0.00001882))
    return mod_two_pi(era00(uta, utb) + poly * DAS2R)


def gmst82(dj1: ArrayLike, dj2: ArrayLike) -> Array:
    """Greenwich mean sidereal time, IAU 1982 model.

    Args:
        dj1: UT1 as 2-part Julian Date (part 1).
        dj2: UT1 as 2-part Julian Date (part 2).

    Returns:
        Greenwich mean sidereal time in radians, in ``[0, 2*pi)``.
    """
    d1 = jnp.minimum(dj1, dj2)
    d2 = jnp.maximum(dj1, dj2)
    t = jnp.asarray((d1 + (d2 - DJ00)) / DJC, dtype=get_dtype())
    f = DAYSEC * (jnp.fmod(d1, 1.0) + jnp.fmod(d2, 1.0))
    return mod_two_pi(DS2R * (_poly(t, _GMST_82) + f))


def eect00(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Complementary terms of the equation of the equinoxes, IAU 2000.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Complementary terms [rad].
    """
    dtype = get_dtype()
    t = _centuries(date1, date2)

    fa = jnp.stack([fal03(t), falp03(t), faf03(t), fad03(t), faom03(t), fave03(t), fae03(t), fapa03(t)])

    def fold(terms):
        c = jnp.array(terms, dtype=dtype)
        return _fold_ascending(c[:, :8], fa, c[:, 8:9], c[:, 9:])[0]

    return (fold(EQUINOX_COMPLEMENTARY_TERMS) + fold(EQUINOX_COMPLEMENTARY_TERMS_T) * t) * DAS2R * 1e-6


def ee00(date1: ArrayLike, date2: ArrayLike, epsa: ArrayLike, dpsi: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 2000, for given nutation and obliquity.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        epsa: Mean obliquity [rad].
        dpsi: Nutation in longitude [rad].

    Returns:
        Equation of the equinoxes [rad].
    """
    return dpsi * jnp.cos(epsa) + eect00(date1, date2)


def _ee00_model(date1: ArrayLike, date2: ArrayLike, nutation) -> Array:
    _, depspr = pr00(date1, date2)
    epsa = obl80(date1, date2) + depspr
    dpsi, _ = nutation(date1, date2)
    return ee00(date1, date2, epsa, dpsi)


def ee00a(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 2000A precession-nutation [rad]."""
    return _ee00_model(date1, date2, nut00a)


def ee00b(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 2000B precession-nutation [rad]."""
    return _ee00_model(date1, date2, nut00b)


def eqeq94(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 1994 model.

    Args:
        date1: TDB as 2-part Julian Date (part 1).
        date2: TDB as 2-part Julian Date (part 2).

    Returns:
        Equation of the equinoxes [rad].
    """
    om = _angle_1980(_centuries(date1, date2), _OM_80, -5.0)
    dpsi, _ = nut80(date1, date2)
    eps0 = obl80(date1, date2)
    return dpsi * jnp.cos(eps0) + DAS2R * (0.00264 * jnp.sin(om) + 0.000063 * jnp.sin(om + om))


def eors(rnpb: Array, s: ArrayLike) -> Array:
    """Equation of the origins, from the NPB matrix and the CIO locator [rad]."""
    x = rnpb[2, 0]
    ax = x / (1.0 + rnpb[2, 2])
    xs = 1.0 - ax * x
    ys = -ax * rnpb[2, 1]
    zs = -x
    p = rnpb[0, 0] * xs + rnpb[0, 1] * ys + rnpb[0, 2] * zs
    q = rnpb[1, 0] * xs + rnpb[1, 1] * ys + rnpb[1, 2] * zs
    return jnp.where((p != 0.0) | (q != 0.0), s - jnp.arctan2(q, p), s)


def gst00a(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike) -> Array:
    """Greenwich apparent sidereal time, IAU 2000A, in ``[0, 2*pi)`` [rad]."""
    return mod_two_pi(gmst00(uta, utb, tta, ttb) + ee00a(tta, ttb))


def gst00b(uta: ArrayLike, utb: ArrayLike) -> Array:
    """Greenwich apparent sidereal time, IAU 2000B, in ``[0, 2*pi)`` [rad].

    UT1 stands in for TT in the precession-nutation part, which costs at
    most a few microarcseconds.
    """
    return mod_two_pi(gmst00(uta, utb, uta, utb) + ee00b(uta, utb))


def gst06(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike, rnpb: Array) -> Array:
    """Greenwich apparent sidereal time, IAU 2006, for a given NPB matrix.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        rnpb: Bias-precession-nutation matrix.

    Returns:
        Greenwich apparent sidereal time in radians, in ``[0, 2*pi)``.
    """
    x, y = bpn2xy(rnpb)
    s = s06(tta, ttb, x, y)
    return mod_two_pi(era00(uta, utb) - eors(rnpb, s))


def gst06a(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike) -> Array:
    """Greenwich apparent sidereal time, IAU 2006/2000A, in ``[0, 2*pi)`` [rad]."""
    return gst06(uta, utb, tta, ttb, pnm06a(tta, ttb))


def gst94(uta: ArrayLike, utb: ArrayLike) -> Array:
    """Greenwich apparent sidereal time, IAU 1982/94, in ``[0, 2*pi)`` [rad]."""
    return mod_two_pi(gmst82(uta, utb) + eqeq94(uta, utb))


def ee06a(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU 2006/2000A, in ``[-pi, pi)`` [rad].

    The difference of apparent and mean sidereal time; the Earth rotation
    angle cancels, so UT1 is not needed.
    """
    return normalize_two_pi(gst06a(0.0, 0.0, date1, date2) - gmst06(0.0, 0.0, date1, date2))


# ---------------------------------------------------------------------------
# Polar motion
# ---------------------------------------------------------------------------


def sp00(date1: ArrayLike, date2: ArrayLike) -> Array:
    """TIO locator s' = -47 uas per century of TT, in radians."""
    return -47e-6 * _centuries(date1, date2) * DAS2R


def pom00(xp: ArrayLike, yp: ArrayLike, sp: ArrayLike) -> Array:
    """Polar motion matrix (TIRS -> ITRS).

    Args:
        xp: Pole x coordinate [rad].
        yp: Pole y coordinate [rad].
        sp: TIO locator s' [rad].

    Returns:
        3x3 matrix ``Rx(-yp) @ Ry(-xp) @ Rz(sp)``.
    """
    return Rx(-yp) @ Ry(-xp) @ Rz(sp)
