"""IERS Earth orientation quantities evaluated at a :class:`~loxjax.time.Time`.

Thin time-aware layer over :mod:`loxjax.sofa`: each function converts the
instant to the scale its model is defined on (TT for precession-nutation,
the CIO and TIO locators and the pole; UT1 for the Earth rotation angle)
and passes the result on as a two-part Julian Date.

Instants may be given as :class:`~loxjax.time.Time` on any scale or as a
:class:`~loxjax.time.Utc` timestamp.  Conversions that pass through UT1
need a ΔUT1 provider, usually an :class:`~loxjax.eop.EopProvider`.

Results are JAX arrays in radians so they can be traced by ``jax.jit`` and
vectorised; :class:`~loxjax.units.Angle` is a plain-float quantity and
cannot be.  Angles passed in (mean obliquity, CIO and TIO locators, pole
coordinates) may be given either as radians or as :class:`~loxjax.units.Angle`.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

from jax import Array

from loxjax import sofa
from loxjax.eop import as_eop_provider
from loxjax.errors import MissingEopProvider
from loxjax.time import Time, TimeScale, Utc
from loxjax.units import Angle


def to_scale(time: Time | Utc, scale: TimeScale, provider=None) -> Time:
    """Convert a :class:`Time` or :class:`Utc` instant to *scale*."""
    if isinstance(time, Utc):
        return time.to_time(scale, provider)
    return time.to_scale(scale, provider)


def julian_date(time: Time | Utc, scale: TimeScale, provider=None) -> tuple[float, float]:
    """Two-part Julian Date of *time* on *scale*."""
    return to_scale(time, scale, provider).two_part_julian_date()


def radians(angle) -> float | Array:
    """Radians of an :class:`~loxjax.units.Angle`; other values pass through."""
    if isinstance(angle, Angle):
        return angle.to_radians()
    return angle


class NutationModel(enum.Enum):
    """Available nutation models."""

    IAU1980 = "IAU1980"
    IAU2000A = "IAU2000A"
    IAU2000B = "IAU2000B"
    IAU2006A = "IAU2006A"


_NUTATION_FUNCTIONS = {
    NutationModel.IAU1980: sofa.nut80,
    NutationModel.IAU2000A: sofa.nut00a,
    NutationModel.IAU2000B: sofa.nut00b,
    NutationModel.IAU2006A: sofa.nut06a,
}


class Nutation(NamedTuple):
    """Nutation components [rad].

    Attributes:
        longitude: Nutation in longitude, delta psi.
        obliquity: Nutation in obliquity, delta epsilon.
    """

    longitude: Array
    obliquity: Array

    def nutation_matrix(self, mean_obliquity) -> Array:
        """Nutation matrix for the given mean obliquity of date [rad]."""
        return sofa.numat(radians(mean_obliquity), self.longitude, self.obliquity)

    def __add__(self, other):
        if not isinstance(other, Nutation):
            return NotImplemented
        return Nutation(self.longitude + other.longitude, self.obliquity + other.obliquity)


def nutation(time: Time | Utc, model: NutationModel = NutationModel.IAU2006A, provider=None) -> Nutation:
    """Nutation in longitude and obliquity at *time* (TT).

    Args:
        time: Instant of evaluation.
        model (NutationModel): Series to use. Default: IAU 2006/2000A.
        provider: ΔUT1 provider, only needed for UT1 instants.

    Returns:
        Nutation: ``(dpsi, deps)`` in radians.

    Examples:
        ```python
        from loxjax.frames import NutationModel, nutation
        from loxjax.time import Time

        t = Time.from_iso("2006-01-01T00:00:00 TT")
        dpsi, deps = nutation(t, NutationModel.IAU2000B)
        ```
    """
    dpsi, deps = _NUTATION_FUNCTIONS[NutationModel(model)](*julian_date(time, TimeScale.TT, provider))
    return Nutation(dpsi, deps)


def mean_obliquity(time: Time | Utc, model: NutationModel = NutationModel.IAU2006A, provider=None) -> Array:
    """Mean obliquity of the ecliptic consistent with *model* [rad].

    IAU 1980 uses the 1980 obliquity, the IAU 2000 models add the IAU 2000
    precession-rate correction to it and IAU 2006A uses the 2006 obliquity.
    """
    model = NutationModel(model)
    jd = julian_date(time, TimeScale.TT, provider)
    if model is NutationModel.IAU2006A:
        return sofa.obl06(*jd)
    if model is NutationModel.IAU1980:
        return sofa.obl80(*jd)
    return sofa.obl80(*jd) + sofa.pr00(*jd)[1]


class CipCoords(NamedTuple):
    """CIP coordinates X, Y in the GCRS [rad]."""

    x: Array
    y: Array

    def __add__(self, other):
        if not isinstance(other, tuple):
            return NotImplemented
        dx, dy = other
        return CipCoords(self.x + dx, self.y + dy)

    def celestial_to_intermediate_matrix(self, s) -> Array:
        """GCRS-to-CIRS matrix for these coordinates and CIO locator *s*."""
        return sofa.c2ixys(self.x, self.y, radians(s))


def cip_coords(time: Time | Utc, provider=None) -> CipCoords:
    """CIP X, Y from the IAU 2006 precession and IAU 2006/2000A nutation.

    Args:
        time: Instant of evaluation.
        provider: ΔUT1 provider, only needed for UT1 instants.

    Returns:
        CipCoords: Uncorrected X, Y [rad].
    """
    x, y = sofa.bpn2xy(sofa.pnm06a(*julian_date(time, TimeScale.TT, provider)))
    return CipCoords(x, y)


def cio_locator(time: Time | Utc, xy: CipCoords, provider=None) -> Array:
    """CIO locator s, IAU 2006, consistent with the given CIP coordinates [rad]."""
    return sofa.s06(*julian_date(time, TimeScale.TT, provider), xy.x, xy.y)


def earth_rotation_angle(time: Time | Utc, provider=None) -> Array:
    """Earth rotation angle, IAU 2000, in ``[0, 2*pi)`` [rad].

    Args:
        time: Instant of evaluation.
        provider: ΔUT1 provider. Not needed if *time* is already on UT1.

    Raises:
        MissingProvider: If a UT1 conversion is needed and *provider* is None.
    """
    return sofa.era00(*julian_date(time, TimeScale.UT1, provider))


def gmst(time: Time | Utc, provider=None, model: NutationModel = NutationModel.IAU2006A) -> Array:
    """Greenwich mean sidereal time in ``[0, 2*pi)`` [rad].

    Args:
        time: Instant of evaluation.
        provider: ΔUT1 provider. Not needed if *time* is already on UT1.
        model (NutationModel): Selects the matching expression: IAU 1982 for
            IAU1980, IAU 2000 for the 2000 models and IAU 2006 for IAU2006A
            (default).
    """
    model = NutationModel(model)
    uta, utb = julian_date(time, TimeScale.UT1, provider)
    if model is NutationModel.IAU1980:
        return sofa.gmst82(uta, utb)
    tta, ttb = julian_date(time, TimeScale.TT, provider)
    if model is NutationModel.IAU2006A:
        return sofa.gmst06(uta, utb, tta, ttb)
    return sofa.gmst00(uta, utb, tta, ttb)


def gast(time: Time | Utc, provider=None, model: NutationModel = NutationModel.IAU2006A) -> Array:
    """Greenwich apparent sidereal time in ``[0, 2*pi)`` [rad].

    Mean sidereal time plus the equation of the equinoxes of *model*.

    Args:
        time: Instant of evaluation.
        provider: ΔUT1 provider. Not needed if *time* is already on UT1.
        model (NutationModel): Precession-nutation model. Default: IAU 2006/2000A.

    Raises:
        MissingProvider: If a UT1 conversion is needed and *provider* is None.

    Examples:
        ```python
        from loxjax.frames import NutationModel, gast
        from loxjax.time import Time

        theta = gast(Time.from_iso("2006-01-01T00:00:00 UT1"), model=NutationModel.IAU2000B)
        ```
    """
    model = NutationModel(model)
    uta, utb = julian_date(time, TimeScale.UT1, provider)
    if model is NutationModel.IAU1980:
        return sofa.gst94(uta, utb)
    if model is NutationModel.IAU2000B:
        return sofa.gst00b(uta, utb)
    tta, ttb = julian_date(time, TimeScale.TT, provider)
    if model is NutationModel.IAU2000A:
        return sofa.gst00a(uta, utb, tta, ttb)
    return sofa.gst06a(uta, utb, tta, ttb)


def equation_of_the_equinoxes(
    time: Time | Utc, model: NutationModel = NutationModel.IAU2006A, provider=None
) -> Array:
    """Equation of the equinoxes, GAST - GMST [rad].

    The IAU 2000 and 2006 forms include the complementary terms.  IAU 1980
    uses the 1994 expression evaluated on TDB, the others use TT.
    """
    model = NutationModel(model)
    if model is NutationModel.IAU1980:
        return sofa.eqeq94(*julian_date(time, TimeScale.TDB, provider))
    jd = julian_date(time, TimeScale.TT, provider)
    if model is NutationModel.IAU2000A:
        return sofa.ee00a(*jd)
    if model is NutationModel.IAU2000B:
        return sofa.ee00b(*jd)
    return sofa.ee06a(*jd)


def tio_locator(time: Time | Utc, provider=None) -> Array:
    """TIO locator s' = -47 uas per century of TT [rad]."""
    return sofa.sp00(*julian_date(time, TimeScale.TT, provider))


class PoleCoords(NamedTuple):
    """Pole coordinates x_p, y_p [rad]."""

    xp: Array
    yp: Array

    @classmethod
    def from_angles(cls, xp: Angle, yp: Angle) -> PoleCoords:
        return cls(radians(xp), radians(yp))

    def angles(self) -> tuple[Angle, Angle]:
        """The coordinates as :class:`~loxjax.units.Angle` (not traceable)."""
        return Angle.radians(float(self.xp)), Angle.radians(float(self.yp))

    def polar_motion_matrix(self, tio_locator) -> Array:
        """TIRS-to-ITRS matrix ``Rx(-yp) @ Ry(-xp) @ Rz(s')``."""
        return sofa.pom00(self.xp, self.yp, radians(tio_locator))


def pole_coords(time: Time | Utc, eop) -> PoleCoords:
    """Pole coordinates at *time* from an EOP provider or table.

    Raises:
        MissingEopProvider: If *eop* is None.
        ProviderOutOfRange: Outside the table without extrapolation.
    """
    provider = as_eop_provider(eop)
    if provider is None:
        raise MissingEopProvider("polar motion requires EOP data; pass zero_eop() to ignore it")
    return PoleCoords(*provider.polar_motion(to_scale(time, TimeScale.TAI, provider)))


def polar_motion_matrix(time: Time | Utc, pole: PoleCoords, provider=None) -> Array:
    """Polar motion matrix at *time* for the given pole coordinates."""
    return pole.polar_motion_matrix(tio_locator(time, provider))
