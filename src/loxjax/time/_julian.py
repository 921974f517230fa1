"""Julian-date projections of time deltas, instants and UTC timestamps.

Anything that can express itself as a :class:`~loxjax.time.TimeDelta`
since J2000 (via ``to_delta()``) gains the projections by inheriting from
:class:`JulianDate`.  Epoch offsets are whole seconds, so the integer part
of the projection is exact and only the attosecond fraction is rounded.
"""

from __future__ import annotations

import enum

from loxjax.constants import (
    ATTOSECONDS_PER_SECOND,
    SECONDS_BETWEEN_J1950_AND_J2000,
    SECONDS_BETWEEN_JD_AND_J2000,
    SECONDS_BETWEEN_MJD_AND_J2000,
    SECONDS_PER_DAY,
    SECONDS_PER_JULIAN_CENTURY,
    SECONDS_PER_JULIAN_YEAR,
)


class Epoch(enum.Enum):
    """Reference epochs for Julian-date projections."""

    JULIAN_DATE = "jd"
    MODIFIED_JULIAN_DATE = "mjd"
    J1950 = "j1950"
    J2000 = "j2000"

    @property
    def seconds_before_j2000(self) -> int:
        """Whole seconds from this epoch to J2000.0."""
        return _EPOCH_OFFSETS[self]


class Unit(enum.Enum):
    """Units for Julian-date projections."""

    SECONDS = "seconds"
    DAYS = "days"
    YEARS = "years"
    CENTURIES = "centuries"

    @property
    def seconds(self) -> int:
        """Length of one unit in seconds."""
        return _UNIT_SECONDS[self]


_EPOCH_OFFSETS = {
    Epoch.JULIAN_DATE: SECONDS_BETWEEN_JD_AND_J2000,
    Epoch.MODIFIED_JULIAN_DATE: SECONDS_BETWEEN_MJD_AND_J2000,
    Epoch.J1950: SECONDS_BETWEEN_J1950_AND_J2000,
    Epoch.J2000: 0,
}

_UNIT_SECONDS = {
    Unit.SECONDS: 1,
    Unit.DAYS: SECONDS_PER_DAY,
    Unit.YEARS: SECONDS_PER_JULIAN_YEAR,
    Unit.CENTURIES: SECONDS_PER_JULIAN_CENTURY,
}


class JulianDate:
    """Mixin providing Julian-date projections.

    Subclasses implement ``to_delta()`` returning the
    :class:`~loxjax.time.TimeDelta` since J2000 on their own scale.
    """

    __slots__ = ()

    def to_delta(self):
        raise NotImplementedError

    def julian_date(self, epoch: Epoch = Epoch.JULIAN_DATE, unit: Unit = Unit.DAYS) -> float:
        """Project onto a Julian epoch in the given unit.

        Args:
            epoch (Epoch): Reference epoch. Default: ``Epoch.JULIAN_DATE``
            unit (Unit): Output unit. Default: ``Unit.DAYS``

        Returns:
            float: Elapsed time since *epoch*, ``nan``/``inf`` for special deltas.
        """
        delta = self.to_delta()
        if not delta.is_finite():
            return delta.to_seconds_f64()
        whole, rem = divmod(delta.seconds + epoch.seconds_before_j2000, unit.seconds)
        return whole + (rem + delta.attoseconds / ATTOSECONDS_PER_SECOND) / unit.seconds

    def two_part_julian_date(self) -> tuple[float, float]:
        """Return the Julian date split into whole days and day fraction.

        The split is done in integer arithmetic, so the fraction keeps full
        double precision for downstream trigonometry.

        Returns:
            tuple[float, float]: ``(days, fraction)`` with ``0 <= fraction < 1``.
        """
        delta = self.to_delta()
        days, rem = divmod(delta.seconds + SECONDS_BETWEEN_JD_AND_J2000, SECONDS_PER_DAY)
        return float(days), (rem + delta.attoseconds / ATTOSECONDS_PER_SECOND) / SECONDS_PER_DAY

    def seconds_since_j2000(self) -> float:
        return self.julian_date(Epoch.J2000, Unit.SECONDS)

    def days_since_j2000(self) -> float:
        return self.julian_date(Epoch.J2000, Unit.DAYS)

    def centuries_since_j2000(self) -> float:
        return self.julian_date(Epoch.J2000, Unit.CENTURIES)

    def years_since_j2000(self) -> float:
        return self.julian_date(Epoch.J2000, Unit.YEARS)

    def seconds_since_j1950(self) -> float:
        return self.julian_date(Epoch.J1950, Unit.SECONDS)

    def days_since_j1950(self) -> float:
        return self.julian_date(Epoch.J1950, Unit.DAYS)

    def days_since_julian_epoch(self) -> float:
        return self.julian_date(Epoch.JULIAN_DATE, Unit.DAYS)

    def days_since_modified_julian_epoch(self) -> float:
        return self.julian_date(Epoch.MODIFIED_JULIAN_DATE, Unit.DAYS)

    def jd(self) -> float:
        """Julian Date in days."""
        return self.julian_date(Epoch.JULIAN_DATE, Unit.DAYS)

    def mjd(self) -> float:
        """Modified Julian Date in days."""
        return self.julian_date(Epoch.MODIFIED_JULIAN_DATE, Unit.DAYS)
