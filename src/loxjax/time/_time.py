"""Instants on a continuous astronomical time scale.

A :class:`Time` is a :class:`~loxjax.time.TimeDelta` since the J2000 epoch
(2000-01-01T12:00:00) tagged with the :class:`~loxjax.time.TimeScale` it is
measured on.  Conversion between scales walks the scale graph one edge at a
time, evaluating each analytical offset at the intermediate instant.  The
only non-analytical edge, TAI - UT1, is resolved through an injected
:class:`~loxjax.time.DeltaUt1TaiProvider`.
"""

from __future__ import annotations

import math
import re

from loxjax.constants import SECONDS_PER_DAY
from loxjax.errors import InvalidTimeOfDay, MissingProvider, ProviderOutOfRange
from loxjax.time._dates import Date, TimeOfDay
from loxjax.time._deltas import TimeDelta
from loxjax.time._julian import Epoch, JulianDate
from loxjax.time._offsets import hop_offset
from loxjax.time._scales import TimeScale
from loxjax.time._subsecond import Subsecond

_ISO_PATTERN = re.compile(r"^(\S+)T(\S+)(?:\s+(\S+))?$")


def _as_scale(scale: TimeScale | str) -> TimeScale:
    if isinstance(scale, TimeScale):
        return scale
    return TimeScale.parse(scale)


def _split_days(value: float) -> tuple[int, float]:
    whole = math.floor(value)
    return int(whole), value - whole


class Time(JulianDate):
    """An instant on a continuous time scale with attosecond resolution.

    Constructors:
        Time(TimeScale.TAI, 0)
        Time.from_delta("TT", TimeDelta.from_days(1))
        Time.from_iso("2000-01-01T12:00:00.000 TDB")
        Time.from_date_and_time("TAI", Date(2000, 1, 1), TimeOfDay(12))
        Time.from_julian_date("TT", 2451545.0)
    """

    __slots__ = ("_scale", "_delta")

    def __init__(self, scale: TimeScale | str, seconds: int = 0, subsecond: Subsecond | None = None) -> None:
        self._scale = _as_scale(scale)
        self._delta = TimeDelta(seconds, subsecond.attoseconds if subsecond is not None else 0)

    @classmethod
    def from_delta(cls, scale: TimeScale | str, delta: TimeDelta) -> Time:
        obj = object.__new__(cls)
        obj._scale = _as_scale(scale)
        obj._delta = delta
        return obj

    @classmethod
    def j2000(cls, scale: TimeScale | str) -> Time:
        """The J2000 epoch (2000-01-01T12:00:00) on *scale*."""
        return cls(scale, 0)

    @classmethod
    def from_date_and_time(cls, scale: TimeScale | str, date: Date, time: TimeOfDay) -> Time:
        """Build an instant from its calendar date and time of day.

        Raises:
            InvalidTimeOfDay: If *time* is a leap second; continuous scales
                have no second 60.
        """
        if time.is_leap_second():
            raise InvalidTimeOfDay(f"leap second {time} on continuous scale {_as_scale(scale)}")
        seconds = date.seconds_since_j2000() + time.second_of_day()
        return cls(scale, seconds, time.subsecond)

    @classmethod
    def from_components(
        cls,
        scale: TimeScale | str,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0.0,
    ) -> Time:
        """Build an instant from calendar components with real seconds."""
        return cls.from_date_and_time(scale, Date(year, month, day), TimeOfDay.from_hms_f64(hour, minute, second))

    @classmethod
    def from_iso(cls, iso: str, scale: TimeScale | str | None = None) -> Time:
        """Parse ``YYYY-MM-DDTHH:MM:SS[.fff] [SCALE]``.

        The scale suffix wins over *scale*; without either the instant is
        read as TAI.

        Args:
            iso (str): ISO-8601 date and time, optionally followed by a
                scale abbreviation.
            scale (TimeScale | str | None): Scale used when the string has no
                suffix.

        Returns:
            Time: The parsed instant.

        Raises:
            InvalidDate: If the date part is malformed.
            InvalidTimeOfDay: If the time part is malformed.
            UnknownScale: If the scale suffix is not a known abbreviation.
        """
        match = _ISO_PATTERN.match(iso.strip())
        if match is None:
            raise InvalidTimeOfDay(f"invalid ISO datetime: {iso!r}")
        date_part, time_part, suffix = match.groups()
        if suffix is not None:
            scale = suffix
        elif scale is None:
            scale = TimeScale.TAI
        return cls.from_date_and_time(scale, Date.from_iso(date_part), TimeOfDay.from_iso(time_part))

    @classmethod
    def from_julian_date(
        cls, scale: TimeScale | str, julian_date: float, epoch: Epoch = Epoch.JULIAN_DATE
    ) -> Time:
        """Build an instant from a Julian date in days since *epoch*.

        The whole days are converted exactly, only the day fraction is
        subject to rounding.
        """
        days, fraction = _split_days(julian_date)
        seconds = days * SECONDS_PER_DAY - epoch.seconds_before_j2000
        return cls.from_delta(scale, TimeDelta(seconds) + TimeDelta.from_seconds_f64(fraction * SECONDS_PER_DAY))

    @classmethod
    def from_two_part_julian_date(cls, scale: TimeScale | str, jd1: float, jd2: float) -> Time:
        """Build an instant from a two-part Julian date ``jd1 + jd2`` (SOFA convention)."""
        days1, fraction1 = _split_days(jd1)
        days2, fraction2 = _split_days(jd2)
        seconds = (days1 + days2) * SECONDS_PER_DAY - Epoch.JULIAN_DATE.seconds_before_j2000
        fraction = TimeDelta.from_seconds_f64((fraction1 + fraction2) * SECONDS_PER_DAY)
        return cls.from_delta(scale, TimeDelta(seconds) + fraction)

    # Accessors

    @property
    def scale(self) -> TimeScale:
        return self._scale

    @property
    def seconds(self) -> int:
        """Whole seconds since J2000 (floor)."""
        return self._delta.seconds

    @property
    def subsecond(self) -> Subsecond:
        return self._delta.subsecond

    @property
    def attoseconds(self) -> int:
        return self._delta.attoseconds

    def to_delta(self) -> TimeDelta:
        return self._delta

    def date(self) -> Date:
        return Date.from_seconds_since_j2000(self._delta.seconds)

    def time_of_day(self) -> TimeOfDay:
        return TimeOfDay.from_seconds_since_j2000(self._delta.seconds, self._delta.subsecond)

    def with_scale(self, scale: TimeScale | str) -> Time:
        """Relabel the same delta on another scale, without conversion."""
        return Time.from_delta(scale, self._delta)

    # Conversion

    def to_scale(self, target: TimeScale | str, provider=None) -> Time:
        """Convert to the same physical instant on *target*.

        Offsets are accumulated edge by edge along
        :meth:`TimeScale.path_to`, each evaluated at the intermediate
        instant.  Edges touching UT1 use *provider*.

        Args:
            target (TimeScale | str): Destination scale.
            provider (DeltaUt1TaiProvider | None): Source of UT1 - TAI. Only
                needed when the path passes through UT1.

        Returns:
            Time: The instant on *target*.

        Raises:
            MissingProvider: If the path involves UT1 and *provider* is None.
            ProviderOutOfRange: If the provider has no data for the instant.
        """
        target = _as_scale(target)
        path = self._scale.path_to(target)
        delta = self._delta
        for origin, destination in zip(path, path[1:]):
            delta = delta + _offset(origin, destination, delta, provider)
        return Time.from_delta(target, delta)

    def to_tai(self, provider=None) -> Time:
        return self.to_scale(TimeScale.TAI, provider)

    def to_tt(self, provider=None) -> Time:
        return self.to_scale(TimeScale.TT, provider)

    def to_tcg(self, provider=None) -> Time:
        return self.to_scale(TimeScale.TCG, provider)

    def to_tdb(self, provider=None) -> Time:
        return self.to_scale(TimeScale.TDB, provider)

    def to_tcb(self, provider=None) -> Time:
        return self.to_scale(TimeScale.TCB, provider)

    def to_ut1(self, provider=None) -> Time:
        return self.to_scale(TimeScale.UT1, provider)

    def to_utc(self, provider=None, leap_seconds=None):
        """Convert to a UTC timestamp.

        Args:
            provider (DeltaUt1TaiProvider | None): Needed only for UT1 instants.
            leap_seconds (LeapSecondsProvider | None): Leap-second source.
                Default: the builtin table.

        Returns:
            Utc: The UTC label of this instant.

        Raises:
            UtcUndefined: If the instant precedes 1960-01-01 UTC.
        """
        from loxjax.time._utc import Utc

        return Utc.from_tai(self.to_scale(TimeScale.TAI, provider), leap_seconds)

    # Arithmetic

    def __add__(self, other):
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return Time.from_delta(self._scale, self._delta + other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, TimeDelta):
            return Time.from_delta(self._scale, self._delta - other)
        if isinstance(other, Time):
            self._check_scale(other)
            return self._delta - other._delta
        return NotImplemented

    # Comparison

    def _check_scale(self, other: Time) -> None:
        if other._scale is not self._scale:
            raise ValueError(f"cannot combine times on different scales: {self._scale} and {other._scale}")

    def __eq__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        return self._scale is other._scale and self._delta == other._delta

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        self._check_scale(other)
        return self._delta < other._delta

    def __le__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        self._check_scale(other)
        return self._delta <= other._delta

    def __gt__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        self._check_scale(other)
        return self._delta > other._delta

    def __ge__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        self._check_scale(other)
        return self._delta >= other._delta

    def __hash__(self):
        return hash((self._scale, self._delta))

    def isoformat(self, digits: int = 3) -> str:
        return f"{self.date().isoformat()}T{self.time_of_day().isoformat(digits)} {self._scale}"

    def __str__(self):
        return self.isoformat()

    def __repr__(self):
        return f"Time({self._scale}, seconds={self._delta.seconds}, attoseconds={self._delta.attoseconds})"


def _offset(origin: TimeScale, destination: TimeScale, delta: TimeDelta, provider) -> TimeDelta:
    """Offset ``destination - origin`` for one edge of the scale graph."""
    if TimeScale.UT1 not in (origin, destination):
        return hop_offset(origin, destination, delta)
    if provider is None:
        raise MissingProvider(f"converting {origin} to {destination} requires a UT1 provider")
    try:
        if origin is TimeScale.TAI:
            return provider.delta_ut1_tai(Time.from_delta(TimeScale.TAI, delta))
        return provider.delta_tai_ut1(Time.from_delta(TimeScale.UT1, delta))
    except ProviderOutOfRange as exc:
        raise ProviderOutOfRange(
            exc.mjd, exc.mjd_min, exc.mjd_max, context=f"converting {origin} to {destination}"
        ) from exc
