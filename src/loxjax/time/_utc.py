"""Leap-second aware UTC timestamps.

UTC is not a continuous time scale, so it is kept out of
:class:`~loxjax.time.TimeScale` and modelled as a calendar label of TAI.
A :class:`Utc` is a (date, time of day) pair that may carry second 60 on
dates the leap-second provider approves.  Conversion to and from TAI uses
the provider from 1972 onwards and the drift model of
:mod:`loxjax.time._before1972` for 1960-1971.
"""

from __future__ import annotations

import re

from loxjax.errors import InvalidTimeOfDay, NonLeapSecondDate, UtcUndefined
from loxjax.time._before1972 import delta_tai_utc_from_tai, delta_tai_utc_from_utc
from loxjax.time._dates import Date, TimeOfDay
from loxjax.time._deltas import TimeDelta
from loxjax.time._julian import JulianDate
from loxjax.time._leap_seconds import BuiltinLeapSeconds
from loxjax.time._scales import TimeScale
from loxjax.time._time import Time

_ISO_PATTERN = re.compile(r"^(\S+)T([^\sZ]+)Z?(?:\s+(\S+))?$")

_UTC_START_YEAR = 1960

_DEFAULT_LEAP_SECONDS = BuiltinLeapSeconds()


def default_leap_seconds() -> BuiltinLeapSeconds:
    """Shared instance of the builtin leap-second table."""
    return _DEFAULT_LEAP_SECONDS


class Utc(JulianDate):
    """A UTC calendar timestamp.

    Julian-date projections count the leap second itself, i.e. 23:59:60 is
    one second after 23:59:59, and 00:00:00 of the following day projects to
    the same value.

    Constructors:
        Utc(Date(2016, 12, 31), TimeOfDay(23, 59, 60))
        Utc.from_components(2000, 1, 1, 12)
        Utc.from_iso("2016-12-31T23:59:60.000Z")
        Utc.from_tai(Time(TimeScale.TAI, 0))

    Args:
        date (Date): Calendar date, 1960-01-01 or later.
        time (TimeOfDay): Time of day; second 60 only on leap-second dates.
        leap_seconds (LeapSecondsProvider | None): Provider used to validate
            second 60. Default: the builtin table.

    Raises:
        UtcUndefined: If *date* precedes 1960.
        NonLeapSecondDate: If *time* is 23:59:60 on a date without a leap second.
    """

    __slots__ = ("_date", "_time")

    def __init__(self, date: Date, time: TimeOfDay | None = None, leap_seconds=None) -> None:
        time = time if time is not None else TimeOfDay()
        if date.year < _UTC_START_YEAR:
            raise UtcUndefined(str(date))
        if time.is_leap_second():
            provider = leap_seconds if leap_seconds is not None else _DEFAULT_LEAP_SECONDS
            if not provider.is_leap_second_date(date):
                raise NonLeapSecondDate(date)
        self._date = date
        self._time = time

    @classmethod
    def from_components(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0.0,
        leap_seconds=None,
    ) -> Utc:
        return cls(Date(year, month, day), TimeOfDay.from_hms_f64(hour, minute, second), leap_seconds)

    @classmethod
    def from_iso(cls, iso: str, leap_seconds=None) -> Utc:
        """Parse ``YYYY-MM-DDTHH:MM:SS[.fff]`` with an optional ``Z`` or `` UTC`` suffix.

        Raises:
            InvalidDate: If the date part is malformed.
            InvalidTimeOfDay: If the time part is malformed or the suffix names
                another scale.
        """
        match = _ISO_PATTERN.match(iso.strip())
        if match is None:
            raise InvalidTimeOfDay(f"invalid ISO UTC string: {iso!r}")
        date_part, time_part, suffix = match.groups()
        if suffix is not None and suffix.upper() != "UTC":
            raise InvalidTimeOfDay(f"invalid ISO UTC string: {iso!r}")
        return cls(Date.from_iso(date_part), TimeOfDay.from_iso(time_part), leap_seconds)

    @classmethod
    def _from_delta(cls, delta: TimeDelta) -> Utc:
        date = Date.from_seconds_since_j2000(delta.seconds)
        if date.year < _UTC_START_YEAR:
            raise UtcUndefined(str(date))
        obj = object.__new__(cls)
        obj._date = date
        obj._time = TimeOfDay.from_seconds_since_j2000(delta.seconds, delta.subsecond)
        return obj

    @classmethod
    def from_tai(cls, tai: Time, leap_seconds=None) -> Utc:
        """Label a TAI instant in UTC.

        Args:
            tai (Time): Instant on the TAI scale.
            leap_seconds (LeapSecondsProvider | None): Default: the builtin table.

        Returns:
            Utc: The timestamp, with second 60 during an inserted leap second.

        Raises:
            UtcUndefined: If the instant precedes 1960-01-01 UTC.
        """
        if tai.scale is not TimeScale.TAI:
            raise ValueError(f"expected a TAI instant, got {tai.scale}")
        provider = leap_seconds if leap_seconds is not None else _DEFAULT_LEAP_SECONDS
        offset = provider.delta_tai_utc(tai)
        if offset is None:
            return cls._from_delta(tai.to_delta() - delta_tai_utc_from_tai(tai))
        utc = cls._from_delta(tai.to_delta() - offset)
        if provider.is_leap_second(tai):
            # Rendered one second early by the new offset; relabel 23:59:59 as 23:59:60
            utc._time = TimeOfDay(23, 59, 60, utc._time.subsecond)
        return utc

    @classmethod
    def from_time(cls, time: Time, provider=None, leap_seconds=None) -> Utc:
        """Label an instant on any continuous scale in UTC."""
        return cls.from_tai(time.to_scale(TimeScale.TAI, provider), leap_seconds)

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    def date(self) -> Date:
        return self._date

    def time_of_day(self) -> TimeOfDay:
        return self._time

    def is_leap_second(self) -> bool:
        return self._time.is_leap_second()

    def to_delta(self) -> TimeDelta:
        """Seconds since 2000-01-01T12:00:00 counted on the UTC calendar."""
        return TimeDelta(self._date.seconds_since_j2000() + self._time.second_of_day(), self._time.subsecond.attoseconds)

    def to_tai(self, leap_seconds=None) -> Time:
        """Convert to TAI.

        Uses the leap-second table from 1972 onwards and the drift model for
        1960-1971.
        """
        provider = leap_seconds if leap_seconds is not None else _DEFAULT_LEAP_SECONDS
        offset = provider.delta_utc_tai(self)
        if offset is None:
            return Time.from_delta(TimeScale.TAI, self.to_delta() + delta_tai_utc_from_utc(self))
        return Time.from_delta(TimeScale.TAI, self.to_delta() - offset)

    def to_time(self, scale: TimeScale | str, provider=None, leap_seconds=None) -> Time:
        """Convert to an instant on *scale* via TAI."""
        return self.to_tai(leap_seconds).to_scale(scale, provider)

    def _key(self):
        return (self._date._key(), self._time._key())

    def __eq__(self, other):
        if not isinstance(other, Utc):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, Utc):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, Utc):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, Utc):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not isinstance(other, Utc):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self):
        return hash(self._key())

    def isoformat(self, digits: int = 3) -> str:
        return f"{self._date.isoformat()}T{self._time.isoformat(digits)} UTC"

    def __str__(self):
        return self.isoformat()

    def __repr__(self):
        return f"Utc({self._date!r}, {self._time!r})"
