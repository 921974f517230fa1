"""Proleptic Gregorian calendar dates and civil times of day.

Day numbers count from 2000-01-01 (day 0).  All arithmetic is exact integer
arithmetic and valid for any year, including years before 1 CE
(astronomical year numbering, so 1 BCE is year 0).
"""

from __future__ import annotations

import functools
import re

from loxjax.constants import SECONDS_PER_DAY, SECONDS_PER_HALF_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from loxjax.errors import InvalidDate, InvalidTimeOfDay
from loxjax.time._subsecond import Subsecond

_DATE_PATTERN = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2})$")
_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,18}))?$")

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# 1970-01-01 to 2000-01-01
_UNIX_TO_J2000_DAYS = 10957


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule (divisible by 4, except centuries not divisible by 400)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date.

    References:

        1. H. Hinnant, *chrono-Compatible Low-Level Date Algorithms*, 2013.
    """
    year -= month <= 2
    era = year // 400
    yoe = year - era * 400
    doy = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def _civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`_days_from_civil`."""
    days += 719468
    era = days // 146097
    doe = days - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (month <= 2)
    return year, month, day


@functools.total_ordering
class Date:
    """A proleptic Gregorian calendar date.

    Constructors:
        Date(2000, 1, 1)
        Date.from_iso("2000-01-01")
        Date.from_days_since_j2000(0)
        Date.from_day_of_year(2000, 60)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        if not 1 <= month <= 12 or not 1 <= day <= days_in_month(year, month):
            raise InvalidDate(year, month, day)
        self._year = int(year)
        self._month = int(month)
        self._day = int(day)

    @classmethod
    def from_days_since_j2000(cls, days: int) -> Date:
        """Build a date from its J2000 day number (2000-01-01 is day 0)."""
        return cls(*_civil_from_days(days + _UNIX_TO_J2000_DAYS))

    @classmethod
    def from_seconds_since_j2000(cls, seconds: int) -> Date:
        """Date containing the instant *seconds* after 2000-01-01T12:00:00."""
        return cls.from_days_since_j2000((seconds + SECONDS_PER_HALF_DAY) // SECONDS_PER_DAY)

    @classmethod
    def from_day_of_year(cls, year: int, day_of_year: int) -> Date:
        """Build a date from its ordinal day within *year* (1-based).

        Raises:
            InvalidDate: If *day_of_year* exceeds the length of the year.
        """
        length = 366 if is_leap_year(year) else 365
        if not 1 <= day_of_year <= length:
            raise InvalidDate(year, 1, day_of_year, message=f"invalid day of year {day_of_year} in {year}")
        return cls.from_days_since_j2000(cls(year, 1, 1).j2000_day_number() + day_of_year - 1)

    @classmethod
    def from_iso(cls, iso: str) -> Date:
        """Parse ``YYYY-MM-DD`` (years may be negative or longer than four digits).

        Raises:
            InvalidDate: If the string is malformed or the date is invalid.
        """
        match = _DATE_PATTERN.match(iso.strip())
        if match is None:
            raise InvalidDate(0, 0, 0, message=f"invalid ISO date: {iso!r}")
        year, month, day = (int(g) for g in match.groups())
        return cls(year, month, day)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def j2000_day_number(self) -> int:
        """Days since 2000-01-01 (negative before)."""
        return _days_from_civil(self._year, self._month, self._day) - _UNIX_TO_J2000_DAYS

    def day_of_year(self) -> int:
        return self.j2000_day_number() - Date(self._year, 1, 1).j2000_day_number() + 1

    def seconds_since_j2000(self) -> int:
        """Seconds from the J2000 epoch (noon) to midnight starting this date."""
        return self.j2000_day_number() * SECONDS_PER_DAY - SECONDS_PER_HALF_DAY

    def _key(self):
        return (self._year, self._month, self._day)

    def __eq__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def isoformat(self) -> str:
        sign = "-" if self._year < 0 else ""
        return f"{sign}{abs(self._year):04d}-{self._month:02d}-{self._day:02d}"

    def __str__(self):
        return self.isoformat()

    def __repr__(self):
        return f"Date({self._year}, {self._month}, {self._day})"


@functools.total_ordering
class TimeOfDay:
    """A civil time of day with attosecond resolution.

    ``second`` may be 60 only at 23:59 (a leap second); whether the date
    actually carries a leap second is checked by the UTC type.
    """

    __slots__ = ("_hour", "_minute", "_second", "_subsecond")

    def __init__(self, hour: int = 0, minute: int = 0, second: int = 0, subsecond: Subsecond | None = None) -> None:
        if not 0 <= hour <= 23:
            raise InvalidTimeOfDay(f"hour must be in 0..23, got {hour}")
        if not 0 <= minute <= 59:
            raise InvalidTimeOfDay(f"minute must be in 0..59, got {minute}")
        max_second = 60 if (hour, minute) == (23, 59) else 59
        if not 0 <= second <= max_second:
            raise InvalidTimeOfDay(f"second must be in 0..{max_second}, got {second}")
        self._hour = int(hour)
        self._minute = int(minute)
        self._second = int(second)
        self._subsecond = subsecond if subsecond is not None else Subsecond()

    @classmethod
    def from_hms_f64(cls, hour: int, minute: int, seconds: float) -> TimeOfDay:
        """Build a time of day from a real number of seconds within the minute."""
        whole = int(seconds // 1)
        return cls(hour, minute, whole, Subsecond.from_f64(seconds - whole))

    @classmethod
    def from_second_of_day(cls, second_of_day: int, subsecond: Subsecond | None = None) -> TimeOfDay:
        """Build a time of day from whole seconds since midnight (0..86399).

        Raises:
            InvalidTimeOfDay: If *second_of_day* is outside the day.
        """
        if not 0 <= second_of_day < SECONDS_PER_DAY:
            raise InvalidTimeOfDay(f"second of day must be in 0..86399, got {second_of_day}")
        hour, rem = divmod(second_of_day, SECONDS_PER_HOUR)
        minute, second = divmod(rem, SECONDS_PER_MINUTE)
        return cls(hour, minute, second, subsecond)

    @classmethod
    def from_seconds_since_j2000(cls, seconds: int, subsecond: Subsecond | None = None) -> TimeOfDay:
        """Time of day of the instant *seconds* after 2000-01-01T12:00:00."""
        return cls.from_second_of_day((seconds + SECONDS_PER_HALF_DAY) % SECONDS_PER_DAY, subsecond)

    @classmethod
    def from_iso(cls, iso: str) -> TimeOfDay:
        """Parse ``HH:MM:SS`` with an optional fraction of up to 18 digits.

        Raises:
            InvalidTimeOfDay: If the string is malformed or out of range.
        """
        match = _TIME_PATTERN.match(iso.strip())
        if match is None:
            raise InvalidTimeOfDay(f"invalid ISO time: {iso!r}")
        hour, minute, second, fraction = match.groups()
        subsecond = Subsecond.from_digits(fraction) if fraction else Subsecond()
        return cls(int(hour), int(minute), int(second), subsecond)

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def subsecond(self) -> Subsecond:
        return self._subsecond

    def is_leap_second(self) -> bool:
        return self._second == 60

    def second_of_day(self) -> int:
        """Whole seconds since midnight; 86400 during a leap second."""
        return self._hour * SECONDS_PER_HOUR + self._minute * SECONDS_PER_MINUTE + self._second

    def _key(self):
        return (self._hour, self._minute, self._second, self._subsecond.attoseconds)

    def __eq__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def isoformat(self, digits: int = 3) -> str:
        """Format as ``HH:MM:SS.fff`` with *digits* fractional digits (truncated)."""
        out = f"{self._hour:02d}:{self._minute:02d}:{self._second:02d}"
        if digits > 0:
            out += "." + f"{self._subsecond.attoseconds:018d}"[:digits]
        return out

    def __str__(self):
        return self.isoformat()

    def __repr__(self):
        return f"TimeOfDay({self._hour}, {self._minute}, {self._second}, {self._subsecond!r})"
