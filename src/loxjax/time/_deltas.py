"""Signed durations with attosecond resolution.

A :class:`TimeDelta` is a pair of integer seconds and a non-negative
:class:`~loxjax.time.Subsecond`.  Negative durations with a fractional part
borrow one second, so ``-0.25 s`` is stored as ``(-1, 0.75)``.  Every value
has exactly one representation, which makes equality and ordering a plain
lexicographic comparison.

Exceptional results (non-finite reals, ``inf - inf``) are represented by
NaN and signed infinity values instead of raising, so long pipelines can
check once at the boundary.
"""

from __future__ import annotations

import enum
import math
import operator

from loxjax.constants import (
    ATTOSECONDS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_JULIAN_CENTURY,
    SECONDS_PER_JULIAN_YEAR,
    SECONDS_PER_MINUTE,
)
from loxjax.errors import NonFiniteTimeDelta
from loxjax.time._julian import JulianDate
from loxjax.time._subsecond import Subsecond


class _Kind(enum.Enum):
    FINITE = 0
    NAN = 1
    POS_INF = 2
    NEG_INF = 3


class TimeDelta(JulianDate):
    """A signed duration: integer seconds plus attoseconds in ``[0, 10**18)``.

    Constructors:
        TimeDelta(seconds, attoseconds=0)
        TimeDelta.from_seconds_f64(1.5)
        TimeDelta.from_days(0.5)
        TimeDelta.nan()
    """

    __slots__ = ("_seconds", "_attoseconds", "_kind")

    def __init__(self, seconds: int = 0, attoseconds: int = 0) -> None:
        try:
            seconds, attoseconds = operator.index(seconds), operator.index(attoseconds)
        except TypeError:
            raise TypeError(
                f"TimeDelta takes integer seconds and attoseconds, got {seconds!r} and {attoseconds!r}; "
                "use TimeDelta.from_seconds_f64 for real numbers"
            ) from None
        carry, attoseconds = divmod(attoseconds, ATTOSECONDS_PER_SECOND)
        self._seconds = seconds + carry
        self._attoseconds = attoseconds
        self._kind = _Kind.FINITE

    @classmethod
    def _special(cls, kind: _Kind) -> TimeDelta:
        obj = object.__new__(cls)
        obj._seconds = 0
        obj._attoseconds = 0
        obj._kind = kind
        return obj

    @classmethod
    def nan(cls) -> TimeDelta:
        return cls._special(_Kind.NAN)

    @classmethod
    def infinity(cls) -> TimeDelta:
        return cls._special(_Kind.POS_INF)

    @classmethod
    def neg_infinity(cls) -> TimeDelta:
        return cls._special(_Kind.NEG_INF)

    @classmethod
    def zero(cls) -> TimeDelta:
        return cls(0)

    @classmethod
    def from_seconds(cls, seconds: int) -> TimeDelta:
        return cls(seconds)

    @classmethod
    def from_subsecond(cls, seconds: int, subsecond: Subsecond) -> TimeDelta:
        return cls(seconds, subsecond.attoseconds)

    @classmethod
    def from_seconds_f64(cls, value: float) -> TimeDelta:
        """Build a delta from a real number of seconds.

        Whole seconds are rounded half-to-even and the remainder is rounded
        to the nearest attosecond, which keeps the fractional part exact for
        large magnitudes.

        Args:
            value (float): Seconds.

        Returns:
            TimeDelta: The duration; NaN for ``nan`` and signed infinity
            for infinite input.
        """
        if math.isnan(value):
            return cls.nan()
        if math.isinf(value):
            return cls.infinity() if value > 0 else cls.neg_infinity()
        seconds = round(value)
        return cls(seconds, round((value - seconds) * ATTOSECONDS_PER_SECOND))

    @classmethod
    def try_from_seconds_f64(cls, value: float) -> TimeDelta:
        """Like :meth:`from_seconds_f64` but rejects non-finite input.

        Raises:
            NonFiniteTimeDelta: If *value* is ``nan`` or infinite.
        """
        if not math.isfinite(value):
            raise NonFiniteTimeDelta(f"cannot build a TimeDelta from {value}")
        return cls.from_seconds_f64(value)

    @classmethod
    def from_minutes(cls, value: float) -> TimeDelta:
        return cls._from_scaled(value, SECONDS_PER_MINUTE)

    @classmethod
    def from_hours(cls, value: float) -> TimeDelta:
        return cls._from_scaled(value, SECONDS_PER_HOUR)

    @classmethod
    def from_days(cls, value: float) -> TimeDelta:
        return cls._from_scaled(value, SECONDS_PER_DAY)

    @classmethod
    def from_julian_years(cls, value: float) -> TimeDelta:
        return cls._from_scaled(value, SECONDS_PER_JULIAN_YEAR)

    @classmethod
    def from_julian_centuries(cls, value: float) -> TimeDelta:
        return cls._from_scaled(value, SECONDS_PER_JULIAN_CENTURY)

    @classmethod
    def _from_scaled(cls, value, factor: int) -> TimeDelta:
        if isinstance(value, int):
            return cls(value * factor)
        return cls.from_seconds_f64(value * factor)

    # Accessors

    @property
    def seconds(self) -> int:
        """Whole seconds (floor). Zero for NaN and infinite deltas."""
        return self._seconds

    @property
    def attoseconds(self) -> int:
        """Fractional part in attoseconds, always non-negative."""
        return self._attoseconds

    @property
    def subsecond(self) -> Subsecond:
        return Subsecond(self._attoseconds)

    def to_seconds_f64(self) -> float:
        """Total seconds as a float (lossy for large magnitudes)."""
        if self._kind is _Kind.NAN:
            return math.nan
        if self._kind is _Kind.POS_INF:
            return math.inf
        if self._kind is _Kind.NEG_INF:
            return -math.inf
        return self._seconds + self._attoseconds / ATTOSECONDS_PER_SECOND

    def __float__(self) -> float:
        return self.to_seconds_f64()

    def to_delta(self) -> TimeDelta:
        return self

    def is_nan(self) -> bool:
        return self._kind is _Kind.NAN

    def is_finite(self) -> bool:
        return self._kind is _Kind.FINITE

    def is_infinite(self) -> bool:
        return self._kind in (_Kind.POS_INF, _Kind.NEG_INF)

    def is_zero(self) -> bool:
        return self.is_finite() and self._seconds == 0 and self._attoseconds == 0

    def is_negative(self) -> bool:
        return self._kind is _Kind.NEG_INF or (self.is_finite() and self._seconds < 0)

    def is_positive(self) -> bool:
        return self._kind is _Kind.POS_INF or (self.is_finite() and not self.is_negative() and not self.is_zero())

    # Arithmetic

    def __neg__(self) -> TimeDelta:
        if self._kind is _Kind.NAN:
            return self
        if self._kind is _Kind.POS_INF:
            return TimeDelta.neg_infinity()
        if self._kind is _Kind.NEG_INF:
            return TimeDelta.infinity()
        if self._attoseconds == 0:
            return TimeDelta(-self._seconds)
        return TimeDelta(-self._seconds - 1, ATTOSECONDS_PER_SECOND - self._attoseconds)

    def __abs__(self) -> TimeDelta:
        return -self if self.is_negative() else self

    def __add__(self, other):
        if not isinstance(other, TimeDelta):
            return NotImplemented
        if self.is_finite() and other.is_finite():
            return TimeDelta(self._seconds + other._seconds, self._attoseconds + other._attoseconds)
        if self.is_nan() or other.is_nan():
            return TimeDelta.nan()
        if self.is_infinite() and other.is_infinite():
            return self if self._kind is other._kind else TimeDelta.nan()
        return self if self.is_infinite() else other

    def __sub__(self, other):
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return self + (-other)

    def __mul__(self, factor):
        if isinstance(factor, bool):
            return NotImplemented
        if isinstance(factor, int):
            return self._mul_int(factor)
        if isinstance(factor, float):
            return self._mul_float(factor)
        return NotImplemented

    __rmul__ = __mul__

    def _mul_int(self, factor: int) -> TimeDelta:
        if self.is_nan():
            return self
        if self.is_infinite():
            if factor == 0:
                return TimeDelta.nan()
            return self if factor > 0 else -self
        total = (self._seconds * ATTOSECONDS_PER_SECOND + self._attoseconds) * factor
        return TimeDelta(0, total)

    def _mul_float(self, factor: float) -> TimeDelta:
        if self.is_finite() and math.isfinite(factor):
            return TimeDelta.from_seconds_f64(
                factor * self._seconds + factor * self._attoseconds / ATTOSECONDS_PER_SECOND
            )
        return TimeDelta.from_seconds_f64(self.to_seconds_f64() * factor)

    # Comparison

    def _key(self):
        if self._kind is _Kind.NEG_INF:
            return (-1, 0, 0)
        if self._kind is _Kind.POS_INF:
            return (1, 0, 0)
        return (0, self._seconds, self._attoseconds)

    def __eq__(self, other):
        if not isinstance(other, TimeDelta):
            return NotImplemented
        if self.is_nan() or other.is_nan():
            return False
        return self._key() == other._key()

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self, other):
        if not isinstance(other, TimeDelta):
            return NotImplemented
        if self.is_nan() or other.is_nan():
            return False
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, TimeDelta):
            return NotImplemented
        if self.is_nan() or other.is_nan():
            return False
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return other.__lt__(self)

    def __ge__(self, other):
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return other.__le__(self)

    def __hash__(self):
        return hash((self._kind, self._seconds, self._attoseconds))

    def __repr__(self):
        if self._kind is _Kind.FINITE:
            return f"TimeDelta(seconds={self._seconds}, attoseconds={self._attoseconds})"
        return f"TimeDelta.{self._kind.name.lower()}"

    def __str__(self):
        if self._kind is _Kind.NAN:
            return "NaN"
        if self._kind is _Kind.POS_INF:
            return "inf"
        if self._kind is _Kind.NEG_INF:
            return "-inf"
        return f"{self.to_seconds_f64()} seconds"
