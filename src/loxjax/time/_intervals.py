"""Half-open time intervals ``[start, end)``.

An :class:`Interval` holds two endpoints of the same kind: two
:class:`~loxjax.time.TimeDelta`, two :class:`~loxjax.time.Time` on the same
scale, or two :class:`~loxjax.time.Utc` timestamps.  An interval whose
start is not before its end is empty.
"""

from __future__ import annotations

from typing import NamedTuple

from loxjax.time._deltas import TimeDelta
from loxjax.time._scales import TimeScale
from loxjax.time._time import Time
from loxjax.time._utc import Utc


class Interval(NamedTuple):
    """Half-open interval between two instants or two deltas.

    Attributes:
        start: First instant inside the interval.
        end: First instant after the interval.

    Examples:
        ```python
        from loxjax.time import Interval, Time, TimeDelta

        t0 = Time.from_iso("2025-11-06T00:00:00 TAI")
        window = Interval(t0, t0 + TimeDelta.from_hours(1.0))
        window.duration()  # TimeDelta(seconds=3600, attoseconds=0)
        ```
    """

    start: TimeDelta | Time | Utc
    end: TimeDelta | Time | Utc

    def duration(self) -> TimeDelta:
        """Length of the interval.

        UTC intervals are measured on TAI, so inserted leap seconds count.
        """
        if isinstance(self.start, Utc):
            return self.end.to_tai() - self.start.to_tai()
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start >= self.end

    def contains(self, time) -> bool:
        """Return True if ``start <= time < end``."""
        return self.start <= time < self.end

    def intersect(self, other: Interval) -> Interval:
        """The overlap of both intervals; empty if they are disjoint."""
        return Interval(max(self.start, other.start), min(self.end, other.end))

    def overlaps(self, other: Interval) -> bool:
        return not self.intersect(other).is_empty()

    def to_scale(self, scale: TimeScale | str, provider=None) -> Interval:
        """Express the interval on *scale*.

        ``TimeDelta`` endpoints are taken as seconds since J2000 on *scale*,
        ``Time`` and ``Utc`` endpoints are converted.

        Args:
            scale (TimeScale | str): Target scale.
            provider (DeltaUt1TaiProvider | None): Needed only for UT1.

        Raises:
            MissingProvider: If UT1 is involved and *provider* is None.
        """
        if isinstance(self.start, TimeDelta):
            return Interval(Time.from_delta(scale, self.start), Time.from_delta(scale, self.end))
        if isinstance(self.start, Utc):
            return Interval(self.start.to_time(scale, provider), self.end.to_time(scale, provider))
        return Interval(self.start.to_scale(scale, provider), self.end.to_scale(scale, provider))

    def to_utc(self, provider=None, leap_seconds=None) -> Interval:
        """Label both endpoints of a ``Time`` interval in UTC.

        Raises:
            UtcUndefined: If an endpoint precedes 1960-01-01.
        """
        return Interval(
            self.start.to_utc(provider, leap_seconds),
            self.end.to_utc(provider, leap_seconds),
        )

    def to_time(self, leap_seconds=None) -> Interval:
        """Convert a UTC interval to TAI."""
        return Interval(self.start.to_tai(leap_seconds), self.end.to_tai(leap_seconds))

    def __str__(self):
        return f"{self.start} – {self.end}"
