"""Continuous astronomical time scales and their conversion graph.

UTC is deliberately not a member: it is a discontinuous labelling of TAI
and is modelled separately by :class:`~loxjax.time.Utc`.
"""

from __future__ import annotations

import enum

from loxjax.errors import UnknownScale


class TimeScale(enum.Enum):
    """Tag identifying the time scale of a :class:`~loxjax.time.Time`."""

    TAI = "TAI"
    TT = "TT"
    TCG = "TCG"
    TCB = "TCB"
    TDB = "TDB"
    UT1 = "UT1"

    @property
    def abbreviation(self) -> str:
        return self.value

    @property
    def long_name(self) -> str:
        return _LONG_NAMES[self]

    @classmethod
    def parse(cls, name: str) -> TimeScale:
        """Parse a scale abbreviation (case-insensitive).

        Raises:
            UnknownScale: If *name* is not a known abbreviation.
        """
        try:
            return cls(name.strip().upper())
        except ValueError:
            raise UnknownScale(f"unknown time scale: {name!r}") from None

    def path_to(self, target: TimeScale) -> list[TimeScale]:
        """Scales visited when converting from this scale to *target*, both ends included.

        The graph is the tree ``UT1 - TAI - TT - {TCG, TDB - TCB}``.
        """
        up = _path_to_root(self)
        down = _path_to_root(target)
        while len(up) > 1 and len(down) > 1 and up[-2] is down[-2]:
            up.pop()
            down.pop()
        return up + down[-2::-1]

    def __str__(self):
        return self.value


_LONG_NAMES = {
    TimeScale.TAI: "International Atomic Time",
    TimeScale.TT: "Terrestrial Time",
    TimeScale.TCG: "Geocentric Coordinate Time",
    TimeScale.TCB: "Barycentric Coordinate Time",
    TimeScale.TDB: "Barycentric Dynamical Time",
    TimeScale.UT1: "Universal Time",
}

# Parent of each scale in the conversion tree rooted at TAI
_PARENT = {
    TimeScale.TAI: None,
    TimeScale.TT: TimeScale.TAI,
    TimeScale.UT1: TimeScale.TAI,
    TimeScale.TCG: TimeScale.TT,
    TimeScale.TDB: TimeScale.TT,
    TimeScale.TCB: TimeScale.TDB,
}


def _path_to_root(scale: TimeScale) -> list[TimeScale]:
    path = [scale]
    while _PARENT[path[-1]] is not None:
        path.append(_PARENT[path[-1]])
    return path
