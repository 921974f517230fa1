"""Leap-second providers for UTC <-> TAI conversion from 1972 onwards.

Two providers are available:

- :class:`BuiltinLeapSeconds`: the IERS table compiled into loxjax
  (1972-01-01 through 2017-01-01, 28 entries).
- :class:`LeapSecondsKernel`: a table read from a NAIF leap-seconds kernel
  (``naif0012.tls`` and friends).

Both answer ``None`` for instants before 1972-01-01; the UTC layer then
falls back to the 1960-1971 drift model.

References:

    1. IERS Bulletin C, https://hpiers.obspm.fr/eoppc/bul/bulc/
    2. NAIF, *Time Required Reading*, section "The Leapseconds Kernel (LSK)".
"""

from __future__ import annotations

import logging
import pathlib
import re
from typing import Protocol, runtime_checkable

import numpy as np

from loxjax.constants import SECONDS_PER_DAY
from loxjax.errors import InvalidLeapSecondKernel
from loxjax.time._dates import Date
from loxjax.time._deltas import TimeDelta

logger = logging.getLogger(__name__)

_KERNEL_KEY = "DELTET/DELTA_AT"
_KERNEL_ARRAY = re.compile(re.escape(_KERNEL_KEY) + r"\s*=\s*\((?P<body>[^)]*)\)", re.DOTALL)
_KERNEL_ENTRY = re.compile(r"(?P<ls>[+-]?\d+)\s*,\s*@(?P<year>\d{4})-(?P<month>[A-Za-z]{3})-(?P<day>\d{1,2})")

_MONTHS = {
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4, "MAY": 5, "JUN": 6,
    "JUL": 7, "AUG": 8, "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
}

# MJD of each UTC midnight at which TAI - UTC changed, and the new value
_BUILTIN_TABLE = (
    (41317, 10),  # 1972-01-01
    (41499, 11),  # 1972-07-01
    (41683, 12),  # 1973-01-01
    (42048, 13),  # 1974-01-01
    (42413, 14),  # 1975-01-01
    (42778, 15),  # 1976-01-01
    (43144, 16),  # 1977-01-01
    (43509, 17),  # 1978-01-01
    (43874, 18),  # 1979-01-01
    (44239, 19),  # 1980-01-01
    (44786, 20),  # 1981-07-01
    (45151, 21),  # 1982-07-01
    (45516, 22),  # 1983-07-01
    (46247, 23),  # 1985-07-01
    (47161, 24),  # 1988-01-01
    (47892, 25),  # 1990-01-01
    (48257, 26),  # 1991-01-01
    (48804, 27),  # 1992-07-01
    (49169, 28),  # 1993-07-01
    (49534, 29),  # 1994-07-01
    (50083, 30),  # 1996-01-01
    (50630, 31),  # 1997-07-01
    (51179, 32),  # 1999-01-01
    (53736, 33),  # 2006-01-01
    (54832, 34),  # 2009-01-01
    (56109, 35),  # 2012-07-01
    (57204, 36),  # 2015-07-01
    (57754, 37),  # 2017-01-01
)

_MJD_J2000_DAY = 51544


@runtime_checkable
class LeapSecondsProvider(Protocol):
    """Source of the integer TAI - UTC offset."""

    def delta_tai_utc(self, tai) -> TimeDelta | None:
        """TAI - UTC at a TAI instant, or ``None`` before the table starts."""
        ...

    def delta_utc_tai(self, utc) -> TimeDelta | None:
        """UTC - TAI at a UTC timestamp, or ``None`` before the table starts."""
        ...

    def is_leap_second_date(self, date: Date) -> bool:
        """Whether *date* ends with an inserted second 23:59:60."""
        ...

    def is_leap_second(self, tai) -> bool:
        """Whether the TAI instant falls inside an inserted leap second."""
        ...


class LeapSecondTable:
    """Leap-second lookups over sorted epoch arrays.

    Args:
        epochs_utc (array-like): UTC seconds since J2000 of each change, ascending.
        leap_seconds (array-like): TAI - UTC in whole seconds from that epoch on.
    """

    def __init__(self, epochs_utc, leap_seconds) -> None:
        self._epochs_utc = np.asarray(epochs_utc, dtype=np.int64)
        self._leap_seconds = np.asarray(leap_seconds, dtype=np.int64)
        if self._epochs_utc.size == 0 or self._epochs_utc.shape != self._leap_seconds.shape:
            raise ValueError("leap-second table needs matching, non-empty epoch and offset arrays")
        if np.any(np.diff(self._epochs_utc) <= 0):
            raise ValueError("leap-second epochs must be strictly increasing")
        # TAI instant of the inserted second preceding each change
        self._epochs_tai = self._epochs_utc + self._leap_seconds - 1
        self._leap_days = set((self._epochs_utc[1:] // SECONDS_PER_DAY).tolist())
        self._leap_tai = set(self._epochs_tai[1:].tolist())
        self._tai_start = int(self._epochs_utc[0] + self._leap_seconds[0])

    @property
    def epochs_utc(self) -> np.ndarray:
        return self._epochs_utc

    @property
    def epochs_tai(self) -> np.ndarray:
        return self._epochs_tai

    @property
    def leap_seconds(self) -> np.ndarray:
        return self._leap_seconds

    def __len__(self) -> int:
        return int(self._leap_seconds.size)

    def delta_tai_utc(self, tai) -> TimeDelta | None:
        seconds = tai.to_delta().seconds
        if seconds < self._tai_start:
            return None
        idx = int(np.searchsorted(self._epochs_tai, seconds, side="right")) - 1
        return TimeDelta(int(self._leap_seconds[max(idx, 0)]))

    def delta_utc_tai(self, utc) -> TimeDelta | None:
        seconds = utc.to_delta().seconds
        if seconds < self._epochs_utc[0]:
            return None
        idx = int(np.searchsorted(self._epochs_utc, seconds, side="right")) - 1
        leap_seconds = int(self._leap_seconds[idx])
        # During 23:59:60 the new offset is not in force yet
        if utc.time_of_day().is_leap_second():
            leap_seconds -= 1
        return TimeDelta(-leap_seconds)

    def is_leap_second_date(self, date: Date) -> bool:
        return date.j2000_day_number() in self._leap_days

    def is_leap_second(self, tai) -> bool:
        return tai.to_delta().seconds in self._leap_tai


class BuiltinLeapSeconds(LeapSecondTable):
    """The leap-second table shipped with loxjax (valid through 2017-01-01)."""

    def __init__(self) -> None:
        epochs = [(mjd - _MJD_J2000_DAY) * SECONDS_PER_DAY - SECONDS_PER_DAY // 2 for mjd, _ in _BUILTIN_TABLE]
        super().__init__(epochs, [ls for _, ls in _BUILTIN_TABLE])

    def __repr__(self):
        return "BuiltinLeapSeconds()"


class LeapSecondsKernel(LeapSecondTable):
    """Leap-second table parsed from a NAIF text kernel.

    Only the ``DELTET/DELTA_AT`` array is read; it holds pairs of
    ``<TAI-UTC>, @<YYYY-MON-D>``.

    Constructors:
        LeapSecondsKernel.from_file("naif0012.tls")
        LeapSecondsKernel.from_string(text)
    """

    @classmethod
    def from_string(cls, kernel: str) -> LeapSecondsKernel:
        """Parse kernel text.

        Args:
            kernel (str): Contents of a NAIF leap-seconds kernel.

        Returns:
            LeapSecondsKernel: The parsed table.

        Raises:
            InvalidLeapSecondKernel: If the ``DELTET/DELTA_AT`` array is
                missing, empty or contains an invalid date.
        """
        match = _KERNEL_ARRAY.search(kernel)
        if match is None:
            raise InvalidLeapSecondKernel(f"no leap seconds found in kernel under key {_KERNEL_KEY!r}")
        epochs = []
        leap_seconds = []
        for entry in _KERNEL_ENTRY.finditer(match.group("body")):
            month = _MONTHS.get(entry.group("month").upper())
            if month is None:
                raise InvalidLeapSecondKernel(f"invalid month in leap-second entry {entry.group(0)!r}")
            try:
                date = Date(int(entry.group("year")), month, int(entry.group("day")))
            except ValueError as exc:
                raise InvalidLeapSecondKernel(f"invalid date in leap-second entry {entry.group(0)!r}") from exc
            epochs.append(date.seconds_since_j2000())
            leap_seconds.append(int(entry.group("ls")))
        if not epochs:
            raise InvalidLeapSecondKernel(f"no leap seconds found in kernel under key {_KERNEL_KEY!r}")
        try:
            table = cls(epochs, leap_seconds)
        except ValueError as exc:
            raise InvalidLeapSecondKernel(str(exc)) from exc
        logger.debug("Parsed %d leap-second entries", len(table))
        return table

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> LeapSecondsKernel:
        """Read and parse a kernel file.

        Raises:
            FileNotFoundError: If *path* does not exist.
            InvalidLeapSecondKernel: If the kernel cannot be parsed.
        """
        path = pathlib.Path(path)
        table = cls.from_string(path.read_text())
        logger.info("Loaded %d leap seconds from %s", len(table), path)
        return table

    def __repr__(self):
        return f"LeapSecondsKernel(entries={len(self)})"
