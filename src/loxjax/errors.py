"""Exception types raised by loxjax.

All errors derive from :class:`LoxError`, which is a :class:`ValueError`
so that callers catching ``ValueError`` for invalid input keep working.
Arithmetic on time deltas never raises; it produces NaN deltas instead
(see :class:`~loxjax.time.TimeDelta`).
"""

from __future__ import annotations


class LoxError(ValueError):
    """Base class for all loxjax errors."""


class InvalidDate(LoxError):
    """A calendar date failed its range checks."""

    def __init__(self, year: int, month: int, day: int, message: str | None = None) -> None:
        super().__init__(message or f"invalid date: {year}-{month:02d}-{day:02d}")
        self.year = year
        self.month = month
        self.day = day


class InvalidTimeOfDay(LoxError):
    """A time of day failed its range checks."""


class InvalidSubsecond(LoxError):
    """A subsecond value was outside [0, 1) or could not be parsed."""


class NonLeapSecondDate(LoxError):
    """A UTC second of 60 was requested on a date without a leap second."""

    def __init__(self, date) -> None:
        super().__init__(f"no leap second on {date}")
        self.date = date


class UtcUndefined(LoxError):
    """UTC was requested before 1960-01-01, where it is not defined."""

    def __init__(self, detail: str = "") -> None:
        msg = "UTC is not defined before 1960-01-01"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class ProviderOutOfRange(LoxError):
    """An EOP or ΔUT1 lookup fell outside the tabulated data range."""

    def __init__(self, mjd: float, mjd_min: float, mjd_max: float, context: str = "") -> None:
        msg = f"MJD {mjd} is outside the tabulated range [{mjd_min}, {mjd_max}]"
        if context:
            msg = f"{context}: {msg}"
        super().__init__(msg)
        self.mjd = mjd
        self.mjd_min = mjd_min
        self.mjd_max = mjd_max
        self.context = context


class MissingProvider(LoxError):
    """A scale conversion needs external data but no provider was given."""


class MissingEopProvider(MissingProvider):
    """A terrestrial frame transformation was requested without EOP data."""


class UndefinedRotationalElements(LoxError):
    """The requested body has no IAU rotational-element model."""

    def __init__(self, origin) -> None:
        super().__init__(f"undefined rotational elements for {origin}")
        self.origin = origin


class UnknownScale(LoxError):
    """A time scale identifier could not be parsed."""


class UnknownFrame(LoxError):
    """A reference frame identifier could not be parsed."""


class UnknownOrigin(LoxError):
    """A body or origin identifier could not be parsed."""


class NonFiniteTimeDelta(LoxError):
    """A time delta was constructed from a non-finite real value."""


class InvalidLeapSecondKernel(LoxError):
    """A NAIF leap-second kernel could not be parsed."""
