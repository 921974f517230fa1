"""Fractional-second carrier with attosecond resolution."""

from __future__ import annotations

import functools
import math

from loxjax.constants import ATTOSECONDS_PER_SECOND
from loxjax.errors import InvalidSubsecond

_MAX_DIGITS = 18

# Attoseconds per SI subunit, largest first
_UNITS = (
    ("milliseconds", 10**15),
    ("microseconds", 10**12),
    ("nanoseconds", 10**9),
    ("picoseconds", 10**6),
    ("femtoseconds", 10**3),
    ("attoseconds", 1),
)


@functools.total_ordering
class Subsecond:
    """A fraction of a second in ``[0, 1)``, stored as integer attoseconds.

    Conversion to and from the SI subunits (milli- through attoseconds) is
    lossless.

    Constructors:
        Subsecond(123_000_000_000_000_000)
        Subsecond.new(milliseconds=123, microseconds=456)
        Subsecond.from_f64(0.123456)
        Subsecond.from_digits("123456")
    """

    __slots__ = ("_attoseconds",)

    def __init__(self, attoseconds: int = 0) -> None:
        if not isinstance(attoseconds, int):
            raise InvalidSubsecond(f"attoseconds must be an integer, got {attoseconds!r}")
        if not 0 <= attoseconds < ATTOSECONDS_PER_SECOND:
            raise InvalidSubsecond(f"attoseconds out of range [0, 1e18): {attoseconds}")
        self._attoseconds = attoseconds

    @classmethod
    def new(
        cls,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
        picoseconds: int = 0,
        femtoseconds: int = 0,
        attoseconds: int = 0,
    ) -> Subsecond:
        """Build a subsecond from its three-digit SI components.

        Args:
            milliseconds (int): 0..999.
            microseconds (int): 0..999.
            nanoseconds (int): 0..999.
            picoseconds (int): 0..999.
            femtoseconds (int): 0..999.
            attoseconds (int): 0..999.

        Returns:
            Subsecond: The combined fraction.

        Raises:
            InvalidSubsecond: If any component is outside ``0..999``.
        """
        parts = (milliseconds, microseconds, nanoseconds, picoseconds, femtoseconds, attoseconds)
        total = 0
        for (name, scale), value in zip(_UNITS, parts):
            if not 0 <= value <= 999:
                raise InvalidSubsecond(f"{name} must be in 0..999, got {value}")
            total += value * scale
        return cls(total)

    @classmethod
    def from_f64(cls, value: float) -> Subsecond:
        """Build a subsecond from a real fraction of a second.

        Args:
            value (float): Fraction in ``[0, 1)``.

        Returns:
            Subsecond: The fraction rounded to the nearest attosecond.

        Raises:
            InvalidSubsecond: If *value* is not finite or outside ``[0, 1)``.
        """
        if not math.isfinite(value) or not 0.0 <= value < 1.0:
            raise InvalidSubsecond(f"subsecond must be in [0, 1), got {value}")
        return cls(min(round(value * ATTOSECONDS_PER_SECOND), ATTOSECONDS_PER_SECOND - 1))

    @classmethod
    def from_digits(cls, digits: str) -> Subsecond:
        """Parse the digits following a decimal point, e.g. ``"123"`` -> 0.123 s.

        Args:
            digits (str): Up to 18 decimal digits.

        Returns:
            Subsecond: The parsed fraction.

        Raises:
            InvalidSubsecond: If *digits* is empty, too long, or not numeric.
        """
        if not digits or len(digits) > _MAX_DIGITS or not digits.isdigit():
            raise InvalidSubsecond(f"invalid subsecond digits: {digits!r}")
        return cls(int(digits.ljust(_MAX_DIGITS, "0")))

    @property
    def attoseconds(self) -> int:
        """Total attoseconds, ``0 <= n < 10**18``."""
        return self._attoseconds

    def milliseconds(self) -> int:
        return self._attoseconds // 10**15

    def microseconds(self) -> int:
        return self._attoseconds // 10**12 % 1000

    def nanoseconds(self) -> int:
        return self._attoseconds // 10**9 % 1000

    def picoseconds(self) -> int:
        return self._attoseconds // 10**6 % 1000

    def femtoseconds(self) -> int:
        return self._attoseconds // 10**3 % 1000

    def attoseconds_component(self) -> int:
        return self._attoseconds % 1000

    def to_seconds_f64(self) -> float:
        """Return the fraction as a real number of seconds (lossy)."""
        return self._attoseconds / ATTOSECONDS_PER_SECOND

    def __float__(self) -> float:
        return self.to_seconds_f64()

    def __eq__(self, other):
        if not isinstance(other, Subsecond):
            return NotImplemented
        return self._attoseconds == other._attoseconds

    def __lt__(self, other):
        if not isinstance(other, Subsecond):
            return NotImplemented
        return self._attoseconds < other._attoseconds

    def __hash__(self):
        return hash(self._attoseconds)

    def __str__(self):
        digits = f"{self._attoseconds:018d}".rstrip("0")
        return digits or "0"

    def __repr__(self):
        return f"Subsecond({self._attoseconds})"
