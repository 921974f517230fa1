"""Typed scalar quantities.

Each quantity wraps a single ``float`` in SI base units (radians, metres,
metres/second, hertz) or decibels.  Quantities of the same type add,
subtract and compare; scaling by a plain number keeps the type and
dividing two quantities of the same type gives a plain number.

Unit constants allow ``180 * deg`` or ``7.5 * kms`` style construction:

    from loxjax.units import deg, km

    angle = 90 * deg
    radius = 6378.137 * km
"""

from __future__ import annotations

import enum
import functools
import math
import numbers

from loxjax.constants import AS2RAD, AU, C_LIGHT

_TWO_PI = 2.0 * math.pi


def _fmt(value: float) -> str:
    s = repr(float(value))
    return s[:-2] if s.endswith(".0") else s


@functools.total_ordering
class _Quantity:
    __slots__ = ("_value",)

    def __init__(self, value: float) -> None:
        self._value = float(value)

    def as_float(self) -> float:
        """Value in the base unit."""
        return self._value

    def __float__(self) -> float:
        return self._value

    def __int__(self) -> int:
        return int(self._value)

    def __complex__(self) -> complex:
        return complex(self._value)

    def _same(self, other) -> bool:
        return type(other) is type(self)

    def __add__(self, other):
        if not self._same(other):
            return NotImplemented
        return type(self)(self._value + other._value)

    def __sub__(self, other):
        if not self._same(other):
            return NotImplemented
        return type(self)(self._value - other._value)

    def __neg__(self):
        return type(self)(-self._value)

    def __abs__(self):
        return type(self)(abs(self._value))

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return type(self)(self._value * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if self._same(other):
            return self._value / other._value
        if isinstance(other, numbers.Real):
            return type(self)(self._value / other)
        return NotImplemented

    def __eq__(self, other):
        if not self._same(other):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not self._same(other):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __repr__(self):
        return f"{type(self).__name__}({_fmt(self._value)})"


class Angle(_Quantity):
    """An angle in radians."""

    __slots__ = ()

    @classmethod
    def radians(cls, rad: float) -> Angle:
        return cls(rad)

    @classmethod
    def degrees(cls, deg: float) -> Angle:
        return cls(math.radians(deg))

    @classmethod
    def arcseconds(cls, asec: float) -> Angle:
        return cls(asec * AS2RAD)

    @classmethod
    def milliarcseconds(cls, mas: float) -> Angle:
        return cls.arcseconds(mas * 1e-3)

    @classmethod
    def microarcseconds(cls, uas: float) -> Angle:
        return cls.arcseconds(uas * 1e-6)

    @classmethod
    def from_hms(cls, hours: int, minutes: int, seconds: float) -> Angle:
        """Angle from hours, minutes and seconds of right ascension."""
        return cls.degrees(15.0 * (hours + minutes / 60.0 + seconds / 3600.0))

    def to_radians(self) -> float:
        return self._value

    def to_degrees(self) -> float:
        return math.degrees(self._value)

    def to_arcseconds(self) -> float:
        return self._value / AS2RAD

    def mod_two_pi(self) -> Angle:
        """Reduce to ``[0, 2*pi)``."""
        return Angle(self._value % _TWO_PI)

    def mod_two_pi_signed(self) -> Angle:
        """Reduce modulo ``2*pi`` keeping the sign."""
        return Angle(math.fmod(self._value, _TWO_PI))

    def normalize_two_pi(self, center: Angle | float = 0.0) -> Angle:
        """Wrap into ``[center - pi, center + pi)``.

        Args:
            center (Angle | float): Center of the interval [rad]. Default: 0.0

        Returns:
            Angle: The wrapped angle.
        """
        c = float(center)
        return Angle(self._value - _TWO_PI * math.floor((self._value + math.pi - c) / _TWO_PI))

    def sin(self) -> float:
        return math.sin(self._value)

    def cos(self) -> float:
        return math.cos(self._value)

    def tan(self) -> float:
        return math.tan(self._value)

    def __str__(self):
        return f"{_fmt(self.to_degrees())} deg"


class Distance(_Quantity):
    """A distance in metres."""

    __slots__ = ()

    @classmethod
    def meters(cls, m: float) -> Distance:
        return cls(m)

    @classmethod
    def kilometers(cls, km: float) -> Distance:
        return cls(km * 1e3)

    @classmethod
    def astronomical_units(cls, au: float) -> Distance:
        return cls(au * AU)

    def to_meters(self) -> float:
        return self._value

    def to_kilometers(self) -> float:
        return self._value / 1e3

    def to_astronomical_units(self) -> float:
        return self._value / AU

    def __str__(self):
        return f"{_fmt(self.to_kilometers())} km"


class Velocity(_Quantity):
    """A velocity in metres per second."""

    __slots__ = ()

    @classmethod
    def meters_per_second(cls, mps: float) -> Velocity:
        return cls(mps)

    @classmethod
    def kilometers_per_second(cls, kps: float) -> Velocity:
        return cls(kps * 1e3)

    def to_meters_per_second(self) -> float:
        return self._value

    def to_kilometers_per_second(self) -> float:
        return self._value / 1e3

    def __str__(self):
        return f"{_fmt(self.to_kilometers_per_second())} km/s"


class FrequencyBand(enum.Enum):
    """IEEE radar bands, plus HF/VHF/UHF."""

    HF = "HF"
    VHF = "VHF"
    UHF = "UHF"
    L = "L"
    S = "S"
    C = "C"
    X = "X"
    KU = "Ku"
    K = "K"
    KA = "Ka"
    V = "V"
    W = "W"
    G = "G"


# Upper band edges [Hz]
_BAND_EDGES = (
    (30e6, FrequencyBand.HF),
    (300e6, FrequencyBand.VHF),
    (1e9, FrequencyBand.UHF),
    (2e9, FrequencyBand.L),
    (4e9, FrequencyBand.S),
    (8e9, FrequencyBand.C),
    (12e9, FrequencyBand.X),
    (18e9, FrequencyBand.KU),
    (27e9, FrequencyBand.K),
    (40e9, FrequencyBand.KA),
    (75e9, FrequencyBand.V),
    (110e9, FrequencyBand.W),
    (300e9, FrequencyBand.G),
)


class Frequency(_Quantity):
    """A frequency in hertz."""

    __slots__ = ()

    @classmethod
    def hertz(cls, hz: float) -> Frequency:
        return cls(hz)

    @classmethod
    def kilohertz(cls, khz: float) -> Frequency:
        return cls(khz * 1e3)

    @classmethod
    def megahertz(cls, mhz: float) -> Frequency:
        return cls(mhz * 1e6)

    @classmethod
    def gigahertz(cls, ghz: float) -> Frequency:
        return cls(ghz * 1e9)

    @classmethod
    def terahertz(cls, thz: float) -> Frequency:
        return cls(thz * 1e12)

    def to_hertz(self) -> float:
        return self._value

    def to_kilohertz(self) -> float:
        return self._value / 1e3

    def to_megahertz(self) -> float:
        return self._value / 1e6

    def to_gigahertz(self) -> float:
        return self._value / 1e9

    def to_terahertz(self) -> float:
        return self._value / 1e12

    def wavelength(self) -> Distance:
        """Free-space wavelength."""
        return Distance(C_LIGHT / self._value)

    def band(self) -> FrequencyBand | None:
        """Radio band of this frequency; ``None`` below 3 MHz or above 300 GHz."""
        if self._value < 3e6:
            return None
        for edge, band in _BAND_EDGES:
            if self._value < edge:
                return band
        return None

    def __str__(self):
        return f"{_fmt(self.to_gigahertz())} GHz"


class Decibel(_Quantity):
    """A power ratio in decibels.

    Adding decibels multiplies the underlying linear ratios.
    """

    __slots__ = ()

    @classmethod
    def from_linear(cls, value: float) -> Decibel:
        """Decibels of a linear power ratio, ``10 log10(value)``."""
        return cls(10.0 * math.log10(value))

    def to_linear(self) -> float:
        return 10.0 ** (self._value / 10.0)

    def __str__(self):
        return f"{_fmt(self._value)} dB"


rad = Angle.radians(1.0)
deg = Angle.degrees(1.0)
arcsec = Angle.arcseconds(1.0)
mas = Angle.milliarcseconds(1.0)
uas = Angle.microarcseconds(1.0)
m = Distance.meters(1.0)
km = Distance.kilometers(1.0)
au = Distance.astronomical_units(1.0)
ms = Velocity.meters_per_second(1.0)
kms = Velocity.kilometers_per_second(1.0)
hz = Frequency.hertz(1.0)
khz = Frequency.kilohertz(1.0)
mhz = Frequency.megahertz(1.0)
ghz = Frequency.gigahertz(1.0)
thz = Frequency.terahertz(1.0)
db = Decibel(1.0)
