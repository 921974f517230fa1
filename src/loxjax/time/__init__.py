"""Time representation and time-scale conversion.

Instants are exact: a :class:`TimeDelta` holds integer seconds and
attoseconds, and a :class:`Time` tags such a delta since J2000 with its
:class:`TimeScale`.  UTC is handled by the separate :class:`Utc` type.
"""

from loxjax.time._dates import Date, TimeOfDay, days_in_month, is_leap_year
from loxjax.time._deltas import TimeDelta
from loxjax.time._intervals import Interval
from loxjax.time._julian import Epoch, JulianDate, Unit
from loxjax.time._leap_seconds import (
    BuiltinLeapSeconds,
    LeapSecondsKernel,
    LeapSecondsProvider,
    LeapSecondTable,
)
from loxjax.time._offsets import tdb_minus_tt
from loxjax.time._scales import TimeScale
from loxjax.time._subsecond import Subsecond
from loxjax.time._time import Time
from loxjax.time._ut1 import DeltaUt1TaiProvider
from loxjax.time._utc import Utc, default_leap_seconds

__all__ = [
    "BuiltinLeapSeconds",
    "Date",
    "DeltaUt1TaiProvider",
    "Epoch",
    "Interval",
    "JulianDate",
    "LeapSecondTable",
    "LeapSecondsKernel",
    "LeapSecondsProvider",
    "Subsecond",
    "Time",
    "TimeDelta",
    "TimeOfDay",
    "TimeScale",
    "Unit",
    "Utc",
    "days_in_month",
    "default_leap_seconds",
    "is_leap_year",
    "tdb_minus_tt",
]
