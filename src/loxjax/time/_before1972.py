"""TAI - UTC between 1960-01-01 and 1972-01-01.

Before the leap-second system UTC was steered by frequency offsets and
occasional steps of a fraction of a second, so TAI - UTC is a piecewise
linear function of the UTC Modified Julian Date:

    TAI - UTC = offset + (MJD - drift_epoch) * drift_rate

Data from the USNO table ``tai-utc.dat``.
"""

from __future__ import annotations

import numpy as np

from loxjax.constants import ATTOSECONDS_PER_SECOND, SECONDS_BETWEEN_MJD_AND_J2000, SECONDS_PER_DAY
from loxjax.errors import UtcUndefined
from loxjax.time._deltas import TimeDelta

_ATTOSECONDS_PER_NANOSECOND = ATTOSECONDS_PER_SECOND // 10**9

# Start of each interval (UTC MJD)
EPOCHS = np.array(
    [36934, 37300, 37512, 37665, 38334, 38395, 38486, 38639, 38761, 38820, 38942, 39004, 39126, 39887]
)

# TAI - UTC at the drift epoch [s]
OFFSETS = np.array(
    [
        1.417818, 1.422818, 1.372818, 1.845858, 1.945858, 3.240130, 3.340130,
        3.440130, 3.540130, 3.640130, 3.740130, 3.840130, 4.313170, 4.213170,
    ]
)

# Reference MJD of the drift term
DRIFT_EPOCHS = np.array(
    [37300, 37300, 37300, 37665, 37665, 38761, 38761, 38761, 38761, 38761, 38761, 38761, 39126, 39126]
)

# Drift rate [s/day]
DRIFT_RATES = np.array(
    [
        0.0012960, 0.0012960, 0.0012960, 0.0011232, 0.0011232, 0.0012960, 0.0012960,
        0.0012960, 0.0012960, 0.0012960, 0.0012960, 0.0012960, 0.0025920, 0.0025920,
    ]
)


def _interval(day: int) -> int:
    idx = int(np.searchsorted(EPOCHS, day, side="right")) - 1
    if idx < 0:
        raise UtcUndefined(f"MJD {day}")
    return idx


def _offset(utc: TimeDelta) -> TimeDelta:
    # Published to 1e-7 s, so the model is evaluated to the nanosecond
    day = (utc.seconds + SECONDS_BETWEEN_MJD_AND_J2000) // SECONDS_PER_DAY
    idx = _interval(day)
    mjd = utc.days_since_modified_julian_epoch()
    seconds = float(OFFSETS[idx] + (mjd - DRIFT_EPOCHS[idx]) * DRIFT_RATES[idx])
    return TimeDelta(0, round(seconds * 1e9) * _ATTOSECONDS_PER_NANOSECOND)


def delta_tai_utc_from_utc(utc) -> TimeDelta:
    """TAI - UTC for a UTC timestamp in 1960-1971.

    Args:
        utc (Utc): The timestamp.

    Returns:
        TimeDelta: TAI - UTC (positive), rounded to the nanosecond.

    Raises:
        UtcUndefined: If *utc* precedes 1960-01-01.
    """
    return _offset(utc.to_delta())


def delta_tai_utc_from_tai(tai) -> TimeDelta:
    """TAI - UTC for a TAI instant in 1960-1971.

    The drift equation is first inverted in TAI days to estimate the UTC
    timestamp, which is then fed back through :func:`delta_tai_utc_from_utc`.
    Both directions therefore agree to the nanosecond, including on the
    first day of each interval.

    Raises:
        UtcUndefined: If *tai* precedes 1960-01-01.
    """
    delta = tai.to_delta()
    day = (delta.seconds + SECONDS_BETWEEN_MJD_AND_J2000) // SECONDS_PER_DAY
    idx = _interval(day)
    mjd = tai.days_since_modified_julian_epoch()
    rate_utc = DRIFT_RATES[idx] / SECONDS_PER_DAY
    rate_tai = rate_utc / (1.0 + rate_utc) * SECONDS_PER_DAY
    offset = OFFSETS[idx]
    dt = mjd - DRIFT_EPOCHS[idx] - offset / SECONDS_PER_DAY
    estimate = float(offset + dt * rate_tai)
    estimate = TimeDelta(0, round(estimate * 1e9) * _ATTOSECONDS_PER_NANOSECOND)
    return _offset(delta - estimate)
