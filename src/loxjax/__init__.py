"""
loxjax is the time and reference-frame core of the Lox astrodynamics toolkit, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    RAD2AS,
    MAS2RAD,
    UAS2RAD,
    JD_MJD_OFFSET,
    MJD2000,
    C_LIGHT,
    AU,
    OMEGA_EARTH,
)

from .config import set_dtype, get_dtype, reset_dtype

from .errors import (
    LoxError,
    MissingEopProvider,
    MissingProvider,
    ProviderOutOfRange,
    UndefinedRotationalElements,
    UnknownFrame,
    UnknownOrigin,
    UnknownScale,
)

from .rotations import Rotation, Rx, Ry, Rz

from .time import (
    Date,
    Time,
    TimeDelta,
    TimeOfDay,
    TimeScale,
    Utc,
)

from .bodies import Origin, rotational_elements

from .eop import EopProvider, load_eop_from_file, zero_eop

from .frames import (
    Frame,
    icrf_to_iau,
    icrf_to_itrf,
    itrf_to_icrf,
    rotation,
    state_icrf_to_itrf,
    state_itrf_to_icrf,
)

from .units import Angle, Decibel, Distance, Frequency, Velocity
