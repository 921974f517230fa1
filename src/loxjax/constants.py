"""
The `constants` module defines the mathematical, time and physical constants used by the time and frame core.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
AS2RAD = 2.0 * PI / 360.0 / 3600.0

"""
Constant to convert radians to arcseconds. Equal to (360*3600)/(2pi). Units: *as/rad*
"""
RAD2AS = 360.0 * 3600.0 / PI / 2.0

"""
Constant to convert milliarcseconds to radians. Units: *rad/mas*
"""
MAS2RAD = AS2RAD / 1e3

"""
Constant to convert microarcseconds to radians. Units: *rad/uas*
"""
UAS2RAD = AS2RAD / 1e6

# Time Constants

"""
Seconds in a minute, hour, half day and day. Units: *s*
"""
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_HALF_DAY = 43200
SECONDS_PER_DAY = 86400

"""
Days in a Julian year and Julian century. Units: *days*
"""
DAYS_PER_JULIAN_YEAR = 365.25
DAYS_PER_JULIAN_CENTURY = 36525.0

"""
Seconds in a Julian year and Julian century. Units: *s*
"""
SECONDS_PER_JULIAN_YEAR = 31557600
SECONDS_PER_JULIAN_CENTURY = 3155760000

"""
Attoseconds in one second.
"""
ATTOSECONDS_PER_SECOND = 10**18

"""
Offset between Julian Date and Modified Julian Date. Units: *days*
"""
JD_MJD_OFFSET = 2400000.5

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
JD2000 = 2451545.0

"""
Modified Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
MJD2000 = 51544.5

"""
Whole seconds between the Julian epochs and J2000.0. Units: *s*
"""
SECONDS_BETWEEN_JD_AND_J2000 = 211813488000
SECONDS_BETWEEN_MJD_AND_J2000 = 4453444800
SECONDS_BETWEEN_J1950_AND_J2000 = 1577880000
SECONDS_BETWEEN_J1977_AND_J2000 = 725803200

# Physical Constants
"""
Speed of light in vacuum. Units: *m/s*

References:

1. D. Vallado, *Fundamentals of Astrodynamics and Applications (4th Ed.)*, 2010
"""
C_LIGHT = 299792458.0  # [m/s]Exact definition Vallado

"""
Astronomical Unit. Equal to the mean distance of the Earth from the sun.
TDB-compatible value. Units: *m*

References:

1. P. Gérard and B. Luzum, *IERS Technical Note 36*, 2010
"""
AU = 1.49597870700e11  # [m] Astronomical Unit IAU 2010

"""
Nominal Earth rotation rate used for the CIRF to TIRF angular velocity. [rad/s]

References:

1. G. Petit and B. Luzum, *IERS Technical Note 36*, 2010
"""
OMEGA_EARTH = 7.2921150e-5  # [rad/s]
