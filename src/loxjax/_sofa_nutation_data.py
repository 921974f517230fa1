"""Coefficient tables for the SOFA nutation, CIO locator and sidereal-time series.

The IAU 2000B luni-solar series has 77 terms.  Each row holds the integer
multipliers of (l, l', F, D, Omega) followed by the coefficients
(Sp, Spt, Cp, Ce, Cet, Se) in units of 0.1 microarcsecond:

    dpsi = sum((Sp + Spt * t) * sin(arg) + Cp * cos(arg))
    deps = sum((Ce + Cet * t) * cos(arg) + Se * sin(arg))

References:

    1. D. McCarthy and B. Luzum, *An abridged model of the precession-nutation
       of the celestial pole*, Celest. Mech. Dyn. Astron. 85, 2003.
"""

# fmt: off
LUNI_SOLAR_2000B_COEFFS = (
    (0, 0, 0, 0, 1, -172064161, -174666, 33386, 92052331, 9086, 15377),
    (0, 0, 2, -2, 2, -13170906, -1675, -13696, 5730336, -3015, -4587),
    (0, 0, 2, 0, 2, -2276413, -234, 2796, 978459, -485, 1374),
    (0, 0, 0, 0, 2, 2074554, 207, -698, -897492, 470, -291),
    (0, 1, 0, 0, 0, 1475877, -3633, 11817, 73871, -184, -1924),
    (0, 1, 2, -2, 2, -516821, 1226, -524, 224386, -677, -174),
    (1, 0, 0, 0, 0, 711159, 73, -872, -6750, 0, 358),
    (0, 0, 2, 0, 1, -387298, -367, 380, 200728, 18, 318),
    (1, 0, 2, 0, 2, -301461, -36, 816, 129025, -63, 367),
    (0, -1, 2, -2, 2, 215829, -494, 111, -95929, 299, 132),
    (0, 0, 2, -2, 1, 128227, 137, 181, -68982, -9, 39),
    (-1, 0, 2, 0, 2, 123457, 11, 19, -53311, 32, -4),
    (-1, 0, 0, 2, 0, 156994, 10, -168, -1235, 0, 82),
    (1, 0, 0, 0, 1, 63110, 63, 27, -33228, 0, -9),
    (-1, 0, 0, 0, 1, -57976, -63, -189, 31429, 0, -75),
    (-1, 0, 2, 2, 2, -59641, -11, 149, 25543, -11, 66),
    (1, 0, 2, 0, 1, -51613, -42, 129, 26366, 0, 78),
    (-2, 0, 2, 0, 1, 45893, 50, 31, -24236, -10, 20),
    (0, 0, 0, 2, 0, 63384, 11, -150, -1220, 0, 29),
    (0, 0, 2, 2, 2, -38571, -1, 158, 16452, -11, 68),
    (0, -2, 2, -2, 2, 32481, 0, 0, -13870, 0, 0),
    (-2, 0, 0, 2, 0, -47722, 0, -18, 477, 0, -25),
    (2, 0, 2, 0, 2, -31046, -1, 131, 13238, -11, 59),
    (1, 0, 2, -2, 2, 28593, 0, -1, -12338, 10, -3),
    (-1, 0, 2, 0, 1, 20441, 21, 10, -10758, 0, -3),
    (2, 0, 0, 0, 0, 29243, 0, -74, -609, 0, 13),
    (0, 0, 2, 0, 0, 25887, 0, -66, -550, 0, 11),
    (0, 1, 0, 0, 1, -14053, -25, 79, 8551, -2, -45),
    (-1, 0, 0, 2, 1, 15164, 10, 11, -8001, 0, -1),
    (0, 2, 2, -2, 2, -15794, 72, -16, 6850, -42, -5),
    (0, 0, -2, 2, 0, 21783, 0, 13, -167, 0, 13),
    (1, 0, 0, -2, 1, -12873, -10, -37, 6953, 0, -14),
    (0, -1, 0, 0, 1, -12654, 11, 63, 6415, 0, 26),
    (-1, 0, 2, 2, 1, -10204, 0, 25, 5222, 0, 15),
    (0, 2, 0, 0, 0, 16707, -85, -10, 168, -1, 10),
    (1, 0, 2, 2, 2, -7691, 0, 44, 3268, 0, 19),
    (-2, 0, 2, 0, 0, -11024, 0, -14, 104, 0, 2),
    (0, 1, 2, 0, 2, 7566, -21, -11, -3250, 0, -5),
    (0, 0, 2, 2, 1, -6637, -11, 25, 3353, 0, 14),
    (0, -1, 2, 0, 2, -7141, 21, 8, 3070, 0, 4),
    (0, 0, 0, 2, 1, -6302, -11, 2, 3272, 0, 4),
    (1, 0, 2, -2, 1, 5800, 10, 2, -3045, 0, -1),
    (2, 0, 2, -2, 2, 6443, 0, -7, -2768, 0, -4),
    (-2, 0, 0, 2, 1, -5774, -11, -15, 3041, 0, -5),
    (2, 0, 2, 0, 1, -5350, 0, 21, 2695, 0, 12),
    (0, -1, 2, -2, 1, -4752, -11, -3, 2719, 0, -3),
    (0, 0, 0, -2, 1, -4940, -11, -21, 2720, 0, -9),
    (-1, -1, 0, 2, 0, 7350, 0, -8, -51, 0, 4),
    (2, 0, 0, -2, 1, 4065, 0, 6, -2206, 0, 1),
    (1, 0, 0, 2, 0, 6579, 0, -24, -199, 0, 2),
    (0, 1, 2, -2, 1, 3579, 0, 5, -1900, 0, 1),
    (1, -1, 0, 0, 0, 4725, 0, -6, -41, 0, 3),
    (-2, 0, 2, 0, 2, -3075, 0, -2, 1313, 0, -1),
    (3, 0, 2, 0, 2, -2904, 0, 15, 1233, 0, 7),
    (0, -1, 0, 2, 0, 4348, 0, -10, -81, 0, 2),
    (1, -1, 2, 0, 2, -2878, 0, 8, 1232, 0, 4),
    (0, 0, 0, 1, 0, -4230, 0, 5, -20, 0, -2),
    (-1, -1, 2, 2, 2, -2819, 0, 7, 1207, 0, 3),
    (-1, 0, 2, 0, 0, -4056, 0, 5, 40, 0, -2),
    (0, -1, 2, 2, 2, -2647, 0, 11, 1129, 0, 5),
    (-2, 0, 0, 0, 1, -2294, 0, -10, 1266, 0, -4),
    (1, 1, 2, 0, 2, 2481, 0, -7, -1062, 0, -3),
    (2, 0, 0, 0, 1, 2179, 0, -2, -1129, 0, -2),
    (-1, 1, 0, 1, 0, 3276, 0, 1, -9, 0, 0),
    (1, 1, 0, 0, 0, -3389, 0, 5, 35, 0, -2),
    (1, 0, 2, 0, 0, 3339, 0, -13, -107, 0, 1),
    (-1, 0, 2, -2, 1, -1987, 0, -6, 1073, 0, -2),
    (1, 0, 0, 0, 2, -1981, 0, 0, 854, 0, 0),
    (-1, 0, 0, 1, 0, 4026, 0, -353, -553, 0, -139),
    (0, 0, 2, 1, 2, 1660, 0, -5, -710, 0, -2),
    (-1, 0, 2, 4, 2, -1521, 0, 9, 647, 0, 4),
    (-1, 1, 0, 1, 1, 1314, 0, 0, -700, 0, 0),
    (0, -2, 2, -2, 1, -1283, 0, 0, 672, 0, 0),
    (1, 0, 2, 2, 1, -1331, 0, 8, 663, 0, 4),
    (-2, 0, 2, 2, 2, 1383, 0, -2, -594, 0, -2),
    (-1, 0, 0, 0, 2, 1405, 0, 4, -610, 0, 2),
    (1, 1, 2, -2, 2, 1290, 0, 0, -556, 0, 0),
)
# fmt: on


# CIO locator s + XY/2, IAU 2006/2000A (IERS Conventions 2010, Table 5.2d).
# Polynomial part in microarcseconds, ascending powers of t.
CIO_LOCATOR_POLYNOMIAL = (94.00, 3808.65, -122.68, -72574.11, 27.98, 15.62)

# Periodic terms per power of t: (multipliers of l, l', F, D, Om, LVe, LE, pA), sin, cos.
# Amplitudes in microarcseconds, by descending magnitude.
# fmt: off
CIO_LOCATOR_TERMS = (
    # t^0
    (
        ((0, 0, 0, 0, 1, 0, 0, 0), -2640.73, 0.39),
        ((0, 0, 0, 0, 2, 0, 0, 0), -63.53, 0.02),
        ((0, 0, 2, -2, 3, 0, 0, 0), -11.75, -0.01),
        ((0, 0, 2, -2, 1, 0, 0, 0), -11.21, -0.01),
        ((0, 0, 2, -2, 2, 0, 0, 0), 4.57, 0.00),
        ((0, 0, 2, 0, 3, 0, 0, 0), -2.02, 0.00),
        ((0, 0, 2, 0, 1, 0, 0, 0), -1.98, 0.00),
        ((0, 0, 0, 0, 3, 0, 0, 0), 1.72, 0.00),
        ((0, 1, 0, 0, 1, 0, 0, 0), 1.41, 0.01),
        ((0, 1, 0, 0, -1, 0, 0, 0), 1.26, 0.01),
        ((1, 0, 0, 0, -1, 0, 0, 0), 0.63, 0.00),
        ((1, 0, 0, 0, 1, 0, 0, 0), 0.63, 0.00),
        ((0, 1, 2, -2, 3, 0, 0, 0), -0.46, 0.00),
        ((0, 1, 2, -2, 1, 0, 0, 0), -0.45, 0.00),
        ((0, 0, 4, -4, 4, 0, 0, 0), -0.36, 0.00),
        ((0, 0, 1, -1, 1, -8, 12, 0), 0.24, 0.12),
        ((0, 0, 2, 0, 0, 0, 0, 0), -0.32, 0.00),
        ((0, 0, 2, 0, 2, 0, 0, 0), -0.28, 0.00),
        ((1, 0, 2, 0, 3, 0, 0, 0), -0.27, 0.00),
        ((1, 0, 2, 0, 1, 0, 0, 0), -0.26, 0.00),
        ((0, 0, 2, -2, 0, 0, 0, 0), 0.21, 0.00),
        ((0, 1, -2, 2, -3, 0, 0, 0), -0.19, 0.00),
        ((0, 1, -2, 2, -1, 0, 0, 0), -0.18, 0.00),
        ((0, 0, 0, 0, 0, 8, -13, -1), 0.10, -0.05),
        ((0, 0, 0, 2, 0, 0, 0, 0), -0.15, 0.00),
        ((2, 0, -2, 0, -1, 0, 0, 0), 0.14, 0.00),
        ((0, 1, 2, -2, 2, 0, 0, 0), 0.14, 0.00),
        ((1, 0, 0, -2, 1, 0, 0, 0), -0.14, 0.00),
        ((1, 0, 0, -2, -1, 0, 0, 0), -0.14, 0.00),
        ((0, 0, 4, -2, 4, 0, 0, 0), -0.13, 0.00),
        ((0, 0, 2, -2, 4, 0, 0, 0), 0.11, 0.00),
        ((1, 0, -2, 0, -3, 0, 0, 0), -0.11, 0.00),
        ((1, 0, -2, 0, -1, 0, 0, 0), -0.11, 0.00),
    ),
    # t^1
    (
        ((0, 0, 0, 0, 2, 0, 0, 0), -0.07, 3.57),
        ((0, 0, 0, 0, 1, 0, 0, 0), 1.73, -0.03),
        ((0, 0, 2, -2, 3, 0, 0, 0), 0.00, 0.48),
    ),
    # t^2
    (
        ((0, 0, 0, 0, 1, 0, 0, 0), 743.52, -0.17),
        ((0, 0, 2, -2, 2, 0, 0, 0), 56.91, 0.06),
        ((0, 0, 2, 0, 2, 0, 0, 0), 9.84, -0.01),
        ((0, 0, 0, 0, 2, 0, 0, 0), -8.85, 0.01),
        ((0, 1, 0, 0, 0, 0, 0, 0), -6.38, -0.05),
        ((1, 0, 0, 0, 0, 0, 0, 0), -3.07, 0.00),
        ((0, 1, 2, -2, 2, 0, 0, 0), 2.23, 0.00),
        ((0, 0, 2, 0, 1, 0, 0, 0), 1.67, 0.00),
        ((1, 0, 2, 0, 2, 0, 0, 0), 1.30, 0.00),
        ((0, 1, -2, 2, -2, 0, 0, 0), 0.93, 0.00),
        ((1, 0, 0, -2, 0, 0, 0, 0), 0.68, 0.00),
        ((0, 0, 2, -2, 1, 0, 0, 0), -0.55, 0.00),
        ((1, 0, -2, 0, -2, 0, 0, 0), 0.53, 0.00),
        ((0, 0, 0, 2, 0, 0, 0, 0), -0.27, 0.00),
        ((1, 0, 0, 0, 1, 0, 0, 0), -0.27, 0.00),
        ((1, 0, -2, -2, -2, 0, 0, 0), -0.26, 0.00),
        ((1, 0, 0, 0, -1, 0, 0, 0), -0.25, 0.00),
        ((1, 0, 2, 0, 1, 0, 0, 0), 0.22, 0.00),
        ((2, 0, 0, -2, 0, 0, 0, 0), -0.21, 0.00),
        ((2, 0, -2, 0, -1, 0, 0, 0), 0.20, 0.00),
        ((0, 0, 2, 2, 2, 0, 0, 0), 0.17, 0.00),
        ((2, 0, 2, 0, 2, 0, 0, 0), 0.13, 0.00),
        ((2, 0, 0, 0, 0, 0, 0, 0), -0.13, 0.00),
        ((1, 0, 2, -2, 2, 0, 0, 0), -0.12, 0.00),
        ((0, 0, 2, 0, 0, 0, 0, 0), -0.11, 0.00),
    ),
    # t^3
    (
        ((0, 0, 0, 0, 1, 0, 0, 0), 0.30, -23.42),
        ((0, 0, 2, -2, 2, 0, 0, 0), -0.03, -1.46),
        ((0, 0, 2, 0, 2, 0, 0, 0), -0.01, -0.25),
        ((0, 0, 0, 0, 2, 0, 0, 0), 0.00, 0.23),
    ),
    # t^4
    (
        ((0, 0, 0, 0, 1, 0, 0, 0), -0.26, -0.01),
    ),
)
# fmt: on


# Equation of the equinoxes complementary terms, IERS Conventions 2003
# (Table 5.2e): (multipliers of l, l', F, D, Om, LVe, LE, pA), sin, cos.
# Amplitudes in microarcseconds, by descending magnitude.
# fmt: off
EQUINOX_COMPLEMENTARY_TERMS = (
    (0, 0, 0, 0, 1, 0, 0, 0, 2640.96, -0.39),
    (0, 0, 0, 0, 2, 0, 0, 0, 63.52, -0.02),
    (0, 0, 2, -2, 3, 0, 0, 0, 11.75, 0.01),
    (0, 0, 2, -2, 1, 0, 0, 0, 11.21, 0.01),
    (0, 0, 2, -2, 2, 0, 0, 0, -4.55, 0.00),
    (0, 0, 2, 0, 3, 0, 0, 0, 2.02, 0.00),
    (0, 0, 2, 0, 1, 0, 0, 0, 1.98, 0.00),
    (0, 0, 0, 0, 3, 0, 0, 0, -1.72, 0.00),
    (0, 1, 0, 0, 1, 0, 0, 0, -1.41, -0.01),
    (0, 1, 0, 0, -1, 0, 0, 0, -1.26, -0.01),
    (1, 0, 0, 0, -1, 0, 0, 0, -0.63, 0.00),
    (1, 0, 0, 0, 1, 0, 0, 0, -0.63, 0.00),
    (0, 1, 2, -2, 3, 0, 0, 0, 0.46, 0.00),
    (0, 1, 2, -2, 1, 0, 0, 0, 0.45, 0.00),
    (0, 0, 4, -4, 4, 0, 0, 0, 0.36, 0.00),
    (0, 0, 1, -1, 1, -8, 12, 0, -0.24, -0.12),
    (0, 0, 2, 0, 0, 0, 0, 0, 0.32, 0.00),
    (0, 0, 2, 0, 2, 0, 0, 0, 0.28, 0.00),
    (1, 0, 2, 0, 3, 0, 0, 0, 0.27, 0.00),
    (1, 0, 2, 0, 1, 0, 0, 0, 0.26, 0.00),
    (0, 0, 2, -2, 0, 0, 0, 0, -0.21, 0.00),
    (0, 1, -2, 2, -3, 0, 0, 0, 0.19, 0.00),
    (0, 1, -2, 2, -1, 0, 0, 0, 0.18, 0.00),
    (0, 0, 0, 0, 0, 8, -13, -1, -0.10, 0.05),
    (0, 0, 0, 2, 0, 0, 0, 0, 0.15, 0.00),
    (2, 0, -2, 0, -1, 0, 0, 0, -0.14, 0.00),
    (1, 0, 0, -2, 1, 0, 0, 0, 0.14, 0.00),
    (0, 1, 2, -2, 2, 0, 0, 0, -0.14, 0.00),
    (1, 0, 0, -2, -1, 0, 0, 0, 0.14, 0.00),
    (0, 0, 4, -2, 4, 0, 0, 0, 0.13, 0.00),
    (0, 0, 2, -2, 4, 0, 0, 0, -0.11, 0.00),
    (1, 0, -2, 0, -3, 0, 0, 0, 0.11, 0.00),
    (1, 0, -2, 0, -1, 0, 0, 0, 0.11, 0.00),
)

# Terms multiplied by t
EQUINOX_COMPLEMENTARY_TERMS_T = (
    (0, 0, 0, 0, 1, 0, 0, 0, -0.87, 0.00),
)
# fmt: on


# IAU 1980 nutation, 106 terms: multipliers of (l, l', F, D, Om) followed by
# (Sp, Spt, Ce, Cet) in units of 0.1 milliarcsecond:
#
#     dpsi = sum((Sp + Spt * t) * sin(arg))
#     deps = sum((Ce + Cet * t) * cos(arg))
# fmt: off
NUTATION_1980_COEFFS = (
    (0, 0, 0, 0, 1, -171996.0, -174.2, 92025.0, 8.9),
    (0, 0, 0, 0, 2, 2062.0, 0.2, -895.0, 0.5),
    (-2, 0, 2, 0, 1, 46.0, 0.0, -24.0, 0.0),
    (2, 0, -2, 0, 0, 11.0, 0.0, 0.0, 0.0),
    (-2, 0, 2, 0, 2, -3.0, 0.0, 1.0, 0.0),
    (1, -1, 0, -1, 0, -3.0, 0.0, 0.0, 0.0),
    (0, -2, 2, -2, 1, -2.0, 0.0, 1.0, 0.0),
    (2, 0, -2, 0, 1, 1.0, 0.0, 0.0, 0.0),
    (0, 0, 2, -2, 2, -13187.0, -1.6, 5736.0, -3.1),
    (0, 1, 0, 0, 0, 1426.0, -3.4, 54.0, -0.1),
    (0, 1, 2, -2, 2, -517.0, 1.2, 224.0, -0.6),
    (0, -1, 2, -2, 2, 217.0, -0.5, -95.0, 0.3),
    (0, 0, 2, -2, 1, 129.0, 0.1, -70.0, 0.0),
    (2, 0, 0, -2, 0, 48.0, 0.0, 1.0, 0.0),
    (0, 0, 2, -2, 0, -22.0, 0.0, 0.0, 0.0),
    (0, 2, 0, 0, 0, 17.0, -0.1, 0.0, 0.0),
    (0, 1, 0, 0, 1, -15.0, 0.0, 9.0, 0.0),
    (0, 2, 2, -2, 2, -16.0, 0.1, 7.0, 0.0),
    (0, -1, 0, 0, 1, -12.0, 0.0, 6.0, 0.0),
    (-2, 0, 0, 2, 1, -6.0, 0.0, 3.0, 0.0),
    (0, -1, 2, -2, 1, -5.0, 0.0, 3.0, 0.0),
    (2, 0, 0, -2, 1, 4.0, 0.0, -2.0, 0.0),
    (0, 1, 2, -2, 1, 4.0, 0.0, -2.0, 0.0),
    (1, 0, 0, -1, 0, -4.0, 0.0, 0.0, 0.0),
    (2, 1, 0, -2, 0, 1.0, 0.0, 0.0, 0.0),
    (0, 0, -2, 2, 1, 1.0, 0.0, 0.0, 0.0),
    (0, 1, -2, 2, 0, -1.0, 0.0, 0.0, 0.0),
    (0, 1, 0, 0, 2, 1.0, 0.0, 0.0, 0.0),
    (-1, 0, 0, 1, 1, 1.0, 0.0, 0.0, 0.0),
    (0, 1, 2, -2, 0, -1.0, 0.0, 0.0, 0.0),
    (0, 0, 2, 0, 2, -2274.0, -0.2, 977.0, -0.5),
    (1, 0, 0, 0, 0, 712.0, 0.1, -7.0, 0.0),
    (0, 0, 2, 0, 1, -386.0, -0.4, 200.0, 0.0),
    (1, 0, 2, 0, 2, -301.0, 0.0, 129.0, -0.1),
    (1, 0, 0, -2, 0, -158.0, 0.0, -1.0, 0.0),
    (-1, 0, 2, 0, 2, 123.0, 0.0, -53.0, 0.0),
    (0, 0, 0, 2, 0, 63.0, 0.0, -2.0, 0.0),
    (1, 0, 0, 0, 1, 63.0, 0.1, -33.0, 0.0),
    (-1, 0, 0, 0, 1, -58.0, -0.1, 32.0, 0.0),
    (-1, 0, 2, 2, 2, -59.0, 0.0, 26.0, 0.0),
    (1, 0, 2, 0, 1, -51.0, 0.0, 27.0, 0.0),
    (0, 0, 2, 2, 2, -38.0, 0.0, 16.0, 0.0),
    (2, 0, 0, 0, 0, 29.0, 0.0, -1.0, 0.0),
    (1, 0, 2, -2, 2, 29.0, 0.0, -12.0, 0.0),
    (2, 0, 2, 0, 2, -31.0, 0.0, 13.0, 0.0),
    (0, 0, 2, 0, 0, 26.0, 0.0, -1.0, 0.0),
    (-1, 0, 2, 0, 1, 21.0, 0.0, -10.0, 0.0),
    (-1, 0, 0, 2, 1, 16.0, 0.0, -8.0, 0.0),
    (1, 0, 0, -2, 1, -13.0, 0.0, 7.0, 0.0),
    (-1, 0, 2, 2, 1, -10.0, 0.0, 5.0, 0.0),
    (1, 1, 0, -2, 0, -7.0, 0.0, 0.0, 0.0),
    (0, 1, 2, 0, 2, 7.0, 0.0, -3.0, 0.0),
    (0, -1, 2, 0, 2, -7.0, 0.0, 3.0, 0.0),
    (1, 0, 2, 2, 2, -8.0, 0.0, 3.0, 0.0),
    (1, 0, 0, 2, 0, 6.0, 0.0, 0.0, 0.0),
    (2, 0, 2, -2, 2, 6.0, 0.0, -3.0, 0.0),
    (0, 0, 0, 2, 1, -6.0, 0.0, 3.0, 0.0),
    (0, 0, 2, 2, 1, -7.0, 0.0, 3.0, 0.0),
    (1, 0, 2, -2, 1, 6.0, 0.0, -3.0, 0.0),
    (0, 0, 0, -2, 1, -5.0, 0.0, 3.0, 0.0),
    (1, -1, 0, 0, 0, 5.0, 0.0, 0.0, 0.0),
    (2, 0, 2, 0, 1, -5.0, 0.0, 3.0, 0.0),
    (0, 1, 0, -2, 0, -4.0, 0.0, 0.0, 0.0),
    (1, 0, -2, 0, 0, 4.0, 0.0, 0.0, 0.0),
    (0, 0, 0, 1, 0, -4.0, 0.0, 0.0, 0.0),
    (1, 1, 0, 0, 0, -3.0, 0.0, 0.0, 0.0),
    (1, 0, 2, 0, 0, 3.0, 0.0, 0.0, 0.0),
    (1, -1, 2, 0, 2, -3.0, 0.0, 1.0, 0.0),
    (-1, -1, 2, 2, 2, -3.0, 0.0, 1.0, 0.0),
    (-2, 0, 0, 0, 1, -2.0, 0.0, 1.0, 0.0),
    (3, 0, 2, 0, 2, -3.0, 0.0, 1.0, 0.0),
    (0, -1, 2, 2, 2, -3.0, 0.0, 1.0, 0.0),
    (1, 1, 2, 0, 2, 2.0, 0.0, -1.0, 0.0),
    (-1, 0, 2, -2, 1, -2.0, 0.0, 1.0, 0.0),
    (2, 0, 0, 0, 1, 2.0, 0.0, -1.0, 0.0),
    (1, 0, 0, 0, 2, -2.0, 0.0, 1.0, 0.0),
    (3, 0, 0, 0, 0, 2.0, 0.0, 0.0, 0.0),
    (0, 0, 2, 1, 2, 2.0, 0.0, -1.0, 0.0),
    (-1, 0, 0, 0, 2, 1.0, 0.0, -1.0, 0.0),
    (1, 0, 0, -4, 0, -1.0, 0.0, 0.0, 0.0),
    (-2, 0, 2, 2, 2, 1.0, 0.0, -1.0, 0.0),
    (-1, 0, 2, 4, 2, -2.0, 0.0, 1.0, 0.0),
    (2, 0, 0, -4, 0, -1.0, 0.0, 0.0, 0.0),
    (1, 1, 2, -2, 2, 1.0, 0.0, -1.0, 0.0),
    (1, 0, 2, 2, 1, -1.0, 0.0, 1.0, 0.0),
    (-2, 0, 2, 4, 2, -1.0, 0.0, 1.0, 0.0),
    (-1, 0, 4, 0, 2, 1.0, 0.0, 0.0, 0.0),
    (1, -1, 0, -2, 0, 1.0, 0.0, 0.0, 0.0),
    (2, 0, 2, -2, 1, 1.0, 0.0, -1.0, 0.0),
    (2, 0, 2, 2, 2, -1.0, 0.0, 0.0, 0.0),
    (1, 0, 0, 2, 1, -1.0, 0.0, 0.0, 0.0),
    (0, 0, 4, -2, 2, 1.0, 0.0, 0.0, 0.0),
    (3, 0, 2, -2, 2, 1.0, 0.0, 0.0, 0.0),
    (1, 0, 2, -2, 0, -1.0, 0.0, 0.0, 0.0),
    (0, 1, 2, 0, 1, 1.0, 0.0, 0.0, 0.0),
    (-1, -1, 0, 2, 1, 1.0, 0.0, 0.0, 0.0),
    (0, 0, -2, 0, 1, -1.0, 0.0, 0.0, 0.0),
    (0, 0, 2, -1, 2, -1.0, 0.0, 0.0, 0.0),
    (0, 1, 0, 2, 0, -1.0, 0.0, 0.0, 0.0),
    (1, 0, -2, -2, 0, -1.0, 0.0, 0.0, 0.0),
    (0, -1, 2, 0, 1, -1.0, 0.0, 0.0, 0.0),
    (1, 1, 0, -2, 1, -1.0, 0.0, 0.0, 0.0),
    (1, 0, -2, 2, 0, -1.0, 0.0, 0.0, 0.0),
    (2, 0, 0, 2, 0, 1.0, 0.0, 0.0, 0.0),
    (0, 0, 2, 4, 2, -1.0, 0.0, 0.0, 0.0),
    (0, 1, 0, 1, 0, 1.0, 0.0, 0.0, 0.0),
)
# fmt: on
