"""IAU WGCCRE 2015 rotational elements of the Sun, planets and the Moon.

Values are in degrees as published.  Right ascension and declination
polynomials are in Julian centuries, prime-meridian polynomials in days,
both TDB since J2000.  Nutation-precession angles are ``(theta0, theta1,
theta2)`` with ``theta1`` per century and ``theta2`` per century squared;
amplitude tuples are aligned with the angle table of their system.

References:
    1. B. A. Archinal et al., "Report of the IAU Working Group on
       Cartographic Coordinates and Rotational Elements: 2015",
       *Celestial Mechanics and Dynamical Astronomy* 130, 2018.
"""

# Nutation-precession angles

MERCURY_ANGLES = (
    (174.7910857, 149472.535875, 0.0),
    (349.5821714, 298945.07175, 0.0),
    (164.3732571, 448417.607625, 0.0),
    (339.1643429, 597890.1435, 0.0),
    (153.9554286, 747362.679375, 0.0),
)

# E1 ... E13
EARTH_ANGLES = (
    (125.045, -1935.5364525, 0.0),
    (250.089, -3871.072905, 0.0),
    (260.008, 475263.3328725, 0.0),
    (176.625, 487269.629985, 0.0),
    (357.529, 35999.0509575, 0.0),
    (311.589, 964468.49931, 0.0),
    (134.963, 477198.869325, 0.0),
    (276.617, 12006.300765, 0.0),
    (34.226, 63863.5132425, 0.0),
    (15.134, -5806.6093575, 0.0),
    (119.743, 131.84064, 0.0),
    (239.961, 6003.1503825, 0.0),
    (25.053, 473327.79642, 0.0),
)

MARS_ANGLES = (
    (190.72646643, 15917.10818695, 0.0),
    (21.4689247, 31834.27934054, 0.0),
    (332.86082793, 19139.89694742, 0.0),
    (394.93256437, 38280.79631835, 0.0),
    (189.6327156, 41215158.1842005, 12.711923222),
    (121.46893664, 660.22803474, 0.0),
    (231.05028581, 660.9912354, 0.0),
    (251.37314025, 1320.50145245, 0.0),
    (217.98635955, 38279.9612555, 0.0),
    (196.19729402, 19139.83628608, 0.0),
    (198.991226, 19139.4819985, 0.0),
    (226.292679, 38280.8511281, 0.0),
    (249.663391, 57420.7251593, 0.0),
    (266.18351, 76560.636795, 0.0),
    (79.398797, 0.5042615, 0.0),
    (122.433576, 19139.9407476, 0.0),
    (43.058401, 38280.8753272, 0.0),
    (57.663379, 57420.7517205, 0.0),
    (79.476401, 76560.6495004, 0.0),
    (166.325722, 0.5042615, 0.0),
    (129.071773, 19140.0328244, 0.0),
    (36.352167, 38281.0473591, 0.0),
    (56.668646, 57420.929536, 0.0),
    (67.364003, 76560.2552215, 0.0),
    (104.79268, 95700.4387578, 0.0),
    (95.391654, 0.5042615, 0.0),
)

# J1 ... J10 (satellite terms), then Ja ... Je
JUPITER_ANGLES = (
    (73.32, 91472.9, 0.0),
    (24.62, 45137.2, 0.0),
    (283.9, 4850.7, 0.0),
    (355.8, 1191.3, 0.0),
    (119.9, 262.1, 0.0),
    (229.8, 64.3, 0.0),
    (352.25, 2382.6, 0.0),
    (113.35, 6070.0, 0.0),
    (146.64, 182945.8, 0.0),
    (49.24, 90274.4, 0.0),
    (99.360714, 4850.4046, 0.0),
    (175.895369, 1191.9605, 0.0),
    (300.323162, 262.5475, 0.0),
    (114.012305, 6070.2476, 0.0),
    (49.511251, 64.3, 0.0),
)

# N; the satellite angles N1 ... N8 carry no planet terms
NEPTUNE_ANGLES = ((357.85, 52.316, 0.0),)


# Rotational elements: ((ra_poly, ra_trig), (dec_poly, dec_trig), (pm_poly, pm_trig), angles)

SUN = (
    ((286.13, 0.0, 0.0), ()),
    ((63.87, 0.0, 0.0), ()),
    ((84.176, 14.1844, 0.0), ()),
    (),
)

MERCURY = (
    ((281.0103, -0.0328, 0.0), ()),
    ((61.4155, -0.0049, 0.0), ()),
    (
        (329.5988, 6.1385108, 0.0),
        (0.01067257, -0.00112309, -0.0001104, -0.00002539, -0.00000571),
    ),
    MERCURY_ANGLES,
)

VENUS = (
    ((272.76, 0.0, 0.0), ()),
    ((67.16, 0.0, 0.0), ()),
    ((160.2, -1.4813688, 0.0), ()),
    (),
)

EARTH = (
    ((0.0, -0.641, 0.0), ()),
    ((90.0, -0.557, 0.0), ()),
    ((190.147, 360.9856235, 0.0), ()),
    (),
)

MOON = (
    (
        (269.9949, 0.0031, 0.0),
        (-3.8787, -0.1204, 0.07, -0.0172, 0.0, 0.0072, 0.0, 0.0, 0.0, -0.0052, 0.0, 0.0, 0.0043),
    ),
    (
        (66.5392, 0.013, 0.0),
        (1.5419, 0.0239, -0.0278, 0.0068, 0.0, -0.0029, 0.0009, 0.0, 0.0, 0.0008, 0.0, 0.0, -0.0009),
    ),
    (
        (38.3213, 13.17635815, -1.4e-12),
        (
            3.561, 0.1208, -0.0642, 0.0158, 0.0252, -0.0066, -0.0047,
            -0.0046, 0.0028, 0.0052, 0.004, 0.0019, -0.0044,
        ),
    ),
    EARTH_ANGLES,
)

MARS = (
    (
        (317.269202, -0.10927547, 0.0),
        (0.0,) * 10 + (0.000068, 0.000238, 0.000052, 0.000009, 0.419057),
    ),
    (
        (54.432516, -0.05827105, 0.0),
        (0.0,) * 15 + (0.000051, 0.000141, 0.000031, 0.000005, 1.591274),
    ),
    (
        (176.049863, 350.891982443297, 0.0),
        (0.0,) * 20 + (0.000145, 0.000157, 0.00004, 0.000001, 0.000001, 0.584542),
    ),
    MARS_ANGLES,
)

JUPITER = (
    (
        (268.056595, -0.006499, 0.0),
        (0.0,) * 10 + (0.000117, 0.000938, 0.001432, 0.00003, 0.00215),
    ),
    (
        (64.495303, 0.002413, 0.0),
        (0.0,) * 10 + (0.00005, 0.000404, 0.000617, -0.000013, 0.000926),
    ),
    ((284.95, 870.536, 0.0), ()),
    JUPITER_ANGLES,
)

SATURN = (
    ((40.589, -0.036, 0.0), ()),
    ((83.537, -0.004, 0.0), ()),
    ((38.9, 810.7939024, 0.0), ()),
    (),
)

URANUS = (
    ((257.311, 0.0, 0.0), ()),
    ((-15.175, 0.0, 0.0), ()),
    ((203.81, -501.1600928, 0.0), ()),
    (),
)

NEPTUNE = (
    ((299.36, 0.0, 0.0), (0.7,)),
    ((43.46, 0.0, 0.0), (-0.51,)),
    ((249.978, 541.1397757, 0.0), (-0.48,)),
    NEPTUNE_ANGLES,
)

PLUTO = (
    ((132.993, 0.0, 0.0), ()),
    ((-6.163, 0.0, 0.0), ()),
    ((302.695, 56.3625225, 0.0), ()),
    (),
)
