"""Reference frames and the rotations between them.

Submodules:

- :mod:`~loxjax.frames.iers`: IERS quantities at an instant (nutation,
  CIP, CIO/TIO locators, Earth rotation angle, sidereal time, polar motion).
- :mod:`~loxjax.frames.icrf_itrf`: ICRF -> CIRF -> TIRF -> ITRF chain.
- :mod:`~loxjax.frames.iau`: ICRF <-> IAU body-fixed frames.

:class:`Frame` names a frame and :func:`rotation` connects any two.
"""

from loxjax.frames._frames import Frame, FrameKind, rotation
from loxjax.frames.iau import (
    iau_rotation,
    iau_to_icrf,
    icrf_to_iau,
    state_iau_to_icrf,
    state_icrf_to_iau,
)
from loxjax.frames.icrf_itrf import (
    cirf_to_icrf,
    cirf_to_tirf,
    icrf_to_cirf,
    icrf_to_itrf,
    itrf_to_icrf,
    itrf_to_tirf,
    state_icrf_to_itrf,
    state_itrf_to_icrf,
    tirf_to_cirf,
    tirf_to_itrf,
)
from loxjax.frames.iers import (
    CipCoords,
    Nutation,
    NutationModel,
    PoleCoords,
    cio_locator,
    cip_coords,
    earth_rotation_angle,
    equation_of_the_equinoxes,
    gast,
    gmst,
    mean_obliquity,
    nutation,
    polar_motion_matrix,
    pole_coords,
    tio_locator,
)

__all__ = [
    "CipCoords",
    "Frame",
    "FrameKind",
    "Nutation",
    "NutationModel",
    "PoleCoords",
    "cio_locator",
    "cip_coords",
    "cirf_to_icrf",
    "cirf_to_tirf",
    "earth_rotation_angle",
    "equation_of_the_equinoxes",
    "gast",
    "gmst",
    "iau_rotation",
    "iau_to_icrf",
    "icrf_to_cirf",
    "icrf_to_iau",
    "icrf_to_itrf",
    "itrf_to_icrf",
    "itrf_to_tirf",
    "mean_obliquity",
    "nutation",
    "polar_motion_matrix",
    "pole_coords",
    "rotation",
    "state_iau_to_icrf",
    "state_icrf_to_iau",
    "state_icrf_to_itrf",
    "state_itrf_to_icrf",
    "tio_locator",
    "tirf_to_cirf",
    "tirf_to_itrf",
]
