"""Solar-system origins identified by their NAIF ID codes."""

from __future__ import annotations

import enum

from loxjax.errors import UnknownOrigin


class Origin(enum.IntEnum):
    """A solar-system body or barycenter.

    The integer value is the NAIF ID.  Names follow the NAIF conventions,
    barycenters are spelled out (``"Earth Barycenter"``).

    Examples:
        ```python
        from loxjax.bodies import Origin

        Origin.parse("luna") is Origin.MOON  # True
        Origin(599).name_str               # 'Jupiter'
        ```
    """

    SUN = 10

    # Planets
    MERCURY = 199
    VENUS = 299
    EARTH = 399
    MARS = 499
    JUPITER = 599
    SATURN = 699
    URANUS = 799
    NEPTUNE = 899
    PLUTO = 999

    # Barycenters
    SOLAR_SYSTEM_BARYCENTER = 0
    MERCURY_BARYCENTER = 1
    VENUS_BARYCENTER = 2
    EARTH_BARYCENTER = 3
    MARS_BARYCENTER = 4
    JUPITER_BARYCENTER = 5
    SATURN_BARYCENTER = 6
    URANUS_BARYCENTER = 7
    NEPTUNE_BARYCENTER = 8
    PLUTO_BARYCENTER = 9

    # Satellites
    MOON = 301
    PHOBOS = 401
    DEIMOS = 402
    IO = 501
    EUROPA = 502
    GANYMEDE = 503
    CALLISTO = 504
    AMALTHEA = 505
    THEBE = 514
    ADRASTEA = 515
    METIS = 516
    MIMAS = 601
    ENCELADUS = 602
    TETHYS = 603
    DIONE = 604
    RHEA = 605
    TITAN = 606
    HYPERION = 607
    IAPETUS = 608
    PHOEBE = 609
    ARIEL = 701
    UMBRIEL = 702
    TITANIA = 703
    OBERON = 704
    MIRANDA = 705
    CALIBAN = 716
    SYCORAX = 717
    TRITON = 801
    NEREID = 802
    PROTEUS = 808
    CHARON = 901

    @property
    def id(self) -> int:
        """NAIF ID code."""
        return int(self)

    @property
    def name_str(self) -> str:
        """Human-readable name, e.g. ``"Solar System Barycenter"``."""
        return self.name.replace("_", " ").title()

    @property
    def is_barycenter(self) -> bool:
        return 0 <= self.value <= 9

    @classmethod
    def parse(cls, name: str) -> Origin:
        """Look up an origin by name.

        Matching ignores case and treats underscores like spaces; ``"Luna"``
        and ``"SSB"`` are accepted as aliases.

        Args:
            name (str): Origin name.

        Returns:
            Origin: The matching origin.

        Raises:
            UnknownOrigin: If no origin has this name.
        """
        key = " ".join(name.replace("_", " ").split()).lower()
        try:
            return _BY_NAME[key]
        except KeyError:
            raise UnknownOrigin(f"no origin with name `{name}` is known") from None

    @classmethod
    def from_id(cls, naif_id: int) -> Origin:
        """Look up an origin by NAIF ID.

        Raises:
            UnknownOrigin: If no origin has this ID.
        """
        try:
            return cls(naif_id)
        except ValueError:
            raise UnknownOrigin(f"no origin with NAIF ID `{naif_id}` is known") from None

    def __str__(self):
        return self.name_str


_BY_NAME = {origin.name_str.lower(): origin for origin in Origin}
_BY_NAME["luna"] = Origin.MOON
_BY_NAME["ssb"] = Origin.SOLAR_SYSTEM_BARYCENTER
