"""Named reference frames and the frame-to-frame rotation dispatcher."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from loxjax.bodies import Origin, has_rotational_elements
from loxjax.eop import as_eop_provider
from loxjax.errors import UndefinedRotationalElements, UnknownFrame, UnknownOrigin
from loxjax.frames.iau import iau_to_icrf, icrf_to_iau
from loxjax.frames.icrf_itrf import cirf_to_tirf, icrf_to_cirf, tirf_to_itrf
from loxjax.rotations import Rotation
from loxjax.time import Time, Utc


class FrameKind(enum.Enum):
    """Frame families."""

    ICRF = "ICRF"
    CIRF = "CIRF"
    TIRF = "TIRF"
    ITRF = "ITRF"
    IAU = "IAU"


_NAMES = {
    FrameKind.ICRF: "International Celestial Reference Frame",
    FrameKind.CIRF: "Celestial Intermediate Reference Frame",
    FrameKind.TIRF: "Terrestrial Intermediate Reference Frame",
    FrameKind.ITRF: "International Terrestrial Reference Frame",
}

# ICRF -> CIRF -> TIRF -> ITRF
_EARTH_CHAIN = (FrameKind.ICRF, FrameKind.CIRF, FrameKind.TIRF, FrameKind.ITRF)
_EARTH_STEPS = (icrf_to_cirf, cirf_to_tirf, tirf_to_itrf)


@dataclass(frozen=True)
class Frame:
    """A reference frame.

    The celestial and terrestrial frames are available as ``Frame.ICRF``,
    ``Frame.CIRF``, ``Frame.TIRF`` and ``Frame.ITRF``; body-fixed frames
    are built with :meth:`iau`.

    Args:
        kind (FrameKind): Frame family.
        origin (Origin | None): Body of an IAU frame, ``None`` otherwise.

    Raises:
        UndefinedRotationalElements: For an IAU frame of a body without a
            rotational model.

    Examples:
        ```python
        from loxjax.frames import Frame

        Frame.parse("IAU_EARTH").name
        # 'IAU Body-Fixed Reference Frame for Earth'
        ```
    """

    kind: FrameKind
    origin: Origin | None = None

    def __post_init__(self):
        if self.kind is FrameKind.IAU:
            if self.origin is None or not has_rotational_elements(self.origin):
                raise UndefinedRotationalElements(self.origin)
            object.__setattr__(self, "origin", Origin(self.origin))
        elif self.origin is not None:
            raise ValueError(f"{self.kind.value} does not take an origin")

    @classmethod
    def iau(cls, origin: Origin | str) -> Frame:
        """IAU body-fixed frame of *origin*."""
        if isinstance(origin, str):
            origin = Origin.parse(origin)
        return cls(FrameKind.IAU, origin)

    @classmethod
    def parse(cls, name: str) -> Frame:
        """Parse a frame abbreviation.

        Accepts ``ICRF``, ``CIRF``, ``TIRF`` and ``ITRF`` in upper or lower
        case, and ``IAU_<BODY>`` for bodies with a rotational model.

        Raises:
            UnknownFrame: If *name* names no known frame.
        """
        for kind in _EARTH_CHAIN:
            if name in (kind.value, kind.value.lower()):
                return cls(kind)
        prefix, _, body = name.partition("_")
        if prefix.lower() == "iau" and body:
            try:
                return cls.iau(Origin.parse(body))
            except (UnknownOrigin, UndefinedRotationalElements):
                pass
        raise UnknownFrame(f"no frame with name '{name}' is known")

    @property
    def name(self) -> str:
        if self.kind is not FrameKind.IAU:
            return _NAMES[self.kind]
        body = self.origin.name_str
        if self.origin in (Origin.SUN, Origin.MOON):
            return f"IAU Body-Fixed Reference Frame for the {body}"
        return f"IAU Body-Fixed Reference Frame for {body}"

    @property
    def abbreviation(self) -> str:
        if self.kind is not FrameKind.IAU:
            return self.kind.value
        return "IAU_" + self.origin.name_str.replace(" ", "_").replace("-", "_").upper()

    @property
    def is_rotating(self) -> bool:
        """False for the quasi-inertial ICRF and CIRF."""
        return self.kind not in (FrameKind.ICRF, FrameKind.CIRF)

    def __str__(self):
        return self.abbreviation


Frame.ICRF = Frame(FrameKind.ICRF)
Frame.CIRF = Frame(FrameKind.CIRF)
Frame.TIRF = Frame(FrameKind.TIRF)
Frame.ITRF = Frame(FrameKind.ITRF)


def _as_frame(frame: Frame | str) -> Frame:
    return Frame.parse(frame) if isinstance(frame, str) else frame


def _earth_chain(origin: FrameKind, target: FrameKind, time, eop) -> Rotation:
    i, j = _EARTH_CHAIN.index(origin), _EARTH_CHAIN.index(target)
    rot = Rotation.identity()
    if i < j:
        for step in _EARTH_STEPS[i:j]:
            rot = rot.compose(step(time, eop))
    else:
        for step in reversed(_EARTH_STEPS[j:i]):
            rot = rot.compose(step(time, eop).transpose())
    return rot


def rotation(origin: Frame | str, target: Frame | str, time: Time | Utc, eop=None) -> Rotation:
    """Rotation from *origin* to *target* at *time*.

    Terrestrial frames are reached along ICRF -> CIRF -> TIRF -> ITRF;
    IAU body-fixed frames are connected through the ICRF.

    Args:
        origin (Frame | str): Source frame.
        target (Frame | str): Destination frame.
        time: Instant of evaluation.
        eop: EOP provider or table. Needed for TIRF and ITRF.

    Returns:
        Rotation: Maps states in *origin* to states in *target*.

    Raises:
        UnknownFrame: If a frame name cannot be parsed.
        MissingEopProvider: If a terrestrial step needs EOP data and *eop*
            is None.

    Examples:
        ```python
        from loxjax.eop import zero_eop
        from loxjax.frames import rotation
        from loxjax.time import Time

        rot = rotation("IAU_MOON", "ITRF", Time.from_iso("2024-07-05T09:09:18 TAI"), zero_eop())
        ```
    """
    origin, target = _as_frame(origin), _as_frame(target)
    eop = as_eop_provider(eop)
    if origin == target:
        return Rotation.identity()
    if origin.kind is FrameKind.IAU:
        return iau_to_icrf(time, origin.origin, eop).compose(rotation(Frame.ICRF, target, time, eop))
    if target.kind is FrameKind.IAU:
        return rotation(origin, Frame.ICRF, time, eop).compose(icrf_to_iau(time, target.origin, eop))
    return _earth_chain(origin.kind, target.kind, time, eop)
