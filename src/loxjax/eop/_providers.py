"""EOP tables and the provider used by time and frame conversions.

Table constructors:

- :func:`static_eop`: constant values over a wide MJD range.
- :func:`zero_eop`: all-zero EOP, i.e. no Earth orientation corrections.
- :func:`load_eop_from_file`: read an IERS ``finals`` file.

:class:`EopProvider` wraps a table and answers the questions the rest of
loxjax asks: UT1 - TAI for scale conversion, polar motion and CIP offsets
for the terrestrial frame chain.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jax.numpy as jnp

from loxjax.config import get_dtype
from loxjax.eop._lookup import get_dxdy, get_pm, get_ut1_utc
from loxjax.eop._parsers import parse_finals_file
from loxjax.eop._types import EOPData, EOPExtrapolation
from loxjax.errors import ProviderOutOfRange, UtcUndefined
from loxjax.time import Time, TimeDelta, TimeScale, Utc, default_leap_seconds

logger = logging.getLogger(__name__)

_UT1_ITERATIONS = 3


def static_eop(
    pm_x: float = 0.0,
    pm_y: float = 0.0,
    ut1_utc: float = 0.0,
    dX: float = 0.0,
    dY: float = 0.0,
    lod: float = 0.0,
    mjd_min: float = 0.0,
    mjd_max: float = 99999.0,
) -> EOPData:
    """Create an EOP table with constant values over ``[mjd_min, mjd_max]``.

    The table has two identical rows, so interpolation returns the constant
    everywhere inside the range.

    Args:
        pm_x: Polar motion x [rad]. Default: 0.0.
        pm_y: Polar motion y [rad]. Default: 0.0.
        ut1_utc: UT1 - UTC [s]. Default: 0.0.
        dX: CIP offset X [rad]. Default: 0.0.
        dY: CIP offset Y [rad]. Default: 0.0.
        lod: Excess length of day [s]. Default: 0.0.
        mjd_min: Start of the range. Default: 0.0.
        mjd_max: End of the range. Default: 99999.0.

    Returns:
        EOPData with constant values.
    """
    dtype = get_dtype()

    def column(value):
        return jnp.array([value, value], dtype=dtype)

    return EOPData(
        mjd=jnp.array([mjd_min, mjd_max], dtype=dtype),
        pm_x=column(pm_x),
        pm_y=column(pm_y),
        ut1_utc=column(ut1_utc),
        dX=column(dX),
        dY=column(dY),
        lod=column(lod),
        mjd_min=jnp.array(mjd_min, dtype=dtype),
        mjd_max=jnp.array(mjd_max, dtype=dtype),
        mjd_last_lod=jnp.array(mjd_max, dtype=dtype),
        mjd_last_dxdy=jnp.array(mjd_max, dtype=dtype),
    )


def zero_eop() -> EOPData:
    """Create an all-zero EOP table.

    Passing it to the terrestrial frame transformations explicitly opts out
    of Earth orientation corrections (UT1 = UTC, no polar motion).

    Returns:
        EOPData with all values zero.
    """
    return static_eop()


def load_eop_from_file(filepath: str | Path) -> EOPData:
    """Load an EOP table from an IERS ``finals`` file.

    Args:
        filepath: Path to e.g. ``finals.all.iau2000.txt``.

    Returns:
        EOPData ready for lookups.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file contains no usable data.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"EOP file not found: {filepath}")

    records = parse_finals_file(filepath)
    dtype = get_dtype()

    def column(name):
        return jnp.array([getattr(r, name) for r in records], dtype=dtype)

    mjd = [r.mjd for r in records]
    lod_valid = [r.mjd for r in records if r.lod == r.lod]
    dxdy_valid = [r.mjd for r in records if r.dX == r.dX and r.dY == r.dY]

    logger.info("Loaded %d EOP records (MJD %s to %s) from %s", len(records), mjd[0], mjd[-1], filepath)
    return EOPData(
        mjd=column("mjd"),
        pm_x=column("pm_x"),
        pm_y=column("pm_y"),
        ut1_utc=column("ut1_utc"),
        dX=column("dX"),
        dY=column("dY"),
        lod=column("lod"),
        mjd_min=jnp.array(mjd[0], dtype=dtype),
        mjd_max=jnp.array(mjd[-1], dtype=dtype),
        mjd_last_lod=jnp.array(lod_valid[-1] if lod_valid else mjd[0], dtype=dtype),
        mjd_last_dxdy=jnp.array(dxdy_valid[-1] if dxdy_valid else mjd[0], dtype=dtype),
    )


class EopProvider:
    """Earth orientation source for UT1 conversion and the ITRF chain.

    Implements :class:`~loxjax.time.DeltaUt1TaiProvider`.  Lookups outside
    the table raise :class:`~loxjax.errors.ProviderOutOfRange` unless an
    extrapolation mode is given.

    Args:
        eop (EOPData): The table.
        extrapolation (EOPExtrapolation | None): Behaviour outside the table.
            ``None`` raises. Default: ``None``
        leap_seconds (LeapSecondsProvider | None): Used to place instants on
            the UTC axis of the table. Default: the builtin table.

    Examples:
        ```python
        from loxjax.eop import EopProvider
        from loxjax.time import Time

        eop = EopProvider.from_file("finals.all.iau2000.txt")
        ut1 = Time.from_iso("2020-01-01T00:00:00 TAI").to_scale("UT1", eop)
        ```
    """

    def __init__(self, eop: EOPData, extrapolation: EOPExtrapolation | None = None, leap_seconds=None) -> None:
        self._eop = eop
        self._extrapolation = extrapolation
        self._leap_seconds = leap_seconds if leap_seconds is not None else default_leap_seconds()
        self._mjd_min = float(eop.mjd_min)
        self._mjd_max = float(eop.mjd_max)

    @classmethod
    def from_file(
        cls, filepath: str | Path, extrapolation: EOPExtrapolation | None = None, leap_seconds=None
    ) -> EopProvider:
        """Build a provider from an IERS ``finals`` file."""
        return cls(load_eop_from_file(filepath), extrapolation, leap_seconds)

    @property
    def eop(self) -> EOPData:
        return self._eop

    @property
    def extrapolation(self) -> EOPExtrapolation | None:
        return self._extrapolation

    @property
    def mjd_min(self) -> float:
        return self._mjd_min

    @property
    def mjd_max(self) -> float:
        return self._mjd_max

    def _mode(self, mjd: float) -> EOPExtrapolation:
        if self._mjd_min <= mjd <= self._mjd_max:
            return self._extrapolation or EOPExtrapolation.HOLD
        if self._extrapolation is None:
            raise ProviderOutOfRange(mjd, self._mjd_min, self._mjd_max)
        logger.warning(
            "MJD %s is outside the EOP table [%s, %s], extrapolating (%s)",
            mjd, self._mjd_min, self._mjd_max, self._extrapolation.value,
        )
        return self._extrapolation

    def _utc(self, tai: Time) -> Utc:
        try:
            return Utc.from_tai(tai, self._leap_seconds)
        except UtcUndefined as exc:
            raise ProviderOutOfRange(tai.mjd(), self._mjd_min, self._mjd_max) from exc

    def ut1_utc(self, utc_mjd: float) -> float:
        """UT1 - UTC [s] at a UTC MJD."""
        return float(get_ut1_utc(self._eop, utc_mjd, self._mode(utc_mjd)))

    def delta_ut1_tai(self, tai: Time) -> TimeDelta:
        """UT1 - TAI at a TAI instant.

        Raises:
            ProviderOutOfRange: Outside the table without extrapolation, or
                before 1960 where UTC is undefined.
        """
        utc = self._utc(tai)
        ut1_utc = TimeDelta.from_seconds_f64(self.ut1_utc(utc.mjd()))
        return ut1_utc - (tai.to_delta() - utc.to_delta())

    def delta_tai_ut1(self, ut1: Time) -> TimeDelta:
        """TAI - UT1 at a UT1 instant, by fixed-point iteration on the TAI instant."""
        offset = TimeDelta.zero()
        for _ in range(_UT1_ITERATIONS):
            tai = Time.from_delta(TimeScale.TAI, ut1.to_delta() - offset)
            offset = self.delta_ut1_tai(tai)
        return -offset

    def _table_mjd(self, time: Time) -> float:
        return self._utc(time.to_scale(TimeScale.TAI, self)).mjd()

    def polar_motion(self, time: Time) -> tuple:
        """Pole coordinates (x_p, y_p) [rad] at an instant (usually TT)."""
        mjd = self._table_mjd(time)
        return get_pm(self._eop, mjd, self._mode(mjd))

    def cip_corrections(self, time: Time) -> tuple:
        """CIP offsets (dX, dY) [rad] at an instant (usually TT); zero where not tabulated."""
        mjd = self._table_mjd(time)
        dx, dy = get_dxdy(self._eop, mjd, self._mode(mjd))
        return jnp.nan_to_num(dx), jnp.nan_to_num(dy)

    def __repr__(self):
        return f"EopProvider(mjd=[{self._mjd_min}, {self._mjd_max}], extrapolation={self._extrapolation})"


def as_eop_provider(eop) -> EopProvider | None:
    """Accept an :class:`EopProvider`, a bare :class:`EOPData` table or ``None``.

    A bare table is wrapped with ``HOLD`` extrapolation, so ``zero_eop()``
    works at any date.
    """
    if eop is None or isinstance(eop, EopProvider):
        return eop
    if isinstance(eop, EOPData):
        return EopProvider(eop, EOPExtrapolation.HOLD)
    raise TypeError(f"expected EopProvider or EOPData, got {type(eop).__name__}")
