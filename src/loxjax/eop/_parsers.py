"""Reader for IERS ``finals`` EOP files (``finals.all.iau2000.txt``, ``finals2000A.data``).

The format is fixed-width; only the Bulletin A columns are read.  Column
positions and units follow the IERS ``readme.finals2000A`` description.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import NamedTuple

from loxjax.constants import AS2RAD, MAS2RAD

_LINE_LENGTH = 187


class _Column(NamedTuple):
    name: str
    columns: slice
    scale: float
    required: bool


# Bulletin A columns (0-indexed slices)
_COLUMNS = (
    _Column("mjd", slice(6, 15), 1.0, True),
    _Column("pm_x", slice(17, 27), AS2RAD, True),
    _Column("pm_y", slice(36, 46), AS2RAD, True),
    _Column("ut1_utc", slice(58, 68), 1.0, True),
    _Column("lod", slice(78, 86), 1.0e-3, False),  # ms
    _Column("dX", slice(96, 106), MAS2RAD, False),
    _Column("dY", slice(115, 125), MAS2RAD, False),
)


class FinalsRecord(NamedTuple):
    """One row of a ``finals`` file in SI units.

    Attributes:
        mjd: UTC Modified Julian Date.
        pm_x: Polar motion x [rad].
        pm_y: Polar motion y [rad].
        ut1_utc: UT1 - UTC [s].
        lod: Excess length of day [s], NaN if absent.
        dX: CIP offset X [rad], NaN if absent.
        dY: CIP offset Y [rad], NaN if absent.
    """

    mjd: float
    pm_x: float
    pm_y: float
    ut1_utc: float
    lod: float
    dX: float
    dY: float


def parse_finals_line(line: str) -> FinalsRecord | None:
    """Parse one line of a ``finals`` file.

    Short lines are padded (predictions are often right-trimmed).  Lines
    that are too long or lack MJD, polar motion or UT1 - UTC are skipped.

    Args:
        line: Raw line without the trailing newline.

    Returns:
        The parsed record, or ``None`` if the line carries no usable data.
    """
    if len(line) > _LINE_LENGTH:
        return None
    line = line.ljust(_LINE_LENGTH)

    values = []
    for column in _COLUMNS:
        try:
            values.append(float(line[column.columns]) * column.scale)
        except ValueError:
            if column.required:
                return None
            values.append(math.nan)
    return FinalsRecord(*values)


def parse_finals_file(filepath: str | Path) -> list[FinalsRecord]:
    """Parse every usable line of a ``finals`` file.

    Args:
        filepath: Path to the file.

    Returns:
        Records in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file contains no usable line.
    """
    records = []
    with open(filepath) as f:
        for line in f:
            record = parse_finals_line(line.rstrip("\n"))
            if record is not None:
                records.append(record)

    if not records:
        raise ValueError(f"No valid EOP data found in {filepath}")
    return records
