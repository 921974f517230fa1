"""Earth Orientation Parameters (EOP).

Tables are stored as sorted JAX arrays and interpolated with
``jnp.searchsorted``; the lookup functions work inside ``jax.jit`` and
``jax.vmap``.  :class:`EopProvider` adapts a table to the provider
interfaces used by :mod:`loxjax.time` and :mod:`loxjax.frames`.

Typical usage::

    from loxjax.eop import EopProvider, get_ut1_utc, load_eop_from_file
    eop = load_eop_from_file("finals.all.iau2000.txt")
    ut1_utc = get_ut1_utc(eop, 59569.5)
    provider = EopProvider(eop)
"""

from loxjax.eop._lookup import get_dxdy, get_eop, get_lod, get_pm, get_ut1_utc
from loxjax.eop._parsers import FinalsRecord, parse_finals_file, parse_finals_line
from loxjax.eop._providers import (
    EopProvider,
    as_eop_provider,
    load_eop_from_file,
    static_eop,
    zero_eop,
)
from loxjax.eop._types import EOPData, EOPExtrapolation

__all__ = [
    "EOPData",
    "EOPExtrapolation",
    "EopProvider",
    "FinalsRecord",
    "as_eop_provider",
    "get_dxdy",
    "get_eop",
    "get_lod",
    "get_pm",
    "get_ut1_utc",
    "load_eop_from_file",
    "parse_finals_file",
    "parse_finals_line",
    "static_eop",
    "zero_eop",
]
