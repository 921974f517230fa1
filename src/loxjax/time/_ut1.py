"""Interface for sources of UT1 - TAI.

UT1 follows the irregular rotation of the Earth and can only be obtained
from observations, so :meth:`~loxjax.time.Time.to_scale` takes a provider
for it.  :class:`loxjax.eop.EopProvider` implements this protocol from IERS
Earth orientation data.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from loxjax.time._deltas import TimeDelta


@runtime_checkable
class DeltaUt1TaiProvider(Protocol):
    """Source of the UT1 - TAI offset."""

    def delta_ut1_tai(self, tai) -> TimeDelta:
        """UT1 - TAI at a TAI instant.

        Raises:
            ProviderOutOfRange: Outside the data window, unless the provider
                extrapolates.
        """
        ...

    def delta_tai_ut1(self, ut1) -> TimeDelta:
        """TAI - UT1 at a UT1 instant."""
        ...
