"""
Side-by-side comparison of instruments.

- `equivalent_rates`: gross/net returns at fixed horizons (30, 365, 720 days),
  the numbers a comparison table shows.
- `find_break_even_day`: first day a taxed instrument's net return catches up
  with an untaxed one (e.g. CDB 110% CDI vs LCA 100% CDI).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from projection.config import BREAK_EVEN_MAX_DAYS
from projection.engine import RateEngine
from projection.indices import ReferenceIndices
from projection.instruments import Instrument
from projection.returns import effective_annual_rate, gross_return, net_return

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EquivalentRatesSummary:
    gross_annual: float
    gross_30_days: float
    net_30_days: float
    gross_365_days: float
    net_365_days: float
    gross_720_days: float
    net_720_days: float


def equivalent_rates(
    instrument: Instrument,
    indices: ReferenceIndices,
    engine: Optional[RateEngine] = None,
) -> EquivalentRatesSummary:
    """Snapshot of gross and net returns at the standard comparison horizons."""
    rate = effective_annual_rate(instrument, indices, engine)

    def at(days: int) -> tuple[float, float]:
        gross = gross_return(rate, days)
        return gross, net_return(gross, days, instrument.is_taxable)

    gross_30, net_30 = at(30)
    gross_365, net_365 = at(365)
    gross_720, net_720 = at(720)
    return EquivalentRatesSummary(
        gross_annual=rate,
        gross_30_days=gross_30,
        net_30_days=net_30,
        gross_365_days=gross_365,
        net_365_days=net_365,
        gross_720_days=gross_720,
        net_720_days=net_720,
    )


def find_break_even_day(
    taxed: Instrument,
    untaxed: Instrument,
    indices: ReferenceIndices,
    max_days: int = BREAK_EVEN_MAX_DAYS,
    engine: Optional[RateEngine] = None,
) -> Optional[int]:
    """
    First day in 1..max_days where net(taxed) >= net(untaxed), else None.

    Ties go to the taxed instrument. Scans every day: the net spread between
    instruments on different indices is not monotonic in time.
    """
    taxed_rate = effective_annual_rate(taxed, indices, engine)
    untaxed_rate = effective_annual_rate(untaxed, indices, engine)
    for day in range(1, max_days + 1):
        taxed_net = net_return(gross_return(taxed_rate, day), day, taxed.is_taxable)
        untaxed_net = net_return(gross_return(untaxed_rate, day), day, untaxed.is_taxable)
        if taxed_net >= untaxed_net:
            logger.debug("Break-even on day %s (%.6f >= %.6f)", day, taxed_net, untaxed_net)
            return day
    logger.debug("No break-even within %s days", max_days)
    return None
