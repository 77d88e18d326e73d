"""
Day-indexed return series.

One ReturnPoint per calendar day 0..total_days. Gross returns are evaluated in
closed form at each day from a single effective rate, so there is no
accumulation error across days. Net returns re-resolve the tax bracket per day,
which makes the net series jump up on days 181, 361 and 721: crossing a bracket
lowers the rate on the whole accumulated gain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from projection.engine import RateEngine
from projection.indices import ReferenceIndices
from projection.instruments import Instrument
from projection.returns import effective_annual_rate, gross_return, net_return
from projection.taxation import DEFAULT_RESOLVER, TaxBracketResolver


@dataclass(frozen=True)
class ReturnPoint:
    day_offset: int
    gross_return: float
    net_return: float


def generate_series(
    instrument: Instrument,
    indices: ReferenceIndices,
    total_days: int,
    engine: Optional[RateEngine] = None,
    resolver: TaxBracketResolver = DEFAULT_RESOLVER,
) -> list[ReturnPoint]:
    """Return total_days + 1 points, one per day from 0 to total_days inclusive."""
    if total_days < 0:
        raise ValueError("total_days must be >= 0")
    rate = effective_annual_rate(instrument, indices, engine)
    points = []
    for day in range(total_days + 1):
        gross = gross_return(rate, day)
        net = net_return(gross, day, instrument.is_taxable, resolver)
        points.append(ReturnPoint(day_offset=day, gross_return=gross, net_return=net))
    return points


def gross_series(
    instrument: Instrument,
    indices: ReferenceIndices,
    total_days: int,
    engine: Optional[RateEngine] = None,
) -> list[float]:
    """Gross returns only, indexed by day."""
    return [p.gross_return for p in generate_series(instrument, indices, total_days, engine)]


def net_series(
    instrument: Instrument,
    indices: ReferenceIndices,
    total_days: int,
    engine: Optional[RateEngine] = None,
    resolver: TaxBracketResolver = DEFAULT_RESOLVER,
) -> list[float]:
    """Net returns only, indexed by day."""
    series = generate_series(instrument, indices, total_days, engine, resolver)
    return [p.net_return for p in series]
