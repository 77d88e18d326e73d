"""
Down-sampling of daily series for charts.

A multi-year daily series has too many points to plot, so interior days are
taken at a stride that grows with the horizon. Three kinds of day are always
kept:
- day 0 and the last day;
- both sides of every tax bracket change (180/181, 360/361, 720/721), so the
  net-return jump stays visible.

The kept day set depends only on `total_days`. Every instrument plotted on the
same chart therefore gets the same x positions, which index-based tooltips
rely on.
"""

from __future__ import annotations

from typing import Optional, Sequence

from projection.config import LONG_HORIZON_STRIDE, SAMPLE_STRIDES
from projection.engine import RateEngine
from projection.indices import ReferenceIndices
from projection.instruments import Instrument
from projection.series import ReturnPoint, generate_series
from projection.taxation import DEFAULT_RESOLVER, TaxBracketResolver


def sample_interval(total_days: int) -> int:
    """Stride between plotted days: daily up to 3 months, monthly beyond 5 years."""
    for max_days, stride in SAMPLE_STRIDES:
        if total_days <= max_days:
            return stride
    return LONG_HORIZON_STRIDE


def sampled_days(
    total_days: int,
    resolver: TaxBracketResolver = DEFAULT_RESOLVER,
) -> list[int]:
    """Sorted, unique day offsets to plot for a horizon of `total_days`."""
    if total_days <= 0:
        return [0]
    days = set(range(0, total_days + 1, sample_interval(total_days)))
    days.add(total_days)
    days.update(d for d in resolver.transition_pairs() if d <= total_days)
    return sorted(days)


def sample(
    full_series: Sequence[ReturnPoint],
    total_days: int,
    resolver: TaxBracketResolver = DEFAULT_RESOLVER,
) -> list[ReturnPoint]:
    """
    Pick the plotted days out of a full daily series.

    `full_series[i]` must be the point for day i (as produced by
    generate_series) and cover at least days 0..total_days.
    """
    if len(full_series) <= max(total_days, 0):
        raise ValueError(
            f"series has {len(full_series)} points; need {max(total_days, 0) + 1}"
        )
    return [full_series[day] for day in sampled_days(total_days, resolver)]


def sample_portfolio(
    instruments: Sequence[Instrument],
    indices: ReferenceIndices,
    total_days: int,
    engine: Optional[RateEngine] = None,
    resolver: TaxBracketResolver = DEFAULT_RESOLVER,
) -> list[list[ReturnPoint]]:
    """One sampled series per instrument, all on the same day offsets."""
    horizon = max(total_days, 0)
    result = []
    for instrument in instruments:
        full = generate_series(instrument, indices, horizon, engine, resolver)
        result.append(sample(full, horizon, resolver))
    return result
