"""Service layer: validate GraphQL inputs, build projection objects and run the engine."""

from __future__ import annotations

import datetime
import logging
from typing import Optional

from projection.comparison import equivalent_rates, find_break_even_day
from projection.dates import bracket_lines, chart_horizon_days, to_dated_points
from projection.indices import ReferenceIndices
from projection.instruments import Instrument, RateKind, RateSpec
from projection.returns import effective_annual_rate
from projection.sampling import sample, sample_portfolio
from projection.series import ReturnPoint, generate_series
from projection.taxation import DEFAULT_RESOLVER

from projection_api.settings import settings
from projection_api.types import (
    BracketLineType,
    EquivalentRatesType,
    IndicesInput,
    InstrumentInput,
    InstrumentSeries,
    PortfolioProjection,
    ReferenceIndicesType,
    ReturnPointType,
    TaxBracketType,
)

logger = logging.getLogger(__name__)

_KINDS = [k.value for k in RateKind]


def indices_from_input(i: Optional[IndicesInput]) -> ReferenceIndices:
    """Build ReferenceIndices; any missing field falls back to the configured default."""
    defaults = settings.default_indices
    if i is None:
        return defaults
    return ReferenceIndices(
        primary_floating_rate=_pick(i.primary_floating_rate, defaults.primary_floating_rate),
        inflation_rate=_pick(i.inflation_rate, defaults.inflation_rate),
        policy_rate=_pick(i.policy_rate, defaults.policy_rate),
    )


def _pick(value: Optional[float], default: float) -> float:
    return default if value is None else value


def instrument_from_input(inv: InstrumentInput) -> Instrument:
    """Build Instrument from GraphQL InstrumentInput."""
    if inv.rate_spec.kind not in _KINDS:
        raise ValueError(
            f"Unknown rate kind '{inv.rate_spec.kind}'. Supported kinds: {_KINDS}"
        )
    if inv.horizon_days is not None and inv.horizon_days < 0:
        raise ValueError("instrument.horizonDays must be >= 0")
    return Instrument(
        rate_spec=RateSpec(kind=RateKind(inv.rate_spec.kind), magnitude=inv.rate_spec.magnitude),
        is_taxable=inv.is_taxable,
        horizon_days=inv.horizon_days,
        name=inv.name,
    )


def _point(p: ReturnPoint, date: Optional[datetime.date] = None) -> ReturnPointType:
    return ReturnPointType(
        day_offset=p.day_offset,
        gross_return=p.gross_return,
        net_return=p.net_return,
        date=date,
    )


def default_indices() -> ReferenceIndicesType:
    d = settings.default_indices
    return ReferenceIndicesType(
        primary_floating_rate=d.primary_floating_rate,
        inflation_rate=d.inflation_rate,
        policy_rate=d.policy_rate,
    )


def tax_brackets() -> list[TaxBracketType]:
    return [
        TaxBracketType(
            min_days=b.min_days,
            max_days=None if b.is_open else int(b.max_days),
            rate=b.rate,
        )
        for b in DEFAULT_RESOLVER.brackets
    ]


def transition_days() -> list[int]:
    return list(DEFAULT_RESOLVER.transition_days())


def annual_rate(instrument: InstrumentInput, indices: Optional[IndicesInput]) -> float:
    return effective_annual_rate(instrument_from_input(instrument), indices_from_input(indices))


def project_series(
    instrument: InstrumentInput,
    indices: Optional[IndicesInput],
    total_days: int,
    sampled: bool = True,
) -> InstrumentSeries:
    """Daily (or chart-sampled) return series for one instrument."""
    if total_days < 0:
        raise ValueError("totalDays must be >= 0")
    inv = instrument_from_input(instrument)
    idx = indices_from_input(indices)
    full = generate_series(inv, idx, total_days)
    points = sample(full, total_days) if sampled else full
    return InstrumentSeries(
        name=inv.name,
        effective_annual_rate=effective_annual_rate(inv, idx),
        points=[_point(p) for p in points],
    )


def project_portfolio(
    instruments: list[InstrumentInput],
    indices: Optional[IndicesInput],
    start_date: Optional[datetime.date] = None,
    total_days: Optional[int] = None,
) -> PortfolioProjection:
    """
    Sampled series for several instruments on a shared calendar.

    Without total_days the horizon is the longest maturity, or one year.
    """
    if not instruments:
        raise ValueError("instruments must not be empty")
    if total_days is not None and total_days < 0:
        raise ValueError("totalDays must be >= 0")
    invs = [instrument_from_input(i) for i in instruments]
    idx = indices_from_input(indices)
    start = start_date or datetime.date.today()
    horizon = chart_horizon_days(invs) if total_days is None else total_days
    logger.info("Projecting %s instruments over %s days from %s", len(invs), horizon, start)
    sampled = sample_portfolio(invs, idx, horizon)
    series = []
    for inv, points in zip(invs, sampled):
        dated = to_dated_points(points, start)
        series.append(
            InstrumentSeries(
                name=inv.name,
                effective_annual_rate=effective_annual_rate(inv, idx),
                points=[_point(p, d.date) for p, d in zip(points, dated)],
            )
        )
    return PortfolioProjection(
        start_date=start,
        total_days=horizon,
        series=series,
        bracket_lines=[BracketLineType(day=b.day, date=b.date) for b in bracket_lines(start, horizon)],
    )


def compare_equivalent_rates(
    instrument: InstrumentInput,
    indices: Optional[IndicesInput],
) -> EquivalentRatesType:
    s = equivalent_rates(instrument_from_input(instrument), indices_from_input(indices))
    return EquivalentRatesType(
        gross_annual=s.gross_annual,
        gross_30_days=s.gross_30_days,
        net_30_days=s.net_30_days,
        gross_365_days=s.gross_365_days,
        net_365_days=s.net_365_days,
        gross_720_days=s.gross_720_days,
        net_720_days=s.net_720_days,
    )


def break_even_day(
    taxed: InstrumentInput,
    untaxed: InstrumentInput,
    indices: Optional[IndicesInput],
    max_days: int,
) -> Optional[int]:
    """First day the taxed instrument nets at least as much as the untaxed one, or None."""
    if max_days < 1:
        raise ValueError("maxDays must be >= 1")
    return find_break_even_day(
        instrument_from_input(taxed),
        instrument_from_input(untaxed),
        indices_from_input(indices),
        max_days=max_days,
    )
