"""Projection library: rate models, tax brackets, return series, comparison and chart sampling."""

from projection.comparison import (
    EquivalentRatesSummary,
    equivalent_rates,
    find_break_even_day,
)
from projection.dates import (
    BracketLine,
    DatedPoint,
    add_days,
    bracket_lines,
    chart_horizon_days,
    days_between,
    to_dated_points,
)
from projection.engine import RateEngine, create_default_engine
from projection.errors import ConfigurationWarning
from projection.indices import DEFAULT_INDICES, ReferenceIndex, ReferenceIndices
from projection.instruments import Instrument, RateKind, RateSpec
from projection.interfaces import RateModel
from projection.rates import BaseRateModel
from projection.returns import (
    effective_annual_rate,
    gross_return,
    instrument_gross_return,
    instrument_net_return,
    net_return,
    tax_amount,
)
from projection.sampling import sample, sample_interval, sample_portfolio, sampled_days
from projection.series import ReturnPoint, generate_series, gross_series, net_series
from projection.taxation import (
    DEFAULT_RESOLVER,
    TAX_BRACKETS,
    TaxBracket,
    TaxBracketResolver,
    tax_rate,
)

__all__ = [
    "RateModel",
    "BaseRateModel",
    "RateEngine",
    "create_default_engine",
    "ConfigurationWarning",
    "ReferenceIndex",
    "ReferenceIndices",
    "DEFAULT_INDICES",
    "RateKind",
    "RateSpec",
    "Instrument",
    "TaxBracket",
    "TaxBracketResolver",
    "TAX_BRACKETS",
    "DEFAULT_RESOLVER",
    "tax_rate",
    "effective_annual_rate",
    "gross_return",
    "net_return",
    "tax_amount",
    "instrument_gross_return",
    "instrument_net_return",
    "ReturnPoint",
    "generate_series",
    "gross_series",
    "net_series",
    "EquivalentRatesSummary",
    "equivalent_rates",
    "find_break_even_day",
    "sample",
    "sample_interval",
    "sampled_days",
    "sample_portfolio",
    "BracketLine",
    "DatedPoint",
    "add_days",
    "days_between",
    "chart_horizon_days",
    "bracket_lines",
    "to_dated_points",
]
