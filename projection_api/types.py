"""GraphQL types for the projection API."""

from __future__ import annotations

import datetime
from typing import Optional

import strawberry


# --- Input types (request payloads) ---


@strawberry.input
class RateSpecInput:
    """Rate spec: kind (percent-of-index, primary-plus, inflation-plus, policy-plus, fixed) and magnitude in percent."""

    kind: str
    magnitude: float


@strawberry.input
class InstrumentInput:
    """Instrument: rate spec, tax flag, optional maturity in days (null = no maturity)."""

    rate_spec: RateSpecInput
    is_taxable: bool
    horizon_days: Optional[int] = None
    name: str = ""


@strawberry.input
class IndicesInput:
    """Reference indices as annual decimals; omitted fields use the service defaults."""

    primary_floating_rate: Optional[float] = None
    inflation_rate: Optional[float] = None
    policy_rate: Optional[float] = None


# --- Output types (response payloads) ---


@strawberry.type
class ReferenceIndicesType:
    primary_floating_rate: float
    inflation_rate: float
    policy_rate: float


@strawberry.type
class TaxBracketType:
    """Holding-period bracket; max_days is null for the open-ended bracket."""

    min_days: int
    max_days: Optional[int]
    rate: float


@strawberry.type
class ReturnPointType:
    day_offset: int
    gross_return: float
    net_return: float
    date: Optional[datetime.date] = None


@strawberry.type
class InstrumentSeries:
    name: str
    effective_annual_rate: float
    points: list[ReturnPointType]


@strawberry.type
class BracketLineType:
    day: int
    date: datetime.date


@strawberry.type
class PortfolioProjection:
    """Aligned sampled series for several instruments plus bracket annotation lines."""

    start_date: datetime.date
    total_days: int
    series: list[InstrumentSeries]
    bracket_lines: list[BracketLineType]


@strawberry.type
class EquivalentRatesType:
    gross_annual: float
    gross_30_days: float
    net_30_days: float
    gross_365_days: float
    net_365_days: float
    gross_720_days: float
    net_720_days: float
