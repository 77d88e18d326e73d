"""GraphQL schema: projection, comparison and tax bracket queries."""

import datetime
from typing import Optional

import strawberry

from projection.config import BREAK_EVEN_MAX_DAYS
from projection_api.services import (
    annual_rate,
    break_even_day,
    compare_equivalent_rates,
    default_indices,
    project_portfolio,
    project_series,
    tax_brackets,
    transition_days,
)
from projection_api.types import (
    EquivalentRatesType,
    IndicesInput,
    InstrumentInput,
    InstrumentSeries,
    PortfolioProjection,
    ReferenceIndicesType,
    TaxBracketType,
)

API_VERSION = "0.1.0"


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return API_VERSION

    @strawberry.field
    def default_indices(self) -> ReferenceIndicesType:
        """Indices used when a request omits them."""
        return default_indices()

    @strawberry.field
    def tax_brackets(self) -> list[TaxBracketType]:
        return tax_brackets()

    @strawberry.field
    def transition_days(self) -> list[int]:
        """Last day of each closed tax bracket, for chart annotation lines."""
        return transition_days()

    @strawberry.field
    def effective_annual_rate(
        self,
        instrument: InstrumentInput,
        indices: Optional[IndicesInput] = None,
    ) -> float:
        return annual_rate(instrument, indices)

    @strawberry.field
    def project_series(
        self,
        instrument: InstrumentInput,
        total_days: int,
        indices: Optional[IndicesInput] = None,
        sampled: bool = True,
    ) -> InstrumentSeries:
        """Gross and net return per day; sampled=true keeps only the chart days."""
        return project_series(
            instrument=instrument,
            indices=indices,
            total_days=total_days,
            sampled=sampled,
        )

    @strawberry.field
    def project_portfolio(
        self,
        instruments: list[InstrumentInput],
        indices: Optional[IndicesInput] = None,
        start_date: Optional[datetime.date] = None,
        total_days: Optional[int] = None,
    ) -> PortfolioProjection:
        """Aligned chart series for several instruments plus tax bracket lines."""
        return project_portfolio(
            instruments=instruments,
            indices=indices,
            start_date=start_date,
            total_days=total_days,
        )

    @strawberry.field
    def equivalent_rates(
        self,
        instrument: InstrumentInput,
        indices: Optional[IndicesInput] = None,
    ) -> EquivalentRatesType:
        """Gross and net returns at 30, 365 and 720 days."""
        return compare_equivalent_rates(instrument, indices)

    @strawberry.field
    def break_even_day(
        self,
        taxed: InstrumentInput,
        untaxed: InstrumentInput,
        indices: Optional[IndicesInput] = None,
        max_days: int = BREAK_EVEN_MAX_DAYS,
    ) -> Optional[int]:
        """First day the taxed instrument nets at least as much as the untaxed one; null if never."""
        return break_even_day(taxed=taxed, untaxed=untaxed, indices=indices, max_days=max_days)


schema = strawberry.Schema(query=Query)
