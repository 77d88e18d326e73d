"""
Compound returns, gross and after tax.

All rates are decimals and all returns are accumulated fractions of principal
(0.10 means +10%). Compounding is exponential in calendar days:

    gross(r, d) = (1 + r) ** (d / 365) - 1

and tax is charged on the gain only, at the bracket rate for the holding period:

    net = gross * (1 - rate(d))      when taxable and gross > 0
    net = gross                       otherwise

Every function here is total over its inputs: no zero-day extrapolation, a
-100% floor for rates at or below -1, and losses are never taxed.
"""

from __future__ import annotations

from typing import Optional

from projection.config import DAYS_IN_YEAR
from projection.engine import RateEngine, create_default_engine
from projection.indices import ReferenceIndices
from projection.instruments import Instrument
from projection.taxation import DEFAULT_RESOLVER, TaxBracketResolver

_default_engine = create_default_engine()


def effective_annual_rate(
    instrument: Instrument,
    indices: ReferenceIndices,
    engine: Optional[RateEngine] = None,
) -> float:
    """Gross annual rate of the instrument under the given indices."""
    return (engine or _default_engine).annual_rate(instrument.rate_spec, indices)


def gross_return(annual_rate: float, days: float) -> float:
    """
    Accumulated pre-tax return after `days` (fractional days allowed).

    Returns 0.0 for days <= 0 and -1.0 (total loss) for annual_rate <= -1,
    where the power would be undefined.
    """
    if days <= 0:
        return 0.0
    if annual_rate <= -1:
        return -1.0
    return (1.0 + annual_rate) ** (days / DAYS_IN_YEAR) - 1.0


def net_return(
    gross: float,
    holding_days: float,
    is_taxable: bool,
    resolver: TaxBracketResolver = DEFAULT_RESOLVER,
) -> float:
    """Return after income tax. Exempt instruments and losses pass through."""
    if not is_taxable or gross <= 0:
        return gross
    return gross * (1.0 - resolver.rate(holding_days))


def tax_amount(
    gross: float,
    holding_days: float,
    is_taxable: bool,
    resolver: TaxBracketResolver = DEFAULT_RESOLVER,
) -> float:
    """Tax due on the gain, as a fraction of principal (gross - net)."""
    if not is_taxable or gross <= 0:
        return 0.0
    return gross * resolver.rate(holding_days)


def instrument_gross_return(
    instrument: Instrument,
    indices: ReferenceIndices,
    days: float,
    engine: Optional[RateEngine] = None,
) -> float:
    return gross_return(effective_annual_rate(instrument, indices, engine), days)


def instrument_net_return(
    instrument: Instrument,
    indices: ReferenceIndices,
    days: float,
    engine: Optional[RateEngine] = None,
    resolver: TaxBracketResolver = DEFAULT_RESOLVER,
) -> float:
    gross = instrument_gross_return(instrument, indices, days, engine)
    return net_return(gross, days, instrument.is_taxable, resolver)
