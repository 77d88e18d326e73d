"""Rate model implementations for the registry-based rate engine."""

from projection.rates.base import BaseRateModel
from projection.rates.fixed import FixedRateModel
from projection.rates.index_plus_spread import IndexPlusSpreadModel
from projection.rates.percent_of_index import PercentOfIndexModel

__all__ = [
    "BaseRateModel",
    "FixedRateModel",
    "IndexPlusSpreadModel",
    "PercentOfIndexModel",
]
