"""Rate model for instruments paying a percentage of the primary index."""

from __future__ import annotations

from projection.indices import ReferenceIndices
from projection.instruments import RateKind, RateSpec
from projection.rates.base import BaseRateModel


class PercentOfIndexModel(BaseRateModel):
    """X% of the primary floating rate (e.g. CDB 110% do CDI)."""

    def can_evaluate(self, spec: RateSpec) -> bool:
        return spec.kind == RateKind.PERCENT_OF_INDEX

    def annual_rate(self, spec: RateSpec, indices: ReferenceIndices) -> float:
        """rate = primary * magnitude / 100."""
        return indices.primary_floating_rate * (spec.magnitude / 100.0)
