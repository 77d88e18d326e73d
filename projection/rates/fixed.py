"""Rate model for pre-fixed instruments."""

from __future__ import annotations

from projection.indices import ReferenceIndices
from projection.instruments import RateKind, RateSpec
from projection.rates.base import BaseRateModel


class FixedRateModel(BaseRateModel):
    """X% a.a., independent of every reference index."""

    def can_evaluate(self, spec: RateSpec) -> bool:
        return spec.kind == RateKind.FIXED

    def annual_rate(self, spec: RateSpec, indices: ReferenceIndices) -> float:
        return spec.magnitude / 100.0
