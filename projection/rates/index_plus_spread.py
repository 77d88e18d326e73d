"""Rate model for an index plus a fixed annual spread."""

from __future__ import annotations

from dataclasses import dataclass

from projection.indices import ReferenceIndex, ReferenceIndices
from projection.instruments import RateKind, RateSpec
from projection.rates.base import BaseRateModel


@dataclass
class IndexPlusSpreadModel(BaseRateModel):
    """
    Index + X% a.a.

    One instance per (kind, index) pairing, e.g. INFLATION_PLUS reads the
    inflation rate (Tesouro IPCA+ 6%: 0.045 + 0.06).
    """

    kind: RateKind
    index: ReferenceIndex

    def can_evaluate(self, spec: RateSpec) -> bool:
        return spec.kind == self.kind

    def annual_rate(self, spec: RateSpec, indices: ReferenceIndices) -> float:
        """rate = index + magnitude / 100 (additive, not compounded)."""
        return indices.rate(self.index) + spec.magnitude / 100.0
