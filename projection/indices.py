"""
Reference index snapshot.

`ReferenceIndices` holds the annualized decimal rates an instrument's rate spec
can refer to:
- primary floating rate (CDI)
- inflation (IPCA, trailing 12 months)
- policy rate (SELIC)

The snapshot is immutable: `with_rate` returns a new instance. Where the numbers
come from (remote fetch, cache, manual override) is the caller's business.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class ReferenceIndex(str, Enum):
    PRIMARY = "primary"
    INFLATION = "inflation"
    POLICY = "policy"


_FIELDS = {
    ReferenceIndex.PRIMARY: "primary_floating_rate",
    ReferenceIndex.INFLATION: "inflation_rate",
    ReferenceIndex.POLICY: "policy_rate",
}


@dataclass(frozen=True)
class ReferenceIndices:
    """Annual decimal rates, e.g. 0.1065 for 10.65% a.a."""

    primary_floating_rate: float
    inflation_rate: float
    policy_rate: float

    def rate(self, index: ReferenceIndex) -> float:
        """Return the rate for `index`. Raises ValueError for an unknown index."""
        return getattr(self, _FIELDS[ReferenceIndex(index)])

    def with_rate(self, index: ReferenceIndex, value: float) -> "ReferenceIndices":
        """Return a new snapshot with `index` replaced by `value`."""
        return replace(self, **{_FIELDS[ReferenceIndex(index)]: value})


DEFAULT_INDICES = ReferenceIndices(
    primary_floating_rate=0.1065,
    inflation_rate=0.045,
    policy_rate=0.1075,
)
