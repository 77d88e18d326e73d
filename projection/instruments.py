"""Fixed-income instruments (data only; returns are computed by the engine)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class RateKind(str, Enum):
    """How an instrument's `magnitude` turns into an annual rate."""

    PERCENT_OF_INDEX = "percent-of-index"  # X% of the primary floating rate (CDI)
    PRIMARY_PLUS = "primary-plus"  # CDI + X% a.a.
    INFLATION_PLUS = "inflation-plus"  # IPCA + X% a.a.
    POLICY_PLUS = "policy-plus"  # SELIC + X% a.a.
    FIXED = "fixed"  # X% a.a. (pre-fixed)


@dataclass(frozen=True)
class RateSpec:
    """
    Rate specification of an instrument.

    `magnitude` is on the percentage scale: 110 under PERCENT_OF_INDEX means
    110% of the index, 6 under INFLATION_PLUS means inflation + 6% a.a.
    `kind` is normally a RateKind; any other value is carried as-is and
    handled by the engine's unknown-kind fallback.
    """

    kind: Union[RateKind, str]
    magnitude: float


@dataclass(frozen=True)
class Instrument:
    """
    A fixed-income position to project.

    horizon_days=None means no maturity: callers pick the evaluation horizon.
    """

    rate_spec: RateSpec
    is_taxable: bool
    horizon_days: Optional[int] = None
    name: str = ""
