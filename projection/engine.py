"""
Rate engine: effective annual rate of an instrument given reference indices.

Design intent:
- Instruments are **data only** (a RateSpec, a tax flag, a horizon).
- This engine keeps a **registry of rate models** and dispatches on
  can_evaluate(), so new rate conventions are added by registering a model.
- An unrecognized kind is not fatal: the engine warns and returns 0.0.
"""

from __future__ import annotations

import logging
import warnings

from projection.errors import ConfigurationWarning
from projection.indices import ReferenceIndex, ReferenceIndices
from projection.instruments import RateKind, RateSpec
from projection.rates import BaseRateModel

logger = logging.getLogger(__name__)


class RateEngine:
    """
    Registry-based rate engine.

    Models are registered at initialization and dispatched based on
    can_evaluate() checks. First matching model wins.
    """

    def __init__(self) -> None:
        self._models: list[BaseRateModel] = []

    def register(self, model: BaseRateModel) -> None:
        """Register a rate model for dispatch.

        Order matters: first matching model wins.
        """
        self._models.append(model)

    def annual_rate(self, spec: RateSpec, indices: ReferenceIndices) -> float:
        """Dispatch to the matching model; 0.0 with a ConfigurationWarning if none."""
        for model in self._models:
            if model.can_evaluate(spec):
                return model.annual_rate(spec, indices)
        logger.warning("Unknown rate kind %r; using an annual rate of 0", spec.kind)
        warnings.warn(
            f"No rate model registered for kind {spec.kind!r}; annual rate defaults to 0.",
            ConfigurationWarning,
            stacklevel=2,
        )
        return 0.0


def create_default_engine() -> RateEngine:
    """Factory for the default engine with every built-in rate kind registered."""
    from projection.rates import (
        FixedRateModel,
        IndexPlusSpreadModel,
        PercentOfIndexModel,
    )

    engine = RateEngine()
    engine.register(PercentOfIndexModel())
    engine.register(IndexPlusSpreadModel(RateKind.PRIMARY_PLUS, ReferenceIndex.PRIMARY))
    engine.register(IndexPlusSpreadModel(RateKind.INFLATION_PLUS, ReferenceIndex.INFLATION))
    engine.register(IndexPlusSpreadModel(RateKind.POLICY_PLUS, ReferenceIndex.POLICY))
    engine.register(FixedRateModel())
    return engine
