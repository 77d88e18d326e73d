"""Base rate model abstract class."""

from __future__ import annotations

from abc import ABC, abstractmethod

from projection.indices import ReferenceIndices
from projection.instruments import RateSpec


class BaseRateModel(ABC):
    """Abstract base class for rate models.

    Subclasses implement can_evaluate() and annual_rate() for specific rate kinds.
    """

    @abstractmethod
    def can_evaluate(self, spec: RateSpec) -> bool:
        """Return True if this model handles the spec's kind."""
        ...

    @abstractmethod
    def annual_rate(self, spec: RateSpec, indices: ReferenceIndices) -> float:
        """Compute the effective annual rate (decimal)."""
        ...
