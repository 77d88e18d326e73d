"""
Protocol-based interfaces for the engine's extension points.

Structural subtyping keeps the engine open for new rate conventions (e.g. a
spread over some future benchmark) without touching the dispatch code: any
object with `can_evaluate()` and `annual_rate()` is a rate model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from projection.indices import ReferenceIndices
    from projection.instruments import RateSpec


@runtime_checkable
class RateModel(Protocol):
    """Turns a RateSpec plus reference indices into an effective annual rate."""

    def can_evaluate(self, spec: RateSpec) -> bool:
        """Return True if this model handles the spec's kind."""
        ...

    def annual_rate(self, spec: RateSpec, indices: ReferenceIndices) -> float:
        """Effective annual rate as a decimal (0.12 for 12% a.a.)."""
        ...
