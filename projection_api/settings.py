"""Service settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from projection.indices import DEFAULT_INDICES, ReferenceIndices


def _env_rate(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a decimal rate (e.g. 0.1065), got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    default_indices: ReferenceIndices
    log_level: str


def load_settings() -> Settings:
    """Default indices fall back to the library defaults when unset."""
    indices = ReferenceIndices(
        primary_floating_rate=_env_rate("PROJECTION_PRIMARY_RATE", DEFAULT_INDICES.primary_floating_rate),
        inflation_rate=_env_rate("PROJECTION_INFLATION_RATE", DEFAULT_INDICES.inflation_rate),
        policy_rate=_env_rate("PROJECTION_POLICY_RATE", DEFAULT_INDICES.policy_rate),
    )
    return Settings(
        default_indices=indices,
        log_level=os.environ.get("PROJECTION_LOG_LEVEL", "INFO").upper(),
    )


settings = load_settings()
