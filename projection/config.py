"""
Engine-wide constants.

Everything here is a plain value: the engine never reads the environment.
Service-level configuration (default indices, log level) lives in
`projection_api.settings`.
"""

DAYS_IN_YEAR = 365

# Horizon used when no instrument has a maturity.
DEFAULT_CHART_PERIOD_DAYS = 365

BREAK_EVEN_MAX_DAYS = 1080

EQUIVALENT_RATE_HORIZONS = (30, 365, 720)

# (max_total_days, stride) pairs, checked in order; the last stride applies
# beyond the final threshold.
SAMPLE_STRIDES = (
    (90, 1),
    (365, 3),
    (730, 7),
    (1825, 14),
)
LONG_HORIZON_STRIDE = 30
