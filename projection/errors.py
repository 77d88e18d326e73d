"""Warning and error types raised by the projection engine."""


class ConfigurationWarning(UserWarning):
    """
    Non-fatal signal for an instrument the engine cannot interpret.

    Emitted when a RateSpec carries a kind no registered rate model handles.
    The engine recovers locally (effective annual rate of 0.0) and keeps going.
    """
