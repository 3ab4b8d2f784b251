"""Custom exception hierarchy for Periodlog."""


class PeriodLogError(Exception):
    """Base exception for all Periodlog errors."""


class ConfigError(PeriodLogError):
    """Raised when configuration loading or validation fails."""


class UnknownPeriodError(ConfigError):
    """Raised when a rollover period name is not recognized."""

    def __init__(self, period: object):
        self.period = period
        super().__init__(
            f"Unknown rollover period {period!r}. Expected one of: Month, Week, Day, Hour, Minute."
        )
