"""
Stats module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class StatsNotInitializedError(NotFoundError):
    """Raised when stats are read before they were seeded."""

    def __init__(self):
        super().__init__(
            "Stats not found",
            code="STATS_NOT_INITIALIZED",
        )


class UnknownCounterError(ValidationError):
    """Raised when a nudge names a field that is not a counter."""

    def __init__(self, field: str):
        super().__init__(
            f"Unknown stats counter: {field}",
            code="UNKNOWN_COUNTER",
            details={"field": field},
        )
