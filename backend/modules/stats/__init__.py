"""
Stats module.

Dashboard counters kept as a mutable cache.
"""

from .interfaces import IStatsService
from .models import StatsPatch, SystemStats
from .exceptions import StatsNotInitializedError, UnknownCounterError

__all__ = [
    "IStatsService",
    "StatsPatch",
    "SystemStats",
    "StatsNotInitializedError",
    "UnknownCounterError",
]
