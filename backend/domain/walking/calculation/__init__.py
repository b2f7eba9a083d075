"""Calculation services for the walking domain."""

from .aggregator_service import AggregatorService, round_half_up
from .streak_service import StreakCalculator, StreakComputation

__all__ = [
    "AggregatorService",
    "StreakCalculator",
    "StreakComputation",
    "round_half_up",
]
