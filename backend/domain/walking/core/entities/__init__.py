"""Walking domain entities."""

from .daily_aggregate import DailyAggregate
from .streak_state import StreakState
from .user_profile import UserProfile
from .walk_record import HeartRateSummary, WalkRecord

__all__ = [
    "WalkRecord",
    "HeartRateSummary",
    "DailyAggregate",
    "StreakState",
    "UserProfile",
]
