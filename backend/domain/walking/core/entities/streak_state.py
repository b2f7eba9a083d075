"""StreakState entity - per-user goal streak singleton."""

from dataclasses import dataclass
from datetime import date as DateType
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class StreakState:
    """Current and longest goal-met streak of a user.

    Attributes:
        user_id: Owning user
        current_streak: Consecutive most recent goal-met days
        longest_streak: Longest run ever observed
        last_activity_date: Date of the most recent daily aggregate
        updated_at: Last write timestamp, set by the store
    """

    user_id: str
    current_streak: int = 0
    longest_streak: int = 0
    last_activity_date: Optional[DateType] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate streak invariants.

        Raises:
            ValueError: If a length is negative or current exceeds longest
        """
        if self.current_streak < 0 or self.longest_streak < 0:
            raise ValueError(
                f"Streak lengths must be non-negative, got "
                f"current={self.current_streak} longest={self.longest_streak}"
            )

        if self.current_streak > self.longest_streak:
            raise ValueError(
                f"current_streak ({self.current_streak}) cannot exceed "
                f"longest_streak ({self.longest_streak})"
            )

    def reset(self) -> "StreakState":
        """Return the state after all activity disappeared.

        The longest streak is kept; current streak and last activity clear.
        """
        return StreakState(
            user_id=self.user_id,
            current_streak=0,
            longest_streak=self.longest_streak,
            last_activity_date=None,
        )
