"""StreakRecalculated domain event."""

from dataclasses import dataclass
from datetime import date as DateType
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from .base import DomainEvent


@dataclass(frozen=True)
class StreakRecalculated(DomainEvent):
    """Domain event: a user's streak state was recomputed and persisted.

    Notification collaborators use previous/current values to detect
    milestones or a broken streak.

    Attributes:
        user_id: Owning user.
        previous_streak: Current streak before the recomputation, if known.
        current_streak: Current streak after the recomputation.
        longest_streak: Longest streak after the recomputation.
        last_activity_date: Most recent active date, None after a reset.
    """

    user_id: str
    previous_streak: Optional[int]
    current_streak: int
    longest_streak: int
    last_activity_date: Optional[DateType]

    @property
    def is_reset(self) -> bool:
        return self.last_activity_date is None

    @classmethod
    def create(
        cls,
        user_id: str,
        previous_streak: Optional[int],
        current_streak: int,
        longest_streak: int,
        last_activity_date: Optional[DateType],
    ) -> "StreakRecalculated":
        """Create new StreakRecalculated event with generated id and timestamp."""
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            previous_streak=previous_streak,
            current_streak=current_streak,
            longest_streak=longest_streak,
            last_activity_date=last_activity_date,
        )
