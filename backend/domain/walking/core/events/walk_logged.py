"""WalkLogged domain event."""

from dataclasses import dataclass
from datetime import date as DateType
from datetime import datetime, timezone
from uuid import UUID, uuid4

from .base import DomainEvent


@dataclass(frozen=True)
class WalkLogged(DomainEvent):
    """Domain event: a walk has been logged.

    Attributes:
        walk_id: ID of the new walk.
        user_id: Owning user.
        date: Date of the walk.
        steps: Steps of the walk.
        day_total_steps: Day total after the walk was added.
        goal_met: Whether the day's goal is met after the walk.
    """

    walk_id: UUID
    user_id: str
    date: DateType
    steps: int
    day_total_steps: int
    goal_met: bool

    @classmethod
    def create(
        cls,
        walk_id: UUID,
        user_id: str,
        date: DateType,
        steps: int,
        day_total_steps: int,
        goal_met: bool,
    ) -> "WalkLogged":
        """Create new WalkLogged event with generated id and timestamp."""
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            walk_id=walk_id,
            user_id=user_id,
            date=date,
            steps=steps,
            day_total_steps=day_total_steps,
            goal_met=goal_met,
        )
