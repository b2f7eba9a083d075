"""DailyAggregate entity - derived per (user, date) step total."""

from dataclasses import dataclass
from datetime import date as DateType
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class DailyAggregate:
    """Step total of one user on one date.

    Derived data: total_steps must equal the sum of the user's walks on that
    date. A date whose walks sum to zero has no aggregate at all (absence,
    not a zero-value row); the recalculation cascade enforces this.

    Attributes:
        user_id: Owning user
        date: Calendar date
        total_steps: Sum of the date's walk steps
        goal_met: True if total_steps >= step goal at computation time
        updated_at: Last recomputation timestamp, set by the store
    """

    user_id: str
    date: DateType
    total_steps: int
    goal_met: bool
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate totals.

        Raises:
            ValueError: If total_steps is negative
        """
        if self.total_steps < 0:
            raise ValueError(f"total_steps must be non-negative, got {self.total_steps}")

    @property
    def is_active(self) -> bool:
        """Active day: at least one step recorded."""
        return self.total_steps > 0

    @classmethod
    def from_total(
        cls,
        user_id: str,
        date: DateType,
        total_steps: int,
        step_goal: int,
    ) -> "DailyAggregate":
        """Build the aggregate of a date whose walks sum to total_steps.

        Only called for positive totals: a date without steps has no
        aggregate. The goal counts as met when reached exactly.

        Args:
            user_id: Owning user
            date: Date being aggregated
            total_steps: Sum of the date's walk steps
            step_goal: User's step goal at computation time
        """
        return cls(
            user_id=user_id,
            date=date,
            total_steps=total_steps,
            goal_met=total_steps >= step_goal,
        )
