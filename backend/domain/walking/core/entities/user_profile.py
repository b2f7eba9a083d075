"""UserProfile entity - the slice of the profile the engine needs."""

from dataclasses import dataclass
from typing import Optional

from domain.walking import DEFAULT_STEP_GOAL


@dataclass(frozen=True)
class UserProfile:
    """User profile holding the daily step goal.

    Attributes:
        user_id: User identifier
        daily_step_goal: Goal in steps; None means the default goal applies
    """

    user_id: str
    daily_step_goal: Optional[int] = None

    def __post_init__(self) -> None:
        if self.daily_step_goal is not None and self.daily_step_goal < 0:
            raise ValueError(
                f"daily_step_goal must be non-negative, got {self.daily_step_goal}"
            )

    @property
    def step_goal(self) -> int:
        """Effective goal (falls back to DEFAULT_STEP_GOAL when unset or zero)."""
        return self.daily_step_goal or DEFAULT_STEP_GOAL
