"""StreakCalculator - current and longest goal-met streaks."""

from dataclasses import dataclass
from datetime import date as DateType
from typing import Optional, Sequence

from ..core.entities.daily_aggregate import DailyAggregate
from ..core.entities.streak_state import StreakState


@dataclass(frozen=True)
class StreakComputation:
    """Result of a streak computation over a user's daily aggregates.

    Attributes:
        current_streak: Goal-met run ending at the most recent aggregate
        longest_streak: Longest goal-met run, never below current_streak
        last_activity_date: Date of the most recent aggregate, None if empty
    """

    current_streak: int
    longest_streak: int
    last_activity_date: Optional[DateType]

    @property
    def has_activity(self) -> bool:
        return self.last_activity_date is not None

    def to_state(self, user_id: str) -> StreakState:
        return StreakState(
            user_id=user_id,
            current_streak=self.current_streak,
            longest_streak=self.longest_streak,
            last_activity_date=self.last_activity_date,
        )


class StreakCalculator:
    """Compute goal streaks from existing daily aggregate rows.

    Input order is irrelevant: aggregates are sorted by date explicitly.
    Only existing rows are scanned, so a calendar date with no aggregate is
    skipped rather than treated as a broken day; callers must pass the full
    history for the result to be meaningful.
    """

    def calculate(self, daily_aggregates: Sequence[DailyAggregate]) -> StreakComputation:
        """Calculate current and longest streak.

        Args:
            daily_aggregates: All aggregates of a user, any order

        Returns:
            StreakComputation: Streak lengths and last activity date

        Example:
            >>> # goal_met ascending by date: True, True, False, True
            >>> result = StreakCalculator().calculate(aggregates)
            >>> (result.current_streak, result.longest_streak)
            (1, 2)
        """
        if not daily_aggregates:
            return StreakComputation(current_streak=0, longest_streak=0, last_activity_date=None)

        ascending = sorted(daily_aggregates, key=lambda aggregate: aggregate.date)

        current = self.current_streak(ascending)

        running = 0
        longest = 0
        for aggregate in ascending:
            if aggregate.goal_met:
                running += 1
                longest = max(longest, running)
            else:
                running = 0

        return StreakComputation(
            current_streak=current,
            longest_streak=max(longest, current),
            last_activity_date=ascending[-1].date,
        )

    @staticmethod
    def current_streak(daily_aggregates: Sequence[DailyAggregate]) -> int:
        """Goal-met run counted backwards from the most recent aggregate."""
        descending = sorted(daily_aggregates, key=lambda aggregate: aggregate.date, reverse=True)

        streak = 0
        for aggregate in descending:
            if not aggregate.goal_met:
                break
            streak += 1
        return streak
