"""AggregatorService - summary statistics over a history window."""

import math
from typing import Sequence

from ..core.entities.daily_aggregate import DailyAggregate
from ..core.entities.walk_record import WalkRecord
from ..core.value_objects.summary_stats import SummaryStats


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest int, halves going up.

    Example:
        >>> round_half_up(2.5)
        3
    """
    return int(math.floor(value + 0.5))


class AggregatorService:
    """Derive window statistics from daily aggregates and walks.

    Totals come from the daily aggregates, never from the walks, so a day
    with partial walk data is not counted twice. Walks only contribute the
    walk count. Pure: no I/O, never raises, empty input yields zeros.
    """

    def calculate(
        self,
        daily_aggregates: Sequence[DailyAggregate],
        walks: Sequence[WalkRecord],
    ) -> SummaryStats:
        """Calculate summary statistics for a window.

        Args:
            daily_aggregates: Aggregates of the window (any order)
            walks: Walks of the window

        Returns:
            SummaryStats: Totals, averages and goal-met counts

        Example:
            >>> stats = AggregatorService().calculate(aggregates, walks)
            >>> stats.goal_met_percentage
            67
        """
        total_steps = sum(aggregate.total_steps for aggregate in daily_aggregates)
        active_days = sum(1 for aggregate in daily_aggregates if aggregate.is_active)
        days_goal_met = sum(1 for aggregate in daily_aggregates if aggregate.goal_met)

        if active_days > 0:
            average_steps = round_half_up(total_steps / active_days)
            goal_met_percentage = round_half_up(days_goal_met / active_days * 100)
        else:
            average_steps = 0
            goal_met_percentage = 0

        return SummaryStats(
            total_steps=total_steps,
            total_walks=len(walks),
            average_steps=average_steps,
            days_goal_met=days_goal_met,
            goal_met_percentage=goal_met_percentage,
        )

    @staticmethod
    def total_duration(walks: Sequence[WalkRecord]) -> int:
        """Total walk duration in minutes (missing durations count as 0)."""
        return sum(walk.duration_minutes or 0 for walk in walks)

    @staticmethod
    def total_distance(walks: Sequence[WalkRecord]) -> float:
        """Total walk distance in meters (missing distances count as 0)."""
        return sum(walk.distance_meters or 0.0 for walk in walks)

    @staticmethod
    def average_steps_per_walk(walks: Sequence[WalkRecord]) -> int:
        if not walks:
            return 0
        return round_half_up(sum(walk.steps for walk in walks) / len(walks))

    @staticmethod
    def goal_percentage(steps: int, goal: int) -> int:
        """Percentage of a goal reached by a step count (0 when goal is 0)."""
        if goal == 0:
            return 0
        return round_half_up(steps / goal * 100)
