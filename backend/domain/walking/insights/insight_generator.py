"""InsightGenerator - ranked encouragement, nudges and milestones.

Candidates come from three independent passes (positive reinforcement,
nudges, milestones). Passes never suppress each other: a stable sort by
priority decides what is shown, and only the top MAX_INSIGHTS survive.
"""

from typing import List, Optional, Sequence

from domain.shared.types import TimePeriod

from ..calculation.aggregator_service import round_half_up
from ..core.entities.daily_aggregate import DailyAggregate
from ..core.entities.streak_state import StreakState
from ..core.entities.walk_record import WalkRecord
from ..core.value_objects.insight import Insight, InsightCategory

MAX_INSIGHTS = 3

NUDGE_STREAK_MILESTONES = (7, 14, 21, 30, 60, 90, 100)
WALK_COUNT_MILESTONES = (10, 25, 50, 100, 250, 500, 1000)
STREAK_MILESTONES = (7, 14, 21, 30, 60, 90, 100, 365)
STEP_MILESTONES = (100_000, 250_000, 500_000, 1_000_000)
STEP_MILESTONE_WINDOW = 10_000

TOTAL_STEPS_THRESHOLD = 10_000
LONGEST_STREAK_THRESHOLD = 3
CONSISTENCY_RATIO = 0.7
CONSISTENCY_MIN_ACTIVE_DAYS = 3
MILESTONE_NUDGE_DAYS = 3
RECORD_NUDGE_DAYS = 5
PERFECT_WEEK_DAYS = 7


def _days(count: int, capitalize: bool = False) -> str:
    word = "day" if count == 1 else "days"
    return word.capitalize() if capitalize else word


class InsightGenerator:
    """Build the insights shown for a history window.

    Pure function of its inputs. daily_aggregates are expected most recent
    first: the perfect-week check looks at the first seven rows as given.
    """

    def generate(
        self,
        walks: Sequence[WalkRecord],
        daily_aggregates: Sequence[DailyAggregate],
        streak: Optional[StreakState],
        period: TimePeriod,
    ) -> List[Insight]:
        """Generate ranked insights, capped at MAX_INSIGHTS.

        Args:
            walks: Walks of the window
            daily_aggregates: Aggregates of the window, most recent first
            streak: Stored streak state (None if never computed)
            period: Window label used in descriptions

        Returns:
            List[Insight]: Top insights, highest priority first; ties keep
            emission order (positive, then nudges, then milestones)
        """
        candidates: List[Insight] = []
        candidates.extend(self._positive_insights(daily_aggregates, streak, period))
        candidates.extend(self._nudge_insights(streak))
        candidates.extend(self._milestone_insights(walks, daily_aggregates, streak))

        ranked = sorted(candidates, key=lambda insight: insight.priority, reverse=True)
        return ranked[:MAX_INSIGHTS]

    def _positive_insights(
        self,
        daily_aggregates: Sequence[DailyAggregate],
        streak: Optional[StreakState],
        period: TimePeriod,
    ) -> List[Insight]:
        insights: List[Insight] = []
        period_label = period.value

        active_days = sum(1 for aggregate in daily_aggregates if aggregate.is_active)
        if active_days > 0:
            insights.append(
                Insight(
                    id="days-walked",
                    category=InsightCategory.POSITIVE,
                    icon="calendar",
                    title=f"{active_days} {_days(active_days, capitalize=True)} Active",
                    description=(
                        f"You've walked {active_days} {_days(active_days)} this "
                        f"{period_label}. Keep up the great work!"
                    ),
                    priority=70,
                )
            )

        if streak is not None and streak.current_streak > 0:
            current = streak.current_streak
            insights.append(
                Insight(
                    id="current-streak",
                    category=InsightCategory.POSITIVE,
                    icon="flame",
                    title=f"{current} Day Streak!",
                    description=(
                        f"You're on fire! You've met your goal {current} "
                        f"{_days(current)} in a row."
                    ),
                    priority=90,
                )
            )

        if streak is not None and streak.longest_streak > LONGEST_STREAK_THRESHOLD:
            insights.append(
                Insight(
                    id="longest-streak",
                    category=InsightCategory.POSITIVE,
                    icon="trophy",
                    title=f"{streak.longest_streak} Day Record",
                    description=(
                        f"Your longest streak is {streak.longest_streak} days. "
                        "That's amazing dedication!"
                    ),
                    priority=60,
                )
            )

        total_steps = sum(aggregate.total_steps for aggregate in daily_aggregates)
        if total_steps > TOTAL_STEPS_THRESHOLD:
            insights.append(
                Insight(
                    id="total-steps",
                    category=InsightCategory.POSITIVE,
                    icon="footsteps",
                    title=f"{total_steps / 1000:.1f}K Steps!",
                    description=(
                        f"You've taken {total_steps:,} steps this {period_label}. "
                        "Every step counts!"
                    ),
                    priority=65,
                )
            )

        goal_met_days = sum(1 for aggregate in daily_aggregates if aggregate.goal_met)
        if (
            active_days >= CONSISTENCY_MIN_ACTIVE_DAYS
            and goal_met_days >= active_days * CONSISTENCY_RATIO
        ):
            percentage = round_half_up(goal_met_days / active_days * 100)
            insights.append(
                Insight(
                    id="consistency",
                    category=InsightCategory.POSITIVE,
                    icon="trending-up",
                    title=f"{percentage}% Success Rate",
                    description=(
                        f"You're meeting your goal {percentage}% of the time. "
                        "Consistency is key!"
                    ),
                    priority=75,
                )
            )

        return insights

    def _nudge_insights(self, streak: Optional[StreakState]) -> List[Insight]:
        insights: List[Insight] = []
        if streak is None or streak.current_streak <= 0:
            return insights

        current = streak.current_streak
        next_milestone = next((m for m in NUDGE_STREAK_MILESTONES if m > current), None)
        if next_milestone is not None:
            days_to_go = next_milestone - current
            if days_to_go <= MILESTONE_NUDGE_DAYS:
                insights.append(
                    Insight(
                        id="streak-milestone",
                        category=InsightCategory.NUDGE,
                        icon="star",
                        title=(
                            f"{days_to_go} {_days(days_to_go, capitalize=True)} "
                            f"to {next_milestone}!"
                        ),
                        description=(
                            f"You're so close to a {next_milestone}-day streak. Keep going!"
                        ),
                        priority=85,
                    )
                )

        if streak.longest_streak > current:
            days_to_record = streak.longest_streak - current
            if days_to_record <= RECORD_NUDGE_DAYS:
                insights.append(
                    Insight(
                        id="beat-record",
                        category=InsightCategory.NUDGE,
                        icon="trophy",
                        title=(
                            f"{days_to_record} {_days(days_to_record, capitalize=True)} "
                            "to Your Record"
                        ),
                        description=(
                            f"Just {days_to_record} more {_days(days_to_record)} "
                            "to beat your personal best!"
                        ),
                        priority=80,
                    )
                )

        return insights

    def _milestone_insights(
        self,
        walks: Sequence[WalkRecord],
        daily_aggregates: Sequence[DailyAggregate],
        streak: Optional[StreakState],
    ) -> List[Insight]:
        insights: List[Insight] = []

        walk_count = len(walks)
        if walk_count in WALK_COUNT_MILESTONES:
            insights.append(
                Insight(
                    id="walk-milestone",
                    category=InsightCategory.MILESTONE,
                    icon="ribbon",
                    title=f"🎉 {walk_count} Walks Logged!",
                    description=(
                        f"Congratulations! You've logged {walk_count} walks. "
                        "That's a huge achievement!"
                    ),
                    priority=100,
                )
            )

        if streak is not None and streak.current_streak in STREAK_MILESTONES:
            current = streak.current_streak
            insights.append(
                Insight(
                    id="streak-milestone-achieved",
                    category=InsightCategory.MILESTONE,
                    icon="flame",
                    title=f"🏆 {current} Day Streak!",
                    description=(
                        f"Amazing! You've reached a {current}-day streak. "
                        "You're unstoppable!"
                    ),
                    priority=100,
                )
            )

        total_steps = sum(aggregate.total_steps for aggregate in daily_aggregates)
        achieved = next(
            (
                milestone
                for milestone in STEP_MILESTONES
                if milestone <= total_steps < milestone + STEP_MILESTONE_WINDOW
            ),
            None,
        )
        if achieved is not None:
            insights.append(
                Insight(
                    id="steps-milestone",
                    category=InsightCategory.MILESTONE,
                    icon="footsteps",
                    title=f"⭐ {achieved // 1000}K Steps!",
                    description=(
                        f"Incredible! You've walked {achieved:,} steps. What a journey!"
                    ),
                    priority=100,
                )
            )

        recent = list(daily_aggregates[:PERFECT_WEEK_DAYS])
        if len(recent) == PERFECT_WEEK_DAYS and all(aggregate.goal_met for aggregate in recent):
            insights.append(
                Insight(
                    id="perfect-week",
                    category=InsightCategory.MILESTONE,
                    icon="checkmark-circle",
                    title="🎯 Perfect Week!",
                    description="You met your goal every single day this week. Outstanding!",
                    priority=95,
                )
            )

        return insights
