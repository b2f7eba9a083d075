"""Unit tests for InsightGenerator.

Tests focus on:
- Each insight kind and its trigger
- Ranking by priority with stable ties
- Cap at three insights
"""

from datetime import date
from typing import List, Optional

import pytest

from domain.shared.types import TimePeriod
from domain.walking.core.entities import StreakState, WalkRecord
from domain.walking.core.value_objects import Insight, InsightCategory
from domain.walking.insights.insight_generator import MAX_INSIGHTS, InsightGenerator


@pytest.fixture
def generator() -> InsightGenerator:
    return InsightGenerator()


def _streak(current: int, longest: int) -> StreakState:
    return StreakState(
        user_id="user123",
        current_streak=current,
        longest_streak=longest,
        last_activity_date=date(2025, 3, 1),
    )


def _walks(count: int) -> List[WalkRecord]:
    return [WalkRecord.create("user123", date(2025, 3, 1), 100) for _ in range(count)]


def _ids(insights: List[Insight]) -> List[str]:
    return [insight.id for insight in insights]


def _find(insights: List[Insight], insight_id: str) -> Optional[Insight]:
    return next((i for i in insights if i.id == insight_id), None)


class TestEmptyInput:
    def test_no_data_no_insights(self, generator: InsightGenerator) -> None:
        assert generator.generate([], [], None, TimePeriod.WEEK) == []

    def test_zero_streak_no_streak_insights(self, generator: InsightGenerator) -> None:
        insights = generator.generate([], [], _streak(0, 0), TimePeriod.WEEK)
        assert insights == []


class TestPositiveInsights:
    def test_days_walked_singular(self, generator: InsightGenerator, make_aggregates) -> None:
        insights = generator.generate([], make_aggregates([(500, False)]), None, TimePeriod.WEEK)

        days = _find(insights, "days-walked")
        assert days is not None
        assert days.title == "1 Day Active"
        assert "1 day this week" in days.description
        assert days.priority == 70
        assert days.category == InsightCategory.POSITIVE

    def test_days_walked_plural_with_period(
        self, generator: InsightGenerator, make_aggregates
    ) -> None:
        insights = generator.generate(
            [], make_aggregates([(500, False), (600, False)]), None, TimePeriod.MONTH
        )

        days = _find(insights, "days-walked")
        assert days is not None
        assert days.title == "2 Days Active"
        assert "this month" in days.description

    def test_total_steps_title(self, generator: InsightGenerator, make_aggregates) -> None:
        aggregates = make_aggregates([(8000, True), (9000, True), (6000, False)])

        insights = generator.generate([], aggregates, None, TimePeriod.WEEK)

        total = _find(insights, "total-steps")
        assert total is not None
        assert total.title == "23.0K Steps!"
        assert "23,000" in total.description

    def test_total_steps_threshold_is_exclusive(
        self, generator: InsightGenerator, make_aggregates
    ) -> None:
        insights = generator.generate([], make_aggregates([(10000, True)]), None, TimePeriod.WEEK)
        assert _find(insights, "total-steps") is None

    def test_consistency_requires_three_active_days(
        self, generator: InsightGenerator, make_aggregates
    ) -> None:
        two_days = make_aggregates([(100, True), (100, True)])
        three_days = make_aggregates([(100, True), (100, True), (100, False)])

        week = TimePeriod.WEEK
        assert _find(generator.generate([], two_days, None, week), "consistency") is None

        consistency = _find(generator.generate([], three_days, None, week), "consistency")
        assert consistency is None  # 2 of 3 is below 70%

    def test_consistency_success_rate(self, generator: InsightGenerator, make_aggregates) -> None:
        aggregates = make_aggregates([(100, True)] * 7 + [(100, False)] * 3)

        consistency = _find(
            generator.generate([], aggregates, None, TimePeriod.MONTH), "consistency"
        )

        assert consistency is not None
        assert consistency.title == "70% Success Rate"
        assert consistency.priority == 75

    def test_longest_streak_threshold(self, generator: InsightGenerator) -> None:
        below = generator.generate([], [], _streak(1, 3), TimePeriod.WEEK)
        assert _find(below, "longest-streak") is None

        longest = _find(generator.generate([], [], _streak(1, 4), TimePeriod.WEEK), "longest-streak")
        assert longest is not None and longest.title == "4 Day Record"


class TestNudges:
    def test_streak_milestone_nudge(self, generator: InsightGenerator) -> None:
        insights = generator.generate([], [], _streak(5, 5), TimePeriod.WEEK)
        nudge = _find(insights, "streak-milestone")

        assert nudge is not None
        assert nudge.title == "2 Days to 7!"
        assert nudge.category == InsightCategory.NUDGE
        assert nudge.priority == 85

    def test_streak_milestone_too_far(self, generator: InsightGenerator) -> None:
        insights = generator.generate([], [], _streak(3, 3), TimePeriod.WEEK)
        assert _find(insights, "streak-milestone") is None

    def test_no_nudge_above_last_milestone(self, generator: InsightGenerator) -> None:
        insights = generator.generate([], [], _streak(101, 101), TimePeriod.WEEK)
        assert _find(insights, "streak-milestone") is None

    def test_beat_record_absent_when_far(self, generator: InsightGenerator) -> None:
        insights = generator.generate([], [], _streak(5, 30), TimePeriod.WEEK)
        assert "beat-record" not in _ids(insights)

    def test_beat_record_present_when_close(self, generator: InsightGenerator) -> None:
        insights = generator.generate([], [], _streak(27, 30), TimePeriod.WEEK)

        record = _find(insights, "beat-record")
        assert record is not None
        assert record.title == "3 Days to Your Record"
        assert record.priority == 80

    def test_beat_record_singular(self, generator: InsightGenerator) -> None:
        insights = generator.generate([], [], _streak(9, 10), TimePeriod.WEEK)

        record = _find(insights, "beat-record")
        assert record is not None and record.title == "1 Day to Your Record"


class TestMilestones:
    def test_walk_count_50(self, generator: InsightGenerator) -> None:
        insights = generator.generate(_walks(50), [], None, TimePeriod.YEAR)

        milestone = _find(insights, "walk-milestone")
        assert milestone is not None
        assert "50 Walks Logged" in milestone.title
        assert milestone.priority == 100
        assert milestone.category == InsightCategory.MILESTONE

    def test_walk_count_51(self, generator: InsightGenerator) -> None:
        insights = generator.generate(_walks(51), [], None, TimePeriod.YEAR)
        assert _find(insights, "walk-milestone") is None

    @pytest.mark.parametrize("current", [7, 14, 21, 30, 60, 90, 100, 365])
    def test_streak_milestone_achieved(self, generator: InsightGenerator, current: int) -> None:
        insights = generator.generate([], [], _streak(current, current), TimePeriod.WEEK)
        assert _find(insights, "streak-milestone-achieved") is not None

    def test_streak_milestone_not_achieved(self, generator: InsightGenerator) -> None:
        insights = generator.generate([], [], _streak(8, 8), TimePeriod.WEEK)
        assert _find(insights, "streak-milestone-achieved") is None

    def test_steps_milestone_window(self, generator: InsightGenerator, make_aggregates) -> None:
        inside = generator.generate(
            [], make_aggregates([(105_000, True)]), None, TimePeriod.YEAR
        )
        outside = generator.generate(
            [], make_aggregates([(110_000, True)]), None, TimePeriod.YEAR
        )

        milestone = _find(inside, "steps-milestone")
        assert milestone is not None and milestone.title == "⭐ 100K Steps!"
        assert _find(outside, "steps-milestone") is None

    def test_perfect_week(self, generator: InsightGenerator, make_aggregates) -> None:
        recent_first = list(reversed(make_aggregates([(100, True)] * 7)))

        insights = generator.generate([], recent_first, None, TimePeriod.WEEK)

        assert _find(insights, "perfect-week") is not None

    def test_perfect_week_needs_seven_rows(
        self, generator: InsightGenerator, make_aggregates
    ) -> None:
        insights = generator.generate([], make_aggregates([(100, True)] * 6), None, TimePeriod.WEEK)
        assert _find(insights, "perfect-week") is None

    def test_perfect_week_uses_first_seven_rows(
        self, generator: InsightGenerator, make_aggregates
    ) -> None:
        rows = [(100, True)] * 7 + [(100, False)]
        insights = generator.generate([], make_aggregates(rows), None, TimePeriod.MONTH)

        assert _find(insights, "perfect-week") is not None


class TestRanking:
    def test_capped_at_three(self, generator: InsightGenerator, make_aggregates) -> None:
        aggregates = make_aggregates([(8000, True)] * 7)

        insights = generator.generate(_walks(10), aggregates, _streak(7, 7), TimePeriod.WEEK)

        assert len(insights) == MAX_INSIGHTS

    def test_sorted_by_priority_with_stable_ties(
        self, generator: InsightGenerator, make_aggregates
    ) -> None:
        aggregates = make_aggregates([(8000, True)] * 7)

        insights = generator.generate(_walks(10), aggregates, _streak(7, 7), TimePeriod.WEEK)

        # walk-milestone and streak-milestone-achieved tie at 100, emission order kept
        assert _ids(insights) == ["walk-milestone", "streak-milestone-achieved", "perfect-week"]

    def test_nudges_outrank_lower_positives(self, generator: InsightGenerator) -> None:
        insights = generator.generate([], [], _streak(27, 30), TimePeriod.WEEK)

        assert _ids(insights) == ["current-streak", "streak-milestone", "beat-record"]
