"""Strawberry types for the walking domain.

Dates travel as ISO strings (YYYY-MM-DD), timestamps as ISO 8601 strings.
Mapping functions convert domain records to GraphQL types.
"""

from typing import Annotated, List, Optional, Union

import strawberry

from application.walking.queries.get_day_details import DayDetails as DomainDayDetails
from application.walking.queries.get_history import HistoryData
from application.walking.queries.get_walks_page import WalksPage as DomainWalksPage
from domain.shared.types import TimePeriod as _TimePeriod
from domain.walking.core.entities import DailyAggregate as DomainDailyAggregate
from domain.walking.core.entities import StreakState as DomainStreakState
from domain.walking.core.entities import WalkRecord
from domain.walking.core.exceptions import (
    InvalidInputError,
    ProfileNotFoundError,
    StoreFailureError,
    WalkNotFoundError,
)
from domain.walking.core.value_objects import Insight as DomainInsight
from domain.walking.core.value_objects import InsightCategory as _InsightCategory
from domain.walking.core.value_objects import SummaryStats as DomainSummaryStats

TimePeriod = strawberry.enum(_TimePeriod, name="TimePeriod")
InsightCategory = strawberry.enum(_InsightCategory, name="InsightCategory")


@strawberry.type
class Walk:
    id: str
    user_id: str
    date: str
    steps: int
    duration_minutes: Optional[int]
    distance_meters: Optional[float]
    average_heart_rate: Optional[int]
    max_heart_rate: Optional[int]
    auto_detected: bool
    created_at: str


@strawberry.type
class DailyAggregate:
    date: str
    total_steps: int
    goal_met: bool


@strawberry.type
class Streak:
    current_streak: int
    longest_streak: int
    last_activity_date: Optional[str]


@strawberry.type
class SummaryStats:
    total_steps: int
    total_walks: int
    average_steps: int
    days_goal_met: int
    goal_met_percentage: int


@strawberry.type
class Insight:
    id: str
    category: InsightCategory
    icon: str
    title: str
    description: str
    priority: int


@strawberry.type
class WalkingHistory:
    """History window with statistics (week, month or year)."""

    period: TimePeriod
    start_date: str
    end_date: str
    walks: List[Walk]
    daily_aggregates: List[DailyAggregate]
    stats: SummaryStats
    streak: Optional[Streak]
    step_goal: int


@strawberry.type
class DayDetails:
    date: str
    walks: List[Walk]
    aggregate: Optional[DailyAggregate]
    step_goal: int
    goal_percentage: int
    average_steps_per_walk: int
    total_duration_minutes: int
    total_distance_meters: float


@strawberry.type
class WalksPage:
    """One page of walks, most recent first."""

    start_date: str
    end_date: str
    walks: List[Walk]
    page: int
    page_size: int
    total_count: int
    has_more: bool


# ============================================
# MUTATION INPUTS
# ============================================


@strawberry.input
class LogWalkInput:
    """Input for log walk mutation."""

    user_id: str
    date: str
    steps: int
    duration_minutes: Optional[int] = None
    distance_meters: Optional[float] = None
    average_heart_rate: Optional[int] = None
    max_heart_rate: Optional[int] = None
    auto_detected: bool = False


@strawberry.input
class DeleteWalksInput:
    """Input for batch delete mutation."""

    user_id: str
    walk_ids: List[str]


# ============================================
# MUTATION RESULT TYPES
# ============================================


@strawberry.type
class LogWalkSuccess:
    walk: Walk
    aggregate: Optional[DailyAggregate]
    streak: Streak


@strawberry.type
class DeleteWalksSuccess:
    """Successful delete result (single or batch)."""

    deleted_walk_ids: List[str]
    affected_dates: List[str]
    aggregates: List[DailyAggregate]
    streak: Streak
    message: str = "Walks deleted successfully"


@strawberry.type
class RecalculateSuccess:
    affected_dates: List[str]
    streak: Streak


@strawberry.type
class StepGoalSuccess:
    user_id: str
    daily_step_goal: int


@strawberry.type
class WalkingError:
    """Mutation error result."""

    message: str
    code: str


LogWalkResult = Annotated[
    Union[LogWalkSuccess, WalkingError],
    strawberry.union("LogWalkResult"),
]
DeleteWalksResult = Annotated[
    Union[DeleteWalksSuccess, WalkingError],
    strawberry.union("DeleteWalksResult"),
]
RecalculateResult = Annotated[
    Union[RecalculateSuccess, WalkingError],
    strawberry.union("RecalculateResult"),
]
StepGoalResult = Annotated[
    Union[StepGoalSuccess, WalkingError],
    strawberry.union("StepGoalResult"),
]


# ============================================
# MAPPERS
# ============================================


def error_code(error: Exception) -> str:
    """GraphQL error code for a domain error."""
    if isinstance(error, (WalkNotFoundError, ProfileNotFoundError)):
        return "NOT_FOUND"
    if isinstance(error, StoreFailureError):
        return "STORE_FAILURE"
    if isinstance(error, InvalidInputError):
        return "INVALID_INPUT"
    return "INTERNAL_ERROR"


def map_walk(walk: WalkRecord) -> Walk:
    heart_rate = walk.heart_rate
    return Walk(
        id=str(walk.id),
        user_id=walk.user_id,
        date=walk.date.isoformat(),
        steps=walk.steps,
        duration_minutes=walk.duration_minutes,
        distance_meters=walk.distance_meters,
        average_heart_rate=heart_rate.average_bpm if heart_rate else None,
        max_heart_rate=heart_rate.max_bpm if heart_rate else None,
        auto_detected=walk.auto_detected,
        created_at=walk.created_at.isoformat(),
    )


def map_aggregate(aggregate: DomainDailyAggregate) -> DailyAggregate:
    return DailyAggregate(
        date=aggregate.date.isoformat(),
        total_steps=aggregate.total_steps,
        goal_met=aggregate.goal_met,
    )


def map_streak(streak: DomainStreakState) -> Streak:
    return Streak(
        current_streak=streak.current_streak,
        longest_streak=streak.longest_streak,
        last_activity_date=(
            streak.last_activity_date.isoformat() if streak.last_activity_date else None
        ),
    )


def map_stats(stats: DomainSummaryStats) -> SummaryStats:
    return SummaryStats(
        total_steps=stats.total_steps,
        total_walks=stats.total_walks,
        average_steps=stats.average_steps,
        days_goal_met=stats.days_goal_met,
        goal_met_percentage=stats.goal_met_percentage,
    )


def map_insight(insight: DomainInsight) -> Insight:
    return Insight(
        id=insight.id,
        category=insight.category,
        icon=insight.icon,
        title=insight.title,
        description=insight.description,
        priority=insight.priority,
    )


def map_history(history: HistoryData) -> WalkingHistory:
    return WalkingHistory(
        period=history.period,
        start_date=history.date_range.start_date.isoformat(),
        end_date=history.date_range.end_date.isoformat(),
        walks=[map_walk(walk) for walk in history.walks],
        daily_aggregates=[map_aggregate(a) for a in history.daily_aggregates],
        stats=map_stats(history.stats),
        streak=map_streak(history.streak) if history.streak else None,
        step_goal=history.step_goal,
    )


def map_day_details(details: DomainDayDetails) -> DayDetails:
    return DayDetails(
        date=details.date.isoformat(),
        walks=[map_walk(walk) for walk in details.walks],
        aggregate=map_aggregate(details.aggregate) if details.aggregate else None,
        step_goal=details.step_goal,
        goal_percentage=details.goal_percentage,
        average_steps_per_walk=details.average_steps_per_walk,
        total_duration_minutes=details.total_duration_minutes,
        total_distance_meters=details.total_distance_meters,
    )


def map_walks_page(walks_page: DomainWalksPage) -> WalksPage:
    return WalksPage(
        start_date=walks_page.date_range.start_date.isoformat(),
        end_date=walks_page.date_range.end_date.isoformat(),
        walks=[map_walk(walk) for walk in walks_page.walks],
        page=walks_page.page,
        page_size=walks_page.page_size,
        total_count=walks_page.total_count,
        has_more=walks_page.has_more,
    )
