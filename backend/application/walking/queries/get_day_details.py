"""Get day details query - walks and aggregate of one date."""

import asyncio
from dataclasses import dataclass
from datetime import date as DateType
from typing import List, Optional

from domain.walking import DEFAULT_STEP_GOAL
from domain.walking.calculation.aggregator_service import AggregatorService
from domain.walking.core.entities import DailyAggregate, WalkRecord
from domain.walking.core.ports.repository import IWalkingRepository


@dataclass(frozen=True)
class DayDetails:
    """
    One day of walking.

    Attributes:
        date: The day
        walks: Walks of the day, most recent first
        aggregate: Daily aggregate (None when nothing was walked)
        step_goal: Effective daily step goal
        goal_percentage: Share of the goal reached, rounded
        average_steps_per_walk: Mean steps of the day's walks, rounded
        total_duration_minutes: Sum of walk durations
        total_distance_meters: Sum of walk distances
    """

    date: DateType
    walks: List[WalkRecord]
    aggregate: Optional[DailyAggregate]
    step_goal: int = DEFAULT_STEP_GOAL
    goal_percentage: int = 0
    average_steps_per_walk: int = 0
    total_duration_minutes: int = 0
    total_distance_meters: float = 0.0


@dataclass(frozen=True)
class GetDayDetailsQuery:
    user_id: str
    date: DateType


class GetDayDetailsQueryHandler:
    """Handler for GetDayDetailsQuery."""

    def __init__(self, repository: IWalkingRepository):
        self._repository = repository

    async def handle(self, query: GetDayDetailsQuery) -> DayDetails:
        walks, aggregate, profile = await asyncio.gather(
            self._repository.list_walks_for_date(query.user_id, query.date),
            self._repository.get_daily_aggregate(query.user_id, query.date),
            self._repository.get_profile(query.user_id),
        )

        step_goal = profile.step_goal if profile else DEFAULT_STEP_GOAL
        total_steps = aggregate.total_steps if aggregate else 0

        return DayDetails(
            date=query.date,
            walks=walks,
            aggregate=aggregate,
            step_goal=step_goal,
            goal_percentage=AggregatorService.goal_percentage(total_steps, step_goal),
            average_steps_per_walk=AggregatorService.average_steps_per_walk(walks),
            total_duration_minutes=AggregatorService.total_duration(walks),
            total_distance_meters=AggregatorService.total_distance(walks),
        )
