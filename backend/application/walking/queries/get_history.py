"""Get history query - walks, aggregates and statistics for a period."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date as DateType
from datetime import datetime, timezone
from typing import List, Optional

from domain.shared.types import TimePeriod
from domain.walking import DEFAULT_STEP_GOAL
from domain.walking.calculation.aggregator_service import AggregatorService
from domain.walking.core.entities import DailyAggregate, StreakState, WalkRecord
from domain.walking.core.ports.repository import IWalkingRepository
from domain.walking.core.value_objects import DateRange, SummaryStats
from domain.walking.date_ranges import get_date_range_for_period

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryData:
    """
    History of one period.

    Attributes:
        period: Window label (week, month, year)
        date_range: Inclusive window
        walks: Walks of the window, most recent first
        daily_aggregates: Aggregates of the window, ascending by date
        stats: Summary statistics of the window
        streak: Stored streak state (None if never computed)
        step_goal: Effective daily step goal
    """

    period: TimePeriod
    date_range: DateRange
    walks: List[WalkRecord]
    daily_aggregates: List[DailyAggregate]
    stats: SummaryStats
    streak: Optional[StreakState]
    step_goal: int = DEFAULT_STEP_GOAL


@dataclass(frozen=True)
class GetHistoryQuery:
    """
    Query: Get walking history for a period.

    Attributes:
        user_id: User ID
        period: Window label
        reference_date: Any date inside the window (if None, today in UTC)
    """

    user_id: str
    period: TimePeriod = TimePeriod.WEEK
    reference_date: Optional[DateType] = None


class GetHistoryQueryHandler:
    """Handler for GetHistoryQuery."""

    def __init__(
        self,
        repository: IWalkingRepository,
        aggregator: Optional[AggregatorService] = None,
    ):
        self._repository = repository
        self._aggregator = aggregator or AggregatorService()

    async def handle(self, query: GetHistoryQuery) -> HistoryData:
        """
        Load a period and compute its statistics.

        The four reads are independent and issued concurrently.

        Raises:
            StoreFailureError: If a store read fails
        """
        reference = query.reference_date or datetime.now(timezone.utc).date()
        date_range = get_date_range_for_period(query.period, reference)

        walks, aggregates, streak, profile = await asyncio.gather(
            self._repository.list_walks(query.user_id, date_range.start_date, date_range.end_date),
            self._repository.list_daily_aggregates(
                query.user_id, date_range.start_date, date_range.end_date
            ),
            self._repository.get_streak(query.user_id),
            self._repository.get_profile(query.user_id),
        )

        stats = self._aggregator.calculate(aggregates, walks)

        logger.debug(
            "History loaded",
            extra={
                "user_id": query.user_id,
                "period": query.period.value,
                "start_date": date_range.start_date.isoformat(),
                "walks": len(walks),
                "aggregates": len(aggregates),
            },
        )

        return HistoryData(
            period=query.period,
            date_range=date_range,
            walks=walks,
            daily_aggregates=aggregates,
            stats=stats,
            streak=streak,
            step_goal=profile.step_goal if profile else DEFAULT_STEP_GOAL,
        )
