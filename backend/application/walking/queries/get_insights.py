"""Get insights query - ranked insights for a period."""

import logging
from dataclasses import dataclass
from datetime import date as DateType
from typing import List, Optional

from application.walking.queries.get_history import GetHistoryQuery, GetHistoryQueryHandler
from domain.shared.types import TimePeriod
from domain.walking.core.ports.repository import IWalkingRepository
from domain.walking.core.value_objects import Insight
from domain.walking.insights.insight_generator import InsightGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetInsightsQuery:
    """
    Query: Get insights for a period.

    Attributes:
        user_id: User ID
        period: Window label
        reference_date: Any date inside the window (if None, today in UTC)
    """

    user_id: str
    period: TimePeriod = TimePeriod.WEEK
    reference_date: Optional[DateType] = None


class GetInsightsQueryHandler:
    """Handler for GetInsightsQuery."""

    def __init__(
        self,
        repository: IWalkingRepository,
        history_handler: Optional[GetHistoryQueryHandler] = None,
        generator: Optional[InsightGenerator] = None,
    ):
        self._history = history_handler or GetHistoryQueryHandler(repository)
        self._generator = generator or InsightGenerator()

    async def handle(self, query: GetInsightsQuery) -> List[Insight]:
        """
        Load the period and rank its insights.

        Returns:
            Up to three insights, highest priority first
        """
        history = await self._history.handle(
            GetHistoryQuery(
                user_id=query.user_id,
                period=query.period,
                reference_date=query.reference_date,
            )
        )

        # Perfect-week detection reads the most recent rows first
        most_recent_first = sorted(
            history.daily_aggregates, key=lambda aggregate: aggregate.date, reverse=True
        )

        insights = self._generator.generate(
            walks=history.walks,
            daily_aggregates=most_recent_first,
            streak=history.streak,
            period=query.period,
        )

        logger.debug(
            "Insights generated",
            extra={"user_id": query.user_id, "insight_ids": [i.id for i in insights]},
        )
        return insights
