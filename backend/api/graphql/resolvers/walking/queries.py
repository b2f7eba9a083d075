"""Walking query resolvers.

Groups walking queries:
- history: walks, aggregates, statistics and streak for a period
- dayDetails: walks and aggregate of one date
- insights: ranked insights for a period
- streak: stored streak state
- walks: paged walk listing for a period or the last N days
"""

import logging
from typing import Any, List, NoReturn, Optional

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from api.graphql.resolvers.walking.parsing import parse_date, parse_optional_date
from api.graphql.types_walking import (
    DayDetails,
    Insight,
    Streak,
    TimePeriod,
    WalkingHistory,
    WalksPage,
    error_code,
    map_day_details,
    map_history,
    map_insight,
    map_streak,
    map_walks_page,
)
from application.walking.queries import (
    GetDayDetailsQuery,
    GetHistoryQuery,
    GetInsightsQuery,
    GetStreakQuery,
    GetWalksPageQuery,
)
from domain.walking.core.exceptions import WalkingDomainError

logger = logging.getLogger(__name__)


def _raise_graphql_error(error: WalkingDomainError) -> NoReturn:
    code = error_code(error)
    logger.warning("Walking query failed", extra={"code": code, "error": str(error)})
    raise GraphQLError(str(error), extensions={"code": code}) from error


@strawberry.type
class WalkingQueries:
    """Walking data queries."""

    @strawberry.field(description="Walking history for a week, month or year")  # type: ignore[misc]
    async def history(
        self,
        info: Info[Any, Any],
        user_id: str,
        period: TimePeriod = TimePeriod.WEEK,
        reference_date: Optional[str] = None,
    ) -> WalkingHistory:
        """Load a history window.

        Example:
            query {
              walking {
                history(userId: "user123", period: MONTH, referenceDate: "2025-03-14") {
                  startDate, endDate
                  stats { totalSteps, averageSteps, goalMetPercentage }
                  streak { currentStreak, longestStreak }
                }
              }
            }
        """
        try:
            history = await info.context.get("history_handler").handle(
                GetHistoryQuery(
                    user_id=user_id,
                    period=period,
                    reference_date=parse_optional_date(reference_date, "referenceDate"),
                )
            )
        except WalkingDomainError as e:
            _raise_graphql_error(e)
        return map_history(history)

    @strawberry.field(description="Walks and aggregate of one date")  # type: ignore[misc]
    async def day_details(self, info: Info[Any, Any], user_id: str, date: str) -> DayDetails:
        try:
            details = await info.context.get("day_details_handler").handle(
                GetDayDetailsQuery(user_id=user_id, date=parse_date(date))
            )
        except WalkingDomainError as e:
            _raise_graphql_error(e)
        return map_day_details(details)

    @strawberry.field(description="Top insights for a period")  # type: ignore[misc]
    async def insights(
        self,
        info: Info[Any, Any],
        user_id: str,
        period: TimePeriod = TimePeriod.WEEK,
        reference_date: Optional[str] = None,
    ) -> List[Insight]:
        """Up to three insights, highest priority first.

        Example:
            query {
              walking {
                insights(userId: "user123", period: WEEK) { id, title, priority }
              }
            }
        """
        try:
            insights = await info.context.get("insights_handler").handle(
                GetInsightsQuery(
                    user_id=user_id,
                    period=period,
                    reference_date=parse_optional_date(reference_date, "referenceDate"),
                )
            )
        except WalkingDomainError as e:
            _raise_graphql_error(e)
        return [map_insight(insight) for insight in insights]

    @strawberry.field(description="Stored streak state")  # type: ignore[misc]
    async def streak(self, info: Info[Any, Any], user_id: str) -> Streak:
        try:
            streak = await info.context.get("streak_handler").handle(
                GetStreakQuery(user_id=user_id)
            )
        except WalkingDomainError as e:
            _raise_graphql_error(e)
        return map_streak(streak)

    @strawberry.field(description="One page of walks, most recent first")  # type: ignore[misc]
    async def walks(
        self,
        info: Info[Any, Any],
        user_id: str,
        period: TimePeriod = TimePeriod.WEEK,
        reference_date: Optional[str] = None,
        last_days: Optional[int] = None,
        page: int = 0,
        page_size: int = 20,
    ) -> WalksPage:
        """Page through the walks of a window.

        Example:
            query {
              walking {
                walks(userId: "user123", period: YEAR, page: 1, pageSize: 20) {
                  totalCount, hasMore
                  walks { id, date, steps }
                }
              }
            }
        """
        try:
            walks_page = await info.context.get("walks_page_handler").handle(
                GetWalksPageQuery(
                    user_id=user_id,
                    period=period,
                    reference_date=parse_optional_date(reference_date, "referenceDate"),
                    last_days=last_days,
                    page=page,
                    page_size=page_size,
                )
            )
        except WalkingDomainError as e:
            _raise_graphql_error(e)
        return map_walks_page(walks_page)
