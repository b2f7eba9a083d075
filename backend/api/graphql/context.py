"""GraphQL context factory for dependency injection.

Provides the dependencies walking resolvers need:
- Repository (walks, aggregates, streaks, profiles)
- Event bus (domain events)
- Recalculation cascade
- Command and query handlers built on them
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from application.walking.commands import (
    DeleteWalkCommandHandler,
    DeleteWalksCommandHandler,
    LogWalkCommandHandler,
    SetStepGoalCommandHandler,
)
from application.walking.orchestrators.recalculation_cascade import RecalculationCascade
from application.walking.queries import (
    GetDayDetailsQueryHandler,
    GetHistoryQueryHandler,
    GetInsightsQueryHandler,
    GetStreakQueryHandler,
    GetWalksPageQueryHandler,
)
from domain.shared.ports.event_bus import IEventBus
from domain.walking.core.ports.repository import IWalkingRepository


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Resolvers access dependencies using `info.context.get("name")`.
    """

    def __init__(
        self,
        walking_repository: IWalkingRepository,
        event_bus: IEventBus,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.walking_repository = walking_repository
        self.event_bus = event_bus
        self.request = request

        self.recalculation_cascade = RecalculationCascade(walking_repository)

        self.log_walk_handler = LogWalkCommandHandler(
            walking_repository, event_bus, self.recalculation_cascade
        )
        self.delete_walk_handler = DeleteWalkCommandHandler(
            walking_repository, event_bus, self.recalculation_cascade
        )
        self.delete_walks_handler = DeleteWalksCommandHandler(
            walking_repository, event_bus, self.recalculation_cascade
        )
        self.set_step_goal_handler = SetStepGoalCommandHandler(walking_repository)

        self.history_handler = GetHistoryQueryHandler(walking_repository)
        self.day_details_handler = GetDayDetailsQueryHandler(walking_repository)
        self.insights_handler = GetInsightsQueryHandler(walking_repository, self.history_handler)
        self.streak_handler = GetStreakQueryHandler(walking_repository)
        self.walks_page_handler = GetWalksPageQueryHandler(walking_repository)

    def get(self, key: str) -> Any:
        """Get dependency by name, None if not found.

        Example:
            >>> handler = info.context.get("history_handler")
        """
        return getattr(self, key, None)


def create_context(
    walking_repository: IWalkingRepository,
    event_bus: IEventBus,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies."""
    return GraphQLContext(
        walking_repository=walking_repository,
        event_bus=event_bus,
        request=request,
    )
