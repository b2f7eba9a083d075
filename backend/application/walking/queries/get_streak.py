"""Get streak query - stored streak state of a user."""

from dataclasses import dataclass

from domain.walking.core.entities import StreakState
from domain.walking.core.ports.repository import IWalkingRepository


@dataclass(frozen=True)
class GetStreakQuery:
    user_id: str


class GetStreakQueryHandler:
    """Handler for GetStreakQuery.

    A user without a stored streak gets an empty state rather than an error.
    """

    def __init__(self, repository: IWalkingRepository):
        self._repository = repository

    async def handle(self, query: GetStreakQuery) -> StreakState:
        streak = await self._repository.get_streak(query.user_id)
        return streak or StreakState(user_id=query.user_id)
