"""In-memory walking repository implementation.

Provides an in-memory implementation of IWalkingRepository for tests and
local runs. Uses dictionaries for storage with no external dependencies.
"""

from copy import deepcopy
from dataclasses import replace
from datetime import date as DateType
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from domain.walking.core.entities import (
    DailyAggregate,
    StreakState,
    UserProfile,
    WalkRecord,
)
from domain.walking.core.ports.repository import IWalkingRepository


class InMemoryWalkingRepository(IWalkingRepository):
    """
    In-memory implementation of IWalkingRepository port.

    Thread safety: NOT thread-safe (use locks if needed in production)
    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> repository = InMemoryWalkingRepository()
        >>> await repository.save_profile(UserProfile("user123", 8000))
        >>> await repository.save_walk(WalkRecord.create("user123", today, 4200))
        >>> walks = await repository.list_walks_for_date("user123", today)
    """

    def __init__(self) -> None:
        """Initialize repository with empty storage."""
        self._walks: Dict[UUID, WalkRecord] = {}
        self._aggregates: Dict[Tuple[str, DateType], DailyAggregate] = {}
        self._streaks: Dict[str, StreakState] = {}
        self._profiles: Dict[str, UserProfile] = {}

    # ===== Walks =====

    async def save_walk(self, walk: WalkRecord) -> None:
        self._walks[walk.id] = deepcopy(walk)

    async def get_walk(self, walk_id: UUID, user_id: str) -> Optional[WalkRecord]:
        walk = self._walks.get(walk_id)

        # Authorization check: walk must belong to user
        if walk is None or walk.user_id != user_id:
            return None
        return deepcopy(walk)

    async def get_walks(self, walk_ids: Sequence[UUID], user_id: str) -> List[WalkRecord]:
        found = []
        for walk_id in dict.fromkeys(walk_ids):
            walk = self._walks.get(walk_id)
            if walk is not None and walk.user_id == user_id:
                found.append(deepcopy(walk))
        return found

    async def list_walks(
        self, user_id: str, start_date: DateType, end_date: DateType
    ) -> List[WalkRecord]:
        walks = [
            walk
            for walk in self._walks.values()
            if walk.user_id == user_id and start_date <= walk.date <= end_date
        ]
        walks.sort(key=lambda w: (w.date, w.created_at), reverse=True)
        return [deepcopy(walk) for walk in walks]

    async def list_walks_page(
        self,
        user_id: str,
        start_date: DateType,
        end_date: DateType,
        offset: int,
        limit: int,
    ) -> Tuple[List[WalkRecord], int]:
        walks = await self.list_walks(user_id, start_date, end_date)
        return walks[offset : offset + limit], len(walks)

    async def list_walks_for_date(self, user_id: str, date: DateType) -> List[WalkRecord]:
        return await self.list_walks(user_id, date, date)

    async def list_all_walks(self, user_id: str) -> List[WalkRecord]:
        walks = [walk for walk in self._walks.values() if walk.user_id == user_id]
        walks.sort(key=lambda w: (w.date, w.created_at), reverse=True)
        return [deepcopy(walk) for walk in walks]

    async def delete_walks(self, walk_ids: Sequence[UUID], user_id: str) -> int:
        deleted = 0
        for walk_id in dict.fromkeys(walk_ids):
            walk = self._walks.get(walk_id)
            if walk is not None and walk.user_id == user_id:
                del self._walks[walk_id]
                deleted += 1
        return deleted

    # ===== Daily aggregates =====

    async def get_daily_aggregate(
        self, user_id: str, date: DateType
    ) -> Optional[DailyAggregate]:
        return self._aggregates.get((user_id, date))

    async def list_daily_aggregates(
        self, user_id: str, start_date: DateType, end_date: DateType
    ) -> List[DailyAggregate]:
        aggregates = [
            aggregate
            for (owner, day), aggregate in self._aggregates.items()
            if owner == user_id and start_date <= day <= end_date
        ]
        return sorted(aggregates, key=lambda a: a.date)

    async def list_all_daily_aggregates(self, user_id: str) -> List[DailyAggregate]:
        aggregates = [
            aggregate for (owner, _), aggregate in self._aggregates.items() if owner == user_id
        ]
        return sorted(aggregates, key=lambda a: a.date)

    async def upsert_daily_aggregate(self, aggregate: DailyAggregate) -> None:
        self._aggregates[(aggregate.user_id, aggregate.date)] = replace(
            aggregate, updated_at=datetime.now(timezone.utc)
        )

    async def delete_daily_aggregate(self, user_id: str, date: DateType) -> bool:
        return self._aggregates.pop((user_id, date), None) is not None

    # ===== Streak =====

    async def get_streak(self, user_id: str) -> Optional[StreakState]:
        return self._streaks.get(user_id)

    async def save_streak(self, streak: StreakState) -> None:
        self._streaks[streak.user_id] = replace(streak, updated_at=datetime.now(timezone.utc))

    async def reset_streak(self, user_id: str) -> StreakState:
        existing = self._streaks.get(user_id) or StreakState(user_id=user_id)
        reset = replace(existing.reset(), updated_at=datetime.now(timezone.utc))
        self._streaks[user_id] = reset
        return reset

    # ===== Profiles =====

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        return self._profiles.get(user_id)

    async def save_profile(self, profile: UserProfile) -> None:
        self._profiles[profile.user_id] = profile

    async def list_user_ids(self) -> List[str]:
        user_ids = set(self._profiles)
        user_ids.update(walk.user_id for walk in self._walks.values())
        user_ids.update(owner for owner, _ in self._aggregates)
        return sorted(user_ids)

    def clear(self) -> None:
        """Remove all data (testing utility)."""
        self._walks.clear()
        self._aggregates.clear()
        self._streaks.clear()
        self._profiles.clear()
