"""IWalkingRepository port - persistence seam of the walking domain."""

from abc import ABC, abstractmethod
from datetime import date as DateType
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from ..entities.daily_aggregate import DailyAggregate
from ..entities.streak_state import StreakState
from ..entities.user_profile import UserProfile
from ..entities.walk_record import WalkRecord


class IWalkingRepository(ABC):
    """Port for walk, daily aggregate, streak and profile persistence.

    A record store keyed by user and date. The domain depends on this
    abstraction, never on a concrete database. Implementations raise
    StoreFailureError when the underlying read or write fails.
    """

    # ===== Walks =====

    @abstractmethod
    async def save_walk(self, walk: WalkRecord) -> None:
        """Persist a new walk.

        Args:
            walk: Walk to save
        """
        pass

    @abstractmethod
    async def get_walk(self, walk_id: UUID, user_id: str) -> Optional[WalkRecord]:
        """Fetch a walk scoped to its owner.

        Args:
            walk_id: Walk identifier
            user_id: Owning user

        Returns:
            Optional[WalkRecord]: Walk if found and owned by user_id
        """
        pass

    @abstractmethod
    async def get_walks(self, walk_ids: Sequence[UUID], user_id: str) -> List[WalkRecord]:
        """Fetch the user's walks among walk_ids (foreign ids are ignored)."""
        pass

    @abstractmethod
    async def list_walks(
        self, user_id: str, start_date: DateType, end_date: DateType
    ) -> List[WalkRecord]:
        """List walks in an inclusive date range, most recent date first."""
        pass

    @abstractmethod
    async def list_walks_page(
        self,
        user_id: str,
        start_date: DateType,
        end_date: DateType,
        offset: int,
        limit: int,
    ) -> Tuple[List[WalkRecord], int]:
        """List one page of walks in an inclusive date range.

        Same order as list_walks. For history views only: aggregate and
        streak computations always read complete histories.

        Returns:
            Tuple[List[WalkRecord], int]: The page and the total walk count
            of the range
        """
        pass

    @abstractmethod
    async def list_walks_for_date(self, user_id: str, date: DateType) -> List[WalkRecord]:
        """List walks of a single date, newest first."""
        pass

    @abstractmethod
    async def list_all_walks(self, user_id: str) -> List[WalkRecord]:
        """List every walk of the user (unbounded)."""
        pass

    @abstractmethod
    async def delete_walks(self, walk_ids: Sequence[UUID], user_id: str) -> int:
        """Delete walks in a single operation scoped to user_id.

        Returns:
            int: Number of walks deleted
        """
        pass

    # ===== Daily aggregates =====

    @abstractmethod
    async def get_daily_aggregate(
        self, user_id: str, date: DateType
    ) -> Optional[DailyAggregate]:
        """Fetch the aggregate of (user_id, date), None if absent."""
        pass

    @abstractmethod
    async def list_daily_aggregates(
        self, user_id: str, start_date: DateType, end_date: DateType
    ) -> List[DailyAggregate]:
        """List aggregates in an inclusive date range, ascending by date."""
        pass

    @abstractmethod
    async def list_all_daily_aggregates(self, user_id: str) -> List[DailyAggregate]:
        """List every aggregate of the user.

        Must not paginate or truncate: streak correctness needs the full
        history.
        """
        pass

    @abstractmethod
    async def upsert_daily_aggregate(self, aggregate: DailyAggregate) -> None:
        """Insert or replace the aggregate keyed by (user_id, date)."""
        pass

    @abstractmethod
    async def delete_daily_aggregate(self, user_id: str, date: DateType) -> bool:
        """Delete the aggregate of (user_id, date).

        Returns:
            bool: True if a row was deleted, False if none existed
        """
        pass

    # ===== Streak =====

    @abstractmethod
    async def get_streak(self, user_id: str) -> Optional[StreakState]:
        """Fetch the user's streak state, None if never written."""
        pass

    @abstractmethod
    async def save_streak(self, streak: StreakState) -> None:
        """Write all streak fields for streak.user_id."""
        pass

    @abstractmethod
    async def reset_streak(self, user_id: str) -> StreakState:
        """Clear current streak and last activity date, keeping longest.

        Returns:
            StreakState: The state after the reset
        """
        pass

    # ===== Profiles =====

    @abstractmethod
    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        """Fetch the user's profile (step goal), None if missing."""
        pass

    @abstractmethod
    async def save_profile(self, profile: UserProfile) -> None:
        """Create or update a profile."""
        pass

    @abstractmethod
    async def list_user_ids(self) -> List[str]:
        """List every user with a profile, walks or daily aggregates."""
        pass
