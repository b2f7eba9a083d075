"""Recalculation cascade.

Keeps daily aggregates and the streak consistent with the walks they are
derived from. Every mutation of walks ends with the same sequence:

1. recompute the aggregate of each affected date (upsert, or delete when the
   date has no steps left)
2. recompute the streak once over the user's full aggregate history
3. persist the streak (or reset it when no aggregate remains)

Steps run strictly in order. There is no rollback: a store failure aborts the
cascade, the partial state is logged and healed by the next mutation or by
the consistency job.
"""

import logging
from dataclasses import dataclass, field
from datetime import date as DateType
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from uuid import UUID

from domain.walking.calculation.streak_service import StreakCalculator
from domain.walking.core.entities import DailyAggregate, StreakState
from domain.walking.core.exceptions import (
    ProfileNotFoundError,
    WalkingDomainError,
    WalkNotFoundError,
)
from domain.walking.core.ports.repository import IWalkingRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CascadeResult:
    """
    Outcome of a completed cascade.

    Attributes:
        user_id: User whose data was recomputed
        deleted_walk_ids: Walks removed by the triggering mutation
        affected_dates: Distinct dates recomputed, ascending
        aggregates: New aggregate per affected date (None = row removed)
        streak: Persisted streak state
        previous_streak: Current streak before the cascade, None if unknown
    """

    user_id: str
    streak: StreakState
    deleted_walk_ids: Tuple[UUID, ...] = ()
    affected_dates: Tuple[DateType, ...] = ()
    aggregates: Dict[DateType, Optional[DailyAggregate]] = field(default_factory=dict)
    previous_streak: Optional[int] = None


class RecalculationCascade:
    """
    Orchestrate aggregate and streak recomputation after walk mutations.

    Holds no state between calls: every method reads what it needs from the
    repository and writes the derived rows back.

    Example:
        >>> cascade = RecalculationCascade(repository)
        >>> result = await cascade.delete_walks("user123", [walk_a, walk_b])
        >>> result.affected_dates
        (datetime.date(2025, 3, 1),)
    """

    def __init__(
        self,
        repository: IWalkingRepository,
        streak_calculator: Optional[StreakCalculator] = None,
    ):
        """
        Initialize cascade.

        Args:
            repository: Walking repository port
            streak_calculator: Streak calculator (default: new instance)
        """
        self._repository = repository
        self._streaks = streak_calculator or StreakCalculator()

    async def recalculate_day(self, user_id: str, day: DateType) -> Optional[DailyAggregate]:
        """
        Recompute one date's aggregate from its remaining walks.

        The step goal is only read when the date still has steps, so rows of
        a user without a profile can always be cleared.

        Returns:
            The upserted aggregate, or None when the date has no steps and its
            row was removed (or never existed)

        Raises:
            ProfileNotFoundError: If the date has steps but the user has no profile
            StoreFailureError: If a store read or write fails
        """
        walks = await self._repository.list_walks_for_date(user_id, day)

        total_steps = sum(walk.steps for walk in walks)

        if total_steps <= 0:
            removed = await self._repository.delete_daily_aggregate(user_id, day)
            logger.debug(
                "Daily aggregate cleared",
                extra={"user_id": user_id, "date": day.isoformat(), "removed": removed},
            )
            return None

        profile = await self._repository.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)

        aggregate = DailyAggregate.from_total(user_id, day, total_steps, profile.step_goal)
        await self._repository.upsert_daily_aggregate(aggregate)
        logger.debug(
            "Daily aggregate updated",
            extra={
                "user_id": user_id,
                "date": day.isoformat(),
                "total_steps": aggregate.total_steps,
                "goal_met": aggregate.goal_met,
            },
        )
        return aggregate

    async def recalculate_streak(self, user_id: str) -> StreakState:
        """
        Recompute and persist the streak over the user's full history.

        With no aggregate left the streak is reset: current streak 0, no last
        activity date, stored longest streak kept.

        Raises:
            StoreFailureError: If a store read or write fails
        """
        aggregates = await self._repository.list_all_daily_aggregates(user_id)
        computation = self._streaks.calculate(aggregates)

        if not computation.has_activity:
            streak = await self._repository.reset_streak(user_id)
            logger.info("Streak reset", extra={"user_id": user_id})
            return streak

        streak = computation.to_state(user_id)
        await self._repository.save_streak(streak)
        logger.info(
            "Streak recalculated",
            extra={
                "user_id": user_id,
                "current_streak": streak.current_streak,
                "longest_streak": streak.longest_streak,
                "aggregate_count": len(aggregates),
            },
        )
        return streak

    async def recalculate_dates(
        self, user_id: str, dates: Iterable[DateType]
    ) -> CascadeResult:
        """
        Recompute the given dates, then the streak once.

        Entry point for mutations that add walks: the walks are already
        stored, only the derived rows are refreshed.

        Raises:
            ProfileNotFoundError: If a date has steps but the user has no profile
            StoreFailureError: If a store read or write fails
        """
        previous = await self._current_streak(user_id)
        return await self._cascade(
            user_id, deleted_walk_ids=(), dates=dates, previous_streak=previous
        )

    async def delete_walk(self, user_id: str, walk_id: UUID) -> CascadeResult:
        """
        Delete one walk and recompute its date and the streak.

        Raises:
            WalkNotFoundError: If the walk does not exist or belongs to another user
            ProfileNotFoundError: If a remaining date has steps but no profile exists
            StoreFailureError: If a store read or write fails
        """
        walk = await self._repository.get_walk(walk_id, user_id)
        if walk is None:
            raise WalkNotFoundError(user_id, [str(walk_id)])

        previous = await self._current_streak(user_id)
        await self._repository.delete_walks([walk.id], user_id)

        return await self._cascade(
            user_id,
            deleted_walk_ids=(walk.id,),
            dates=[walk.date],
            previous_streak=previous,
        )

    async def delete_walks(self, user_id: str, walk_ids: Sequence[UUID]) -> CascadeResult:
        """
        Delete several walks in one store operation, then cascade once.

        Each distinct affected date is recomputed once, and the streak is
        recomputed exactly once after all dates are done. Ids that do not
        belong to the user are ignored as long as at least one walk matches.

        Raises:
            WalkNotFoundError: If none of the ids match a walk of the user
            ProfileNotFoundError: If a remaining date has steps but no profile exists
            StoreFailureError: If a store read or write fails
        """
        walks = await self._repository.get_walks(walk_ids, user_id)
        if not walks:
            raise WalkNotFoundError(user_id, [str(walk_id) for walk_id in walk_ids])

        found_ids = tuple(walk.id for walk in walks)
        if len(found_ids) < len(set(walk_ids)):
            logger.warning(
                "Some walks not found for deletion",
                extra={
                    "user_id": user_id,
                    "requested": len(set(walk_ids)),
                    "found": len(found_ids),
                },
            )

        previous = await self._current_streak(user_id)
        await self._repository.delete_walks(found_ids, user_id)

        return await self._cascade(
            user_id,
            deleted_walk_ids=found_ids,
            dates=[walk.date for walk in walks],
            previous_streak=previous,
        )

    async def recalculate_all(self, user_id: str) -> CascadeResult:
        """
        Rebuild every aggregate of a user from its walks, then the streak.

        Aggregates whose date no longer has walks are deleted. This is the
        full recomputation that heals partially applied cascades.
        """
        walks = await self._repository.list_all_walks(user_id)
        existing = await self._repository.list_all_daily_aggregates(user_id)

        dates = {walk.date for walk in walks} | {aggregate.date for aggregate in existing}
        return await self.recalculate_dates(user_id, dates)

    async def _current_streak(self, user_id: str) -> Optional[int]:
        streak = await self._repository.get_streak(user_id)
        return streak.current_streak if streak else None

    async def _cascade(
        self,
        user_id: str,
        deleted_walk_ids: Tuple[UUID, ...],
        dates: Iterable[DateType],
        previous_streak: Optional[int],
    ) -> CascadeResult:
        affected_dates = tuple(sorted(set(dates)))
        aggregates: Dict[DateType, Optional[DailyAggregate]] = {}
        completed: List[DateType] = []

        try:
            for day in affected_dates:
                aggregates[day] = await self.recalculate_day(user_id, day)
                completed.append(day)
            streak = await self.recalculate_streak(user_id)
        except WalkingDomainError as e:
            logger.error(
                "Recalculation cascade aborted",
                extra={
                    "user_id": user_id,
                    "step": (
                        "streak" if len(completed) == len(affected_dates) else "daily_aggregate"
                    ),
                    "completed_dates": [day.isoformat() for day in completed],
                    "pending_dates": [
                        day.isoformat() for day in affected_dates if day not in completed
                    ],
                    "deleted_walks": len(deleted_walk_ids),
                    "error": str(e),
                },
            )
            raise

        logger.info(
            "Recalculation cascade completed",
            extra={
                "user_id": user_id,
                "deleted_walks": len(deleted_walk_ids),
                "affected_dates": len(affected_dates),
                "current_streak": streak.current_streak,
            },
        )

        return CascadeResult(
            user_id=user_id,
            streak=streak,
            deleted_walk_ids=deleted_walk_ids,
            affected_dates=affected_dates,
            aggregates=aggregates,
            previous_streak=previous_streak,
        )
