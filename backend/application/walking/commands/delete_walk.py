"""Delete walk command and handler.

Users can only delete their own walks. Deletion runs the recalculation
cascade so the day's aggregate and the streak stay consistent.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from application.walking.orchestrators.recalculation_cascade import (
    CascadeResult,
    RecalculationCascade,
)
from domain.shared.ports.event_bus import IEventBus
from domain.walking.core.events import StreakRecalculated, WalksDeleted
from domain.walking.core.ports.repository import IWalkingRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteWalkCommand:
    """
    Command: Delete one walk.

    Attributes:
        user_id: User ID (for authorization)
        walk_id: Walk to delete
    """

    user_id: str
    walk_id: UUID


async def publish_deletion_events(event_bus: IEventBus, result: CascadeResult) -> None:
    """Publish WalksDeleted then StreakRecalculated for a completed cascade."""
    await event_bus.publish_all(
        [
            WalksDeleted.create(
                user_id=result.user_id,
                walk_ids=result.deleted_walk_ids,
                affected_dates=result.affected_dates,
            ),
            StreakRecalculated.create(
                user_id=result.user_id,
                previous_streak=result.previous_streak,
                current_streak=result.streak.current_streak,
                longest_streak=result.streak.longest_streak,
                last_activity_date=result.streak.last_activity_date,
            ),
        ]
    )


class DeleteWalkCommandHandler:
    """Handler for DeleteWalkCommand."""

    def __init__(
        self,
        repository: IWalkingRepository,
        event_bus: IEventBus,
        cascade: Optional[RecalculationCascade] = None,
    ):
        self._event_bus = event_bus
        self._cascade = cascade or RecalculationCascade(repository)

    async def handle(self, command: DeleteWalkCommand) -> CascadeResult:
        """
        Execute delete command.

        Returns:
            CascadeResult with the recomputed aggregate and streak

        Raises:
            WalkNotFoundError: If the walk is missing or owned by another user
            StoreFailureError: If the store fails mid-cascade
        """
        logger.info(
            "Deleting walk",
            extra={"walk_id": str(command.walk_id), "user_id": command.user_id},
        )

        result = await self._cascade.delete_walk(command.user_id, command.walk_id)
        await publish_deletion_events(self._event_bus, result)

        return result
