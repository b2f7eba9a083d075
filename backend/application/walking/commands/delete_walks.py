"""Batch delete walks command and handler."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple
from uuid import UUID

from application.walking.commands.delete_walk import publish_deletion_events
from application.walking.orchestrators.recalculation_cascade import (
    CascadeResult,
    RecalculationCascade,
)
from domain.shared.ports.event_bus import IEventBus
from domain.walking.core.exceptions import InvalidInputError
from domain.walking.core.ports.repository import IWalkingRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteWalksCommand:
    """
    Command: Delete several walks at once.

    Attributes:
        user_id: User ID (for authorization)
        walk_ids: Walks to delete (at least one)
    """

    user_id: str
    walk_ids: Tuple[UUID, ...]


class DeleteWalksCommandHandler:
    """Handler for DeleteWalksCommand.

    All walks are removed in one store operation and the streak is
    recomputed once, after every affected date has been recomputed.
    """

    def __init__(
        self,
        repository: IWalkingRepository,
        event_bus: IEventBus,
        cascade: Optional[RecalculationCascade] = None,
    ):
        self._event_bus = event_bus
        self._cascade = cascade or RecalculationCascade(repository)

    async def handle(self, command: DeleteWalksCommand) -> CascadeResult:
        """
        Execute batch delete command.

        Raises:
            InvalidInputError: If no walk ids are given
            WalkNotFoundError: If none of the walks belong to the user
            StoreFailureError: If the store fails mid-cascade
        """
        if not command.walk_ids:
            raise InvalidInputError("At least one walk id is required")

        logger.info(
            "Deleting walks",
            extra={"user_id": command.user_id, "count": len(command.walk_ids)},
        )

        result = await self._cascade.delete_walks(command.user_id, command.walk_ids)
        await publish_deletion_events(self._event_bus, result)

        return result
