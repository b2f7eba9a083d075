"""WalksDeleted domain event."""

from dataclasses import dataclass
from datetime import date as DateType
from datetime import datetime, timezone
from typing import Tuple
from uuid import UUID, uuid4

from .base import DomainEvent


@dataclass(frozen=True)
class WalksDeleted(DomainEvent):
    """Domain event: one or more walks were deleted by the user.

    Attributes:
        user_id: Owning user.
        walk_ids: Deleted walk ids.
        affected_dates: Distinct dates whose aggregates were recomputed.
    """

    user_id: str
    walk_ids: Tuple[UUID, ...]
    affected_dates: Tuple[DateType, ...]

    @classmethod
    def create(
        cls,
        user_id: str,
        walk_ids: Tuple[UUID, ...],
        affected_dates: Tuple[DateType, ...],
    ) -> "WalksDeleted":
        """Create new WalksDeleted event with generated id and timestamp."""
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            walk_ids=walk_ids,
            affected_dates=affected_dates,
        )
