"""Walking domain events."""

from .base import DomainEvent
from .streak_recalculated import StreakRecalculated
from .walk_logged import WalkLogged
from .walks_deleted import WalksDeleted

__all__ = [
    "DomainEvent",
    "WalkLogged",
    "WalksDeleted",
    "StreakRecalculated",
]
