"""MongoDB repository implementations."""

from .base import MongoBaseRepository
from .walking_repository import MongoWalkingRepository

__all__ = [
    "MongoBaseRepository",
    "MongoWalkingRepository",
]
