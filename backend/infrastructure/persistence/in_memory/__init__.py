"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.walking_repository import (
    InMemoryWalkingRepository,
)

__all__ = [
    "InMemoryWalkingRepository",
]
