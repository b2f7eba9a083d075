"""Repository Factory for Persistence Layer.

Environment-based repository selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory (safe fallback if env vars not set)

Usage:
    from infrastructure.persistence.factory import (
        create_walking_repository,
        get_walking_repository,
    )

    repo = create_walking_repository()  # Returns inmemory or mongodb based on env
    repo = get_walking_repository()     # Singleton instance
"""

from typing import Optional

from domain.walking.core.ports.repository import IWalkingRepository
from infrastructure.config import get_mongodb_uri, get_repository_backend
from infrastructure.persistence.in_memory.walking_repository import (
    InMemoryWalkingRepository,
)


def create_walking_repository() -> IWalkingRepository:
    """Create walking repository based on REPOSITORY_BACKEND env var.

    Environment variable: REPOSITORY_BACKEND
    Values:
        - "inmemory": In-memory repository (default, fast, transient)
        - "mongodb": MongoDB repository (persistent, requires MONGODB_URI)

    Returns:
        IWalkingRepository: Repository instance

    Raises:
        ValueError: If mongodb selected but MONGODB_URI not set, or if the
            backend name is unknown

    Example:
        # In .env (production):
        REPOSITORY_BACKEND=mongodb
        MONGODB_URI=mongodb://localhost:27017

        # In .env.test (testing):
        REPOSITORY_BACKEND=inmemory
    """
    mode = get_repository_backend()

    if mode == "mongodb":
        if not get_mongodb_uri():
            raise ValueError(
                "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
                "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
            )

        # Imported lazily: motor is only needed for the mongodb backend
        from infrastructure.persistence.mongodb.walking_repository import (
            MongoWalkingRepository,
        )

        return MongoWalkingRepository()

    if mode == "inmemory":
        return InMemoryWalkingRepository()

    raise ValueError(
        f"Unknown REPOSITORY_BACKEND value: '{mode}'. " f"Supported values: inmemory, mongodb"
    )


# Singleton instance (lazy initialization)
_walking_repository: Optional[IWalkingRepository] = None


def get_walking_repository() -> IWalkingRepository:
    """Get singleton walking repository instance.

    Example:
        repo = get_walking_repository()
        walks = await repo.list_walks_for_date("user123", today)
    """
    global _walking_repository
    if _walking_repository is None:
        _walking_repository = create_walking_repository()
    return _walking_repository


def reset_walking_repository() -> None:
    """Reset singleton repository instance.

    Useful for testing to force re-creation with different env vars.
    """
    global _walking_repository
    _walking_repository = None
