"""
Nightly consistency recalculation background job.

Rebuilds every user's daily aggregates and streak from their walks, healing
partially applied cascades and concurrent deletions that raced each other.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from application.walking.orchestrators.recalculation_cascade import RecalculationCascade
from domain.walking.core.exceptions import WalkingDomainError
from domain.walking.core.ports.repository import IWalkingRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConsistencyRunReport:
    """Outcome of one job run."""

    processed: int
    failed_user_ids: List[str]
    duration_seconds: float

    @property
    def success_count(self) -> int:
        return self.processed - len(self.failed_user_ids)


class ConsistencyRecalculationJob:
    """
    Background job running a full recomputation for every known user.

    One user's failure is logged and counted; the remaining users are still
    processed.
    """

    def __init__(
        self,
        repository: IWalkingRepository,
        cascade: Optional[RecalculationCascade] = None,
    ):
        """
        Initialize consistency job.

        Args:
            repository: Walking repository port
            cascade: Recalculation cascade (default: built on repository)
        """
        self.repository = repository
        self.cascade = cascade or RecalculationCascade(repository)

    async def run(self) -> ConsistencyRunReport:
        """
        Execute the consistency job.

        Main entry point called by scheduler.

        Raises:
            WalkingDomainError: If the user list itself cannot be read
        """
        logger.info("Starting consistency recalculation job")
        start_time = datetime.now(timezone.utc)

        user_ids = await self.repository.list_user_ids()
        failed: List[str] = []

        for user_id in user_ids:
            try:
                await self.cascade.recalculate_all(user_id)
            except WalkingDomainError as e:
                failed.append(user_id)
                logger.error(
                    f"Consistency recalculation failed for user {user_id}: {e}",
                    exc_info=True,
                )

        elapsed = (datetime.now(timezone.utc) - start_time).total_seconds()
        logger.info(
            f"Consistency recalculation completed: "
            f"{len(user_ids) - len(failed)} success, {len(failed)} errors, "
            f"duration: {elapsed:.2f}s"
        )

        return ConsistencyRunReport(
            processed=len(user_ids),
            failed_user_ids=failed,
            duration_seconds=elapsed,
        )
