"""
APScheduler configuration and management.

Provides centralized scheduler configuration for background jobs
like the nightly consistency recalculation.
"""

import logging
from typing import Any, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from .consistency_job import ConsistencyRecalculationJob

logger = logging.getLogger(__name__)

CONSISTENCY_JOB_ID = "walking_consistency_recalculation"


class SchedulerManager:
    """
    Manages APScheduler lifecycle and job registration.

    Handles initialization, job registration, and shutdown.
    """

    def __init__(self) -> None:
        self.scheduler: Optional[AsyncIOScheduler] = None
        self._consistency_job: Optional[ConsistencyRecalculationJob] = None

    def initialize(
        self,
        consistency_job: ConsistencyRecalculationJob,
        cron_expression: str = "0 3 * * *",
    ) -> None:
        """
        Initialize and configure scheduler with jobs.

        Args:
            consistency_job: Consistency recalculation job instance
            cron_expression: Cron expression (default: 3 AM UTC every day)
        """
        if self.scheduler is not None:
            logger.warning("Scheduler already initialized")
            return

        self._consistency_job = consistency_job

        self.scheduler = AsyncIOScheduler(
            timezone="UTC",
            job_defaults={
                "coalesce": True,  # Combine missed runs
                "max_instances": 1,  # One instance at a time
                "misfire_grace_time": 3600,  # 1 hour grace period
            },
        )

        self._register_consistency_job(cron_expression)

        logger.info("Scheduler initialized successfully")

    def _register_consistency_job(self, cron_expression: str) -> None:
        if self.scheduler is None or self._consistency_job is None:
            raise RuntimeError("Scheduler not initialized")

        trigger = CronTrigger.from_crontab(cron_expression, timezone="UTC")

        self.scheduler.add_job(
            self._consistency_job.run,
            trigger=trigger,
            id=CONSISTENCY_JOB_ID,
            name="Nightly Walking Consistency Recalculation",
            replace_existing=True,
        )

        logger.info(f"Consistency job registered with cron: {cron_expression}")

    def start(self) -> None:
        """Start scheduler (begin executing jobs)."""
        if self.scheduler is None:
            raise RuntimeError("Scheduler not initialized")

        if self.scheduler.running:
            logger.warning("Scheduler already running")
            return

        self.scheduler.start()
        logger.info("Scheduler started")

    def shutdown(self, wait: bool = True) -> None:
        """
        Shutdown scheduler gracefully.

        Args:
            wait: If True, wait for running jobs to complete
        """
        if self.scheduler is None or not self.scheduler.running:
            logger.warning("Scheduler not running")
            return

        self.scheduler.shutdown(wait=wait)
        logger.info(f"Scheduler shutdown (wait={wait})")

    def get_jobs(self) -> list[dict[str, Any]]:
        """List scheduled jobs (id, name, next run, trigger)."""
        if self.scheduler is None:
            return []

        return [
            {
                "id": job.id,
                "name": job.name,
                "next_run": getattr(job, "next_run_time", None),
                "trigger": str(job.trigger),
            }
            for job in self.scheduler.get_jobs()
        ]

    async def trigger_consistency_job_now(self) -> None:
        """Run the consistency job immediately (manual execution)."""
        if self._consistency_job is None:
            raise RuntimeError("Consistency job not initialized")

        logger.info("Manually triggering consistency recalculation job")
        await self._consistency_job.run()
