"""Tests for SchedulerManager."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from infrastructure.scheduler.scheduler_config import CONSISTENCY_JOB_ID, SchedulerManager


@pytest.fixture
def consistency_job() -> MagicMock:
    job = MagicMock()
    job.run = AsyncMock()
    return job


class TestSchedulerManager:
    def test_initialize_registers_consistency_job(self, consistency_job) -> None:
        manager = SchedulerManager()

        manager.initialize(consistency_job, cron_expression="30 2 * * *")

        jobs = manager.get_jobs()
        assert [job["id"] for job in jobs] == [CONSISTENCY_JOB_ID]
        assert "hour='2'" in jobs[0]["trigger"]
        assert "minute='30'" in jobs[0]["trigger"]

    def test_initialize_twice_is_ignored(self, consistency_job) -> None:
        manager = SchedulerManager()
        manager.initialize(consistency_job)
        scheduler = manager.scheduler

        manager.initialize(MagicMock())

        assert manager.scheduler is scheduler

    def test_invalid_cron_rejected(self, consistency_job) -> None:
        with pytest.raises(ValueError):
            SchedulerManager().initialize(consistency_job, cron_expression="not a cron")

    def test_start_requires_initialize(self) -> None:
        with pytest.raises(RuntimeError):
            SchedulerManager().start()

    def test_get_jobs_before_initialize(self) -> None:
        assert SchedulerManager().get_jobs() == []

    @pytest.mark.asyncio
    async def test_start_and_shutdown(self, consistency_job) -> None:
        manager = SchedulerManager()
        manager.initialize(consistency_job)

        manager.start()
        assert manager.scheduler is not None and manager.scheduler.running

        manager.shutdown(wait=False)
        # AsyncIOScheduler flips its state on the next loop iteration
        await asyncio.sleep(0)
        assert not manager.scheduler.running

    @pytest.mark.asyncio
    async def test_trigger_now(self, consistency_job) -> None:
        manager = SchedulerManager()
        manager.initialize(consistency_job)

        await manager.trigger_consistency_job_now()

        consistency_job.run.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_trigger_now_requires_job(self) -> None:
        with pytest.raises(RuntimeError):
            await SchedulerManager().trigger_consistency_job_now()
