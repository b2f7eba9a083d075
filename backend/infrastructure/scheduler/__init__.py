"""
Scheduler infrastructure for background jobs.
"""

from .consistency_job import ConsistencyRecalculationJob, ConsistencyRunReport
from .scheduler_config import SchedulerManager

__all__ = ["SchedulerManager", "ConsistencyRecalculationJob", "ConsistencyRunReport"]
