"""Unit test configuration.

Isolates unit tests from integration test setup: nothing here imports
app.py or needs external services.
"""

from datetime import date
from typing import Callable, List, Sequence

import pytest

from domain.walking.core.entities import DailyAggregate, WalkRecord
from infrastructure.persistence.in_memory.walking_repository import (
    InMemoryWalkingRepository,
)

USER_ID = "user123"


@pytest.fixture
def repository() -> InMemoryWalkingRepository:
    """Fixture providing clean in-memory walking repository."""
    return InMemoryWalkingRepository()


@pytest.fixture
def make_walk() -> Callable[..., WalkRecord]:
    """Factory for walks of USER_ID (override any field by keyword)."""

    def _make(day: date, steps: int, user_id: str = USER_ID, **kwargs: object) -> WalkRecord:
        return WalkRecord.create(user_id=user_id, date=day, steps=steps, **kwargs)

    return _make


@pytest.fixture
def make_aggregates() -> Callable[..., List[DailyAggregate]]:
    """Build consecutive daily aggregates from (total_steps, goal_met) pairs."""

    def _make(
        rows: Sequence[tuple], start: date = date(2025, 3, 1), user_id: str = USER_ID
    ) -> List[DailyAggregate]:
        return [
            DailyAggregate(
                user_id=user_id,
                date=date.fromordinal(start.toordinal() + offset),
                total_steps=total,
                goal_met=goal_met,
            )
            for offset, (total, goal_met) in enumerate(rows)
        ]

    return _make
