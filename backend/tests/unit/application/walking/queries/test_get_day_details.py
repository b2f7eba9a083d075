"""Unit tests for GetDayDetailsQueryHandler."""

from datetime import date

import pytest

from application.walking.queries.get_day_details import (
    GetDayDetailsQuery,
    GetDayDetailsQueryHandler,
)
from domain.walking.core.entities import DailyAggregate, UserProfile

USER_ID = "user123"
DAY = date(2025, 3, 5)


class TestGetDayDetails:
    @pytest.mark.asyncio
    async def test_day_with_walks(self, repository, make_walk) -> None:
        await repository.save_profile(UserProfile(user_id=USER_ID, daily_step_goal=8000))
        await repository.save_walk(
            make_walk(DAY, 3000, duration_minutes=30, distance_meters=2286.0)
        )
        await repository.save_walk(make_walk(DAY, 3000, duration_minutes=25))
        await repository.upsert_daily_aggregate(
            DailyAggregate(user_id=USER_ID, date=DAY, total_steps=6000, goal_met=False)
        )

        details = await GetDayDetailsQueryHandler(repository).handle(
            GetDayDetailsQuery(user_id=USER_ID, date=DAY)
        )

        assert len(details.walks) == 2
        assert details.aggregate is not None
        assert details.step_goal == 8000
        assert details.goal_percentage == 75
        assert details.average_steps_per_walk == 3000
        assert details.total_duration_minutes == 55
        assert details.total_distance_meters == 2286.0

    @pytest.mark.asyncio
    async def test_empty_day(self, repository) -> None:
        details = await GetDayDetailsQueryHandler(repository).handle(
            GetDayDetailsQuery(user_id=USER_ID, date=DAY)
        )

        assert details.walks == []
        assert details.aggregate is None
        assert details.goal_percentage == 0
        assert details.average_steps_per_walk == 0
        assert details.total_duration_minutes == 0
        assert details.total_distance_meters == 0.0
