"""Unit tests for LogWalkCommandHandler."""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from application.walking.commands.log_walk import LogWalkCommand, LogWalkCommandHandler
from application.walking.orchestrators import recalculation_cascade as cascade_module
from domain.walking import DEFAULT_STEP_GOAL
from domain.walking.core.entities import UserProfile
from domain.walking.core.events import StreakRecalculated, WalkLogged
from domain.walking.core.exceptions import InvalidInputError, StoreFailureError

USER_ID = "user123"
TODAY = date(2025, 3, 10)


@pytest.fixture
def event_bus() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def handler(repository, event_bus) -> LogWalkCommandHandler:
    return LogWalkCommandHandler(repository, event_bus)


class TestLogWalk:
    @pytest.mark.asyncio
    async def test_stores_walk_and_updates_aggregate(self, handler, repository) -> None:
        result = await handler.handle(
            LogWalkCommand(user_id=USER_ID, date=TODAY, steps=4200, duration_minutes=40)
        )

        assert await repository.get_walk(result.walk.id, USER_ID) == result.walk
        assert result.aggregate is not None
        assert result.aggregate.total_steps == 4200
        assert result.aggregate.goal_met is False
        assert result.streak.current_streak == 0
        assert result.streak.last_activity_date == TODAY

    @pytest.mark.asyncio
    async def test_second_walk_same_day_meets_goal(self, handler) -> None:
        await handler.handle(LogWalkCommand(user_id=USER_ID, date=TODAY, steps=4000))
        result = await handler.handle(LogWalkCommand(user_id=USER_ID, date=TODAY, steps=3000))

        assert result.aggregate is not None
        assert result.aggregate.total_steps == 7000
        assert result.aggregate.goal_met is True
        assert (result.streak.current_streak, result.streak.longest_streak) == (1, 1)

    @pytest.mark.asyncio
    async def test_creates_default_profile(self, handler, repository) -> None:
        await handler.handle(LogWalkCommand(user_id=USER_ID, date=TODAY, steps=100))

        profile = await repository.get_profile(USER_ID)
        assert profile is not None
        assert profile.step_goal == DEFAULT_STEP_GOAL

    @pytest.mark.asyncio
    async def test_keeps_existing_goal(self, handler, repository) -> None:
        await repository.save_profile(UserProfile(user_id=USER_ID, daily_step_goal=3000))

        result = await handler.handle(LogWalkCommand(user_id=USER_ID, date=TODAY, steps=3500))

        assert result.aggregate is not None and result.aggregate.goal_met is True
        profile = await repository.get_profile(USER_ID)
        assert profile is not None and profile.daily_step_goal == 3000

    @pytest.mark.asyncio
    async def test_estimates_distance_from_steps(self, handler) -> None:
        result = await handler.handle(LogWalkCommand(user_id=USER_ID, date=TODAY, steps=1000))

        assert result.walk.distance_meters == 762.0

    @pytest.mark.asyncio
    async def test_keeps_reported_distance_and_heart_rate(self, handler) -> None:
        result = await handler.handle(
            LogWalkCommand(
                user_id=USER_ID,
                date=TODAY,
                steps=1000,
                distance_meters=900.5,
                average_heart_rate=98,
                max_heart_rate=121,
                auto_detected=True,
            )
        )

        assert result.walk.distance_meters == 900.5
        assert result.walk.heart_rate is not None
        assert result.walk.heart_rate.average_bpm == 98
        assert result.walk.heart_rate.max_bpm == 121
        assert result.walk.auto_detected is True

    @pytest.mark.asyncio
    async def test_publishes_events_in_order(self, handler, event_bus) -> None:
        await handler.handle(LogWalkCommand(user_id=USER_ID, date=TODAY, steps=8000))

        event_bus.publish_all.assert_awaited_once()
        events = list(event_bus.publish_all.await_args.args[0])
        assert [type(e) for e in events] == [WalkLogged, StreakRecalculated]
        assert events[0].day_total_steps == 8000
        assert events[0].goal_met is True
        assert events[1].previous_streak is None
        assert events[1].current_streak == 1

    @pytest.mark.asyncio
    async def test_streak_failure_logs_partial_state(self, handler, repository, event_bus) -> None:
        repository.save_streak = AsyncMock(  # type: ignore[method-assign]
            side_effect=StoreFailureError("save_streak", "connection reset")
        )

        with patch.object(cascade_module.logger, "error") as log_error:
            with pytest.raises(StoreFailureError):
                await handler.handle(LogWalkCommand(user_id=USER_ID, date=TODAY, steps=8000))

        log_error.assert_called_once()
        assert log_error.call_args.args[0] == "Recalculation cascade aborted"
        extra = log_error.call_args.kwargs["extra"]
        assert extra["user_id"] == USER_ID
        assert extra["step"] == "streak"
        assert extra["completed_dates"] == [TODAY.isoformat()]
        # Walk and aggregate stay written, nothing is published
        assert len(await repository.list_all_walks(USER_ID)) == 1
        assert await repository.get_daily_aggregate(USER_ID, TODAY) is not None
        event_bus.publish_all.assert_not_awaited()


class TestLogWalkValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"steps": 0},
            {"steps": -5},
            {"duration_minutes": -1},
            {"distance_meters": -0.5},
            {"average_heart_rate": 0},
            {"max_heart_rate": -70},
        ],
    )
    async def test_rejects_invalid_input(self, handler, repository, event_bus, overrides) -> None:
        fields = {"user_id": USER_ID, "date": TODAY, "steps": 1000, **overrides}

        with pytest.raises(InvalidInputError):
            await handler.handle(LogWalkCommand(**fields))

        assert await repository.list_all_walks(USER_ID) == []
        event_bus.publish_all.assert_not_awaited()
