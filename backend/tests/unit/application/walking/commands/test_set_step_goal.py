"""Unit tests for SetStepGoalCommandHandler."""

from datetime import date

import pytest

from application.walking.commands.set_step_goal import (
    SetStepGoalCommand,
    SetStepGoalCommandHandler,
)
from domain.walking.core.entities import DailyAggregate
from domain.walking.core.exceptions import InvalidInputError


class TestSetStepGoal:
    @pytest.mark.asyncio
    async def test_saves_profile(self, repository) -> None:
        profile = await SetStepGoalCommandHandler(repository).handle(
            SetStepGoalCommand(user_id="user123", daily_step_goal=10000)
        )

        assert profile.step_goal == 10000
        assert await repository.get_profile("user123") == profile

    @pytest.mark.asyncio
    async def test_existing_aggregates_keep_goal_met(self, repository) -> None:
        aggregate = DailyAggregate(
            user_id="user123", date=date(2025, 3, 1), total_steps=8000, goal_met=True
        )
        await repository.upsert_daily_aggregate(aggregate)

        await SetStepGoalCommandHandler(repository).handle(
            SetStepGoalCommand(user_id="user123", daily_step_goal=12000)
        )

        stored = await repository.get_daily_aggregate("user123", date(2025, 3, 1))
        assert stored is not None and stored.goal_met is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("goal", [0, -100])
    async def test_rejects_non_positive_goal(self, repository, goal) -> None:
        with pytest.raises(InvalidInputError):
            await SetStepGoalCommandHandler(repository).handle(
                SetStepGoalCommand(user_id="user123", daily_step_goal=goal)
            )

        assert await repository.get_profile("user123") is None
