"""Unit tests for the delete walk command handlers."""

from datetime import date
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from application.walking.commands.delete_walk import (
    DeleteWalkCommand,
    DeleteWalkCommandHandler,
)
from application.walking.commands.delete_walks import (
    DeleteWalksCommand,
    DeleteWalksCommandHandler,
)
from application.walking.commands.log_walk import LogWalkCommand, LogWalkCommandHandler
from domain.walking.core.events import StreakRecalculated, WalksDeleted
from domain.walking.core.exceptions import InvalidInputError, WalkNotFoundError

USER_ID = "user123"
MAR_1 = date(2025, 3, 1)
MAR_2 = date(2025, 3, 2)


@pytest.fixture
def event_bus() -> AsyncMock:
    return AsyncMock()


async def _log(repository, user_id: str, day: date, steps: int):
    result = await LogWalkCommandHandler(repository, AsyncMock()).handle(
        LogWalkCommand(user_id=user_id, date=day, steps=steps)
    )
    return result.walk


class TestDeleteWalkHandler:
    @pytest.mark.asyncio
    async def test_delete_updates_day_and_streak(self, repository, event_bus) -> None:
        first = await _log(repository, USER_ID, MAR_1, 5000)
        await _log(repository, USER_ID, MAR_1, 3000)
        handler = DeleteWalkCommandHandler(repository, event_bus)

        result = await handler.handle(DeleteWalkCommand(user_id=USER_ID, walk_id=first.id))

        aggregate = await repository.get_daily_aggregate(USER_ID, MAR_1)
        assert aggregate is not None
        assert aggregate.total_steps == 3000
        assert aggregate.goal_met is False
        assert result.streak.current_streak == 0
        assert result.streak.longest_streak == 0

    @pytest.mark.asyncio
    async def test_publishes_deleted_then_streak(self, repository, event_bus) -> None:
        walk = await _log(repository, USER_ID, MAR_1, 8000)
        handler = DeleteWalkCommandHandler(repository, event_bus)

        await handler.handle(DeleteWalkCommand(user_id=USER_ID, walk_id=walk.id))

        event_bus.publish_all.assert_awaited_once()
        events = list(event_bus.publish_all.await_args.args[0])
        assert [type(e) for e in events] == [WalksDeleted, StreakRecalculated]
        assert events[0].walk_ids == (walk.id,)
        assert events[0].affected_dates == (MAR_1,)
        assert events[1].previous_streak == 1
        assert events[1].is_reset is True

    @pytest.mark.asyncio
    async def test_other_users_walk_is_not_found(self, repository, event_bus) -> None:
        walk = await _log(repository, "someone-else", MAR_1, 8000)
        handler = DeleteWalkCommandHandler(repository, event_bus)

        with pytest.raises(WalkNotFoundError):
            await handler.handle(DeleteWalkCommand(user_id=USER_ID, walk_id=walk.id))

        event_bus.publish_all.assert_not_awaited()
        assert await repository.get_daily_aggregate("someone-else", MAR_1) is not None


class TestDeleteWalksHandler:
    @pytest.mark.asyncio
    async def test_batch_delete_across_dates(self, repository, event_bus) -> None:
        walks = [
            await _log(repository, USER_ID, MAR_1, 8000),
            await _log(repository, USER_ID, MAR_2, 9000),
            await _log(repository, USER_ID, MAR_2, 1000),
        ]
        handler = DeleteWalksCommandHandler(repository, event_bus)

        result = await handler.handle(
            DeleteWalksCommand(user_id=USER_ID, walk_ids=(walks[1].id, walks[2].id))
        )

        assert result.affected_dates == (MAR_2,)
        assert await repository.get_daily_aggregate(USER_ID, MAR_2) is None
        assert result.streak.current_streak == 1
        assert result.streak.last_activity_date == MAR_1
        assert len(event_bus.publish_all.await_args.args[0]) == 2

    @pytest.mark.asyncio
    async def test_empty_batch_rejected(self, repository, event_bus) -> None:
        handler = DeleteWalksCommandHandler(repository, event_bus)

        with pytest.raises(InvalidInputError):
            await handler.handle(DeleteWalksCommand(user_id=USER_ID, walk_ids=()))

    @pytest.mark.asyncio
    async def test_unknown_ids(self, repository, event_bus) -> None:
        handler = DeleteWalksCommandHandler(repository, event_bus)

        with pytest.raises(WalkNotFoundError):
            await handler.handle(DeleteWalksCommand(user_id=USER_ID, walk_ids=(uuid4(),)))

        event_bus.publish_all.assert_not_awaited()
