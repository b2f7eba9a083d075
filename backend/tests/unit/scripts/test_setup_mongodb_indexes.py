"""Tests for the MongoDB index setup script (mocked database)."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from scripts.setup_mongodb_indexes import (
    create_daily_aggregate_indexes,
    create_walk_indexes,
    setup_all_indexes,
)


@pytest.fixture
def db() -> MagicMock:
    database = MagicMock()
    collections = {"walks": MagicMock(), "daily_aggregates": MagicMock()}
    for collection in collections.values():
        collection.create_index = AsyncMock()
    database.__getitem__.side_effect = collections.__getitem__
    return database


class TestIndexes:
    @pytest.mark.asyncio
    async def test_daily_aggregates_unique_per_user_and_date(self, db) -> None:
        await create_daily_aggregate_indexes(db)

        db["daily_aggregates"].create_index.assert_awaited_once_with(
            [("user_id", 1), ("date", 1)],
            name="idx_user_date_unique",
            unique=True,
        )

    @pytest.mark.asyncio
    async def test_walks_index(self, db) -> None:
        await create_walk_indexes(db)

        keys = db["walks"].create_index.await_args.args[0]
        assert keys == [("user_id", 1), ("date", -1), ("created_at", -1)]

    @pytest.mark.asyncio
    async def test_missing_uri(self, monkeypatch) -> None:
        monkeypatch.delenv("MONGODB_URI", raising=False)

        with patch("scripts.setup_mongodb_indexes.AsyncIOMotorClient") as client_cls:
            assert await setup_all_indexes() == 1

        client_cls.assert_not_called()
