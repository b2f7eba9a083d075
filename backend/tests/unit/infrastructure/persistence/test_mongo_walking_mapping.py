"""Unit tests for MongoWalkingRepository document mapping and error wrapping.

Uses a mocked motor client: no MongoDB server required.
"""

from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from pymongo.errors import PyMongoError

from domain.walking.core.entities import (
    DailyAggregate,
    HeartRateSummary,
    StreakState,
    WalkRecord,
)
from domain.walking.core.exceptions import StoreFailureError
from infrastructure.persistence.mongodb.walking_repository import MongoWalkingRepository


@pytest.fixture
def collection() -> MagicMock:
    return MagicMock()


@pytest.fixture
def repository(collection: MagicMock) -> MongoWalkingRepository:
    client = MagicMock()
    client.__getitem__.return_value.__getitem__.return_value = collection
    return MongoWalkingRepository(client=client)


class TestDocumentMapping:
    def test_walk_round_trip(self, repository) -> None:
        walk = WalkRecord(
            id=uuid4(),
            user_id="user123",
            date=date(2025, 3, 1),
            steps=4200,
            duration_minutes=35,
            distance_meters=3200.4,
            heart_rate=HeartRateSummary(average_bpm=98, max_bpm=131),
            auto_detected=True,
            created_at=datetime(2025, 3, 1, 8, 15, tzinfo=timezone.utc),
        )

        doc = repository.walk_to_document(walk)

        assert doc["_id"] == str(walk.id)
        assert doc["date"] == "2025-03-01"
        assert doc["heart_rate"] == {"average_bpm": 98, "max_bpm": 131}
        assert repository.document_to_walk(doc) == walk

    def test_walk_optional_fields_omitted(self, repository) -> None:
        walk = WalkRecord.create(user_id="user123", date=date(2025, 3, 1), steps=10)

        doc = repository.walk_to_document(walk)

        assert "duration_minutes" not in doc
        assert "heart_rate" not in doc
        assert repository.document_to_walk(doc).heart_rate is None

    def test_aggregate_document_id(self, repository) -> None:
        aggregate = DailyAggregate(
            user_id="user123", date=date(2025, 3, 1), total_steps=8000, goal_met=True
        )

        doc = repository.aggregate_to_document(aggregate)

        assert doc["_id"] == "user123_2025-03-01"
        restored = repository.document_to_aggregate(doc)
        assert (restored.date, restored.total_steps, restored.goal_met) == (
            date(2025, 3, 1),
            8000,
            True,
        )

    def test_reset_streak_document(self, repository) -> None:
        doc = repository.streak_to_document(
            StreakState(user_id="user123", current_streak=0, longest_streak=4)
        )

        assert doc["last_activity_date"] is None
        restored = repository.document_to_streak(doc)
        assert restored.longest_streak == 4
        assert restored.last_activity_date is None


class TestQueries:
    @pytest.mark.asyncio
    async def test_list_walks_filters_by_iso_range(self, repository, collection) -> None:
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.to_list = AsyncMock(return_value=[])
        collection.find.return_value = cursor

        await repository.list_walks("user123", date(2025, 3, 2), date(2025, 3, 8))

        collection.find.assert_called_once_with(
            {"user_id": "user123", "date": {"$gte": "2025-03-02", "$lte": "2025-03-08"}}
        )
        cursor.to_list.assert_awaited_once_with(length=None)

    @pytest.mark.asyncio
    async def test_list_walks_page_skips_limits_and_counts(
        self, repository, collection
    ) -> None:
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.skip.return_value = cursor
        cursor.limit.return_value = cursor
        cursor.to_list = AsyncMock(return_value=[])
        collection.find.return_value = cursor
        collection.count_documents = AsyncMock(return_value=45)

        walks, total = await repository.list_walks_page(
            "user123", date(2025, 1, 1), date(2025, 12, 31), offset=20, limit=20
        )

        assert walks == []
        assert total == 45
        cursor.skip.assert_called_once_with(20)
        cursor.limit.assert_called_once_with(20)
        cursor.to_list.assert_awaited_once_with(length=20)
        collection.count_documents.assert_awaited_once_with(
            {"user_id": "user123", "date": {"$gte": "2025-01-01", "$lte": "2025-12-31"}}
        )

    @pytest.mark.asyncio
    async def test_delete_walks_scoped_to_user(self, repository, collection) -> None:
        walk_id = uuid4()
        collection.delete_many = AsyncMock(return_value=MagicMock(deleted_count=1))

        deleted = await repository.delete_walks([walk_id, walk_id], "user123")

        assert deleted == 1
        collection.delete_many.assert_awaited_once_with(
            {"_id": {"$in": [str(walk_id)]}, "user_id": "user123"}
        )

    @pytest.mark.asyncio
    async def test_driver_error_becomes_store_failure(self, repository, collection) -> None:
        collection.find_one = AsyncMock(side_effect=PyMongoError("connection reset"))

        with pytest.raises(StoreFailureError) as exc_info:
            await repository.get_streak("user123")

        assert exc_info.value.operation == "find_one"
        assert isinstance(exc_info.value.__cause__, PyMongoError)
