"""MongoDB implementation of IWalkingRepository.

Collections:
  - walks: one document per WalkRecord, _id = walk UUID
  - daily_aggregates: _id = "{user_id}_{YYYY-MM-DD}"
  - streaks: _id = user_id
  - profiles: _id = user_id

Dates are stored as ISO strings (YYYY-MM-DD) so range filters and sorts
work lexicographically.
"""

import logging
from datetime import date as DateType
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

from domain.walking.core.entities import (
    DailyAggregate,
    HeartRateSummary,
    StreakState,
    UserProfile,
    WalkRecord,
)
from domain.walking.core.ports.repository import IWalkingRepository
from infrastructure.persistence.mongodb.base import MongoBaseRepository

logger = logging.getLogger(__name__)


class MongoWalkingRepository(MongoBaseRepository, IWalkingRepository):
    """MongoDB implementation for the walking domain."""

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        super().__init__(client)
        logger.info(
            "MongoWalkingRepository initialized with collections: "
            "walks, daily_aggregates, streaks, profiles"
        )

    @property
    def collection_name(self) -> str:
        """Primary collection for WalkRecord documents."""
        return "walks"

    @property
    def aggregates_collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        return self._db["daily_aggregates"]

    @property
    def streaks_collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        return self._db["streaks"]

    @property
    def profiles_collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        return self._db["profiles"]

    # ========================================================================
    # Document Mapping
    # ========================================================================

    def walk_to_document(self, walk: WalkRecord) -> Dict[str, Any]:
        """Convert WalkRecord to MongoDB document.

        Schema:
            {
                "_id": "3f2c...",
                "user_id": "user123",
                "date": "2025-03-01",
                "steps": 4200,
                "duration_minutes": 35,
                "distance_meters": 3200.4,
                "heart_rate": {"average_bpm": 98, "max_bpm": 131},
                "auto_detected": false,
                "created_at": "2025-03-01T08:15:00+00:00"
            }
        """
        doc: Dict[str, Any] = {
            "_id": self.uuid_to_str(walk.id),
            "user_id": walk.user_id,
            "date": self.date_to_str(walk.date),
            "steps": walk.steps,
            "auto_detected": walk.auto_detected,
            "created_at": self.datetime_to_iso(walk.created_at),
        }

        # Optional fields
        if walk.duration_minutes is not None:
            doc["duration_minutes"] = walk.duration_minutes
        if walk.distance_meters is not None:
            doc["distance_meters"] = walk.distance_meters
        if walk.heart_rate is not None:
            doc["heart_rate"] = {
                "average_bpm": walk.heart_rate.average_bpm,
                "max_bpm": walk.heart_rate.max_bpm,
            }

        return doc

    def document_to_walk(self, doc: Dict[str, Any]) -> WalkRecord:
        heart_rate = doc.get("heart_rate")
        return WalkRecord(
            id=self.str_to_uuid(doc["_id"]),
            user_id=doc["user_id"],
            date=self.str_to_date(doc["date"]),
            steps=doc["steps"],
            duration_minutes=doc.get("duration_minutes"),
            distance_meters=doc.get("distance_meters"),
            heart_rate=(
                HeartRateSummary(
                    average_bpm=heart_rate.get("average_bpm"),
                    max_bpm=heart_rate.get("max_bpm"),
                )
                if heart_rate
                else None
            ),
            auto_detected=doc.get("auto_detected", False),
            created_at=self.iso_to_datetime(doc["created_at"]),
        )

    def aggregate_to_document(self, aggregate: DailyAggregate) -> Dict[str, Any]:
        day = self.date_to_str(aggregate.date)
        return {
            "_id": f"{aggregate.user_id}_{day}",
            "user_id": aggregate.user_id,
            "date": day,
            "total_steps": aggregate.total_steps,
            "goal_met": aggregate.goal_met,
            "updated_at": self.datetime_to_iso(
                aggregate.updated_at or datetime.now(timezone.utc)
            ),
        }

    def document_to_aggregate(self, doc: Dict[str, Any]) -> DailyAggregate:
        updated_at = doc.get("updated_at")
        return DailyAggregate(
            user_id=doc["user_id"],
            date=self.str_to_date(doc["date"]),
            total_steps=doc["total_steps"],
            goal_met=doc["goal_met"],
            updated_at=self.iso_to_datetime(updated_at) if updated_at else None,
        )

    def streak_to_document(self, streak: StreakState) -> Dict[str, Any]:
        return {
            "_id": streak.user_id,
            "user_id": streak.user_id,
            "current_streak": streak.current_streak,
            "longest_streak": streak.longest_streak,
            "last_activity_date": (
                self.date_to_str(streak.last_activity_date)
                if streak.last_activity_date
                else None
            ),
            "updated_at": self.datetime_to_iso(streak.updated_at or datetime.now(timezone.utc)),
        }

    def document_to_streak(self, doc: Dict[str, Any]) -> StreakState:
        last_activity = doc.get("last_activity_date")
        updated_at = doc.get("updated_at")
        return StreakState(
            user_id=doc["user_id"],
            current_streak=doc.get("current_streak", 0),
            longest_streak=doc.get("longest_streak", 0),
            last_activity_date=self.str_to_date(last_activity) if last_activity else None,
            updated_at=self.iso_to_datetime(updated_at) if updated_at else None,
        )

    # ========================================================================
    # Walks
    # ========================================================================

    async def save_walk(self, walk: WalkRecord) -> None:
        doc = self.walk_to_document(walk)
        await self._replace_one({"_id": doc["_id"]}, doc)
        logger.debug(f"Saved walk {walk.id} for user {walk.user_id}")

    async def get_walk(self, walk_id: UUID, user_id: str) -> Optional[WalkRecord]:
        doc = await self._find_one({"_id": self.uuid_to_str(walk_id), "user_id": user_id})
        return self.document_to_walk(doc) if doc else None

    async def get_walks(self, walk_ids: Sequence[UUID], user_id: str) -> List[WalkRecord]:
        ids = [self.uuid_to_str(walk_id) for walk_id in dict.fromkeys(walk_ids)]
        docs = await self._find_many({"_id": {"$in": ids}, "user_id": user_id})
        return [self.document_to_walk(doc) for doc in docs]

    def _walk_range_filter(
        self, user_id: str, start_date: DateType, end_date: DateType
    ) -> Dict[str, Any]:
        return {
            "user_id": user_id,
            "date": {
                "$gte": self.date_to_str(start_date),
                "$lte": self.date_to_str(end_date),
            },
        }

    async def list_walks(
        self, user_id: str, start_date: DateType, end_date: DateType
    ) -> List[WalkRecord]:
        docs = await self._find_many(
            self._walk_range_filter(user_id, start_date, end_date),
            sort=[("date", DESCENDING), ("created_at", DESCENDING)],
        )
        return [self.document_to_walk(doc) for doc in docs]

    async def list_walks_page(
        self,
        user_id: str,
        start_date: DateType,
        end_date: DateType,
        offset: int,
        limit: int,
    ) -> Tuple[List[WalkRecord], int]:
        filter_dict = self._walk_range_filter(user_id, start_date, end_date)
        docs = await self._find_many(
            filter_dict,
            sort=[("date", DESCENDING), ("created_at", DESCENDING)],
            skip=offset,
            limit=limit,
        )
        total = await self._count(filter_dict)
        return [self.document_to_walk(doc) for doc in docs], total

    async def list_walks_for_date(self, user_id: str, date: DateType) -> List[WalkRecord]:
        return await self.list_walks(user_id, date, date)

    async def list_all_walks(self, user_id: str) -> List[WalkRecord]:
        docs = await self._find_many(
            {"user_id": user_id},
            sort=[("date", DESCENDING), ("created_at", DESCENDING)],
        )
        return [self.document_to_walk(doc) for doc in docs]

    async def delete_walks(self, walk_ids: Sequence[UUID], user_id: str) -> int:
        ids = [self.uuid_to_str(walk_id) for walk_id in dict.fromkeys(walk_ids)]
        deleted = await self._delete_many({"_id": {"$in": ids}, "user_id": user_id})
        logger.info(
            "Deleted walks",
            extra={"user_id": user_id, "requested": len(ids), "deleted": deleted},
        )
        return deleted

    # ========================================================================
    # Daily aggregates
    # ========================================================================

    async def get_daily_aggregate(
        self, user_id: str, date: DateType
    ) -> Optional[DailyAggregate]:
        doc = await self._find_one(
            {"user_id": user_id, "date": self.date_to_str(date)},
            collection=self.aggregates_collection,
        )
        return self.document_to_aggregate(doc) if doc else None

    async def list_daily_aggregates(
        self, user_id: str, start_date: DateType, end_date: DateType
    ) -> List[DailyAggregate]:
        docs = await self._find_many(
            {
                "user_id": user_id,
                "date": {
                    "$gte": self.date_to_str(start_date),
                    "$lte": self.date_to_str(end_date),
                },
            },
            sort=[("date", ASCENDING)],
            collection=self.aggregates_collection,
        )
        return [self.document_to_aggregate(doc) for doc in docs]

    async def list_all_daily_aggregates(self, user_id: str) -> List[DailyAggregate]:
        docs = await self._find_many(
            {"user_id": user_id},
            sort=[("date", ASCENDING)],
            collection=self.aggregates_collection,
        )
        return [self.document_to_aggregate(doc) for doc in docs]

    async def upsert_daily_aggregate(self, aggregate: DailyAggregate) -> None:
        doc = self.aggregate_to_document(aggregate)
        doc["updated_at"] = self.datetime_to_iso(datetime.now(timezone.utc))
        await self._replace_one(
            {"_id": doc["_id"]}, doc, collection=self.aggregates_collection
        )

    async def delete_daily_aggregate(self, user_id: str, date: DateType) -> bool:
        deleted = await self._delete_one(
            {"user_id": user_id, "date": self.date_to_str(date)},
            collection=self.aggregates_collection,
        )
        return deleted > 0

    # ========================================================================
    # Streak
    # ========================================================================

    async def get_streak(self, user_id: str) -> Optional[StreakState]:
        doc = await self._find_one({"_id": user_id}, collection=self.streaks_collection)
        return self.document_to_streak(doc) if doc else None

    async def save_streak(self, streak: StreakState) -> None:
        doc = self.streak_to_document(streak)
        doc["updated_at"] = self.datetime_to_iso(datetime.now(timezone.utc))
        await self._replace_one({"_id": doc["_id"]}, doc, collection=self.streaks_collection)

    async def reset_streak(self, user_id: str) -> StreakState:
        existing = await self.get_streak(user_id) or StreakState(user_id=user_id)
        reset = existing.reset()
        await self.save_streak(reset)
        return reset

    # ========================================================================
    # Profiles
    # ========================================================================

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        doc = await self._find_one({"_id": user_id}, collection=self.profiles_collection)
        if doc is None:
            return None
        return UserProfile(user_id=doc["_id"], daily_step_goal=doc.get("daily_step_goal"))

    async def save_profile(self, profile: UserProfile) -> None:
        await self._replace_one(
            {"_id": profile.user_id},
            {"_id": profile.user_id, "daily_step_goal": profile.daily_step_goal},
            collection=self.profiles_collection,
        )

    async def list_user_ids(self) -> List[str]:
        profile_ids = await self._distinct("_id", collection=self.profiles_collection)
        walk_user_ids = await self._distinct("user_id")
        aggregate_user_ids = await self._distinct(
            "user_id", collection=self.aggregates_collection
        )
        return sorted(set(profile_ids) | set(walk_user_ids) | set(aggregate_user_ids))
