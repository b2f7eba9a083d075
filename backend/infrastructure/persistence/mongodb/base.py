"""Base MongoDB repository with reusable patterns.

Provides common functionality for MongoDB repositories:
- Connection management
- Document mapping helpers (UUID, dates, datetimes)
- Error handling (driver errors surface as StoreFailureError)
- Logging

Concrete repositories inherit from MongoBaseRepository and may address
several collections through the `collection` argument of the helpers.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date as DateType
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from domain.walking.core.exceptions import StoreFailureError
from infrastructure.config import get_mongodb_database, get_mongodb_uri

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC):
    """
    Abstract base class for MongoDB repositories.

    Provides common functionality:
    - Connection pooling (motor handles this automatically)
    - Error handling with proper logging
    - UUID ↔ string and date ↔ ISO string conversion

    Subclasses must implement:
    - collection_name: Name of the primary MongoDB collection
    """

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
        else:
            self._client = client

        database_name = get_mongodb_database()
        self._db = self._client[database_name]
        self._collection = self._db[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} " f"for collection '{self.collection_name}'"
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Primary MongoDB collection name."""
        pass

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        """Get primary MongoDB collection handle."""
        return self._collection

    def _resolve(
        self, collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]]
    ) -> AsyncIOMotorCollection[Dict[str, Any]]:
        return self._collection if collection is None else collection

    @staticmethod
    def uuid_to_str(uuid_value: UUID) -> str:
        """Convert UUID to string for MongoDB storage."""
        return str(uuid_value)

    @staticmethod
    def str_to_uuid(str_value: str) -> UUID:
        """Convert string to UUID from MongoDB document."""
        return UUID(str_value)

    @staticmethod
    def date_to_str(value: DateType) -> str:
        """Convert calendar date to YYYY-MM-DD (sorts lexicographically)."""
        return value.isoformat()

    @staticmethod
    def str_to_date(value: str) -> DateType:
        return DateType.fromisoformat(value)

    @staticmethod
    def datetime_to_iso(dt: datetime) -> str:
        """
        Convert datetime to ISO string for MongoDB storage.

        Args:
            dt: Timezone-aware datetime

        Returns:
            ISO 8601 string
        """
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return dt.isoformat()

    @staticmethod
    def iso_to_datetime(iso_str: str) -> datetime:
        """
        Convert ISO string to timezone-aware datetime.

        Naive values are assumed to be UTC.
        """
        dt = datetime.fromisoformat(iso_str)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    def _failure(self, operation: str, filter_dict: Any, error: Exception) -> StoreFailureError:
        logger.error(
            f"Error in {operation}: filter={filter_dict}, error={error}",
            extra={"operation": operation, "repository": self.__class__.__name__},
        )
        return StoreFailureError(operation, str(error))

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Raises:
            StoreFailureError: If MongoDB operation fails (logged)
        """
        try:
            return await self._resolve(collection).find_one(filter_dict)
        except PyMongoError as e:
            raise self._failure("find_one", filter_dict, e) from e

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
        skip: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find matching documents with error handling.

        Without limit the result is not capped: callers rely on complete reads.

        Args:
            filter_dict: MongoDB filter
            sort: Sort specification [(field, direction), ...]
            collection: Target collection (default: primary)
            skip: Documents to skip
            limit: Max documents to return

        Raises:
            StoreFailureError: If MongoDB operation fails (logged)
        """
        try:
            cursor = self._resolve(collection).find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)
            return await cursor.to_list(length=limit)
        except PyMongoError as e:
            raise self._failure("find_many", filter_dict, e) from e

    async def _count(
        self,
        filter_dict: Dict[str, Any],
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
    ) -> int:
        """
        Count documents with error handling.

        Raises:
            StoreFailureError: If MongoDB operation fails (logged)
        """
        try:
            return await self._resolve(collection).count_documents(filter_dict)
        except PyMongoError as e:
            raise self._failure("count", filter_dict, e) from e

    async def _replace_one(
        self,
        filter_dict: Dict[str, Any],
        document: Dict[str, Any],
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
    ) -> None:
        """
        Insert or replace a single document with error handling.

        Raises:
            StoreFailureError: If MongoDB operation fails (logged)
        """
        try:
            await self._resolve(collection).replace_one(filter_dict, document, upsert=True)
        except PyMongoError as e:
            raise self._failure("replace_one", filter_dict, e) from e

    async def _delete_one(
        self,
        filter_dict: Dict[str, Any],
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
    ) -> int:
        """
        Delete single document with error handling.

        Returns:
            Number of documents deleted (0 or 1)
        """
        try:
            result = await self._resolve(collection).delete_one(filter_dict)
            return result.deleted_count
        except PyMongoError as e:
            raise self._failure("delete_one", filter_dict, e) from e

    async def _delete_many(
        self,
        filter_dict: Dict[str, Any],
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
    ) -> int:
        """
        Delete matching documents with error handling.

        Returns:
            Number of documents deleted
        """
        try:
            result = await self._resolve(collection).delete_many(filter_dict)
            return result.deleted_count
        except PyMongoError as e:
            raise self._failure("delete_many", filter_dict, e) from e

    async def _distinct(
        self,
        key: str,
        collection: Optional[AsyncIOMotorCollection[Dict[str, Any]]] = None,
    ) -> List[Any]:
        try:
            return await self._resolve(collection).distinct(key)
        except PyMongoError as e:
            raise self._failure("distinct", key, e) from e

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info(f"Closed connection for {self.__class__.__name__}")
