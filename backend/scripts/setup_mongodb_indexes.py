"""Setup MongoDB indexes for the walking collections.

Creates the indexes the walking repository relies on.

Collections:
- walks: WalkRecord documents
- daily_aggregates: one document per (user, date)
- streaks / profiles: keyed by user_id in _id (no extra index)

Usage:
    python scripts/setup_mongodb_indexes.py

Environment Variables:
    MONGODB_URI: MongoDB connection string (required)
    MONGODB_DATABASE: Database name (default: stepwise)
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from infrastructure.config import get_mongodb_database, get_mongodb_uri

logger = logging.getLogger(__name__)

INDEXED_COLLECTIONS = ("walks", "daily_aggregates")


async def create_walk_indexes(db: AsyncIOMotorDatabase[Dict[str, Any]]) -> None:
    """Create indexes for walks collection.

    Indexes:
    - user_id + date + created_at: history windows and per-date reads,
      most recent first
    """
    collection = db["walks"]
    logger.info("Creating indexes for 'walks' collection...")

    await collection.create_index(
        [("user_id", ASCENDING), ("date", DESCENDING), ("created_at", DESCENDING)],
        name="idx_user_date_created",
    )
    logger.info("  Created index: user_id + date + created_at")


async def create_daily_aggregate_indexes(db: AsyncIOMotorDatabase[Dict[str, Any]]) -> None:
    """Create indexes for daily_aggregates collection.

    Indexes:
    - user_id + date: unique, at most one aggregate per user and date
    """
    collection = db["daily_aggregates"]
    logger.info("Creating indexes for 'daily_aggregates' collection...")

    await collection.create_index(
        [("user_id", ASCENDING), ("date", ASCENDING)],
        name="idx_user_date_unique",
        unique=True,
    )
    logger.info("  Created unique index: user_id + date")


async def list_existing_indexes(db: AsyncIOMotorDatabase[Dict[str, Any]]) -> None:
    for coll_name in INDEXED_COLLECTIONS:
        indexes = await db[coll_name].list_indexes().to_list(length=None)

        logger.info(f"{coll_name}:")
        for idx in indexes:
            keys = ", ".join(f"{k}:{v}" for k, v in idx.get("key", {}).items())
            unique = " (unique)" if idx.get("unique", False) else ""
            logger.info(f"  {idx.get('name', 'unknown')}: [{keys}]{unique}")


async def setup_all_indexes() -> int:
    """Create every walking index.

    Returns:
        Process exit code (0 success, 1 failure)
    """
    uri = get_mongodb_uri()
    if not uri:
        logger.error("MONGODB_URI not configured")
        return 1

    database_name = get_mongodb_database()
    logger.info(f"Connecting to MongoDB: {database_name}")

    client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
    db = client[database_name]

    try:
        await client.admin.command("ping")
        await create_walk_indexes(db)
        await create_daily_aggregate_indexes(db)
        await list_existing_indexes(db)
    except PyMongoError as e:
        logger.error(f"Error setting up indexes: {e}")
        return 1
    finally:
        client.close()

    logger.info("All indexes created")
    return 0


def main() -> None:
    env_path = Path(__file__).parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        sys.exit(asyncio.run(setup_all_indexes()))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
