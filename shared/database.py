"""
Database client factory for MongoDB.

Provides a process-wide motor client and the application database handle.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_client: Optional[AsyncIOMotorClient] = None


def get_mongo_client() -> AsyncIOMotorClient:
    """
    Get the cached MongoDB client.

    The client is created lazily from MONGODB_URL on first use.
    Motor connects in the background, so this never blocks.
    """
    global _client

    if _client is None:
        settings = get_settings()
        if not settings.mongodb_url:
            raise RuntimeError(
                "MongoDB configuration missing. Set the MONGODB_URL environment variable."
            )
        _client = AsyncIOMotorClient(settings.mongodb_url, tz_aware=True)

    return _client


def get_database() -> AsyncIOMotorDatabase:
    """Get the application database handle."""
    settings = get_settings()
    return get_mongo_client()[settings.mongodb_db_name]


async def ping_database(db: AsyncIOMotorDatabase) -> bool:
    """Return True if the server answers a ping."""
    try:
        await db.command("ping")
        return True
    except Exception as e:
        logger.warning(f"MongoDB ping failed: {e}")
        return False


def reset_client_cache() -> None:
    """
    Close and forget the cached client.

    Useful for testing or when configuration changes.
    """
    global _client
    if _client is not None:
        _client.close()
    _client = None
