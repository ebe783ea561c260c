"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
MongoDB collection access and shared utilities for id handling.
"""

from typing import Generic, Optional, TypeVar

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from .exceptions import ValidationError


T = TypeVar("T")


def to_object_id(value: str) -> Optional[ObjectId]:
    """
    Convert an id string to an ObjectId.

    Returns None for malformed ids so callers can treat them exactly
    like ids that don't exist.
    """
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def require_object_id(value: str, label: str = "id") -> ObjectId:
    """
    Convert an id string that is about to be written to an ObjectId.

    Raises:
        ValidationError: If the id is malformed
    """
    object_id = to_object_id(value)
    if object_id is None:
        raise ValidationError(
            f"Invalid {label}: {value}",
            code="INVALID_ID",
            details={label.replace(" ", "_"): value},
        )
    return object_id


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Database access via self._db
    - Collection access via self._collection (from collection_name)
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle document-to-Pydantic model mapping internally.

    Example:
        class PostRepository(BaseRepository[Post]):
            collection_name = "posts"

            async def get_by_id(self, post_id: str) -> Optional[Post]:
                doc = await self._collection.find_one({"_id": to_object_id(post_id)})
                return self._map_to_post(doc) if doc else None
    """

    collection_name: str = ""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        """
        Initialize the repository with a database handle.

        Args:
            db: motor database instance for database operations.
        """
        self._db = db

    @property
    def _collection(self) -> AsyncIOMotorCollection:
        return self._db[self.collection_name]

    async def ensure_indexes(self) -> None:
        """Create the indexes this collection relies on. No-op by default."""
        return None
