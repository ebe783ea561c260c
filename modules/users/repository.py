"""
User repository for database access.

Encapsulates all MongoDB queries on the `users` collection.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pymongo.errors import DuplicateKeyError

from shared.repository import BaseRepository, to_object_id
from .models import UserRecord
from .exceptions import UserAlreadyExistsError


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    Email uniqueness is enforced by a unique index, so a duplicate that
    slips past the service's existence check still fails here.
    """

    collection_name = "users"

    async def ensure_indexes(self) -> None:
        await self._collection.create_index("email", unique=True)

    async def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        doc = await self._collection.find_one({"_id": object_id})
        return self._map_to_user(doc) if doc else None

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        doc = await self._collection.find_one({"email": email})
        return self._map_to_user(doc) if doc else None

    async def get_many(self, user_ids: list[str]) -> list[UserRecord]:
        object_ids = [oid for oid in map(to_object_id, user_ids) if oid is not None]
        if not object_ids:
            return []
        docs = await self._collection.find({"_id": {"$in": object_ids}}).to_list(length=None)
        return [self._map_to_user(d) for d in docs]

    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        avatar: str,
    ) -> UserRecord:
        """
        Insert a new user.

        Raises:
            UserAlreadyExistsError: If the email is already taken
        """
        doc: dict[str, Any] = {
            "name": name,
            "email": email,
            "password": password_hash,
            "avatar": avatar,
            "created_at": datetime.now(timezone.utc),
        }
        try:
            result = await self._collection.insert_one(doc)
        except DuplicateKeyError:
            raise UserAlreadyExistsError(email)

        doc["_id"] = result.inserted_id
        return self._map_to_user(doc)

    async def delete(self, user_id: str) -> bool:
        object_id = to_object_id(user_id)
        if object_id is None:
            return False
        result = await self._collection.delete_one({"_id": object_id})
        return result.deleted_count > 0

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_user(self, doc: dict[str, Any]) -> UserRecord:
        return UserRecord(
            id=str(doc["_id"]),
            name=doc["name"],
            email=doc["email"],
            avatar=doc.get("avatar", ""),
            password_hash=doc["password"],
            created_at=doc["created_at"],
        )
