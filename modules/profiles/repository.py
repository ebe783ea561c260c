"""
Profile repository for database access.

Encapsulates all MongoDB queries on the `profiles` collection,
including the nested experience and education lists.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pymongo import ReturnDocument

from shared.repository import BaseRepository, require_object_id, to_object_id
from .models import Education, Experience, Profile, ProfileOwner, SocialLinks

EXPERIENCE = "experience"
EDUCATION = "education"


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for profile data access.

    Profiles are keyed by their owner's user id (unique index on `user`).
    Nested entries are added and removed with single atomic updates.

    Note: The returned owner only carries the user id. The service
    layer fills in name and avatar.
    """

    collection_name = "profiles"

    async def ensure_indexes(self) -> None:
        await self._collection.create_index("user", unique=True)

    async def get_by_user(self, user_id: str) -> Optional[Profile]:
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        doc = await self._collection.find_one({"user": object_id})
        return self._map_to_profile(doc) if doc else None

    async def get_by_handle(self, handle: str) -> Optional[Profile]:
        doc = await self._collection.find_one({"handle": handle})
        return self._map_to_profile(doc) if doc else None

    async def list_all(self) -> list[Profile]:
        docs = await self._collection.find().to_list(length=None)
        return [self._map_to_profile(d) for d in docs]

    async def upsert(self, user_id: str, fields: dict[str, Any]) -> Profile:
        """
        Write the given fields to the user's profile, creating it if needed.

        Args:
            user_id: Owner's user id.
            fields: `$set` paths and values, e.g. {"status": ..., "social.twitter": ...}.
        """
        object_id = require_object_id(user_id, "user id")

        update: dict[str, Any] = {
            "$setOnInsert": {
                "experience": [],
                "education": [],
                "created_at": datetime.now(timezone.utc),
            },
        }
        if fields:
            update["$set"] = fields

        doc = await self._collection.find_one_and_update(
            {"user": object_id},
            update,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return self._map_to_profile(doc)

    async def delete_by_user(self, user_id: str) -> bool:
        object_id = to_object_id(user_id)
        if object_id is None:
            return False
        result = await self._collection.delete_one({"user": object_id})
        return result.deleted_count > 0

    async def push_entry(
        self,
        user_id: str,
        field: str,
        entry: dict[str, Any],
    ) -> Optional[Profile]:
        """
        Insert an entry at the head of a nested list.

        Returns the updated profile, or None if the user has no profile.
        """
        object_id = to_object_id(user_id)
        if object_id is None:
            return None

        doc = await self._collection.find_one_and_update(
            {"user": object_id},
            {"$push": {field: {"$each": [{"_id": ObjectId(), **entry}], "$position": 0}}},
            return_document=ReturnDocument.AFTER,
        )
        return self._map_to_profile(doc) if doc else None

    async def pull_entry(
        self,
        user_id: str,
        field: str,
        entry_id: str,
    ) -> Optional[Profile]:
        """
        Remove an entry from a nested list by id.

        Returns the updated profile, or None if the profile or the entry
        doesn't exist.
        """
        object_id = to_object_id(user_id)
        entry_object_id = to_object_id(entry_id)
        if object_id is None or entry_object_id is None:
            return None

        doc = await self._collection.find_one_and_update(
            {"user": object_id, f"{field}._id": entry_object_id},
            {"$pull": {field: {"_id": entry_object_id}}},
            return_document=ReturnDocument.AFTER,
        )
        return self._map_to_profile(doc) if doc else None

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_profile(self, doc: dict[str, Any]) -> Profile:
        return Profile(
            id=str(doc["_id"]),
            user=ProfileOwner(id=str(doc["user"])),
            handle=doc.get("handle"),
            company=doc.get("company"),
            website=doc.get("website"),
            location=doc.get("location"),
            bio=doc.get("bio"),
            status=doc.get("status"),
            githubusername=doc.get("githubusername"),
            skills=doc.get("skills", []),
            social=SocialLinks(**doc.get("social", {})),
            experience=[Experience(**self._map_entry(e)) for e in doc.get(EXPERIENCE, [])],
            education=[Education(**self._map_entry(e)) for e in doc.get(EDUCATION, [])],
            created_at=doc["created_at"],
        )

    def _map_entry(self, entry: dict[str, Any]) -> dict[str, Any]:
        data = {k: v for k, v in entry.items() if k != "_id"}
        data["id"] = str(entry["_id"])
        return data
