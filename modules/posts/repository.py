"""
Post repository for database access.

Encapsulates all MongoDB queries on the `posts` collection, including
the nested likes and comments lists.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from shared.repository import BaseRepository, require_object_id, to_object_id
from .models import Comment, Like, Post


class PostRepository(BaseRepository[Post]):
    """
    Repository for post data access.

    Like and comment changes are single conditional updates, so two
    concurrent requests can't both add a like for the same user and
    never overwrite each other's list changes.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    collection_name = "posts"

    async def ensure_indexes(self) -> None:
        await self._collection.create_index([("created_at", DESCENDING)])

    async def create(
        self,
        user_id: str,
        text: str,
        name: str,
        avatar: Optional[str],
    ) -> Post:
        doc: dict[str, Any] = {
            "user": require_object_id(user_id, "user id"),
            "text": text,
            "name": name,
            "avatar": avatar,
            "likes": [],
            "comments": [],
            "created_at": datetime.now(timezone.utc),
        }
        result = await self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._map_to_post(doc)

    async def list_all(self) -> list[Post]:
        docs = await self._collection.find().sort("created_at", DESCENDING).to_list(length=None)
        return [self._map_to_post(d) for d in docs]

    async def get_by_id(self, post_id: str) -> Optional[Post]:
        object_id = to_object_id(post_id)
        if object_id is None:
            return None
        doc = await self._collection.find_one({"_id": object_id})
        return self._map_to_post(doc) if doc else None

    async def delete(self, post_id: str) -> bool:
        object_id = to_object_id(post_id)
        if object_id is None:
            return False
        result = await self._collection.delete_one({"_id": object_id})
        return result.deleted_count > 0

    async def add_like(self, post_id: str, user_id: str) -> Optional[list[Like]]:
        """
        Add a like at the head of the list unless the user already likes the post.

        Returns the updated likes, or None if nothing was changed.
        """
        user_object_id = require_object_id(user_id, "user id")
        return await self._update_list(
            post_id,
            {"likes.user": {"$ne": user_object_id}},
            {"$push": {"likes": {"$each": [{"user": user_object_id}], "$position": 0}}},
            "likes",
        )

    async def remove_like(self, post_id: str, user_id: str) -> Optional[list[Like]]:
        """
        Remove the user's like.

        Returns the updated likes, or None if the user didn't like the post.
        """
        user_object_id = require_object_id(user_id, "user id")
        return await self._update_list(
            post_id,
            {"likes.user": user_object_id},
            {"$pull": {"likes": {"user": user_object_id}}},
            "likes",
        )

    async def add_comment(
        self,
        post_id: str,
        user_id: str,
        text: str,
        name: Optional[str],
        avatar: Optional[str],
    ) -> Optional[list[Comment]]:
        """Add a comment at the head of the list. None if the post doesn't exist."""
        comment = {
            "_id": ObjectId(),
            "user": require_object_id(user_id, "user id"),
            "text": text,
            "name": name,
            "avatar": avatar,
            "created_at": datetime.now(timezone.utc),
        }
        return await self._update_list(
            post_id,
            {},
            {"$push": {"comments": {"$each": [comment], "$position": 0}}},
            "comments",
        )

    async def remove_comment(self, post_id: str, comment_id: str) -> Optional[list[Comment]]:
        """Remove a comment by id. None if the post or the comment doesn't exist."""
        comment_object_id = to_object_id(comment_id)
        if comment_object_id is None:
            return None
        return await self._update_list(
            post_id,
            {"comments._id": comment_object_id},
            {"$pull": {"comments": {"_id": comment_object_id}}},
            "comments",
        )

    async def _update_list(
        self,
        post_id: str,
        condition: dict[str, Any],
        update: dict[str, Any],
        field: str,
    ) -> Optional[list[Any]]:
        object_id = to_object_id(post_id)
        if object_id is None:
            return None

        doc = await self._collection.find_one_and_update(
            {"_id": object_id, **condition},
            update,
            projection={field: True},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            return None
        if field == "likes":
            return [self._map_to_like(l) for l in doc.get("likes", [])]
        return [self._map_to_comment(c) for c in doc.get("comments", [])]

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_post(self, doc: dict[str, Any]) -> Post:
        return Post(
            id=str(doc["_id"]),
            user=str(doc["user"]),
            text=doc["text"],
            name=doc.get("name", ""),
            avatar=doc.get("avatar"),
            likes=[self._map_to_like(l) for l in doc.get("likes", [])],
            comments=[self._map_to_comment(c) for c in doc.get("comments", [])],
            created_at=doc["created_at"],
        )

    def _map_to_like(self, like: dict[str, Any]) -> Like:
        return Like(user=str(like["user"]))

    def _map_to_comment(self, comment: dict[str, Any]) -> Comment:
        return Comment(
            id=str(comment["_id"]),
            user=str(comment["user"]),
            text=comment["text"],
            name=comment.get("name"),
            avatar=comment.get("avatar"),
            created_at=comment["created_at"],
        )
