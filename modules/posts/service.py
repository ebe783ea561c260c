"""
Post service implementation.

Posts, likes and comments. Author name/avatar are copied from the
user directory when a post or comment is written.
"""

import logging

from modules.users.interfaces import IUserService
from shared.models import AuthenticatedUser

from .interfaces import IPostService
from .models import Comment, Like, Post
from .repository import PostRepository
from .exceptions import (
    CommentNotFoundError,
    PostAccessDeniedError,
    PostAlreadyLikedError,
    PostNotFoundError,
    PostNotLikedError,
)

logger = logging.getLogger(__name__)


class PostService(IPostService):
    """
    Post service backed by the posts collection.

    Implements IPostService protocol with real database operations.
    """

    def __init__(self, repository: PostRepository, users: IUserService):
        self._repository = repository
        self._users = users

    async def create(self, user: AuthenticatedUser, text: str) -> Post:
        author = await self._users.get_user(user.id)
        return await self._repository.create(
            user_id=user.id,
            text=text,
            name=author.name,
            avatar=author.avatar,
        )

    async def list_all(self) -> list[Post]:
        return await self._repository.list_all()

    async def get_post(self, post_id: str) -> Post:
        post = await self._repository.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def delete(self, post_id: str, user: AuthenticatedUser) -> None:
        post = await self.get_post(post_id)

        # Check ownership
        if post.user != user.id:
            raise PostAccessDeniedError(post_id, user.id)

        await self._repository.delete(post_id)
        logger.info(f"User {user.id} deleted post {post_id}")

    async def like(self, post_id: str, user: AuthenticatedUser) -> list[Like]:
        post = await self.get_post(post_id)
        if any(like.user == user.id for like in post.likes):
            raise PostAlreadyLikedError(post_id, user.id)

        likes = await self._repository.add_like(post_id, user.id)
        if likes is None:
            # Lost a race with another like from the same user, or the post vanished
            await self.get_post(post_id)
            raise PostAlreadyLikedError(post_id, user.id)
        return likes

    async def unlike(self, post_id: str, user: AuthenticatedUser) -> list[Like]:
        await self.get_post(post_id)

        likes = await self._repository.remove_like(post_id, user.id)
        if likes is None:
            raise PostNotLikedError(post_id, user.id)
        return likes

    async def add_comment(self, post_id: str, user: AuthenticatedUser, text: str) -> list[Comment]:
        await self.get_post(post_id)
        author = await self._users.get_user(user.id)

        comments = await self._repository.add_comment(
            post_id,
            user_id=user.id,
            text=text,
            name=author.name,
            avatar=author.avatar,
        )
        if comments is None:
            raise PostNotFoundError(post_id)
        return comments

    async def remove_comment(self, post_id: str, comment_id: str) -> list[Comment]:
        await self.get_post(post_id)

        comments = await self._repository.remove_comment(post_id, comment_id)
        if comments is None:
            raise CommentNotFoundError(post_id, comment_id)
        return comments
