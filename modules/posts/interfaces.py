"""
Posts module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Comment, Like, Post


@runtime_checkable
class IPostService(Protocol):
    """
    Interface for post operations.
    """

    async def create(self, user: AuthenticatedUser, text: str) -> Post:
        """
        Create a post authored by the user.

        Raises:
            UserNotFoundError: If the author's account no longer exists
        """
        ...

    async def list_all(self) -> list[Post]:
        """List all posts, most recent first."""
        ...

    async def get_post(self, post_id: str) -> Post:
        """
        Get a post by ID.

        Raises:
            PostNotFoundError: If the post doesn't exist
        """
        ...

    async def delete(self, post_id: str, user: AuthenticatedUser) -> None:
        """
        Delete a post. Only its author may do this.

        Raises:
            PostNotFoundError: If the post doesn't exist
            PostAccessDeniedError: If the user isn't the author
        """
        ...

    async def like(self, post_id: str, user: AuthenticatedUser) -> list[Like]:
        """
        Like a post and return its likes.

        Raises:
            PostNotFoundError: If the post doesn't exist
            PostAlreadyLikedError: If the user already likes it
        """
        ...

    async def unlike(self, post_id: str, user: AuthenticatedUser) -> list[Like]:
        """
        Remove the user's like and return the remaining likes.

        Raises:
            PostNotFoundError: If the post doesn't exist
            PostNotLikedError: If the user hasn't liked it
        """
        ...

    async def add_comment(self, post_id: str, user: AuthenticatedUser, text: str) -> list[Comment]:
        """
        Comment on a post and return its comments.

        Raises:
            PostNotFoundError: If the post doesn't exist
        """
        ...

    async def remove_comment(self, post_id: str, comment_id: str) -> list[Comment]:
        """
        Remove a comment and return the remaining comments.

        Raises:
            PostNotFoundError: If the post doesn't exist
            CommentNotFoundError: If the comment isn't on the post
        """
        ...
