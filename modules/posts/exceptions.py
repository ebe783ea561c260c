"""
Posts module exceptions.
"""

from shared.exceptions import AuthorizationError, ConflictError, NotFoundError


class PostNotFoundError(NotFoundError):
    """Raised when a post is not found."""

    def __init__(self, post_id: str):
        super().__init__(
            "Post not found",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )


class PostAccessDeniedError(AuthorizationError):
    """Raised when a user tries to delete a post they don't own."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(
            "User not authorized",
            code="POST_ACCESS_DENIED",
            details={"post_id": post_id, "user_id": user_id},
        )


class PostAlreadyLikedError(ConflictError):
    """Raised when a user likes a post twice."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(
            "Post already liked",
            code="POST_ALREADY_LIKED",
            details={"post_id": post_id, "user_id": user_id},
        )


class PostNotLikedError(NotFoundError):
    """Raised when a user unlikes a post they haven't liked."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(
            "Post has not yet been liked",
            code="POST_NOT_LIKED",
            details={"post_id": post_id, "user_id": user_id},
        )


class CommentNotFoundError(NotFoundError):
    """Raised when a comment isn't on the post."""

    def __init__(self, post_id: str, comment_id: str):
        super().__init__(
            "Comment does not exist",
            code="COMMENT_NOT_FOUND",
            details={"post_id": post_id, "comment_id": comment_id},
        )
