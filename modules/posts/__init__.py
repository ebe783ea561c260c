"""
Posts module.

Posts with likes and comments.

Public API:
- IPostService: Interface for post operations
- Post, Like, Comment: Post models
- Post exceptions
"""

from .interfaces import IPostService
from .models import Post, Like, Comment, CreatePostRequest, CreateCommentRequest
from .exceptions import (
    PostNotFoundError,
    PostAccessDeniedError,
    PostAlreadyLikedError,
    PostNotLikedError,
    CommentNotFoundError,
)

__all__ = [
    # Interface
    "IPostService",
    # Models
    "Post",
    "Like",
    "Comment",
    "CreatePostRequest",
    "CreateCommentRequest",
    # Exceptions
    "PostNotFoundError",
    "PostAccessDeniedError",
    "PostAlreadyLikedError",
    "PostNotLikedError",
    "CommentNotFoundError",
]
