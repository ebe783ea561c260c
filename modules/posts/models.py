"""
Posts module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Like(BaseModel):
    """A like on a post."""

    user: str = Field(..., description="ID of the user who liked the post")


class Comment(BaseModel):
    """A comment on a post. Name and avatar are snapshots taken when it was written."""

    id: str
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    created_at: datetime


class Post(BaseModel):
    """
    A post.

    `name` and `avatar` are snapshots of the author taken at creation,
    so they don't change if the author later edits their account.
    """

    id: str
    user: str = Field(..., description="Author's user ID")
    text: str
    name: str
    avatar: Optional[str] = None
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime


class TextRequest(BaseModel):
    """Request body carrying post or comment text."""

    text: str = Field(..., description="Text")

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text is required")
        return v


class CreatePostRequest(TextRequest):
    """Request to create a post."""


class CreateCommentRequest(TextRequest):
    """Request to comment on a post."""
