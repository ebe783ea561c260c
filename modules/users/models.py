"""
Users module data models.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator


class User(BaseModel):
    """Public view of a user. Never carries the password hash."""

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    avatar: str = Field(..., description="Avatar URL")
    created_at: datetime = Field(..., description="Registration time")


class UserRecord(User):
    """Stored user, including the password hash. Internal to the module."""

    password_hash: str

    def to_public(self) -> User:
        return User(**self.model_dump(exclude={"password_hash"}))


class RegisterRequest(BaseModel):
    """Request to register a new user."""

    name: str = Field(..., min_length=1, description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(
        ...,
        min_length=6,
        description="Password (at least 6 characters)",
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v


class LoginRequest(BaseModel):
    """Request to exchange credentials for a token."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Password")
