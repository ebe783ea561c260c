"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from pydantic import BaseModel, Field


class TokenIdentity(BaseModel):
    """The identity embedded in a token."""

    id: str = Field(..., min_length=1, description="User ID")


class JWTPayload(BaseModel):
    """
    Decoded identity token payload.

    Shape: {"user": {"id": "..."}, "iat": ..., "exp": ...}
    """

    user: TokenIdentity
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class TokenResponse(BaseModel):
    """Response carrying a freshly issued identity token."""

    token: str = Field(..., description="Signed identity token")
