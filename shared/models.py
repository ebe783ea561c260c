"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from the identity token and made available
    to route handlers via dependency injection. It only carries the
    user ID; anything else is looked up through the users module.
    """

    id: str = Field(..., description="User ID (ObjectId hex string)")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
