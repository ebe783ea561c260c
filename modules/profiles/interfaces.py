"""
Profiles module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    EducationRequest,
    ExperienceRequest,
    Profile,
    ProfileUpsertRequest,
)


@runtime_checkable
class IProfileService(Protocol):
    """
    Interface for profile operations.

    Every method returning a Profile fills in the owner's name and avatar.
    """

    async def get_own(self, user: AuthenticatedUser) -> Profile:
        """
        Get the caller's profile.

        Raises:
            ProfileNotFoundError: If the caller has no profile
        """
        ...

    async def upsert(self, user: AuthenticatedUser, request: ProfileUpsertRequest) -> Profile:
        """
        Create the caller's profile, or update the supplied fields of it.

        Raises:
            HandleTakenError: On creation, if the handle is in use
        """
        ...

    async def list_all(self) -> list[Profile]:
        """List every profile."""
        ...

    async def get_by_user_id(self, user_id: str) -> Profile:
        """
        Get a user's profile.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def delete_own(self, user: AuthenticatedUser) -> None:
        """Delete the caller's profile, then the caller's user record."""
        ...

    async def add_experience(self, user: AuthenticatedUser, entry: ExperienceRequest) -> Profile:
        """Add an experience entry at the top of the list."""
        ...

    async def remove_experience(self, user: AuthenticatedUser, exp_id: str) -> Profile:
        """Remove an experience entry by ID."""
        ...

    async def add_education(self, user: AuthenticatedUser, entry: EducationRequest) -> Profile:
        """Add an education entry at the top of the list."""
        ...

    async def remove_education(self, user: AuthenticatedUser, edu_id: str) -> Profile:
        """Remove an education entry by ID."""
        ...
