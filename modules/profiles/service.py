"""
Profile service implementation.

Owns the profile business rules: sparse upserts, handle uniqueness on
creation, nested experience/education entries, and the two-step
profile + account delete.
"""

import logging
from typing import Any, Optional

from modules.users.interfaces import IUserService
from shared.models import AuthenticatedUser

from .interfaces import IProfileService
from .models import (
    PROFILE_FIELDS,
    SOCIAL_PLATFORMS,
    EducationRequest,
    ExperienceRequest,
    Profile,
    ProfileOwner,
    ProfileUpsertRequest,
)
from .repository import EDUCATION, EXPERIENCE, ProfileRepository
from .exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    HandleTakenError,
    ProfileNotFoundError,
)

logger = logging.getLogger(__name__)


def build_profile_fields(request: ProfileUpsertRequest) -> dict[str, Any]:
    """
    Collect the `$set` paths for an upsert.

    Only non-empty attributes are included. Social links become
    `social.<platform>` paths so links that weren't sent are left alone.
    """
    fields: dict[str, Any] = {}
    for name in PROFILE_FIELDS:
        value = getattr(request, name)
        if value:
            fields[name] = value

    fields["skills"] = request.skills

    for platform in SOCIAL_PLATFORMS:
        value = getattr(request, platform)
        if value:
            fields[f"social.{platform}"] = value

    return fields


class ProfileService(IProfileService):
    """
    Profile service backed by the profiles collection.

    Owner name/avatar come from the user directory at read time.
    """

    def __init__(self, repository: ProfileRepository, users: IUserService):
        self._repository = repository
        self._users = users

    async def get_own(self, user: AuthenticatedUser) -> Profile:
        return await self.get_by_user_id(user.id)

    async def upsert(self, user: AuthenticatedUser, request: ProfileUpsertRequest) -> Profile:
        existing = await self._repository.get_by_user(user.id)

        if existing is None and request.handle:
            if await self._repository.get_by_handle(request.handle) is not None:
                raise HandleTakenError(request.handle)

        profile = await self._repository.upsert(user.id, build_profile_fields(request))
        if existing is None:
            logger.info(f"Created profile for user {user.id}")
        return await self._populate_one(profile)

    async def list_all(self) -> list[Profile]:
        return await self._populate(await self._repository.list_all())

    async def get_by_user_id(self, user_id: str) -> Profile:
        profile = await self._repository.get_by_user(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return await self._populate_one(profile)

    async def delete_own(self, user: AuthenticatedUser) -> None:
        # Two independent deletes: a failure on the second leaves the first done.
        await self._repository.delete_by_user(user.id)
        await self._users.delete_user(user.id)
        logger.info(f"Deleted profile and account for user {user.id}")

    async def add_experience(self, user: AuthenticatedUser, entry: ExperienceRequest) -> Profile:
        return await self._push(user, EXPERIENCE, entry.model_dump(by_alias=True))

    async def remove_experience(self, user: AuthenticatedUser, exp_id: str) -> Profile:
        profile = await self._pull(user, EXPERIENCE, exp_id)
        if profile is None:
            raise ExperienceNotFoundError(exp_id)
        return profile

    async def add_education(self, user: AuthenticatedUser, entry: EducationRequest) -> Profile:
        return await self._push(user, EDUCATION, entry.model_dump(by_alias=True))

    async def remove_education(self, user: AuthenticatedUser, edu_id: str) -> Profile:
        profile = await self._pull(user, EDUCATION, edu_id)
        if profile is None:
            raise EducationNotFoundError(edu_id)
        return profile

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _push(self, user: AuthenticatedUser, field: str, entry: dict[str, Any]) -> Profile:
        profile = await self._repository.push_entry(user.id, field, entry)
        if profile is None:
            raise ProfileNotFoundError(user.id)
        return await self._populate_one(profile)

    async def _pull(self, user: AuthenticatedUser, field: str, entry_id: str) -> Optional[Profile]:
        """Remove an entry; None means the profile exists but the entry doesn't."""
        if await self._repository.get_by_user(user.id) is None:
            raise ProfileNotFoundError(user.id)

        profile = await self._repository.pull_entry(user.id, field, entry_id)
        if profile is None:
            return None
        return await self._populate_one(profile)

    async def _populate_one(self, profile: Profile) -> Profile:
        return (await self._populate([profile]))[0]

    async def _populate(self, profiles: list[Profile]) -> list[Profile]:
        if not profiles:
            return []

        owners = await self._users.get_users([p.user.id for p in profiles])
        populated = []
        for profile in profiles:
            owner = owners.get(profile.user.id)
            if owner is not None:
                profile = profile.model_copy(
                    update={"user": ProfileOwner(id=owner.id, name=owner.name, avatar=owner.avatar)}
                )
            populated.append(profile)
        return populated
