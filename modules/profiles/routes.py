"""
Profile API endpoints.

Mounted at /api/profile.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_current_user
from api.dependencies import get_profile_service
from api.models import MessageResponse
from shared.models import AuthenticatedUser

from .interfaces import IProfileService
from .models import (
    EducationRequest,
    ExperienceRequest,
    Profile,
    ProfileUpsertRequest,
)
from .exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    HandleTakenError,
    ProfileNotFoundError,
)

router = APIRouter()


@router.get("/me", response_model=Profile)
async def get_my_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """Get the current user's profile."""
    try:
        return await service.get_own(user)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("", response_model=Profile)
async def upsert_profile(
    request: ProfileUpsertRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Create or update the current user's profile.

    Only the fields present in the request are written.
    """
    try:
        return await service.upsert(user, request)
    except HandleTakenError as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.get("/all", response_model=list[Profile])
async def list_profiles(
    service: IProfileService = Depends(get_profile_service),
) -> list[Profile]:
    """List all profiles. Public."""
    return await service.list_all()


@router.get("/users/{user_id}", response_model=Profile, include_in_schema=False)
@router.get("/user/{user_id}", response_model=Profile)
async def get_profile_by_user(
    user_id: str,
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Get a profile by its owner's user ID. Public.

    Also answers /users/{user_id}, the path older clients call.
    """
    try:
        return await service.get_by_user_id(user_id)
    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found")


@router.delete("", response_model=MessageResponse)
async def delete_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete the current user's profile and account."""
    await service.delete_own(user)
    return MessageResponse(msg="User deleted")


@router.post("/experience", response_model=Profile)
async def add_experience(
    request: ExperienceRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    try:
        return await service.add_experience(user, request)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/experience/{exp_id}", response_model=Profile)
async def remove_experience(
    exp_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    try:
        return await service.remove_experience(user, exp_id)
    except (ProfileNotFoundError, ExperienceNotFoundError) as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("/education", response_model=Profile)
async def add_education(
    request: EducationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    try:
        return await service.add_education(user, request)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/education/{edu_id}", response_model=Profile)
async def remove_education(
    edu_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    try:
        return await service.remove_education(user, edu_id)
    except (ProfileNotFoundError, EducationNotFoundError) as e:
        raise HTTPException(status_code=404, detail=e.message)
