"""
User and authentication endpoints.

- POST /api/users  register, returns a token
- POST /api/auth   log in, returns a token
- GET  /api/auth   the authenticated user (no password)
"""

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_current_user
from api.dependencies import get_user_service
from modules.auth.models import TokenResponse
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import LoginRequest, RegisterRequest, User
from .exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

router = APIRouter()
auth_router = APIRouter()


@router.post("", response_model=TokenResponse)
async def register_user(
    request: RegisterRequest,
    service: IUserService = Depends(get_user_service),
) -> TokenResponse:
    """
    Register a new user.

    Returns a signed identity token for the new account.
    """
    try:
        token = await service.register(request.name, request.email, request.password)
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=e.message)
    return TokenResponse(token=token)


@auth_router.get("", response_model=User)
async def get_authenticated_user(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Get the user the request's token belongs to.

    Requires authentication.
    """
    try:
        return await service.get_user(user.id)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")


@auth_router.post("", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    service: IUserService = Depends(get_user_service),
) -> TokenResponse:
    """Exchange email and password for an identity token."""
    try:
        token = await service.authenticate(request.email, request.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=e.message)
    return TokenResponse(token=token)
