"""
Token authentication middleware.

Reads the identity token from the x-auth-token header, validates it
and hands the resolved user to the route.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from modules.auth.interfaces import IAuthService
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

logger = logging.getLogger(__name__)

TOKEN_HEADER = "x-auth-token"

# Header token extractor
token_scheme = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
        )


async def get_current_user(
    token: Optional[str] = Depends(token_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. The request
    never reaches the route if the token is missing or invalid.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if not token:
        raise AuthError("No token, authorization denied")

    try:
        return await auth.validate_token(token)
    except AuthenticationError:
        logger.debug("Rejected request with invalid token")
        raise AuthError("Token is not valid")
