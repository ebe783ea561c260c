"""
Authentication service implementation.

Issues and validates the signed identity tokens used by the API.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import JWTPayload
from .exceptions import (
    AuthConfigurationError,
    InvalidTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Tokens are HS256 JWTs carrying {"user": {"id": ...}} and an expiry.
    The signing secret and lifetime are passed in by the service container.
    """

    def __init__(
        self,
        secret: str,
        expires_in: int = 36000,
        algorithm: str = "HS256",
    ):
        self._secret = secret
        self._expires_in = expires_in
        self._algorithm = algorithm

    def issue_token(self, user_id: str) -> str:
        """Issue a signed token that expires after the configured lifetime."""
        if not self._secret:
            raise AuthConfigurationError()

        now = datetime.now(timezone.utc)
        payload = {
            "user": {"id": user_id},
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=self._expires_in)).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a token and return the authenticated user.

        Expired, malformed and badly signed tokens all raise InvalidTokenError.
        """
        if not token:
            raise MissingTokenError()

        if not self._secret:
            logger.error("Token validation attempted without a configured secret")
            raise InvalidTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
            jwt_payload = JWTPayload(**payload)
        except (jwt.InvalidTokenError, PydanticValidationError) as e:
            logger.debug(f"Rejected token: {e}")
            raise InvalidTokenError()

        return AuthenticatedUser(id=jwt_payload.user.id)
