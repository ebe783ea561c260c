"""
User directory service.

Registration, credential checks and user lookups.
"""

import asyncio
import hashlib
import logging
from urllib.parse import urlencode

from modules.auth.interfaces import IAuthService, IPasswordHasher

from .interfaces import IUserService
from .models import User
from .repository import UserRepository
from .exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar/"


def gravatar_url(email: str, size: int = 200, rating: str = "pg", default: str = "mm") -> str:
    """Build the Gravatar URL for an email address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": size, "r": rating, "d": default})
    return f"{GRAVATAR_BASE_URL}{digest}?{query}"


class UserService(IUserService):
    """
    User directory backed by the users collection.

    Emails are compared lower-cased. Passwords are hashed in a worker
    thread so bcrypt never stalls the event loop.
    """

    def __init__(
        self,
        repository: UserRepository,
        hasher: IPasswordHasher,
        auth: IAuthService,
    ):
        self._repository = repository
        self._hasher = hasher
        self._auth = auth

    async def register(self, name: str, email: str, password: str) -> str:
        email = email.strip().lower()

        if await self._repository.get_by_email(email) is not None:
            raise UserAlreadyExistsError(email)

        password_hash = await asyncio.to_thread(self._hasher.hash, password)
        user = await self._repository.create(
            name=name,
            email=email,
            password_hash=password_hash,
            avatar=gravatar_url(email),
        )
        logger.info(f"Registered user {user.id}")

        return self._auth.issue_token(user.id)

    async def authenticate(self, email: str, password: str) -> str:
        user = await self._repository.get_by_email(email.strip().lower())
        if user is None:
            await asyncio.to_thread(self._hasher.dummy_verify)
            logger.info("Login rejected: unknown email")
            raise InvalidCredentialsError()

        matches = await asyncio.to_thread(self._hasher.verify, password, user.password_hash)
        if not matches:
            logger.info(f"Login rejected: wrong password for user {user.id}")
            raise InvalidCredentialsError()

        return self._auth.issue_token(user.id)

    async def get_user(self, user_id: str) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.to_public()

    async def get_users(self, user_ids: list[str]) -> dict[str, User]:
        users = await self._repository.get_many(list(dict.fromkeys(user_ids)))
        return {u.id: u.to_public() for u in users}

    async def delete_user(self, user_id: str) -> bool:
        deleted = await self._repository.delete(user_id)
        if deleted:
            logger.info(f"Deleted user {user_id}")
        return deleted
