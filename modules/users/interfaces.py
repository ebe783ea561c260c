"""
Users module interface.

Other modules (profiles, posts) should depend on IUserService,
not the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from .models import User


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for the user directory.
    """

    async def register(self, name: str, email: str, password: str) -> str:
        """
        Register a new user and return an identity token.

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        ...

    async def authenticate(self, email: str, password: str) -> str:
        """
        Check credentials and return an identity token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        ...

    async def get_user(self, user_id: str) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def get_users(self, user_ids: list[str]) -> dict[str, User]:
        """Get several users at once, keyed by ID. Missing users are omitted."""
        ...

    async def delete_user(self, user_id: str) -> bool:
        """Delete a user record. Returns True if a record was removed."""
        ...
