"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for identity token operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    def issue_token(self, user_id: str) -> str:
        """
        Issue a signed, time-limited token for a user.

        Args:
            user_id: The user's ID

        Returns:
            Encoded token string

        Raises:
            AuthConfigurationError: If no signing secret is configured
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a token and return the identity it carries.

        Args:
            token: Token from the request header

        Returns:
            AuthenticatedUser with the user ID

        Raises:
            MissingTokenError: If the token is empty
            InvalidTokenError: If the token fails verification for any reason
        """
        ...


@runtime_checkable
class IPasswordHasher(Protocol):
    """Interface for one-way password hashing."""

    def hash(self, password: str) -> str:
        """Return a salted hash of the password."""
        ...

    def verify(self, password: str, hashed: str) -> bool:
        """Return True if the password matches the hash."""
        ...

    def dummy_verify(self) -> bool:
        """Spend the cost of a verify without a real hash. Always False."""
        ...
