"""
Password hashing.

Thin wrapper around a passlib bcrypt context. Calls are CPU bound,
so async callers should run them in a worker thread.
"""

from passlib.context import CryptContext

from .interfaces import IPasswordHasher


class PasswordHasher(IPasswordHasher):
    """bcrypt password hasher."""

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """Hash a plaintext password securely."""
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against its hash."""
        return self._context.verify(password, hashed)

    def dummy_verify(self) -> bool:
        """
        Run a verification against a throwaway hash.

        Used when there is no stored hash to check, so a miss costs the
        same bcrypt work as a wrong password. Always returns False.
        """
        return self._context.dummy_verify()
