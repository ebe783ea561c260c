"""
Base exception classes for the Devlink backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class DevlinkError(Exception):
    """
    Base exception for all Devlink errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(DevlinkError):
    """Resource not found."""

    pass


class ValidationError(DevlinkError):
    """Input validation failed."""

    pass


class ConflictError(DevlinkError):
    """Resource already exists or the change duplicates existing state."""

    pass


class AuthenticationError(DevlinkError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(DevlinkError):
    """Authorization failed (insufficient permissions)."""

    pass
