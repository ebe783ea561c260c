"""
Users module.

The user directory: registration, login and user lookups.

Public API:
- IUserService: Interface for user operations
- User: Public user model (no password)
- Users exceptions: UserAlreadyExistsError, InvalidCredentialsError, UserNotFoundError
"""

from .interfaces import IUserService
from .models import User, RegisterRequest, LoginRequest
from .exceptions import (
    UserAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "RegisterRequest",
    "LoginRequest",
    # Exceptions
    "UserAlreadyExistsError",
    "InvalidCredentialsError",
    "UserNotFoundError",
]
