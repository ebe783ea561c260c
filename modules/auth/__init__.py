"""
Authentication module.

Handles password hashing and identity token issue/validation.

Public API:
- IAuthService: Interface for token operations
- IPasswordHasher: Interface for password hashing
- AuthService, PasswordHasher: Default implementations
- Auth exceptions: InvalidTokenError, MissingTokenError, AuthConfigurationError
"""

from .interfaces import IAuthService, IPasswordHasher
from .hashing import PasswordHasher
from .service import AuthService
from .models import JWTPayload, TokenIdentity, TokenResponse
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    AuthConfigurationError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IPasswordHasher",
    # Implementations
    "AuthService",
    "PasswordHasher",
    # Models
    "JWTPayload",
    "TokenIdentity",
    "TokenResponse",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "AuthConfigurationError",
]
