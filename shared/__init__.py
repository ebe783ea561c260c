"""
Shared infrastructure for Devlink backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB client factory
- repository: Base repository and id helpers
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_mongo_client, get_database, ping_database, reset_client_cache
from .exceptions import (
    DevlinkError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_mongo_client",
    "get_database",
    "ping_database",
    "reset_client_cache",
    "DevlinkError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "AuthenticatedUser",
]
