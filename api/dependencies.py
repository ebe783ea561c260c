"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Settings are read once here and passed into each
component's constructor; services never read configuration themselves.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from motor.motor_asyncio import AsyncIOMotorDatabase
    from modules.auth.interfaces import IAuthService, IPasswordHasher
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository
    from modules.profiles.interfaces import IProfileService
    from modules.profiles.repository import ProfileRepository
    from modules.posts.interfaces import IPostService
    from modules.posts.repository import PostRepository
    from shared.repository import BaseRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        database: "Optional[AsyncIOMotorDatabase]" = None,
    ) -> None:
        self._settings = settings
        self._database = database
        self._auth_service: "IAuthService | None" = None
        self._password_hasher: "IPasswordHasher | None" = None
        self._user_repository: "UserRepository | None" = None
        self._profile_repository: "ProfileRepository | None" = None
        self._post_repository: "PostRepository | None" = None
        self._user_service: "IUserService | None" = None
        self._profile_service: "IProfileService | None" = None
        self._post_service: "IPostService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def database(self) -> "AsyncIOMotorDatabase":
        """Get the MongoDB database handle."""
        if self._database is None:
            from shared.database import get_database
            self._database = get_database()
        return self._database

    @property
    def auth(self) -> "IAuthService":
        """Get the auth (token) service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                secret=self.settings.jwt_secret,
                expires_in=self.settings.token_expires_in,
                algorithm=self.settings.jwt_algorithm,
            )
        return self._auth_service

    @property
    def password_hasher(self) -> "IPasswordHasher":
        """Get the password hasher instance."""
        if self._password_hasher is None:
            from modules.auth.hashing import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.database)
        return self._user_repository

    @property
    def profile_repository(self) -> "ProfileRepository":
        if self._profile_repository is None:
            from modules.profiles.repository import ProfileRepository
            self._profile_repository = ProfileRepository(self.database)
        return self._profile_repository

    @property
    def post_repository(self) -> "PostRepository":
        if self._post_repository is None:
            from modules.posts.repository import PostRepository
            self._post_repository = PostRepository(self.database)
        return self._post_repository

    @property
    def repositories(self) -> "list[BaseRepository]":
        """All repositories, for startup index creation."""
        return [self.user_repository, self.profile_repository, self.post_repository]

    @property
    def users(self) -> "IUserService":
        """Get the user directory service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                repository=self.user_repository,
                hasher=self.password_hasher,
                auth=self.auth,
            )
        return self._user_service

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.service import ProfileService
            self._profile_service = ProfileService(
                repository=self.profile_repository,
                users=self.users,
            )
        return self._profile_service

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        if self._post_service is None:
            from modules.posts.service import PostService
            self._post_service = PostService(
                repository=self.post_repository,
                users=self.users,
            )
        return self._post_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._password_hasher = None
        self._user_repository = None
        self._profile_repository = None
        self._post_repository = None
        self._user_service = None
        self._profile_service = None
        self._post_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles


def get_post_service() -> "IPostService":
    """FastAPI dependency for post service."""
    return get_container().posts


def get_db() -> "AsyncIOMotorDatabase":
    """FastAPI dependency for the database handle."""
    return get_container().database
