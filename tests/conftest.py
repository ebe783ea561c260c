"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Services are wired to in-memory repositories; MongoDB is never contacted.
"""

import pytest
from datetime import datetime, timezone, timedelta
from fastapi.testclient import TestClient
import jwt  # PyJWT

from api.app import create_app
from api.dependencies import (
    get_auth_service,
    get_post_service,
    get_profile_service,
    get_user_service,
    reset_container,
)
from modules.auth.hashing import PasswordHasher
from modules.auth.service import AuthService
from modules.posts.service import PostService
from modules.profiles.service import ProfileService
from modules.users.service import UserService

from tests.fakes import (
    InMemoryPostRepository,
    InMemoryProfileRepository,
    InMemoryUserRepository,
)


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_USER_ID = "507f1f77bcf86cd799439011"


def create_test_token(
    user_id: str = TEST_USER_ID,
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test identity token.

    Args:
        user_id: User ID to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "user": {"id": user_id},
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def register(client: TestClient, name: str, email: str, password: str = "secret1") -> dict[str, str]:
    """Register a user through the API and return auth headers for them."""
    response = client.post(
        "/api/users",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return {"x-auth-token": response.json()["token"]}


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return TEST_USER_ID


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create auth headers with a valid token."""
    return {"x-auth-token": auth_token}


@pytest.fixture
def auth_service() -> AuthService:
    return AuthService(secret=TEST_JWT_SECRET)


@pytest.fixture
def password_hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def post_repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def user_service(user_repository, password_hasher, auth_service) -> UserService:
    return UserService(repository=user_repository, hasher=password_hasher, auth=auth_service)


@pytest.fixture
def profile_service(profile_repository, user_service) -> ProfileService:
    return ProfileService(repository=profile_repository, users=user_service)


@pytest.fixture
def post_service(post_repository, user_service) -> PostService:
    return PostService(repository=post_repository, users=user_service)


@pytest.fixture
def app(auth_service, user_service, profile_service, post_service):
    """Create a fresh app wired to in-memory services."""
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    app.dependency_overrides[get_post_service] = lambda: post_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
