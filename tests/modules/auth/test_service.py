import pytest
import jwt
from datetime import datetime, timedelta, timezone

from modules.auth.interfaces import IAuthService
from modules.auth.service import AuthService
from modules.auth.exceptions import (
    AuthConfigurationError,
    InvalidTokenError,
    MissingTokenError,
)

from tests.conftest import TEST_JWT_SECRET, create_test_token


class TestAuthService:
    @pytest.fixture
    def service(self):
        """Create auth service with the test secret."""
        return AuthService(secret=TEST_JWT_SECRET)

    def test_implements_interface(self, service):
        assert isinstance(service, IAuthService)

    def test_issue_token_payload(self, service):
        """Issued token should carry the user id and a 10 hour expiry."""
        token = service.issue_token("user-123")
        payload = jwt.decode(token, TEST_JWT_SECRET, algorithms=["HS256"])

        assert payload["user"] == {"id": "user-123"}
        assert payload["exp"] - payload["iat"] == 36000

    def test_issue_token_custom_lifetime(self):
        service = AuthService(secret=TEST_JWT_SECRET, expires_in=60)
        payload = jwt.decode(service.issue_token("u"), TEST_JWT_SECRET, algorithms=["HS256"])
        assert payload["exp"] - payload["iat"] == 60

    def test_issue_token_without_secret(self):
        """Signing without a configured secret should fail loudly."""
        with pytest.raises(AuthConfigurationError):
            AuthService(secret="").issue_token("user-123")

    @pytest.mark.asyncio
    async def test_round_trip(self, service):
        """A freshly issued token should validate back to the same user."""
        user = await service.validate_token(service.issue_token("user-123"))
        assert user.id == "user-123"

    @pytest.mark.asyncio
    async def test_validate_expired_token(self, service):
        """Expired tokens are rejected as invalid."""
        with pytest.raises(InvalidTokenError):
            await service.validate_token(create_test_token(expired=True))

    @pytest.mark.asyncio
    async def test_validate_after_lifetime_elapses(self):
        """A token issued with a lifetime already in the past doesn't validate."""
        service = AuthService(secret=TEST_JWT_SECRET, expires_in=-10)
        with pytest.raises(InvalidTokenError):
            await service.validate_token(service.issue_token("user-123"))

    @pytest.mark.asyncio
    async def test_validate_invalid_token(self, service):
        """Should raise InvalidTokenError for malformed token."""
        with pytest.raises(InvalidTokenError):
            await service.validate_token("not-a-valid-token")

    @pytest.mark.asyncio
    async def test_validate_wrong_secret(self, service):
        """Should raise InvalidTokenError for token signed with wrong secret."""
        token = create_test_token(secret="wrong-secret-wrong-secret-wrong!")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(token)

    @pytest.mark.asyncio
    async def test_validate_tampered_payload(self, service):
        """Swapping in another payload must break the signature."""
        header, _, signature = service.issue_token("victim").split(".")
        _, forged_payload, _ = service.issue_token("attacker").split(".")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(f"{header}.{forged_payload}.{signature}")

    @pytest.mark.asyncio
    async def test_validate_missing_identity(self, service):
        """A correctly signed token without the user claim is still invalid."""
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "user-123", "iat": now, "exp": now + timedelta(hours=1)},
            TEST_JWT_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            await service.validate_token(token)

    @pytest.mark.asyncio
    async def test_validate_missing_expiry(self, service):
        token = jwt.encode({"user": {"id": "user-123"}}, TEST_JWT_SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            await service.validate_token(token)

    @pytest.mark.asyncio
    async def test_validate_missing_token(self, service):
        """Should raise MissingTokenError for empty token."""
        with pytest.raises(MissingTokenError):
            await service.validate_token("")

    @pytest.mark.asyncio
    async def test_validate_none_token(self, service):
        """Should raise MissingTokenError for None token."""
        with pytest.raises(MissingTokenError):
            await service.validate_token(None)

    @pytest.mark.asyncio
    async def test_validate_without_secret(self):
        """Without a configured secret every token is rejected."""
        with pytest.raises(InvalidTokenError):
            await AuthService(secret="").validate_token(create_test_token())
