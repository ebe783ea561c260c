"""Tests for the registration and login endpoints."""

import jwt

from tests.conftest import TEST_JWT_SECRET, create_test_token, register


class TestRegister:

    def test_register_returns_token(self, client):
        response = client.post(
            "/api/users",
            json={"name": "Ada", "email": "ada@x.com", "password": "secret1"},
        )

        assert response.status_code == 200
        token = response.json()["token"]
        payload = jwt.decode(token, TEST_JWT_SECRET, algorithms=["HS256"])
        assert len(payload["user"]["id"]) == 24
        assert payload["exp"] - payload["iat"] == 36000

    def test_duplicate_email(self, client, user_repository):
        register(client, "Ada", "ada@x.com")

        response = client.post(
            "/api/users",
            json={"name": "Other", "email": "ada@x.com", "password": "secret2"},
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "User already exists"
        assert len(user_repository.users) == 1

    def test_short_password(self, client, user_repository):
        response = client.post(
            "/api/users",
            json={"name": "Ada", "email": "ada@x.com", "password": "12345"},
        )
        assert response.status_code == 422
        assert user_repository.users == {}

    def test_invalid_email(self, client):
        response = client.post(
            "/api/users",
            json={"name": "Ada", "email": "not-an-email", "password": "secret1"},
        )
        assert response.status_code == 422

    def test_blank_name(self, client):
        response = client.post(
            "/api/users",
            json={"name": "   ", "email": "ada@x.com", "password": "secret1"},
        )
        assert response.status_code == 422


class TestLogin:

    def test_login(self, client):
        register(client, "Ada", "ada@x.com")

        response = client.post("/api/auth", json={"email": "ada@x.com", "password": "secret1"})

        assert response.status_code == 200
        assert "token" in response.json()

    def test_wrong_password(self, client):
        register(client, "Ada", "ada@x.com")

        response = client.post("/api/auth", json={"email": "ada@x.com", "password": "wrong1"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_unknown_email(self, client):
        response = client.post("/api/auth", json={"email": "nobody@x.com", "password": "secret1"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_missing_password(self, client):
        response = client.post("/api/auth", json={"email": "ada@x.com"})
        assert response.status_code == 422


class TestCurrentUser:

    def test_get_current_user(self, client):
        headers = register(client, "Ada", "ada@x.com")

        response = client.get("/api/auth", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Ada"
        assert data["email"] == "ada@x.com"
        assert "password" not in data
        assert "password_hash" not in data

    def test_requires_token(self, client):
        response = client.get("/api/auth")
        assert response.status_code == 401

    def test_token_for_deleted_user(self, client):
        """A valid token whose user no longer exists."""
        response = client.get("/api/auth", headers={"x-auth-token": create_test_token()})
        assert response.status_code == 404
