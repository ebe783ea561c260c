"""Tests for the shared API response models."""

from api.models import MessageResponse


class TestMessageResponse:
    def test_serializes_msg_only(self):
        assert MessageResponse(msg="User deleted").model_dump() == {"msg": "User deleted"}

    def test_used_by_delete_routes(self, app):
        """Account and post deletion acknowledge with the same model."""
        delete_models = {
            route.path: route.response_model
            for route in app.routes
            if getattr(route, "methods", None) == {"DELETE"}
            and route.path in ("/api/profile", "/api/posts/{post_id}")
        }

        assert delete_models == {
            "/api/profile": MessageResponse,
            "/api/posts/{post_id}": MessageResponse,
        }
