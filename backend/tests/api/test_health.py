"""Tests for health endpoints."""

from unittest.mock import MagicMock

from api.dependencies import get_container
from modules.auth.models import SessionState


def make_container(state: SessionState, loading: bool, feed_user=None, feed_loading=False) -> MagicMock:
    container = MagicMock()
    container.session.state = state
    container.session.loading = loading
    container.feed.user_id = feed_user
    container.feed.loading = feed_loading
    return container


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "0.1.0"}

    def test_ready_signed_in(self, app, client):
        app.dependency_overrides[get_container] = lambda: make_container(
            SessionState.AUTHENTICATED, False, feed_user="user-123"
        )

        response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "session": "authenticated", "notifications": "live"}

    def test_ready_while_loading(self, app, client):
        app.dependency_overrides[get_container] = lambda: make_container(SessionState.LOADING, True)

        response = client.get("/api/ready")

        assert response.json()["status"] == "starting"
        assert response.json()["notifications"] == "idle"
