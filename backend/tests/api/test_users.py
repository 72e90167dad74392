"""Tests for user management endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from api.dependencies import get_current_profile, get_user_service
from modules.auth.exceptions import InsufficientPermissionsError
from modules.auth.models import UserRole
from modules.users.exceptions import UserNotFoundError
from modules.users.models import UserList
from shared.exceptions import ConfirmationRequiredError
from tests.conftest import make_profile


@pytest.fixture
def service(app) -> MagicMock:
    manager = make_profile(UserRole.STORE_MANAGER, store_id="store-1", user_id="user-789")
    service = MagicMock()
    service.list_users = AsyncMock(return_value=UserList(users=[manager], total=1))
    service.create_user = AsyncMock(return_value=manager)
    service.update_user = AsyncMock(return_value=manager)
    service.delete_user = AsyncMock(return_value=None)
    app.dependency_overrides[get_current_profile] = lambda: make_profile()
    app.dependency_overrides[get_user_service] = lambda: service
    return service


class TestUserEndpoints:
    def test_list_with_filters(self, client, service):
        response = client.get("/api/users", params={"search": "ana", "role": "encargada"})

        assert response.status_code == 200
        assert response.json()["total"] == 1
        assert service.list_users.await_args.kwargs == {"search": "ana", "role": UserRole.STORE_MANAGER}

    def test_list_unknown_role(self, client, service):
        response = client.get("/api/users", params={"role": "owner"})
        assert response.status_code == 422

    def test_list_forbidden(self, app, client, service):
        app.dependency_overrides[get_current_profile] = lambda: make_profile(UserRole.SUPERVISOR)
        service.list_users.side_effect = InsufficientPermissionsError("manage_users", "supervisor")

        response = client.get("/api/users")

        assert response.status_code == 403

    def test_create(self, client, service):
        response = client.post(
            "/api/users",
            json={"full_name": "Luis Gil", "email": "luis@example.com", "role": "encargada", "store_id": "store-1"},
        )

        assert response.status_code == 201
        assert response.json()["role"] == "encargada"
        _, request = service.create_user.await_args.args
        assert request.store_id == "store-1"

    def test_create_invalid_email(self, client, service):
        response = client.post("/api/users", json={"full_name": "Luis Gil", "email": "not-an-email"})

        assert response.status_code == 422
        service.create_user.assert_not_awaited()

    def test_update_unknown(self, client, service):
        service.update_user.side_effect = UserNotFoundError("user-9")

        response = client.patch("/api/users/user-9", json={"role": "supervisor"})

        assert response.status_code == 404

    def test_delete_requires_confirmation(self, client, service):
        service.delete_user.side_effect = ConfirmationRequiredError("delete user", "user-789")

        response = client.delete("/api/users/user-789")

        assert response.status_code == 400
        assert response.json()["details"] == {"action": "delete user", "target_id": "user-789"}

    def test_delete_confirmed(self, client, service):
        response = client.delete("/api/users/user-789", params={"confirm": "true"})
        assert response.status_code == 204
