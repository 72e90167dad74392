"""Tests for store endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from api.dependencies import get_current_profile, get_store_service
from modules.auth.exceptions import InsufficientPermissionsError
from modules.auth.models import UserRole
from modules.stores.exceptions import StoreNotFoundError
from modules.stores.models import Store, StoreDirectory, Zone
from shared.exceptions import ConfirmationRequiredError
from tests.conftest import make_profile


@pytest.fixture
def service(app) -> MagicMock:
    zone = Zone(id="zone-1", name="Norte")
    store = Store(id="store-1", name="Centro", address="Main St 1", zone_id="zone-1", zone=zone)
    service = MagicMock()
    service.get_directory = AsyncMock(return_value=StoreDirectory(stores=[store], zones=[zone]))
    service.list_zones = AsyncMock(return_value=[zone])
    service.create_store = AsyncMock(return_value=store)
    service.update_store = AsyncMock(return_value=store)
    service.delete_store = AsyncMock(return_value=None)
    app.dependency_overrides[get_current_profile] = lambda: make_profile()
    app.dependency_overrides[get_store_service] = lambda: service
    return service


class TestStoreEndpoints:
    def test_directory_with_search(self, client, service):
        response = client.get("/api/stores", params={"search": "cen"})

        assert response.status_code == 200
        assert response.json()["stores"][0]["zone"]["name"] == "Norte"
        _, search = service.get_directory.await_args.args
        assert search == "cen"

    def test_zones(self, client, service):
        response = client.get("/api/stores/zones")
        assert response.json() == [{"id": "zone-1", "name": "Norte", "created_at": None}]

    def test_create(self, client, service):
        response = client.post(
            "/api/stores",
            json={"name": "Centro", "address": "Main St 1", "zone_id": "zone-1"},
        )

        assert response.status_code == 201
        _, request = service.create_store.await_args.args
        assert request.name == "Centro"

    def test_create_missing_zone(self, client, service):
        response = client.post("/api/stores", json={"name": "Centro", "address": "Main St 1"})

        assert response.status_code == 422
        service.create_store.assert_not_awaited()

    def test_create_forbidden(self, app, client, service):
        app.dependency_overrides[get_current_profile] = lambda: make_profile(UserRole.SUPERVISOR)
        service.create_store.side_effect = InsufficientPermissionsError("manage_stores", "supervisor")

        response = client.post(
            "/api/stores",
            json={"name": "Centro", "address": "Main St 1", "zone_id": "zone-1"},
        )

        assert response.status_code == 403
        assert response.json()["error"] == "INSUFFICIENT_PERMISSIONS"

    def test_update_unknown(self, client, service):
        service.update_store.side_effect = StoreNotFoundError("store-9")

        response = client.patch("/api/stores/store-9", json={"name": "Renamed"})

        assert response.status_code == 404

    def test_delete_confirmed(self, client, service):
        response = client.delete("/api/stores/store-1", params={"confirm": "true"})

        assert response.status_code == 204
        service.delete_store.assert_awaited_once()
        assert service.delete_store.await_args.kwargs == {"confirm": True}

    def test_delete_requires_confirmation(self, client, service):
        service.delete_store.side_effect = ConfirmationRequiredError("delete store", "store-1")

        response = client.delete("/api/stores/store-1")

        assert response.status_code == 400
        assert response.json()["error"] == "CONFIRMATION_REQUIRED"
        assert service.delete_store.await_args.kwargs == {"confirm": False}
