"""Tests for the profile repository."""

import pytest

from modules.auth.models import UserRole
from modules.auth.repository import ProfileRepository
from tests.conftest import create_mock_profile_data, make_db, make_query


class TestGetProfile:
    @pytest.mark.asyncio
    async def test_returns_profile_with_store(self):
        query = make_query([create_mock_profile_data(role="encargada", store_id="store-1")])
        repo = ProfileRepository(make_db(user_profiles=query))

        profile = await repo.get_profile("user-123")

        assert profile.role == UserRole.STORE_MANAGER
        assert profile.store.name == "Centro"
        query.select.assert_called_once_with("*, store:stores(*)")
        query.eq.assert_called_once_with("id", "user-123")

    @pytest.mark.asyncio
    async def test_missing_row_returns_none(self):
        repo = ProfileRepository(make_db(user_profiles=make_query([])))
        assert await repo.get_profile("user-123") is None


class TestUpdateProfile:
    @pytest.mark.asyncio
    async def test_update_then_reload(self):
        update = make_query([{"id": "user-123"}])
        reload = make_query([create_mock_profile_data(full_name="New Name")])
        repo = ProfileRepository(make_db(user_profiles=[update, reload]))

        profile = await repo.update_profile("user-123", {"full_name": "New Name"})

        update.update.assert_called_once_with({"full_name": "New Name"})
        update.eq.assert_called_once_with("id", "user-123")
        assert profile.full_name == "New Name"
