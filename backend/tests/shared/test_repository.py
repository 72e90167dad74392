"""Tests for shared/repository.py."""

import httpx
import pytest
from unittest.mock import MagicMock
from supabase import PostgrestAPIError

from shared.exceptions import DataAccessError
from shared.repository import BaseRepository
from tests.conftest import make_query


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    @pytest.mark.asyncio
    async def test_execute_returns_response(self):
        query = make_query([{"id": "123", "name": "test"}])
        repo = BaseRepository(MagicMock())

        result = await repo._execute(query, "list_test")

        assert result.data == [{"id": "123", "name": "test"}]
        query.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_execute_maps_api_error(self):
        """RLS denials and other PostgREST errors become DataAccessError."""
        api_error = PostgrestAPIError({
            "message": "permission denied for table stores",
            "code": "42501",
            "hint": None,
            "details": None,
        })
        repo = BaseRepository(MagicMock())

        with pytest.raises(DataAccessError) as exc_info:
            await repo._execute(make_query(error=api_error), "list_stores")

        assert exc_info.value.operation == "list_stores"
        assert exc_info.value.details["backend_code"] == "42501"
        assert "permission denied" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_execute_maps_network_error(self):
        repo = BaseRepository(MagicMock())

        with pytest.raises(DataAccessError) as exc_info:
            await repo._execute(make_query(error=httpx.ConnectError("refused")), "list_zones")

        assert exc_info.value.operation == "list_zones"
        assert "unreachable" in exc_info.value.message
