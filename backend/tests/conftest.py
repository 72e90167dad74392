"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
row factories shaped like Supabase responses and a chainable stand-in for
the async postgrest query builder.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from modules.auth.models import Profile, UserRole
from shared.config import get_settings

QUERY_METHODS = ("select", "insert", "update", "delete", "eq", "order", "limit")

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_query(
    data: Optional[list[dict[str, Any]]] = None,
    count: Optional[int] = None,
    error: Optional[BaseException] = None,
) -> MagicMock:
    """
    Create a chainable query builder mock.

    Every filter/modifier returns the same mock, and execute() is awaitable,
    resolving to an object with .data and .count like postgrest's APIResponse.
    """
    query = MagicMock()
    for method in QUERY_METHODS:
        getattr(query, method).return_value = query
    if error is not None:
        query.execute = AsyncMock(side_effect=error)
    else:
        query.execute = AsyncMock(return_value=MagicMock(data=data if data is not None else [], count=count))
    return query


def make_db(**tables: Any) -> MagicMock:
    """
    Create a Supabase client mock serving queued queries per table.

    Each keyword maps a table name to one query (reused for every call)
    or a list of queries handed out in call order.
    """
    queues = {
        name: list(value) if isinstance(value, list) else value
        for name, value in tables.items()
    }

    def table(name: str) -> MagicMock:
        entry = queues[name]
        if isinstance(entry, list):
            return entry.pop(0)
        return entry

    db = MagicMock()
    db.table.side_effect = table
    return db


def create_mock_profile_data(
    user_id: str = "user-123",
    role: str = "admin",
    store_id: Optional[str] = None,
    full_name: str = "Ana Torres",
    email: str = "ana@example.com",
) -> dict:
    """Helper to create a user_profiles row with joined store."""
    return {
        "id": user_id,
        "email": email,
        "full_name": full_name,
        "role": role,
        "store_id": store_id,
        "store": {"id": store_id, "name": "Centro", "address": "Main St 1", "zone_id": "zone-1"} if store_id else None,
        "created_at": BASE_TIME.isoformat(),
    }


def create_mock_audit_data(
    audit_id: str = "audit-1",
    store_id: str = "store-1",
    store_name: Optional[str] = "Centro",
    score: Optional[int] = 80,
    status: str = "completed",
    age_days: int = 0,
) -> dict:
    """Helper to create an audits row; larger age_days means older."""
    created = BASE_TIME - timedelta(days=age_days)
    return {
        "id": audit_id,
        "store_id": store_id,
        "auditor_id": "user-123",
        "status": status,
        "score": score,
        "notes": None,
        "created_at": created.isoformat(),
        "completed_at": created.isoformat() if status == "completed" else None,
        "store": {"id": store_id, "name": store_name} if store_name else None,
    }


def create_mock_notification_data(
    notification_id: str = "n-1",
    user_id: str = "user-123",
    read: bool = False,
    age_minutes: int = 0,
) -> dict:
    """Helper to create a notifications row."""
    return {
        "id": notification_id,
        "user_id": user_id,
        "type": "audit_completed",
        "title": "Audit completed",
        "message": f"Notification {notification_id}",
        "read": read,
        "metadata": None,
        "created_at": (BASE_TIME - timedelta(minutes=age_minutes)).isoformat(),
    }


def make_profile(role: UserRole = UserRole.ADMIN, store_id: Optional[str] = None, user_id: str = "user-123") -> Profile:
    return Profile.model_validate(create_mock_profile_data(user_id=user_id, role=role.value, store_id=store_id))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def admin_profile() -> Profile:
    return make_profile(UserRole.ADMIN)


@pytest.fixture
def supervisor_profile() -> Profile:
    return make_profile(UserRole.SUPERVISOR, user_id="user-456")


@pytest.fixture
def manager_profile() -> Profile:
    return make_profile(UserRole.STORE_MANAGER, store_id="store-1", user_id="user-789")
