"""Tests for role-based authorization."""

import pytest

from modules.auth.authorization import (
    Action,
    ROLE_CAPABILITIES,
    authorize,
    require_permission,
    store_scope,
)
from modules.auth.exceptions import InsufficientPermissionsError
from modules.auth.models import UserRole
from tests.conftest import make_profile


class TestAuthorize:
    def test_admin_can_do_everything(self, admin_profile):
        assert all(authorize(admin_profile, action) for action in Action)

    def test_supervisor_cannot_manage(self, supervisor_profile):
        assert authorize(supervisor_profile, Action.VIEW_REPORTS)
        assert authorize(supervisor_profile, Action.EXPORT_REPORTS)
        assert not authorize(supervisor_profile, Action.MANAGE_STORES)
        assert not authorize(supervisor_profile, Action.MANAGE_USERS)

    def test_store_manager_capabilities(self, manager_profile):
        assert authorize(manager_profile, Action.CREATE_AUDIT)
        assert authorize(manager_profile, Action.VIEW_AUDIT_HISTORY)
        assert not authorize(manager_profile, Action.VIEW_ALL_STORES)
        assert not authorize(manager_profile, Action.EXPORT_REPORTS)

    def test_no_profile_is_never_authorized(self):
        assert not authorize(None, Action.VIEW_DASHBOARD)

    def test_every_role_has_capabilities(self):
        assert set(ROLE_CAPABILITIES) == set(UserRole)


class TestRequirePermission:
    def test_returns_profile(self, admin_profile):
        assert require_permission(admin_profile, Action.MANAGE_USERS) is admin_profile

    def test_raises_with_role(self, supervisor_profile):
        with pytest.raises(InsufficientPermissionsError) as exc_info:
            require_permission(supervisor_profile, Action.MANAGE_USERS)
        assert exc_info.value.details == {"action": "manage_users", "user_role": "supervisor"}

    def test_raises_without_profile(self):
        with pytest.raises(InsufficientPermissionsError) as exc_info:
            require_permission(None, Action.VIEW_DASHBOARD)
        assert exc_info.value.details["user_role"] is None


class TestStoreScope:
    def test_unscoped_roles(self, admin_profile, supervisor_profile):
        assert store_scope(admin_profile) is None
        assert store_scope(supervisor_profile) is None

    def test_store_manager_pinned_to_store(self, manager_profile):
        assert store_scope(manager_profile) == "store-1"

    def test_store_manager_without_store(self):
        assert store_scope(make_profile(UserRole.STORE_MANAGER)) is None
