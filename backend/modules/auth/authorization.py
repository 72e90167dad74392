"""
Role-based authorization.

Every privileged operation asks one question, authorize(profile, action),
answered from a fixed capability set per role. Row Level Security on the
backend remains the real enforcement; this keeps the console from offering
operations the backend would reject.
"""

from enum import Enum
from typing import Optional

from .exceptions import InsufficientPermissionsError
from .models import Profile, UserRole


class Action(str, Enum):
    """Privileged operations exposed by the console."""

    VIEW_DASHBOARD = "view_dashboard"
    CREATE_AUDIT = "create_audit"
    VIEW_AUDIT_HISTORY = "view_audit_history"
    VIEW_ALL_STORES = "view_all_stores"
    VIEW_REPORTS = "view_reports"
    EXPORT_REPORTS = "export_reports"
    MANAGE_STORES = "manage_stores"
    MANAGE_USERS = "manage_users"


ROLE_CAPABILITIES: dict[UserRole, frozenset[Action]] = {
    UserRole.ADMIN: frozenset(Action),
    UserRole.SUPERVISOR: frozenset({
        Action.VIEW_DASHBOARD,
        Action.CREATE_AUDIT,
        Action.VIEW_AUDIT_HISTORY,
        Action.VIEW_ALL_STORES,
        Action.VIEW_REPORTS,
        Action.EXPORT_REPORTS,
    }),
    UserRole.STORE_MANAGER: frozenset({
        Action.VIEW_DASHBOARD,
        Action.CREATE_AUDIT,
        Action.VIEW_AUDIT_HISTORY,
        Action.VIEW_REPORTS,
    }),
}


def authorize(profile: Optional[Profile], action: Action) -> bool:
    """Return True if the profile's role grants the action."""
    if profile is None:
        return False
    return action in ROLE_CAPABILITIES.get(profile.role, frozenset())


def require_permission(profile: Optional[Profile], action: Action) -> Profile:
    """
    Assert the profile may perform the action.

    Returns:
        The same profile, narrowed to non-None

    Raises:
        InsufficientPermissionsError: If the role lacks the capability
    """
    if profile is None or not authorize(profile, action):
        raise InsufficientPermissionsError(
            action.value,
            profile.role.value if profile else None,
        )
    return profile


def store_scope(profile: Profile) -> Optional[str]:
    """
    Store a profile's audit views are restricted to.

    Roles that can see every store get None. Store managers are pinned to
    their assigned store; one without an assignment is left to the
    backend's row-level policies.
    """
    if authorize(profile, Action.VIEW_ALL_STORES):
        return None
    return profile.store_id
