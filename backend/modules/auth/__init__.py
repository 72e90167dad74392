"""
Authentication module.

Owns the process-wide session: sign-in/sign-out against Supabase Auth,
the cached user profile, and role-based authorization.

Public API:
- ISessionStore: Interface for session operations
- SessionStore: Supabase-backed implementation
- Profile, UserRole, SessionState, SessionSnapshot: Models
- authorize / require_permission / Action: Authorization predicate
- Auth exceptions: InvalidCredentialsError, NotAuthenticatedError, etc.
"""

from .interfaces import ISessionStore, IdentityListener
from .models import (
    Profile,
    ProfileUpdate,
    SessionSnapshot,
    SessionState,
    SignInRequest,
    StoreSummary,
    UserRole,
)
from .authorization import Action, authorize, require_permission, store_scope
from .exceptions import (
    InvalidCredentialsError,
    SignOutError,
    NotAuthenticatedError,
    ProfileUnavailableError,
    InsufficientPermissionsError,
)

__all__ = [
    # Interface
    "ISessionStore",
    "IdentityListener",
    # Models
    "Profile",
    "ProfileUpdate",
    "SessionSnapshot",
    "SessionState",
    "SignInRequest",
    "StoreSummary",
    "UserRole",
    # Authorization
    "Action",
    "authorize",
    "require_permission",
    "store_scope",
    # Exceptions
    "InvalidCredentialsError",
    "SignOutError",
    "NotAuthenticatedError",
    "ProfileUnavailableError",
    "InsufficientPermissionsError",
]
