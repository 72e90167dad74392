"""
Shared infrastructure for the retail audit backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository with error translation
- logging_config: Logging setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings, require_backend_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    RetailAuditError,
    NotFoundError,
    ValidationError,
    ConfirmationRequiredError,
    AuthenticationError,
    AuthorizationError,
    DataAccessError,
    ConfigurationError,
)
from .models import Identity

__all__ = [
    "Settings",
    "get_settings",
    "require_backend_settings",
    "get_supabase_client",
    "reset_client_cache",
    "RetailAuditError",
    "NotFoundError",
    "ValidationError",
    "ConfirmationRequiredError",
    "AuthenticationError",
    "AuthorizationError",
    "DataAccessError",
    "ConfigurationError",
    "Identity",
]
