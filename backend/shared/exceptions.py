"""
Base exception classes for the retail audit backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class RetailAuditError(Exception):
    """
    Base exception for all retail audit errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(RetailAuditError):
    """Resource not found."""

    pass


class ValidationError(RetailAuditError):
    """Input validation failed."""

    pass


class ConfirmationRequiredError(ValidationError):
    """A destructive operation was requested without explicit confirmation."""

    def __init__(self, action: str, target_id: str):
        super().__init__(
            f"Confirmation required to {action} {target_id}",
            code="CONFIRMATION_REQUIRED",
            details={"action": action, "target_id": target_id},
        )


class AuthenticationError(RetailAuditError):
    """Authentication failed (invalid credentials or expired session)."""

    pass


class AuthorizationError(RetailAuditError):
    """Authorization failed (insufficient permissions)."""

    pass


class DataAccessError(RetailAuditError):
    """
    A read or write against the backend failed.

    Covers network failures and row-level-security denials alike.
    Read paths log it and degrade to empty results; write paths
    let it propagate to the initiating action.
    """

    def __init__(
        self,
        message: str,
        operation: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code or "DATA_ACCESS_ERROR", details)
        self.operation = operation
        self.details["operation"] = operation


class ConfigurationError(RetailAuditError):
    """Required configuration is missing. Fatal at startup."""

    def __init__(self, missing: list[str]):
        super().__init__(
            "Supabase configuration missing. "
            f"Set {' and '.join(name.upper() for name in missing)} environment variables.",
            code="CONFIGURATION_ERROR",
            details={"missing": missing},
        )
        self.missing = missing
