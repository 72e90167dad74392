"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import AuthenticationError, AuthorizationError


class InvalidCredentialsError(AuthenticationError):
    """Raised when the identity provider rejects a sign-in."""

    def __init__(self, message: str = "Invalid login credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class SignOutError(AuthenticationError):
    """Raised when the identity provider fails to end the session."""

    def __init__(self, message: str):
        super().__init__(message, code="SIGN_OUT_FAILED")


class NotAuthenticatedError(AuthenticationError):
    """Raised when an operation needs a signed-in user and there is none."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class ProfileUnavailableError(AuthorizationError):
    """Raised when the user is signed in but their profile could not be loaded."""

    def __init__(self, user_id: str):
        super().__init__(
            "Your profile could not be loaded. Contact an administrator.",
            code="PROFILE_UNAVAILABLE",
            details={"user_id": user_id},
        )


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, action: str, user_role: Optional[str]):
        super().__init__(
            f"Insufficient permissions for {action}. Role: {user_role or 'none'}",
            code="INSUFFICIENT_PERMISSIONS",
            details={"action": action, "user_role": user_role},
        )
