"""
Notifications module exceptions.
"""

from shared.exceptions import NotFoundError


class NotificationNotFoundError(NotFoundError):
    """Raised when a notification is not in the current feed."""

    def __init__(self, notification_id: str):
        super().__init__(
            f"Notification not found: {notification_id}",
            code="NOTIFICATION_NOT_FOUND",
            details={"notification_id": notification_id},
        )
