"""
Notifications module.

Maintains the signed-in user's notifications: initial load of the most
recent rows, live inserts over a realtime channel, and read marks.

Public API:
- INotificationFeed: Interface for feed operations
- NotificationFeed: Supabase-backed implementation
- NotificationChannel: Realtime subscription wrapper
- Notification, NotificationType, NotificationInserted: Models
"""

from .interfaces import INotificationFeed
from .models import (
    Notification,
    NotificationType,
    NotificationInserted,
    NotificationList,
    MarkReadResult,
    MarkAllReadResult,
)
from .exceptions import NotificationNotFoundError

__all__ = [
    # Interface
    "INotificationFeed",
    # Models
    "Notification",
    "NotificationType",
    "NotificationInserted",
    "NotificationList",
    "MarkReadResult",
    "MarkAllReadResult",
    # Exceptions
    "NotificationNotFoundError",
]
