"""
Notifications module interface.

The API layer depends on INotificationFeed. The list itself is owned by
the feed; callers may only request read marks, never mutate entries.
"""

import asyncio
from typing import Optional, Protocol, runtime_checkable

from shared.models import Identity

from .models import Notification, NotificationInserted


@runtime_checkable
class INotificationFeed(Protocol):
    """Interface for the live notification feed of the signed-in user."""

    @property
    def notifications(self) -> list[Notification]:
        """Cached notifications, newest first."""
        ...

    @property
    def unread_count(self) -> int:
        """Number of unread entries, computed from the list on each call."""
        ...

    @property
    def loading(self) -> bool:
        ...

    async def on_identity_change(self, identity: Optional[Identity]) -> None:
        """Activate for a new identity or tear down on sign-out."""
        ...

    async def mark_as_read(self, notification_id: str) -> bool:
        """
        Flip one notification to read.

        Returns:
            True if the backend confirmed the write, False if only the
            local flip happened

        Raises:
            NotificationNotFoundError: If the id is not in the feed
        """
        ...

    async def mark_all_as_read(self) -> int:
        """
        Flip every unread notification to read with one bulk update.

        Returns:
            Number of entries flipped (0 means no remote call was made)

        Raises:
            DataAccessError: If the bulk update fails
        """
        ...

    async def refresh(self) -> None:
        """Retry unconfirmed read marks and reload from the backend."""
        ...

    def subscribe(self) -> "asyncio.Queue[Optional[NotificationInserted]]":
        """
        Receive every insert delivered from now on.

        A None item ends the stream: the identity changed or the feed closed.
        """
        ...

    def unsubscribe(self, queue: "asyncio.Queue[Optional[NotificationInserted]]") -> None:
        ...
