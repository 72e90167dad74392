"""
Notification repository for database access.

Encapsulates all Supabase queries against the notifications table.
"""

from shared.repository import BaseRepository
from .models import Notification


class NotificationRepository(BaseRepository[Notification]):
    """Reads a user's notifications and flips their read flag."""

    async def list_recent(self, user_id: str, limit: int = 50) -> list[Notification]:
        """
        Get the most recent notifications for a user, newest first.

        Args:
            user_id: Owning user's ID.
            limit: Maximum number of rows.
        """
        result = await self._execute(
            self._db.table("notifications")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .limit(limit),
            "list_notifications",
        )
        return [Notification.model_validate(row) for row in result.data]

    async def mark_read(self, notification_id: str) -> None:
        """Set read = true on a single notification."""
        await self._execute(
            self._db.table("notifications").update({"read": True}).eq("id", notification_id),
            "mark_notification_read",
        )

    async def mark_all_read(self, user_id: str) -> None:
        """Set read = true on every unread notification of a user in one update."""
        await self._execute(
            self._db.table("notifications")
            .update({"read": True})
            .eq("user_id", user_id)
            .eq("read", False),
            "mark_all_notifications_read",
        )
