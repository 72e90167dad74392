"""
Notifications module data models.

Notifications are created by backend triggers; the console only reads
them and flips `read` to true.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class NotificationType(str, Enum):
    """Kinds of notification produced by backend triggers."""

    PHOTO_PENDING = "photo_pending"
    PHOTO_APPROVED = "photo_approved"
    PHOTO_REJECTED = "photo_rejected"
    AUDIT_COMPLETED = "audit_completed"


class Notification(BaseModel):
    """A row from the notifications table."""

    id: str = Field(..., description="Notification ID (UUID)")
    user_id: str = Field(..., description="Owning user")
    type: NotificationType
    title: str
    message: str
    read: bool = Field(default=False, description="Monotonic: only ever flips to true")
    metadata: Optional[dict[str, Any]] = None
    created_at: datetime

    model_config = {"extra": "ignore"}


class NotificationInserted(BaseModel):
    """Event emitted by the realtime channel for each inserted row."""

    notification: Notification

    model_config = {"frozen": True}


class NotificationList(BaseModel):
    """Current view of the feed."""

    notifications: list[Notification] = Field(default_factory=list)
    unread_count: int = 0
    loading: bool = False


class MarkReadResult(BaseModel):
    """Outcome of marking one notification read."""

    id: str
    read: bool = True
    confirmed: bool = Field(..., description="False if the remote write failed")


class MarkAllReadResult(BaseModel):
    """Outcome of marking every notification read."""

    updated: int = Field(..., description="Number of local entries flipped")
