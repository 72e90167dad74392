"""
Realtime channel for notification inserts.

Wraps a Supabase realtime channel scoped to one user. The owner calls
start() on activation and stop() on teardown; each inserted row is
delivered to the handler as a typed NotificationInserted event.
"""

import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError as PydanticValidationError
from supabase import AsyncClient

from shared.exceptions import DataAccessError
from .models import Notification, NotificationInserted

logger = logging.getLogger(__name__)

InsertHandler = Callable[[NotificationInserted], None]


def extract_record(payload: dict[str, Any]) -> Optional[dict[str, Any]]:
    """
    Pull the inserted row out of a postgres_changes payload.

    The row sits under data.record on the wire; some client versions
    flatten it to record or new.
    """
    data = payload.get("data", payload)
    if not isinstance(data, dict):
        return None
    for key in ("record", "new"):
        record = data.get(key)
        if record:
            return record
    return None


class NotificationChannel:
    """
    One push subscription: INSERT on public.notifications where user_id = <user>.
    """

    def __init__(self, client: AsyncClient, user_id: str, on_insert: InsertHandler):
        self._client = client
        self._user_id = user_id
        self._on_insert = on_insert
        self._channel: Any = None

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def active(self) -> bool:
        return self._channel is not None

    async def start(self) -> None:
        """
        Open the subscription. Calling start() twice keeps a single channel.

        Raises:
            DataAccessError: If the realtime server cannot be reached
        """
        if self._channel is not None:
            return

        channel = self._client.channel(f"notifications:{self._user_id}")
        channel.on_postgres_changes(
            "INSERT",
            callback=self._handle_payload,
            table="notifications",
            schema="public",
            filter=f"user_id=eq.{self._user_id}",
        )
        try:
            await channel.subscribe()
        # Realtime transport errors share no common base class.
        except Exception as e:
            raise DataAccessError(
                f"Could not subscribe to notifications: {e}",
                operation="subscribe_notifications",
            ) from e

        self._channel = channel
        logger.debug(f"Notification channel open for {self._user_id}")

    async def stop(self) -> None:
        """
        Close the subscription. A stopped channel can be stopped again.

        Raises:
            DataAccessError: If the realtime server rejects the removal
        """
        if self._channel is None:
            return

        channel, self._channel = self._channel, None
        try:
            await self._client.remove_channel(channel)
        except Exception as e:
            raise DataAccessError(
                f"Could not close notification channel: {e}",
                operation="unsubscribe_notifications",
            ) from e
        logger.debug(f"Notification channel closed for {self._user_id}")

    def _handle_payload(self, payload: dict[str, Any]) -> None:
        record = extract_record(payload)
        if record is None:
            logger.warning("Ignoring realtime payload without a record")
            return

        try:
            notification = Notification.model_validate(record)
        except PydanticValidationError as e:
            logger.warning(f"Ignoring malformed notification payload: {e}")
            return

        if notification.user_id != self._user_id:
            return

        self._on_insert(NotificationInserted(notification=notification))
