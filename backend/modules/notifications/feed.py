"""
Live notification feed for the signed-in user.

Keeps a newest-first cache of the user's notifications, fed by an initial
load of the most recent rows and by a realtime INSERT subscription.

The two sources are independent appends into the same list:
- inserts are prepended as they arrive, skipping ids already present
- the initial load (and any refresh) installs the loaded rows behind the
  inserts that arrived while it was in flight

Identity switches wipe the list before anything for the new user is
applied, and every load carries a generation number so a response that
resolves after a newer activation is dropped.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from supabase import AsyncClient

from shared.exceptions import DataAccessError
from shared.models import Identity

from .channel import InsertHandler, NotificationChannel
from .exceptions import NotificationNotFoundError
from .interfaces import INotificationFeed
from .models import Notification, NotificationInserted, NotificationList
from .repository import NotificationRepository

logger = logging.getLogger(__name__)

ChannelFactory = Callable[[AsyncClient, str, InsertHandler], Any]


class NotificationFeed(INotificationFeed):
    """
    Owner of the notification list.

    Read flips are optimistic: the local entry is marked read before the
    remote update, and a failed update is logged but not rolled back. Such
    ids are kept as unconfirmed and retried by refresh(). Entries flipped
    locally stay read across reloads for the rest of the identity's session.
    """

    def __init__(
        self,
        client: AsyncClient,
        repository: NotificationRepository,
        page_size: int = 50,
        channel_factory: Optional[ChannelFactory] = None,
    ):
        self._client = client
        self._repository = repository
        self._page_size = page_size
        self._channel_factory = channel_factory or NotificationChannel

        self._user_id: Optional[str] = None
        self._channel: Any = None
        self._notifications: list[Notification] = []
        self._loading = False
        self._generation = 0

        self._live_ids: set[str] = set()
        self._read_locally: set[str] = set()
        self._unconfirmed: set[str] = set()
        self._subscribers: set[asyncio.Queue] = set()

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    @property
    def user_id(self) -> Optional[str]:
        return self._user_id

    @property
    def notifications(self) -> list[Notification]:
        return list(self._notifications)

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self._notifications if not n.read)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def unconfirmed_ids(self) -> frozenset[str]:
        return frozenset(self._unconfirmed)

    def view(self) -> NotificationList:
        return NotificationList(
            notifications=self.notifications,
            unread_count=self.unread_count,
            loading=self._loading,
        )

    # -------------------------------------------------------------------------
    # Activation
    # -------------------------------------------------------------------------

    async def on_identity_change(self, identity: Optional[Identity]) -> None:
        if identity is None:
            await self.deactivate()
        else:
            await self.activate(identity.id)

    async def activate(self, user_id: str) -> None:
        """Subscribe to a user's inserts and load their recent notifications."""
        if user_id == self._user_id:
            return

        await self.deactivate()

        self._generation += 1
        generation = self._generation
        self._user_id = user_id
        self._loading = True

        channel = self._channel_factory(self._client, user_id, self._handle_inserted)
        self._channel = channel
        try:
            await channel.start()
        except DataAccessError as e:
            logger.error(f"Live notifications unavailable for {user_id}: {e.message}")

        if generation != self._generation:
            # Superseded while subscribing; deactivate() could not close it yet
            await self._stop_channel(channel)
            return

        await self._load(generation)

    async def deactivate(self) -> None:
        """Close the push channel and forget the current user's notifications."""
        self._generation += 1
        channel, self._channel = self._channel, None

        self._user_id = None
        self._notifications = []
        self._loading = False
        self._live_ids.clear()
        self._read_locally.clear()
        self._unconfirmed.clear()

        for queue in list(self._subscribers):
            queue.put_nowait(None)
        self._subscribers.clear()

        if channel is not None:
            await self._stop_channel(channel)

    async def close(self) -> None:
        await self.deactivate()

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def mark_as_read(self, notification_id: str) -> bool:
        index = self._index_of(notification_id)
        if index is None:
            raise NotificationNotFoundError(notification_id)

        notification = self._notifications[index]
        if notification.read and notification_id not in self._unconfirmed:
            return True

        self._read_locally.add(notification_id)
        if not notification.read:
            self._notifications[index] = notification.model_copy(update={"read": True})

        try:
            await self._repository.mark_read(notification_id)
        except DataAccessError as e:
            logger.error(f"Error marking notification {notification_id} as read: {e.message}")
            self._unconfirmed.add(notification_id)
            return False

        self._unconfirmed.discard(notification_id)
        return True

    async def mark_all_as_read(self) -> int:
        user_id = self._user_id
        if user_id is None:
            return 0

        unread_ids = [n.id for n in self._notifications if not n.read]
        if not unread_ids:
            return 0

        try:
            await self._repository.mark_all_read(user_id)
        except DataAccessError as e:
            logger.error(f"Error marking all notifications as read: {e.message}")
            raise

        if user_id != self._user_id:
            return 0

        self._read_locally.update(unread_ids)
        self._unconfirmed.clear()
        self._notifications = [
            n if n.read else n.model_copy(update={"read": True})
            for n in self._notifications
        ]
        return len(unread_ids)

    async def refresh(self) -> None:
        if self._user_id is None:
            return

        for notification_id in list(self._unconfirmed):
            try:
                await self._repository.mark_read(notification_id)
            except DataAccessError as e:
                logger.warning(f"Read mark for {notification_id} still unconfirmed: {e.message}")
            else:
                self._unconfirmed.discard(notification_id)

        self._generation += 1
        self._loading = True
        await self._load(self._generation)

    # -------------------------------------------------------------------------
    # Fan-out to in-process subscribers
    # -------------------------------------------------------------------------

    def subscribe(self) -> "asyncio.Queue[Optional[NotificationInserted]]":
        queue: asyncio.Queue = asyncio.Queue()
        self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: "asyncio.Queue[Optional[NotificationInserted]]") -> None:
        self._subscribers.discard(queue)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _load(self, generation: int) -> None:
        user_id = self._user_id
        if user_id is None:
            return

        try:
            rows: Optional[list[Notification]] = await self._repository.list_recent(
                user_id, self._page_size
            )
        except DataAccessError as e:
            logger.error(f"Error fetching notifications for {user_id}: {e.message}")
            rows = None

        if generation != self._generation:
            logger.debug(f"Discarding stale notification load for {user_id}")
            return

        if rows is not None:
            self._install(rows)
        self._loading = False

    def _install(self, rows: list[Notification]) -> None:
        loaded_ids = {n.id for n in rows}
        arrived = [
            n for n in self._notifications
            if n.id in self._live_ids and n.id not in loaded_ids
        ]
        self._notifications = [
            n.model_copy(update={"read": True})
            if n.id in self._read_locally and not n.read
            else n
            for n in arrived + rows
        ]
        self._live_ids.clear()

    async def _stop_channel(self, channel: Any) -> None:
        try:
            await channel.stop()
        except DataAccessError as e:
            logger.warning(f"Error closing notification channel: {e.message}")

    def _handle_inserted(self, event: NotificationInserted) -> None:
        notification = event.notification
        if notification.user_id != self._user_id:
            return

        self._live_ids.add(notification.id)
        if self._index_of(notification.id) is not None:
            return

        self._notifications.insert(0, notification)
        for queue in list(self._subscribers):
            queue.put_nowait(event)

    def _index_of(self, notification_id: str) -> Optional[int]:
        for index, notification in enumerate(self._notifications):
            if notification.id == notification_id:
                return index
        return None
