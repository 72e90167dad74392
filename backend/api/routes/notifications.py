"""
Notification endpoints.

Provides the cached feed, read marks, a reconciliation refresh and a
server-sent-event stream of live inserts.
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sse_starlette.sse import EventSourceResponse

from modules.notifications.feed import NotificationFeed
from modules.notifications.models import (
    MarkAllReadResult,
    MarkReadResult,
    NotificationInserted,
    NotificationList,
)
from ..dependencies import get_current_identity, get_notification_feed
from ..models import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    dependencies=[Depends(get_current_identity)],
    responses={401: {"model": ErrorResponse}},
)


@router.get("", response_model=NotificationList)
async def list_notifications(feed: NotificationFeed = Depends(get_notification_feed)) -> NotificationList:
    """Newest-first notifications with the unread count."""
    return feed.view()


@router.post("/read-all", response_model=MarkAllReadResult)
async def mark_all_read(feed: NotificationFeed = Depends(get_notification_feed)) -> MarkAllReadResult:
    """
    Mark every unread notification as read.

    Returns 502 if the bulk update fails; local state is then unchanged.
    """
    return MarkAllReadResult(updated=await feed.mark_all_as_read())


@router.post("/refresh", response_model=NotificationList)
async def refresh(feed: NotificationFeed = Depends(get_notification_feed)) -> NotificationList:
    """Retry unconfirmed read marks and reload from the backend."""
    await feed.refresh()
    return feed.view()


@router.post(
    "/{notification_id}/read",
    response_model=MarkReadResult,
    responses={404: {"model": ErrorResponse}},
)
async def mark_read(
    notification_id: str,
    feed: NotificationFeed = Depends(get_notification_feed),
) -> MarkReadResult:
    """
    Mark one notification as read.

    The entry is flipped locally even if the backend write fails;
    confirmed=false means a later refresh will retry it.
    """
    confirmed = await feed.mark_as_read(notification_id)
    return MarkReadResult(id=notification_id, confirmed=confirmed)


async def event_generator(feed: NotificationFeed, queue: "asyncio.Queue[Optional[NotificationInserted]]"):
    """
    Generate SSE events for live notification inserts.

    Ends when the feed closes the queue on an identity change.

    Yields events in the format:
        event: notification
        data: <notification json>
    """
    try:
        while True:
            event = await queue.get()
            if event is None:
                return
            yield {
                "event": "notification",
                "data": event.notification.model_dump_json(),
            }
    finally:
        feed.unsubscribe(queue)
        logger.debug("Notification stream subscriber left")


@router.get("/stream")
async def stream_notifications(feed: NotificationFeed = Depends(get_notification_feed)):
    """
    Stream new notifications via SSE.

    Only inserts delivered after the connection opens are sent; fetch
    the list endpoint first for the backlog.
    """
    queue = feed.subscribe()
    return EventSourceResponse(
        event_generator(feed, queue),
        media_type="text/event-stream",
    )
