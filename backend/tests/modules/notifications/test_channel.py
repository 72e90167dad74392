"""Tests for the realtime notification channel."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from modules.notifications.channel import NotificationChannel, extract_record
from shared.exceptions import DataAccessError
from tests.conftest import create_mock_notification_data


@pytest.fixture
def client() -> MagicMock:
    client = MagicMock()
    realtime_channel = MagicMock()
    realtime_channel.subscribe = AsyncMock()
    client.channel.return_value = realtime_channel
    client.remove_channel = AsyncMock()
    return client


class TestExtractRecord:
    def test_nested_record(self):
        assert extract_record({"data": {"record": {"id": "n-1"}}}) == {"id": "n-1"}

    def test_flat_new(self):
        assert extract_record({"new": {"id": "n-1"}}) == {"id": "n-1"}

    def test_missing_record(self):
        assert extract_record({"data": {"type": "INSERT"}}) is None


class TestNotificationChannel:
    @pytest.mark.asyncio
    async def test_start_subscribes_to_user_inserts(self, client):
        channel = NotificationChannel(client, "user-123", MagicMock())

        await channel.start()

        client.channel.assert_called_once_with("notifications:user-123")
        realtime_channel = client.channel.return_value
        realtime_channel.on_postgres_changes.assert_called_once()
        args, kwargs = realtime_channel.on_postgres_changes.call_args
        assert args[0] == "INSERT"
        assert kwargs["table"] == "notifications"
        assert kwargs["filter"] == "user_id=eq.user-123"
        realtime_channel.subscribe.assert_awaited_once()
        assert channel.active

    @pytest.mark.asyncio
    async def test_start_twice_keeps_one_channel(self, client):
        channel = NotificationChannel(client, "user-123", MagicMock())
        await channel.start()
        await channel.start()
        client.channel.assert_called_once()

    @pytest.mark.asyncio
    async def test_subscribe_failure_raises_data_access_error(self, client):
        client.channel.return_value.subscribe.side_effect = ConnectionError("refused")
        channel = NotificationChannel(client, "user-123", MagicMock())

        with pytest.raises(DataAccessError):
            await channel.start()
        assert not channel.active

    @pytest.mark.asyncio
    async def test_stop_removes_channel(self, client):
        channel = NotificationChannel(client, "user-123", MagicMock())
        await channel.start()

        await channel.stop()
        await channel.stop()

        client.remove_channel.assert_awaited_once_with(client.channel.return_value)
        assert not channel.active

    @pytest.mark.asyncio
    async def test_payload_emits_typed_event(self, client):
        handler = MagicMock()
        channel = NotificationChannel(client, "user-123", handler)
        await channel.start()
        callback = client.channel.return_value.on_postgres_changes.call_args.kwargs["callback"]

        callback({"data": {"record": create_mock_notification_data("n-7")}})

        event = handler.call_args.args[0]
        assert event.notification.id == "n-7"

    @pytest.mark.asyncio
    async def test_malformed_and_foreign_payloads_ignored(self, client):
        handler = MagicMock()
        channel = NotificationChannel(client, "user-123", handler)
        await channel.start()
        callback = client.channel.return_value.on_postgres_changes.call_args.kwargs["callback"]

        callback({"data": {"record": {"id": "broken"}}})
        callback({"data": {"record": create_mock_notification_data("n-8", user_id="user-456")}})
        callback({"data": {}})

        handler.assert_not_called()
