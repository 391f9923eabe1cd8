"""Fixtures for the Doxy.me feature tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from infrastructure.configuration.features import DoxySettings
from infrastructure.notifications import (
    NotificationChannel,
    NotificationResult,
    NotificationStatus,
)
from modules.doxy.commands import DoxyCommands
from modules.doxy.mappings import MappingRepository


@pytest.fixture
def doxy_settings() -> DoxySettings:
    return DoxySettings()


@pytest.fixture
def repository(document_store) -> MappingRepository:
    return MappingRepository(document_store)


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.users_info.return_value = {
        "ok": True,
        "user": {"profile": {"display_name": "Alice", "real_name": "Alice Smith"}},
    }
    return client


@pytest.fixture
def mock_channel():
    """Channel double that delivers to everyone except ``failing`` ids."""
    channel = MagicMock(spec=NotificationChannel)
    channel.failing = set()

    async def send(notification):
        results = []
        for recipient in notification.recipients:
            failed = recipient.slack_user_id in channel.failing
            results.append(
                NotificationResult(
                    recipient=recipient,
                    channel="direct_message",
                    status=NotificationStatus.FAILED if failed else NotificationStatus.SENT,
                    message="failed" if failed else "sent",
                    error_code="cannot_dm_bot" if failed else None,
                )
            )
        return results

    channel.send = AsyncMock(side_effect=send)
    return channel


@pytest.fixture
def commands(repository, mock_channel, mock_client, doxy_settings) -> DoxyCommands:
    return DoxyCommands(
        repository=repository,
        channel=mock_channel,
        client=mock_client,
        settings=doxy_settings,
    )


@pytest.fixture
def command_factory():
    """Parsed slash command parameters."""

    def _factory(command="/doxyme", text="", user_id="UCALLER1"):
        return {
            "command": command,
            "text": text,
            "user_id": user_id,
            "trigger_id": "123.456.abc",
            "response_url": "https://hooks.slack.com/commands/T1/1/abc",
        }

    return _factory
