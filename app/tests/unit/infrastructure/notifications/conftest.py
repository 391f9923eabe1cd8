"""Test fixtures for notification infrastructure tests."""

from typing import List, Optional
from unittest.mock import MagicMock

import pytest

from infrastructure.notifications.models import Notification, Recipient


@pytest.fixture
def mock_slack_client():
    """WebClient double whose DM calls succeed by default."""
    client = MagicMock()
    client.conversations_open.side_effect = lambda users: {
        "ok": True,
        "channel": {"id": f"D{users}"},
    }
    client.chat_postMessage.return_value = {"ok": True, "ts": "1700000000.000100"}
    return client


@pytest.fixture
def notification_factory():
    """Factory for creating Notification instances.

    Example:
        notification = notification_factory(["U1", "U2"])
    """

    def _factory(
        user_ids: Optional[List[str]] = None,
        text: str = "Alice is inviting you to a Doxy.me call: https://doxy.me/alice",
        blocks: Optional[list] = None,
    ) -> Notification:
        return Notification(
            text=text,
            blocks=blocks,
            recipients=[
                Recipient(slack_user_id=user_id) for user_id in (user_ids or ["U1"])
            ],
            metadata={"caller_id": "UCALLER"},
        )

    return _factory
