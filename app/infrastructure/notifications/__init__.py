"""Notification delivery.

Fans a message out to Slack users as direct messages, one isolated attempt
per recipient, and reports a result for each.

Usage:
    from infrastructure.notifications import (
        DirectMessageChannel,
        Notification,
        Recipient,
    )

    notification = Notification(
        text="Alice is inviting you to a Doxy.me call",
        recipients=[Recipient(slack_user_id="U123"), Recipient(slack_user_id="U456")],
    )
    results = await DirectMessageChannel(client).send(notification)
    sent = [r.recipient for r in results if r.is_success]
"""

from infrastructure.notifications.models import (
    Notification,
    Recipient,
    NotificationResult,
    NotificationStatus,
)

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.channels.direct_message import DirectMessageChannel

__all__ = [
    # Models
    "Notification",
    "Recipient",
    "NotificationResult",
    "NotificationStatus",
    # Channels
    "NotificationChannel",
    "DirectMessageChannel",
]
