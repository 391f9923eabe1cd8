"""Notification channel implementations."""

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.channels.direct_message import DirectMessageChannel

__all__ = [
    "NotificationChannel",
    "DirectMessageChannel",
]
