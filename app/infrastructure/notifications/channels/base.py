"""Notification channel abstract base class."""

from abc import ABC, abstractmethod
from typing import List
from infrastructure.notifications.models import (
    Notification,
    NotificationResult,
)


class NotificationChannel(ABC):
    """Abstract base class for notification channels.

    Implementations deliver a notification to each recipient independently:
    one recipient's failure must not stop delivery to the others, and no
    exception may escape ``send``.
    """

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Channel identifier used in results and logs."""
        pass

    @abstractmethod
    async def send(self, notification: Notification) -> List[NotificationResult]:
        """Send notification to all recipients.

        Must handle errors gracefully and return NotificationResult
        with FAILED status rather than raising exceptions.

        Returns:
            List of NotificationResult, one per recipient, in recipient order
        """
        pass
