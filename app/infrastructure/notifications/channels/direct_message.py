"""Slack direct message channel."""

from typing import List
import asyncio

from slack_sdk import WebClient

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import (
    Notification,
    NotificationResult,
    NotificationStatus,
    Recipient,
)
from infrastructure.operations import OperationResult, classify_slack_error

logger = get_module_logger()


class DirectMessageChannel(NotificationChannel):
    """Sends a notification to each recipient as a Slack DM.

    Each recipient gets one attempt: ``conversations.open`` followed by
    ``chat.postMessage``. Attempts run one after another; a failure is
    recorded for that recipient and the loop moves on. Nothing is retried.

    The synchronous ``slack_sdk.WebClient`` runs in a worker thread so the
    event loop keeps serving requests while Slack responds.
    """

    def __init__(self, client: WebClient):
        self._client = client

    @property
    def channel_name(self) -> str:
        return "direct_message"

    async def send(self, notification: Notification) -> List[NotificationResult]:
        results = []
        for recipient in notification.recipients:
            result = await asyncio.to_thread(self._send_dm, recipient, notification)
            if result.is_success:
                logger.info(
                    "direct_message_sent",
                    recipient=recipient.slack_user_id,
                    **notification.metadata,
                )
                results.append(
                    NotificationResult(
                        recipient=recipient,
                        channel=self.channel_name,
                        status=NotificationStatus.SENT,
                        message=f"Sent Slack DM to {recipient.slack_user_id}",
                        external_id=result.data.get("ts"),
                    )
                )
            else:
                logger.error(
                    "direct_message_failed",
                    recipient=recipient.slack_user_id,
                    error=result.message,
                    error_code=result.error_code,
                    **notification.metadata,
                )
                results.append(
                    NotificationResult(
                        recipient=recipient,
                        channel=self.channel_name,
                        status=NotificationStatus.FAILED,
                        message=result.message,
                        error_code=result.error_code,
                        retry_after=result.retry_after,
                    )
                )
        return results

    def _send_dm(
        self, recipient: Recipient, notification: Notification
    ) -> OperationResult:
        """Open a DM with the recipient and post the message into it.

        Returns:
            OperationResult with the message ``ts`` and DM channel id in data.
        """
        try:
            conversation = self._client.conversations_open(
                users=recipient.slack_user_id
            )
            channel = conversation.get("channel") or {}
            channel_id = channel.get("id")
            if not conversation.get("ok") or not channel_id:
                return OperationResult.transient_error(
                    message=f"Failed to open conversation: {conversation.get('error')}",
                    error_code=conversation.get("error") or "CONVERSATION_OPEN_FAILED",
                )

            response = self._client.chat_postMessage(
                channel=channel_id,
                text=notification.text,
                blocks=notification.blocks,
            )
            if not response.get("ok"):
                return OperationResult.transient_error(
                    message=f"Failed to send message: {response.get('error')}",
                    error_code=response.get("error") or "POST_MESSAGE_FAILED",
                )

            return OperationResult.success(
                message="Slack DM sent",
                data={"ts": response.get("ts"), "channel": channel_id},
            )
        except Exception as e:
            return classify_slack_error(e)
