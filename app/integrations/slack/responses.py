"""Deferred responses to slash commands.

Slack gives each slash command a ``response_url``. Once the command has been
acknowledged, its final result is posted there. A failed post cannot be
reported to the user, so failures are logged and dropped.
"""

from typing import Any, Callable, Dict, List, Literal, Optional
import asyncio

from pydantic import BaseModel
from slack_sdk.webhook import WebhookClient

from infrastructure.logging import get_module_logger

logger = get_module_logger()


class SlackResponse(BaseModel):
    """Message body returned to a slash command.

    Attributes:
        response_type: ``ephemeral`` (caller only) or ``in_channel`` (everyone)
        text: Message text, or the notification fallback when blocks are set
        blocks: Optional Block Kit blocks
    """

    response_type: Literal["ephemeral", "in_channel"] = "ephemeral"
    text: Optional[str] = None
    blocks: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def ephemeral(cls, text: str) -> "SlackResponse":
        return cls(response_type="ephemeral", text=text)

    @classmethod
    def in_channel(
        cls, blocks: List[Dict[str, Any]], text: Optional[str] = None
    ) -> "SlackResponse":
        return cls(response_type="in_channel", text=text, blocks=blocks)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for Slack, omitting unset fields."""
        return self.model_dump(exclude_none=True)


def post_to_response_url(
    response_url: str,
    payload: Dict[str, Any],
    client_factory: Callable[[str], WebhookClient] = WebhookClient,
) -> bool:
    """Post a command result to its response_url.

    Args:
        response_url: The URL Slack sent with the command.
        payload: ``{"response_type", "text", "blocks"}`` message body.
        client_factory: Builds the webhook client; replaced in tests.

    Returns:
        bool: True when Slack accepted the payload. Never raises.
    """
    try:
        response = client_factory(response_url).send_dict(payload)
    except Exception as e:
        logger.error("deferred_delivery_failed", error=str(e))
        return False

    if response.status_code >= 300:
        logger.error(
            "deferred_delivery_failed",
            status_code=response.status_code,
            body=response.body,
        )
        return False

    logger.info("deferred_delivery_sent", status_code=response.status_code)
    return True


class ResponseUrlResponder:
    """Async front for ``post_to_response_url``.

    The webhook client is synchronous, so the post runs in a worker thread.
    """

    def __init__(
        self, client_factory: Callable[[str], WebhookClient] = WebhookClient
    ):
        self._client_factory = client_factory

    async def __call__(self, response_url: str, payload: Dict[str, Any]) -> bool:
        return await asyncio.to_thread(
            post_to_response_url, response_url, payload, self._client_factory
        )
