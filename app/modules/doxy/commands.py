"""Doxy.me slash command handlers.

Two commands are served:

- setup (``/doxy-setup <room url>``): link the caller's Doxy.me room
- invite (``/doxyme [@user ...]``): invite the mentioned users to the
  caller's room by direct message, or post a join button in the channel
  when nobody is mentioned

Handlers return a ``SlackResponse``; the gateway delivers it through the
command's ``response_url``. No exception escapes ``DoxyCommands.handle``.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List

from slack_sdk import WebClient

from infrastructure.configuration.features import DoxySettings
from infrastructure.logging import get_module_logger
from infrastructure.notifications import (
    Notification,
    NotificationChannel,
    NotificationResult,
    Recipient,
)
from infrastructure.persistence import StoreError
from integrations.slack.commands import extract_user_mentions
from integrations.slack.responses import SlackResponse
from integrations.slack.users import get_display_name
from modules.doxy import messages
from modules.doxy.mappings import MappingRepository
from modules.doxy.urls import normalize_room_url

logger = get_module_logger()


@dataclass
class InviteOutcome:
    """Aggregated result of an invite fan-out."""

    sent: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    results: List[NotificationResult] = field(default_factory=list)

    @classmethod
    def from_results(cls, results: List[NotificationResult]) -> "InviteOutcome":
        outcome = cls(results=list(results))
        for result in results:
            target = outcome.sent if result.is_success else outcome.failed
            target.append(result.recipient.slack_user_id)
        return outcome

    def summary_text(self) -> str:
        return messages.invite_summary_text(self.sent, self.failed)


class DoxyCommands:
    """Handlers for the setup and invite slash commands.

    Args:
        repository: User to room mapping repository.
        channel: Channel used to deliver invites as direct messages.
        client: Slack Web API client, used for display name lookups.
        settings: Command names and the allowed room domain.
    """

    def __init__(
        self,
        repository: MappingRepository,
        channel: NotificationChannel,
        client: WebClient,
        settings: DoxySettings,
    ):
        self._repository = repository
        self._channel = channel
        self._client = client
        self._settings = settings

    @property
    def commands(self) -> FrozenSet[str]:
        return frozenset({self._settings.SETUP_COMMAND, self._settings.INVITE_COMMAND})

    def handles(self, command_name: str) -> bool:
        return command_name in self.commands

    async def handle(self, command: Dict[str, str]) -> SlackResponse:
        """Run the handler for ``command["command"]``.

        Any failure is logged and turned into the generic ephemeral error.
        """
        name = command.get("command", "")
        try:
            if name == self._settings.SETUP_COMMAND:
                return await self.setup(command)
            if name == self._settings.INVITE_COMMAND:
                return await self.invite(command)
        except Exception as e:
            logger.exception("command_failed", command=name, error=str(e))
            return SlackResponse.ephemeral(messages.GENERIC_ERROR_TEXT)

        logger.warning("command_unknown", command=name)
        return SlackResponse.ephemeral(messages.GENERIC_ERROR_TEXT)

    async def setup(self, command: Dict[str, str]) -> SlackResponse:
        user_id = command.get("user_id", "")
        room_url = normalize_room_url(
            command.get("text"), self._settings.ALLOWED_DOMAIN
        )
        if not room_url:
            logger.info("room_url_rejected", slack_user_id=user_id)
            return SlackResponse.ephemeral(
                messages.usage_text(self._settings.SETUP_COMMAND)
            )

        try:
            await self._repository.set(user_id, room_url)
        except StoreError as e:
            logger.error("room_mapping_save_failed", slack_user_id=user_id, error=str(e))
            return SlackResponse.ephemeral(messages.SAVE_FAILED_TEXT)

        logger.info("room_linked", slack_user_id=user_id, room_url=room_url)
        return SlackResponse.ephemeral(
            messages.room_linked_text(room_url, self._settings.INVITE_COMMAND)
        )

    async def invite(self, command: Dict[str, str]) -> SlackResponse:
        caller_id = command.get("user_id", "")
        try:
            mapping = await self._repository.get(caller_id)
        except StoreError as e:
            logger.error("room_mapping_read_failed", slack_user_id=caller_id, error=str(e))
            return SlackResponse.ephemeral(messages.GENERIC_ERROR_TEXT)

        if mapping is None:
            return SlackResponse.ephemeral(
                messages.room_not_linked_text(self._settings.SETUP_COMMAND)
            )

        mentions = extract_user_mentions(command.get("text"))
        if not mentions:
            logger.info("channel_call_started", slack_user_id=caller_id)
            return SlackResponse.in_channel(
                messages.channel_call_blocks(caller_id, mapping.room_url)
            )

        outcome = await self._send_invites(caller_id, mapping.room_url, mentions)
        logger.info(
            "invites_sent",
            slack_user_id=caller_id,
            sent=len(outcome.sent),
            failed=len(outcome.failed),
        )
        return SlackResponse.ephemeral(outcome.summary_text())

    async def _send_invites(
        self, caller_id: str, room_url: str, user_ids: List[str]
    ) -> InviteOutcome:
        caller_name = await asyncio.to_thread(
            get_display_name, self._client, caller_id
        )
        notification = Notification(
            text=messages.invite_text(caller_name, room_url),
            blocks=messages.invite_blocks(caller_name, room_url),
            recipients=[Recipient(slack_user_id=user_id) for user_id in user_ids],
            metadata={"caller_id": caller_id},
        )
        results = await self._channel.send(notification)
        return InviteOutcome.from_results(results)
