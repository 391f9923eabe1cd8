"""Slack gateway dispatcher.

``SlackGateway.handle`` turns an ``InboundRequest`` into the immediate HTTP
answer plus the background work to run after that answer is sent. It never
touches the mapping store or the Slack Web API itself, so the
acknowledgement always fits in Slack's three second timeout.
"""

from dataclasses import dataclass, field
from functools import partial
from typing import Any, Awaitable, Callable, Dict, List

from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.security import SlackRequestVerifier
from integrations.slack.commands import parse_command_body
from integrations.slack.responses import SlackResponse
from modules.doxy import messages
from modules.doxy.commands import DoxyCommands
from modules.gateway.classifier import (
    InboundKind,
    InboundRequest,
    classify_request,
    parse_json_body,
)
from modules.gateway.lifecycle import log_lifecycle_event

logger = get_module_logger()

BackgroundTask = Callable[[], Awaitable[None]]
Responder = Callable[[str, Dict[str, Any]], Awaitable[bool]]

INVALID_SIGNATURE_BODY = {"error": "Invalid signature"}
ACKNOWLEDGED_BODY = {"ok": True}
WORKING_BODY = {"response_type": "ephemeral", "text": "⏳ Working..."}


@dataclass
class GatewayResult:
    """Immediate answer to a delivery plus the work deferred past it."""

    status_code: int
    body: Dict[str, Any]
    tasks: List[BackgroundTask] = field(default_factory=list)

    async def run_tasks(self) -> None:
        for task in self.tasks:
            await task()


class SlackGateway:
    """Routes authenticated Slack deliveries.

    Args:
        verifier: Checks the Slack request signature.
        commands: Slash command handlers.
        responder: Posts a payload to a command's ``response_url``.
        app_name: Reported by the liveness answer.
    """

    def __init__(
        self,
        verifier: SlackRequestVerifier,
        commands: DoxyCommands,
        responder: Responder,
        app_name: str,
    ):
        self._verifier = verifier
        self._commands = commands
        self._responder = responder
        self._app_name = app_name

    def handle(self, request: InboundRequest) -> GatewayResult:
        kind = classify_request(request.method, request.content_type, request.body)

        if kind is InboundKind.HEALTH_CHECK:
            return GatewayResult(200, {"ok": True, "app": self._app_name})

        if kind is InboundKind.URL_VERIFICATION:
            payload = parse_json_body(request.body) or {}
            logger.info("url_verification_received")
            return GatewayResult(200, {"challenge": payload.get("challenge")})

        if not self._verifier.is_valid_request(request.body, request.headers):
            logger.warning("request_unauthorized", kind=kind.value)
            return GatewayResult(401, INVALID_SIGNATURE_BODY)

        if kind is InboundKind.EVENT_CALLBACK:
            envelope = parse_json_body(request.body) or {}
            return GatewayResult(
                200, ACKNOWLEDGED_BODY, [partial(self._process_event, envelope)]
            )

        if kind is InboundKind.SLASH_COMMAND:
            command = parse_command_body(request.body)
            if self._commands.handles(command.get("command", "")):
                logger.info("command_acknowledged", command=command.get("command"))
                return GatewayResult(
                    200, WORKING_BODY, [partial(self._process_command, command)]
                )
            logger.info("command_ignored", command=command.get("command"))

        return GatewayResult(200, ACKNOWLEDGED_BODY)

    async def _process_event(self, envelope: Dict[str, Any]) -> None:
        with bind_request_context(
            correlation_id=envelope.get("event_id"), event_type="event_callback"
        ):
            try:
                log_lifecycle_event(envelope)
            except Exception as e:
                logger.exception("event_processing_failed", error=str(e))

    async def _process_command(self, command: Dict[str, str]) -> None:
        with bind_request_context(
            correlation_id=command.get("trigger_id"),
            user_id=command.get("user_id"),
            command=command.get("command"),
        ):
            try:
                response = await self._commands.handle(command)
            except Exception as e:
                logger.exception("command_processing_failed", error=str(e))
                response = SlackResponse.ephemeral(messages.GENERIC_ERROR_TEXT)

            response_url = command.get("response_url")
            if not response_url:
                logger.warning("response_url_missing")
                return

            try:
                await self._responder(response_url, response.to_payload())
            except Exception as e:
                logger.error("deferred_delivery_failed", error=str(e))
